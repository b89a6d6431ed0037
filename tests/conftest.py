"""Shared fixtures: saved workouts, profiles and generator form states."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List

import pytest

from fitcopilot.models import Workout


@pytest.fixture
def make_workout() -> Callable[..., Workout]:
    def _make(**fields) -> Workout:
        return Workout.model_validate(fields)

    return _make


@pytest.fixture
def workouts() -> List[Workout]:
    return [
        Workout(
            id=1,
            title="Morning Mobility",
            difficulty="beginner",
            workout_type="Flexibility",
            equipment=frozenset({"yoga_mat"}),
            duration=15,
            is_completed=True,
            tags=frozenset({"morning", "favorite"}),
            created_at=datetime(2025, 3, 3, 21, 10, tzinfo=timezone.utc),
        ),
        Workout(
            id=2,
            title="dumbbell upper body",
            difficulty="intermediate",
            workout_type="Strength",
            equipment=frozenset({"dumbbells", "bench"}),
            duration=45,
            is_completed=False,
            tags=frozenset({"upper-body"}),
            created_at=datetime(2025, 3, 5, 18, 2, tzinfo=timezone.utc),
            notes="Back-off set on presses",
        ),
        Workout(
            id=3,
            title="Lunchtime HIIT",
            difficulty="advanced",
            workout_type="HIIT",
            equipment=frozenset({"none"}),
            duration=20,
            is_completed=True,
            tags=frozenset({"quick", "favorite"}),
            created_at=datetime(2025, 3, 7, 11, 55, tzinfo=timezone.utc),
        ),
        Workout(
            id=4,
            title="Long Easy Cardio",
            difficulty="beginner",
            workout_type="Cardio",
            equipment=frozenset({"treadmill"}),
            duration=60,
            is_completed=False,
            tags=frozenset(),
            created_at=datetime(2025, 2, 27, 9, 0, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def full_profile() -> dict:
    return {
        "fitnessLevel": "intermediate",
        "goals": ["muscle_building", "endurance"],
        "availableEquipment": ["dumbbells", "resistance_bands"],
        "limitations": ["knee"],
        "workoutFrequency": "3-4",
        "preferredLocation": "home",
    }


@pytest.fixture
def full_session() -> dict:
    return {
        "todaysFocus": "strength",
        "dailyIntensityLevel": 4,
        "timeConstraintsToday": 30,
        "targetMuscles": ["chest", "back"],
        "equipmentAvailableToday": ["dumbbells"],
        "healthRestrictionsToday": ["knee"],
        "locationToday": "home",
        "energyLevel": 3,
    }
