from __future__ import annotations

from datetime import datetime
from typing import FrozenSet, Optional, Union

from pydantic import AliasChoices, Field

from .common import LenientRecord


DIFFICULTY_RANK = {"beginner": 1, "intermediate": 2, "advanced": 3}


class Workout(LenientRecord):
    """A saved workout as returned by the persistence layer. Read-only here."""

    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    difficulty: Optional[str] = None
    workout_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("workoutType", "workout_type", "type")
    )
    equipment: Optional[FrozenSet[str]] = None
    duration: Optional[float] = Field(None, allow_inf_nan=False, description="minutes")
    is_completed: Optional[bool] = None
    tags: Optional[FrozenSet[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    is_favorite: Optional[bool] = None
    rating: Optional[float] = Field(None, allow_inf_nan=False)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 42,
                    "title": "Lunchtime HIIT",
                    "difficulty": "intermediate",
                    "workoutType": "HIIT",
                    "equipment": ["dumbbells", "none"],
                    "duration": 25,
                    "isCompleted": False,
                    "tags": ["favorite", "quick"],
                    "createdAt": "2025-03-02T12:15:00Z",
                }
            ]
        }
    }
