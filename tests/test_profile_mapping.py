from __future__ import annotations

from fitcopilot.models import UNSPECIFIED, Profile, is_specified
from fitcopilot.services.profile_mapping import (
    EQUIPMENT_LABELS,
    EQUIPMENT_MAP,
    FREQUENCY_DURATIONS,
    GOAL_LABELS,
    GOAL_MAP,
    display_label,
    frequency_guidance,
    is_profile_sufficient_for_workout,
    map_profile_to_workout_context,
    profile_completeness_percentage,
    suggested_duration_for,
)


def test_absent_profile() -> None:
    assert map_profile_to_workout_context(None) is None
    assert is_profile_sufficient_for_workout(None) is False
    assert profile_completeness_percentage(None) == 0


def test_full_profile_mapping(full_profile) -> None:
    ctx = map_profile_to_workout_context(full_profile)

    assert ctx is not None
    assert ctx.fitness_level == "intermediate"
    assert ctx.goals == ("build-muscle", "improve-endurance")
    assert ctx.primary_goal == "build-muscle"
    assert ctx.default_equipment == ("dumbbells", "resistance-bands")
    assert ctx.restrictions == ("knee",)
    assert ctx.preferred_location == "home"
    assert ctx.workout_frequency == "3-4"
    assert ctx.suggested_duration == "30-45 minutes"
    assert ctx.default_intensity == 3
    assert ctx.exercise_complexity == "moderate"
    assert ctx.unspecified_fields() == ()


def test_empty_profile_is_all_unspecified() -> None:
    ctx = map_profile_to_workout_context({})

    assert ctx is not None
    assert all(value is UNSPECIFIED for value in ctx.__dict__.values())
    assert "fitness_level" in ctx.unspecified_fields()


def test_said_none_differs_from_said_nothing() -> None:
    ctx = map_profile_to_workout_context(Profile(goals=[], limitations=["none"]))

    assert ctx.goals == ()
    assert is_specified(ctx.goals)
    assert ctx.restrictions == ()
    assert ctx.default_equipment is UNSPECIFIED
    assert ctx.primary_goal is UNSPECIFIED


def test_vocabulary_fallbacks() -> None:
    ctx = map_profile_to_workout_context(
        {
            "fitnessLevel": "elite",
            "goals": ["rehabilitation", "general_fitness", "weight_loss"],
            "availableEquipment": ["other", "none", "kettlebell", "pull_up_bar"],
            "workoutFrequency": "twice a fortnight",
        }
    )

    assert ctx.fitness_level is UNSPECIFIED
    assert ctx.default_intensity is UNSPECIFIED
    assert ctx.goals == ("general-fitness", "lose-weight")
    assert ctx.default_equipment == ("none", "kettlebells", "pull-up-bar")
    assert ctx.workout_frequency is UNSPECIFIED
    assert ctx.suggested_duration is UNSPECIFIED


def test_bad_field_types_degrade_to_unspecified() -> None:
    ctx = map_profile_to_workout_context({"fitnessLevel": "advanced", "goals": "strength", "age": "old"})

    assert ctx.fitness_level == "advanced"
    assert ctx.exercise_complexity == "advanced"
    assert ctx.goals is UNSPECIFIED


def test_mapping_is_repeatable(full_profile) -> None:
    assert map_profile_to_workout_context(full_profile) == map_profile_to_workout_context(full_profile)


def test_sufficiency(full_profile) -> None:
    assert is_profile_sufficient_for_workout(full_profile)
    assert not is_profile_sufficient_for_workout({**full_profile, "goals": []})
    assert not is_profile_sufficient_for_workout({**full_profile, "fitnessLevel": None})
    assert not is_profile_sufficient_for_workout({**full_profile, "availableEquipment": []})


def test_maps_but_insufficient() -> None:
    profile = {"fitnessLevel": "beginner", "preferredLocation": "gym"}
    assert map_profile_to_workout_context(profile) is not None
    assert not is_profile_sufficient_for_workout(profile)


def test_completeness_percentage(full_profile) -> None:
    assert profile_completeness_percentage(full_profile) == 100
    assert profile_completeness_percentage({"fitnessLevel": "beginner", "goals": ["strength"]}) == 40


def test_suggested_duration() -> None:
    assert suggested_duration_for("1-2") == "45-60 minutes"
    assert suggested_duration_for("daily") == "15-30 minutes"
    assert suggested_duration_for(None) is UNSPECIFIED


def test_frequency_guidance() -> None:
    guidance = frequency_guidance("3-4")
    assert guidance.label == "3-4 times/week"
    assert guidance.suggested_duration == "30-45 minutes"
    assert guidance.explanation == "Balanced duration for regular training"
    assert frequency_guidance("daily").label == "Daily"
    assert frequency_guidance("fortnightly") is UNSPECIFIED
    assert frequency_guidance(None) is UNSPECIFIED
    assert FREQUENCY_DURATIONS["custom"] == "30 minutes"


def test_display_labels() -> None:
    assert set(GOAL_LABELS) == set(GOAL_MAP)
    assert set(EQUIPMENT_MAP) - {"kettlebell"} <= set(EQUIPMENT_LABELS)
    assert display_label("muscle_building", GOAL_LABELS) == "Build Muscle"
    assert display_label("trx", EQUIPMENT_LABELS) == "TRX/Suspension"
    assert display_label("ab_wheel", EQUIPMENT_LABELS) == "Ab wheel"
