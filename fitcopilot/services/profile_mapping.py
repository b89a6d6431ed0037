from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from fitcopilot.models.context import UNSPECIFIED, Maybe, WorkoutGenerationContext
from fitcopilot.models.profile import Profile

logger = logging.getLogger(__name__)

ProfileLike = Union[Profile, Mapping[str, Any]]

FITNESS_LEVELS = ("beginner", "intermediate", "advanced")

GOAL_MAP: Dict[str, str] = {
    "weight_loss": "lose-weight",
    "muscle_building": "build-muscle",
    "endurance": "improve-endurance",
    "strength": "increase-strength",
    "flexibility": "enhance-flexibility",
    "general_fitness": "general-fitness",
    "sport_specific": "sport-specific",
    "rehabilitation": "general-fitness",
    "custom": "general-fitness",
}
FALLBACK_GOAL = "general-fitness"

EQUIPMENT_MAP: Dict[str, str] = {
    "dumbbells": "dumbbells",
    "kettlebells": "kettlebells",
    "kettlebell": "kettlebells",
    "resistance_bands": "resistance-bands",
    "pull_up_bar": "pull-up-bar",
    "yoga_mat": "yoga-mat",
    "bench": "bench",
    "barbell": "barbell",
    "trx": "trx",
    "medicine_ball": "medicine-ball",
    "jump_rope": "jump-rope",
    "stability_ball": "stability-ball",
    "none": "none",
}
FALLBACK_EQUIPMENT = "none"


@dataclass(frozen=True)
class FrequencyGuidance:
    label: str
    suggested_duration: str
    explanation: str


FREQUENCY_GUIDANCE: Dict[str, FrequencyGuidance] = {
    "1-2": FrequencyGuidance("1-2 times/week", "45-60 minutes", "Longer sessions for less frequent workouts"),
    "3-4": FrequencyGuidance("3-4 times/week", "30-45 minutes", "Balanced duration for regular training"),
    "5+": FrequencyGuidance("5+ times/week", "15-30 minutes", "Shorter sessions for frequent training"),
    "daily": FrequencyGuidance("Daily", "15-30 minutes", "Short daily sessions for consistency"),
    "custom": FrequencyGuidance("Custom schedule", "30 minutes", "Standard duration recommendation"),
}
FREQUENCY_DURATIONS: Dict[str, str] = {k: g.suggested_duration for k, g in FREQUENCY_GUIDANCE.items()}

# Display labels for the stored (underscore) profile vocabulary
FITNESS_LEVEL_LABELS = {"beginner": "Beginner", "intermediate": "Intermediate", "advanced": "Advanced"}
GOAL_LABELS = {
    "weight_loss": "Weight Loss",
    "muscle_building": "Build Muscle",
    "endurance": "Improve Endurance",
    "strength": "Increase Strength",
    "flexibility": "Enhance Flexibility",
    "general_fitness": "General Fitness",
    "sport_specific": "Sport-Specific",
    "rehabilitation": "Rehabilitation",
    "custom": "Custom Goal",
}
EQUIPMENT_LABELS = {
    "dumbbells": "Dumbbells",
    "kettlebells": "Kettlebells",
    "resistance_bands": "Resistance Bands",
    "pull_up_bar": "Pull-up Bar",
    "yoga_mat": "Yoga Mat",
    "bench": "Bench",
    "barbell": "Barbell",
    "trx": "TRX/Suspension",
    "medicine_ball": "Medicine Ball",
    "jump_rope": "Jump Rope",
    "stability_ball": "Stability Ball",
    "none": "No Equipment",
    "other": "Other Equipment",
}
LOCATION_LABELS = {
    "home": "Home Workouts",
    "gym": "Gym Training",
    "outdoors": "Outdoor Activities",
    "anywhere": "Flexible Location",
    "travel": "Travel Workouts",
}

DEFAULT_INTENSITY = {"beginner": 2, "intermediate": 3, "advanced": 4}
EXERCISE_COMPLEXITY = {"beginner": "basic", "intermediate": "moderate", "advanced": "advanced"}


def as_profile(profile: ProfileLike) -> Profile:
    if isinstance(profile, Profile):
        return profile
    return Profile.model_validate(profile)


def _dedupe(values: Sequence[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def map_fitness_level(level: Optional[str]) -> Maybe[str]:
    if level in FITNESS_LEVELS:
        return level
    if level is not None:
        logger.debug("Unrecognised fitness level %r", level)
    return UNSPECIFIED


def map_goals(goals: Optional[List[str]]) -> Maybe[Tuple[str, ...]]:
    if goals is None:
        return UNSPECIFIED
    return _dedupe([GOAL_MAP.get(g, FALLBACK_GOAL) for g in goals])


def map_equipment(equipment: Optional[List[str]]) -> Maybe[Tuple[str, ...]]:
    if equipment is None:
        return UNSPECIFIED
    return _dedupe([EQUIPMENT_MAP.get(e, FALLBACK_EQUIPMENT) for e in equipment])


def map_restrictions(limitations: Optional[List[str]]) -> Maybe[Tuple[str, ...]]:
    if limitations is None:
        return UNSPECIFIED
    return _dedupe([item for item in limitations if item and item != "none"])


def frequency_guidance(frequency: Optional[str]) -> Maybe[FrequencyGuidance]:
    if frequency is None:
        return UNSPECIFIED
    return FREQUENCY_GUIDANCE.get(frequency, UNSPECIFIED)


def suggested_duration_for(frequency: Optional[str]) -> Maybe[str]:
    guidance = frequency_guidance(frequency)
    return guidance.suggested_duration if guidance else UNSPECIFIED


def display_label(value: str, labels: Mapping[str, str]) -> str:
    """Label for a stored vocabulary value; unknown values are prettified as-is."""
    if value in labels:
        return labels[value]
    return value.replace("_", " ").replace("-", " ").capitalize()


def map_profile_to_workout_context(profile: Optional[ProfileLike]) -> Optional[WorkoutGenerationContext]:
    """Project a stored profile into the generator's vocabulary.

    Returns None only when no profile is loaded yet. Fields the user never
    filled in come back as UNSPECIFIED rather than a guessed default.
    """
    if profile is None:
        return None
    p = as_profile(profile)

    level = map_fitness_level(p.fitness_level)
    goals = map_goals(p.goals)
    frequency = p.workout_frequency if p.workout_frequency in FREQUENCY_DURATIONS else UNSPECIFIED
    return WorkoutGenerationContext(
        fitness_level=level,
        goals=goals,
        primary_goal=goals[0] if goals else UNSPECIFIED,
        default_equipment=map_equipment(p.available_equipment),
        restrictions=map_restrictions(p.limitations),
        preferred_location=p.preferred_location or UNSPECIFIED,
        workout_frequency=frequency,
        suggested_duration=suggested_duration_for(p.workout_frequency),
        default_intensity=DEFAULT_INTENSITY.get(level, UNSPECIFIED),
        exercise_complexity=EXERCISE_COMPLEXITY.get(level, UNSPECIFIED),
    )


def is_profile_sufficient_for_workout(profile: Optional[ProfileLike]) -> bool:
    """Minimum a profile needs before a generation request is safe to send."""
    if profile is None:
        return False
    p = as_profile(profile)
    return bool(
        map_fitness_level(p.fitness_level)
        and p.goals
        and p.available_equipment
    )


def profile_completeness_percentage(profile: Optional[ProfileLike]) -> int:
    if profile is None:
        return 0
    p = as_profile(profile)
    fields = [
        p.fitness_level,
        p.goals,
        p.workout_frequency,
        p.available_equipment,
        p.preferred_location,
    ]
    completed = sum(1 for value in fields if value)
    return round(completed / len(fields) * 100)
