from .context import (
    UNSPECIFIED,
    CompletionStatus,
    ReadinessState,
    Unspecified,
    WorkoutGenerationContext,
    is_specified,
)
from .filters import DateRange, DurationRange, FilterPatch, FilterPreset, WorkoutFilters
from .profile import Profile
from .session import SessionInputs
from .workout import Workout

__all__ = [
    "UNSPECIFIED",
    "CompletionStatus",
    "ReadinessState",
    "Unspecified",
    "WorkoutGenerationContext",
    "is_specified",
    "DateRange",
    "DurationRange",
    "FilterPatch",
    "FilterPreset",
    "WorkoutFilters",
    "Profile",
    "SessionInputs",
    "Workout",
]
