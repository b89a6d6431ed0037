from .filtering import (
    FilterOptions,
    active_filter_count,
    clear_filters,
    default_filters,
    filter_and_sort,
    filter_options,
    has_active_filters,
    matches,
    sort_workouts,
)
from .library import load_workouts
from .presets import (
    DEFAULT_PRESETS,
    PresetCatalog,
    PresetConfigError,
    apply_preset,
    build_preset_catalog,
    load_custom_presets,
)
from .profile_mapping import (
    FrequencyGuidance,
    display_label,
    frequency_guidance,
    is_profile_sufficient_for_workout,
    map_profile_to_workout_context,
    profile_completeness_percentage,
    suggested_duration_for,
)
from .readiness import (
    REQUIRED_FIELDS,
    SESSION_FIELDS,
    get_completion_status,
    is_ready_to_generate,
    missing_required_fields,
    readiness_state,
)

__all__ = [
    "FilterOptions",
    "active_filter_count",
    "clear_filters",
    "default_filters",
    "filter_and_sort",
    "filter_options",
    "has_active_filters",
    "matches",
    "sort_workouts",
    "load_workouts",
    "DEFAULT_PRESETS",
    "PresetCatalog",
    "PresetConfigError",
    "apply_preset",
    "build_preset_catalog",
    "load_custom_presets",
    "FrequencyGuidance",
    "display_label",
    "frequency_guidance",
    "is_profile_sufficient_for_workout",
    "map_profile_to_workout_context",
    "profile_completeness_percentage",
    "suggested_duration_for",
    "REQUIRED_FIELDS",
    "SESSION_FIELDS",
    "get_completion_status",
    "is_ready_to_generate",
    "missing_required_fields",
    "readiness_state",
]
