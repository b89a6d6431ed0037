from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence, Tuple, Union

from fitcopilot.config import get_settings
from fitcopilot.models.filters import SORT_KEYS, SORT_ORDERS, WorkoutFilters, as_utc
from fitcopilot.models.workout import DIFFICULTY_RANK, Workout

logger = logging.getLogger(__name__)

WorkoutLike = Union[Workout, Mapping[str, Any]]


def as_workout(record: WorkoutLike) -> Workout:
    if isinstance(record, Workout):
        return record
    return Workout.model_validate(record)


# --- Per-field predicates. Each returns False when the field it inspects is missing.

def _passes_membership(value: str | None, allowed: frozenset) -> bool:
    if not allowed:
        return True
    return value is not None and value in allowed


def _passes_equipment(workout: Workout, wanted: frozenset) -> bool:
    if not wanted:
        return True
    return workout.equipment is not None and not workout.equipment.isdisjoint(wanted)


def _passes_tags(workout: Workout, required: frozenset) -> bool:
    if not required:
        return True
    return workout.tags is not None and required <= workout.tags


def _passes_duration(workout: Workout, filters: WorkoutFilters) -> bool:
    if filters.duration.is_unbounded:
        return True
    return workout.duration is not None and filters.duration.contains(workout.duration)


def _passes_completion(workout: Workout, status: str) -> bool:
    if status == "all":
        return True
    if workout.is_completed is None:
        return False
    return workout.is_completed if status == "completed" else not workout.is_completed


def _passes_created_date(workout: Workout, filters: WorkoutFilters) -> bool:
    if filters.created_date.is_unbounded:
        return True
    return workout.created_at is not None and filters.created_date.contains(workout.created_at)


def _passes_search(workout: Workout, query: str) -> bool:
    needle = query.strip().casefold()
    if not needle:
        return True
    haystacks = [text for text in (workout.title, workout.notes) if text]
    return any(needle in text.casefold() for text in haystacks)


def matches(workout: WorkoutLike, filters: WorkoutFilters) -> bool:
    """True when the workout satisfies every active constraint in filters."""
    w = as_workout(workout)
    return (
        _passes_search(w, filters.search_query)
        and _passes_membership(w.difficulty, filters.difficulty)
        and _passes_membership(w.workout_type, filters.workout_type)
        and _passes_equipment(w, filters.equipment)
        and _passes_duration(w, filters)
        and _passes_completion(w, filters.completed)
        and _passes_tags(w, filters.tags)
        and _passes_created_date(w, filters)
    )


# --- Sorting

def _id_key(workout: Workout) -> Tuple[int, Any]:
    wid = workout.id
    if isinstance(wid, int):
        return (0, wid)
    if wid is None:
        return (2, "")
    return (1, str(wid))


def _sort_value(workout: Workout, sort_by: str) -> Any:
    if sort_by == "date":
        return as_utc(workout.created_at) if workout.created_at is not None else None
    if sort_by == "title":
        return workout.title.casefold() if workout.title is not None else None
    if sort_by == "duration":
        # non-finite durations sort with the missing ones
        if workout.duration is None or not math.isfinite(workout.duration):
            return None
        return workout.duration
    # difficulty; an unrecognised level sorts with the missing ones
    return DIFFICULTY_RANK.get(workout.difficulty or "")


def sort_workouts(workouts: Iterable[WorkoutLike], sort_by: str, sort_order: str) -> List[Workout]:
    """Order workouts by sort_by, ties broken by id.

    desc reverses the whole comparator. Records without a value for the key
    rank after the keyed ones in asc, so desc puts them first.
    """
    if sort_by not in SORT_KEYS:
        raise ValueError(f"Unknown sort field: {sort_by!r}")
    if sort_order not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order: {sort_order!r}")

    def rank(w: Workout) -> Tuple[Any, ...]:
        value = _sort_value(w, sort_by)
        if value is None:
            return (1, _id_key(w))
        return (0, value, _id_key(w))

    records = [as_workout(record) for record in workouts]
    return sorted(records, key=rank, reverse=(sort_order == "desc"))


def filter_and_sort(workouts: Iterable[WorkoutLike], filters: WorkoutFilters) -> List[Workout]:
    records = [as_workout(w) for w in workouts]
    kept = [w for w in records if matches(w, filters)]
    logger.debug("Filtered %d of %d workouts (sort=%s %s)", len(kept), len(records), filters.sort_by, filters.sort_order)
    return sort_workouts(kept, filters.sort_by, filters.sort_order)


# --- Filter state helpers used by the saved-workouts view

def default_filters() -> WorkoutFilters:
    return WorkoutFilters()


def active_filter_count(filters: WorkoutFilters) -> int:
    """Number of active constraint groups; sorting is not a constraint."""
    checks = [
        bool(filters.difficulty),
        bool(filters.workout_type),
        bool(filters.equipment),
        bool(filters.tags),
        not filters.duration.is_unbounded,
        filters.completed != "all",
        not filters.created_date.is_unbounded,
        bool(filters.search_query.strip()),
    ]
    return sum(checks)


def has_active_filters(filters: WorkoutFilters) -> bool:
    return active_filter_count(filters) > 0


def clear_filters(filters: WorkoutFilters) -> WorkoutFilters:
    """Drop every constraint but keep the current sorting."""
    return WorkoutFilters(sort_by=filters.sort_by, sort_order=filters.sort_order)


@dataclass(frozen=True)
class FilterOptions:
    workout_types: Tuple[str, ...]
    equipment: Tuple[str, ...]
    tags: Tuple[str, ...]
    max_duration: int


def filter_options(workouts: Sequence[WorkoutLike]) -> FilterOptions:
    """Choices offered by the filter panel, derived from the loaded workouts."""
    settings = get_settings()
    records = [as_workout(w) for w in workouts]
    types = {w.workout_type for w in records if w.workout_type}
    equipment = {eq for w in records for eq in (w.equipment or ()) if eq}
    tags = {tag for w in records for tag in (w.tags or ()) if tag}
    longest = max([w.duration for w in records if w.duration is not None] + [settings.DURATION_SLIDER_MAX])
    return FilterOptions(
        workout_types=tuple(sorted(types)),
        equipment=tuple(sorted(equipment)),
        tags=tuple(sorted(tags)),
        max_duration=int(math.ceil(longest / 15) * 15),
    )
