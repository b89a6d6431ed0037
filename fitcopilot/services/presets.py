from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TypeVar, Union

from pydantic import ValidationError

from fitcopilot.config import get_settings
from fitcopilot.models.filters import DurationRange, FilterPatch, FilterPreset, WorkoutFilters

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUICK_WORKOUT_MAX_MINUTES = 30


class PresetConfigError(ValueError):
    pass


def _builtin_presets() -> List[FilterPreset]:
    return [
        FilterPreset(id="all", name="All Workouts", filters=FilterPatch(), is_default=True),
        FilterPreset(
            id="recent",
            name="Recent Workouts",
            filters=FilterPatch(sort_by="date", sort_order="desc"),
            is_default=True,
        ),
        FilterPreset(
            id="quick-workouts",
            name="Quick Workouts",
            filters=FilterPatch(
                duration=DurationRange(min=0, max=QUICK_WORKOUT_MAX_MINUTES),
                sort_by="duration",
                sort_order="asc",
            ),
            is_default=True,
        ),
        FilterPreset(
            id="completed",
            name="Completed",
            filters=FilterPatch(completed="completed", sort_by="date", sort_order="desc"),
            is_default=True,
        ),
        FilterPreset(
            id="favorites",
            name="My Favorites",
            filters=FilterPatch(tags=frozenset({"favorite"})),
            is_default=True,
        ),
    ]


def _coalesce(patched: Optional[T], current: T) -> T:
    return current if patched is None else patched


def apply_preset(active: WorkoutFilters, preset: Union[FilterPreset, FilterPatch]) -> WorkoutFilters:
    """Overlay the fields the preset sets onto the active filters.

    Fields the preset leaves unset keep their active value, so the empty
    "all" preset leaves the current filters as they are.
    """
    patch = preset.filters if isinstance(preset, FilterPreset) else preset
    return WorkoutFilters(
        difficulty=_coalesce(patch.difficulty, active.difficulty),
        workout_type=_coalesce(patch.workout_type, active.workout_type),
        equipment=_coalesce(patch.equipment, active.equipment),
        duration=_coalesce(patch.duration, active.duration),
        completed=_coalesce(patch.completed, active.completed),
        sort_by=_coalesce(patch.sort_by, active.sort_by),
        sort_order=_coalesce(patch.sort_order, active.sort_order),
        tags=_coalesce(patch.tags, active.tags),
        created_date=_coalesce(patch.created_date, active.created_date),
        search_query=_coalesce(patch.search_query, active.search_query),
    )


class PresetCatalog:
    """Ordered preset registry: built-ins first, then custom presets as registered."""

    def __init__(self, presets: Iterable[FilterPreset] = ()) -> None:
        self._presets: Dict[str, FilterPreset] = {}
        for preset in presets:
            self.register(preset)

    def register(self, preset: FilterPreset) -> FilterPreset:
        if preset.id in self._presets:
            raise PresetConfigError(f"Duplicate preset id: {preset.id!r}")
        self._presets[preset.id] = preset
        return preset

    def get(self, preset_id: str) -> FilterPreset:
        try:
            return self._presets[preset_id]
        except KeyError:
            raise KeyError(f"Unknown preset id: {preset_id!r}") from None

    def apply(self, active: WorkoutFilters, preset_id: str) -> WorkoutFilters:
        return apply_preset(active, self.get(preset_id))

    @property
    def ids(self) -> List[str]:
        return list(self._presets)

    def __iter__(self) -> Iterator[FilterPreset]:
        return iter(list(self._presets.values()))

    def __len__(self) -> int:
        return len(self._presets)

    def __contains__(self, preset_id: object) -> bool:
        return preset_id in self._presets


def load_custom_presets(path: Union[str, Path]) -> List[FilterPreset]:
    """Read a JSON array of presets in the shape the UI stores them."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise PresetConfigError(f"Cannot read presets from {path}: {e}") from e
    if not isinstance(raw, list):
        raise PresetConfigError(f"{path} must contain a JSON array of presets")
    try:
        return [FilterPreset.model_validate(item) for item in raw]
    except ValidationError as e:
        raise PresetConfigError(f"Invalid preset in {path}: {e}") from e


def build_preset_catalog(custom: Iterable[FilterPreset] | None = None) -> PresetCatalog:
    catalog = PresetCatalog(_builtin_presets())
    settings = get_settings()
    if settings.CUSTOM_PRESETS_FILE:
        for preset in load_custom_presets(settings.CUSTOM_PRESETS_FILE):
            catalog.register(preset)
        logger.info("Loaded custom presets from %s", settings.CUSTOM_PRESETS_FILE)
    for preset in custom or ():
        catalog.register(preset)
    return catalog


DEFAULT_PRESETS: List[FilterPreset] = _builtin_presets()
