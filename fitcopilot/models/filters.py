from __future__ import annotations

from datetime import datetime, timezone
from typing import FrozenSet, Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


SortBy = Literal["date", "title", "duration", "difficulty"]
SortOrder = Literal["asc", "desc"]
CompletionFilter = Literal["all", "completed", "pending"]

SORT_KEYS = ("date", "title", "duration", "difficulty")
SORT_ORDERS = ("asc", "desc")

_FILTER_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "extra": "forbid",
    "frozen": True,
}


def as_utc(value: datetime) -> datetime:
    # Naive timestamps from the REST layer are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class DurationRange(BaseModel):
    model_config = _FILTER_CONFIG

    min: float = Field(0, ge=0)
    max: Optional[float] = Field(None, ge=0, description="None means no upper bound")

    @model_validator(mode="after")
    def _check_bounds(self) -> "DurationRange":
        if self.max is not None and self.min > self.max:
            raise ValueError(f"duration min ({self.min}) is greater than max ({self.max})")
        return self

    @property
    def is_unbounded(self) -> bool:
        return self.min <= 0 and self.max is None

    def contains(self, minutes: float) -> bool:
        if minutes < self.min:
            return False
        return self.max is None or minutes <= self.max


class DateRange(BaseModel):
    model_config = _FILTER_CONFIG

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "DateRange":
        if self.start is not None and self.end is not None and as_utc(self.start) > as_utc(self.end):
            raise ValueError("createdDate start is after end")
        return self

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, moment: datetime) -> bool:
        moment = as_utc(moment)
        if self.start is not None and moment < as_utc(self.start):
            return False
        if self.end is not None and moment > as_utc(self.end):
            return False
        return True


class WorkoutFilters(BaseModel):
    """Active filter state of the saved-workouts view.

    The default instance constrains nothing and sorts newest first.
    """

    model_config = _FILTER_CONFIG

    difficulty: FrozenSet[str] = Field(default_factory=frozenset)
    workout_type: FrozenSet[str] = Field(default_factory=frozenset)
    equipment: FrozenSet[str] = Field(default_factory=frozenset)
    duration: DurationRange = Field(default_factory=DurationRange)
    completed: CompletionFilter = "all"
    sort_by: SortBy = "date"
    sort_order: SortOrder = "desc"
    tags: FrozenSet[str] = Field(default_factory=frozenset)
    created_date: DateRange = Field(default_factory=DateRange)
    search_query: str = ""


class FilterPatch(BaseModel):
    """Partial WorkoutFilters. A field left as None is not touched when applied."""

    model_config = _FILTER_CONFIG

    difficulty: Optional[FrozenSet[str]] = None
    workout_type: Optional[FrozenSet[str]] = None
    equipment: Optional[FrozenSet[str]] = None
    duration: Optional[DurationRange] = None
    completed: Optional[CompletionFilter] = None
    sort_by: Optional[SortBy] = None
    sort_order: Optional[SortOrder] = None
    tags: Optional[FrozenSet[str]] = None
    created_date: Optional[DateRange] = None
    search_query: Optional[str] = None


class FilterPreset(BaseModel):
    model_config = _FILTER_CONFIG

    id: str = Field(..., min_length=1)
    name: str
    filters: FilterPatch = Field(default_factory=FilterPatch)
    is_default: bool = False
