from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from .common import LenientRecord


TodaysFocus = Literal[
    "fat-burning",
    "muscle-building",
    "endurance",
    "strength",
    "flexibility",
    "general-fitness",
]

SessionLocation = Literal["home", "gym", "outdoors", "travel", "limited-space"]


class SessionInputs(LenientRecord):
    """In-progress generator form state for one generation attempt."""

    todays_focus: Optional[TodaysFocus] = None
    daily_intensity_level: Optional[int] = Field(None, ge=1, le=6)
    time_constraints_today: Optional[int] = Field(None, ge=1, description="minutes")
    target_muscles: Optional[List[str]] = None
    equipment_available_today: Optional[List[str]] = None
    health_restrictions_today: Optional[List[str]] = None
    location_today: Optional[SessionLocation] = None
    energy_level: Optional[int] = Field(None, ge=1, le=5)

    # Free-form extras, not counted towards completion
    workout_customization: Optional[str] = None
    current_soreness: Optional[List[str]] = None
    sleep_quality: Optional[int] = Field(None, ge=1, le=5)
    mood_level: Optional[int] = Field(None, ge=1, le=5)
