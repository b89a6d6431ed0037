from __future__ import annotations

from typing import List, Optional

from .common import LenientRecord


class Profile(LenientRecord):
    """Stored fitness profile, owned by the profile subsystem.

    Values are kept as free strings so that a profile written by a newer
    client still loads; vocabulary is checked when mapping.
    """

    fitness_level: Optional[str] = None
    goals: Optional[List[str]] = None
    custom_goal: Optional[str] = None
    available_equipment: Optional[List[str]] = None
    custom_equipment: Optional[str] = None
    preferred_location: Optional[str] = None
    limitations: Optional[List[str]] = None
    limitation_notes: Optional[str] = None
    medical_conditions: Optional[str] = None
    preferred_workout_duration: Optional[int] = None
    workout_frequency: Optional[str] = None
    custom_frequency: Optional[str] = None
    favorite_exercises: Optional[List[str]] = None
    disliked_exercises: Optional[List[str]] = None
    age: Optional[int] = None
    profile_complete: Optional[bool] = None
