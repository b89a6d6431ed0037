from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from fitcopilot.models.context import CompletionStatus, ReadinessState
from fitcopilot.models.session import SessionInputs

SessionLike = Union[SessionInputs, Mapping[str, Any], None]


def _scalar_present(value: Any) -> bool:
    return value is not None


def _list_present(value: Any) -> bool:
    return value is not None and len(value) > 0


# Order is the order shown by the completion indicator.
SESSION_FIELDS: Tuple[Tuple[str, Callable[[Any], bool]], ...] = (
    ("todays_focus", _scalar_present),
    ("daily_intensity_level", _scalar_present),
    ("time_constraints_today", _scalar_present),
    ("target_muscles", _list_present),
    ("equipment_available_today", _list_present),
    ("health_restrictions_today", _list_present),
    ("location_today", _scalar_present),
    ("energy_level", _scalar_present),
)

REQUIRED_FIELDS: Tuple[str, ...] = (
    "todays_focus",
    "daily_intensity_level",
    "time_constraints_today",
    "location_today",
)

_PREDICATES = dict(SESSION_FIELDS)


def as_session_inputs(inputs: SessionLike) -> SessionInputs:
    if inputs is None:
        return SessionInputs()
    if isinstance(inputs, SessionInputs):
        return inputs
    return SessionInputs.model_validate(inputs)


def _is_populated(inputs: SessionInputs, field_name: str) -> bool:
    return _PREDICATES[field_name](getattr(inputs, field_name))


def missing_required_fields(inputs: SessionLike) -> List[str]:
    s = as_session_inputs(inputs)
    return [name for name in REQUIRED_FIELDS if not _is_populated(s, name)]


def is_ready_to_generate(inputs: SessionLike) -> bool:
    """Gate for the generate button: every required field is filled in."""
    return not missing_required_fields(inputs)


def get_completion_status(inputs: SessionLike) -> CompletionStatus:
    """Progress indicator over all eight session fields. Not a gate."""
    s = as_session_inputs(inputs)
    completed = sum(1 for name, present in SESSION_FIELDS if present(getattr(s, name)))
    return CompletionStatus(completed=completed, total=len(SESSION_FIELDS))


def readiness_state(inputs: SessionLike, generating: bool = False) -> ReadinessState:
    # Generating is driven by the caller while a request is in flight
    if generating:
        return ReadinessState.GENERATING
    return ReadinessState.READY if is_ready_to_generate(inputs) else ReadinessState.INCOMPLETE
