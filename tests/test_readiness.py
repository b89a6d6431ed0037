from __future__ import annotations

import pytest

from fitcopilot.models import CompletionStatus, ReadinessState, SessionInputs
from fitcopilot.services.readiness import (
    REQUIRED_FIELDS,
    SESSION_FIELDS,
    get_completion_status,
    is_ready_to_generate,
    missing_required_fields,
    readiness_state,
)

REQUIRED_KEYS = ["todaysFocus", "dailyIntensityLevel", "timeConstraintsToday", "locationToday"]


def test_field_table_shape() -> None:
    assert len(SESSION_FIELDS) == 8
    assert set(REQUIRED_FIELDS) <= {name for name, _ in SESSION_FIELDS}


def test_completion_status_bounds(full_session) -> None:
    assert get_completion_status({}) == CompletionStatus(completed=0, total=8)
    assert get_completion_status(None) == CompletionStatus(completed=0, total=8)
    assert get_completion_status(full_session) == CompletionStatus(completed=8, total=8)
    assert get_completion_status(full_session).fraction == 1.0


def test_empty_lists_do_not_count(full_session) -> None:
    partial = {**full_session, "targetMuscles": [], "healthRestrictionsToday": [], "energyLevel": None}
    assert get_completion_status(partial).completed == 5


@pytest.mark.parametrize("key", REQUIRED_KEYS)
def test_not_ready_when_required_field_missing(full_session, key) -> None:
    assert not is_ready_to_generate({**full_session, key: None})
    without = {k: v for k, v in full_session.items() if k != key}
    assert not is_ready_to_generate(without)


def test_ready_without_optional_fields(full_session) -> None:
    required_only = {k: full_session[k] for k in REQUIRED_KEYS}
    assert is_ready_to_generate(required_only)
    assert get_completion_status(required_only).completed == 4


def test_invalid_values_read_as_missing(full_session) -> None:
    inputs = {**full_session, "todaysFocus": "juggling", "dailyIntensityLevel": 9}
    assert not is_ready_to_generate(inputs)
    assert missing_required_fields(inputs) == ["todays_focus", "daily_intensity_level"]


def test_accepts_model_instances() -> None:
    inputs = SessionInputs(
        todays_focus="endurance",
        daily_intensity_level=2,
        time_constraints_today=20,
        location_today="outdoors",
    )
    assert is_ready_to_generate(inputs)
    assert missing_required_fields(SessionInputs()) == list(REQUIRED_FIELDS)


def test_readiness_state(full_session) -> None:
    assert readiness_state({}) is ReadinessState.INCOMPLETE
    assert readiness_state(full_session) is ReadinessState.READY
    assert readiness_state(full_session, generating=True) is ReadinessState.GENERATING
