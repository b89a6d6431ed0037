from __future__ import annotations

# Ensure the repository root is on sys.path so that absolute imports like `fitcopilot.*` work
# when Streamlit runs this file from within the fitcopilot/ directory on cloud runtimes.
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import logging
from typing import List, Mapping, Optional

import streamlit as st

from fitcopilot.config import configure_logging, get_settings
from fitcopilot.models import UNSPECIFIED, Profile, ReadinessState, SessionInputs
from fitcopilot.services.profile_mapping import (
    EQUIPMENT_LABELS,
    EQUIPMENT_MAP,
    FITNESS_LEVEL_LABELS,
    FREQUENCY_GUIDANCE,
    GOAL_LABELS,
    LOCATION_LABELS,
    display_label,
    frequency_guidance,
    is_profile_sufficient_for_workout,
    map_profile_to_workout_context,
    profile_completeness_percentage,
)
from fitcopilot.services.readiness import (
    get_completion_status,
    missing_required_fields,
    readiness_state,
)

st.set_page_config(page_title="Workout Generator", page_icon="🏋️", layout="wide")
settings = get_settings()
configure_logging()
logger = logging.getLogger("fitcopilot.ui")

FOCUS_OPTIONS = ["fat-burning", "muscle-building", "endurance", "strength", "flexibility", "general-fitness"]
LOCATION_OPTIONS = ["home", "gym", "outdoors", "travel", "limited-space"]
MUSCLE_OPTIONS = ["chest", "back", "shoulders", "arms", "core", "legs", "glutes"]
RESTRICTION_OPTIONS = ["lower_back", "knee", "shoulder", "hip", "neck", "wrist", "ankle"]
INTENSITY_LABELS = {1: "Very Low", 2: "Low", 3: "Moderate", 4: "High", 5: "Very High", 6: "Extreme"}


def pretty_text(s: str) -> str:
    """Prettify identifiers like 'pull_up_bar' or 'fat-burning' for UI display."""
    return s.replace("_", " ").replace("-", " ").title()


def show(value: object) -> str:
    if value is UNSPECIFIED:
        return "—"
    if isinstance(value, tuple):
        return ", ".join(pretty_text(v) for v in value) if value else "None"
    return pretty_text(str(value))


def optional_select(label: str, options: List[str], key: str, labels: Optional[Mapping[str, str]] = None) -> str | None:
    def fmt(s: str) -> str:
        if s == "—":
            return s
        return display_label(s, labels) if labels else pretty_text(s)

    choice = st.selectbox(label, ["—"] + options, key=key, format_func=fmt)
    return None if choice == "—" else choice


if "generating" not in st.session_state:
    st.session_state["generating"] = False

with st.sidebar:
    st.header("Your profile")
    fitness_level = optional_select("Fitness level", list(FITNESS_LEVEL_LABELS), "pf-level", FITNESS_LEVEL_LABELS)
    goals = st.multiselect("Goals", list(GOAL_LABELS), format_func=lambda g: display_label(g, GOAL_LABELS), key="pf-goals")
    equipment = st.multiselect(
        "Available equipment", list(EQUIPMENT_LABELS), format_func=lambda e: display_label(e, EQUIPMENT_LABELS), key="pf-eq",
    )
    limitations = st.multiselect("Limitations", RESTRICTION_OPTIONS, format_func=pretty_text, key="pf-lim")
    frequency = optional_select(
        "Workout frequency", list(FREQUENCY_GUIDANCE), "pf-freq", {k: g.label for k, g in FREQUENCY_GUIDANCE.items()},
    )
    location = optional_select("Preferred location", list(LOCATION_LABELS), "pf-loc", LOCATION_LABELS)

    profile = Profile(
        fitness_level=fitness_level,
        goals=goals or None,
        available_equipment=equipment or None,
        limitations=limitations or None,
        workout_frequency=frequency,
        preferred_location=location,
    )
    st.progress(profile_completeness_percentage(profile) / 100, text=f"Profile {profile_completeness_percentage(profile)}% complete")

context = map_profile_to_workout_context(profile)

st.title("Today's workout")

with st.container(border=True):
    st.subheader("From your profile")
    cols = st.columns(4)
    cols[0].metric("Fitness level", show(context.fitness_level))
    cols[1].metric("Primary goal", show(context.primary_goal))
    cols[2].metric("Suggested length", show(context.suggested_duration))
    cols[3].metric("Default intensity", show(context.default_intensity))
    guidance = frequency_guidance(profile.workout_frequency)
    if guidance:
        st.caption(f"{guidance.label}: {guidance.explanation}")
    st.caption(f"Equipment: {show(context.default_equipment)} · Restrictions: {show(context.restrictions)}")
    if not is_profile_sufficient_for_workout(profile):
        st.warning("Add your fitness level, at least one goal and your equipment to personalise workouts.")

c1, c2 = st.columns(2)
with c1:
    todays_focus = optional_select("Today's focus", FOCUS_OPTIONS, "ss-focus")
    intensity = st.select_slider(
        "Intensity", options=[0] + list(INTENSITY_LABELS), value=0,
        format_func=lambda v: INTENSITY_LABELS.get(v, "—"), key="ss-intensity",
    )
    minutes = st.number_input("Time available (min)", min_value=0, max_value=180, step=5, value=0, key="ss-time")
    location_today = optional_select("Location today", LOCATION_OPTIONS, "ss-loc")
with c2:
    muscles = st.multiselect("Target muscles", MUSCLE_OPTIONS, format_func=pretty_text, key="ss-muscles")
    equipment_today = st.multiselect(
        "Equipment today", sorted(set(EQUIPMENT_MAP.values())), format_func=pretty_text, key="ss-eq",
    )
    restrictions_today = st.multiselect("Restrictions today", RESTRICTION_OPTIONS, format_func=pretty_text, key="ss-res")
    energy = st.select_slider("Energy", options=[0, 1, 2, 3, 4, 5], value=0, format_func=lambda v: "—" if v == 0 else str(v), key="ss-energy")

session_inputs = SessionInputs(
    todays_focus=todays_focus,
    daily_intensity_level=intensity or None,
    time_constraints_today=minutes or None,
    target_muscles=muscles,
    equipment_available_today=equipment_today,
    health_restrictions_today=restrictions_today,
    location_today=location_today,
    energy_level=energy or None,
)

status = get_completion_status(session_inputs)
st.progress(status.fraction, text=f"{status.completed} of {status.total} selections made")

state = readiness_state(session_inputs, generating=st.session_state["generating"])
if state is ReadinessState.INCOMPLETE:
    missing = ", ".join(pretty_text(f) for f in missing_required_fields(session_inputs))
    st.info(f"Still needed before generating: {missing}")

if st.button("Generate workout", disabled=state is not ReadinessState.READY, use_container_width=True):
    # The REST collaborator performs the generation; this view only hands over the request.
    logger.info("Generation requested (focus=%s, minutes=%s)", todays_focus, minutes)
    st.session_state["generating"] = True
    st.session_state["generation_request"] = {
        "profile_context": {k: show(v) for k, v in context.__dict__.items()},
        "session_inputs": session_inputs.model_dump(mode="json", by_alias=True, exclude_none=True),
    }
    st.rerun()

if st.session_state["generating"]:
    st.success("Request ready for the workout service.")
    st.json(st.session_state.get("generation_request", {}))
    if st.button("Start over"):
        st.session_state["generating"] = False
        st.rerun()
