from __future__ import annotations

from datetime import datetime, time, timezone

import streamlit as st

from fitcopilot.models import DateRange, DurationRange, WorkoutFilters
from fitcopilot.services.filtering import active_filter_count, clear_filters, filter_and_sort, filter_options
from fitcopilot.services.library import load_workouts
from fitcopilot.services.presets import build_preset_catalog

st.set_page_config(page_title="Saved Workouts", page_icon="📚")

st.title("Saved workouts")

workouts = load_workouts()
catalog = build_preset_catalog()
options = filter_options(workouts)

if "filters" not in st.session_state:
    st.session_state["filters"] = WorkoutFilters()
filters: WorkoutFilters = st.session_state["filters"]

preset_cols = st.columns(len(catalog))
for col, preset in zip(preset_cols, catalog):
    if col.button(preset.name, key=f"preset-{preset.id}", use_container_width=True):
        st.session_state["filters"] = catalog.apply(filters, preset.id)
        st.rerun()

with st.expander(f"Filters ({active_filter_count(filters)} active)", expanded=False):
    query = st.text_input("Search", value=filters.search_query)
    difficulty = st.multiselect("Difficulty", ["beginner", "intermediate", "advanced"], default=sorted(filters.difficulty))
    workout_type = st.multiselect("Workout type", options.workout_types, default=sorted(filters.workout_type & set(options.workout_types)))
    equipment = st.multiselect("Equipment", options.equipment, default=sorted(filters.equipment & set(options.equipment)))
    tags = st.multiselect("Tags (all of)", options.tags, default=sorted(filters.tags & set(options.tags)))
    current_max = int(filters.duration.max) if filters.duration.max is not None else options.max_duration
    low, high = st.slider("Duration (min)", 0, options.max_duration, (int(filters.duration.min), min(current_max, options.max_duration)), step=5)
    completed = st.radio("Status", ["all", "completed", "pending"], index=["all", "completed", "pending"].index(filters.completed), horizontal=True)
    start = st.date_input("Created from", value=filters.created_date.start.date() if filters.created_date.start else None)
    end = st.date_input("Created until", value=filters.created_date.end.date() if filters.created_date.end else None)
    sort_by = st.selectbox("Sort by", ["date", "title", "duration", "difficulty"], index=["date", "title", "duration", "difficulty"].index(filters.sort_by))
    sort_order = st.radio("Order", ["desc", "asc"], index=["desc", "asc"].index(filters.sort_order), horizontal=True)

    c1, c2 = st.columns(2)
    if c1.button("Apply", use_container_width=True):
        try:
            st.session_state["filters"] = WorkoutFilters(
                search_query=query,
                difficulty=frozenset(difficulty),
                workout_type=frozenset(workout_type),
                equipment=frozenset(equipment),
                tags=frozenset(tags),
                # The slider's top end means "no upper bound"
                duration=DurationRange(min=low, max=None if high >= options.max_duration else high),
                completed=completed,
                created_date=DateRange(
                    start=datetime.combine(start, time.min, tzinfo=timezone.utc) if start else None,
                    end=datetime.combine(end, time.max, tzinfo=timezone.utc) if end else None,
                ),
                sort_by=sort_by,
                sort_order=sort_order,
            )
        except ValueError as e:
            st.error(f"Invalid filters: {e}")
        else:
            st.rerun()
    if c2.button("Clear all", use_container_width=True):
        st.session_state["filters"] = clear_filters(filters)
        st.rerun()

visible = filter_and_sort(workouts, st.session_state["filters"])
st.caption(f"Showing {len(visible)} of {len(workouts)} workouts")
if not visible:
    st.info("No workouts match the current filters.")
for w in visible:
    with st.container(border=True):
        st.markdown(f"**{w.title or 'Untitled'}**")
        chips = [w.difficulty, w.workout_type, f"{w.duration:g} min" if w.duration is not None else None]
        chips += ["✅ done" if w.is_completed else None]
        st.caption(" · ".join(c for c in chips if c))
        if w.tags:
            st.caption("Tags: " + ", ".join(sorted(w.tags)))
