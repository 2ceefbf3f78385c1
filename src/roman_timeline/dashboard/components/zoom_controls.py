"""
ROMAN TIMELINE - Zoom Controls Component

Zoom buttons, go-to-year input with era selector, and the scrubber.
"""

import streamlit as st

from roman_timeline.dates.historical import validate_year_input
from roman_timeline.scale.coordinate import clamp_year
from roman_timeline.types import Era
from roman_timeline.viewport.store import TimelineStore


def scrubber_year(store: TimelineStore) -> int:
    """Slider position: the center year, rounded and kept inside the domain."""
    return int(clamp_year(round(store.center_year()), store.config.domain))


def render_zoom_controls(store: TimelineStore) -> None:
    """Render zoom/navigation controls bound to the store."""
    center_anchor = store.viewport_width / 2
    cols = st.columns([1, 2, 1, 2, 2])

    with cols[0]:
        if st.button("−", help="Zoom out (–)"):
            store.zoom.zoom_out(anchor=center_anchor)
    with cols[1]:
        st.markdown(f"Zoom: **{store.zoom.transform.k:.1f}x**")
    with cols[2]:
        if st.button("+", help="Zoom in (+)"):
            store.zoom.zoom_in(anchor=center_anchor)
    with cols[3]:
        if st.button("Reset view"):
            store.recenter()
    with cols[4]:
        if st.button("Fit all eras"):
            store.zoom.fit_all()

    with st.form("go_to_year", clear_on_submit=False):
        input_cols = st.columns([3, 1, 1])
        with input_cols[0]:
            text = st.text_input("Year", placeholder="Enter year (e.g., 50, 100)")
        with input_cols[1]:
            era_value = st.selectbox("Era", [Era.CE.value, Era.BCE.value])
        with input_cols[2]:
            submitted = st.form_submit_button("Go")

    if submitted:
        result = validate_year_input(text, Era(era_value))
        if result.is_valid:
            store.go_to_year(result.year)
        else:
            st.error(result.error)

    domain = store.config.domain
    center = scrubber_year(store)
    scrubbed = st.slider(
        "Scrub timeline",
        min_value=domain.min_year,
        max_value=domain.max_year,
        value=center,
    )
    if scrubbed != center:
        store.scrub_to_year(scrubbed)
