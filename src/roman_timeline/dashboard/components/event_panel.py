"""
ROMAN TIMELINE - Event Panel Component

Detail card for the selected event.
"""

import streamlit as st

from roman_timeline.pipeline.render import describe_event_dates
from roman_timeline.types import Lane, TimelineEvent


def render_event_panel(event: TimelineEvent, lane: Lane | None = None) -> None:
    """Render title, dates and summary of one event."""
    color = lane.color if lane else "#6b7280"
    lane_label = lane.label if lane else event.category_id
    st.markdown(
        f"""
        <div style="border-left: 4px solid {color}; padding: 0.75rem 1rem;">
            <div style="font-size:0.75rem; color:#6b7280;">{lane_label}</div>
            <div style="font-weight:bold; font-size:1.1rem;">{event.title or event.id}</div>
            <div style="color:{color};">{describe_event_dates(event)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
    if event.summary:
        st.markdown(event.summary)
    if event.narrative:
        with st.expander("Narrative", expanded=True):
            st.markdown(event.narrative)
