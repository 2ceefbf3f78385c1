"""
ROMAN TIMELINE Streamlit Dashboard.

Run with: streamlit run src/roman_timeline/dashboard/app.py -- --data data/
"""

import sys
from pathlib import Path

# Ensure roman_timeline is importable when run via `streamlit run`
_SRC_DIR = str(Path(__file__).resolve().parents[2])
if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

import argparse

import streamlit as st

from roman_timeline.dashboard.components.event_panel import render_event_panel
from roman_timeline.dashboard.components.timeline_chart import render_timeline_chart
from roman_timeline.dashboard.components.zoom_controls import render_zoom_controls
from roman_timeline.ingest.loader import DataLoadError
from roman_timeline.pipeline.render import TimelinePipeline

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def _data_dir() -> Path:
    parser = argparse.ArgumentParser()
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA_DIR)
    args, _ = parser.parse_known_args()
    return args.data


def _pipeline() -> TimelinePipeline:
    if "pipeline" not in st.session_state:
        st.session_state["pipeline"] = TimelinePipeline()
        st.session_state["loaded"] = False
    return st.session_state["pipeline"]


def main() -> None:
    st.set_page_config(
        page_title="ROMAN TIMELINE",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("ROMAN TIMELINE")
    st.markdown("**509 BCE – 1453 CE on one axis**")

    pipeline = _pipeline()
    store = pipeline.store

    with st.sidebar:
        st.header("View")
        width = st.number_input(
            "Viewport width (px)", min_value=300, max_value=4000, value=int(store.viewport_width)
        )
        store.set_viewport_width(float(width))

        st.divider()
        st.markdown(
            """
            **Navigation:**
            - **+ / −**: zoom around the center
            - **Reset view**: center on the middle of the timeline
            - **Fit all eras**: show the whole span
            - **Year box**: e.g. `44` with era `BCE`
            """
        )

    if not st.session_state.get("loaded"):
        data_dir = _data_dir()
        try:
            pipeline.load_directory(data_dir)
        except DataLoadError as exc:
            st.warning(f"No timeline data loaded from {data_dir}:\n\n{exc}")
            return
        st.session_state["loaded"] = True

    render_zoom_controls(store)

    # One snapshot per pass
    frame = pipeline.render(store.snapshot())
    st.caption(f"Center: {frame.center_label}")
    render_timeline_chart(frame)

    events = pipeline.bundle.events
    if events:
        ids = [e.id for e in events]
        current = store.selected_event_id
        choice = st.selectbox(
            "Event",
            ["—"] + ids,
            index=ids.index(current) + 1 if current in ids else 0,
            format_func=lambda i: i if i == "—" else pipeline.get_event(i).title or i,
        )
        if choice == "—":
            if current is not None:
                store.clear_selection()
        elif choice != current:
            store.select_event(choice)

        if store.selected_event_id is not None:
            event = pipeline.get_event(store.selected_event_id)
            lanes = {lane.id: lane for lane in pipeline.bundle.lanes}
            render_event_panel(event, lanes.get(event.category_id))

    with st.expander("Layout Data"):
        st.dataframe(pipeline.to_dataframe(frame))


if __name__ == "__main__":
    main()
