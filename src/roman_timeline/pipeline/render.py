"""
ROMAN TIMELINE - Render Pass Orchestration

Flow: snapshot -> composed scale -> ticks -> lanes -> era bands -> frame

TimelinePipeline.fetch() is the single async entry point.
Everything after loading is synchronous and reads exactly one snapshot.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from roman_timeline.axis.ticks import plan_ticks
from roman_timeline.config import TimelineConfig
from roman_timeline.dates.historical import format_date, format_range, format_year_label
from roman_timeline.ingest.loader import BundleFetcher, load_directory
from roman_timeline.layout.engine import (
    axis_offset,
    layout_era_bands,
    layout_lanes,
    total_height,
)
from roman_timeline.scale.coordinate import ComposedScale, CoordinateScale
from roman_timeline.types import (
    HistoricalDateRange,
    RenderFrame,
    TimelineBundle,
    TimelineEvent,
    ViewSnapshot,
)
from roman_timeline.viewport.store import TimelineStore

logger = logging.getLogger(__name__)

SHAPE_COLUMNS = [
    "lane_id",
    "event_id",
    "title",
    "kind",
    "x",
    "y",
    "width",
    "height",
    "radius",
    "stroke_width",
    "color",
    "label",
    "selected",
    "date_label",
]


class TimelinePipeline:
    """
    ROMAN TIMELINE render pipeline.

    Holds the loaded bundle and the session store; render() turns the
    store's current snapshot into a RenderFrame.
    """

    def __init__(
        self,
        config: TimelineConfig | None = None,
        store: TimelineStore | None = None,
    ) -> None:
        self.config = config or TimelineConfig()
        self.store = store or TimelineStore(config=self.config)
        self.bundle = TimelineBundle()
        self._events_by_id: dict[str, TimelineEvent] = {}

    # --- Loading ---

    def load(self, bundle: TimelineBundle) -> None:
        self.bundle = bundle
        self._events_by_id = {event.id: event for event in bundle.events}
        self.store.set_event_order(event.id for event in bundle.events)

    def load_directory(self, path: Path | str) -> TimelineBundle:
        bundle = load_directory(path)
        self.load(bundle)
        return bundle

    async def fetch(self, base_url: str) -> TimelineBundle:
        """Fetch the bundle over HTTP, then hand off to synchronous processing."""
        logger.info(f"Fetching timeline data from {base_url}")
        bundle = await BundleFetcher(base_url).fetch()
        self.load(bundle)
        return bundle

    def get_event(self, event_id: str) -> TimelineEvent:
        return self._events_by_id[event_id]

    # --- Rendering ---

    def render(self, snapshot: ViewSnapshot | None = None) -> RenderFrame:
        """
        Compute one frame.

        Args:
            snapshot: State to render (default: the store's current snapshot).

        Returns:
            RenderFrame with ticks, lane rows, era bands and total height.
        """
        snapshot = snapshot or self.store.snapshot()
        base = CoordinateScale(
            viewport_width=snapshot.viewport_width,
            domain_bounds=self.config.domain,
            config=self.config.scale,
        )
        scale = ComposedScale(base=base, transform=snapshot.transform)
        layout = self.config.layout
        lane_count = len(self.bundle.lanes)

        ticks = plan_ticks(scale, self.config.ticks)
        lanes = layout_lanes(
            self.bundle.events,
            self.bundle.lanes,
            scale,
            selected_event_id=snapshot.selected_event_id,
            y_offset=snapshot.transform.y,
            config=layout,
        )
        height = total_height(lane_count, layout)
        eras = layout_era_bands(self.bundle.eras, scale, height - layout.axis_height)

        range_min, range_max = base.range
        center = scale.invert(snapshot.viewport_width / 2)

        frame = RenderFrame(
            snapshot=snapshot,
            visible_domain=scale.visible_domain(),
            pixel_range=(range_min, range_max),
            ticks=ticks,
            lanes=lanes,
            era_bands=eras,
            total_height=height,
            axis_y=axis_offset(lane_count, layout),
            center_label=format_year_label(center),
        )
        logger.debug(
            f"Rendered {sum(len(row.shapes) for row in lanes)} shapes, "
            f"{len(ticks)} ticks at k={snapshot.transform.k:.2f}"
        )
        return frame

    def to_dataframe(self, frame: RenderFrame) -> pd.DataFrame:
        """Flatten a frame's event shapes into one row per shape."""
        rows = []
        for row in frame.lanes:
            for shape in row.shapes:
                event = self._events_by_id.get(shape.event_id)
                rows.append(
                    {
                        "lane_id": shape.lane_id,
                        "event_id": shape.event_id,
                        "title": event.title if event else "",
                        "kind": shape.kind.value,
                        "x": shape.x,
                        "y": shape.y,
                        "width": shape.width,
                        "height": shape.height,
                        "radius": shape.radius,
                        "stroke_width": shape.stroke_width,
                        "color": shape.color,
                        "label": shape.label,
                        "selected": shape.selected,
                        "date_label": describe_event_dates(event) if event else "",
                    }
                )
        return pd.DataFrame(rows, columns=SHAPE_COLUMNS)


def describe_event_dates(event: TimelineEvent) -> str:
    """Date label: "44 BCE" for instants, "27 BCE – 14 CE" style for spans."""
    if event.end_date is None:
        return format_date(event.date)
    return format_range(HistoricalDateRange(start=event.date, end=event.end_date))
