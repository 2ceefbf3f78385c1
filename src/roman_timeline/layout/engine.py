"""
ROMAN TIMELINE - Event Layout Engine

Turns events into renderable geometry against a composed scale:
- point events -> marker at the start coordinate
- range / reign / era-band events -> span from start to end (end defaults to start)
- spans narrower than 2px collapse to a marker
- inline titles only on spans wider than 50px

Selection changes radius and stroke only, never positions or sizes.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from roman_timeline.config import LayoutConfig
from roman_timeline.dates.historical import to_coordinate
from roman_timeline.scale.coordinate import ComposedScale
from roman_timeline.types import (
    EraBand,
    EraBandShape,
    EventShape,
    EventType,
    Lane,
    LaneRow,
    ShapeKind,
    TimelineEvent,
)

logger = logging.getLogger(__name__)

SPAN_TYPES = (EventType.RANGE, EventType.REIGN, EventType.ERA_BAND)


def total_height(lane_count: int, config: LayoutConfig | None = None) -> float:
    """Content height: axis + one row per lane + bottom padding."""
    config = config or LayoutConfig()
    return config.axis_height + lane_count * config.lane_height + config.bottom_padding


def axis_offset(lane_count: int, config: LayoutConfig | None = None) -> float:
    """Top of the axis band, pinned to the bottom of the content."""
    config = config or LayoutConfig()
    return total_height(lane_count, config) - config.axis_height


def layout_event(
    event: TimelineEvent,
    lane: Lane,
    scale: ComposedScale,
    lane_top: float = 0.0,
    selected: bool = False,
    config: LayoutConfig | None = None,
) -> EventShape:
    """
    Geometry for one event inside its lane.

    Args:
        event: Event to place.
        lane: Lane the event belongs to (supplies color).
        scale: Composed scale for this render pass.
        lane_top: Pixel y of the lane's top edge.
        selected: Presentation-only highlight.
        config: Layout constants.

    Returns:
        EventShape of kind MARKER or SPAN.
    """
    config = config or LayoutConfig()
    start_x = scale(to_coordinate(event.date))
    center_y = lane_top + config.marker_y_offset

    if event.type in SPAN_TYPES:
        end_x = scale(to_coordinate(event.effective_end))
        width = end_x - start_x
        if width >= config.min_span_width:
            top = center_y - config.span_height / 2
            show_label = width > config.label_min_width and bool(event.title)
            return EventShape(
                event_id=event.id,
                lane_id=lane.id,
                kind=ShapeKind.SPAN,
                x=start_x,
                y=top,
                width=width,
                height=config.span_height,
                color=lane.color,
                stroke_width=_stroke_width(selected, config),
                selected=selected,
                label=event.title if show_label else None,
                label_x=start_x + width / 2 if show_label else None,
                label_y=center_y if show_label else None,
            )

    return EventShape(
        event_id=event.id,
        lane_id=lane.id,
        kind=ShapeKind.MARKER,
        x=start_x,
        y=center_y,
        width=0.0,
        height=0.0,
        color=lane.color,
        radius=config.selected_marker_radius if selected else config.marker_radius,
        stroke_width=_stroke_width(selected, config),
        selected=selected,
    )


def order_lanes(lanes: Iterable[Lane]) -> list[Lane]:
    return sorted(lanes, key=lambda lane: lane.order)


def layout_lanes(
    events: Iterable[TimelineEvent],
    lanes: Iterable[Lane],
    scale: ComposedScale,
    selected_event_id: Optional[str] = None,
    y_offset: float = 0.0,
    config: LayoutConfig | None = None,
) -> tuple[LaneRow, ...]:
    """
    Bucket events by category into fixed-height rows ordered by Lane.order.

    Events whose category has no lane are not rendered.
    """
    config = config or LayoutConfig()
    ordered = order_lanes(lanes)
    buckets: dict[str, list[TimelineEvent]] = {lane.id: [] for lane in ordered}

    orphans = 0
    for event in events:
        bucket = buckets.get(event.category_id)
        if bucket is None:
            orphans += 1
            continue
        bucket.append(event)
    if orphans:
        logger.debug(f"{orphans} events without a matching lane")

    rows = []
    for index, lane in enumerate(ordered):
        lane_top = y_offset + index * config.lane_height
        shapes = tuple(
            layout_event(
                event,
                lane,
                scale,
                lane_top=lane_top,
                selected=event.id == selected_event_id,
                config=config,
            )
            for event in buckets[lane.id]
        )
        rows.append(LaneRow(lane=lane, y=lane_top, height=config.lane_height, shapes=shapes))
    return tuple(rows)


def layout_era_bands(
    eras: Iterable[EraBand],
    scale: ComposedScale,
    height: float,
) -> tuple[EraBandShape, ...]:
    """Background bands behind the lanes, drawn in Era.order."""
    bands = []
    for era in sorted(eras, key=lambda e: e.order):
        start_x = scale(to_coordinate(era.start))
        width = scale(to_coordinate(era.end)) - start_x
        bands.append(
            EraBandShape(
                era_id=era.id,
                label=era.label,
                x=start_x,
                width=width,
                height=height,
                color=era.color,
                label_x=start_x + width / 2,
            )
        )
    return tuple(bands)


def _stroke_width(selected: bool, config: LayoutConfig) -> float:
    return config.selected_stroke_width if selected else config.stroke_width
