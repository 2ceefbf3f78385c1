"""
ROMAN TIMELINE - Core Type Definitions

All dataclasses and enums used across the system.
No logic, only data structures.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DatePrecision(Enum):
    """How much of a historical date is actually known."""

    EXACT = "exact"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"


class Era(Enum):
    """Display era. Astronomical year <= 0 is BCE."""

    BCE = "BCE"
    CE = "CE"


class EventType(Enum):
    """Event shapes, from instants to multi-century bands."""

    POINT = "point"
    RANGE = "range"
    REIGN = "reign"
    ERA_BAND = "era-band"


class ShapeKind(Enum):
    """Renderable geometry kinds."""

    MARKER = "marker"
    SPAN = "span"


@dataclass(frozen=True)
class HistoricalDate:
    """
    A date in astronomical year numbering (1 BCE = 0, 2 BCE = -1, 1 CE = 1).

    day is only meaningful when month is present.
    """

    year: int
    precision: DatePrecision = DatePrecision.YEAR
    month: Optional[int] = None  # 1-12
    day: Optional[int] = None  # 1-31
    approximate: bool = False  # renders a "c. " prefix
    calendar_note: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict = {
            "year": self.year,
            "precision": self.precision.value,
            "approximate": self.approximate,
        }
        if self.month is not None:
            out["month"] = self.month
        if self.day is not None:
            out["day"] = self.day
        if self.calendar_note is not None:
            out["calendarNote"] = self.calendar_note
        return out


@dataclass(frozen=True)
class HistoricalDateRange:
    """Closed date range; coordinate(start) <= coordinate(end)."""

    start: HistoricalDate
    end: HistoricalDate


@dataclass(frozen=True)
class DisplayYear:
    """A year as shown to readers. value is never 0."""

    value: int
    era: Era

    def __str__(self) -> str:
        return f"{self.value} {self.era.value}"


@dataclass(frozen=True)
class Lane:
    """Horizontal category track. order fixes vertical placement."""

    id: str
    label: str
    color: str
    order: int


@dataclass(frozen=True)
class EraBand:
    """Broad historical period drawn behind the lanes."""

    id: str
    label: str
    start: HistoricalDate
    end: HistoricalDate
    color: str
    order: int


@dataclass(frozen=True)
class TimelineEvent:
    """Layout-relevant subset of a timeline event. Immutable once loaded."""

    id: str
    type: EventType
    date: HistoricalDate
    category_id: str
    end_date: Optional[HistoricalDate] = None  # absent -> zero-length span at date
    title: str = ""
    summary: str = ""
    narrative: str = ""  # markdown, detail view only

    @property
    def effective_end(self) -> HistoricalDate:
        return self.end_date if self.end_date is not None else self.date


@dataclass(frozen=True)
class ViewTransform:
    """Pan offsets (x, y) in pixels and scale factor k."""

    x: float = 0.0
    y: float = 0.0
    k: float = 1.0


IDENTITY = ViewTransform()


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything one render pass reads from application state."""

    transform: ViewTransform
    viewport_width: float
    selected_event_id: Optional[str] = None
    selected_range: Optional[HistoricalDateRange] = None


@dataclass(frozen=True)
class Tick:
    """A labeled axis tick at a screen pixel position."""

    year: int
    x: float
    label: str


@dataclass(frozen=True)
class EventShape:
    """
    Geometry for one event.

    MARKER: circle centered at (x, y) with radius.
    SPAN: rectangle from (x, y) with width and height.
    label is None when the inline title is hidden.
    """

    event_id: str
    lane_id: str
    kind: ShapeKind
    x: float
    y: float
    width: float
    height: float
    color: str
    radius: float = 0.0
    stroke_width: float = 1.0
    selected: bool = False
    label: Optional[str] = None
    label_x: Optional[float] = None
    label_y: Optional[float] = None


@dataclass(frozen=True)
class LaneRow:
    """A lane positioned vertically, with its event shapes."""

    lane: Lane
    y: float
    height: float
    shapes: tuple[EventShape, ...] = ()


@dataclass(frozen=True)
class EraBandShape:
    """Background rectangle for an era band."""

    era_id: str
    label: str
    x: float
    width: float
    height: float
    color: str
    label_x: float


@dataclass(frozen=True)
class RenderFrame:
    """Fully computed geometry for one render pass."""

    snapshot: ViewSnapshot
    visible_domain: tuple[float, float]
    pixel_range: tuple[float, float]
    ticks: tuple[Tick, ...]
    lanes: tuple[LaneRow, ...]
    era_bands: tuple[EraBandShape, ...]
    total_height: float
    axis_y: float
    center_label: str = ""

    def to_dict(self) -> dict:
        """Serialize to output JSON format."""
        t = self.snapshot.transform
        return {
            "transform": {"x": t.x, "y": t.y, "k": t.k},
            "viewport_width": self.snapshot.viewport_width,
            "visible_domain": list(self.visible_domain),
            "center": self.center_label,
            "total_height": self.total_height,
            "ticks": [{"year": tk.year, "x": tk.x, "label": tk.label} for tk in self.ticks],
            "lanes": [
                {
                    "id": row.lane.id,
                    "label": row.lane.label,
                    "y": row.y,
                    "shapes": [
                        {
                            "event_id": s.event_id,
                            "kind": s.kind.value,
                            "x": s.x,
                            "y": s.y,
                            "width": s.width,
                            "height": s.height,
                            "radius": s.radius,
                            "label": s.label,
                        }
                        for s in row.shapes
                    ],
                }
                for row in self.lanes
            ],
            "era_bands": [
                {"id": b.era_id, "label": b.label, "x": b.x, "width": b.width}
                for b in self.era_bands
            ],
        }

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


@dataclass(frozen=True)
class TimelineBundle:
    """Loaded data from the ingest layer. Immutable."""

    events: tuple[TimelineEvent, ...] = ()
    lanes: tuple[Lane, ...] = ()
    eras: tuple[EraBand, ...] = ()
