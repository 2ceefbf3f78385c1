"""
ROMAN TIMELINE - Configuration & Thresholds

Single source of truth for all numerical constants.
All values are named, documented, and centralized.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DomainBounds:
    """Fixed astronomical-year domain of the axis."""

    min_year: int = -508  # 509 BCE
    max_year: int = 1453  # 1453 CE

    @property
    def center_year(self) -> float:
        return (self.min_year + self.max_year) / 2


@dataclass(frozen=True)
class ScaleConfig:
    """Base scale pixel range."""

    margin_left: float = 50.0
    margin_right: float = 50.0
    default_viewport_width: float = 1200.0


@dataclass(frozen=True)
class ZoomConfig:
    """Scale extent and button zoom step."""

    min_scale: float = 1.0
    max_scale: float = 100.0
    step: float = 1.5  # zoom_in multiplies k by step, zoom_out divides


@dataclass(frozen=True)
class TickConfig:
    """Axis tick lookup table and density culling thresholds."""

    # (span greater than, interval) checked in order
    interval_table: tuple[tuple[int, int], ...] = (
        (1000, 100),
        (500, 50),
        (200, 25),
        (100, 10),
        (50, 5),
    )
    fallback_interval: int = 1
    sparse_below_k: float = 2.0  # k < 2 keeps every other tick
    aligned_below_k: float = 5.0  # k < 5 keeps ticks aligned to interval
    always_keep_interval: int = 100  # century ticks survive sparse culling
    cull_margin_px: float = 10.0


@dataclass(frozen=True)
class LayoutConfig:
    """Lane geometry shared by the layout engine and the total-height computation."""

    lane_height: float = 80.0
    axis_height: float = 60.0
    marker_y_offset: float = 40.0  # marker center, relative to lane top
    span_height: float = 20.0
    marker_radius: float = 6.0
    selected_marker_radius: float = 8.0
    stroke_width: float = 1.0
    selected_stroke_width: float = 2.0
    min_span_width: float = 2.0  # narrower spans collapse to a marker
    label_min_width: float = 50.0  # inline label needs strictly more than this
    bottom_padding: float = 100.0


@dataclass(frozen=True)
class TimelineConfig:
    """Master configuration for ROMAN TIMELINE."""

    domain: DomainBounds = DomainBounds()
    scale: ScaleConfig = ScaleConfig()
    zoom: ZoomConfig = ZoomConfig()
    ticks: TickConfig = TickConfig()
    layout: LayoutConfig = LayoutConfig()
