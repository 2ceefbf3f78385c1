"""
ROMAN TIMELINE - Coordinate Scale

Stateless linear map from the fixed astronomical-year domain to the pixel
range [margin_left, viewport_width - margin_right].

The domain never changes with zoom. Zoom and pan are applied afterwards
by ComposedScale as screen = x + k * base(year).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from roman_timeline.config import DomainBounds, ScaleConfig
from roman_timeline.types import IDENTITY, ViewTransform


@dataclass(frozen=True)
class CoordinateScale:
    """Base (unzoomed) year -> pixel scale for one viewport width."""

    viewport_width: float = ScaleConfig().default_viewport_width
    domain_bounds: DomainBounds = field(default_factory=DomainBounds)
    config: ScaleConfig = field(default_factory=ScaleConfig)

    @property
    def domain(self) -> tuple[float, float]:
        return (float(self.domain_bounds.min_year), float(self.domain_bounds.max_year))

    @property
    def range(self) -> tuple[float, float]:
        return (
            self.config.margin_left,
            self.viewport_width - self.config.margin_right,
        )

    def __call__(self, year: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return r0 + (year - d0) * (r1 - r0) / (d1 - d0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return d0
        return d0 + (pixel - r0) * (d1 - d0) / (r1 - r0)

    def with_width(self, viewport_width: float) -> CoordinateScale:
        """Scale for a resized viewport. Domain and margins are unchanged."""
        return CoordinateScale(
            viewport_width=viewport_width,
            domain_bounds=self.domain_bounds,
            config=self.config,
        )


@dataclass(frozen=True)
class ComposedScale:
    """Base scale with a viewport transform applied on top."""

    base: CoordinateScale
    transform: ViewTransform = IDENTITY

    @property
    def range(self) -> tuple[float, float]:
        return self.base.range

    @property
    def k(self) -> float:
        return self.transform.k

    def __call__(self, year: float) -> float:
        return self.transform.x + self.transform.k * self.base(year)

    def invert(self, pixel: float) -> float:
        return self.base.invert((pixel - self.transform.x) / self.transform.k)

    def visible_domain(self) -> tuple[float, float]:
        """Years at the two ends of the pixel range."""
        r0, r1 = self.range
        return (self.invert(r0), self.invert(r1))


def clamp_year(year: float, bounds: DomainBounds | None = None) -> float:
    """Clamp a navigation target into the fixed domain."""
    bounds = bounds or DomainBounds()
    return max(bounds.min_year, min(bounds.max_year, year))
