"""
ROMAN TIMELINE - Zoom Engine

Owns the viewport transform {x, y, k} and the only operations allowed to
mutate it. Every path (buttons, gestures, programmatic navigation) goes
through _commit(), which applies the single scale-extent clamp.

Pan is never clamped: content stays draggable past the domain edges.
Navigation targets are computed against the unzoomed base scale, so the
render-time composition translate(x, y) scale(k) holds for any k.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from roman_timeline.config import DomainBounds, ZoomConfig
from roman_timeline.scale.coordinate import ComposedScale, CoordinateScale, clamp_year
from roman_timeline.types import ViewTransform

logger = logging.getLogger(__name__)

TransformListener = Callable[[ViewTransform], None]


class ZoomEngine:
    """
    Mutable pan/zoom state with named operations.

    Listeners are called synchronously, in mutation order, with the new
    transform after every write (last write wins).
    """

    def __init__(
        self,
        config: ZoomConfig | None = None,
        domain: DomainBounds | None = None,
    ) -> None:
        self.config = config or ZoomConfig()
        self.domain = domain or DomainBounds()
        self._transform = ViewTransform(k=self._clamp_scale(1.0))
        self._listeners: list[TransformListener] = []

    @property
    def transform(self) -> ViewTransform:
        return self._transform

    def subscribe(self, listener: TransformListener) -> Callable[[], None]:
        """Register a listener. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Mutation paths ---

    def zoom_in(self, anchor: Optional[float] = None) -> ViewTransform:
        return self.zoom_by(self.config.step, anchor)

    def zoom_out(self, anchor: Optional[float] = None) -> ViewTransform:
        return self.zoom_by(1 / self.config.step, anchor)

    def zoom_by(self, factor: float, anchor: Optional[float] = None) -> ViewTransform:
        """
        Multiply k by factor (clamped).

        Without an anchor only k changes. With an anchor pixel, x is
        adjusted so the year under the anchor stays under it.
        """
        current = self._transform
        new_k = self._clamp_scale(current.k * factor)
        x = current.x
        if anchor is not None:
            x = anchor - (anchor - current.x) * (new_k / current.k)
        return self._commit(x, current.y, new_k)

    def zoom_to(self, x: float, y: float, k: float) -> ViewTransform:
        """Absolute set. x and y are taken verbatim, k is clamped."""
        return self._commit(x, y, k)

    def apply_gesture(self, x: float, y: float, k: float) -> ViewTransform:
        """Transform reported by a drag/wheel gesture handler."""
        return self._commit(x, y, k)

    def pan_by(self, dx: float, dy: float) -> ViewTransform:
        current = self._transform
        return self._commit(current.x + dx, current.y + dy, current.k)

    def go_to_year(self, year: float, scale: CoordinateScale) -> ViewTransform:
        """Center year in the viewport at the current zoom level."""
        k = self._transform.k
        center = scale.viewport_width / 2
        return self._commit(center - scale(year) * k, 0.0, k)

    def scrub_to_year(self, year: float, scale: CoordinateScale) -> ViewTransform:
        """go_to_year with the target clamped into the domain."""
        return self.go_to_year(clamp_year(year, self.domain), scale)

    def recenter(self, scale: CoordinateScale) -> ViewTransform:
        return self.go_to_year(self.domain.center_year, scale)

    def fit_all(self) -> ViewTransform:
        return self.reset()

    def reset(self) -> ViewTransform:
        return self._commit(0.0, 0.0, 1.0)

    # --- Readers ---

    def center_year(self, scale: CoordinateScale) -> float:
        """Year currently under the viewport center."""
        composed = ComposedScale(base=scale, transform=self._transform)
        return composed.invert(scale.viewport_width / 2)

    # --- Internals ---

    def _clamp_scale(self, k: float) -> float:
        return max(self.config.min_scale, min(self.config.max_scale, k))

    def _commit(self, x: float, y: float, k: float) -> ViewTransform:
        transform = ViewTransform(x=x, y=y, k=self._clamp_scale(k))
        self._transform = transform
        logger.debug(f"Transform x={transform.x:.2f} y={transform.y:.2f} k={transform.k:.3f}")
        for listener in list(self._listeners):
            listener(transform)
        return transform
