"""
ROMAN TIMELINE - Application State Store

Explicit application state observed through subscriptions:
- transform: written only by the ZoomEngine
- viewport width: written only by resize notifications
- selection: event id or date range, mutually exclusive

Render passes read one immutable ViewSnapshot, so every reader in a pass
sees the same state.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from roman_timeline.config import TimelineConfig
from roman_timeline.scale.coordinate import CoordinateScale
from roman_timeline.types import HistoricalDateRange, ViewSnapshot, ViewTransform
from roman_timeline.viewport.zoom import ZoomEngine

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[ViewSnapshot], None]


class TimelineStore:
    """Session state for one timeline view."""

    def __init__(
        self,
        config: TimelineConfig | None = None,
        viewport_width: float | None = None,
    ) -> None:
        self.config = config or TimelineConfig()
        self.zoom = ZoomEngine(config=self.config.zoom, domain=self.config.domain)
        self._viewport_width = (
            viewport_width
            if viewport_width is not None
            else self.config.scale.default_viewport_width
        )
        self._selected_event_id: Optional[str] = None
        self._selected_range: Optional[HistoricalDateRange] = None
        self._event_order: list[str] = []
        self._listeners: list[SnapshotListener] = []
        self.zoom.subscribe(self._on_transform)

    # --- Subscriptions ---

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener called with a fresh snapshot after each write."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            transform=self.zoom.transform,
            viewport_width=self._viewport_width,
            selected_event_id=self._selected_event_id,
            selected_range=self._selected_range,
        )

    # --- Viewport width ---

    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    @property
    def scale(self) -> CoordinateScale:
        """Base scale for the current width."""
        return CoordinateScale(
            viewport_width=self._viewport_width,
            domain_bounds=self.config.domain,
            config=self.config.scale,
        )

    def set_viewport_width(self, width: float) -> None:
        """Resize notification. Recomputes the base scale only; x, y, k are untouched."""
        if width == self._viewport_width:
            return
        logger.debug(f"Viewport width {self._viewport_width} -> {width}")
        self._viewport_width = width
        self._publish()

    # --- Navigation ---

    def go_to_year(self, year: float) -> ViewTransform:
        return self.zoom.go_to_year(year, self.scale)

    def scrub_to_year(self, year: float) -> ViewTransform:
        return self.zoom.scrub_to_year(year, self.scale)

    def recenter(self) -> ViewTransform:
        return self.zoom.recenter(self.scale)

    def center_year(self) -> float:
        return self.zoom.center_year(self.scale)

    # --- Selection ---

    @property
    def selected_event_id(self) -> Optional[str]:
        return self._selected_event_id

    @property
    def selected_range(self) -> Optional[HistoricalDateRange]:
        return self._selected_range

    def set_event_order(self, event_ids: Iterable[str]) -> None:
        """Order used for keyboard stepping. Drops a selection that no longer exists."""
        self._event_order = list(event_ids)
        if self._selected_event_id is not None and self._selected_event_id not in self._event_order:
            self._selected_event_id = None
            self._publish()

    def select_event(self, event_id: Optional[str]) -> None:
        if event_id is not None and self._event_order and event_id not in self._event_order:
            raise KeyError(event_id)
        self._selected_event_id = event_id
        self._selected_range = None
        self._publish()

    def select_range(self, date_range: Optional[HistoricalDateRange]) -> None:
        self._selected_range = date_range
        self._selected_event_id = None
        self._publish()

    def clear_selection(self) -> None:
        self._selected_event_id = None
        self._selected_range = None
        self._publish()

    def select_next(self) -> Optional[str]:
        """Step forward; selects the first event when nothing is selected."""
        if not self._event_order:
            return None
        index = self._current_index()
        if index == -1:
            self.select_event(self._event_order[0])
        elif index < len(self._event_order) - 1:
            self.select_event(self._event_order[index + 1])
        return self._selected_event_id

    def select_previous(self) -> Optional[str]:
        index = self._current_index()
        if index > 0:
            self.select_event(self._event_order[index - 1])
        return self._selected_event_id

    def select_first(self) -> Optional[str]:
        if self._event_order:
            self.select_event(self._event_order[0])
        return self._selected_event_id

    def select_last(self) -> Optional[str]:
        if self._event_order:
            self.select_event(self._event_order[-1])
        return self._selected_event_id

    # --- Internals ---

    def _current_index(self) -> int:
        if self._selected_event_id is None:
            return -1
        try:
            return self._event_order.index(self._selected_event_id)
        except ValueError:
            return -1

    def _on_transform(self, _transform: ViewTransform) -> None:
        self._publish()

    def _publish(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
