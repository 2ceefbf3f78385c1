"""
ROMAN TIMELINE - Data Loader

Only module in roman_timeline that contains async code.
Reads the events / lanes / eras JSON bundle either from a local
directory or over HTTP, and turns raw records into typed values.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import aiohttp

from roman_timeline.types import (
    DatePrecision,
    EraBand,
    EventType,
    HistoricalDate,
    Lane,
    TimelineBundle,
    TimelineEvent,
)

logger = logging.getLogger(__name__)

BUNDLE_FILES = ("events.json", "lanes.json", "eras.json")


class DataLoadError(Exception):
    """Bundle files missing or records malformed."""


def _record_id(raw: Any) -> str:
    return raw.get("id", "?") if isinstance(raw, dict) else "?"


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


def parse_date(raw: dict, owner: str = "?") -> HistoricalDate:
    """Parse a {year, month?, day?, precision, approximate, calendarNote?} record."""
    try:
        return HistoricalDate(
            year=int(raw["year"]),
            precision=DatePrecision(raw.get("precision", "year")),
            month=_optional_int(raw.get("month")),
            day=_optional_int(raw.get("day")),
            approximate=bool(raw.get("approximate", False)),
            calendar_note=raw.get("calendarNote"),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise DataLoadError(f"Bad date on {owner}: {raw!r} ({exc})") from exc


def parse_event(raw: dict) -> TimelineEvent:
    event_id = _record_id(raw)
    try:
        end_raw = raw.get("endDate")
        return TimelineEvent(
            id=raw["id"],
            type=EventType(raw["type"]),
            date=parse_date(raw["date"], event_id),
            category_id=raw["categoryId"],
            end_date=parse_date(end_raw, event_id) if end_raw else None,
            title=raw.get("title", ""),
            summary=raw.get("summary", ""),
            narrative=raw.get("narrative", ""),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise DataLoadError(f"Bad event {event_id}: {exc}") from exc


def parse_lane(raw: dict) -> Lane:
    try:
        return Lane(
            id=raw["id"],
            label=raw["label"],
            color=raw["color"],
            order=int(raw["order"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise DataLoadError(f"Bad lane {_record_id(raw)}: {exc}") from exc


def parse_era(raw: dict) -> EraBand:
    era_id = _record_id(raw)
    try:
        return EraBand(
            id=raw["id"],
            label=raw["label"],
            start=parse_date(raw["start"], era_id),
            end=parse_date(raw["end"], era_id),
            color=raw["color"],
            order=int(raw["order"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise DataLoadError(f"Bad era {era_id}: {exc}") from exc


def parse_bundle(events: list[dict], lanes: list[dict], eras: list[dict]) -> TimelineBundle:
    for name, records in zip(BUNDLE_FILES, (events, lanes, eras)):
        if not isinstance(records, list):
            raise DataLoadError(
                f"Bad {name}: expected a list of records, got {type(records).__name__}"
            )
    bundle = TimelineBundle(
        events=tuple(parse_event(e) for e in events),
        lanes=tuple(parse_lane(lane) for lane in lanes),
        eras=tuple(parse_era(e) for e in eras),
    )
    logger.info(
        f"Loaded {len(bundle.events)} events, {len(bundle.lanes)} lanes, {len(bundle.eras)} eras"
    )
    return bundle


def load_directory(path: Path | str) -> TimelineBundle:
    """Load events.json, lanes.json and eras.json from a local directory."""
    directory = Path(path)
    missing = [name for name in BUNDLE_FILES if not (directory / name).is_file()]
    if missing:
        raise DataLoadError(f"Failed to load data files: {', '.join(missing)}")

    raw = {}
    for name in BUNDLE_FILES:
        try:
            raw[name] = json.loads((directory / name).read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DataLoadError(f"Failed to load data files: {name} ({exc})") from exc

    return parse_bundle(raw["events.json"], raw["lanes.json"], raw["eras.json"])


class BundleFetcher:
    """
    Async fetcher for the timeline data bundle.

    All files are requested concurrently; any failure fails the whole load.
    """

    def __init__(self, base_url: str, timeout_seconds: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch(self) -> TimelineBundle:
        """
        Fetch and parse the bundle.

        Returns:
            TimelineBundle with events, lanes and eras.

        Raises:
            DataLoadError: if any file could not be fetched or parsed.
        """
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            results = await asyncio.gather(
                *(self._fetch_json(session, name) for name in BUNDLE_FILES),
                return_exceptions=True,
            )

        failed = [
            name for name, result in zip(BUNDLE_FILES, results) if isinstance(result, Exception)
        ]
        if failed:
            for name, result in zip(BUNDLE_FILES, results):
                if isinstance(result, Exception):
                    logger.warning(f"Failed to fetch {name}: {result}")
            raise DataLoadError(f"Failed to load data files: {', '.join(failed)}")

        events, lanes, eras = results
        return parse_bundle(events, lanes, eras)

    async def _fetch_json(self, session: aiohttp.ClientSession, name: str) -> Any:
        url = f"{self.base_url}/{name}"
        async with session.get(url) as response:
            response.raise_for_status()
            return await response.json(content_type=None)


def fetch_sync(base_url: str) -> TimelineBundle:
    """Synchronous convenience wrapper for CLI usage."""
    return asyncio.run(BundleFetcher(base_url).fetch())
