"""Shared fixtures for ROMAN TIMELINE tests."""

import sys
from pathlib import Path

import pytest

# Ensure roman_timeline is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from roman_timeline.config import TimelineConfig
from roman_timeline.pipeline.render import TimelinePipeline
from roman_timeline.scale.coordinate import CoordinateScale
from roman_timeline.types import (
    DatePrecision,
    EraBand,
    EventType,
    HistoricalDate,
    Lane,
    TimelineBundle,
    TimelineEvent,
)
from roman_timeline.viewport.store import TimelineStore


def year(y: int, **kwargs) -> HistoricalDate:
    return HistoricalDate(year=y, precision=kwargs.pop("precision", DatePrecision.YEAR), **kwargs)


@pytest.fixture
def config() -> TimelineConfig:
    return TimelineConfig()


@pytest.fixture
def scale() -> CoordinateScale:
    """Base scale whose pixel range is exactly 1120px wide (50..1170)."""
    return CoordinateScale(viewport_width=1220)


@pytest.fixture
def lanes() -> list[Lane]:
    # Deliberately out of display order
    return [
        Lane(id="military", label="Military", color="#1F4E79", order=2),
        Lane(id="politics", label="Politics", color="#8B0000", order=1),
        Lane(id="culture", label="Culture", color="#2E7D32", order=3),
    ]


@pytest.fixture
def events() -> list[TimelineEvent]:
    return [
        TimelineEvent(
            id="founding",
            type=EventType.POINT,
            date=year(-508, approximate=True),
            category_id="politics",
            title="Founding of the Republic",
        ),
        TimelineEvent(
            id="first-punic-war",
            type=EventType.RANGE,
            date=year(-263),
            end_date=year(-240),
            category_id="military",
            title="First Punic War",
        ),
        TimelineEvent(
            id="ides-of-march",
            type=EventType.POINT,
            date=HistoricalDate(year=-43, month=3, day=15, precision=DatePrecision.EXACT),
            category_id="politics",
            title="Assassination of Julius Caesar",
        ),
        TimelineEvent(
            id="augustus",
            type=EventType.REIGN,
            date=year(-26),
            end_date=year(14),
            category_id="politics",
            title="Reign of Augustus",
        ),
        TimelineEvent(
            id="pax-romana",
            type=EventType.ERA_BAND,
            date=year(-26),
            end_date=year(180),
            category_id="culture",
            title="Pax Romana",
        ),
        TimelineEvent(
            id="lost-event",
            type=EventType.POINT,
            date=year(100),
            category_id="no-such-lane",
            title="Orphan",
        ),
    ]


@pytest.fixture
def eras() -> list[EraBand]:
    return [
        EraBand(id="empire", label="Empire", start=year(-26), end=year(476), color="#4A148C", order=2),
        EraBand(id="republic", label="Republic", start=year(-508), end=year(-26), color="#B71C1C", order=1),
    ]


@pytest.fixture
def bundle(events, lanes, eras) -> TimelineBundle:
    return TimelineBundle(events=tuple(events), lanes=tuple(lanes), eras=tuple(eras))


@pytest.fixture
def store() -> TimelineStore:
    return TimelineStore(viewport_width=1220)


@pytest.fixture
def pipeline(bundle) -> TimelinePipeline:
    p = TimelinePipeline(store=TimelineStore(viewport_width=1220))
    p.load(bundle)
    return p
