"""Tests for the async bundle fetcher against a local aiohttp server."""

import asyncio
import logging

import pytest
from aiohttp import web

from roman_timeline.ingest.loader import BundleFetcher, DataLoadError
from roman_timeline.pipeline.render import TimelinePipeline
from roman_timeline.types import EventType

EVENTS = [
    {
        "id": "founding",
        "type": "point",
        "title": "Founding of the Republic",
        "date": {"year": -508, "precision": "year", "approximate": True},
        "categoryId": "politics",
    },
    {
        "id": "augustus",
        "type": "reign",
        "title": "Reign of Augustus",
        "date": {"year": -26, "precision": "year"},
        "endDate": {"year": 14, "precision": "year"},
        "categoryId": "politics",
    },
]
LANES = [{"id": "politics", "label": "Politics", "color": "#8B0000", "order": 1}]
ERAS = [
    {
        "id": "republic",
        "label": "Republic",
        "color": "#B71C1C",
        "order": 1,
        "start": {"year": -508},
        "end": {"year": -26},
    }
]
BUNDLE = {"events.json": EVENTS, "lanes.json": LANES, "eras.json": ERAS}


def _json_handler(payload):
    async def handler(request):
        return web.json_response(payload)

    return handler


def _text_handler(body):
    async def handler(request):
        return web.Response(text=body, content_type="application/json")

    return handler


async def _with_server(routes, action):
    """Serve routes under /data/ on an ephemeral port and run action(base_url)."""
    app = web.Application()
    for name, handler in routes.items():
        app.router.add_get(f"/data/{name}", handler)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    try:
        host, port = runner.addresses[0][:2]
        return await action(f"http://{host}:{port}/data/")
    finally:
        await runner.cleanup()


def _fetch(routes):
    return asyncio.run(_with_server(routes, lambda url: BundleFetcher(url).fetch()))


class TestBundleFetcher:
    def test_fetches_all_files(self):
        routes = {name: _json_handler(payload) for name, payload in BUNDLE.items()}
        bundle = _fetch(routes)
        assert [e.id for e in bundle.events] == ["founding", "augustus"]
        assert bundle.events[1].type == EventType.REIGN
        assert bundle.lanes[0].id == "politics"
        assert bundle.eras[0].end.year == -26

    def test_missing_files_named_together(self, caplog):
        routes = {"events.json": _json_handler(EVENTS)}
        with caplog.at_level(logging.WARNING, logger="roman_timeline.ingest.loader"):
            with pytest.raises(DataLoadError, match="lanes.json, eras.json"):
                _fetch(routes)
        warned = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warned) == 2
        assert any("lanes.json" in m for m in warned)
        assert any("eras.json" in m for m in warned)

    def test_malformed_body_is_a_failed_file(self):
        routes = {name: _json_handler(payload) for name, payload in BUNDLE.items()}
        routes["eras.json"] = _text_handler("{not json")
        with pytest.raises(DataLoadError, match="eras.json"):
            _fetch(routes)

    def test_object_payload_rejected(self):
        routes = {name: _json_handler(payload) for name, payload in BUNDLE.items()}
        routes["lanes.json"] = _json_handler({"lanes": LANES})
        with pytest.raises(DataLoadError, match="lanes.json"):
            _fetch(routes)


class TestPipelineFetch:
    def test_fetch_loads_pipeline(self):
        pipeline = TimelinePipeline()
        routes = {name: _json_handler(payload) for name, payload in BUNDLE.items()}
        asyncio.run(_with_server(routes, pipeline.fetch))
        assert pipeline.get_event("augustus").title == "Reign of Augustus"
        assert pipeline.store.select_first() == "founding"
        frame = pipeline.render()
        assert [row.lane.id for row in frame.lanes] == ["politics"]
