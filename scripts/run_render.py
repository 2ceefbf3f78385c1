#!/usr/bin/env python3
"""
ROMAN TIMELINE frame renderer.

Usage:
    python scripts/run_render.py --data data/
    python scripts/run_render.py --data data/ --year "44 BCE" --zoom 10
    python scripts/run_render.py --url https://example.org/data --json
    python scripts/run_render.py --data data/ --width 1600 -v
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Ensure roman_timeline is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from roman_timeline.dates.historical import parse_year
from roman_timeline.ingest.loader import DataLoadError
from roman_timeline.pipeline.render import TimelinePipeline
from roman_timeline.types import ShapeKind


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Compute one ROMAN TIMELINE frame",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", type=Path, help="Directory with events/lanes/eras JSON")
    source.add_argument("--url", type=str, help="Base URL serving the JSON bundle")
    parser.add_argument("--width", "-w", type=float, default=1200.0, help="Viewport width (px)")
    parser.add_argument("--zoom", "-z", type=float, default=1.0, help="Scale factor k")
    parser.add_argument("--year", "-y", type=str, default=None, help='Center year, e.g. "44 BCE"')
    parser.add_argument("--json", "-j", action="store_true", help="Output JSON only")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pipeline = TimelinePipeline()
    try:
        if args.data is not None:
            pipeline.load_directory(args.data)
        else:
            asyncio.run(pipeline.fetch(args.url))
    except DataLoadError as exc:
        print(f"Error: {exc}")
        return 1

    store = pipeline.store
    store.set_viewport_width(args.width)
    store.zoom.zoom_to(0.0, 0.0, args.zoom)

    if args.year:
        year = parse_year(args.year)
        if year is None:
            print(f"Error: Invalid year '{args.year}'. Use e.g. 509 BCE, 79, 476 CE.")
            return 1
        store.scrub_to_year(year)

    frame = pipeline.render()

    if args.json:
        print(frame.to_json())
        return 0

    transform = frame.snapshot.transform
    shapes = [s for row in frame.lanes for s in row.shapes]
    print()
    print("=" * 60)
    print("ROMAN TIMELINE FRAME")
    print("=" * 60)
    print(f"Center:     {frame.center_label}")
    print(f"Transform:  x={transform.x:.1f} y={transform.y:.1f} k={transform.k:.2f}")
    print(f"Visible:    {frame.visible_domain[0]:.1f} .. {frame.visible_domain[1]:.1f}")
    print(f"Height:     {frame.total_height:.0f}px")
    print("-" * 60)
    print("Ticks: " + ", ".join(t.label for t in frame.ticks))
    print("-" * 60)
    for row in frame.lanes:
        spans = sum(1 for s in row.shapes if s.kind == ShapeKind.SPAN)
        print(f"  {row.lane.label:<24} {len(row.shapes):>4} shapes ({spans} spans)")
    print("-" * 60)
    print(f"Shapes: {len(shapes)}  Era bands: {len(frame.era_bands)}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
