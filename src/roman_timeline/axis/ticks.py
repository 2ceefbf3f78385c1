"""
ROMAN TIMELINE - Axis Tick Planner

Rules (evaluated in order):
1. Interval from the visible span via a fixed lookup table
   (>1000 -> 100, >500 -> 50, >200 -> 25, >100 -> 10, >50 -> 5, else 1)
2. Ticks from floor(min/interval)*interval to ceil(max/interval)*interval
3. Density culling by zoom level instead of measuring label widths
4. Viewport culling to the pixel range plus a small margin

The breakpoints are a deliberate table, not a formula.
"""

from __future__ import annotations

import math

from roman_timeline.config import TickConfig
from roman_timeline.dates.historical import astronomical_to_display
from roman_timeline.scale.coordinate import ComposedScale
from roman_timeline.types import Tick


def select_tick_interval(span: float, config: TickConfig | None = None) -> int:
    """Tick interval in years for a visible span in years."""
    config = config or TickConfig()
    for threshold, interval in config.interval_table:
        if span > threshold:
            return interval
    return config.fallback_interval


def generate_tick_years(domain: tuple[float, float], interval: int) -> list[int]:
    """Interval-aligned years covering the domain, both ends rounded outward."""
    lo, hi = domain
    start = math.floor(lo / interval) * interval
    end = math.ceil(hi / interval) * interval
    return list(range(start, end + 1, interval))


def cull_by_density(
    years: list[int],
    interval: int,
    k: float,
    config: TickConfig | None = None,
) -> list[int]:
    """
    Thin ticks at low zoom to keep labels from overlapping.

    - k < 2: every other tick (year % 2*interval == 0), century ticks always kept
    - k < 5: ticks aligned to interval
    - k >= 5: everything
    """
    config = config or TickConfig()

    if k < config.sparse_below_k:
        if interval >= config.always_keep_interval:
            return list(years)
        return [y for y in years if y % (interval * 2) == 0]

    if k < config.aligned_below_k:
        return [y for y in years if y % interval == 0]

    return list(years)


def plan_ticks(scale: ComposedScale, config: TickConfig | None = None) -> tuple[Tick, ...]:
    """
    Labeled, culled ticks for the current composed scale.

    Args:
        scale: Base scale with the render pass's transform applied.
        config: Tick thresholds.

    Returns:
        Ticks in ascending year order with screen x positions.
    """
    config = config or TickConfig()
    domain = scale.visible_domain()
    interval = select_tick_interval(domain[1] - domain[0], config)
    years = cull_by_density(generate_tick_years(domain, interval), interval, scale.k, config)

    range_min, range_max = scale.range
    lo = range_min - config.cull_margin_px
    hi = range_max + config.cull_margin_px

    ticks = []
    for year in years:
        x = scale(year)
        if x < lo or x > hi:
            continue
        ticks.append(Tick(year=year, x=x, label=str(astronomical_to_display(year))))
    return tuple(ticks)
