"""
Lifecycle projection: how often a conventional floor gets resurfaced
over the facility's life, and what those events cost.
"""

import math

from .rates import RESURFACING_COST_PER_SQFT

# Slabs at or above this thickness wear slower
THICK_SLAB_IN = 8.0

# industry: (interval below THICK_SLAB_IN, interval at/above) in years
RESURFACING_INTERVALS = {
    "manufacturing": (5, 7),
    "automotive": (4, 5),
    "datacenter": (8, 8),
    "hydro": (5, 10),
}
DEFAULT_RESURFACING_INTERVAL = 5  # custom and anything unlisted


def get_resurfacing_interval(industry: str, thickness_in: float) -> int:
    """Years between resurfacings for an industry and slab thickness."""
    key = getattr(industry, "value", industry)
    if key not in RESURFACING_INTERVALS:
        return DEFAULT_RESURFACING_INTERVAL
    thin, thick = RESURFACING_INTERVALS[key]
    return thick if thickness_in >= THICK_SLAB_IN else thin


def count_resurfacing_events(facility_life_years: float, interval_years: float) -> int:
    """Whole resurfacings that fit in the facility life. Never negative."""
    if interval_years <= 0 or facility_life_years <= 0:
        return 0
    return int(math.floor(facility_life_years / interval_years))


def project_lifecycle(industry: str, thickness_in: float, area_sq_ft: float,
                      facility_life_years: float, downtime_loss_per_event: float) -> dict:
    """
    Returns a Lifecycle dict:
    {
        interval_years, events, cost_per_cycle,
        total_resurfacing_cost, total_downtime_cost, total_cost_without_additive,
    }
    """
    interval = get_resurfacing_interval(industry, thickness_in)
    events = count_resurfacing_events(facility_life_years, interval)
    cost_per_cycle = area_sq_ft * RESURFACING_COST_PER_SQFT
    total_resurfacing = events * cost_per_cycle
    total_downtime = events * downtime_loss_per_event
    return {
        "interval_years": interval,
        "events": events,
        "cost_per_cycle": cost_per_cycle,
        "total_resurfacing_cost": total_resurfacing,
        "total_downtime_cost": total_downtime,
        "total_cost_without_additive": total_resurfacing + total_downtime,
    }
