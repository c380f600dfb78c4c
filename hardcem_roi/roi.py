"""
ROI math. Downtime avoided per event against the material investment,
plus lifetime and annualized savings.
"""

from typing import Optional

from .rates import INDUSTRY_DOWNTIME_COST_PER_HOUR


def downtime_cost_per_hour(industry: str, custom_cost_per_hour: float = 0.0) -> float:
    """Industry default hourly downtime cost, or the caller's figure for custom."""
    key = getattr(industry, "value", industry)
    if key == "custom":
        return custom_cost_per_hour
    return INDUSTRY_DOWNTIME_COST_PER_HOUR.get(key, 0.0)


def downtime_loss_per_event(cost_per_hour: float, hours_per_event: float) -> float:
    return cost_per_hour * hours_per_event


def compute_roi(loss_per_event: float, downtime_hours: float,
                material_cost: float) -> Optional[float]:
    """
    Loss avoided per event ÷ material investment.
    None (not applicable) when there is no downtime, never 0.
    """
    if downtime_hours == 0 or material_cost == 0:
        return None
    return loss_per_event / material_cost


def lifetime_savings(total_resurfacing_cost: float, total_downtime_cost: float,
                     total_investment: float) -> float:
    return (total_resurfacing_cost + total_downtime_cost) - total_investment


def annualized_savings(savings: float, facility_life_years: float) -> float:
    """Caller validates facility_life_years > 0."""
    return savings / facility_life_years
