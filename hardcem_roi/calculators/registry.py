"""
Pricing strategy registry: maps strategy names to strategy classes.

The active strategy comes from settings.PRICING_STRATEGY unless a caller
asks for one explicitly.
"""

from .tiered import TieredPricingStrategy
from .volumetric import VolumetricPricingStrategy
from .base import BasePricingStrategy

PRICING_STRATEGIES: dict[str, type] = {
    "tiered": TieredPricingStrategy,
    "volumetric": VolumetricPricingStrategy,
}


def get_strategy(name: str) -> BasePricingStrategy:
    """Returns an instance of the named pricing strategy, or raises ValueError."""
    key = str(name).strip().lower()
    if key not in PRICING_STRATEGIES:
        raise ValueError(
            f"No pricing strategy registered for: {name}. "
            f"Available: {list(PRICING_STRATEGIES.keys())}"
        )
    return PRICING_STRATEGIES[key]()


def has_strategy(name: str) -> bool:
    """Check if a pricing strategy exists."""
    return str(name).strip().lower() in PRICING_STRATEGIES


def list_strategies() -> list[str]:
    """List all registered pricing strategy names."""
    return list(PRICING_STRATEGIES.keys())
