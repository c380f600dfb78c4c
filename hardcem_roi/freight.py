"""
Freight Estimator: truck freight from Calgary to the delivery city.

An unknown or blank city is NOT an error. It falls back to a flat per-truck
rate, and the estimate says so (resolved_city=None, is_fallback=True) so the
quote can disclose it instead of presenting it as an exact lane rate.
"""

import logging
from typing import Optional

from .config import settings
from .rates import (
    FREIGHT_RATES_CAD,
    KG_PER_PALLET,
    PALLETS_PER_TRUCK,
    lbs_to_kg,
)

logger = logging.getLogger(__name__)


def normalize_city(city: Optional[str]) -> str:
    """Trim and lowercase a city name for table matching."""
    return str(city or "").strip().lower()


class FreightEstimator:
    """
    Resolves a delivery city to a per-truck rate and prices the shipment
    by pallet count.
    """

    def __init__(self, rates: dict = None, fallback_rate: float = None):
        self.rates = dict(FREIGHT_RATES_CAD if rates is None else rates)
        if fallback_rate is None:
            fallback_rate = settings.FREIGHT_FALLBACK_RATE
        self.fallback_rate = fallback_rate

    def resolve_rate(self, city: str) -> tuple:
        """
        Returns (matched_city, rate_per_truck).
        matched_city is the table key as written in the table, or None on fallback.
        """
        wanted = normalize_city(city)
        if wanted:
            for known_city, rate in self.rates.items():
                if normalize_city(known_city) == wanted:
                    return known_city, rate
        return None, self.fallback_rate

    def estimate(self, city: str, lbs_per_yd3: float, volume_yd3: float) -> dict:
        """
        Build a FreightEstimate dict.

        Args:
            city: free-form delivery city text, may be empty
            lbs_per_yd3: dosage-adjusted additive loading
            volume_yd3: slab volume in cubic yards

        Returns:
            {
                resolved_city: str | None,
                is_fallback: bool,
                destination: str,
                rate_per_truck: float,
                weight_kg: float,
                pallets: float,
                cost_per_pallet: float,
                freight_cost: float,
            }
        """
        matched_city, rate = self.resolve_rate(city)
        if matched_city is None:
            logger.info("No freight lane for %r, using fallback rate %.2f/truck", city, rate)

        weight_kg = lbs_to_kg(lbs_per_yd3 * volume_yd3)
        pallets = weight_kg / KG_PER_PALLET
        cost_per_pallet = rate / PALLETS_PER_TRUCK

        return {
            "resolved_city": matched_city,
            "is_fallback": matched_city is None,
            "destination": self.destination_label(city, matched_city),
            "rate_per_truck": rate,
            "weight_kg": weight_kg,
            "pallets": pallets,
            "cost_per_pallet": cost_per_pallet,
            "freight_cost": cost_per_pallet * pallets,
        }

    def destination_label(self, city: str, matched_city: Optional[str]) -> str:
        """Matched city, else what the user typed, else 'unknown city'."""
        if matched_city:
            return matched_city
        typed = str(city or "").strip()
        return typed or "unknown city"

    def known_cities(self) -> list:
        return list(self.rates.keys())
