"""
Tiered pricing.

Flat pre-markup $/sq ft stepped by slab thickness, then markup.
"""

from .base import BasePricingStrategy
from ..rates import apply_markup, tiered_price_per_sqft


class TieredPricingStrategy(BasePricingStrategy):

    name = "tiered"

    def calculate(self, area_sq_ft: float, thickness_in: float,
                  markup_pct: float, dosage_pct: float) -> dict:
        base_price = tiered_price_per_sqft(thickness_in)
        unit_cost = apply_markup(base_price, markup_pct)
        total_cost = area_sq_ft * unit_cost

        # Pricing ignores dosage, but freight still ships the physical material
        return self.make_material_cost(
            total_cost=total_cost,
            area_sq_ft=area_sq_ft,
            volume_yd3=self.volume_yd3(area_sq_ft, thickness_in),
            lbs_per_yd3=self.loading_lbs_per_yd3(dosage_pct),
            unit_cost=unit_cost,
            base_price_per_sq_ft=base_price,
        )
