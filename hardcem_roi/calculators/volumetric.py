"""
Volumetric pricing.

Slab volume (yd³) × dosage-adjusted loading (lb/yd³) × $/lb, then markup.
Cost per sq ft is derived from the total, never priced directly.
"""

from .base import BasePricingStrategy
from ..rates import BASE_COST_PER_LB, apply_markup


class VolumetricPricingStrategy(BasePricingStrategy):

    name = "volumetric"

    def calculate(self, area_sq_ft: float, thickness_in: float,
                  markup_pct: float, dosage_pct: float) -> dict:
        volume_yd3 = self.volume_yd3(area_sq_ft, thickness_in)
        lbs_per_yd3 = self.loading_lbs_per_yd3(dosage_pct)

        raw_cost_per_yd3 = lbs_per_yd3 * BASE_COST_PER_LB
        marked_up_cost_per_yd3 = apply_markup(raw_cost_per_yd3, markup_pct)
        total_cost = volume_yd3 * marked_up_cost_per_yd3

        return self.make_material_cost(
            total_cost=total_cost,
            area_sq_ft=area_sq_ft,
            volume_yd3=volume_yd3,
            lbs_per_yd3=lbs_per_yd3,
            raw_cost_per_yd3=raw_cost_per_yd3,
            marked_up_cost_per_yd3=marked_up_cost_per_yd3,
        )
