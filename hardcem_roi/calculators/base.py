"""
Abstract base class for material pricing strategies.

Input: area (sq ft), thickness (in), markup (%), dosage (% of standard)
Output: MaterialCost dict
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..rates import adjusted_lbs_per_yd3, slab_volume_yd3


class BasePricingStrategy(ABC):
    """All pricing strategies inherit from this."""

    name = ""

    @abstractmethod
    def calculate(self, area_sq_ft: float, thickness_in: float,
                  markup_pct: float, dosage_pct: float) -> dict:
        """
        Returns a MaterialCost dict built with make_material_cost().
        """
        pass

    # --- Helper methods for all strategies ---

    def unit_cost_per_sq_ft(self, total_cost: float, area_sq_ft: float) -> Optional[float]:
        """Total cost spread over the slab area. None when there is no area to spread over."""
        if area_sq_ft == 0:
            return None
        return total_cost / area_sq_ft

    def volume_yd3(self, area_sq_ft: float, thickness_in: float) -> float:
        return slab_volume_yd3(area_sq_ft, thickness_in)

    def loading_lbs_per_yd3(self, dosage_pct: float) -> float:
        return adjusted_lbs_per_yd3(dosage_pct)

    def make_material_cost(self, total_cost: float, area_sq_ft: float,
                           volume_yd3: float, lbs_per_yd3: float,
                           unit_cost: Optional[float] = None,
                           **details) -> dict:
        """
        Build the MaterialCost dict.

        unit_cost defaults to total_cost / area; tiered pricing passes its own.
        """
        if unit_cost is None:
            unit_cost = self.unit_cost_per_sq_ft(total_cost, area_sq_ft)
        elif area_sq_ft == 0:
            unit_cost = None
        result = {
            "strategy": self.name,
            "total_material_cost": total_cost,
            "unit_cost_per_sq_ft": unit_cost,
            "volume_cubic_yards": volume_yd3,
            "adjusted_lbs_per_yd3": lbs_per_yd3,
        }
        result.update(details)
        return result
