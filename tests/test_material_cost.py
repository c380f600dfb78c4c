"""
Material cost tests: tiered and volumetric pricing strategies.

Tests:
1-4.   Tiered price steps and markup
5-8.   Volumetric pricing
9-10.  Zero-area guard
11-14. Strategy registry
"""

import pytest

from hardcem_roi.calculators.base import BasePricingStrategy
from hardcem_roi.calculators.registry import get_strategy, has_strategy, list_strategies
from hardcem_roi.calculators.tiered import TieredPricingStrategy
from hardcem_roi.calculators.volumetric import VolumetricPricingStrategy
from hardcem_roi.rates import tiered_price_per_sqft


# ============================================================
# 1-4. Tiered
# ============================================================

@pytest.mark.parametrize("thickness, price", [
    (2.0, 0.95),
    (4.0, 0.95),
    (4.01, 0.63),
    (6.0, 0.63),
    (6.5, 0.47),
    (12.0, 0.47),
])
def test_tiered_price_steps(thickness, price):
    """≤4" → 0.95, (4, 6] → 0.63, > 6" → 0.47 before markup."""
    assert tiered_price_per_sqft(thickness) == price
    material = TieredPricingStrategy().calculate(1000, thickness, 0, 100)
    assert material["base_price_per_sq_ft"] == price


def test_tiered_total_applies_markup():
    material = TieredPricingStrategy().calculate(50000, 6, 25, 100)
    assert material["unit_cost_per_sq_ft"] == pytest.approx(0.7875)
    assert material["total_material_cost"] == pytest.approx(39375.0)


def test_tiered_markup_profiles_scale_total():
    calc = TieredPricingStrategy()
    distributor = calc.calculate(10000, 4, 15, 100)["total_material_cost"]
    enduser = calc.calculate(10000, 4, 40, 100)["total_material_cost"]
    assert distributor == pytest.approx(10000 * 0.95 * 1.15)
    assert enduser == pytest.approx(10000 * 0.95 * 1.40)


def test_tiered_reports_physical_material_for_freight():
    """Tiered pricing ignores dosage, but weight for freight still follows it."""
    material = TieredPricingStrategy().calculate(50000, 6, 25, 50)
    assert material["volume_cubic_yards"] == pytest.approx(50000 * 0.5 / 27)
    assert material["adjusted_lbs_per_yd3"] == pytest.approx(33.0)


# ============================================================
# 5-8. Volumetric
# ============================================================

def test_volumetric_standard_dosage():
    """50,000 sq ft × 6" at 100% dosage, 25% markup."""
    material = VolumetricPricingStrategy().calculate(50000, 6, 25, 100)
    assert material["volume_cubic_yards"] == pytest.approx(925.93, abs=0.01)
    assert material["adjusted_lbs_per_yd3"] == pytest.approx(66.0)
    assert material["raw_cost_per_yd3"] == pytest.approx(21.12)
    assert material["marked_up_cost_per_yd3"] == pytest.approx(26.40)
    assert material["total_material_cost"] == pytest.approx(24444.44, abs=0.01)


def test_volumetric_unit_cost_is_derived_from_total():
    material = VolumetricPricingStrategy().calculate(50000, 6, 25, 100)
    assert material["unit_cost_per_sq_ft"] == pytest.approx(
        material["total_material_cost"] / 50000
    )


def test_volumetric_dosage_scales_linearly():
    calc = VolumetricPricingStrategy()
    full = calc.calculate(20000, 8, 25, 100)["total_material_cost"]
    half = calc.calculate(20000, 8, 25, 50)["total_material_cost"]
    heavy = calc.calculate(20000, 8, 25, 125)["total_material_cost"]
    assert half == pytest.approx(full * 0.5)
    assert heavy == pytest.approx(full * 1.25)


def test_volumetric_strategy_name():
    material = VolumetricPricingStrategy().calculate(1000, 4, 15, 100)
    assert material["strategy"] == "volumetric"


# ============================================================
# 9-10. Zero-area guard
# ============================================================

def test_volumetric_zero_area_unit_cost_not_applicable():
    material = VolumetricPricingStrategy().calculate(0, 6, 25, 100)
    assert material["total_material_cost"] == 0
    assert material["unit_cost_per_sq_ft"] is None


def test_tiered_zero_area_unit_cost_not_applicable():
    material = TieredPricingStrategy().calculate(0, 6, 25, 100)
    assert material["unit_cost_per_sq_ft"] is None


# ============================================================
# 11-14. Registry
# ============================================================

def test_registry_lists_both_strategies():
    assert set(list_strategies()) == {"tiered", "volumetric"}


def test_get_strategy_returns_instance():
    strategy = get_strategy(" Tiered ")
    assert isinstance(strategy, TieredPricingStrategy)
    assert isinstance(strategy, BasePricingStrategy)


def test_get_strategy_unknown_raises():
    with pytest.raises(ValueError, match="Available"):
        get_strategy("per_bag")


def test_has_strategy():
    assert has_strategy("volumetric")
    assert not has_strategy("per_bag")
