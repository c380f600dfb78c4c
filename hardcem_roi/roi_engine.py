"""
ROI Engine.

Runs the full calculation for one CalculationInput:
material cost → freight → lifecycle → ROI → CalculationResult.
Pure math. No I/O, no state kept between calls.
"""

import logging
import math

from .calculators.registry import get_strategy
from .config import settings as default_settings
from .errors import InvalidArgumentError
from .formatter import ResultFormatter
from .freight import FreightEstimator
from .lifecycle import project_lifecycle
from .rates import PALLETS_PER_TRUCK
from .roi import (
    annualized_savings,
    compute_roi,
    downtime_cost_per_hour,
    downtime_loss_per_event,
    lifetime_savings,
)
from .schemas import CalculationInput, CalculationResult, FormattedResult

logger = logging.getLogger(__name__)


class ROIEngine:
    """
    Composes the pricing strategy, freight estimator and lifecycle/ROI math
    into a single CalculationResult.
    """

    # Divisors somewhere in the pipeline, must be strictly positive
    POSITIVE_FIELDS = ("area_sq_ft", "thickness_in", "facility_life_years")
    # Multipliers, must be finite
    FINITE_FIELDS = (
        "custom_downtime_cost_per_hour", "downtime_hours_per_event",
        "markup_percent", "dosage_percent", "fx_rate_cad_to_usd",
    )

    def __init__(self, strategy: str = None, settings=None):
        self.settings = settings or default_settings
        self.strategy = get_strategy(strategy or self.settings.PRICING_STRATEGY)
        self.freight = FreightEstimator(fallback_rate=self.settings.FREIGHT_FALLBACK_RATE)

    def calculate(self, inputs: CalculationInput) -> CalculationResult:
        """
        Compute every ROI metric from scratch.

        Raises InvalidArgumentError if area, thickness or facility life is not > 0,
        or if any numeric input is infinite or NaN.
        """
        self.validate(inputs)

        # --- Material cost ---
        material = self.strategy.calculate(
            inputs.area_sq_ft, inputs.thickness_in,
            inputs.markup_percent, inputs.dosage_percent,
        )
        material_cost = material["total_material_cost"]

        # --- Freight ---
        freight = self.freight.estimate(
            inputs.delivery_city,
            material["adjusted_lbs_per_yd3"],
            material["volume_cubic_yards"],
        )
        total_investment = material_cost + freight["freight_cost"]

        # --- Downtime + lifecycle ---
        hourly = downtime_cost_per_hour(inputs.industry, inputs.custom_downtime_cost_per_hour)
        loss_per_event = downtime_loss_per_event(hourly, inputs.downtime_hours_per_event)
        lifecycle = project_lifecycle(
            inputs.industry, inputs.thickness_in, inputs.area_sq_ft,
            inputs.facility_life_years, loss_per_event,
        )

        # --- ROI ---
        roi = compute_roi(loss_per_event, inputs.downtime_hours_per_event, material_cost)
        savings = lifetime_savings(
            lifecycle["total_resurfacing_cost"],
            lifecycle["total_downtime_cost"],
            total_investment,
        )

        logger.debug(
            "ROI run: strategy=%s area=%.0f thickness=%.2f material=%.2f freight=%.2f events=%d",
            self.strategy.name, inputs.area_sq_ft, inputs.thickness_in,
            material_cost, freight["freight_cost"], lifecycle["events"],
        )

        return CalculationResult(
            pricing_strategy=self.strategy.name,
            volume_cubic_yards=material["volume_cubic_yards"],
            adjusted_lbs_per_yd3=material["adjusted_lbs_per_yd3"],
            unit_cost_per_sq_ft=material["unit_cost_per_sq_ft"],
            total_material_cost=material_cost,
            resolved_city=freight["resolved_city"],
            freight_rate_is_fallback=freight["is_fallback"],
            freight_destination=freight["destination"],
            freight_rate_per_truck=freight["rate_per_truck"],
            material_weight_kg=freight["weight_kg"],
            pallet_count=freight["pallets"],
            freight_cost=freight["freight_cost"],
            total_investment=total_investment,
            resurfacing_interval_years=lifecycle["interval_years"],
            number_of_resurfacing_events=lifecycle["events"],
            resurfacing_cost_per_cycle=lifecycle["cost_per_cycle"],
            total_resurfacing_cost=lifecycle["total_resurfacing_cost"],
            total_downtime_cost=lifecycle["total_downtime_cost"],
            total_cost_without_additive=lifecycle["total_cost_without_additive"],
            downtime_cost_per_hour=hourly,
            downtime_loss_per_event=loss_per_event,
            roi=roi,
            lifetime_savings=savings,
            annualized_savings=annualized_savings(savings, inputs.facility_life_years),
            assumptions=self._build_assumptions(inputs, freight),
        )

    def format(self, result: CalculationResult, inputs: CalculationInput) -> FormattedResult:
        """Display strings for a result in the input's currency."""
        return ResultFormatter(inputs.currency, inputs.fx_rate_cad_to_usd).build(result)

    def validate(self, inputs: CalculationInput):
        for field in self.POSITIVE_FIELDS:
            value = getattr(inputs, field)
            if not value > 0:
                raise InvalidArgumentError(field, value)
            if not math.isfinite(value):
                raise InvalidArgumentError(field, value, "a finite number")
        for field in self.FINITE_FIELDS:
            value = getattr(inputs, field)
            if not math.isfinite(value):
                raise InvalidArgumentError(field, value, "a finite number")

    def _build_assumptions(self, inputs: CalculationInput, freight: dict) -> list:
        assumptions = []

        if self.strategy.name == "tiered":
            assumptions.append(
                "Material priced per sq ft by slab thickness tier, before markup of "
                f"{inputs.markup_percent:g}%."
            )
        else:
            assumptions.append(
                f"Material priced by volume at {inputs.dosage_percent:g}% of the "
                f"standard 2 bags/yd³ dosage, markup {inputs.markup_percent:g}%."
            )

        if freight["is_fallback"]:
            assumptions.append(
                f"No freight rate on file for '{freight['destination']}'. "
                f"Estimated at the default ${freight['rate_per_truck']:,.2f}/truck from Calgary."
            )
        else:
            assumptions.append(
                f"Freight based on truck rate from Calgary to {freight['resolved_city']} "
                f"(${freight['rate_per_truck']:,.2f}/truck, {PALLETS_PER_TRUCK:g} pallets/truck)."
            )

        if inputs.downtime_hours_per_event == 0:
            assumptions.append("No downtime hours entered, ROI not applicable.")

        if getattr(inputs.currency, "value", inputs.currency) == "USD":
            assumptions.append(
                f"USD amounts converted at a static rate of {inputs.fx_rate_cad_to_usd:g} USD per CAD."
            )

        return assumptions
