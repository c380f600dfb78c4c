from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
import enum

from .config import settings
from .rates import MARKUP_PROFILES, clamp_dosage


class Industry(str, enum.Enum):
    MANUFACTURING = "manufacturing"
    AUTOMOTIVE = "automotive"
    DATACENTER = "datacenter"
    HYDRO = "hydro"
    CUSTOM = "custom"


class Currency(str, enum.Enum):
    CAD = "CAD"
    USD = "USD"


class CalculationInput(BaseModel):
    area_sq_ft: float
    thickness_in: float
    facility_life_years: float
    industry: Industry = Industry.MANUFACTURING
    custom_downtime_cost_per_hour: float = 0.0
    downtime_hours_per_event: float = 0.0
    markup_percent: float = 25.0
    dosage_percent: float = 100.0
    delivery_city: str = ""
    currency: Currency = Currency.CAD
    fx_rate_cad_to_usd: float = Field(default=settings.FX_RATE_CAD_TO_USD, gt=0)

    class Config:
        frozen = True


class CalculationResult(BaseModel):
    pricing_strategy: str
    # Material
    volume_cubic_yards: float
    adjusted_lbs_per_yd3: float
    unit_cost_per_sq_ft: Optional[float] = None  # None when area is 0
    total_material_cost: float
    # Freight
    resolved_city: Optional[str] = None  # None when the fallback rate was used
    freight_rate_is_fallback: bool
    freight_destination: str
    freight_rate_per_truck: float
    material_weight_kg: float
    pallet_count: float
    freight_cost: float
    total_investment: float
    # Lifecycle
    resurfacing_interval_years: float
    number_of_resurfacing_events: int
    resurfacing_cost_per_cycle: float
    total_resurfacing_cost: float
    total_downtime_cost: float
    total_cost_without_additive: float
    # ROI
    downtime_cost_per_hour: float
    downtime_loss_per_event: float
    roi: Optional[float] = None  # None when downtime hours is 0
    lifetime_savings: float
    annualized_savings: float
    assumptions: List[str] = []

    class Config:
        frozen = True


class FormattedResult(BaseModel):
    """Display-only projection of a CalculationResult in the selected currency."""
    currency: Currency
    fx_rate: float
    unit_cost_per_sq_ft: str
    total_material_cost: str
    freight_cost: str
    freight_destination: str
    total_investment: str
    downtime_loss_per_event: str
    roi: str
    resurfacing_interval: str
    resurfacing_events: str
    total_resurfacing_cost: str
    total_downtime_cost: str
    lifetime_savings: str
    annualized_savings: str


class ROIRequest(BaseModel):
    """
    API request body. Defaults match the calculator's initial form state.

    Dosage is clamped into the slider range and markup is restricted to the
    three supported profiles before the engine sees it.
    """
    area_sq_ft: float = 50000.0
    thickness_in: float = 6.0
    facility_life_years: float = 20.0
    industry: Industry = Industry.MANUFACTURING
    custom_downtime_cost_per_hour: float = Field(default=0.0, ge=0)
    downtime_hours_per_event: float = Field(default=3.0, ge=0)
    markup_percent: float = float(MARKUP_PROFILES["readymix"])
    markup_profile: Optional[str] = None  # "distributor" | "readymix" | "enduser", wins over markup_percent
    dosage_percent: float = 100.0
    delivery_city: str = ""
    currency: Currency = Currency(settings.DEFAULT_CURRENCY)
    fx_rate_cad_to_usd: float = Field(default=settings.FX_RATE_CAD_TO_USD, gt=0)
    pricing_strategy: Optional[str] = None

    @field_validator("dosage_percent")
    @classmethod
    def _clamp_dosage(cls, v: float) -> float:
        return clamp_dosage(v)

    @field_validator("markup_percent")
    @classmethod
    def _check_markup(cls, v: float) -> float:
        allowed = sorted(MARKUP_PROFILES.values())
        if v not in allowed:
            raise ValueError(f"markup_percent must be one of {allowed}")
        return float(v)

    @field_validator("markup_profile")
    @classmethod
    def _check_markup_profile(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        key = v.strip().lower().replace("-", "").replace(" ", "")
        if key not in MARKUP_PROFILES:
            raise ValueError(f"markup_profile must be one of {list(MARKUP_PROFILES.keys())}")
        return key

    def to_calculation_input(self) -> CalculationInput:
        markup = self.markup_percent
        if self.markup_profile:
            markup = float(MARKUP_PROFILES[self.markup_profile])
        return CalculationInput(
            area_sq_ft=self.area_sq_ft,
            thickness_in=self.thickness_in,
            facility_life_years=self.facility_life_years,
            industry=self.industry,
            custom_downtime_cost_per_hour=self.custom_downtime_cost_per_hour,
            downtime_hours_per_event=self.downtime_hours_per_event,
            markup_percent=markup,
            dosage_percent=self.dosage_percent,
            delivery_city=self.delivery_city,
            currency=self.currency,
            fx_rate_cad_to_usd=self.fx_rate_cad_to_usd,
        )


class ROIResponse(BaseModel):
    result: CalculationResult
    formatted: FormattedResult
