from pydantic_settings import BaseSettings

from .rates import FALLBACK_FREIGHT_RATE_CAD


class Settings(BaseSettings):
    APP_NAME: str = "hardcem-roi-calculator"
    COMPANY_NAME: str = "Hard-Cem"
    LOG_LEVEL: str = "INFO"

    # Pricing model: "volumetric" (dosage-based) or "tiered" (flat $/sq ft by thickness)
    PRICING_STRATEGY: str = "volumetric"

    # Static FX rate, never fetched live
    FX_RATE_CAD_TO_USD: float = 0.73
    DEFAULT_CURRENCY: str = "CAD"

    # Per-truck rate (CAD) applied when the delivery city is not in the freight table
    FREIGHT_FALLBACK_RATE: float = FALLBACK_FREIGHT_RATE_CAD

    class Config:
        env_file = ".env"


settings = Settings()
