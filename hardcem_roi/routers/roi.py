"""
ROI API: thin request layer over ROIEngine.

GET  /api/roi/options    dropdown values and defaults for the calculator form
POST /api/roi/calculate  run the engine, return result + formatted strings
POST /api/roi/pdf        same inputs, return a one-page PDF summary
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..calculators.registry import list_strategies
from ..config import settings
from ..errors import InvalidArgumentError
from ..freight import FreightEstimator
from ..pdf_generator import generate_roi_pdf
from ..rates import (
    DOSAGE_MAX_PCT,
    DOSAGE_MIN_PCT,
    DOSAGE_STEP_PCT,
    INDUSTRY_DOWNTIME_COST_PER_HOUR,
    MARKUP_PROFILES,
)
from ..roi_engine import ROIEngine
from ..schemas import Currency, ROIRequest, ROIResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roi", tags=["roi"])

# Default engine holds no state, safe to share across requests
engine = ROIEngine()


def _engine_for(request: ROIRequest) -> ROIEngine:
    if not request.pricing_strategy:
        return engine
    try:
        return ROIEngine(strategy=request.pricing_strategy)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _run(request: ROIRequest):
    roi_engine = _engine_for(request)
    inputs = request.to_calculation_input()
    try:
        result = roi_engine.calculate(inputs)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return inputs, result, roi_engine.format(result, inputs)


@router.get("/options")
def get_options():
    """Everything the form needs to render its selectors."""
    return {
        "industries": [
            {"id": industry, "downtime_cost_per_hour": cost}
            for industry, cost in INDUSTRY_DOWNTIME_COST_PER_HOUR.items()
        ],
        "markup_profiles": MARKUP_PROFILES,
        "dosage": {
            "min": DOSAGE_MIN_PCT,
            "max": DOSAGE_MAX_PCT,
            "step": DOSAGE_STEP_PCT,
            "default": 100.0,
        },
        "currencies": [c.value for c in Currency],
        "freight_cities": FreightEstimator().known_cities(),
        "pricing_strategies": list_strategies(),
        "default_pricing_strategy": settings.PRICING_STRATEGY,
        "fx_rate_cad_to_usd": settings.FX_RATE_CAD_TO_USD,
    }


@router.post("/calculate", response_model=ROIResponse)
def calculate(request: ROIRequest):
    """
    Run the ROI calculation.

    Dosage is already clamped and markup checked by ROIRequest.
    Non-positive area, thickness or facility life → 422.
    """
    _, result, formatted = _run(request)
    return {"result": result, "formatted": formatted}


@router.post("/pdf")
def download_pdf(request: ROIRequest):
    """Returns: application/pdf"""
    inputs, result, formatted = _run(request)
    pdf_bytes = generate_roi_pdf(inputs, result, formatted, company_name=settings.COMPANY_NAME)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="hardcem-roi-summary.pdf"'},
    )
