from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import roi

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("hardcem_roi")

app = FastAPI(
    title="Hard-Cem ROI Calculator",
    description="Return on investment of Hard-Cem versus conventional floor resurfacing",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(roi.router, prefix="/api")

logger.info("Pricing strategy: %s, FX rate CAD→USD: %s",
            settings.PRICING_STRATEGY, settings.FX_RATE_CAD_TO_USD)


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
