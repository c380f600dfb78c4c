"""
Shared test fixtures: test client and a default ROI engine.
"""

import pytest
from fastapi.testclient import TestClient

from hardcem_roi.main import app
from hardcem_roi.roi_engine import ROIEngine


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def volumetric_engine():
    return ROIEngine(strategy="volumetric")


@pytest.fixture
def tiered_engine():
    return ROIEngine(strategy="tiered")
