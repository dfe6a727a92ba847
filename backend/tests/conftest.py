import random
from datetime import datetime
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from seo_intel.api import deps
from seo_intel.main import app
from seo_intel.services.analyzer.analysis_cache import AnalysisCache
from seo_intel.services.analyzer.seo_engine import SEOAnalysisEngine


# March: seasonal tables are indexed 0-11, so this selects index 2
FIXED_NOW = datetime(2026, 3, 15, 12, 0, 0)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def engine(rng, clock) -> SEOAnalysisEngine:
    return SEOAnalysisEngine(
        rng=rng, clock=clock, cache=AnalysisCache(max_size=64, ttl=0)
    )


@pytest.fixture
def client(engine) -> Generator[TestClient, None, None]:
    app.dependency_overrides[deps.get_engine] = lambda: engine
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
