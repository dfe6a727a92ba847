from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response
from loguru import logger

from seo_intel import schemas
from seo_intel.api import deps
from seo_intel.core.exceptions import UnknownIndustryError, ValidationError
from seo_intel.services.analyzer.seo_engine import SEOAnalysisEngine

router = APIRouter()


@router.post("/analysis", response_model=schemas.AnalysisResult)
def analyze_content(
    *,
    request: schemas.AnalysisRequest,
    engine: SEOAnalysisEngine = Depends(deps.get_engine),
) -> Any:
    """
    Analyze text, a website URL, a keyword or a competitor query.
    """
    try:
        return engine.analyze(request)
    except ValidationError as e:
        logger.info(f"Rejected analysis request: {e.message}")
        raise HTTPException(status_code=422, detail=e.message)


@router.get(
    "/analysis/benchmarks/{industry}", response_model=schemas.IndustryBenchmark
)
def read_industry_benchmarks(
    industry: str,
    engine: SEOAnalysisEngine = Depends(deps.get_engine),
) -> Any:
    """
    Get benchmark figures for an industry.
    """
    try:
        return engine.benchmarks(industry)
    except UnknownIndustryError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/analysis/cache", response_model=schemas.CacheStats)
def read_cache_stats(engine: SEOAnalysisEngine = Depends(deps.get_engine)) -> Any:
    """
    Get analysis cache statistics.
    """
    return engine.cache.stats


@router.delete("/analysis/cache", status_code=204)
def clear_cache(engine: SEOAnalysisEngine = Depends(deps.get_engine)) -> Response:
    """
    Clear the analysis cache.
    """
    engine.clear_cache()
    return Response(status_code=204)
