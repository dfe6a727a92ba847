from functools import lru_cache

from seo_intel.services.analyzer.seo_engine import SEOAnalysisEngine


@lru_cache(maxsize=1)
def get_engine() -> SEOAnalysisEngine:
    """
    Dependency for getting the process-wide analysis engine.
    """
    return SEOAnalysisEngine()
