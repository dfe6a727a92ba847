import random
import threading
from datetime import datetime
from enum import Enum
from typing import Dict, Any, List, Optional, Callable
from urllib.parse import urlparse

from loguru import logger

from seo_intel.core.config import settings
from seo_intel.core.exceptions import InternalComputationError, ValidationError
from seo_intel.schemas.analysis import (
    AnalysisKind,
    AnalysisRequest,
    AnalysisResult,
    AnalysisScores,
    CompetitionLevel,
    IndustryBenchmark,
    Insights,
    TextFeatures,
)
from seo_intel.services.analyzer.analysis_cache import AnalysisCache, fingerprint
from seo_intel.services.analyzer.insight_generator import InsightGenerator
from seo_intel.services.analyzer.keyword_synthesizer import KeywordSynthesizer
from seo_intel.services.analyzer.scoring import ScoreCalculator, competition_level_for
from seo_intel.services.analyzer.text_features import TextFeatureExtractor
from seo_intel.services.analyzer.utils.text_utils import TextProcessor, dedupe
from seo_intel.services.competitor.industries import industry_benchmarks
from seo_intel.services.competitor.market_simulator import (
    CompetitiveMarketSimulator,
    fallback_competitor_analysis,
)


class EngineState(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"


class SEOAnalysisEngine:
    """
    Single entry point for content SEO analysis.

    Coordinates feature extraction, scoring, keyword and tag synthesis,
    insight generation and competitor simulation. Any unexpected failure is
    logged and answered with a fixed fallback result, so only request
    validation errors ever reach the caller.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        cache: Optional[AnalysisCache] = None,
    ):
        """
        Initialize the engine.

        Args:
            config: Optional configuration overriding settings
            rng: Random source shared by all components
            clock: Callable returning the current time
            cache: Cache for synthesized competitor bundles
        """
        self.config = config or {}
        self.max_text_length = self.config.get("max_text_length", settings.MAX_TEXT_LENGTH)
        self.enable_cache = self.config.get("enable_cache", True)

        if rng is None:
            seed = self.config.get("random_seed", settings.ANALYSIS_RANDOM_SEED)
            rng = random.Random(seed)
        self.rng = rng

        # An empty cache is falsy, so compare against None
        if cache is None:
            cache = AnalysisCache(
                max_size=self.config.get("cache_max_size", settings.ANALYSIS_CACHE_MAX_SIZE),
                ttl=self.config.get("cache_ttl", settings.ANALYSIS_CACHE_TTL),
            )
        self.cache = cache

        self.text_processor = TextProcessor()
        self.feature_extractor = TextFeatureExtractor()
        self.score_calculator = ScoreCalculator(
            self.config.get("scoring_config", {}), rng=rng, clock=clock
        )
        self.keyword_synthesizer = KeywordSynthesizer(
            self.config.get("keyword_config", {}), rng=rng, clock=clock
        )
        self.insight_generator = InsightGenerator(rng=rng, clock=clock)
        self.market_simulator = CompetitiveMarketSimulator(
            self.config.get("competitor_config", {}), rng=rng, clock=clock
        )

        self._active = 0
        self._state_lock = threading.Lock()

    @property
    def state(self) -> EngineState:
        with self._state_lock:
            return EngineState.ANALYZING if self._active else EngineState.IDLE

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """
        Run the full analysis for a request.

        Args:
            request: The analysis request

        Returns:
            AnalysisResult; the fallback result if the pipeline fails

        Raises:
            ValidationError: If the request is malformed
        """
        self.validate(request)

        with self._state_lock:
            self._active += 1
        start_time = datetime.now()
        try:
            logger.info(f"Starting {request.analysis_kind} analysis")
            result = self._run_pipeline(request)
            logger.info(
                f"Analysis completed in {(datetime.now() - start_time).total_seconds():.3f} seconds"
            )
            return result
        except Exception as e:
            error = (
                e
                if isinstance(e, InternalComputationError)
                else InternalComputationError(str(e))
            )
            logger.opt(exception=e).error(
                f"Analysis failed, returning fallback result: {error}"
            )
            return self.fallback_result(request)
        finally:
            with self._state_lock:
                self._active -= 1

    def validate(self, request: AnalysisRequest) -> None:
        """
        Check a request before analysis.

        Raises:
            ValidationError: Empty text for non-website kinds, or a missing or
                malformed URL for website analysis
        """
        text = request.text
        if request.analysis_kind == AnalysisKind.WEBSITE.value:
            url = (request.url or "").strip()
            if not url:
                raise ValidationError("A URL is required for website analysis", field="url")
            parsed = urlparse(url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ValidationError(f"Invalid URL: {url}", field="url")
            return

        if text is None or (isinstance(text, str) and not text.strip()):
            raise ValidationError("Text to analyze must not be empty", field="text")

    def _run_pipeline(self, request: AnalysisRequest) -> AnalysisResult:
        try:
            kind = AnalysisKind(request.analysis_kind)
        except ValueError as e:
            raise InternalComputationError(str(e), stage="dispatch") from e

        text = self._analysis_text(request)
        scores = self.score_calculator.calculate(text, kind.value)

        if len(text) > self.max_text_length:
            logger.warning(
                f"Text is too long ({len(text)} characters), truncating to {self.max_text_length}"
            )
            text = text[: self.max_text_length]

        features = self.feature_extractor.extract(text)
        competition_level = competition_level_for(scores.overall_score)

        keywords = self.keyword_synthesizer.generate_keywords(kind.value, text)
        hashtags = self.keyword_synthesizer.generate_hashtags(kind.value, text)
        trending_tags = self.keyword_synthesizer.generate_trending_tags(kind.value, text)

        insights = self.insight_generator.generate(
            scores, competition_level, features, kind.value, request.url
        )

        bundle = self._competitor_bundle(request, kind, scores, competition_level, text)

        return AnalysisResult(
            analysis_kind=kind.value,
            overall_score=scores.overall_score,
            keyword_density=scores.keyword_density,
            readability_score=scores.readability_score,
            trending_score=scores.trending_score,
            competition_level=competition_level,
            search_volume=bundle["search_volume"],
            keywords=keywords,
            hashtags=hashtags,
            trending_tags=trending_tags,
            competitor_analysis=bundle["competitor_analysis"],
            insights=insights,
            features=features,
        )

    def _analysis_text(self, request: AnalysisRequest):
        text = request.text
        if (
            request.analysis_kind == AnalysisKind.WEBSITE.value
            and isinstance(text, str)
            and not text.strip()
        ):
            return request.url.strip()
        return text

    def _competitor_bundle(
        self,
        request: AnalysisRequest,
        kind: AnalysisKind,
        scores: AnalysisScores,
        competition_level: CompetitionLevel,
        text: str,
    ) -> Dict[str, Any]:
        """Competitor analysis and search volume, cached by score fingerprint."""
        key = fingerprint(scores.as_tuple())
        if self.enable_cache:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug(f"Using cached competitor analysis for {key}")
                return {
                    "competitor_analysis": self.market_simulator.retarget(
                        cached["competitor_analysis"],
                        scores,
                        competition_level,
                        kind.value,
                        text_length=len(text),
                    ),
                    "search_volume": cached["search_volume"],
                }

        try:
            competitor_analysis = self.market_simulator.simulate(
                scores,
                competition_level,
                kind.value,
                text_length=len(text),
                domain=self._domain(request.url),
                keywords=self._industry_keywords(text),
            )
        except Exception as e:
            logger.opt(exception=e).error(
                f"Competitor simulation failed, using fallback data: {e}"
            )
            return {
                "competitor_analysis": fallback_competitor_analysis(
                    scores.overall_score, kind.value
                ),
                "search_volume": self.score_calculator.search_volume(),
            }

        bundle = {
            "competitor_analysis": competitor_analysis,
            "search_volume": self.score_calculator.search_volume(),
        }
        if self.enable_cache:
            self.cache.put(key, bundle)
        return bundle

    @staticmethod
    def _domain(url: Optional[str]) -> str:
        if not url:
            return ""
        return urlparse(url.strip()).netloc

    def _industry_keywords(self, text: str) -> List[str]:
        return dedupe(self.text_processor.content_tokens(text), limit=50)

    def fallback_result(self, request: AnalysisRequest) -> AnalysisResult:
        """Fixed, always-valid result returned when analysis fails."""
        kind = request.analysis_kind if isinstance(request.analysis_kind, str) else "content"
        return AnalysisResult(
            analysis_kind=kind,
            overall_score=50,
            keyword_density=2,
            readability_score=60,
            trending_score=50,
            competition_level=competition_level_for(50),
            search_volume=1000,
            keywords=["SEO optimization", "content marketing", "digital marketing"],
            hashtags=["#SEO", "#ContentMarketing", "#DigitalMarketing"],
            trending_tags=["#SEO", "#Marketing"],
            competitor_analysis=fallback_competitor_analysis(50, kind),
            insights=Insights(
                strengths=["Content received for analysis"],
                weaknesses=["Detailed analysis is temporarily unavailable"],
                recommendations=[
                    "Run the analysis again in a few moments",
                    "Review basic on-page SEO: title, headings and meta description",
                ],
            ),
            features=TextFeatures(),
            fallback=True,
        )

    def benchmarks(self, industry: str) -> IndustryBenchmark:
        return industry_benchmarks(industry, strict=True)

    def clear_cache(self) -> None:
        """Clear cached competitor bundles."""
        self.cache.clear()
