from typing import Dict, Tuple

from loguru import logger

from seo_intel.core.exceptions import InvalidInputError
from seo_intel.schemas.analysis import AnalysisScores, CompetitionLevel
from seo_intel.services.analyzer.base_analyzer import BaseAnalyzer


# score name -> (base, random span, lower clamp, upper clamp)
SCORE_BANDS: Dict[str, Tuple[int, int, int, int]] = {
    "overall_score": (60, 30, 45, 95),
    "keyword_density": (2, 6, 1, 8),
    "readability_score": (70, 25, 50, 95),
    "trending_score": (55, 35, 40, 90),
}


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def competition_level_for(overall_score: int) -> CompetitionLevel:
    """
    Competition label shown next to the overall score.

    A higher overall score reads as *lower* competition here. The competitor
    simulator derives its own level from competitor scores instead.
    """
    if overall_score <= 50:
        return CompetitionLevel.HIGH
    if overall_score <= 75:
        return CompetitionLevel.MEDIUM
    return CompetitionLevel.LOW


class ScoreCalculator(BaseAnalyzer):
    """Computes the four bounded analysis scores."""

    def calculate(self, text: str, analysis_kind: str) -> AnalysisScores:
        """
        Score the input, simulating measurement noise within fixed bands.

        Args:
            text: Text being analyzed
            analysis_kind: Kind of analysis requested

        Returns:
            The four clamped integer scores
        """
        if not isinstance(text, str):
            raise InvalidInputError(
                f"Expected text to be str, got {type(text).__name__}"
            )

        bands = self.config.get("score_bands", SCORE_BANDS)
        scores = {}
        for name, (base, span, lower, upper) in bands.items():
            scores[name] = clamp(base + self.rng.randrange(span), lower, upper)

        logger.debug(f"Scores for {analysis_kind} analysis: {scores}")
        return AnalysisScores(**scores)

    def search_volume(self) -> int:
        """Illustrative monthly search volume."""
        return 1000 + self.rng.randrange(49000)
