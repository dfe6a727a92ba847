import math
from typing import Dict, Any, List, Optional

from loguru import logger

from seo_intel.schemas.analysis import (
    AnalysisScores,
    CompetitionLevel,
    Competitor,
    CompetitorAnalysis,
    GapAnalysis,
    GapPosition,
    GapPriority,
    Industry,
    Trend,
)
from seo_intel.services.analyzer.base_analyzer import BaseAnalyzer
from seo_intel.services.analyzer.scoring import clamp
from seo_intel.services.competitor.industries import (
    INDUSTRY_BENCHMARKS,
    INDUSTRY_COMPETITORS,
    INDUSTRY_STRENGTHS,
    detect_industry,
    market_trends,
)


MIN_COMPETITOR_SCORE = 35
MAX_COMPETITOR_SCORE = 95
DISPLAYED_COMPETITORS = 3

KIND_OPPORTUNITIES: Dict[str, List[str]] = {
    "content": [
        "Repurpose the content into video and social formats",
        "Earn backlinks by publishing original data and research",
    ],
    "website": [
        "Improve site speed to beat slower competitor sites",
        "Add structured data that competitor pages are missing",
    ],
    "keyword": [
        "Focus on long-tail keywords where competitors show gaps",
        "Target question-based queries to win featured snippets",
    ],
    "competitor": [
        "Exploit gaps in competitor content coverage",
        "Track competitor ranking changes to react early",
    ],
}

KIND_IMPROVEMENT_AREAS: Dict[str, List[str]] = {
    "content": [
        "Strengthen topical authority with supporting articles",
        "Improve content formatting and visual elements",
    ],
    "website": [
        "Improve technical SEO health relative to competitor sites",
        "Build more authoritative backlinks to the domain",
    ],
    "keyword": [
        "Broaden keyword coverage to match competitor rankings",
        "Optimize existing pages for higher-volume keywords",
    ],
    "competitor": [
        "Benchmark content output against the top competitors",
        "Analyze competitor backlink sources for outreach targets",
    ],
}

KIND_GAP_AREAS: Dict[str, str] = {
    "content": "Content quality",
    "website": "Technical performance",
    "keyword": "Keyword targeting",
    "competitor": "Competitive positioning",
}

COMPETITION_OPPORTUNITIES: Dict[CompetitionLevel, str] = {
    CompetitionLevel.HIGH: "Differentiate with niche, long-tail topics to avoid head-to-head competition",
    CompetitionLevel.MEDIUM: "Moderate competition - consistent publishing can win key positions",
    CompetitionLevel.LOW: "Low competition - move quickly to capture top rankings",
}

FALLBACK_OPPORTUNITIES = [
    "Real-time competitor data unavailable - using fallback estimates",
    "Focus on content optimization while live competitor data is restored",
    "Monitor competitor changes when live data returns",
]


def rounded_mean(values: List[int], default: int = 65) -> int:
    if not values:
        return default
    return int(math.floor(sum(values) / len(values) + 0.5))


class CompetitiveMarketSimulator(BaseAnalyzer):
    """
    Synthesizes a competitive landscape for an analysis.

    Competitors are drawn from fixed per-industry tables and scored relative
    to the user's overall score. Market shares are illustrative and are not
    normalized to 100%.
    """

    def simulate(
        self,
        scores: AnalysisScores,
        competition_level: CompetitionLevel,
        analysis_kind: str,
        text_length: int = 0,
        domain: str = "",
        keywords: Optional[List[str]] = None,
    ) -> CompetitorAnalysis:
        """
        Build the competitor block for an analysis.

        Args:
            scores: The user's computed scores
            competition_level: Competition label derived from the overall score
            analysis_kind: Kind of analysis requested
            text_length: Length of the analyzed text in characters
            domain: Domain of the analyzed site, if any
            keywords: Keywords describing the content, used for industry detection

        Returns:
            CompetitorAnalysis with ranked competitors, insights and gap analysis
        """
        user_score = scores.overall_score
        industry = detect_industry(domain, keywords)

        competitors = self.generate_competitors(industry, user_score)
        average = rounded_mean([c.score for c in competitors])
        top = competitors[0]

        logger.debug(
            f"Simulated {len(competitors)} {industry.value} competitors, average score {average}"
        )

        return CompetitorAnalysis(
            top_competitors=competitors[:DISPLAYED_COMPETITORS],
            average_score=average,
            industry_average=average,
            competition_level=self.market_competition_level(competitors),
            market_share={c.name: self._share_value(c) for c in competitors},
            opportunities=self.generate_opportunities(
                scores, competition_level, analysis_kind, text_length
            ),
            areas_for_improvement=self.generate_improvement_areas(
                user_score, average, top, text_length, analysis_kind
            ),
            real_time_data=True,
            strengths=self.generate_strengths(scores, average, top),
            threats=self.generate_threats(user_score, average, competitors),
            gap_analysis=self.gap_analysis(user_score, average, analysis_kind),
            industry=industry.value,
            market_trends=market_trends(
                industry.value, INDUSTRY_BENCHMARKS[industry.value][0]
            ),
        )

    def retarget(
        self,
        analysis: CompetitorAnalysis,
        scores: AnalysisScores,
        competition_level: CompetitionLevel,
        analysis_kind: str,
        text_length: int = 0,
    ) -> CompetitorAnalysis:
        """
        Rebuild the kind- and text-dependent lists of an existing analysis.

        The simulated competitors and averages are kept; opportunities,
        improvement areas and the gap analysis follow the current request.
        """
        user_score = scores.overall_score
        average = analysis.industry_average
        return analysis.model_copy(
            update={
                "opportunities": self.generate_opportunities(
                    scores, competition_level, analysis_kind, text_length
                ),
                "areas_for_improvement": self.generate_improvement_areas(
                    user_score,
                    average,
                    analysis.top_competitors[0],
                    text_length,
                    analysis_kind,
                ),
                "gap_analysis": self.gap_analysis(user_score, average, analysis_kind),
            }
        )

    def generate_competitors(self, industry: Industry, user_score: int) -> List[Competitor]:
        """
        Draw three to five competitors and rank them by score.

        Args:
            industry: Detected industry
            user_score: The user's overall score

        Returns:
            Competitors sorted by score, highest first
        """
        table = INDUSTRY_COMPETITORS[industry]
        count = 3 + self.rng.randrange(3)

        drafts = []
        for slot in range(count):
            name, domain = table[slot % len(table)]
            drafts.append((name, domain, self._competitor_score(slot, user_score)))

        # Stable sort keeps table order among equal scores
        drafts.sort(key=lambda d: d[2], reverse=True)

        competitors = []
        for index, (name, domain, score) in enumerate(drafts):
            share = int(score * 30 / 100) + self.rng.randrange(10)
            traffic = int((100000 - index * 15000) * (0.8 + self.rng.random() * 0.4))
            keyword_count = int((5000 - index * 800) * (0.7 + self.rng.random() * 0.6))
            competitors.append(
                Competitor(
                    name=name,
                    domain=domain,
                    rank=index + 1,
                    score=score,
                    traffic=max(1000, traffic),
                    keywords=max(100, keyword_count),
                    market_share=f"{share}%",
                    industry=industry.value,
                    trend=self.rng.choice([Trend.UP, Trend.DOWN]),
                    key_strengths=self.rng.sample(INDUSTRY_STRENGTHS[industry], 2),
                )
            )
        return competitors

    def _competitor_score(self, slot: int, user_score: int) -> int:
        if slot == 0:
            score = min(95, user_score + 10 + self.rng.randrange(15))
        elif slot == 1:
            score = user_score + self.rng.randrange(20) - 10
        else:
            score = clamp(user_score + self.rng.randrange(40) - 20, 30, 90)
        return clamp(score, MIN_COMPETITOR_SCORE, MAX_COMPETITOR_SCORE)

    @staticmethod
    def _share_value(competitor: Competitor) -> int:
        return int(competitor.market_share.rstrip("%"))

    def market_competition_level(self, competitors: List[Competitor]) -> CompetitionLevel:
        """
        Competition level of the simulated market.

        Unlike the label derived from the user's overall score, higher
        competitor scores mean more competition here.
        """
        average = rounded_mean([c.score for c in competitors])
        top_score = competitors[0].score if competitors else 0

        if average > 80 or top_score > 90 or len(competitors) >= 5:
            return CompetitionLevel.HIGH
        if average < 60 or top_score < 70 or len(competitors) <= 2:
            return CompetitionLevel.LOW
        return CompetitionLevel.MEDIUM

    def generate_opportunities(
        self,
        scores: AnalysisScores,
        competition_level: CompetitionLevel,
        analysis_kind: str,
        text_length: int,
    ) -> List[str]:
        opportunities = []

        if scores.overall_score < 70:
            opportunities.append(
                "Improve on-page optimization to lift the overall score above 70"
            )
        if scores.keyword_density < 3:
            opportunities.append(
                "Increase keyword coverage - competitors target a wider keyword set"
            )
        if scores.trending_score < 60:
            opportunities.append(
                "Capitalize on trending topics competitors are not covering yet"
            )
        opportunities.append(COMPETITION_OPPORTUNITIES[competition_level])
        if text_length > 500:
            opportunities.append(
                "Leverage the depth of your content to outrank thinner competitor pages"
            )

        opportunities.extend(KIND_OPPORTUNITIES[analysis_kind])
        return opportunities[:6]

    def generate_improvement_areas(
        self,
        user_score: int,
        industry_average: int,
        top: Competitor,
        text_length: int,
        analysis_kind: str,
    ) -> List[str]:
        areas = []

        if user_score < industry_average:
            areas.append(
                f"Raise your score by {industry_average - user_score} points to reach "
                f"the industry average of {industry_average}"
            )
        else:
            areas.append("Keep your above-average score with regular content updates")

        if user_score < top.score:
            areas.append(
                f"Close the {top.score - user_score}-point gap to {top.name}, the current leader"
            )

        if text_length < 300:
            areas.append("Expand content depth to match competitor page length")

        areas.extend(KIND_IMPROVEMENT_AREAS[analysis_kind])
        return areas[:6]

    def generate_strengths(
        self, scores: AnalysisScores, industry_average: int, top: Competitor
    ) -> List[str]:
        strengths = []

        if scores.overall_score >= industry_average:
            strengths.append(
                f"Score of {scores.overall_score} is at or above the industry average ({industry_average})"
            )
        if scores.overall_score >= top.score:
            strengths.append("Outperforming the current market leader")
        if scores.trending_score >= 75:
            strengths.append("Stronger trend alignment than most competitors")
        if scores.readability_score >= 80:
            strengths.append("Readability advantage over typical competitor content")

        return strengths[:3]

    def generate_threats(
        self, user_score: int, industry_average: int, competitors: List[Competitor]
    ) -> List[str]:
        threats = []
        top = competitors[0]

        if top.score > user_score + 10:
            threats.append(f"{top.name} leads by {top.score - user_score} points")
        if self.market_competition_level(competitors) == CompetitionLevel.HIGH:
            threats.append("Highly competitive market with strong incumbents")

        rising = [c for c in competitors if c.trend == Trend.UP]
        if rising:
            threats.append(f"{len(rising)} competitor(s) trending upward")

        if user_score < industry_average - 10:
            threats.append(
                "Falling further behind the industry average risks losing visibility"
            )

        return threats[:4]

    def gap_analysis(
        self, user_score: int, industry_average: int, analysis_kind: str
    ) -> GapAnalysis:
        """
        Compare the user's score with the industry average.

        Args:
            user_score: The user's overall score
            industry_average: Average score of the simulated competitors
            analysis_kind: Kind of analysis requested

        Returns:
            GapAnalysis with position, priority and focus areas
        """
        score_gap = industry_average - user_score

        if score_gap > 10:
            position = GapPosition.BEHIND
        elif score_gap > -5:
            position = GapPosition.COMPETITIVE
        else:
            position = GapPosition.LEADING

        if score_gap > 15:
            priority = GapPriority.CRITICAL
        elif score_gap > 5:
            priority = GapPriority.HIGH
        else:
            priority = GapPriority.MEDIUM

        if score_gap > 20:
            time_to_close = "6-12 months"
        elif score_gap > 10:
            time_to_close = "3-6 months"
        else:
            time_to_close = "1-3 months"

        if score_gap > 15:
            key_areas = ["Comprehensive content overhaul", "Aggressive keyword expansion"]
        elif score_gap > 5:
            key_areas = ["Targeted on-page optimization", "Content depth improvements"]
        else:
            key_areas = ["Maintain content freshness", "Defend top keyword positions"]
        key_areas.append(KIND_GAP_AREAS.get(analysis_kind, "Content quality"))

        return GapAnalysis(
            score_gap=score_gap,
            position=position,
            priority=priority,
            time_to_close=time_to_close,
            key_areas=key_areas[:3],
        )


def fallback_competitor_analysis(
    user_score: int = 50, analysis_kind: str = "content"
) -> CompetitorAnalysis:
    """Static competitor block used when simulation fails."""
    industry = Industry.MARKETING.value
    competitors = [
        Competitor(
            name="Industry Leader",
            domain="industry-leader.example",
            rank=1,
            score=75,
            traffic=50000,
            keywords=2500,
            market_share="25%",
            industry=industry,
            trend=Trend.UP,
            key_strengths=["Established domain authority", "Consistent publishing"],
        ),
        Competitor(
            name="Market Challenger",
            domain="market-challenger.example",
            rank=2,
            score=65,
            traffic=30000,
            keywords=1500,
            market_share="18%",
            industry=industry,
            trend=Trend.DOWN,
            key_strengths=["Niche focus", "Active social presence"],
        ),
    ]
    average = rounded_mean([c.score for c in competitors])
    gap = CompetitiveMarketSimulator().gap_analysis(user_score, average, analysis_kind)

    return CompetitorAnalysis(
        top_competitors=competitors,
        average_score=average,
        industry_average=average,
        competition_level=CompetitionLevel.MEDIUM,
        market_share={c.name: int(c.market_share.rstrip("%")) for c in competitors},
        opportunities=list(FALLBACK_OPPORTUNITIES),
        areas_for_improvement=["Focus on core content optimization"],
        real_time_data=False,
        strengths=[],
        threats=[],
        gap_analysis=gap,
        industry=industry,
        market_trends=market_trends(industry, INDUSTRY_BENCHMARKS[industry][0]),
    )
