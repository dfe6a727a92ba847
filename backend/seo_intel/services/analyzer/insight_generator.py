from typing import Dict, List, Optional
from urllib.parse import urlparse

from seo_intel.schemas.analysis import (
    AnalysisScores,
    CompetitionLevel,
    Insights,
    TextFeatures,
)
from seo_intel.services.analyzer.base_analyzer import BaseAnalyzer


KIND_RECOMMENDATIONS: Dict[str, List[str]] = {
    "content": [
        "Add images or video to increase engagement",
        "Link to related articles to build topical authority",
    ],
    "website": [
        "Improve page load speed and Core Web Vitals performance",
        "Add schema markup so pages qualify for rich results",
    ],
    "keyword": [
        "Target long-tail variations of your main keywords",
        "Match the content format to the search intent behind each keyword",
    ],
    "competitor": [
        "Close the content gaps where competitors outrank you",
        "Set up ongoing monitoring of competitor rankings and content",
    ],
}

CLOSING_RECOMMENDATIONS = [
    "Refresh the content regularly to keep it current",
    "Monitor rankings, traffic and engagement metrics to measure impact",
]


class InsightGenerator(BaseAnalyzer):
    """
    Maps scores and structural features to strengths, weaknesses and
    recommendations.

    Rules are evaluated in a fixed order and each one either appends a
    templated message or is skipped. Lists are capped after every rule ran.
    """

    MAX_STRENGTHS = 4
    MAX_WEAKNESSES = 4
    MAX_RECOMMENDATIONS = 6

    def generate(
        self,
        scores: AnalysisScores,
        competition_level: CompetitionLevel,
        features: TextFeatures,
        analysis_kind: str,
        url: Optional[str] = None,
    ) -> Insights:
        strengths = self.generate_strengths(scores, features, analysis_kind, url)
        weaknesses = self.generate_weaknesses(scores, competition_level, features)
        recommendations = self.generate_recommendations(
            scores, competition_level, features, analysis_kind
        )

        return Insights(
            strengths=strengths[: self.MAX_STRENGTHS],
            weaknesses=weaknesses[: self.MAX_WEAKNESSES],
            recommendations=recommendations[: self.MAX_RECOMMENDATIONS],
        )

    def generate_strengths(
        self,
        scores: AnalysisScores,
        features: TextFeatures,
        analysis_kind: str,
        url: Optional[str] = None,
    ) -> List[str]:
        strengths = []

        # Structure
        if features.has_headers:
            strengths.append("Well-structured with clear headings")
        if features.has_bullet_points:
            strengths.append("Uses lists to make the content easy to scan")
        if features.has_links:
            strengths.append("Includes links that support credibility and navigation")
        if features.has_numbers:
            strengths.append("Uses numbers and data to back up claims")

        # Scores
        if scores.overall_score >= 80:
            strengths.append(
                f"Excellent overall SEO score ({scores.overall_score}/100)"
            )
        elif scores.overall_score >= 70:
            strengths.append(
                f"Good overall SEO foundation ({scores.overall_score}/100)"
            )

        if 2 <= scores.keyword_density <= 5:
            strengths.append(
                f"Keyword density of {scores.keyword_density}% is within the optimal range"
            )

        if scores.readability_score >= 80:
            strengths.append(
                f"Highly readable content ({scores.readability_score}/100)"
            )
        elif scores.readability_score >= 70:
            strengths.append("Good readability for a general audience")

        if scores.trending_score >= 75:
            strengths.append("Strong alignment with currently trending topics")

        # Length
        if 1000 <= features.word_count <= 2500:
            strengths.append(
                f"Comprehensive length ({features.word_count} words) suited to in-depth rankings"
            )
        elif features.word_count >= 500:
            strengths.append(f"Substantial content length ({features.word_count} words)")

        # Kind-specific bonuses
        if analysis_kind == "website" and url:
            domain = urlparse(url).netloc or url
            strengths.append(f"Website {domain} is available for a technical review")
        elif analysis_kind == "keyword" and 0 < features.word_count <= 5:
            strengths.append("Concise keyword focus makes search intent easy to target")
        elif analysis_kind == "competitor":
            strengths.append("Competitive benchmarking is in place to guide strategy")
        elif analysis_kind == "content" and features.question_count > 0:
            strengths.append("Addresses reader questions directly")

        return strengths

    def generate_weaknesses(
        self,
        scores: AnalysisScores,
        competition_level: CompetitionLevel,
        features: TextFeatures,
    ) -> List[str]:
        weaknesses = []

        if scores.overall_score < 50:
            weaknesses.append(
                f"Low overall SEO score ({scores.overall_score}/100) needs significant work"
            )
        elif scores.overall_score < 70:
            weaknesses.append(
                f"Overall SEO score ({scores.overall_score}/100) has room for improvement"
            )

        if scores.keyword_density < 1:
            weaknesses.append("Keyword density is too low for search engines to detect the topic")
        elif scores.keyword_density > 6:
            weaknesses.append(
                f"Keyword density of {scores.keyword_density}% risks keyword stuffing"
            )

        if scores.readability_score < 60:
            weaknesses.append("Content is difficult to read")
        elif scores.readability_score < 70:
            weaknesses.append("Readability could be improved")

        if scores.trending_score < 50:
            weaknesses.append("Weak alignment with trending topics")

        if not features.has_headers:
            weaknesses.append("Missing headings to structure the content")
        if not features.has_bullet_points:
            weaknesses.append("No bullet points or lists to aid scanning")
        if not features.has_links:
            weaknesses.append("No internal or external links")

        if features.word_count < 300:
            weaknesses.append(f"Content is thin ({features.word_count} words)")
        elif features.word_count > 3000:
            weaknesses.append(f"Content may be too long ({features.word_count} words)")

        if features.avg_words_per_sentence > 25:
            weaknesses.append(
                f"Sentences are too long ({features.avg_words_per_sentence:.1f} words on average)"
            )
        elif features.sentence_count > 0 and features.avg_words_per_sentence < 8:
            weaknesses.append("Sentences are very short and may read as choppy")

        if competition_level == CompetitionLevel.HIGH:
            weaknesses.append("High competition for this topic")

        return weaknesses

    def generate_recommendations(
        self,
        scores: AnalysisScores,
        competition_level: CompetitionLevel,
        features: TextFeatures,
        analysis_kind: str,
    ) -> List[str]:
        recommendations = []

        if scores.overall_score < 50:
            recommendations.append(
                "Rework the content around a clear primary keyword and search intent"
            )
        elif scores.overall_score < 70:
            recommendations.append(
                "Strengthen on-page SEO by optimizing the title, meta description and headings"
            )

        if scores.keyword_density < 1:
            recommendations.append(
                "Work the primary keyword naturally into the introduction, headings and conclusion"
            )
        elif scores.keyword_density > 6:
            recommendations.append(
                "Reduce keyword repetition and use synonyms to avoid over-optimization"
            )

        if scores.readability_score < 60:
            recommendations.append("Simplify sentences and vocabulary to improve readability")
        elif scores.readability_score < 70:
            recommendations.append("Break up long paragraphs and use plainer language")

        if scores.trending_score < 50:
            recommendations.append("Tie the content to current trends and timely topics")

        if not features.has_headers:
            recommendations.append("Add H2 and H3 headings to organize the content")
        if not features.has_bullet_points:
            recommendations.append("Use bullet points or numbered lists for key takeaways")
        if not features.has_links:
            recommendations.append("Add relevant internal links and authoritative external sources")

        if features.word_count < 300:
            recommendations.append("Expand the content to at least 300 words of useful detail")
        elif features.word_count > 3000:
            recommendations.append("Split long content into a series or add a table of contents")

        if features.avg_words_per_sentence > 25:
            recommendations.append("Shorten sentences to 15-20 words on average")
        elif features.sentence_count > 0 and features.avg_words_per_sentence < 8:
            recommendations.append("Combine very short sentences to improve flow")

        if competition_level == CompetitionLevel.HIGH:
            recommendations.append(
                "Target long-tail variations to compete in a crowded niche"
            )

        recommendations.extend(KIND_RECOMMENDATIONS.get(analysis_kind, []))
        recommendations.extend(CLOSING_RECOMMENDATIONS)

        return recommendations
