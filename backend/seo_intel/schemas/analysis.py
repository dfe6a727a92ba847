from enum import Enum
from typing import Optional, Dict, List, Tuple
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisKind(str, Enum):
    CONTENT = "content"
    WEBSITE = "website"
    KEYWORD = "keyword"
    COMPETITOR = "competitor"


class CompetitionLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"


class GapPosition(str, Enum):
    BEHIND = "Behind"
    COMPETITIVE = "Competitive"
    LEADING = "Leading"


class GapPriority(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"


class Industry(str, Enum):
    ECOMMERCE = "ecommerce"
    TECHNOLOGY = "technology"
    MARKETING = "marketing"
    FINANCE = "finance"


class CamelModel(BaseModel):
    """Response models are immutable and serialize with camelCase names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class AnalysisRequest(BaseModel):
    """Schema for a single analysis request."""

    text: str = ""
    analysis_kind: str = Field(AnalysisKind.CONTENT.value, alias="analysisKind")
    url: Optional[str] = None

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "text": "## Content marketing\n- Publish weekly\nRead more at https://example.com",
                "analysisKind": "content",
            }
        },
    )


class TextFeatures(CamelModel):
    length: int = 0
    word_count: int = 0
    sentence_count: int = 0
    avg_words_per_sentence: float = 0.0
    has_headers: bool = False
    has_bullet_points: bool = False
    has_links: bool = False
    has_numbers: bool = False
    question_count: int = 0


class AnalysisScores(CamelModel):
    overall_score: int = Field(ge=0, le=100)
    keyword_density: int = Field(ge=0, le=10)
    readability_score: int = Field(ge=0, le=100)
    trending_score: int = Field(ge=0, le=100)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (
            self.overall_score,
            self.keyword_density,
            self.readability_score,
            self.trending_score,
        )


class Insights(CamelModel):
    strengths: List[str] = Field(default_factory=list, max_length=4)
    weaknesses: List[str] = Field(default_factory=list, max_length=4)
    recommendations: List[str] = Field(default_factory=list, max_length=6)


class Competitor(CamelModel):
    name: str
    domain: str = ""
    rank: int = Field(1, ge=1)
    score: int = Field(ge=35, le=95)
    traffic: int = Field(1000, ge=0)
    keywords: int = Field(100, ge=0)
    market_share: str
    industry: str
    trend: Trend
    key_strengths: List[str] = Field(default_factory=list)


class GapAnalysis(CamelModel):
    score_gap: int
    position: GapPosition
    priority: GapPriority
    time_to_close: str
    key_areas: List[str] = Field(default_factory=list, max_length=3)


class CompetitorAnalysis(CamelModel):
    top_competitors: List[Competitor] = Field(default_factory=list, max_length=3)
    average_score: int
    industry_average: int
    competition_level: CompetitionLevel
    market_share: Dict[str, int] = Field(default_factory=dict)
    opportunities: List[str] = Field(default_factory=list, max_length=6)
    areas_for_improvement: List[str] = Field(default_factory=list, max_length=6)
    real_time_data: bool = True
    strengths: List[str] = Field(default_factory=list, max_length=3)
    threats: List[str] = Field(default_factory=list, max_length=4)
    gap_analysis: GapAnalysis
    industry: str = Industry.MARKETING.value
    market_trends: List[str] = Field(default_factory=list)


class IndustryBenchmark(CamelModel):
    industry: str
    average_score: int
    competition_level: CompetitionLevel
    market_trends: List[str] = Field(default_factory=list)
    top_performers: List[Competitor] = Field(default_factory=list)


class AnalysisResult(CamelModel):
    """Aggregate returned for every analysis call."""

    analysis_kind: str
    overall_score: int = Field(ge=0, le=100)
    keyword_density: int = Field(ge=0, le=10)
    readability_score: int = Field(ge=0, le=100)
    trending_score: int = Field(ge=0, le=100)
    competition_level: CompetitionLevel
    search_volume: int = Field(ge=0)
    keywords: List[str] = Field(default_factory=list, max_length=8)
    hashtags: List[str] = Field(default_factory=list, max_length=8)
    trending_tags: List[str] = Field(default_factory=list, max_length=8)
    competitor_analysis: CompetitorAnalysis
    insights: Insights
    features: TextFeatures = Field(default_factory=TextFeatures)
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    fallback: bool = False

    @property
    def scores(self) -> AnalysisScores:
        return AnalysisScores(
            overall_score=self.overall_score,
            keyword_density=self.keyword_density,
            readability_score=self.readability_score,
            trending_score=self.trending_score,
        )


class CacheStats(CamelModel):
    size: int
    max_size: int
    ttl: int
    hits: int
    misses: int
