from seo_intel.schemas.analysis import (
    AnalysisKind,
    AnalysisRequest,
    AnalysisResult,
    AnalysisScores,
    CacheStats,
    CompetitionLevel,
    Competitor,
    CompetitorAnalysis,
    GapAnalysis,
    GapPosition,
    GapPriority,
    Industry,
    IndustryBenchmark,
    Insights,
    TextFeatures,
    Trend,
)
