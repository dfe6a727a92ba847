import random

import pytest

from seo_intel.core.exceptions import UnknownIndustryError
from seo_intel.schemas.analysis import (
    AnalysisScores,
    CompetitionLevel,
    Competitor,
    GapPosition,
    GapPriority,
    Industry,
    Trend,
)
from seo_intel.services.competitor.industries import (
    INDUSTRY_COMPETITORS,
    detect_industry,
    industry_benchmarks,
)
from seo_intel.services.competitor.market_simulator import (
    FALLBACK_OPPORTUNITIES,
    CompetitiveMarketSimulator,
    fallback_competitor_analysis,
    rounded_mean,
)


def make_scores(overall=70, density=3, readability=70, trending=60):
    return AnalysisScores(
        overall_score=overall,
        keyword_density=density,
        readability_score=readability,
        trending_score=trending,
    )


def make_competitor(name, score, trend=Trend.UP):
    return Competitor(
        name=name,
        score=score,
        market_share="10%",
        industry=Industry.MARKETING.value,
        trend=trend,
    )


@pytest.fixture
def simulator(rng, clock):
    return CompetitiveMarketSimulator(rng=rng, clock=clock)


@pytest.mark.parametrize(
    "domain,keywords,expected",
    [
        ("techstore.com", [], Industry.ECOMMERCE),
        ("mysoftware.io", [], Industry.TECHNOLOGY),
        ("", ["bank", "loans"], Industry.FINANCE),
        ("", ["digital", "campaigns"], Industry.MARKETING),
        ("randomsite.org", ["gardening"], Industry.MARKETING),
        ("", None, Industry.MARKETING),
    ],
)
def test_detect_industry(domain, keywords, expected):
    assert detect_industry(domain, keywords) == expected


def test_competitors_are_ranked_and_bounded():
    for seed in range(100):
        simulator = CompetitiveMarketSimulator(rng=random.Random(seed))
        user_score = seed % 101
        competitors = simulator.generate_competitors(Industry.TECHNOLOGY, user_score)

        assert 3 <= len(competitors) <= 5
        assert [c.rank for c in competitors] == list(range(1, len(competitors) + 1))
        scores = [c.score for c in competitors]
        assert scores == sorted(scores, reverse=True)
        for competitor in competitors:
            assert 35 <= competitor.score <= 95
            assert competitor.traffic >= 1000
            assert competitor.keywords >= 100
            assert competitor.market_share.endswith("%")
            assert len(competitor.key_strengths) == 2
            assert (competitor.name, competitor.domain) in INDUSTRY_COMPETITORS[
                Industry.TECHNOLOGY
            ]


def test_top_competitors_sorted_and_truncated():
    for seed in range(50):
        simulator = CompetitiveMarketSimulator(rng=random.Random(seed))
        analysis = simulator.simulate(
            make_scores(overall=60), CompetitionLevel.MEDIUM, "competitor"
        )

        top = analysis.top_competitors
        assert len(top) <= 3
        assert [c.score for c in top] == sorted((c.score for c in top), reverse=True)
        # every generated competitor still has a market share entry
        assert 3 <= len(analysis.market_share) <= 5


def test_simulation_shape(simulator):
    analysis = simulator.simulate(
        make_scores(overall=65),
        CompetitionLevel.MEDIUM,
        "website",
        text_length=800,
        domain="shop.example.com",
    )

    assert analysis.industry == Industry.ECOMMERCE.value
    assert analysis.real_time_data is True
    assert analysis.average_score == analysis.industry_average
    assert 35 <= analysis.average_score <= 95
    assert analysis.gap_analysis.score_gap == analysis.industry_average - 65
    assert analysis.gap_analysis.key_areas[-1] == "Technical performance"
    assert analysis.market_trends[0] == "ecommerce industry showing moderate SEO performance"
    assert len(analysis.opportunities) <= 6
    assert len(analysis.areas_for_improvement) <= 6
    assert len(analysis.strengths) <= 3
    assert len(analysis.threats) <= 4


def test_simulation_is_reproducible():
    first = CompetitiveMarketSimulator(rng=random.Random(9)).simulate(
        make_scores(), CompetitionLevel.MEDIUM, "content"
    )
    second = CompetitiveMarketSimulator(rng=random.Random(9)).simulate(
        make_scores(), CompetitionLevel.MEDIUM, "content"
    )

    assert first == second


@pytest.mark.parametrize(
    "gap,position",
    [
        (11, GapPosition.BEHIND),
        (10, GapPosition.COMPETITIVE),
        (-4, GapPosition.COMPETITIVE),
        (-5, GapPosition.LEADING),
    ],
)
def test_gap_position_thresholds(simulator, gap, position):
    assert simulator.gap_analysis(50, 50 + gap, "content").position == position


@pytest.mark.parametrize(
    "gap,priority",
    [
        (16, GapPriority.CRITICAL),
        (15, GapPriority.HIGH),
        (6, GapPriority.HIGH),
        (5, GapPriority.MEDIUM),
    ],
)
def test_gap_priority_thresholds(simulator, gap, priority):
    assert simulator.gap_analysis(50, 50 + gap, "content").priority == priority


@pytest.mark.parametrize(
    "gap,time_to_close",
    [
        (21, "6-12 months"),
        (20, "3-6 months"),
        (11, "3-6 months"),
        (10, "1-3 months"),
        (-30, "1-3 months"),
    ],
)
def test_gap_time_to_close(simulator, gap, time_to_close):
    assert simulator.gap_analysis(50, 50 + gap, "content").time_to_close == time_to_close


def test_gap_key_areas_end_with_kind_area(simulator):
    gap = simulator.gap_analysis(40, 70, "keyword")

    assert gap.key_areas == [
        "Comprehensive content overhaul",
        "Aggressive keyword expansion",
        "Keyword targeting",
    ]


@pytest.mark.parametrize(
    "scores,expected",
    [
        ([80, 75, 70, 65, 60], CompetitionLevel.HIGH),
        ([95, 85, 82], CompetitionLevel.HIGH),
        ([75, 70, 65], CompetitionLevel.MEDIUM),
        ([65, 60, 55], CompetitionLevel.LOW),
        ([78, 72], CompetitionLevel.LOW),
    ],
)
def test_market_competition_level(simulator, scores, expected):
    competitors = [make_competitor(f"c{i}", s) for i, s in enumerate(scores)]

    assert simulator.market_competition_level(competitors) == expected


def test_threats_name_the_leader(simulator):
    competitors = [
        make_competitor("Leader", 90),
        make_competitor("Runner", 70, trend=Trend.DOWN),
        make_competitor("Third", 60, trend=Trend.DOWN),
    ]

    threats = simulator.generate_threats(50, 73, competitors)

    assert threats[0] == "Leader leads by 40 points"
    assert "1 competitor(s) trending upward" in threats
    assert threats[-1].startswith("Falling further behind")


def test_rounded_mean():
    assert rounded_mean([70, 71]) == 71
    assert rounded_mean([70, 70, 71]) == 70
    assert rounded_mean([]) == 65


def test_industry_benchmarks():
    benchmark = industry_benchmarks("Technology")

    assert benchmark.industry == "technology"
    assert benchmark.average_score == 78
    assert benchmark.competition_level == CompetitionLevel.HIGH
    assert benchmark.market_trends[0] == (
        "technology industry showing strong SEO performance"
    )


def test_unknown_industry_uses_default_benchmark():
    benchmark = industry_benchmarks("pets")

    assert benchmark.average_score == 70
    assert benchmark.competition_level == CompetitionLevel.MEDIUM
    assert benchmark.market_trends[0] == "pets industry showing moderate SEO performance"


def test_strict_benchmarks_reject_unknown_industry():
    with pytest.raises(UnknownIndustryError):
        industry_benchmarks("pets", strict=True)


def test_fallback_competitor_analysis():
    analysis = fallback_competitor_analysis(50, "website")

    assert analysis.real_time_data is False
    assert [c.name for c in analysis.top_competitors] == [
        "Industry Leader",
        "Market Challenger",
    ]
    assert analysis.market_share == {"Industry Leader": 25, "Market Challenger": 18}
    assert analysis.industry_average == 70
    assert analysis.opportunities == FALLBACK_OPPORTUNITIES
    assert analysis.gap_analysis.position == GapPosition.BEHIND
    assert analysis.gap_analysis.priority == GapPriority.CRITICAL
    assert analysis.gap_analysis.time_to_close == "3-6 months"
