import pytest

from seo_intel.schemas.analysis import AnalysisScores, CompetitionLevel, TextFeatures
from seo_intel.services.analyzer.insight_generator import (
    CLOSING_RECOMMENDATIONS,
    KIND_RECOMMENDATIONS,
    InsightGenerator,
)
from seo_intel.services.analyzer.text_features import TextFeatureExtractor


def make_scores(overall=75, density=3, readability=75, trending=65):
    return AnalysisScores(
        overall_score=overall,
        keyword_density=density,
        readability_score=readability,
        trending_score=trending,
    )


WELL_FORMED = TextFeatures(
    length=3000,
    word_count=500,
    sentence_count=33,
    avg_words_per_sentence=15.2,
    has_headers=True,
    has_bullet_points=True,
    has_links=True,
    has_numbers=True,
    question_count=0,
)


@pytest.fixture
def generator():
    return InsightGenerator()


def test_structural_strengths_for_html_content(generator):
    features = TextFeatureExtractor().extract(
        "<h1>Title</h1> SEO content with links http://a.com and 5 stats. Is this good?"
    )

    insights = generator.generate(
        make_scores(), CompetitionLevel.MEDIUM, features, "content"
    )

    assert "Well-structured with clear headings" in insights.strengths
    assert (
        "Includes links that support credibility and navigation" in insights.strengths
    )


def test_low_overall_weakness_only_below_fifty(generator):
    empty = TextFeatures()
    for overall in range(0, 101):
        weaknesses = generator.generate_weaknesses(
            make_scores(overall=overall), CompetitionLevel.MEDIUM, empty
        )
        fired = any(w.startswith("Low overall SEO score") for w in weaknesses)
        assert fired == (overall < 50)


def test_lists_are_capped(generator):
    insights = generator.generate(
        make_scores(overall=30, density=8, readability=40, trending=30),
        CompetitionLevel.HIGH,
        TextFeatures(word_count=50, sentence_count=1, avg_words_per_sentence=50.0),
        "competitor",
    )

    assert len(insights.strengths) <= 4
    assert len(insights.weaknesses) == 4
    assert len(insights.recommendations) == 6
    # truncation keeps rule order
    assert insights.weaknesses[0].startswith("Low overall SEO score")
    assert insights.recommendations[0].startswith("Rework the content")


def test_kind_and_closing_recommendations_come_last(generator):
    recommendations = generator.generate_recommendations(
        make_scores(overall=90, density=3, readability=90, trending=80),
        CompetitionLevel.LOW,
        WELL_FORMED,
        "website",
    )

    assert recommendations == KIND_RECOMMENDATIONS["website"] + CLOSING_RECOMMENDATIONS


def test_strong_content_has_no_weaknesses(generator):
    weaknesses = generator.generate_weaknesses(
        make_scores(overall=90, density=3, readability=90, trending=80),
        CompetitionLevel.LOW,
        WELL_FORMED,
    )

    assert weaknesses == []


def test_score_strengths(generator):
    strengths = generator.generate_strengths(
        make_scores(overall=85, density=4, readability=82, trending=80),
        TextFeatures(),
        "content",
    )

    assert strengths == [
        "Excellent overall SEO score (85/100)",
        "Keyword density of 4% is within the optimal range",
        "Highly readable content (82/100)",
        "Strong alignment with currently trending topics",
    ]


def test_word_count_bands(generator):
    long_form = generator.generate_strengths(
        make_scores(overall=40, density=1, readability=50, trending=40),
        TextFeatures(word_count=1500),
        "content",
    )
    medium = generator.generate_strengths(
        make_scores(overall=40, density=1, readability=50, trending=40),
        TextFeatures(word_count=700),
        "content",
    )

    assert long_form == [
        "Comprehensive length (1500 words) suited to in-depth rankings"
    ]
    assert medium == ["Substantial content length (700 words)"]


def test_website_strength_names_domain(generator):
    strengths = generator.generate_strengths(
        make_scores(overall=40, density=1, readability=50, trending=40),
        TextFeatures(),
        "website",
        url="https://shop.example.com/products",
    )

    assert strengths == ["Website shop.example.com is available for a technical review"]


@pytest.mark.parametrize(
    "features,expected",
    [
        (
            TextFeatures(word_count=400, sentence_count=10, avg_words_per_sentence=40.0),
            "Sentences are too long (40.0 words on average)",
        ),
        (
            TextFeatures(word_count=400, sentence_count=100, avg_words_per_sentence=4.0),
            "Sentences are very short and may read as choppy",
        ),
    ],
)
def test_sentence_length_weaknesses(generator, features, expected):
    weaknesses = generator.generate_weaknesses(
        make_scores(overall=90, density=3, readability=90, trending=80),
        CompetitionLevel.LOW,
        features,
    )

    assert expected in weaknesses


def test_high_competition_is_a_weakness(generator):
    weaknesses = generator.generate_weaknesses(
        make_scores(overall=90, density=3, readability=90, trending=80),
        CompetitionLevel.HIGH,
        WELL_FORMED,
    )

    assert weaknesses == ["High competition for this topic"]
