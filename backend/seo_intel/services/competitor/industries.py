"""
Industry tables for the competitive-market simulator.

Industry detection is a list of tagged predicates evaluated in priority
order; the first industry whose trigger terms occur in the lower-cased
domain/keyword string wins, and marketing is the default.
"""

from typing import Dict, List, Tuple

from seo_intel.core.exceptions import UnknownIndustryError
from seo_intel.schemas.analysis import CompetitionLevel, IndustryBenchmark, Industry


INDUSTRY_RULES: List[Tuple[Industry, List[str]]] = [
    (Industry.ECOMMERCE, ["shop", "buy", "product", "store", "ecommerce"]),
    (Industry.TECHNOLOGY, ["tech", "software", "app", "dev", "saas"]),
    (Industry.MARKETING, ["marketing", "seo", "digital", "agency"]),
    (Industry.FINANCE, ["finance", "money", "investment", "bank"]),
]

DEFAULT_INDUSTRY = Industry.MARKETING

# (name, domain) per industry, strongest brands first
INDUSTRY_COMPETITORS: Dict[Industry, List[Tuple[str, str]]] = {
    Industry.ECOMMERCE: [
        ("Amazon", "amazon.com"),
        ("eBay", "ebay.com"),
        ("Shopify", "shopify.com"),
        ("Etsy", "etsy.com"),
        ("Walmart", "walmart.com"),
    ],
    Industry.TECHNOLOGY: [
        ("TechCrunch", "techcrunch.com"),
        ("Wired", "wired.com"),
        ("The Verge", "theverge.com"),
        ("Ars Technica", "arstechnica.com"),
        ("Engadget", "engadget.com"),
    ],
    Industry.MARKETING: [
        ("HubSpot", "hubspot.com"),
        ("Moz", "moz.com"),
        ("SEMrush", "semrush.com"),
        ("Ahrefs", "ahrefs.com"),
        ("Neil Patel", "neilpatel.com"),
    ],
    Industry.FINANCE: [
        ("Investopedia", "investopedia.com"),
        ("Yahoo Finance", "finance.yahoo.com"),
        ("MarketWatch", "marketwatch.com"),
        ("Bloomberg", "bloomberg.com"),
        ("CNBC", "cnbc.com"),
    ],
}

INDUSTRY_STRENGTHS: Dict[Industry, List[str]] = {
    Industry.ECOMMERCE: [
        "Product catalog depth",
        "Fast checkout experience",
        "Customer reviews at scale",
        "Competitive pricing",
        "Strong brand recognition",
    ],
    Industry.TECHNOLOGY: [
        "Breaking news coverage",
        "Expert product reviews",
        "High domain authority",
        "Strong social following",
        "Long-form analysis",
    ],
    Industry.MARKETING: [
        "Comprehensive guides",
        "Free SEO tools",
        "Strong backlink profile",
        "Active publishing schedule",
        "Original research",
    ],
    Industry.FINANCE: [
        "Authoritative financial data",
        "Real-time market coverage",
        "Expert contributors",
        "High domain authority",
        "Educational content library",
    ],
}

# industry -> (average score, competition level)
INDUSTRY_BENCHMARKS: Dict[str, Tuple[int, CompetitionLevel]] = {
    "ecommerce": (72, CompetitionLevel.HIGH),
    "technology": (78, CompetitionLevel.HIGH),
    "marketing": (75, CompetitionLevel.HIGH),
    "finance": (80, CompetitionLevel.HIGH),
    "healthcare": (68, CompetitionLevel.MEDIUM),
    "education": (65, CompetitionLevel.MEDIUM),
}
DEFAULT_BENCHMARK = (70, CompetitionLevel.MEDIUM)


def detect_industry(domain: str = "", keywords: List[str] = None) -> Industry:
    """
    Detect the industry bucket for a domain and its keywords.

    Args:
        domain: Domain (or URL) of the analyzed site, may be empty
        keywords: Keywords describing the content

    Returns:
        The first matching industry, or the default
    """
    haystack = " ".join([domain or ""] + list(keywords or [])).lower()
    for industry, terms in INDUSTRY_RULES:
        if any(term in haystack for term in terms):
            return industry
    return DEFAULT_INDUSTRY


def market_trends(industry: str, average_score: int) -> List[str]:
    performance = "strong" if average_score > 75 else "moderate"
    return [
        f"{industry} industry showing {performance} SEO performance",
        "Mobile optimization becoming critical factor",
        "Content quality increasingly important for rankings",
    ]


def industry_benchmarks(industry: str, strict: bool = False) -> IndustryBenchmark:
    """
    Benchmark figures for an industry.

    Args:
        industry: Industry name (case-insensitive)
        strict: Raise instead of returning default figures for unknown industries

    Returns:
        IndustryBenchmark for the industry
    """
    key = (industry or "").strip().lower()
    if key not in INDUSTRY_BENCHMARKS and strict:
        raise UnknownIndustryError(industry)

    average_score, level = INDUSTRY_BENCHMARKS.get(key, DEFAULT_BENCHMARK)
    return IndustryBenchmark(
        industry=key or "default",
        average_score=average_score,
        competition_level=level,
        market_trends=market_trends(key or "default", average_score),
        top_performers=[],
    )
