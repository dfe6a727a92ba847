"""
Static phrase and tag tables used by the keyword and tag synthesizer.

Every table is keyed by analysis kind ("content", "website", "keyword",
"competitor"). Seasonal tables hold one tag set per calendar month,
index 0 being January.
"""

from typing import Dict, List, Tuple


KEYWORD_TABLES: Dict[str, Dict[str, List[str]]] = {
    "content": {
        "primary": ["content marketing", "SEO content", "blog optimization"],
        "long_tail": [
            "how to write SEO friendly content",
            "content marketing strategy for beginners",
        ],
        "semantic": ["content strategy", "organic traffic", "search rankings"],
    },
    "website": {
        "primary": ["website optimization", "technical SEO", "site speed"],
        "long_tail": [
            "how to improve website SEO ranking",
            "website performance optimization checklist",
        ],
        "semantic": ["core web vitals", "mobile usability", "site architecture"],
    },
    "keyword": {
        "primary": ["keyword research", "search volume", "keyword difficulty"],
        "long_tail": [
            "best long tail keywords for small business",
            "how to find low competition keywords",
        ],
        "semantic": ["search intent", "keyword clustering", "SERP features"],
    },
    "competitor": {
        "primary": [
            "competitor analysis",
            "competitive intelligence",
            "market research",
        ],
        "long_tail": [
            "how to analyze competitor SEO strategy",
            "competitor keyword gap analysis",
        ],
        "semantic": ["backlink gap", "market share", "share of voice"],
    },
}


EVERGREEN_TAGS: Dict[str, List[str]] = {
    "content": ["#ContentMarketing", "#SEO"],
    "website": ["#WebDesign", "#TechnicalSEO"],
    "keyword": ["#KeywordResearch", "#SearchMarketing"],
    "competitor": ["#CompetitiveAnalysis", "#MarketIntelligence"],
}

EMERGING_TAGS: Dict[str, List[str]] = {
    "content": ["#AIContent", "#ShortFormVideo"],
    "website": ["#AISearch", "#ZeroClickSearch"],
    "keyword": ["#VoiceSearch", "#AIOverviews"],
    "competitor": ["#AICompetitiveIntel", "#SocialListening"],
}

SEASONAL_TAGS: Dict[str, List[List[str]]] = {
    "content": [
        ["#NewYearContent", "#ContentCalendar", "#FreshStart"],
        ["#ValentinesContent", "#LoveYourAudience", "#BlackHistoryMonth"],
        ["#SpringContent", "#WomensHistoryMonth", "#MarchMadness"],
        ["#EarthDay", "#SpringCleaning", "#AprilContent"],
        ["#MothersDay", "#MayContent", "#GraduationSeason"],
        ["#SummerReading", "#FathersDay", "#PrideMonth"],
        ["#SummerContent", "#MidYearReview", "#VacationMode"],
        ["#BackToSchool", "#SummerWrapUp", "#AugustContent"],
        ["#FallContent", "#SeptemberReset", "#LaborDay"],
        ["#Halloween", "#FallVibes", "#OctoberContent"],
        ["#BlackFriday", "#Thanksgiving", "#GratitudeContent"],
        ["#HolidayContent", "#YearInReview", "#HolidaySeason"],
    ],
    "website": [
        ["#WebsiteRefresh", "#NewYearRedesign", "#SiteAudit"],
        ["#ValentinesLanding", "#ConversionLove", "#FebruaryUX"],
        ["#SpringRedesign", "#CoreWebVitals", "#MarchSiteSpeed"],
        ["#SpringCleanup", "#AccessibilityAudit", "#AprilUX"],
        ["#MobileFirstDesign", "#MaySiteAudit", "#GraduationLanding"],
        ["#SummerSiteSpeed", "#MidYearAudit", "#JuneUX"],
        ["#SummerTraffic", "#JulyPerformance", "#UptimeMatters"],
        ["#BackToSchoolSites", "#AugustRedesign", "#PageSpeed"],
        ["#Q4Prep", "#FallRedesign", "#SeptemberUX"],
        ["#HolidayReadySites", "#OctoberAudit", "#SecurityAwarenessMonth"],
        ["#BlackFridayReady", "#CyberMondayPrep", "#CheckoutOptimization"],
        ["#HolidayTraffic", "#YearEndAudit", "#DecemberUX"],
    ],
    "keyword": [
        ["#NewYearKeywords", "#ResolutionSearches", "#JanuaryTrends"],
        ["#ValentinesSearches", "#GiftIdeas", "#FebruaryTrends"],
        ["#SpringSearches", "#TaxSeason", "#MarchTrends"],
        ["#EasterSearches", "#AprilTrends", "#EarthDaySearches"],
        ["#MothersDayGifts", "#MayTrends", "#GraduationGifts"],
        ["#SummerSearches", "#FathersDayGifts", "#JuneTrends"],
        ["#PrimeDay", "#JulyTrends", "#TravelSearches"],
        ["#BackToSchoolDeals", "#AugustTrends", "#CollegePrep"],
        ["#FallSearches", "#SeptemberTrends", "#LaborDayDeals"],
        ["#HalloweenCostumes", "#OctoberTrends", "#PumpkinSpice"],
        ["#BlackFridayDeals", "#CyberMonday", "#NovemberTrends"],
        ["#ChristmasGifts", "#DecemberTrends", "#HolidayDeals"],
    ],
    "competitor": [
        ["#AnnualPlanning", "#CompetitorAudit", "#JanuaryBenchmarks"],
        ["#Q1Benchmarks", "#ValentinesCampaigns", "#FebruaryIntel"],
        ["#Q1Review", "#SpringCampaigns", "#MarchIntel"],
        ["#Q2Kickoff", "#AprilBenchmarks", "#EasterCampaigns"],
        ["#MayIntel", "#SummerCampaignPrep", "#MarketShifts"],
        ["#MidYearBenchmarks", "#Q2Review", "#JuneIntel"],
        ["#H2Planning", "#PrimeDayCampaigns", "#JulyIntel"],
        ["#BackToSchoolCampaigns", "#AugustBenchmarks", "#Q3Pulse"],
        ["#Q3Review", "#Q4Strategy", "#SeptemberIntel"],
        ["#HolidayCampaignWatch", "#OctoberBenchmarks", "#Q4Pulse"],
        ["#BlackFridayCampaigns", "#NovemberIntel", "#PriceWatch"],
        ["#YearEndBenchmarks", "#HolidayCampaignReview", "#NextYearPlanning"],
    ],
}

# bucket -> (trigger patterns, derived tags). Patterns are regular expressions
# searched in the lower-cased input; short words need word boundaries.
TREND_BUCKETS: List[Tuple[str, List[str], List[str]]] = [
    (
        "ai",
        [r"\bai\b", "artificial intelligence", "machine learning", "chatgpt", "llm"],
        ["#AITrends", "#GenerativeAI"],
    ),
    (
        "social",
        ["social media", "instagram", "tiktok", "linkedin", "facebook", "twitter"],
        ["#SocialMediaTrends", "#CreatorEconomy"],
    ),
    (
        "mobile",
        ["mobile", "smartphone", r"\bapp\b", "ios", "android"],
        ["#MobileFirst", "#AppMarketing"],
    ),
    (
        "video",
        ["video", "youtube", "reels", "streaming"],
        ["#VideoMarketing", "#Reels"],
    ),
    (
        "ecommerce",
        ["ecommerce", "e-commerce", "online store", "shop", "checkout", "cart"],
        ["#Ecommerce", "#OnlineShopping"],
    ),
]


HASHTAG_TABLES: Dict[str, Dict[str, List[str]]] = {
    "content": {
        "core": ["#ContentMarketing", "#SEO", "#Blogging"],
        "trending": ["#ContentStrategy", "#AIWriting"],
        "niche": ["#ContentCreators"],
    },
    "website": {
        "core": ["#WebDesign", "#WebDevelopment", "#SEO"],
        "trending": ["#CoreWebVitals", "#UXDesign"],
        "niche": ["#WebPerformance"],
    },
    "keyword": {
        "core": ["#KeywordResearch", "#SEO", "#SearchMarketing"],
        "trending": ["#SearchIntent", "#LongTailKeywords"],
        "niche": ["#SEMTips"],
    },
    "competitor": {
        "core": ["#CompetitorAnalysis", "#MarketResearch", "#BusinessStrategy"],
        "trending": ["#CompetitiveIntel", "#GrowthHacking"],
        "niche": ["#MarketingAnalytics"],
    },
}

# group -> (trigger terms, hashtag)
HASHTAG_TOPICS: List[Tuple[str, List[str], str]] = [
    ("technology", ["tech", "software", "digital", "cloud", "app"], "#TechTrends"),
    (
        "business",
        ["business", "startup", "company", "entrepreneur", "revenue"],
        "#SmallBusiness",
    ),
    (
        "marketing",
        ["marketing", "brand", "campaign", "audience", "seo"],
        "#DigitalMarketing",
    ),
    ("design", ["design", "layout", "creative", "typography"], "#DesignInspiration"),
    ("ecommerce", ["shop", "store", "product", "ecommerce", "sale"], "#EcommerceTips"),
]
