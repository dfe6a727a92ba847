from typing import Dict, Any, List, Optional

from loguru import logger

from seo_intel.services.analyzer.base_analyzer import BaseAnalyzer
from seo_intel.services.analyzer.catalogs import (
    EMERGING_TAGS,
    EVERGREEN_TAGS,
    HASHTAG_TABLES,
    HASHTAG_TOPICS,
    KEYWORD_TABLES,
    SEASONAL_TAGS,
    TREND_BUCKETS,
)
from seo_intel.services.analyzer.utils.text_utils import (
    TextProcessor,
    contains_any,
    dedupe,
    matches_any,
)

MAX_ITEMS = 8


class KeywordSynthesizer(BaseAnalyzer):
    """
    Produces keyword, trending-tag and hashtag suggestions.

    Each generator blends a static table for the analysis kind, a seasonal
    table for the current month where one exists, and a contextual pass over
    the input text. Results are de-duplicated and capped at eight entries.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(config, **kwargs)
        self.text_processor = TextProcessor()
        self.max_items = self.config.get("max_items", MAX_ITEMS)

    def generate_keywords(self, analysis_kind: str, text: str) -> List[str]:
        """
        Build the keyword list for an analysis.

        Args:
            analysis_kind: Kind of analysis requested
            text: Input text

        Returns:
            Primary phrases first, then long-tail phrases, words repeated in
            the text, and semantic phrases filling any remaining slots
        """
        table = KEYWORD_TABLES[analysis_kind]
        contextual = self.contextual_keywords(text)

        return dedupe(
            table["primary"] + table["long_tail"] + contextual + table["semantic"],
            limit=self.max_items,
        )

    def contextual_keywords(self, text: str, n: int = 3) -> List[str]:
        """Top repeated content words of the text."""
        return self.text_processor.extract_keywords(text, n=n, min_frequency=2)

    def generate_trending_tags(self, analysis_kind: str, text: str) -> List[str]:
        """
        Build the trending-tag list for an analysis.

        Args:
            analysis_kind: Kind of analysis requested
            text: Input text

        Returns:
            Evergreen, seasonal and emerging tags followed by up to two tags
            for topics the text mentions
        """
        month = self.current_month()
        seasonal = SEASONAL_TAGS[analysis_kind][month]

        tags = (
            EVERGREEN_TAGS[analysis_kind][:2]
            + seasonal[:3]
            + EMERGING_TAGS[analysis_kind][:1]
            + self.topic_trend_tags(text)
        )
        logger.debug(f"Trending tags for {analysis_kind} in month {month}: {tags}")
        return dedupe(tags, limit=self.max_items)

    def topic_trend_tags(self, text: str, limit: int = 2) -> List[str]:
        """Lead tag of each topic bucket the text mentions, in bucket order."""
        lowered = text.lower()
        tags = []
        for _bucket, terms, bucket_tags in TREND_BUCKETS:
            if matches_any(lowered, terms):
                tags.append(bucket_tags[0])
            if len(tags) >= limit:
                break
        return tags

    def generate_hashtags(self, analysis_kind: str, text: str) -> List[str]:
        """
        Build the hashtag list for an analysis.

        Args:
            analysis_kind: Kind of analysis requested
            text: Input text

        Returns:
            Core, trending and niche hashtags plus up to two topic hashtags
        """
        table = HASHTAG_TABLES[analysis_kind]
        hashtags = (
            table["core"]
            + table["trending"]
            + table["niche"]
            + self.topic_hashtags(text)
        )
        return dedupe(hashtags, limit=self.max_items)

    def topic_hashtags(self, text: str, limit: int = 2) -> List[str]:
        lowered = text.lower()
        hashtags = [
            hashtag
            for _group, terms, hashtag in HASHTAG_TOPICS
            if contains_any(lowered, terms)
        ]
        return hashtags[:limit]
