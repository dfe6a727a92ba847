import re
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

from seo_intel.schemas.analysis import TextFeatures


MARKDOWN_HEADER_RE = re.compile(r"^\s{0,3}#{1,6}\s", re.MULTILINE)
BULLET_RE = re.compile(r"^\s*[-*+]", re.MULTILINE)
URL_RE = re.compile(r"https?://", re.IGNORECASE)
MARKDOWN_LINK_RE = re.compile(r"\[[^\]]+\]\([^)]+\)")
SENTENCE_END_RE = re.compile(r"[.!?]+")
DIGIT_RE = re.compile(r"\d")

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
LIST_TAGS = ["ul", "ol", "li"]


class TextFeatureExtractor:
    """Derives structural features from raw input text."""

    def extract(self, text: str) -> TextFeatures:
        if not text:
            return TextFeatures()

        word_count = len(text.split())
        sentence_count = len(SENTENCE_END_RE.findall(text))
        avg_words = word_count / sentence_count if sentence_count > 0 else 0.0

        soup = self._parse_html(text)

        return TextFeatures(
            length=len(text),
            word_count=word_count,
            sentence_count=sentence_count,
            avg_words_per_sentence=round(avg_words, 2),
            has_headers=bool(MARKDOWN_HEADER_RE.search(text))
            or self._has_tag(soup, HEADING_TAGS),
            has_bullet_points=bool(BULLET_RE.search(text))
            or self._has_tag(soup, LIST_TAGS),
            has_links=bool(URL_RE.search(text) or MARKDOWN_LINK_RE.search(text)),
            has_numbers=bool(DIGIT_RE.search(text)),
            question_count=text.count("?"),
        )

    def _parse_html(self, text: str):
        # Plain text is the common case; skip the parser when no tag can exist
        if "<" not in text:
            return None
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            return BeautifulSoup(text, "html.parser")

    def _has_tag(self, soup, tags) -> bool:
        return soup is not None and soup.find(tags) is not None
