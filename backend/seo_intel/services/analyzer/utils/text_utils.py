from typing import List, Tuple
import re

from nltk.tokenize import RegexpTokenizer


# Fixed stop-word list; keeps keyword extraction independent of corpus downloads.
STOP_WORDS = frozenset(
    {
        "the", "and", "for", "are", "but", "not", "you", "all", "any", "can",
        "had", "her", "was", "one", "our", "out", "day", "get", "has", "him",
        "his", "how", "man", "new", "now", "old", "see", "two", "way", "who",
        "boy", "did", "its", "let", "put", "say", "she", "too", "use", "this",
        "that", "with", "have", "from", "they", "know", "want", "been", "good",
        "much", "some", "time", "very", "when", "come", "here", "just", "like",
        "long", "make", "many", "over", "such", "take", "than", "them", "well",
        "were", "will", "your", "what", "about", "into", "more", "also", "then",
        "there", "their", "these", "those", "which", "would", "could", "should",
        "where", "while", "other", "after", "before", "being", "because", "each",
        "only", "most", "even", "does", "doing", "done", "both", "same", "once",
    }
)


class TextProcessor:
    """Utility class for text processing tasks."""

    def __init__(self, min_token_length: int = 4):
        """Initialize text processor."""
        self.min_token_length = min_token_length
        self.stopwords = STOP_WORDS
        self.word_tokenizer = RegexpTokenizer(r"[a-z0-9]+")

    def normalize(self, text: str) -> str:
        """
        Lower-case text and replace every non-alphanumeric character with a space.

        Args:
            text: Text to normalize

        Returns:
            Normalized text
        """
        return re.sub(r"[^a-z0-9\s]", " ", text.lower())

    def tokenize_words(self, text: str) -> List[str]:
        """
        Tokenize normalized text into alphanumeric words.

        Args:
            text: Text to tokenize

        Returns:
            List of word tokens
        """
        return self.word_tokenizer.tokenize(self.normalize(text))

    def content_tokens(self, text: str) -> List[str]:
        """
        Tokens long enough to carry meaning, with stopwords removed.

        Args:
            text: Text to tokenize

        Returns:
            List of content tokens in text order
        """
        return [
            token
            for token in self.tokenize_words(text)
            if len(token) >= self.min_token_length and token not in self.stopwords
        ]

    def word_frequencies(self, text: str) -> List[Tuple[str, int]]:
        """
        Count content tokens, ordered by frequency then first appearance.

        Args:
            text: Text to analyze

        Returns:
            List of (word, count) pairs
        """
        word_freq = {}
        for token in self.content_tokens(text):
            word_freq[token] = word_freq.get(token, 0) + 1

        # sorted() is stable, so ties keep first-seen order
        return sorted(word_freq.items(), key=lambda x: x[1], reverse=True)

    def extract_keywords(self, text: str, n: int = 3, min_frequency: int = 2) -> List[str]:
        """
        Extract repeated words from text based on frequency.

        Args:
            text: Text to analyze
            n: Number of keywords to extract
            min_frequency: Minimum number of occurrences

        Returns:
            List of keywords, most frequent first
        """
        return [
            word
            for word, freq in self.word_frequencies(text)
            if freq >= min_frequency
        ][:n]


def dedupe(items: List[str], limit: int = None) -> List[str]:
    """Drop repeated entries (case-insensitive) keeping first occurrence."""
    seen = set()
    result = []
    for item in items:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
        if limit is not None and len(result) >= limit:
            break
    return result


def contains_any(text: str, terms) -> bool:
    """Substring match of any term against already lower-cased text."""
    return any(term in text for term in terms)


def matches_any(text: str, patterns) -> bool:
    """Regex search of any pattern against already lower-cased text."""
    return any(re.search(pattern, text) for pattern in patterns)
