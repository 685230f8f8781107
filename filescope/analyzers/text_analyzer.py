"""Plain text analyzer with word frequency."""
import re
from collections import Counter

from .base_analyzer import BaseAnalyzer, AnalysisResult
from ..utils.file_utils import FormatKind


MIN_WORD_LENGTH = 3

# Leading/trailing characters that are not letters or digits
_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")


def normalize_word(word: str) -> str:
    """Lowercase a word and strip punctuation from both ends."""
    return _EDGE_PUNCTUATION.sub("", word.lower())


def word_frequency(text: str) -> Counter:
    """Count normalized words, skipping those shorter than MIN_WORD_LENGTH.

    Counter keeps first-occurrence order, so most_common() breaks ties by
    which word appeared first.
    """
    counts: Counter = Counter()
    for word in text.split():
        clean = normalize_word(word)
        if len(clean) >= MIN_WORD_LENGTH:
            counts[clean] += 1
    return counts


class TextAnalyzer(BaseAnalyzer):
    """Analyzer for plain text files."""

    format_kind = FormatKind.PLAIN_TEXT

    def _analyze_specific(self, result: AnalysisResult, text: str) -> None:
        """Add vocabulary size and most frequent words."""
        counts = word_frequency(text)
        result.add_stat("unique_words", len(counts))

        top_words = counts.most_common(self.top_k)
        if top_words:
            listing = ", ".join(f"{word} ({count})" for word, count in top_words)
            result.add_insight(f"Most frequent words: {listing}")
