"""Base analyzer class for format-specific analysis."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Union

from ..utils.file_utils import FormatKind


StatValue = Union[int, float, str]

DEFAULT_TOP_K = 5


@dataclass
class AnalysisResult:
    """Insights produced by one analyzer run.

    Detailed stats and key insights keep the order in which they were added.
    """
    stats: dict[str, StatValue] = field(default_factory=dict)
    insights: list[str] = field(default_factory=list)

    def add_stat(self, label: str, value: StatValue) -> None:
        """Record a detailed stat.

        Raises:
            ValueError: If the label was already recorded
        """
        if label in self.stats:
            raise ValueError(f"Duplicate stat label: {label}")
        self.stats[label] = value

    def add_insight(self, text: str) -> None:
        self.insights.append(text)


class BaseAnalyzer(ABC):
    """Abstract base class for format analyzers.

    Analyzers keep no per-run state; every call to analyze() builds a fresh
    result, so one instance can be reused.
    """

    format_kind: FormatKind

    def __init__(self, top_k: int = DEFAULT_TOP_K):
        """Initialize analyzer.

        Args:
            top_k: Maximum entries in each capped insight list
        """
        if top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {top_k}")
        self.top_k = top_k

    def analyze(self, text: str) -> AnalysisResult:
        """Analyze document content.

        Args:
            text: Full decoded content

        Returns:
            AnalysisResult with stats and insights
        """
        result = AnalysisResult()
        self._analyze_specific(result, text)
        return result

    @abstractmethod
    def _analyze_specific(self, result: AnalysisResult, text: str) -> None:
        """Perform analyzer-specific analysis.

        Args:
            result: AnalysisResult to populate
            text: File content
        """
        pass

    def _format_capped(self, items: list[str]) -> str:
        """Join the first top_k items, noting how many were left out."""
        shown = ", ".join(items[:self.top_k])
        hidden = len(items) - self.top_k
        if hidden > 0:
            shown += f" (+{hidden} more)"
        return shown
