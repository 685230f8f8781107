"""Immutable file summary and the aggregation step that builds it."""
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .basic_stats import BasicStats
from ..analyzers.base_analyzer import AnalysisResult, StatValue
from ..utils.file_utils import FormatKind


@dataclass(frozen=True)
class FileSummary:
    """Final analysis result for one file."""
    path: str
    format_kind: FormatKind
    basic_stats: BasicStats
    detailed_stats: Mapping[str, str] = field(hash=False)
    key_insights: tuple[str, ...]

    @property
    def display_name(self) -> str:
        """Get display name (filename only)."""
        return Path(self.path).name

    @property
    def display_path(self) -> str:
        """Get display path with ~ for home."""
        return str(Path(self.path)).replace(str(Path.home()), "~")

    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-serializable form in field order."""
        stats = self.basic_stats
        return {
            "path": self.path,
            "format": self.format_kind.label,
            "basic_stats": {
                "lines": stats.line_count,
                "words": stats.word_count,
                "chars": stats.char_count,
                "avg_word_length": round(stats.avg_word_length, 2),
                "avg_line_length": round(stats.avg_line_length, 2),
            },
            "detailed_stats": dict(self.detailed_stats),
            "key_insights": list(self.key_insights),
        }


def format_stat(value: StatValue) -> str:
    """Render a stat value as text: floats get two decimals."""
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def aggregate(
    path: str,
    kind: FormatKind,
    stats: BasicStats,
    result: AnalysisResult,
) -> FileSummary:
    """Merge classifier output, basic stats and analyzer output.

    Args:
        path: Original file path
        kind: Detected format
        stats: Basic statistics
        result: Output of the format analyzer

    Returns:
        FileSummary holding copies of the analyzer's stats and insights
    """
    detailed = {label: format_stat(value) for label, value in result.stats.items()}
    return FileSummary(
        path=path,
        format_kind=kind,
        basic_stats=stats,
        detailed_stats=MappingProxyType(detailed),
        key_insights=tuple(result.insights),
    )
