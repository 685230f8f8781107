"""Format-specific analyzers."""

from .base_analyzer import AnalysisResult, BaseAnalyzer
from .text_analyzer import TextAnalyzer
from .markdown_analyzer import MarkdownAnalyzer
from .log_analyzer import LogAnalyzer
from .source_analyzer import SourceCodeAnalyzer

__all__ = [
    "AnalysisResult",
    "BaseAnalyzer",
    "TextAnalyzer",
    "MarkdownAnalyzer",
    "LogAnalyzer",
    "SourceCodeAnalyzer",
]
