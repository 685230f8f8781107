"""File analysis dispatcher."""
from ..analyzers.base_analyzer import DEFAULT_TOP_K
from ..analyzers.text_analyzer import TextAnalyzer
from ..analyzers.markdown_analyzer import MarkdownAnalyzer
from ..analyzers.log_analyzer import LogAnalyzer
from ..analyzers.source_analyzer import SourceCodeAnalyzer
from ..logging_setup import get_logger
from ..utils.file_utils import FormatKind, detect_file_type
from .basic_stats import compute_basic_stats
from .file_loader import load_document
from .summary import FileSummary, aggregate


logger = get_logger("analyzer")


class FileAnalyzer:
    """Dispatches file analysis to the appropriate analyzer."""

    def __init__(self, top_k: int = DEFAULT_TOP_K):
        """Initialize analyzers.

        Args:
            top_k: Maximum entries in each capped insight list
        """
        analyzers = [
            TextAnalyzer(top_k),
            MarkdownAnalyzer(top_k),
            LogAnalyzer(top_k),
            SourceCodeAnalyzer(top_k),
        ]
        self.analyzers = {analyzer.format_kind: analyzer for analyzer in analyzers}

    def analyze_text(self, file_path: str, content: str) -> FileSummary:
        """Analyze content that is already in memory.

        Args:
            file_path: Original path or name (used for format detection)
            content: Decoded text

        Returns:
            FileSummary
        """
        file_type = detect_file_type(file_path)
        if file_type is FormatKind.UNKNOWN:
            logger.info("Unknown file type for %s, analyzing as plain text", file_path)

        stats = compute_basic_stats(content)
        analyzer = self.analyzers[file_type.analyzed_as]
        logger.debug("Running %s on %s", type(analyzer).__name__, file_path)
        result = analyzer.analyze(content)

        return aggregate(file_path, file_type, stats, result)

    def analyze_file(self, file_path: str) -> FileSummary:
        """Load and analyze a single file.

        Args:
            file_path: Path to file

        Returns:
            FileSummary

        Raises:
            FileLoadError: If the file cannot be read
        """
        document = load_document(file_path)
        return self.analyze_text(document.path, document.content)
