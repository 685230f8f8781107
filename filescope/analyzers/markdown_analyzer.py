"""Markdown file analyzer with header outline and fence tracking."""
import re

from .base_analyzer import BaseAnalyzer, AnalysisResult
from ..core.basic_stats import iter_lines
from ..utils.file_utils import FormatKind


# Pattern: optional indent, 1-6 hashes, a space or tab, then the header text
HEADER_PATTERN = re.compile(r'^\s*(#{1,6})[ \t](.*)$')

# Pattern: a line holding only ``` and an optional language tag
FENCE_PATTERN = re.compile(r'^\s*```\s*[\w.+#-]*\s*$')


class MarkdownAnalyzer(BaseAnalyzer):
    """Analyzer for Markdown files."""

    format_kind = FormatKind.MARKDOWN

    def _analyze_specific(self, result: AnalysisResult, text: str) -> None:
        """Count headers, links, images and code blocks outside fenced code."""
        headers = []
        links = 0
        images = 0
        code_blocks = 0
        in_code_block = False

        for line in iter_lines(text):
            if FENCE_PATTERN.match(line):
                in_code_block = not in_code_block
                if in_code_block:
                    code_blocks += 1
                continue

            if in_code_block:
                continue

            match = HEADER_PATTERN.match(line)
            if match:
                hashes, header_text = match.groups()
                headers.append((len(hashes), header_text.strip()))

            # Independent scans; '![x](y)' counts as both an image and a link
            links += line.count("](")
            images += line.count("![")

        result.add_stat("headers", len(headers))
        result.add_stat("links", links)
        result.add_stat("images", images)
        result.add_stat("code_blocks", code_blocks)

        if headers:
            outline = [f"H{level}: {header_text}" for level, header_text in headers[:self.top_k]]
            result.add_insight(f"Document structure: {', '.join(outline)}")

        if in_code_block:
            result.add_insight("Unclosed code block at end of document")
