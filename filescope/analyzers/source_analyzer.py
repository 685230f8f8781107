"""Rust source file analyzer with regex-based extraction.

Uses pragmatic line patterns rather than a parser; a line that matches
nothing simply contributes to no category.
"""
import re
from typing import List

from .base_analyzer import BaseAnalyzer, AnalysisResult
from ..core.basic_stats import iter_lines
from ..utils.file_utils import FormatKind


# Visibility prefix: pub, pub(crate), pub(super), pub(in path)
_VISIBILITY = r'(?:pub(?:\s*\([^)]*\))?\s+)?'

# Generic parameter list, one level of nested <...>; '->' inside closure
# bounds such as Fn(i32) -> i32 does not close the list
_GENERICS = r'(?:<(?:->|[^<>]|<(?:->|[^<>])*>)*>)?'

# Pattern: [pub] [const] [async] [unsafe] [extern "C"] fn name[<T>](
FUNCTION_PATTERN = re.compile(
    r'^\s*' + _VISIBILITY +
    r'(?:(?:const|async|unsafe|extern(?:\s+"[^"]*")?)\s+)*'
    r'fn\s+([A-Za-z_]\w*)\s*' + _GENERICS + r'\s*\('
)

STRUCT_PATTERN = re.compile(r'^\s*' + _VISIBILITY + r'struct\s+([A-Za-z_]\w*)')

ENUM_PATTERN = re.compile(r'^\s*' + _VISIBILITY + r'enum\s+([A-Za-z_]\w*)')

TODO_PATTERN = re.compile(r'\b(?:TODO|FIXME)\b')

IMPORT_KEYWORD = "use "

COMMENT_MARKER = "//"


class SourceCodeAnalyzer(BaseAnalyzer):
    """Analyzer for Rust source files."""

    format_kind = FormatKind.SOURCE_CODE

    def _analyze_specific(self, result: AnalysisResult, text: str) -> None:
        """Count declarations, imports, comments and TODO markers."""
        functions: List[str] = []
        structs: List[str] = []
        enums: List[str] = []
        todo_lines: List[str] = []
        imports = 0
        comment_lines = 0
        non_blank_lines = 0

        for line in iter_lines(text):
            stripped = line.strip()
            if not stripped:
                continue
            non_blank_lines += 1

            if stripped.startswith(COMMENT_MARKER):
                comment_lines += 1
                if TODO_PATTERN.search(stripped):
                    todo_lines.append(stripped)
                continue

            if stripped.startswith(IMPORT_KEYWORD):
                imports += 1
                continue

            match = FUNCTION_PATTERN.match(line)
            if match:
                functions.append(match.group(1))
                continue

            match = STRUCT_PATTERN.match(line)
            if match:
                structs.append(match.group(1))
                continue

            match = ENUM_PATTERN.match(line)
            if match:
                enums.append(match.group(1))

        comment_ratio = comment_lines / non_blank_lines if non_blank_lines else 0.0

        result.add_stat("functions", len(functions))
        result.add_stat("structs", len(structs))
        result.add_stat("enums", len(enums))
        result.add_stat("imports", imports)
        result.add_stat("comment_lines", comment_lines)
        result.add_stat("comment_ratio", comment_ratio)
        result.add_stat("todos", len(todo_lines))

        if functions:
            result.add_insight(f"Functions ({len(functions)}): {self._format_capped(functions)}")
        if structs:
            result.add_insight(f"Structs: {self._format_capped(structs)}")
        if enums:
            result.add_insight(f"Enums: {self._format_capped(enums)}")

        if todo_lines:
            result.add_insight(f"TODOs/FIXMEs found: {len(todo_lines)}")
            for todo in todo_lines[:self.top_k]:
                result.add_insight(f"  {todo}")
