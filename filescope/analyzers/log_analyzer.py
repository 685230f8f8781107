"""Log file analyzer: level tallies, error lines and timestamp range.

Levels are matched case-sensitively as whole words, highest priority first,
so a line counts toward at most one level. Error lines are tracked on their
own: a line containing FAIL but no ERROR is an error line without an ERROR
level tally.

Timestamps carrying a UTC offset (or Z) are ordered by the instant they name;
stamps without one are taken as UTC. The reported range keeps each stamp as
it appears in the log.
"""
import re
from datetime import datetime, timedelta
from typing import Optional

from .base_analyzer import BaseAnalyzer, AnalysisResult
from ..core.basic_stats import iter_lines
from ..utils.file_utils import FormatKind


# Priority order, highest first
LOG_LEVELS = ("ERROR", "WARN", "INFO", "DEBUG", "TRACE")

LEVEL_PATTERNS = [(level, re.compile(rf"\b{level}\b")) for level in LOG_LEVELS]

ERROR_MARKERS = ("ERROR", "EXCEPTION", "FAIL")

# Leading timestamp, optionally bracketed:
#   2024-01-15 10:30:00    2024-01-15T10:30:00.123Z    2024/01/15    [10:30:00,123]
TIMESTAMP_PATTERN = re.compile(
    r"""
    ^\s*\[?
    (?P<ts>
        \d{4}[-/]\d{2}[-/]\d{2}
        (?:[T\ ]\d{2}:\d{2}(?::\d{2}(?:[.,]\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?
      | \d{2}:\d{2}:\d{2}(?:[.,]\d+)?
    )
    (?=[\s\]|,-]|$)
    """,
    re.VERBOSE,
)

# Zone suffix of a normalized date-time stamp
ZONE_PATTERN = re.compile(r"(?<=\d)(?:Z|(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2}))$")


def detect_level(line: str) -> Optional[str]:
    """Return the highest-priority level token present in the line, if any."""
    for level, pattern in LEVEL_PATTERNS:
        if pattern.search(line):
            return level
    return None


def is_error_line(line: str) -> bool:
    return any(marker in line for marker in ERROR_MARKERS)


def extract_timestamp(line: str) -> Optional[str]:
    """Extract and normalize a leading timestamp.

    Normalization ('T' to space, '/' to '-', ',' to '.') makes timestamps of
    the same shape comparable as strings.

    Args:
        line: Log line

    Returns:
        Normalized timestamp, or None if the line doesn't start with one
    """
    match = TIMESTAMP_PATTERN.match(line)
    if not match:
        return None
    return match.group("ts").replace("T", " ").replace("/", "-").replace(",", ".")


def timestamp_sort_key(timestamp: str) -> str:
    """Ordering key for a normalized timestamp.

    A date-time with a zone suffix is shifted to UTC and the suffix dropped.
    Anything else is its own key.
    """
    zone = ZONE_PATTERN.search(timestamp)
    if " " not in timestamp or zone is None:
        return timestamp
    try:
        moment = datetime.fromisoformat(timestamp[:zone.start()])
    except ValueError:
        return timestamp
    if zone.group("sign"):
        offset = timedelta(hours=int(zone.group("hours")), minutes=int(zone.group("minutes")))
        moment = moment - offset if zone.group("sign") == "+" else moment + offset
    return moment.isoformat(sep=" ")


class LogAnalyzer(BaseAnalyzer):
    """Analyzer for log files."""

    format_kind = FormatKind.LOG

    def _analyze_specific(self, result: AnalysisResult, text: str) -> None:
        """Tally levels, collect error samples and the timestamp range."""
        level_counts = {level: 0 for level in LOG_LEVELS}
        error_count = 0
        error_samples = []
        timestamps = set()
        earliest = None
        latest = None

        for line in iter_lines(text):
            level = detect_level(line)
            if level is not None:
                level_counts[level] += 1

            if is_error_line(line):
                error_count += 1
                if len(error_samples) < self.top_k:
                    error_samples.append(line)

            timestamp = extract_timestamp(line)
            if timestamp is not None:
                timestamps.add(timestamp)
                key = timestamp_sort_key(timestamp)
                if earliest is None or key < earliest[0]:
                    earliest = (key, timestamp)
                if latest is None or key > latest[0]:
                    latest = (key, timestamp)

        for level in LOG_LEVELS:
            result.add_stat(f"level_{level.lower()}", level_counts[level])
        result.add_stat("error_lines", error_count)
        result.add_stat("unique_timestamps", len(timestamps))
        if earliest is not None:
            result.add_stat("first_timestamp", earliest[1])
            result.add_stat("last_timestamp", latest[1])

        level_summary = [f"{level}: {count}" for level, count in level_counts.items() if count]
        if level_summary:
            result.add_insight(f"Log levels: {', '.join(level_summary)}")

        if earliest is not None:
            result.add_insight(f"Time range: {earliest[1]} to {latest[1]}")

        if error_count:
            result.add_insight(f"Error lines found: {error_count}")
            for i, sample in enumerate(error_samples, 1):
                result.add_insight(f"  {i}: {sample}")
