"""Tests for log level, error and timestamp analysis."""
import pytest

from filescope.analyzers.log_analyzer import (
    LogAnalyzer,
    detect_level,
    extract_timestamp,
    is_error_line,
    timestamp_sort_key,
)


def analyze(text, top_k=5):
    return LogAnalyzer(top_k=top_k).analyze(text)


class TestLevels:

    def test_highest_priority_level_wins(self):
        """ERROR beats INFO and WARN beats DEBUG on the same line."""
        assert detect_level("INFO retry after ERROR") == "ERROR"
        assert detect_level("DEBUG then WARN") == "WARN"

    def test_levels_are_case_sensitive_whole_words(self):
        """Lowercase tokens and WARNING don't count."""
        assert detect_level("error in lowercase") is None
        assert detect_level("WARNING is not WARN") == "WARN"
        assert detect_level("WARNING only") is None
        assert detect_level("[TRACE] tick") == "TRACE"

    def test_line_counts_toward_one_level(self):
        """A line with two level tokens is tallied once."""
        result = analyze("ERROR and INFO\nINFO\n")

        assert result.stats["level_error"] == 1
        assert result.stats["level_info"] == 1

    def test_warn_with_fail_is_error_line_but_not_error_level(self):
        """Error lines are tracked apart from the ERROR level."""
        result = analyze("WARN upload FAIL")

        assert result.stats["level_warn"] == 1
        assert result.stats["level_error"] == 0
        assert result.stats["error_lines"] == 1


class TestErrorLines:

    @pytest.mark.parametrize("line", ["ERROR x", "NullPointerEXCEPTION", "job FAILED"])
    def test_error_markers(self, line):
        """Markers match as substrings."""
        assert is_error_line(line)

    def test_markers_are_case_sensitive(self):
        """Lowercase markers are ignored."""
        assert not is_error_line("an error, an exception, a failure")

    def test_samples_capped_and_in_order(self):
        """Samples keep file order and stop at top_k."""
        text = "\n".join(f"ERROR number {i}" for i in range(7))
        result = analyze(text, top_k=5)

        assert result.stats["error_lines"] == 7
        assert result.insights[-6] == "Error lines found: 7"
        assert result.insights[-5:] == [f"  {i + 1}: ERROR number {i}" for i in range(5)]


class TestTimestamps:

    @pytest.mark.parametrize("line, expected", [
        ("2024-01-15 10:30:00 INFO start", "2024-01-15 10:30:00"),
        ("2024-01-15T10:30:00.123Z boot", "2024-01-15 10:30:00.123Z"),
        ("2024-01-15T10:00:00+05:00 tick", "2024-01-15 10:00:00+05:00"),
        ("[2024/01/15 08:00] message", "2024-01-15 08:00"),
        ("10:30:00,250 | worker ready", "10:30:00.250"),
        ("2024-01-15 - done", "2024-01-15"),
    ])
    def test_recognized_formats(self, line, expected):
        """Leading stamps are found and normalized."""
        assert extract_timestamp(line) == expected

    @pytest.mark.parametrize("line", [
        "INFO 2024-01-15 10:30:00 not leading",
        "version 1.2.3",
        "2024-01-15abc",
        "",
    ])
    def test_unrecognized_lines(self, line):
        """Stamps must lead the line and end at a boundary."""
        assert extract_timestamp(line) is None

    def test_range_and_unique_count(self):
        """Range spans the earliest and latest stamps, duplicates count once."""
        text = (
            "2024-01-02 09:00:00 INFO b\n"
            "2024-01-01 08:00:00 INFO a\n"
            "2024-01-02 09:00:00 INFO b again\n"
            "no timestamp ERROR here\n"
        )
        result = analyze(text)

        assert result.stats["unique_timestamps"] == 2
        assert result.stats["first_timestamp"] == "2024-01-01 08:00:00"
        assert result.stats["last_timestamp"] == "2024-01-02 09:00:00"
        assert "Time range: 2024-01-01 08:00:00 to 2024-01-02 09:00:00" in result.insights
        # the line without a timestamp still counts for levels and errors
        assert result.stats["level_error"] == 1
        assert result.stats["error_lines"] == 1

    def test_offsets_ordered_by_instant(self):
        """10:00+05:00 is 05:00 UTC, so it comes before 06:00Z."""
        text = (
            "2024-01-15T06:00:00Z INFO later\n"
            "2024-01-15T10:00:00+05:00 INFO earlier\n"
        )
        result = analyze(text)

        assert result.stats["first_timestamp"] == "2024-01-15 10:00:00+05:00"
        assert result.stats["last_timestamp"] == "2024-01-15 06:00:00Z"
        assert "Time range: 2024-01-15 10:00:00+05:00 to 2024-01-15 06:00:00Z" in result.insights

    def test_no_timestamps(self):
        """No stamps means no range stats or insight."""
        result = analyze("INFO a\nINFO b")

        assert result.stats["unique_timestamps"] == 0
        assert "first_timestamp" not in result.stats
        assert not any(i.startswith("Time range") for i in result.insights)


class TestSortKey:

    @pytest.mark.parametrize("timestamp, key", [
        ("2024-01-15 10:00:00+05:00", "2024-01-15 05:00:00"),
        ("2024-01-15 01:30:00-0230", "2024-01-15 04:00:00"),
        ("2024-01-15 06:00:00Z", "2024-01-15 06:00:00"),
        ("2024-01-01 02:00:00+03:00", "2023-12-31 23:00:00"),
    ])
    def test_zoned_stamps_shift_to_utc(self, timestamp, key):
        """Zone suffixes are applied and dropped."""
        assert timestamp_sort_key(timestamp) == key

    @pytest.mark.parametrize("timestamp", [
        "2024-01-15 10:30:00",
        "2024-01-15",
        "10:30:00.250",
    ])
    def test_unzoned_stamps_are_their_own_key(self, timestamp):
        """Stamps without a zone are left alone."""
        assert timestamp_sort_key(timestamp) == timestamp


def test_level_summary_lists_nonzero_levels_in_priority_order():
    """Zero-count levels are left out of the summary."""
    result = analyze("DEBUG a\nINFO b\nERROR c\nINFO d")
    assert result.insights[0] == "Log levels: ERROR: 1, INFO: 2, DEBUG: 1"


def test_stat_order():
    """Stats come out in a fixed order."""
    assert list(analyze("").stats) == [
        "level_error", "level_warn", "level_info", "level_debug", "level_trace",
        "error_lines", "unique_timestamps",
    ]
