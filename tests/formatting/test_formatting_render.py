"""Tests for tags, operand joining and adaptive timestamps."""

from datetime import datetime

import pytest

from simplelog import LogLevel
from simplelog.formatting import (
    ESCAPED_NEWLINE,
    LEVEL_TAGS,
    escape_newlines,
    format_operands,
    join_operands,
    level_tag,
    render_line,
)
from simplelog.time import DateTracker


class TestLevelTag:
    """Severity tags."""

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_plain_tags_are_seven_wide(self, level) -> None:
        assert len(level_tag(level)) == 7
        assert level_tag(level).strip().strip("[]") in level.name

    @pytest.mark.parametrize(
        "level,code",
        [
            (LogLevel.TRACE, "94"),
            (LogLevel.DEBUG, "92"),
            (LogLevel.INFO, "97"),
            (LogLevel.WARN, "93"),
            (LogLevel.ERROR, "91"),
            (LogLevel.FATAL, "91;5"),
            (LogLevel.PANIC, "91;5;7"),
        ],
    )
    def test_colored_tags(self, level, code) -> None:
        assert level_tag(level, color=True) == f"\x1b[{code}m{LEVEL_TAGS[level]}\x1b[m"

    def test_unknown_level(self) -> None:
        assert level_tag(9) == "   [L9]"
        assert level_tag(9, color=True) == "   [L9]"


class TestOperands:
    """Joining and formatting message operands."""

    @pytest.mark.parametrize(
        "values,expected",
        [
            ((), ""),
            (("a", "b"), "ab"),
            ((1, 2), "1 2"),
            (("n=", 1), "n=1"),
            ((1, "s", 2.5), "1s2.5"),
            ((None, True), "None True"),
        ],
    )
    def test_join(self, values, expected) -> None:
        assert join_operands(values) == expected

    def test_format_without_args_keeps_percent(self) -> None:
        assert format_operands("100%", ()) == "100%"

    def test_format_with_args(self) -> None:
        assert format_operands("%02d-%s", (7, "x")) == "07-x"

    def test_escape(self) -> None:
        assert escape_newlines("a\nb\n") == "a" + ESCAPED_NEWLINE + "b" + ESCAPED_NEWLINE

    def test_render_line(self) -> None:
        assert render_line(" [INFO]", "[t]", "[b]", "m") == " [INFO][t][b] m\n"
        assert render_line(" [INFO]", "[t]", "", "m") == " [INFO][t] m\n"


class TestDateTracker:
    """Adaptive timestamp precision."""

    def test_precision_transitions(self) -> None:
        tracker = DateTracker()

        assert tracker.stamp(datetime(2024, 3, 9, 14, 5, 7, 250000)) == "[14:05-|03/09]"
        assert tracker.stamp(datetime(2024, 3, 9, 14, 5, 8, 4000)) == "[14:05:08.004]"
        assert tracker.stamp(datetime(2024, 3, 10, 0, 0, 1)) == "[00:00:01-|10]"
        assert tracker.stamp(datetime(2024, 3, 10, 0, 0, 2)) == "[00:00:02.000]"
        assert tracker.stamp(datetime(2024, 4, 10, 9, 30)) == "[09:30-|04/10]"

    def test_same_day_other_month_shows_month(self) -> None:
        tracker = DateTracker()
        tracker.stamp(datetime(2024, 3, 9))
        assert tracker.stamp(datetime(2024, 4, 9, 1, 2)) == "[01:02-|04/09]"

    def test_reset(self) -> None:
        tracker = DateTracker()
        tracker.stamp(datetime(2024, 3, 9))
        tracker.reset()
        assert (tracker.last_month, tracker.last_day) == (0, 0)
