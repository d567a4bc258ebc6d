from textfit.core import WrappedLine, truncate_lines
from textfit.core.truncator import elide


def make_lines(*contents):
    return [WrappedLine(content=c, width=float(len(c))) for c in contents]


def test_unlimited_returns_all_lines(measurer, font):
    lines = make_lines("a", "b", "c")
    assert truncate_lines(lines, 0, "...", measurer, font, 10) == lines
    assert truncate_lines(lines, -1, "...", measurer, font, 10) == lines


def test_no_ellipsis_when_nothing_dropped(measurer, font):
    lines = make_lines("a", "b")
    assert truncate_lines(lines, 2, "...", measurer, font, 10) == lines
    assert truncate_lines(lines, 5, "...", measurer, font, 10) == lines


def test_elides_last_kept_line(measurer, font):
    lines = make_lines("first", "second", "third")
    result = truncate_lines(lines, 2, "...", measurer, font, 8)
    assert result == [WrappedLine("first", 5.0), WrappedLine("secon...", 8.0)]


def test_following_empty_line_counts_as_dropped(measurer, font):
    lines = make_lines("ab", "")
    result = truncate_lines(lines, 1, "...", measurer, font, 10)
    assert result == [WrappedLine("ab...", 5.0)]


def test_ellipsis_alone_when_it_cannot_fit(measurer, font):
    lines = make_lines("ab", "cd")
    result = truncate_lines(lines, 1, "...", measurer, font, 2)
    assert result == [WrappedLine("...", 3.0)]


def test_kept_lines_retain_their_widths(measurer, font):
    lines = [WrappedLine("a", 99.0), WrappedLine("b", 1.0), WrappedLine("c", 1.0)]
    result = truncate_lines(lines, 2, "...", measurer, font, 10)
    assert result[0].width == 99.0
    assert result[1] == WrappedLine("b...", 4.0)


def test_custom_ellipsis(measurer, font):
    lines = make_lines("one", "two", "three")
    result = truncate_lines(lines, 2, "…", measurer, font, 5)
    assert result[-1] == WrappedLine("two…", 4.0)


def test_elide_drops_characters_from_the_end(measurer, font):
    assert elide("abcdef", "..", measurer, font, 5) == "abc.."
    assert elide("", "..", measurer, font, 5) == ".."
