"""Tests for RFC 5545 line folding."""

import pytest

from icsgen.folding import CRLF, MAX_LINE_OCTETS, LineFolder, fold_line


def unfold(lines: list[str]) -> str:
    """Reassemble a logical line from its physical lines."""
    return "".join(lines).replace("\r\n ", "").removesuffix("\r\n")


def assert_valid_fold(lines: list[str], limit: int = MAX_LINE_OCTETS) -> None:
    for index, line in enumerate(lines):
        assert line.endswith(CRLF)
        body = line[: -len(CRLF)]
        assert "\r" not in body and "\n" not in body
        assert len(body.encode("utf-8")) <= limit
        if index:
            assert body.startswith(" ")


def test_short_line_unchanged():
    """Test that a line within the limit is returned as one physical line."""
    assert fold_line("SUMMARY:Short") == ["SUMMARY:Short\r\n"]


def test_empty_line():
    """Test that an empty line is just a terminator."""
    assert fold_line("") == ["\r\n"]


def test_exactly_75_octets_not_folded():
    """Test the boundary: 75 octets fit on one line."""
    line = "X" * 75
    assert fold_line(line) == [line + CRLF]


def test_76_octets_folds_once():
    """Test the boundary: one octet over produces a continuation line."""
    assert fold_line("X" * 76) == ["X" * 75 + CRLF, " X" + CRLF]


def test_long_ascii_line():
    """Test folding a long ASCII line into several continuation lines."""
    line = "DESCRIPTION:" + "abcdefghij" * 20
    lines = fold_line(line)

    assert_valid_fold(lines)
    assert len(lines) == 3
    assert len(lines[0]) == 75 + 2
    assert len(lines[1]) == 75 + 2
    assert unfold(lines) == line


def test_multibyte_character_not_split():
    """Test that a two-octet character crossing the boundary moves to the next line."""
    line = "a" * 74 + "é"
    assert fold_line(line) == ["a" * 74 + CRLF, " é" + CRLF]


@pytest.mark.parametrize("char", ["é", "€", "日", "😀"])
@pytest.mark.parametrize("prefix", ["", "S", "SUMMARY:", "DESCRIPTION;LANGUAGE=ja:"])
def test_multibyte_lines_stay_within_limit(char, prefix):
    """Test octet limits and reassembly for 2, 3 and 4 octet characters."""
    line = prefix + char * 90
    lines = fold_line(line)

    assert_valid_fold(lines)
    assert unfold(lines) == line
    # every physical line must be valid UTF-8 on its own
    for physical in lines:
        physical.encode("utf-8").decode("utf-8")


def test_continuation_lines_use_full_width():
    """Test that continuation lines carry 74 octets of content after the space."""
    lines = fold_line("Y" * 300)

    assert [len(line) - 2 for line in lines] == [75, 75, 75, 75, 4]


def test_custom_limit():
    """Test folding with a smaller limit."""
    folder = LineFolder(limit=10)
    lines = folder.fold("0123456789ABCDEF")

    assert lines == ["0123456789\r\n", " ABCDEF\r\n"]
    assert_valid_fold(lines, limit=10)


def test_limit_too_small():
    """Test that a limit that cannot hold a four-octet character is rejected."""
    with pytest.raises(ValueError):
        LineFolder(limit=4)
