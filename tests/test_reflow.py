"""Tests for texteditor.reflow module."""
import pytest

from texteditor.reflow import (
    RenderResult,
    is_valid_width,
    reflow,
    render_fixed,
    render_raw,
    wrap_paragraph,
)

SAMPLE_PARAGRAPHS = [
    "The quick brown fox jumps over the lazy dog.",
    "",
    "Supercalifragilisticexpialidocious is   a rather\tlong word\nindeed.",
    "   ",
    "a bb ccc dddd eeeee ffffff ggggggg",
]


def _collapse(text: str) -> str:
    return "".join(text.split())


class TestRenderRaw:
    def test_numbers_paragraphs(self) -> None:
        assert render_raw(["first", "second"]) == "1: first\n2: second"

    def test_empty_document(self) -> None:
        assert render_raw([]) == ""

    def test_custom_delimiter(self) -> None:
        assert render_raw(["a"], delimiter=") ") == "1) a"

    def test_rerender_is_identical(self) -> None:
        assert render_raw(SAMPLE_PARAGRAPHS) == render_raw(SAMPLE_PARAGRAPHS)


class TestWrapParagraph:
    def test_long_word_split(self) -> None:
        assert wrap_paragraph("abcdefgh", 3) == "abc\ndef\ngh"

    def test_long_word_exact_multiple(self) -> None:
        assert wrap_paragraph("abcdef", 3) == "abc\ndef"

    def test_greedy_packing(self) -> None:
        assert wrap_paragraph("aaa bbb ccc", 7) == "aaa bbb\nccc"

    def test_word_filling_line_exactly(self) -> None:
        assert wrap_paragraph("abc def", 3) == "abc\ndef"

    def test_long_word_after_content_starts_new_line(self) -> None:
        assert wrap_paragraph("ab abcdefg", 3) == "ab\nabc\ndef\ng"

    def test_width_one(self) -> None:
        assert wrap_paragraph("ab c", 1) == "a\nb\nc"

    def test_collapses_whitespace(self) -> None:
        assert wrap_paragraph("  one \t two\n three  ", 80) == "one two three"

    def test_empty_and_blank(self) -> None:
        assert wrap_paragraph("", 5) == ""
        assert wrap_paragraph(" \t\n", 5) == ""

    def test_no_trailing_space(self) -> None:
        for line in wrap_paragraph("aa bb cc dd ee", 5).split("\n"):
            assert line == line.strip()


class TestRenderFixed:
    def test_paragraphs_separated_by_blank_line(self) -> None:
        assert render_fixed(["one two", "three"], 10) == "one two\n\nthree"

    def test_empty_paragraph_keeps_separation(self) -> None:
        assert render_fixed(["a", "", "b"], 5) == "a\n\n\n\nb"

    def test_width_resets_per_paragraph(self) -> None:
        assert render_fixed(["aaaa", "bb"], 5) == "aaaa\n\nbb"

    @pytest.mark.parametrize("width", range(1, 25))
    def test_lines_fit_width(self, width: int) -> None:
        out = render_fixed(SAMPLE_PARAGRAPHS, width)
        assert all(len(line) <= width for line in out.split("\n"))

    @pytest.mark.parametrize("width", range(1, 25))
    def test_no_characters_lost_or_reordered(self, width: int) -> None:
        out = render_fixed(SAMPLE_PARAGRAPHS, width)
        assert _collapse(out) == _collapse("".join(SAMPLE_PARAGRAPHS))


class TestReflow:
    def test_raw_mode(self) -> None:
        result = reflow(["a", "b"], "raw")
        assert isinstance(result, RenderResult)
        assert result.ok
        assert result.text == "1: a\n2: b"

    def test_raw_ignores_width(self) -> None:
        assert reflow(["a"], "raw", max_width=None).ok

    def test_fixed_mode(self) -> None:
        result = reflow(["abcdefgh"], "fixed", max_width=3)
        assert result
        assert result.text == "abc\ndef\ngh"

    def test_fixed_without_width_fails(self) -> None:
        result = reflow(["abc"], "fixed")
        assert not result
        assert result.failure == "missing_configuration"
        assert result.text == ""

    def test_fixed_with_invalid_width_fails(self) -> None:
        assert reflow(["abc"], "fixed", max_width=0).failure == "missing_configuration"
        assert reflow(["abc"], "fixed", max_width=-4).failure == "missing_configuration"

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError, match="Unknown render mode"):
            reflow(["abc"], "fancy")  # type: ignore[arg-type]


class TestIsValidWidth:
    def test_values(self) -> None:
        assert is_valid_width(1)
        assert is_valid_width(80)
        assert not is_valid_width(0)
        assert not is_valid_width(None)
        assert not is_valid_width(True)  # type: ignore[arg-type]
