"""Render paragraphs as an indexed listing or as fixed-width wrapped text.

Both renderers are pure: they take the paragraphs and return a new string,
keeping nothing between calls. The mode is chosen per call.

Fixed-width wrapping is greedy first-fit. Words are placed on the current
line while they fit; a word longer than the width is cut into width-sized
pieces, each on its own line, and nothing is ever dropped.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from texteditor.paragraphs import EditFailure


type RenderMode = Literal["raw", "fixed"]

RENDER_MODES: tuple[RenderMode, ...] = ("raw", "fixed")
RAW_DELIMITER = ": "
PARAGRAPH_SEPARATOR = "\n\n"


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Rendered text, or the reason nothing was rendered."""

    ok: bool
    text: str = ""
    failure: EditFailure | None = None

    def __bool__(self) -> bool:
        return self.ok


def is_valid_width(max_width: int | None) -> bool:
    """True for an int width of at least one column."""
    return (
        isinstance(max_width, int)
        and not isinstance(max_width, bool)
        and max_width >= 1
    )


def render_raw(paragraphs: Sequence[str], *, delimiter: str = RAW_DELIMITER) -> str:
    """One line per paragraph, prefixed with its 1-based number."""
    return "\n".join(
        f"{number}{delimiter}{paragraph}"
        for number, paragraph in enumerate(paragraphs, start=1)
    )


def wrap_paragraph(paragraph: str, max_width: int) -> str:
    """Wrap a single paragraph to lines of at most *max_width* characters.

    Args:
        paragraph: Paragraph text; any whitespace run separates words.
        max_width: Column limit, >= 1.

    Returns:
        The wrapped lines joined by newlines. Empty or whitespace-only
        input yields an empty string.
    """
    out: list[str] = []
    width = 0
    for word in paragraph.split():
        # Cut oversized words into full-width pieces on their own lines.
        while len(word) > max_width:
            if width > 0:
                out.append("\n")
                width = 0
            out.append(word[:max_width])
            out.append("\n")
            word = word[max_width:]

        if width + (1 if width > 0 else 0) + len(word) > max_width:
            out.append("\n")
            width = 0

        if width > 0:
            out.append(" ")
            width += 1

        out.append(word)
        width += len(word)
    return "".join(out)


def render_fixed(paragraphs: Sequence[str], max_width: int) -> str:
    """Wrap every paragraph and separate paragraphs with a blank line."""
    return PARAGRAPH_SEPARATOR.join(wrap_paragraph(p, max_width) for p in paragraphs)


def reflow(
    paragraphs: Sequence[str],
    mode: RenderMode = "raw",
    *,
    max_width: int | None = None,
) -> RenderResult:
    """Render *paragraphs* in the requested *mode*.

    Raw mode always succeeds. Fixed mode fails with
    ``missing_configuration`` when *max_width* is unset or below 1.

    Raises:
        ValueError: if *mode* is not a known render mode.
    """
    if mode == "raw":
        return RenderResult(ok=True, text=render_raw(paragraphs))
    if mode == "fixed":
        if not is_valid_width(max_width):
            return RenderResult(ok=False, failure="missing_configuration")
        assert max_width is not None
        return RenderResult(ok=True, text=render_fixed(paragraphs, max_width))
    raise ValueError(f"Unknown render mode: {mode!r} (expected one of {RENDER_MODES})")
