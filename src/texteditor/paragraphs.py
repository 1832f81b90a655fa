"""Paragraph store: the ordered list of paragraphs every command edits.

Indices exposed to callers are 1-based; ``None`` means "the end of the
document" (append for inserts, last paragraph for deletes/replaces).

Mutations never raise on bad input. They return an ``EditResult`` that is
truthy on success and carries a failure code otherwise, and a failed call
leaves the paragraphs untouched.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal


type EditFailure = Literal[
    "invalid_index",
    "no_op_change",
    "missing_configuration",
    "malformed_number",
    "invalid_text",
]

DUMMY_TEXT = (
    "Lorem Ipsum is simply dummy text of the printing and typesetting industry. "
    "Lorem Ipsum has been the industry's standard dummy text ever since the 1500s, "
    "when an unknown printer took a galley of type and scrambled it to make a type "
    "specimen book. It has survived not only five centuries, but also the leap into "
    "electronic typesetting, remaining essentially unchanged. It was popularised in "
    "the 1960s with the release of Letraset sheets containing Lorem Ipsum passages, "
    "and more recently with desktop publishing software like Aldus PageMaker "
    "including versions of Lorem Ipsum."
)


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of a store mutation. Truthy iff the mutation happened."""

    ok: bool
    failure: EditFailure | None = None

    def __post_init__(self) -> None:
        if self.ok and self.failure is not None:
            raise ValueError("successful result cannot carry a failure")
        if not self.ok and self.failure is None:
            raise ValueError("failed result must carry a failure")

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> EditResult:
        return cls(ok=True)

    @classmethod
    def fail(cls, failure: EditFailure) -> EditResult:
        return cls(ok=False, failure=failure)


def _is_index(index: object) -> bool:
    """None or a real int (bool excluded)."""
    return index is None or (isinstance(index, int) and not isinstance(index, bool))


def _word_pattern(word: str, *, case_insensitive: bool) -> re.Pattern[str]:
    """Match *word* literally, not glued to a neighbouring word character."""
    flags = re.IGNORECASE if case_insensitive else 0
    return re.compile(rf"(?<!\w){re.escape(word)}(?!\w)", flags)


def _same_word(a: str, b: str, *, case_insensitive: bool) -> bool:
    a, b = a.strip(), b.strip()
    if case_insensitive:
        return a.casefold() == b.casefold()
    return a == b


def contains_word_in(text: str, word: str, *, case_insensitive: bool = False) -> bool:
    """Return True if *word* occurs in *text* as a standalone word.

    Leading/trailing whitespace of *word* is ignored. An empty word never
    matches.
    """
    word = word.strip()
    if not word:
        return False
    return _word_pattern(word, case_insensitive=case_insensitive).search(text) is not None


def replace_word_in(
    text: str,
    word: str,
    replacement: str,
    *,
    case_insensitive: bool = False,
) -> str:
    """Replace every standalone occurrence of *word* in *text*.

    Returns *text* unchanged when *word* is empty or absent.
    """
    word = word.strip()
    if not word:
        return text
    pattern = _word_pattern(word, case_insensitive=case_insensitive)
    # Callable replacement keeps backslashes in *replacement* literal.
    return pattern.sub(lambda _m: replacement, text)


class ParagraphStore:
    """Ordered, mutable sequence of paragraph strings."""

    def __init__(self, paragraphs: Sequence[str] = ()) -> None:
        for p in paragraphs:
            if not isinstance(p, str):
                raise ValueError(f"paragraph must be a string, got {p!r}")
        self._paragraphs: list[str] = list(paragraphs)

    def __len__(self) -> int:
        return len(self._paragraphs)

    def __repr__(self) -> str:
        return f"ParagraphStore({self._paragraphs!r})"

    # -- reads ---------------------------------------------------------------

    def read(self) -> tuple[str, ...]:
        """Read-only snapshot of all paragraphs in document order."""
        return tuple(self._paragraphs)

    def is_empty(self) -> bool:
        return not self._paragraphs

    def get(self, index: int | None = None) -> str | None:
        """Paragraph at 1-based *index* (last when None), or None if absent."""
        pos = self._existing_position(index)
        if pos is None:
            return None
        return self._paragraphs[pos]

    def contains_word(
        self,
        word: str,
        index: int | None = None,
        *,
        case_insensitive: bool = False,
    ) -> bool:
        """Whether the paragraph at *index* (last when None) contains *word*."""
        paragraph = self.get(index)
        if paragraph is None:
            return False
        return contains_word_in(paragraph, word, case_insensitive=case_insensitive)

    # -- mutations -----------------------------------------------------------

    def insert(self, text: str, index: int | None = None) -> EditResult:
        """Insert *text* as a new paragraph.

        With no index the paragraph is appended. An index outside
        ``[1, len + 1]`` is clamped to the nearest bound, so an insert
        always succeeds and numbering stays contiguous. Non-string *text*
        fails with ``invalid_text``.
        """
        if not isinstance(text, str):
            return EditResult.fail("invalid_text")
        if index is None:
            self._paragraphs.append(text)
            return EditResult.success()
        if not _is_index(index):
            return EditResult.fail("malformed_number")
        pos = min(max(index, 1), len(self._paragraphs) + 1) - 1
        self._paragraphs.insert(pos, text)
        return EditResult.success()

    def delete(self, index: int | None = None) -> EditResult:
        """Remove the paragraph at 1-based *index*, or the last one."""
        if not _is_index(index):
            return EditResult.fail("malformed_number")
        pos = self._existing_position(index)
        if pos is None:
            return EditResult.fail("invalid_index")
        del self._paragraphs[pos]
        return EditResult.success()

    def replace_word(
        self,
        index: int | None,
        original_word: str,
        replacement_word: str,
        *,
        case_insensitive: bool = False,
    ) -> EditResult:
        """Replace *original_word* with *replacement_word* in one paragraph.

        Fails with ``no_op_change`` when the paragraph text would not change
        (word absent or empty) or when the replacement is the same word.
        With *case_insensitive*, a replacement differing only in letter case
        counts as the same word.
        """
        if not isinstance(original_word, str) or not isinstance(replacement_word, str):
            return EditResult.fail("invalid_text")
        if not _is_index(index):
            return EditResult.fail("malformed_number")
        pos = self._existing_position(index)
        if pos is None:
            return EditResult.fail("invalid_index")
        if _same_word(original_word, replacement_word, case_insensitive=case_insensitive):
            return EditResult.fail("no_op_change")
        current = self._paragraphs[pos]
        updated = replace_word_in(
            current, original_word, replacement_word, case_insensitive=case_insensitive,
        )
        if updated == current:
            return EditResult.fail("no_op_change")
        self._paragraphs[pos] = updated
        return EditResult.success()

    # -- helpers -------------------------------------------------------------

    def _existing_position(self, index: int | None) -> int | None:
        """0-based position of an existing paragraph, or None."""
        if not self._paragraphs or not _is_index(index):
            return None
        if index is None:
            return len(self._paragraphs) - 1
        if 1 <= index <= len(self._paragraphs):
            return index - 1
        return None
