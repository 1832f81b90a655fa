"""Glossary of frequently capitalized terms and the paragraphs that use them.

A term is a whitespace-delimited token, after stripping everything but
ASCII letters and whitespace, that starts with an uppercase ASCII letter.
Terms seen at least ``GLOSSARY_MIN_COUNT`` times across the document are
kept and mapped to the sorted 1-based numbers of paragraphs whose raw text
contains the term.

The glossary is recomputed from scratch on every call.
"""
from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence

GLOSSARY_MIN_COUNT = 3

_NON_LETTER_RE = re.compile(r"[^A-Za-z\s]")


def filter_paragraph(paragraph: str) -> str:
    """Drop every character that is not an ASCII letter or whitespace."""
    return _NON_LETTER_RE.sub("", paragraph)


def is_candidate_term(word: str) -> bool:
    """True if *word* starts with an uppercase ASCII letter."""
    word = word.strip()
    return bool(word) and "A" <= word[0] <= "Z"


def compute_term_frequency(
    paragraphs: Sequence[str],
    *,
    min_count: int = GLOSSARY_MIN_COUNT,
) -> dict[str, int]:
    """Count candidate terms across all paragraphs, keeping frequent ones."""
    counts: Counter[str] = Counter()
    for paragraph in paragraphs:
        for word in filter_paragraph(paragraph).split():
            if is_candidate_term(word):
                counts[word] += 1
    return {term: n for term, n in counts.items() if n >= min_count}


def find_paragraph_indexes(paragraphs: Sequence[str], term: str) -> list[int]:
    """1-based numbers of paragraphs whose raw text contains *term*."""
    return [i for i, paragraph in enumerate(paragraphs, start=1) if term in paragraph]


def build_glossary(
    paragraphs: Sequence[str],
    *,
    min_count: int = GLOSSARY_MIN_COUNT,
) -> dict[str, list[int]]:
    """Build the term -> paragraph numbers mapping, ordered by term.

    Args:
        paragraphs: Document paragraphs in order.
        min_count: Minimum total occurrences for a term to be listed.

    Returns:
        Dict in lexicographic term order. Index lists are ascending and
        duplicate-free; a term whose cleaned spelling never appears verbatim
        in the raw text keeps an empty list.
    """
    frequency = compute_term_frequency(paragraphs, min_count=min_count)
    return {term: find_paragraph_indexes(paragraphs, term) for term in sorted(frequency)}


def format_glossary(glossary: dict[str, list[int]]) -> list[str]:
    """Listing lines: term padded to 10 columns, then comma-joined numbers."""
    return [
        f"{term:<10} {', '.join(str(i) for i in indexes)}"
        for term, indexes in glossary.items()
    ]
