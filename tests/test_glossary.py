"""Tests for texteditor.glossary module."""
from texteditor.glossary import (
    GLOSSARY_MIN_COUNT,
    build_glossary,
    compute_term_frequency,
    filter_paragraph,
    find_paragraph_indexes,
    format_glossary,
    is_candidate_term,
)
from texteditor.paragraphs import DUMMY_TEXT


class TestFilterParagraph:
    def test_strips_digits_punctuation_diacritics(self) -> None:
        assert filter_paragraph("Hé, llo 42!") == "H llo "

    def test_keeps_whitespace_boundaries(self) -> None:
        assert filter_paragraph("one\ntwo\tthree").split() == ["one", "two", "three"]


class TestIsCandidateTerm:
    def test_uppercase_ascii(self) -> None:
        assert is_candidate_term("World")
        assert is_candidate_term("  Zed ")

    def test_rejects(self) -> None:
        assert not is_candidate_term("world")
        assert not is_candidate_term("")
        assert not is_candidate_term("   ")
        assert not is_candidate_term("Ärger")


class TestComputeTermFrequency:
    def test_counts_and_filters(self) -> None:
        paragraphs = ["Hello World", "World of Code", "Hello Code World"]
        assert compute_term_frequency(paragraphs) == {"World": 3}

    def test_case_sensitive_keys(self) -> None:
        paragraphs = ["Word WORD Word", "Word"]
        assert compute_term_frequency(paragraphs) == {"Word": 3}

    def test_punctuation_stripped_before_counting(self) -> None:
        paragraphs = ["Paris, Paris. Paris!"]
        assert compute_term_frequency(paragraphs) == {"Paris": 3}

    def test_custom_threshold(self) -> None:
        paragraphs = ["Hello World", "Hello"]
        assert compute_term_frequency(paragraphs, min_count=2) == {"Hello": 2}


class TestFindParagraphIndexes:
    def test_raw_substring_match(self) -> None:
        paragraphs = ["Code Code Code", "Codes are fun", "nothing here"]
        assert find_paragraph_indexes(paragraphs, "Code") == [1, 2]


class TestBuildGlossary:
    def test_example_document(self) -> None:
        paragraphs = ["Hello World", "World of Code", "Hello Code World"]
        assert build_glossary(paragraphs) == {"World": [1, 2, 3]}

    def test_sorted_by_term(self) -> None:
        paragraphs = ["Zeta Alpha", "Zeta Alpha", "Alpha Zeta Beta"]
        glossary = build_glossary(paragraphs)
        assert list(glossary) == ["Alpha", "Zeta"]

    def test_empty_document(self) -> None:
        assert build_glossary([]) == {}

    def test_properties_hold(self) -> None:
        paragraphs = [
            "Alice met Bob. Alice smiled.",
            "Bob met Carol; Carol met Alice.",
            "nobody here",
            "Carol, Bob and Dave.",
        ]
        glossary = build_glossary(paragraphs)
        counts = compute_term_frequency(paragraphs, min_count=1)
        assert glossary == {"Alice": [1, 2], "Bob": [1, 2, 4], "Carol": [2, 4]}
        for term, indexes in glossary.items():
            assert counts[term] >= GLOSSARY_MIN_COUNT
            assert "A" <= term[0] <= "Z"
            assert indexes == sorted(set(indexes))
            assert all(term in paragraphs[i - 1] for i in indexes)

    def test_cleaned_term_absent_from_raw_text(self) -> None:
        glossary = build_glossary(["Wo1rd Wo2rd Wo3rd"])
        assert glossary == {"Word": []}

    def test_dummy_text(self) -> None:
        assert build_glossary([DUMMY_TEXT]) == {"Ipsum": [1], "Lorem": [1]}

    def test_rebuild_reflects_current_paragraphs(self) -> None:
        paragraphs = ["Hello World", "World of Code", "Hello Code World"]
        assert "World" in build_glossary(paragraphs)
        assert build_glossary(paragraphs[:2]) == {}


class TestFormatGlossary:
    def test_padding_and_joining(self) -> None:
        assert format_glossary({"World": [1, 2, 3]}) == ["World      1, 2, 3"]

    def test_long_term(self) -> None:
        assert format_glossary({"Extraordinary": [2]}) == ["Extraordinary 2"]
