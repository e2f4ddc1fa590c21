"""Tests for the claim extractor."""

import pytest

from claim_checker.domain.reference_data import EXAMPLE_TEXT
from claim_checker.domain.services.claim_extractor import ClaimExtractor, looks_like_claim


def test_extracts_number_with_unit(extractor):
    """Test that a sentence with a number and unit becomes a candidate."""
    candidates = extractor.extract("Deutschland hat 83 Millionen Einwohner.")

    assert len(candidates) == 1
    assert candidates[0].text == "Deutschland hat 83 Millionen Einwohner"


@pytest.mark.parametrize(
    "sentence",
    [
        "Die Quote liegt bei 3,5% im Jahr",
        "Der Umsatz betrug 200 EUR im Monat",
        "Das kostet ungefähr 12 dollar pro Stück",
        "Hamburg ist die größte Hafenstadt",
        "Berlin hat mehr Einwohner als Hamburg",
        "Bremen hat weniger Einwohner als Köln",
    ],
)
def test_claim_patterns(sentence):
    """Test each claim pattern class."""
    assert looks_like_claim(sentence)


def test_ignores_sentences_without_pattern(extractor):
    """Test that plain sentences are not candidates."""
    assert extractor.extract("Hallo Welt.") == []
    assert extractor.extract("Heute ist ein schöner Tag am See!") == []


def test_ignores_short_sentences(extractor):
    """Test that sentences of ten characters or fewer are dropped."""
    assert extractor.extract("Nur 5 EUR.") == []


def test_consecutive_terminators_form_one_boundary(extractor):
    """Test that '?!' and '...' split only once."""
    candidates = extractor.extract("Wirklich 83 Millionen Menschen?! Das sind 10 Prozent mehr...")

    assert [c.text for c in candidates] == [
        "Wirklich 83 Millionen Menschen",
        "Das sind 10 Prozent mehr",
    ]


def test_preserves_order_and_spans():
    """Test that candidates keep input order and point back into the text."""
    text = "  Berlin hat mehr Einwohner als Hamburg. Hallo Welt. Die Quote liegt bei 3,5% (Stand 2023)."
    candidates = ClaimExtractor().extract(text)

    assert [c.text for c in candidates] == [
        "Berlin hat mehr Einwohner als Hamburg",
        "Die Quote liegt bei 3,5% (Stand 2023)",
    ]
    for candidate in candidates:
        start, end = candidate.span
        assert text[start:end] == candidate.text
    assert candidates[0].span[0] < candidates[1].span[0]


def test_caps_number_of_candidates():
    """Test that sentences beyond the cap are dropped."""
    text = " ".join(f"Stadt {i} hat {i} Millionen Einwohner." for i in range(1, 16))

    assert len(ClaimExtractor().extract(text)) == 10

    capped = ClaimExtractor(max_facts_per_check=3).extract(text)
    assert [c.text for c in capped] == [
        "Stadt 1 hat 1 Millionen Einwohner",
        "Stadt 2 hat 2 Millionen Einwohner",
        "Stadt 3 hat 3 Millionen Einwohner",
    ]


def test_example_text(extractor):
    """Test extraction from the built-in example text."""
    candidates = extractor.extract(EXAMPLE_TEXT)

    assert len(candidates) == 4
    assert candidates[0].text.startswith("Deutschland hat 83 Millionen")
    assert candidates[1].text == "Die Arbeitslosenquote liegt bei 3,5% (Stand 2023)"
    assert candidates[2].text.startswith("Berlin hat mit seinen 3,7 Millionen")
    assert candidates[3].text.startswith("Die deutsche Wirtschaft wuchs 2019 um 10%")


def test_any_text_is_valid_input(extractor):
    """Test that unusual input never raises."""
    assert extractor.extract("") == []
    assert extractor.extract("...!!!???") == []
    assert extractor.extract("\x00\n\t ✨ 🚀") == []


def test_rejects_invalid_cap():
    """Test that the cap must be positive."""
    with pytest.raises(ValueError):
        ClaimExtractor(max_facts_per_check=0)


@pytest.mark.parametrize(
    "sentence",
    [
        "Das ist die größte Ölraffinerie",
        "Norwegen fördert mehr Öl als Dänemark",
        "Hier gibt es weniger Äpfel als Birnen",
    ],
)
def test_word_after_keyword_must_start_with_ascii(sentence):
    """Test that words starting with an umlaut do not complete a pattern."""
    assert not looks_like_claim(sentence)


def test_uppercase_umlaut_superlative_matches():
    """Test that umlauts in keywords still match case-insensitively."""
    assert looks_like_claim("DIE GRÖßTE STADT IST BERLIN")
    assert looks_like_claim("Die Größte Stadt ist Berlin")
