"""Tests for heuristic language detection."""

import pytest

from news_clusters.models import Language
from news_clusters.processing.language import detect_language, is_secondary_language, stopword_ratio


def test_polish_greeting_is_secondary():
    assert detect_language("Dzień dobry, jak się masz?") is Language.SECONDARY


def test_english_greeting_is_primary():
    assert detect_language("Good morning, how are you?") is Language.PRIMARY


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None, 42])
def test_empty_or_invalid_text_defaults_to_primary(text):
    assert detect_language(text) is Language.PRIMARY


def test_single_diacritic_is_enough():
    assert is_secondary_language("Breaking news from Łódź")


def test_stopword_ratio_without_diacritics():
    # "jest", "na" and "co" are stop words: 3 of 5 tokens
    text = "to jest na co dzien"
    assert stopword_ratio(text) == pytest.approx(0.6)
    assert detect_language(text) is Language.SECONDARY


def test_stopword_ratio_at_threshold_is_primary():
    # exactly 1 of 5 tokens is a stop word, ratio must exceed 0.2
    assert detect_language("Parliament votes na budget tonight") is Language.PRIMARY


def test_stopwords_match_case_insensitively():
    assert stopword_ratio("JEST NA") == pytest.approx(1.0)
