"""Tests for shared text helpers."""

import pytest

from news_clusters.processing.text_utils import (
    split_sentences,
    string_similarity,
    strip_trailing_punctuation,
)


def test_split_sentences_drops_blanks():
    assert split_sentences("One. Two!! Three?! ") == ["One", "Two", "Three"]
    assert split_sentences("") == []


@pytest.mark.parametrize("token, expected", [
    ("Paris,", "Paris"),
    ("Paris)", "Paris"),
    ('Paris"', "Paris"),
    ("Paris'", "Paris"),
    ("Paris]", "Paris"),
    ("Paris\",", 'Paris"'),
    ("Paris", "Paris"),
])
def test_strip_trailing_punctuation_removes_one_character(token, expected):
    assert strip_trailing_punctuation(token) == expected


def test_string_similarity_identical():
    assert string_similarity("Storm hits coast", "Storm hits coast") == 1.0


def test_string_similarity_ignores_whitespace():
    assert string_similarity("Storm hits coast", "Storm  hits\tcoast") == 1.0


def test_string_similarity_bigram_overlap():
    # "night" and "nacht" share only the "ht" bigram
    assert string_similarity("night", "nacht") == pytest.approx(0.25)


def test_string_similarity_is_symmetric():
    left, right = "Hurricane Milton makes landfall", "Milton landfall expected"
    assert string_similarity(left, right) == string_similarity(right, left)


@pytest.mark.parametrize("left, right", [("", "text"), ("text", ""), ("", ""), (" ", " "), ("a", "b"), (None, "x")])
def test_string_similarity_degenerate_input(left, right):
    assert string_similarity(left, right) == 0.0
