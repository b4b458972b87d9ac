"""Tests for lexicon-based sentiment scoring."""

import pytest

from news_clusters.models import Assessment, Language
from news_clusters.processing.sentiment import (
    analyze_sentiment,
    assess,
    score_primary,
    score_secondary,
)


@pytest.mark.parametrize("text", [None, "", 123, ["list"]])
def test_invalid_input_is_neutral_unknown(text):
    result = analyze_sentiment(text)
    assert result.score == 0
    assert result.comparative == 0
    assert result.assessment is Assessment.NEUTRAL
    assert result.language is Language.UNKNOWN


def test_positive_english_text():
    result = analyze_sentiment("Great success for the wonderful team")
    assert result.language is Language.PRIMARY
    assert result.score > 0
    assert result.assessment is Assessment.POSITIVE


def test_negative_english_text():
    result = analyze_sentiment("Terrible disaster leaves the city devastated")
    assert result.score < 0
    assert result.assessment is Assessment.NEGATIVE


def test_neutral_english_text():
    result = analyze_sentiment("Council publishes quarterly budget report")
    assert result.assessment is Assessment.NEUTRAL


def test_primary_comparative_is_score_per_word():
    score, comparative = score_primary("Great news, everyone!")
    assert comparative == pytest.approx(score / 3)


def test_positive_polish_text():
    result = analyze_sentiment("Wspaniały sukces polskiej drużyny")
    assert result.language is Language.SECONDARY
    assert result.score == 2
    assert result.comparative == pytest.approx(0.5)
    assert result.assessment is Assessment.POSITIVE


def test_negative_polish_text():
    result = analyze_sentiment("Kryzys i skandal w rządzie")
    assert result.language is Language.SECONDARY
    assert result.score == -2
    assert result.comparative == pytest.approx(-0.4)
    assert result.assessment is Assessment.NEGATIVE


def test_polish_lexicon_matches_inflected_forms():
    # "problemy" contains the lexicon stem "problem"
    score, comparative = score_secondary("nowe problemy gospodarki")
    assert score == -1
    assert comparative == pytest.approx(-1 / 3)


def test_secondary_scoring_with_no_tokens():
    assert score_secondary("   ") == (0, 0)


@pytest.mark.parametrize("comparative, expected", [
    (0.051, Assessment.POSITIVE),
    (0.05, Assessment.NEUTRAL),
    (0.0, Assessment.NEUTRAL),
    (-0.05, Assessment.NEUTRAL),
    (-0.051, Assessment.NEGATIVE),
])
def test_assessment_thresholds(comparative, expected):
    assert assess(comparative) is expected
