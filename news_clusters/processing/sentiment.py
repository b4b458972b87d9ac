"""Lexicon-based sentiment scoring for primary and secondary language text.

Secondary-language (Polish) text is scored against a small curated word
list where a token counts when it contains a lexicon word, which lets one
stem cover inflected forms. Primary-language text is scored by summing the
VADER polarity lexicon over its words.
"""

import string
from functools import lru_cache

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from ..logging import get_logger
from ..models import Assessment, Language, SentimentResult
from .language import detect_language
from .text_utils import tokenize

logger = get_logger(__name__)

POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05

SECONDARY_POSITIVE_WORDS = (
    'dobry', 'wspaniały', 'świetny', 'fantastyczny', 'pozytywny', 'doskonały',
    'znakomity', 'wybitny', 'udany', 'sukces', 'zwycięstwo', 'korzyść',
    'wspaniałomyślny', 'szczęśliwy', 'zadowolony', 'radosny', 'super', 'fajny',
    'rewelacyjny', 'pomyślny', 'korzystny', 'dogodny', 'pomyślnie', 'dobrze',
    'przyjazny',
)

SECONDARY_NEGATIVE_WORDS = (
    'zły', 'niedobry', 'fatalny', 'straszny', 'okropny', 'koszmarny', 'negatywny',
    'niekorzystny', 'przeciwny', 'szkodliwy', 'niepożądany', 'niepomyślny',
    'nieodpowiedni', 'nieszczęśliwy', 'smutny', 'przygnębiający', 'porażka',
    'przegrana', 'kryzys', 'problem', 'konflikt', 'wojna', 'skandal',
)

NEUTRAL_RESULT = SentimentResult(
    score=0,
    comparative=0,
    assessment=Assessment.NEUTRAL,
    language=Language.UNKNOWN,
)


@lru_cache(maxsize=1)
def _primary_lexicon() -> dict[str, float]:
    """Word to valence mapping from the VADER lexicon, loaded once."""
    lexicon = SentimentIntensityAnalyzer().lexicon
    logger.debug("Loaded primary sentiment lexicon", words=len(lexicon))
    return lexicon


def assess(comparative: float) -> Assessment:
    """Map a comparative score onto a sentiment category."""
    if comparative > POSITIVE_THRESHOLD:
        return Assessment.POSITIVE
    if comparative < NEGATIVE_THRESHOLD:
        return Assessment.NEGATIVE
    return Assessment.NEUTRAL


def _contains_any(word: str, lexicon: tuple[str, ...]) -> bool:
    return any(entry in word for entry in lexicon)


def score_secondary(text: str) -> tuple[float, float]:
    """Score secondary-language text by substring lexicon matches.

    Returns:
        (score, comparative) where score is positive minus negative matches
    """
    words = tokenize(text.lower())
    if not words:
        return 0, 0

    positive = sum(1 for word in words if _contains_any(word, SECONDARY_POSITIVE_WORDS))
    negative = sum(1 for word in words if _contains_any(word, SECONDARY_NEGATIVE_WORDS))

    score = positive - negative
    return score, score / len(words)


def score_primary(text: str) -> tuple[float, float]:
    """Score primary-language text by summing word valences.

    Returns:
        (score, comparative) where comparative is score per word
    """
    words = [word.strip(string.punctuation) for word in tokenize(text.lower())]
    words = [word for word in words if word]
    if not words:
        return 0, 0

    lexicon = _primary_lexicon()
    score = sum(lexicon.get(word, 0.0) for word in words)
    return score, score / len(words)


def analyze_sentiment(text: str) -> SentimentResult:
    """Analyze text sentiment with language detection.

    Args:
        text: The text to analyze

    Returns:
        Sentiment result; neutral with unknown language for empty or
        non-string input
    """
    if not text or not isinstance(text, str):
        return NEUTRAL_RESULT

    language = detect_language(text)
    if language is Language.SECONDARY:
        score, comparative = score_secondary(text)
    else:
        score, comparative = score_primary(text)

    return SentimentResult(
        score=score,
        comparative=comparative,
        assessment=assess(comparative),
        language=language,
    )
