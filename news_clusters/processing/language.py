"""Heuristic primary/secondary language detection.

Text is classified as secondary-language (Polish) when it carries a Polish
diacritic, or when more than a fifth of its whitespace tokens are Polish
stop words. Everything else, including empty text, is primary (English).
"""

from ..models import Language
from .text_utils import SECONDARY_LANGUAGE_CHARS, tokenize

STOPWORD_RATIO_THRESHOLD = 0.2

SECONDARY_STOPWORDS = frozenset({
    'a', 'aby', 'ach', 'acz', 'aczkolwiek', 'aj', 'albo', 'ale', 'ależ', 'ani', 'aż',
    'bardziej', 'bardzo', 'bez', 'bo', 'bowiem', 'by', 'byli', 'bynajmniej', 'być',
    'był', 'była', 'było', 'były', 'będzie', 'będą', 'cali', 'cała', 'cały', 'ci',
    'cię', 'ciebie', 'co', 'cokolwiek', 'coś', 'czasami', 'czasem', 'czemu', 'czy',
    'czyli', 'daleko', 'dla', 'dlaczego', 'dlatego', 'do', 'dobrze', 'dokąd', 'dość',
    'dużo', 'dwa', 'dwaj', 'dwie', 'dwoje', 'dziś', 'dzisiaj', 'gdy', 'gdyby', 'gdyż',
    'gdzie', 'gdziekolwiek', 'gdzieś', 'go', 'i', 'ich', 'ile', 'im', 'inna', 'inne',
    'inny', 'innych', 'iż', 'ja', 'ją', 'jak', 'jakaś', 'jakby', 'jaki', 'jakichś',
    'jakie', 'jakiś', 'jakiż', 'jakkolwiek', 'jako', 'jakoś', 'je', 'jeden', 'jedna',
    'jedno', 'jednak', 'jednakże', 'jego', 'jej', 'jemu', 'jest', 'jestem', 'jeszcze',
    'jeśli', 'jeżeli', 'już', 'każdy', 'kiedy', 'kilka', 'kimś', 'kto', 'ktokolwiek',
    'ktoś', 'która', 'które', 'którego', 'której', 'który', 'których', 'którym',
    'którzy', 'ku', 'lat', 'lecz', 'lub', 'ma', 'mają', 'mało', 'mam', 'mi', 'mimo',
    'między', 'mną', 'mnie', 'mogą', 'moi', 'moim', 'moja', 'moje', 'może', 'możliwe',
    'można', 'mój', 'mu', 'my', 'na', 'nad', 'nam', 'nami', 'nas', 'nasi', 'nasz',
    'nasza', 'nasze', 'naszego', 'naszych',
})


def stopword_ratio(text: str) -> float:
    """Fraction of lowercased tokens that are secondary-language stop words."""
    words = tokenize(text.lower()) if isinstance(text, str) else []
    if not words:
        return 0.0
    matches = sum(1 for word in words if word in SECONDARY_STOPWORDS)
    return matches / len(words)


def is_secondary_language(text: str) -> bool:
    """Check whether text looks like secondary-language (Polish) text."""
    if not text or not isinstance(text, str) or not text.strip():
        return False

    if SECONDARY_LANGUAGE_CHARS.search(text):
        return True

    return stopword_ratio(text) > STOPWORD_RATIO_THRESHOLD


def detect_language(text: str) -> Language:
    """Classify text as primary or secondary language.

    Never fails; empty or non-string input is primary.
    """
    return Language.SECONDARY if is_secondary_language(text) else Language.PRIMARY
