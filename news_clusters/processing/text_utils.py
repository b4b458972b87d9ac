"""Text processing utilities shared by the language, entity and dedupe stages."""

import re
from collections import Counter

# Punctuation removed from titles before duplicate comparison
TITLE_PUNCTUATION = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")

# A single trailing character from this class is dropped from entity tokens
TRAILING_PUNCTUATION = re.compile(r"[,;:)\]\"']$")

# Polish diacritics are the strongest single secondary-language signal
SECONDARY_LANGUAGE_CHARS = re.compile(r"[ąćęłńóśźżĄĆĘŁŃÓŚŹŻ]")

# Uppercase first letter, including Polish uppercase diacritics
UPPERCASE_START = re.compile(r"^[A-ZĘÓĄŚŁŻŹĆŃ]")


def normalize_title(title: str) -> str:
    """Convert title to the form used for duplicate detection.

    Args:
        title: Article title

    Returns:
        Lowercased title with whitespace collapsed and punctuation removed
    """
    if not title or not isinstance(title, str):
        return ""

    title = title.lower()
    title = re.sub(r'\s+', ' ', title)
    title = TITLE_PUNCTUATION.sub('', title)
    return title.strip()


def tokenize(text: str) -> list[str]:
    """Split text into whitespace-separated tokens."""
    if not text or not isinstance(text, str):
        return []
    return text.split()


def split_sentences(text: str) -> list[str]:
    """Split text on runs of sentence-ending punctuation, dropping blanks."""
    if not text or not isinstance(text, str):
        return []

    sentences = []
    for sentence in SENTENCE_BOUNDARY.split(text):
        sentence = sentence.strip()
        if sentence:
            sentences.append(sentence)
    return sentences


def strip_trailing_punctuation(token: str) -> str:
    return TRAILING_PUNCTUATION.sub('', token)


def starts_uppercase(token: str) -> bool:
    return bool(UPPERCASE_START.match(token))


def _bigrams(text: str) -> Counter[str]:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def string_similarity(text1: str, text2: str) -> float:
    """Calculate string similarity using the Sørensen–Dice coefficient.

    Whitespace is ignored and the strings are compared on their character
    bigrams.

    Args:
        text1: First text
        text2: Second text

    Returns:
        Similarity score (0.0 to 1.0), 0.0 when either side is empty
    """
    first = re.sub(r'\s+', '', text1) if isinstance(text1, str) else ''
    second = re.sub(r'\s+', '', text2) if isinstance(text2, str) else ''

    if not first or not second:
        return 0.0
    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    bigrams1 = _bigrams(first)
    bigrams2 = _bigrams(second)
    intersection = sum((bigrams1 & bigrams2).values())

    return 2.0 * intersection / (len(first) + len(second) - 2)
