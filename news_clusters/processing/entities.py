"""Capitalization-based candidate entity extraction."""

from collections.abc import Collection

from .text_utils import (
    split_sentences,
    starts_uppercase,
    strip_trailing_punctuation,
    tokenize,
)

MIN_ENTITY_LENGTH = 4
# Sentence-initial words must be longer to rule out "The", "After", ...
MIN_INITIAL_ENTITY_LENGTH = 7


def extract_entities(text: str) -> set[str]:
    """Extract candidate named entities from text.

    Capitalized words that do not open a sentence are taken as entities,
    as are unusually long capitalized words that do.

    Args:
        text: Text to extract entities from

    Returns:
        Set of entity strings (empty for empty input)
    """
    entities: set[str] = set()

    for sentence in split_sentences(text):
        words = tokenize(sentence)

        for word in words[1:]:
            if len(word) >= MIN_ENTITY_LENGTH and starts_uppercase(word):
                entities.add(strip_trailing_punctuation(word))

        first_word = words[0]
        if len(first_word) >= MIN_INITIAL_ENTITY_LENGTH and starts_uppercase(first_word):
            entities.add(strip_trailing_punctuation(first_word))

    return entities


def _count_matched(entities: Collection[str], others: Collection[str]) -> int:
    return sum(
        1 for entity in entities
        if any(other in entity or entity in other for other in others)
    )


def entity_similarity(entities1: Collection[str], entities2: Collection[str]) -> float:
    """Calculate overlap between two entity sets.

    An entity is matched when the other set holds an equal entity, one
    containing it, or one it contains. Each direction scores the matched
    count over the size of the union and the two are averaged, so the
    result does not depend on argument order. With exact matches only both
    directions agree and this is plain Jaccard.

    Returns:
        Similarity score (0.0 to 1.0), 0.0 when either set is empty
    """
    if not entities1 or not entities2:
        return 0.0

    union = len(set(entities1) | set(entities2))
    forward = _count_matched(entities1, entities2) / union
    backward = _count_matched(entities2, entities1) / union

    return (forward + backward) / 2
