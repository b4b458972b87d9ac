"""
Pairwise article similarity for story clustering.

Headline and named-entity agreement are the most reliable same-story
signals, so they carry most of the weight. Raw text similarity is the
noisiest across paraphrased reporting and is weighted lowest. Articles in
different languages are compared on entities alone, with a penalty.
"""

from dataclasses import dataclass

from ..models import Article
from .entities import entity_similarity, extract_entities
from .language import detect_language
from .text_utils import string_similarity


@dataclass(frozen=True)
class SimilarityWeights:
    """Weights for combining the per-signal similarity scores."""
    title: float = 0.5
    entities: float = 0.3
    text: float = 0.2
    cross_language_penalty: float = 0.7


DEFAULT_WEIGHTS = SimilarityWeights()


def article_entities(article: Article) -> frozenset[str]:
    """Entities of an article, extracted on demand when not yet enriched."""
    entities = article.get('entities')
    if entities is None:
        return frozenset(extract_entities(article.comparison_text))
    return frozenset(entities)


def article_similarity(
    article1: Article,
    article2: Article,
    weights: SimilarityWeights = DEFAULT_WEIGHTS
) -> float:
    """Calculate similarity between two articles.

    Args:
        article1: First article
        article2: Second article
        weights: Signal weights

    Returns:
        Similarity score (0.0 to 1.0)
    """
    text1 = article1.comparison_text
    text2 = article2.comparison_text

    entity_score = entity_similarity(article_entities(article1), article_entities(article2))

    if detect_language(text1) is not detect_language(text2):
        return entity_score * weights.cross_language_penalty

    title_score = string_similarity(article1.title, article2.title)
    text_score = string_similarity(text1, text2)

    return (
        title_score * weights.title
        + entity_score * weights.entities
        + text_score * weights.text
    )


def is_within_time_window(article1: Article, article2: Article, hours_window: float) -> bool:
    """Check if two articles were published within a time window.

    Articles with an unknown publish time are never within any window.
    """
    date1 = article1.published_datetime
    date2 = article2.published_datetime
    if date1 is None or date2 is None:
        return False

    hours_diff = abs((date1 - date2).total_seconds()) / 3600
    return hours_diff <= hours_window
