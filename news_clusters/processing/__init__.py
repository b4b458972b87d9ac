"""Content processing module."""

from .clustering import StoryClusterer, cluster_articles
from .dedupe import ArticleDeduplicator, DuplicateGroup, deduplicate_articles
from .enrich import enrich_article, enrich_articles
from .entities import entity_similarity, extract_entities
from .language import detect_language, is_secondary_language
from .sentiment import analyze_sentiment
from .similarity import SimilarityWeights, article_similarity, is_within_time_window
from .text_utils import normalize_title, string_similarity

__all__ = [
    'cluster_articles',
    'StoryClusterer',
    'deduplicate_articles',
    'ArticleDeduplicator',
    'DuplicateGroup',
    'enrich_article',
    'enrich_articles',
    'extract_entities',
    'entity_similarity',
    'detect_language',
    'is_secondary_language',
    'analyze_sentiment',
    'article_similarity',
    'is_within_time_window',
    'SimilarityWeights',
    'normalize_title',
    'string_similarity',
]
