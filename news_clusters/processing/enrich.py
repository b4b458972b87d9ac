"""Per-article enrichment: language, sentiment and entities."""

from ..logging import get_logger
from ..models import Article
from .entities import extract_entities
from .language import detect_language
from .sentiment import analyze_sentiment

logger = get_logger(__name__)


def enrich_article(article: Article) -> Article:
    """Return a copy of the article tagged with language, sentiment and entities."""
    text = article.comparison_text
    return article.with_updates(
        detected_language=detect_language(text),
        sentiment=analyze_sentiment(text),
        entities=frozenset(extract_entities(text)),
    )


def enrich_articles(articles: list[Article]) -> list[Article]:
    """Enrich every article, preserving order."""
    enriched = [enrich_article(article) for article in articles]
    logger.debug("Enriched articles", count=len(enriched))
    return enriched
