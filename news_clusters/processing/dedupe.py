"""
Title-based deduplication for news articles.

Feeds frequently republish the same report under the same headline with
only casing or punctuation changed. The deduplicator keeps the most recent
copy of each normalized title and records what it dropped.
"""

from dataclasses import dataclass, field

from ..logging import get_logger, log_processing_stage
from ..models import Article
from ..utils import UNKNOWN_DATETIME
from .text_utils import normalize_title

logger = get_logger(__name__)


@dataclass
class DuplicateGroup:
    """Group of duplicate articles."""
    canonical_article: Article
    duplicates: list[Article] = field(default_factory=list)
    method: str = 'title'


def sort_newest_first(articles: list[Article]) -> list[Article]:
    """Stable sort by publish time, newest first, unknown times last."""
    return sorted(
        articles,
        key=lambda article: article.published_datetime or UNKNOWN_DATETIME,
        reverse=True,
    )


class ArticleDeduplicator:
    """Normalized-title article deduplication."""

    def deduplicate(self, articles: list[Article]) -> tuple[list[Article], list[DuplicateGroup]]:
        """Remove articles whose normalized title was already seen.

        Args:
            articles: Articles in any order

        Returns:
            Tuple of (unique articles newest first, duplicate groups)
        """
        title_map: dict[str, DuplicateGroup] = {}
        unique_articles: list[Article] = []
        untitled = 0

        for article in sort_newest_first(articles):
            if not article.title:
                untitled += 1
                continue

            normalized = normalize_title(article.title)

            group = title_map.get(normalized)
            if group is None:
                title_map[normalized] = DuplicateGroup(canonical_article=article)
                unique_articles.append(article)
            else:
                group.duplicates.append(article)

        duplicate_groups = [group for group in title_map.values() if group.duplicates]

        logger.info(
            "Title deduplication finished",
            **log_processing_stage(
                "dedupe",
                input_count=len(articles),
                output_count=len(unique_articles),
                duplicate_groups=len(duplicate_groups),
                untitled=untitled,
            )
        )
        return unique_articles, duplicate_groups


def deduplicate_articles(articles: list[Article]) -> list[Article]:
    """Convenience function for article deduplication."""
    unique_articles, _ = ArticleDeduplicator().deduplicate(articles)
    return unique_articles
