"""Batch pipeline: deduplicate, enrich and cluster a list of articles."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .config import Settings, get_settings
from .logging import PerformanceLogger, get_logger, log_processing_stage
from .models import Article, Cluster
from .processing.clustering import StoryClusterer
from .processing.dedupe import ArticleDeduplicator, DuplicateGroup
from .processing.enrich import enrich_articles
from .utils import to_utc

logger = get_logger(__name__)


@dataclass
class ProcessedBatch:
    """Enriched articles together with their story clusters."""
    items: list[Article] = field(default_factory=list)
    clusters: list[Cluster] = field(default_factory=list)
    duplicates: list[DuplicateGroup] = field(default_factory=list)

    @property
    def duplicates_removed(self) -> int:
        return sum(len(group.duplicates) for group in self.duplicates)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            'items': [article.to_dict() for article in self.items],
            'clusters': [cluster.to_list() for cluster in self.clusters],
            'duplicates': self.duplicates_removed,
        }


def coerce_articles(records: Iterable[dict[str, Any]]) -> list[Article]:
    """Turn upstream records into Article instances."""
    return [
        record if isinstance(record, Article) else Article.from_dict(record)
        for record in records
    ]


def filter_newer_than(articles: list[Article], since: datetime | str) -> list[Article]:
    """Keep articles published strictly after `since`.

    Articles with an unknown publish time cannot be shown to be newer and
    are dropped.
    """
    cutoff = to_utc(since)
    if cutoff is None:
        raise ValueError(f"Invalid timestamp provided: {since!r}")

    newer = []
    for article in articles:
        published = article.published_datetime
        if published is None:
            logger.debug("Dropping article with unknown publish time", article_id=article.article_id)
            continue
        if published > cutoff:
            newer.append(article)
    return newer


def process_articles(
    articles: Iterable[dict[str, Any]],
    deduplicate: bool | None = None,
    since: datetime | str | None = None,
    similarity_threshold: float | None = None,
    time_window_hours: float | None = None,
    settings: Settings | None = None,
) -> ProcessedBatch:
    """Run deduplication, enrichment and clustering over one batch.

    Args:
        articles: Article records (Article instances or plain dicts)
        deduplicate: Run title deduplication first (defaults to settings)
        since: Only keep articles published after this timestamp
        similarity_threshold: Override the configured threshold
        time_window_hours: Override the configured time window
        settings: Settings to use instead of the global ones

    Returns:
        The enriched items and their clusters
    """
    settings = settings or get_settings()
    if deduplicate is None:
        deduplicate = settings.deduplicate
    if similarity_threshold is None:
        similarity_threshold = settings.similarity_threshold
    if time_window_hours is None:
        time_window_hours = settings.time_window_hours

    try:
        with PerformanceLogger("process_articles", logger):
            batch = coerce_articles(articles)
            input_count = len(batch)

            if since is not None:
                batch = filter_newer_than(batch, since)
                logger.info(
                    "Filtered by publish time",
                    **log_processing_stage("since", input_count, len(batch), since=str(since))
                )

            if not batch:
                return ProcessedBatch()

            duplicate_groups: list[DuplicateGroup] = []
            if deduplicate:
                batch, duplicate_groups = ArticleDeduplicator().deduplicate(batch)

            items = enrich_articles(batch)

            clusterer = StoryClusterer(similarity_threshold, time_window_hours)
            clusters = clusterer.cluster(items)

            return ProcessedBatch(items=items, clusters=clusters, duplicates=duplicate_groups)

    except Exception as e:
        logger.error("Pipeline failed", error=str(e), exc_info=True)
        raise
