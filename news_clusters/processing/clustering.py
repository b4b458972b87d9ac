"""
Greedy story clustering for a batch of articles.

Articles are walked newest first. Each article not yet placed seeds a new
cluster and pulls in every other unplaced article that was published within
the time window of the seed and is similar enough to it. Seeding from the
newest article makes the latest report the cluster's lead.
"""

from ..logging import get_logger, log_processing_stage
from ..models import Article, Cluster
from .dedupe import sort_newest_first
from .entities import extract_entities
from .similarity import DEFAULT_WEIGHTS, SimilarityWeights, article_similarity, is_within_time_window

logger = get_logger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = 0.4
DEFAULT_TIME_WINDOW_HOURS = 48


class StoryClusterer:
    """Groups related coverage into story clusters."""

    def __init__(
        self,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
        time_window_hours: float = DEFAULT_TIME_WINDOW_HOURS,
        weights: SimilarityWeights = DEFAULT_WEIGHTS,
    ):
        self.similarity_threshold = similarity_threshold
        self.time_window_hours = time_window_hours
        self.weights = weights

    def _with_entities(self, articles: list[Article]) -> list[Article]:
        """Copy articles, extracting entities where they are missing."""
        return [
            article if article.get('entities') is not None
            else article.with_updates(entities=frozenset(extract_entities(article.comparison_text)))
            for article in articles
        ]

    def _belongs_with(self, seed: Article, candidate: Article) -> bool:
        if not is_within_time_window(seed, candidate, self.time_window_hours):
            return False
        score = article_similarity(seed, candidate, self.weights)
        return score >= self.similarity_threshold

    def cluster(self, articles: list[Article]) -> list[Cluster]:
        """Cluster articles into stories.

        Args:
            articles: Articles to cluster

        Returns:
            Clusters in seed order; every article id appears in exactly one
        """
        if not articles:
            return []

        sorted_articles = sort_newest_first(self._with_entities(articles))

        clusters: list[Cluster] = []
        processed: set[str] = set()

        for seed in sorted_articles:
            if seed.article_id in processed:
                continue

            cluster = Cluster(articles=[seed])
            processed.add(seed.article_id)

            for candidate in sorted_articles:
                if candidate.article_id in processed:
                    continue
                if self._belongs_with(seed, candidate):
                    cluster.articles.append(candidate)
                    processed.add(candidate.article_id)

            clusters.append(cluster)

        multi = sum(1 for cluster in clusters if len(cluster) > 1)
        logger.info(
            "Story clustering finished",
            **log_processing_stage(
                "cluster",
                input_count=len(articles),
                output_count=len(clusters),
                multi_article_clusters=multi,
                threshold=self.similarity_threshold,
                window_hours=self.time_window_hours,
            )
        )
        return clusters


def cluster_articles(
    articles: list[Article],
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    time_window_hours: float = DEFAULT_TIME_WINDOW_HOURS,
) -> list[Cluster]:
    """Convenience function for story clustering."""
    clusterer = StoryClusterer(similarity_threshold, time_window_hours)
    return clusterer.cluster(articles)
