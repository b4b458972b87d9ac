"""Pytest configuration and fixtures."""

import os
from datetime import UTC, datetime, timedelta

import pytest

# Set test environment
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["JSON_LOGGING"] = "false"

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def reset_logging():
    """Point log output back at the real stderr after tests that swap streams."""
    yield
    from news_clusters.logging import setup_logging
    setup_logging()


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def make_article():
    """Factory for articles published relative to BASE_TIME."""
    from news_clusters.models import Article

    def _make(article_id, title, description="", hours_ago=0.0, source_id="example", **extra):
        published_at = extra.pop("published_at", BASE_TIME - timedelta(hours=hours_ago))
        return Article(
            id=article_id,
            title=title,
            description=description,
            published_at=published_at,
            source_id=source_id,
            **extra,
        )

    return _make


@pytest.fixture
def story_batch(make_article):
    """Two reports of one story plus unrelated coverage."""
    return [
        make_article(
            "storm-1",
            "Hurricane Milton makes landfall in Florida",
            "Hurricane Milton struck the Florida coast near Tampa overnight.",
            hours_ago=0,
            source_id="guardian",
        ),
        make_article(
            "storm-2",
            "Hurricane Milton makes landfall near Tampa, Florida",
            "Forecasters said Hurricane Milton reached Florida with strong winds.",
            hours_ago=2,
            source_id="nyt",
        ),
        make_article(
            "markets-1",
            "Stock markets rally after central bank decision",
            "Investors cheered the Federal Reserve announcement on rates.",
            hours_ago=1,
            source_id="reuters",
        ),
        make_article(
            "football-1",
            "Barcelona sign striker from Benfica",
            "The Catalan club completed the transfer on Tuesday.",
            hours_ago=5,
            source_id="espn",
        ),
    ]
