"""Tests for title deduplication."""

from news_clusters.processing.dedupe import (
    ArticleDeduplicator,
    deduplicate_articles,
    sort_newest_first,
)
from news_clusters.processing.text_utils import normalize_title


def ids(articles):
    return [article.article_id for article in articles]


def test_normalize_title():
    assert normalize_title("  Storm   Hits Coast!! ") == "storm hits coast"
    assert normalize_title("Breaking: News (Live)") == "breaking news live"
    assert normalize_title("") == ""
    assert normalize_title(None) == ""


def test_keeps_most_recent_duplicate(make_article):
    older = make_article("old", "Storm Hits Coast!!", hours_ago=5)
    newer = make_article("new", "storm hits coast", hours_ago=1)

    assert ids(deduplicate_articles([older, newer])) == ["new"]
    assert ids(deduplicate_articles([newer, older])) == ["new"]


def test_result_is_newest_first(make_article):
    articles = [
        make_article("b", "Second story", hours_ago=3),
        make_article("a", "First story", hours_ago=1),
        make_article("c", "Third story", hours_ago=7),
    ]
    assert ids(deduplicate_articles(articles)) == ["a", "b", "c"]


def test_deduplication_is_idempotent(story_batch, make_article):
    batch = story_batch + [make_article("dup", "HURRICANE MILTON makes landfall in Florida", hours_ago=9)]
    once = deduplicate_articles(batch)
    assert ids(deduplicate_articles(once)) == ids(once)
    assert "dup" not in ids(once)


def test_untitled_articles_are_dropped(make_article):
    articles = [
        make_article("empty", ""),
        make_article("missing", None),
        make_article("kept", "Real headline"),
    ]
    assert ids(deduplicate_articles(articles)) == ["kept"]


def test_punctuation_only_titles_share_one_key(make_article):
    articles = [
        make_article("older", "...", hours_ago=2),
        make_article("newer", "!!!", hours_ago=1),
        make_article("kept", "Real headline", hours_ago=3),
    ]
    unique, groups = ArticleDeduplicator().deduplicate(articles)

    assert ids(unique) == ["newer", "kept"]
    assert [group.canonical_article.article_id for group in groups] == ["newer"]
    assert ids(groups[0].duplicates) == ["older"]


def test_out_of_range_timestamp_does_not_abort(make_article):
    articles = [
        make_article("far", "Same headline", published_at="9999-12-31T23:00:00-05:00"),
        make_article("dated", "Same headline", hours_ago=5),
    ]
    assert ids(deduplicate_articles(articles)) == ["dated"]


def test_unknown_timestamps_sort_oldest(make_article):
    undated = make_article("undated", "Same headline", published_at="garbage")
    dated = make_article("dated", "Same headline", hours_ago=1000)

    assert ids(deduplicate_articles([undated, dated])) == ["dated"]
    assert ids(sort_newest_first([undated, dated])) == ["dated", "undated"]


def test_duplicate_groups_are_reported(make_article):
    articles = [
        make_article("a", "Storm hits coast", hours_ago=1),
        make_article("b", "Storm hits coast.", hours_ago=2),
        make_article("c", "storm, hits coast", hours_ago=3),
        make_article("d", "Other news", hours_ago=1),
    ]
    unique, groups = ArticleDeduplicator().deduplicate(articles)

    assert ids(unique) == ["a", "d"]
    assert len(groups) == 1
    assert groups[0].canonical_article.article_id == "a"
    assert ids(groups[0].duplicates) == ["b", "c"]
    assert groups[0].method == "title"


def test_empty_batch():
    assert deduplicate_articles([]) == []
