"""Article, sentiment and cluster data structures."""

from collections.abc import Iterator
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .utils import format_datetime_iso, to_utc


class Language(Enum):
    """Languages the engine can tell apart."""
    PRIMARY = "en"
    SECONDARY = "pl"
    UNKNOWN = "unknown"


class Assessment(Enum):
    """Sentiment category derived from the comparative score."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class SentimentResult:
    """Sentiment scoring result."""
    score: float
    comparative: float
    assessment: Assessment
    language: Language

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data['assessment'] = self.assessment.value
        data['language'] = self.language.value
        return data


# Upstream feeds hand over camelCase records
_CAMEL_CASE_KEYS = {
    'publishedAt': 'published_at',
    'sourceId': 'source_id',
    'detectedLanguage': 'detected_language',
}
_WIRE_KEYS = {snake: camel for camel, snake in _CAMEL_CASE_KEYS.items()}


class Article(dict[str, Any]):
    """Article record with validation.

    Behaves like a plain dict so upstream fields the engine does not know
    about (url, imageUrl, category, ...) pass through untouched.
    """

    def __init__(self, **kwargs: Any):
        article_id = kwargs.get('id')
        if article_id is None or str(article_id) == '':
            raise ValueError("Missing required field: id")
        kwargs['id'] = str(article_id)

        defaults = {
            'title': '',
            'description': '',
            'published_at': None,
            'source_id': '',
        }
        for key, default_value in defaults.items():
            if kwargs.get(key) is None:
                kwargs[key] = default_value

        super().__init__(**kwargs)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Article":
        """Build an article from an upstream record, accepting camelCase keys."""
        fields = {_CAMEL_CASE_KEYS.get(key, key): value for key, value in data.items()}
        return cls(**fields)

    @property
    def article_id(self) -> str:
        return self['id']

    @property
    def title(self) -> str:
        return self['title'] if isinstance(self['title'], str) else ''

    @property
    def description(self) -> str:
        return self['description'] if isinstance(self['description'], str) else ''

    @property
    def comparison_text(self) -> str:
        """Title and description joined, the text all heuristics work on."""
        return f"{self.title} {self.description}"

    @property
    def published_datetime(self) -> datetime | None:
        """Get published date as an aware datetime, None when unknown."""
        return to_utc(self['published_at'])

    def with_updates(self, **fields: Any) -> "Article":
        """Return a copy of this article with the given fields replaced."""
        return Article(**{**self, **fields})

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation using the upstream camelCase keys."""
        data = {_WIRE_KEYS.get(key, key): value for key, value in self.items()}
        published = data.get('publishedAt')
        if isinstance(published, datetime):
            data['publishedAt'] = format_datetime_iso(published)
        if 'entities' in data:
            data['entities'] = sorted(data['entities'])
        if isinstance(data.get('sentiment'), SentimentResult):
            data['sentiment'] = data['sentiment'].to_dict()
        if isinstance(data.get('detectedLanguage'), Language):
            data['detectedLanguage'] = data['detectedLanguage'].value
        return data


@dataclass
class Cluster:
    """Group of articles judged to report the same underlying story.

    The first article is the cluster seed, the newest article of the story.
    """
    articles: list[Article] = field(default_factory=list)

    @property
    def lead(self) -> Article:
        return self.articles[0]

    @property
    def related(self) -> list[Article]:
        return self.articles[1:]

    @property
    def article_ids(self) -> list[str]:
        return [article.article_id for article in self.articles]

    @property
    def source_ids(self) -> set[str]:
        return {article['source_id'] for article in self.articles if article['source_id']}

    @property
    def size(self) -> int:
        return len(self.articles)

    def __len__(self) -> int:
        return len(self.articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self.articles)

    def to_list(self) -> list[dict[str, Any]]:
        return [article.to_dict() for article in self.articles]
