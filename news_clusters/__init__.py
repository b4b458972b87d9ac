"""News story clustering engine."""

__version__ = "0.1.0"

from .models import Article, Assessment, Cluster, Language, SentimentResult
from .pipeline import ProcessedBatch, process_articles

__all__ = [
    'Article',
    'Assessment',
    'Cluster',
    'Language',
    'SentimentResult',
    'ProcessedBatch',
    'process_articles',
]
