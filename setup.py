#!/usr/bin/env python3
"""Setup script for the news story clustering engine."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="news-clusters",
    version="0.1.0",
    author="News Aggregator Team",
    author_email="team@example.com",
    description="Deduplicates, enriches and clusters aggregated news articles into stories",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/news-clusters",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.11",
    install_requires=[
        "pydantic-settings>=2.2",
        "structlog>=24.1",
        "orjson>=3.10",
        "click>=8.1",
        "rich>=13.7.1",
        "vaderSentiment>=3.3.2",
    ],
    extras_require={
        "dev": [
            "pytest>=8.2",
            "ruff>=0.4",
            "mypy>=1.10",
            "coverage>=7.5",
            "pytest-cov>=4.1",
        ]
    },
    entry_points={
        "console_scripts": [
            "news-clusters=news_clusters.orchestrator:cli",
        ],
    },
)
