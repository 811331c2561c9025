# coding=utf-8
"""
Analysis Module

Provides the aggregates behind the dashboard charts:
- summary_stats: Collection totals and date span
- count_by_source: Articles per source
- top_keywords: Most frequent keyword tags
- publication_timeline: Articles per month
- category_distribution: Related articles per category
- trending_words: Recurring keyword tags with display values
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from giftradar.core.categories import TREND_CATEGORIES
from giftradar.core.classifier import load_categories, related_documents
from giftradar.core.models import Document
from giftradar.core.synonyms import SynonymTable
from giftradar.utils.time import as_aware, format_month


DEFAULT_KEYWORD_EXCLUDE = frozenset({"gift", "corporate", "gifting"})


def summary_stats(documents: Sequence[Document]) -> Dict:
    """
    Calculate collection summary

    Args:
        documents: Document collection

    Returns:
        Dict: {total, sources, keywords, earliest, latest}; naive dates
        count as UTC, and dates are None when no document carries one
    """
    dates = [as_aware(doc.published_at) for doc in documents if doc.published_at is not None]
    return {
        "total": len(documents),
        "sources": len({doc.source for doc in documents}),
        "keywords": len({k for doc in documents for k in doc.keywords}),
        "earliest": min(dates) if dates else None,
        "latest": max(dates) if dates else None,
    }


def count_by_source(documents: Iterable[Document]) -> List[Tuple[str, int]]:
    """Article count per source, in first-seen order"""
    return list(Counter(doc.source for doc in documents).items())


def top_keywords(
    documents: Iterable[Document],
    limit: int = 10,
    exclude: Optional[Iterable[str]] = None,
) -> List[Tuple[str, int]]:
    """
    Count keyword tags and return the most frequent ones

    Args:
        documents: Document collection
        limit: Max number of keywords
        exclude: Tags left out (case-insensitive), defaults to the generic
            gift/corporate/gifting tags

    Returns:
        (keyword, count) pairs, highest count first
    """
    excluded = {k.lower() for k in (DEFAULT_KEYWORD_EXCLUDE if exclude is None else exclude)}
    counts = Counter(
        keyword
        for doc in documents
        for keyword in doc.keywords
        if keyword.lower() not in excluded
    )
    return counts.most_common(limit)


def publication_timeline(documents: Iterable[Document]) -> List[Tuple[str, int]]:
    """Article count per publish month (YYYY-MM), oldest month first"""
    counts = Counter(
        format_month(doc.published_at) for doc in documents if doc.published_at is not None
    )
    return sorted(counts.items())


def category_distribution(
    documents: Sequence[Document],
    categories: Optional[Iterable] = None,
    synonyms: Optional[SynonymTable] = None,
) -> List[Tuple[str, int]]:
    """Related article count per category (defaults to the trend chart buckets)"""
    documents = list(documents)
    return [
        (category.name, len(related_documents(category, documents, synonyms)))
        for category in load_categories(TREND_CATEGORIES if categories is None else categories)
    ]


def trending_words(
    documents: Iterable[Document],
    min_count: int = 2,
    limit: int = 30,
) -> List[Dict]:
    """
    Keyword tags that recur across the collection

    Args:
        documents: Document collection
        min_count: Minimum occurrences
        limit: Max number of words

    Returns:
        List of {term, count, value, group}; value decreases by 3 per rank
        with a floor of 20, group is trending for the first 10, gifting
        for the next 10, topic after that
    """
    counts = Counter(keyword for doc in documents for keyword in doc.keywords)
    recurring = [(term, count) for term, count in counts.most_common() if count >= min_count]

    words = []
    for index, (term, count) in enumerate(recurring[:limit]):
        if index < 10:
            group = "trending"
        elif index < 20:
            group = "gifting"
        else:
            group = "topic"
        words.append({
            "term": term,
            "count": count,
            "value": max(20, 100 - index * 3),
            "group": group,
        })
    return words
