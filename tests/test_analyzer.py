from dataclasses import replace
from datetime import datetime

import pytz

from giftradar.core.analyzer import (
    category_distribution,
    count_by_source,
    publication_timeline,
    summary_stats,
    top_keywords,
    trending_words,
)


def test_summary_stats(sample_documents):
    stats = summary_stats(sample_documents)

    assert stats["total"] == 4
    assert stats["sources"] == 4
    assert stats["keywords"] == 6
    assert stats["earliest"] == pytz.utc.localize(datetime(2024, 12, 18))
    assert stats["latest"] == pytz.utc.localize(datetime(2025, 3, 12))


def test_summary_stats_empty():
    assert summary_stats([]) == {
        "total": 0,
        "sources": 0,
        "keywords": 0,
        "earliest": None,
        "latest": None,
    }


def test_summary_stats_mixes_naive_and_aware_dates(doc_factory):
    aware = doc_factory("a", "Aware", published="2025-01-01")
    naive = replace(doc_factory("n", "Naive"), published_at=datetime(2025, 2, 1))

    stats = summary_stats([aware, naive])

    assert stats["earliest"] == pytz.utc.localize(datetime(2025, 1, 1))
    assert stats["latest"] == pytz.utc.localize(datetime(2025, 2, 1))


def test_count_by_source(doc_factory):
    documents = [
        doc_factory("1", "A", source="PPAI"),
        doc_factory("2", "B", source="Big Impex"),
        doc_factory("3", "C", source="PPAI"),
    ]

    assert count_by_source(documents) == [("PPAI", 2), ("Big Impex", 1)]


def test_top_keywords_excludes_generic_tags(doc_factory):
    documents = [
        doc_factory("1", "A", keywords=("Gift", "eco", "tech")),
        doc_factory("2", "B", keywords=("corporate", "eco")),
        doc_factory("3", "C", keywords=("gifting", "eco", "tech", "spa")),
    ]

    assert top_keywords(documents) == [("eco", 3), ("tech", 2), ("spa", 1)]
    assert top_keywords(documents, limit=1) == [("eco", 3)]
    assert top_keywords(documents, exclude=())[0] == ("eco", 3)
    assert ("corporate", 1) in top_keywords(documents, exclude=["eco"])


def test_publication_timeline_skips_undated(sample_documents):
    assert publication_timeline(sample_documents) == [
        ("2024-12", 1),
        ("2025-02", 1),
        ("2025-03", 1),
    ]


def test_category_distribution_defaults_to_trend_buckets(sample_documents):
    distribution = dict(category_distribution(sample_documents))

    assert list(distribution) == [
        "Sustainable", "Technology", "Wellness", "Personalized", "Experience", "Premium",
    ]
    assert distribution["Sustainable"] == 2
    assert distribution["Technology"] == 1
    assert distribution["Wellness"] == 1


def test_category_distribution_custom_categories(sample_documents):
    categories = [{"name": "Hampers", "keywords": ["hamper"]}]

    assert category_distribution(sample_documents, categories) == [("Hampers", 1)]


def test_trending_words(doc_factory):
    documents = [
        doc_factory("1", "A", keywords=("eco", "tech")),
        doc_factory("2", "B", keywords=("eco", "tech")),
        doc_factory("3", "C", keywords=("eco", "spa")),
    ]

    words = trending_words(documents)

    assert words == [
        {"term": "eco", "count": 3, "value": 100, "group": "trending"},
        {"term": "tech", "count": 2, "value": 97, "group": "trending"},
    ]
    assert len(trending_words(documents, min_count=1)) == 3


def test_trending_words_groups_and_value_floor(doc_factory):
    keywords = tuple(f"tag{i:02d}" for i in range(40))
    documents = [doc_factory("1", "A", keywords=keywords), doc_factory("2", "B", keywords=keywords)]

    words = trending_words(documents, limit=40)

    assert [w["group"] for w in words[9:12]] == ["trending", "gifting", "gifting"]
    assert words[20]["group"] == "topic"
    assert words[-1]["value"] == 20
