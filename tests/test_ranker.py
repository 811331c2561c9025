from dataclasses import replace
from datetime import datetime

import pytest

from giftradar.core.ranker import SORT_CRITERIA, rank, resolve_criterion


@pytest.fixture
def documents(doc_factory):
    return [
        doc_factory("d1", "beta gifts", source="PPAI", published="2025-01-10", keywords=("gift",)),
        doc_factory("d2", "Alpha Eco Guide", "eco-friendly picks", source="Big Impex", keywords=("eco", "green", "recycled")),
        doc_factory("d3", "Gamma Tech", source="corporate Gift", published="2025-03-01", keywords=()),
        doc_factory("d4", "Delta Eco-Friendly Sets", source="Bundled Gifting", published="2024-11-05", keywords=("eco-friendly", "bamboo")),
    ]


def ids(documents):
    return [doc.id for doc in documents]


def test_date_descending_puts_missing_dates_last(documents):
    assert ids(rank(documents, "date")) == ["d3", "d1", "d4", "d2"]


def test_date_ascending_puts_missing_dates_first(documents):
    assert ids(rank(documents, "date-asc")) == ["d2", "d4", "d1", "d3"]


def test_title_is_case_insensitive(documents):
    assert ids(rank(documents, "title")) == ["d2", "d1", "d4", "d3"]


def test_source(documents):
    assert ids(rank(documents, "source")) == ["d2", "d4", "d3", "d1"]


def test_keyword_count_descending_is_stable(documents):
    assert ids(rank(documents, "keywords")) == ["d2", "d4", "d1", "d3"]


def test_relevance(documents):
    ranked = rank(documents, "keyword-relevance", ["eco-friendly"])

    # d4: title 10 + exact 8; d2: summary 5 + partial "eco" 3; others 0 in collection order
    assert ids(ranked) == ["d4", "d2", "d1", "d3"]


def test_relevance_without_terms_falls_back_to_keyword_count(documents):
    expected = ids(rank(documents, "keywords"))

    assert ids(rank(documents, "keyword-relevance", [])) == expected
    assert ids(rank(documents, "by-relevance-descending", None)) == expected
    assert ids(rank(documents, "keyword-relevance", ["  "])) == expected


def test_rank_is_idempotent(documents):
    for criterion in SORT_CRITERIA:
        first = rank(documents, criterion, ["eco"])
        second = rank(documents, criterion, ["eco"])
        assert ids(first) == ids(second)


def test_rank_does_not_modify_input(documents):
    before = ids(documents)

    rank(documents, "title")

    assert ids(documents) == before


def test_unknown_criterion_keeps_order(documents):
    assert ids(rank(documents, "popularity")) == ids(documents)


def test_naive_and_aware_dates_compare(doc_factory):
    naive = doc_factory("n", "Naive")
    naive = replace(naive, published_at=datetime(2025, 6, 1))
    aware = doc_factory("a", "Aware", published="2025-01-01")

    assert ids(rank([aware, naive], "date")) == ["n", "a"]


@pytest.mark.parametrize("raw, expected", [
    ("by-date-descending", "date"),
    ("by-date-ascending", "date-asc"),
    ("by-title", "title"),
    ("by-source", "source"),
    ("by-keyword-count-descending", "keywords"),
    ("by-relevance-descending", "keyword-relevance"),
    (" Title ", "title"),
    ("nonsense", None),
    ("", None),
])
def test_resolve_criterion(raw, expected):
    assert resolve_criterion(raw) == expected
