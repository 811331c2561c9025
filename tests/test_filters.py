from datetime import datetime

import pytest
import pytz

from giftradar.core.filters import (
    FilterOptions,
    apply_filters,
    available_keywords,
    available_sources,
    validate_date_range,
)
from giftradar.utils.errors import InvalidParameterError

NOW = pytz.utc.localize(datetime(2025, 3, 20, 12, 0))


def ids(documents):
    return [doc.id for doc in documents]


def test_default_options_keep_everything(sample_documents):
    options = FilterOptions()

    assert options.is_default
    assert apply_filters(sample_documents, options, now=NOW) == sample_documents


@pytest.mark.parametrize("search_term, expected", [
    ("gadgets", ["a2"]),
    ("MEDITATION", ["a3"]),
    ("weekly", ["a3"]),
    ("  ", ["a1", "a2", "a3", "a4"]),
    ("teapot", []),
])
def test_search_term(sample_documents, search_term, expected):
    result = apply_filters(sample_documents, FilterOptions(search_term=search_term), now=NOW)

    assert ids(result) == expected


def test_source(sample_documents):
    result = apply_filters(sample_documents, FilterOptions(source="Tech Gifting Review"), now=NOW)

    assert ids(result) == ["a2"]


def test_year_range_drops_undated_documents(sample_documents):
    result = apply_filters(sample_documents, FilterOptions(date_range="2025"), now=NOW)

    assert ids(result) == ["a1", "a2"]


def test_last_days_range(sample_documents):
    assert ids(apply_filters(sample_documents, FilterOptions(date_range="last30"), now=NOW)) == ["a1"]
    assert ids(apply_filters(sample_documents, FilterOptions(date_range="last180"), now=NOW)) == ["a1", "a2", "a3"]


def test_keywords_use_presence_matching(sample_documents):
    assert ids(apply_filters(sample_documents, FilterOptions(keywords=("wellness",)), now=NOW)) == ["a3"]
    assert ids(apply_filters(sample_documents, FilterOptions(keywords=("tech", "wellness")), now=NOW)) == ["a2", "a3"]


def test_keyword_filter_reaches_text_through_synonyms(sample_documents):
    result = apply_filters(sample_documents, FilterOptions(keywords=("sustainable",)), now=NOW)

    assert ids(result) == ["a1", "a4"]


def test_filters_combine(sample_documents):
    options = FilterOptions(search_term="gifts", date_range="2025", keywords=("tech",))

    assert ids(apply_filters(sample_documents, options, now=NOW)) == ["a2"]


def test_invalid_date_range_raises(sample_documents):
    with pytest.raises(InvalidParameterError) as exc_info:
        apply_filters(sample_documents, FilterOptions(date_range="yesterday"), now=NOW)

    assert exc_info.value.code == "INVALID_PARAMETER"


@pytest.mark.parametrize("raw, expected", [
    ("all", "all"),
    (" ALL ", "all"),
    ("", "all"),
    ("2024", "2024"),
    ("last90", "last90"),
])
def test_validate_date_range(raw, expected):
    assert validate_date_range(raw) == expected


def test_toggle_keyword():
    options = FilterOptions().toggle_keyword("tech")
    assert options.keywords == ("tech",)
    assert not options.is_default

    options = options.toggle_keyword("wellness").toggle_keyword("tech")
    assert options.keywords == ("wellness",)


def test_available_sources_and_keywords(sample_documents):
    assert available_sources(sample_documents) == [
        "Sustainable Gifts Hub",
        "Tech Gifting Review",
        "Corporate Trends Weekly",
        "Global Gift Trends",
    ]
    assert available_keywords(sample_documents) == [
        "sustainable", "corporate", "recycled", "tech", "wireless", "wellness",
    ]
