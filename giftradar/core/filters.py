# coding=utf-8
"""
Document Filter Module

Applies the dashboard filter options to a document collection:
- Search term (title, summary, source)
- Source
- Date range (all, a year such as "2025", or lastN days such as "last30")
- Selected keywords (presence scoring)
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from giftradar.core.models import Document
from giftradar.core.normalizer import normalize
from giftradar.core.scorer import is_related
from giftradar.core.synonyms import SynonymTable
from giftradar.utils.errors import InvalidParameterError
from giftradar.utils.time import as_aware, get_configured_time

ALL = "all"

_YEAR_PATTERN = re.compile(r"^\d{4}$")
_LAST_DAYS_PATTERN = re.compile(r"^last(\d+)$")


@dataclass(frozen=True)
class FilterOptions:
    """Filter panel state"""

    search_term: str = ""
    source: str = ALL
    date_range: str = ALL
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "keywords", tuple(self.keywords or ()))

    def toggle_keyword(self, keyword: str) -> "FilterOptions":
        """Options with the keyword added, or removed when already selected"""
        if keyword in self.keywords:
            keywords = tuple(k for k in self.keywords if k != keyword)
        else:
            keywords = self.keywords + (keyword,)
        return FilterOptions(self.search_term, self.source, self.date_range, keywords)

    @property
    def is_default(self) -> bool:
        return (
            not self.search_term
            and self.source == ALL
            and self.date_range == ALL
            and not self.keywords
        )


def validate_date_range(date_range: str) -> str:
    """
    Validate a date range expression

    Raises:
        InvalidParameterError: Expression is not all, a year or lastN
    """
    value = (date_range or ALL).strip().lower()
    if value == ALL or _YEAR_PATTERN.match(value) or _LAST_DAYS_PATTERN.match(value):
        return value
    raise InvalidParameterError(
        f"Invalid date range: {date_range}",
        suggestion="Supported ranges: all, a year such as 2025, last30, last90, last180"
    )


def _in_date_range(document: Document, date_range: str, now: datetime) -> bool:
    if date_range == ALL:
        return True
    if document.published_at is None:
        return False

    if _YEAR_PATTERN.match(date_range):
        return document.published_at.year == int(date_range)

    days = int(_LAST_DAYS_PATTERN.match(date_range).group(1))
    return as_aware(document.published_at) >= as_aware(now) - timedelta(days=days)


def matches_search_term(document: Document, search_term: str) -> bool:
    """Case-insensitive substring search over title, summary and source"""
    term = normalize(search_term)
    if not term:
        return True
    return (
        term in document.title.lower()
        or term in document.summary.lower()
        or term in document.source.lower()
    )


def apply_filters(
    documents: Iterable[Document],
    options: FilterOptions,
    now: Optional[datetime] = None,
    timezone: str = "UTC",
    synonyms: Optional[SynonymTable] = None,
) -> List[Document]:
    """
    Filter a document collection

    Args:
        documents: Collection to filter (order preserved)
        options: Filter options
        now: Reference time for lastN ranges, defaults to the configured clock
        timezone: Timezone of the default clock
        synonyms: Synonym table for keyword filtering

    Returns:
        Documents passing every filter

    Raises:
        InvalidParameterError: Invalid date range expression
    """
    date_range = validate_date_range(options.date_range)
    if now is None:
        now = get_configured_time(timezone)

    filtered = []
    for document in documents:
        if not matches_search_term(document, options.search_term):
            continue
        if options.source != ALL and document.source != options.source:
            continue
        if not _in_date_range(document, date_range, now):
            continue
        if options.keywords and not is_related(options.keywords, document, synonyms):
            continue
        filtered.append(document)

    return filtered


def available_sources(documents: Iterable[Document]) -> List[str]:
    """Distinct sources in first-seen order"""
    return list(dict.fromkeys(document.source for document in documents))


def available_keywords(documents: Iterable[Document]) -> List[str]:
    """Distinct keyword tags in first-seen order"""
    return list(dict.fromkeys(
        keyword for document in documents for keyword in document.keywords
    ))
