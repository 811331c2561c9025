# coding=utf-8
"""
Document Ranker

Orders a document collection by one criterion. Sorting is stable, so ties
keep collection order.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

import pytz

from giftradar.core.matcher import normalize_terms
from giftradar.core.models import Document
from giftradar.core.scorer import weighted_score
from giftradar.utils.time import as_aware


DATE_DESC = "date"
DATE_ASC = "date-asc"
TITLE = "title"
SOURCE = "source"
KEYWORD_COUNT = "keywords"
RELEVANCE = "keyword-relevance"

SORT_CRITERIA = (DATE_DESC, DATE_ASC, TITLE, SOURCE, KEYWORD_COUNT, RELEVANCE)

CRITERION_ALIASES = {
    "by-date-descending": DATE_DESC,
    "by-date-ascending": DATE_ASC,
    "by-title": TITLE,
    "by-source": SOURCE,
    "by-keyword-count-descending": KEYWORD_COUNT,
    "by-relevance-descending": RELEVANCE,
    "relevance": RELEVANCE,
}

_OLDEST = datetime.min.replace(tzinfo=pytz.utc)


def resolve_criterion(criterion: str) -> Optional[str]:
    """Canonical criterion name, or None when unsupported"""
    value = (criterion or "").strip().lower()
    value = CRITERION_ALIASES.get(value, value)
    return value if value in SORT_CRITERIA else None


def _date_key(document: Document) -> datetime:
    published = document.published_at
    if published is None:
        return _OLDEST
    return as_aware(published)


def _keyword_count(document: Document) -> int:
    return len(document.keywords or ())


def rank(
    documents: Iterable[Document],
    criterion: str = DATE_DESC,
    selected_terms: Optional[Iterable[str]] = None,
    weight_config: Optional[Dict] = None,
) -> List[Document]:
    """
    Rank documents

    Args:
        documents: Collection to order (not modified)
        criterion: One of SORT_CRITERIA or an alias from CRITERION_ALIASES
        selected_terms: Terms for relevance ranking
        weight_config: Weight overrides for relevance ranking

    Returns:
        New ordered list. Missing dates count as the oldest possible date;
        relevance without selected terms falls back to keyword count;
        an unsupported criterion keeps collection order.
    """
    ordered = list(documents)
    resolved = resolve_criterion(criterion)

    if resolved == RELEVANCE:
        terms = normalize_terms(selected_terms)
        if not terms:
            resolved = KEYWORD_COUNT
        else:
            scores = {id(doc): weighted_score(terms, doc, weight_config) for doc in ordered}
            return sorted(ordered, key=lambda doc: scores[id(doc)], reverse=True)

    if resolved == DATE_DESC:
        return sorted(ordered, key=_date_key, reverse=True)
    if resolved == DATE_ASC:
        return sorted(ordered, key=_date_key)
    if resolved == TITLE:
        return sorted(ordered, key=lambda doc: (doc.title.casefold(), doc.title))
    if resolved == SOURCE:
        return sorted(ordered, key=lambda doc: (doc.source.casefold(), doc.source))
    if resolved == KEYWORD_COUNT:
        return sorted(ordered, key=_keyword_count, reverse=True)

    return ordered
