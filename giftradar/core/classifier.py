# coding=utf-8
"""
Category Classifier

Partitions a document collection against named categories using the
presence scorer, and derives the display metrics of each category:
- trend score: round(min(CAP, max(FLOOR, share% * SHARE_MULTIPLIER + count * COUNT_WEIGHT)))
- popularity: High above HIGH_THRESHOLD, Medium above MEDIUM_THRESHOLD, else Low
- sample: the first N related documents in collection order
"""

import math
from typing import Dict, Iterable, List, Optional, Sequence

from giftradar.core.categories import GIFT_CATEGORIES
from giftradar.core.models import Category, CategoryMetrics, Document
from giftradar.core.scorer import is_related
from giftradar.core.synonyms import SynonymTable


HIGH = "High"
MEDIUM = "Medium"
LOW = "Low"

DEFAULT_SAMPLE_LIMIT = 5

DEFAULT_TREND_CONFIG: Dict[str, float] = {
    "FLOOR": 20,
    "CAP": 100,
    "SHARE_MULTIPLIER": 2,
    "COUNT_WEIGHT": 10,
    "HIGH_THRESHOLD": 70,
    "MEDIUM_THRESHOLD": 40,
}


def _trend_settings(trend_config: Optional[Dict]) -> Dict[str, float]:
    if not trend_config:
        return DEFAULT_TREND_CONFIG
    return {**DEFAULT_TREND_CONFIG, **trend_config}


def load_categories(entries: Optional[Iterable] = None) -> List[Category]:
    """
    Build Category objects from configuration entries

    Args:
        entries: Dicts ({name, keywords, ...}) or Category objects,
            defaults to the built-in gift categories

    Returns:
        Categories in configuration order
    """
    if entries is None:
        entries = GIFT_CATEGORIES
    return [
        entry if isinstance(entry, Category) else Category.from_dict(entry)
        for entry in entries
    ]


def related_documents(
    category: Category,
    documents: Iterable[Document],
    synonyms: Optional[SynonymTable] = None,
) -> List[Document]:
    """Documents related to the category, in collection order"""
    return [doc for doc in documents if is_related(category.terms, doc, synonyms)]


def calculate_trend_score(
    related_count: int,
    total_count: int,
    trend_config: Optional[Dict] = None,
) -> int:
    """
    Calculate the bounded trend score of a category

    Args:
        related_count: Number of related documents
        total_count: Collection size
        trend_config: Overrides, see DEFAULT_TREND_CONFIG

    Returns:
        int: Score rounded half-up, within [FLOOR, CAP]. An empty collection
        scores FLOOR.
    """
    settings = _trend_settings(trend_config)
    share = (related_count / total_count) * 100 if total_count else 0.0
    raw = share * settings["SHARE_MULTIPLIER"] + related_count * settings["COUNT_WEIGHT"]
    bounded = min(settings["CAP"], max(settings["FLOOR"], raw))
    return int(math.floor(bounded + 0.5))


def popularity_tier(trend_score: float, trend_config: Optional[Dict] = None) -> str:
    """Map a trend score to High / Medium / Low"""
    settings = _trend_settings(trend_config)
    if trend_score > settings["HIGH_THRESHOLD"]:
        return HIGH
    if trend_score > settings["MEDIUM_THRESHOLD"]:
        return MEDIUM
    return LOW


def category_metrics(
    category: Category,
    documents: Sequence[Document],
    sample_limit: int = DEFAULT_SAMPLE_LIMIT,
    trend_config: Optional[Dict] = None,
    synonyms: Optional[SynonymTable] = None,
) -> CategoryMetrics:
    """
    Compute metrics of one category over a collection

    Args:
        category: Category to evaluate
        documents: Document collection
        sample_limit: Max number of related documents kept as sample
        trend_config: Trend score overrides
        synonyms: Synonym table for matching

    Returns:
        CategoryMetrics
    """
    documents = list(documents)
    related = related_documents(category, documents, synonyms)
    trend_score = calculate_trend_score(len(related), len(documents), trend_config)

    return CategoryMetrics(
        category=category,
        article_count=len(related),
        total_count=len(documents),
        trend_score=trend_score,
        popularity=popularity_tier(trend_score, trend_config),
        articles=tuple(related[:max(sample_limit, 0)]),
    )


def classify_collection(
    categories: Iterable[Category],
    documents: Sequence[Document],
    sample_limit: int = DEFAULT_SAMPLE_LIMIT,
    trend_config: Optional[Dict] = None,
    synonyms: Optional[SynonymTable] = None,
) -> List[CategoryMetrics]:
    """Metrics for every category, in configuration order"""
    documents = list(documents)
    return [
        category_metrics(category, documents, sample_limit, trend_config, synonyms)
        for category in categories
    ]


class DocumentCategorizer:
    """
    Assigns documents to categories

    Usage:
        categorizer = DocumentCategorizer()
        names = categorizer.categorize(document)
    """

    def __init__(
        self,
        categories: Optional[Iterable] = None,
        synonyms: Optional[SynonymTable] = None,
    ):
        self.categories = load_categories(categories)
        self.synonyms = synonyms

    def categorize(self, document: Document) -> List[str]:
        """
        Categorize a document

        Args:
            document: Document to categorize

        Returns:
            Names of all matching categories, in configuration order
        """
        return [
            category.name
            for category in self.categories
            if is_related(category.terms, document, self.synonyms)
        ]

    def partition(self, documents: Iterable[Document]) -> Dict[str, List[Document]]:
        """Group documents by category name (a document may land in several)"""
        groups: Dict[str, List[Document]] = {c.name: [] for c in self.categories}
        for document in documents:
            for name in self.categorize(document):
                groups[name].append(document)
        return groups
