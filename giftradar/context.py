# coding=utf-8
"""
App Context Module

Provides the AppContext class, binding the loaded configuration (weights,
trend thresholds, categories, synonyms, timezone) to engine calls so that
call sites never pass configuration around by hand.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from giftradar.core import (
    Category,
    CategoryMetrics,
    Document,
    DocumentCategorizer,
    FilterOptions,
    RelevanceScore,
    SynonymTable,
    apply_filters,
    available_keywords,
    available_sources,
    category_distribution,
    classify_collection,
    count_by_source,
    default_config,
    load_categories,
    load_documents,
    match_all,
    rank,
    score,
    summary_stats,
    top_keywords,
    publication_timeline,
    trending_words,
)
from giftradar.utils.time import get_configured_time


class AppContext:
    """
    App Context Class

    Encapsulates all configuration dependencies, providing a unified interface.

    Usage Example:
        config = load_config()
        ctx = AppContext(config)

        documents = ctx.load_documents()
        metrics = ctx.category_report(documents)
        ordered = ctx.rank(documents, "keyword-relevance", ["eco-friendly"])
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize App Context

        Args:
            config: Complete configuration dictionary (defaults when None)
        """
        self.config = config if config is not None else default_config()
        self._synonyms = None
        self._categories = None

    # === Config Access ===

    @property
    def timezone(self) -> str:
        """Get configured timezone"""
        return self.config.get("TIMEZONE", "UTC")

    @property
    def data_path(self) -> str:
        return self.config.get("DATA_PATH", "data/articles.json")

    @property
    def weight_config(self) -> Dict:
        """Get weight configuration"""
        return self.config.get("WEIGHT_CONFIG", {})

    @property
    def trend_config(self) -> Dict:
        """Get trend score configuration"""
        return self.config.get("TREND_CONFIG", {})

    @property
    def sample_limit(self) -> int:
        return self.config.get("SAMPLE_LIMIT", 5)

    @property
    def synonyms(self) -> SynonymTable:
        """Synonym table built from configuration (cached)"""
        if self._synonyms is None:
            self._synonyms = SynonymTable(self.config.get("SYNONYMS"))
        return self._synonyms

    @property
    def categories(self) -> List[Category]:
        """Configured categories (cached)"""
        if self._categories is None:
            self._categories = load_categories(self.config.get("CATEGORIES"))
        return self._categories

    def get_time(self) -> datetime:
        """Get current time in configured timezone"""
        return get_configured_time(self.timezone)

    # === Data ===

    def load_documents(self, path: Optional[str] = None) -> List[Document]:
        """Load the document collection (default: DATA_PATH)"""
        return load_documents(path or self.data_path, self.timezone)

    # === Engine ===

    def score(self, terms: Iterable[str], document: Document, mode: str = "weighted") -> RelevanceScore:
        return score(terms, document, mode, self.weight_config, self.synonyms)

    def explain(self, terms: Iterable[str], document: Document) -> Dict:
        """Matcher and weighted scorer trace for one document"""
        terms = list(terms)
        return {
            "document": document.to_dict(),
            "matches": [m.to_dict() for m in match_all(terms, document, self.synonyms)],
            "score": self.score(terms, document).to_dict(),
        }

    def rank(
        self,
        documents: Iterable[Document],
        criterion: str,
        selected_terms: Optional[Iterable[str]] = None,
    ) -> List[Document]:
        return rank(documents, criterion, selected_terms, self.weight_config)

    def filter(self, documents: Iterable[Document], options: FilterOptions) -> List[Document]:
        return apply_filters(
            documents, options, now=self.get_time(), timezone=self.timezone, synonyms=self.synonyms
        )

    def category_report(
        self,
        documents: List[Document],
        sample_limit: Optional[int] = None,
    ) -> List[CategoryMetrics]:
        """Metrics for every configured category"""
        limit = self.sample_limit if sample_limit is None else sample_limit
        return classify_collection(
            self.categories, documents, limit, self.trend_config, self.synonyms
        )

    def categorizer(self) -> DocumentCategorizer:
        return DocumentCategorizer(self.categories, self.synonyms)

    def dashboard_stats(self, documents: List[Document]) -> Dict:
        """Everything the overview charts need"""
        stats = summary_stats(documents)
        return {
            "summary": {
                **stats,
                "earliest": stats["earliest"].isoformat() if stats["earliest"] else None,
                "latest": stats["latest"].isoformat() if stats["latest"] else None,
            },
            "sources": [{"source": s, "count": c} for s, c in count_by_source(documents)],
            "top_keywords": [{"keyword": k, "count": c} for k, c in top_keywords(documents)],
            "timeline": [{"month": m, "count": c} for m, c in publication_timeline(documents)],
            "trend_categories": [
                {"name": n, "count": c}
                for n, c in category_distribution(documents, synonyms=self.synonyms)
            ],
            "trending_words": trending_words(documents),
        }

    def filter_options(self, documents: List[Document]) -> Dict:
        """Choices for the source, date range and keyword filters"""
        years = sorted(
            {str(doc.published_at.year) for doc in documents if doc.published_at is not None},
            reverse=True,
        )
        return {
            "sources": available_sources(documents),
            "date_ranges": ["all"] + years + ["last30", "last90", "last180"],
            "keywords": available_keywords(documents),
        }
