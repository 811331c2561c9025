# coding=utf-8
"""
Core Module - Keyword relevance and classification engine

Leaf-first:
- normalizer: case folding and compound splitting
- synonyms: synonym table
- matcher: five-strategy term matching
- scorer: weighted and presence scoring
- classifier: category metrics
- ranker: collection ordering
plus filters, analyzer, data loading and config loading around them.
"""

from giftradar.core.models import (
    Document,
    Category,
    MatchResult,
    TermContribution,
    RelevanceScore,
    CategoryMetrics,
)
from giftradar.core.normalizer import normalize, split_compound
from giftradar.core.synonyms import SYNONYM_GROUPS, SynonymTable, groups_for, lookup
from giftradar.core.matcher import STRATEGIES, match, match_all
from giftradar.core.scorer import (
    DEFAULT_WEIGHT_CONFIG,
    PRESENCE,
    WEIGHTED,
    explain_weighted,
    is_related,
    score,
    weighted_score,
)
from giftradar.core.classifier import (
    DEFAULT_TREND_CONFIG,
    DocumentCategorizer,
    calculate_trend_score,
    category_metrics,
    classify_collection,
    load_categories,
    popularity_tier,
    related_documents,
)
from giftradar.core.ranker import SORT_CRITERIA, rank, resolve_criterion
from giftradar.core.filters import FilterOptions, apply_filters, available_keywords, available_sources
from giftradar.core.analyzer import (
    category_distribution,
    count_by_source,
    publication_timeline,
    summary_stats,
    top_keywords,
    trending_words,
)
from giftradar.core.data import load_documents, parse_documents
from giftradar.core.loader import default_config, load_config

__all__ = [
    # Models
    "Document",
    "Category",
    "MatchResult",
    "TermContribution",
    "RelevanceScore",
    "CategoryMetrics",
    # Engine
    "normalize",
    "split_compound",
    "SYNONYM_GROUPS",
    "SynonymTable",
    "lookup",
    "groups_for",
    "STRATEGIES",
    "match",
    "match_all",
    "DEFAULT_WEIGHT_CONFIG",
    "WEIGHTED",
    "PRESENCE",
    "score",
    "weighted_score",
    "explain_weighted",
    "is_related",
    "DEFAULT_TREND_CONFIG",
    "DocumentCategorizer",
    "calculate_trend_score",
    "popularity_tier",
    "category_metrics",
    "classify_collection",
    "load_categories",
    "related_documents",
    "SORT_CRITERIA",
    "rank",
    "resolve_criterion",
    # Dashboard helpers
    "FilterOptions",
    "apply_filters",
    "available_sources",
    "available_keywords",
    "summary_stats",
    "count_by_source",
    "top_keywords",
    "publication_timeline",
    "category_distribution",
    "trending_words",
    # Loading
    "load_documents",
    "parse_documents",
    "load_config",
    "default_config",
]
