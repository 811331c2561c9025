# coding=utf-8
"""
Engine Data Models

Plain immutable records shared by the matcher, scorer, classifier and ranker.
Documents and categories are produced by the caller; the engine only reads them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple


def _as_tuple(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class Document:
    """Article Data Model"""

    id: str                                     # Unique within a collection
    title: str                                  # Headline
    summary: str = ""                           # Short description
    source: str = ""                            # Source label (e.g. "PPAI")
    published_at: Optional[datetime] = None     # Publish timestamp, may be missing
    keywords: Tuple[str, ...] = ()              # Keyword tags, order irrelevant
    url: str = ""                               # Link URL

    def __post_init__(self):
        object.__setattr__(self, "keywords", _as_tuple(self.keywords))

    @property
    def text(self) -> str:
        """Title and summary joined the way the matcher reads them"""
        return f"{self.title} {self.summary}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "source": self.source,
            "published_date": self.published_at.isoformat() if self.published_at else None,
            "keywords": list(self.keywords),
            "url": self.url,
        }


@dataclass(frozen=True)
class Category:
    """Named trigger set used for classification"""

    name: str
    terms: Tuple[str, ...]
    description: str = ""
    suggestions: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "terms", _as_tuple(self.terms))
        object.__setattr__(self, "suggestions", _as_tuple(self.suggestions))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        """Create from a configuration entry ({name, keywords, description, suggestions})"""
        return cls(
            name=data.get("name", ""),
            terms=data.get("keywords") or data.get("terms") or (),
            description=data.get("description", ""),
            suggestions=data.get("suggestions") or (),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "keywords": list(self.terms),
            "description": self.description,
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of matching one term against one document

    strategies holds every strategy that fired; the result is a match
    when at least one did.
    """

    term: str
    strategies: FrozenSet[str] = frozenset()

    @property
    def matched(self) -> bool:
        return bool(self.strategies)

    def __bool__(self) -> bool:
        return self.matched

    def to_dict(self) -> Dict[str, Any]:
        return {
            "term": self.term,
            "matched": self.matched,
            "strategies": sorted(self.strategies),
        }


@dataclass(frozen=True)
class TermContribution:
    """Points one term added to a weighted score, with the reasons"""

    term: str
    points: int
    reasons: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RelevanceScore:
    """
    Relevance of a document to a term set

    value is never negative and is 0 exactly when nothing matched.
    contributions is filled in weighted mode, matches in presence mode.
    """

    value: int
    mode: str
    contributions: Tuple[TermContribution, ...] = ()
    matches: Tuple[MatchResult, ...] = ()

    @property
    def related(self) -> bool:
        return self.value > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "mode": self.mode,
            "related": self.related,
            "contributions": [
                {"term": c.term, "points": c.points, "reasons": list(c.reasons)}
                for c in self.contributions
            ],
            "matches": [m.to_dict() for m in self.matches],
        }


@dataclass(frozen=True)
class CategoryMetrics:
    """Derived metrics of one category over one document collection"""

    category: Category
    article_count: int
    total_count: int
    trend_score: int
    popularity: str
    articles: Tuple[Document, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.category.name,
            "keywords": list(self.category.terms),
            "article_count": self.article_count,
            "total_count": self.total_count,
            "trend_score": self.trend_score,
            "popularity": self.popularity,
            "articles": [doc.to_dict() for doc in self.articles],
        }
