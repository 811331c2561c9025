# coding=utf-8
"""
Relevance Scorer

Aggregates matching across a term set into a RelevanceScore. Two modes:
- weighted: literal search-term ranking (title, summary, exact tag and
  partial tag hits, each with its own weight)
- presence: category membership, related when any term matches

Every call site picks a mode here instead of re-implementing matching.
"""

from typing import Dict, Iterable, Optional

from giftradar.core.matcher import document_tags, match_all, normalize_terms
from giftradar.core.models import Document, RelevanceScore, TermContribution
from giftradar.core.normalizer import normalize
from giftradar.core.synonyms import SynonymTable


WEIGHTED = "weighted"
PRESENCE = "presence"
SCORING_MODES = (WEIGHTED, PRESENCE)

DEFAULT_WEIGHT_CONFIG: Dict[str, int] = {
    "TITLE_WEIGHT": 10,
    "SUMMARY_WEIGHT": 5,
    "EXACT_KEYWORD_WEIGHT": 8,
    "PARTIAL_KEYWORD_WEIGHT": 3,
}


def _weights(weight_config: Optional[Dict]) -> Dict[str, int]:
    if not weight_config:
        return DEFAULT_WEIGHT_CONFIG
    return {**DEFAULT_WEIGHT_CONFIG, **weight_config}


def explain_weighted(
    terms: Iterable[str],
    document: Document,
    weight_config: Optional[Dict] = None,
) -> RelevanceScore:
    """
    Calculate the weighted relevance score with per-term contributions

    Per term:
    - title contains term: TITLE_WEIGHT
    - summary contains term: SUMMARY_WEIGHT
    - term equals a keyword tag: EXACT_KEYWORD_WEIGHT
    - each other tag containing or contained in the term: PARTIAL_KEYWORD_WEIGHT

    Args:
        terms: Selected terms
        document: Document to score
        weight_config: Weight overrides, see DEFAULT_WEIGHT_CONFIG

    Returns:
        RelevanceScore in weighted mode; 0 for an empty term set
    """
    weights = _weights(weight_config)
    title = normalize(document.title)
    summary = normalize(document.summary)
    tags = sorted(document_tags(document))

    contributions = []
    total = 0
    for term in normalize_terms(terms):
        points = 0
        reasons = []

        if term in title:
            points += weights["TITLE_WEIGHT"]
            reasons.append("title")
        if term in summary:
            points += weights["SUMMARY_WEIGHT"]
            reasons.append("summary")

        for tag in tags:
            if tag == term:
                points += weights["EXACT_KEYWORD_WEIGHT"]
                reasons.append(f"exact_keyword:{tag}")
            elif tag in term or term in tag:
                points += weights["PARTIAL_KEYWORD_WEIGHT"]
                reasons.append(f"partial_keyword:{tag}")

        if points:
            contributions.append(TermContribution(term=term, points=points, reasons=tuple(reasons)))
        total += points

    return RelevanceScore(value=total, mode=WEIGHTED, contributions=tuple(contributions))


def weighted_score(
    terms: Iterable[str],
    document: Document,
    weight_config: Optional[Dict] = None,
) -> int:
    """Weighted relevance score of a document for the given terms"""
    return explain_weighted(terms, document, weight_config).value


def explain_presence(
    terms: Iterable[str],
    document: Document,
    synonyms: Optional[SynonymTable] = None,
) -> RelevanceScore:
    """
    Match every term with the full matcher

    The score value is the number of fired strategies across all terms,
    so it is 0 exactly when the document is unrelated.
    """
    matches = match_all(terms, document, synonyms)
    value = sum(len(result.strategies) for result in matches)
    return RelevanceScore(
        value=value,
        mode=PRESENCE,
        matches=tuple(result for result in matches if result.matched),
    )


def is_related(
    terms: Iterable[str],
    document: Document,
    synonyms: Optional[SynonymTable] = None,
) -> bool:
    """Presence mode: whether any term of the set matches the document"""
    return any(result.matched for result in match_all(terms, document, synonyms))


def score(
    terms: Iterable[str],
    document: Document,
    mode: str = WEIGHTED,
    weight_config: Optional[Dict] = None,
    synonyms: Optional[SynonymTable] = None,
) -> RelevanceScore:
    """
    Score a document against a term set in the selected mode

    Args:
        terms: Term set (empty set scores 0)
        document: Document to score
        mode: "weighted" or "presence"
        weight_config: Weight overrides (weighted mode)
        synonyms: Synonym table (presence mode)

    Returns:
        RelevanceScore

    Raises:
        ValueError: Unknown mode
    """
    if mode == WEIGHTED:
        return explain_weighted(terms, document, weight_config)
    if mode == PRESENCE:
        return explain_presence(terms, document, synonyms)
    raise ValueError(f"Unknown scoring mode: {mode} (supported: {', '.join(SCORING_MODES)})")
