# coding=utf-8
"""
Keyword Matcher

Decides whether a single term matches a document, using five independent
strategies:
- keyword_tag: term equals, contains or is contained in a keyword tag
- text: term is a substring of "title summary"
- compound: a hyphen part of the term passes the text or keyword_tag check
- partial_tag: a keyword tag is in a substring relation with any term of
  the calling term set
- synonym: a member of a synonym group containing the term appears in the text
  or in a substring relation with a keyword tag

The result carries every strategy that fired, so callers can explain a
decision without the matcher printing anything.
"""

from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from giftradar.core.models import Document, MatchResult
from giftradar.core.normalizer import normalize, split_compound
from giftradar.core.synonyms import SynonymTable, groups_for


KEYWORD_TAG = "keyword_tag"
TEXT = "text"
COMPOUND = "compound"
PARTIAL_TAG = "partial_tag"
SYNONYM = "synonym"

STRATEGIES = (KEYWORD_TAG, TEXT, COMPOUND, PARTIAL_TAG, SYNONYM)


def document_text(document: Document) -> str:
    """Normalized "title summary" text of a document"""
    return normalize(document.text)


def document_tags(document: Document) -> FrozenSet[str]:
    """Normalized keyword tags as a set (blank tags dropped)"""
    return frozenset(tag for tag in (normalize(k) for k in document.keywords or ()) if tag)


def normalize_terms(terms: Optional[Iterable[str]]) -> List[str]:
    """Normalize a term set, dropping blanks and keeping first-seen order"""
    seen = []
    for term in terms or ():
        value = normalize(term)
        if value and value not in seen:
            seen.append(value)
    return seen


def related_to_tag(needle: str, tags: Iterable[str]) -> bool:
    """Whether needle equals, contains or is contained in any tag"""
    return any(needle == tag or needle in tag or tag in needle for tag in tags)


def _match_prepared(
    term: str,
    text: str,
    tags: FrozenSet[str],
    term_set: Sequence[str],
    synonyms: Optional[SynonymTable],
) -> FrozenSet[str]:
    fired = set()

    if related_to_tag(term, tags):
        fired.add(KEYWORD_TAG)

    if term in text:
        fired.add(TEXT)

    parts = split_compound(term)
    if parts and any(part in text or related_to_tag(part, tags) for part in parts):
        fired.add(COMPOUND)

    if any(related_to_tag(other, tags) for other in term_set):
        fired.add(PARTIAL_TAG)

    related = groups_for(term, synonyms)
    if related and any(word in text or related_to_tag(word, tags) for word in related):
        fired.add(SYNONYM)

    return frozenset(fired)


def match(
    term: str,
    document: Document,
    term_set: Optional[Iterable[str]] = None,
    synonyms: Optional[SynonymTable] = None,
) -> MatchResult:
    """
    Match one term against one document

    Args:
        term: Term to match (case and surrounding whitespace ignored)
        document: Document to inspect
        term_set: Full term set of the caller; the partial_tag strategy is
            evaluated against all of it. Defaults to the term alone.
        synonyms: Synonym table, defaults to the built-in one

    Returns:
        MatchResult with the normalized term and the strategies that fired.
        A blank term never matches.
    """
    normalized = normalize(term)
    if not normalized:
        return MatchResult(term=normalized)

    context = normalize_terms(term_set) if term_set is not None else [normalized]
    fired = _match_prepared(
        normalized,
        document_text(document),
        document_tags(document),
        context or [normalized],
        synonyms,
    )
    return MatchResult(term=normalized, strategies=fired)


def match_all(
    terms: Iterable[str],
    document: Document,
    synonyms: Optional[SynonymTable] = None,
) -> Tuple[MatchResult, ...]:
    """Match every term of a set against a document, sharing the set as context"""
    term_set = normalize_terms(terms)
    if not term_set:
        return ()

    text = document_text(document)
    tags = document_tags(document)
    return tuple(
        MatchResult(term=term, strategies=_match_prepared(term, text, tags, term_set, synonyms))
        for term in term_set
    )
