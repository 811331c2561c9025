# coding=utf-8
"""
Synonym Table

Fixed mapping from a canonical term to the terms treated as interchangeable
with it. Group membership is configuration data: edit SYNONYM_GROUPS (or
pass groups from config.yaml) rather than deriving it.
"""

from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set

from giftradar.core.normalizer import normalize


SYNONYM_GROUPS: Dict[str, List[str]] = {
    "corporate": ["business", "company", "enterprise", "professional", "workplace", "office"],
    "gift": ["gifting", "present", "giveaway", "swag"],
    "sustainable": ["eco", "green", "environmental", "recycled", "eco-friendly", "sustainability"],
    "tech": ["technology", "digital", "smart", "wireless", "innovation", "gadget"],
    "wellness": ["health", "fitness", "self-care", "mindfulness", "wellbeing", "lifestyle"],
    "remote": ["hybrid", "work-from-home", "virtual", "online"],
    "luxury": ["premium", "high-end", "exclusive"],
    "personalized": ["custom", "branded", "customized", "personal", "tailored"],
    "experience": ["subscription", "service", "activity", "event", "adventure"],
    "professional": ["business", "corporate", "executive", "office", "workplace"],
}


class SynonymTable:
    """
    Bidirectional synonym lookup

    A query term hits a group when it equals the group's canonical term or
    is one of its synonyms. Groups sharing a term are linked, so a synonym
    and its canonical term always resolve to the same related set.
    """

    def __init__(self, groups: Optional[Mapping[str, Iterable[str]]] = None):
        if groups is None:
            groups = SYNONYM_GROUPS

        self.groups: Dict[str, FrozenSet[str]] = {}
        for canonical, synonyms in groups.items():
            key = normalize(canonical)
            if not key:
                continue
            members = {normalize(s) for s in synonyms or []} - {""}
            self.groups[key] = frozenset(members | {key})

        self._related = self._build_index()

    def _build_index(self) -> Dict[str, FrozenSet[str]]:
        # Merge groups that share any member, then index every member
        components: List[Set[str]] = []
        for members in self.groups.values():
            merged = set(members)
            rest = []
            for component in components:
                if component & merged:
                    merged |= component
                else:
                    rest.append(component)
            rest.append(merged)
            components = rest

        index: Dict[str, FrozenSet[str]] = {}
        for component in components:
            frozen = frozenset(component)
            for term in component:
                index[term] = frozen
        return index

    def lookup(self, term: str) -> FrozenSet[str]:
        """
        Get every term related to the given one

        Args:
            term: Query term (case and surrounding whitespace ignored)

        Returns:
            Canonical terms and synonyms of all groups the term belongs to,
            or an empty set when it belongs to none
        """
        return self._related.get(normalize(term), frozenset())

    def groups_for(self, term: str) -> FrozenSet[str]:
        """
        Get the members of the groups the term itself belongs to

        Unlike lookup, groups reached only through a shared member are left
        out: "company" sits in the corporate group only, so the professional
        group's "executive" is not returned.
        """
        key = normalize(term)
        if not key:
            return frozenset()
        related: Set[str] = set()
        for members in self.groups.values():
            if key in members:
                related |= members
        return frozenset(related)

    def __contains__(self, term: str) -> bool:
        return normalize(term) in self._related

    def __len__(self) -> int:
        return len(self.groups)


DEFAULT_SYNONYMS = SynonymTable()


def lookup(term: str, table: Optional[SynonymTable] = None) -> FrozenSet[str]:
    """Look up related terms in the given table (default: built-in groups)"""
    return (table if table is not None else DEFAULT_SYNONYMS).lookup(term)


def groups_for(term: str, table: Optional[SynonymTable] = None) -> FrozenSet[str]:
    """Members of the groups containing the term (default: built-in groups)"""
    return (table if table is not None else DEFAULT_SYNONYMS).groups_for(term)
