# coding=utf-8
"""
Text Normalization

The only tokenization the engine does: case folding, trimming and
hyphen splitting of compound terms.
"""

from typing import List


def normalize(text: str) -> str:
    """Lowercase and trim text (None is treated as empty)"""
    if text is None:
        return ""
    return text.strip().lower()


def split_compound(term: str) -> List[str]:
    """
    Split a hyphenated compound term into its normalized parts

    Args:
        term: Term such as "eco-friendly"

    Returns:
        Non-empty parts, e.g. ["eco", "friendly"]; an empty list when the
        term has no hyphen (not a compound)

    Examples:
        >>> split_compound("Eco-Friendly")
        ['eco', 'friendly']
        >>> split_compound("green")
        []
    """
    normalized = normalize(term)
    if "-" not in normalized:
        return []
    # Empty parts would be substrings of everything
    return [part for part in (normalize(p) for p in normalized.split("-")) if part]
