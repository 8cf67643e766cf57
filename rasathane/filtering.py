"""
Location filter
===============

The filter box accepts comma-separated alternatives, e.g. "marmara, ege".
A row is shown when ANY term is a substring of its normalized location.
Both sides are expected to have passed through `text.normalize` already.
"""

from __future__ import annotations
from typing import List, Optional, Sequence


def filter_terms(normalized_query: Optional[str]) -> List[str]:
    """Split a normalized query on commas, dropping blank pieces."""
    if not normalized_query:
        return []
    return [t.strip() for t in normalized_query.split(",") if t.strip()]


def matches_any(terms: Sequence[str], normalized_location: Optional[str]) -> bool:
    """OR-match pre-split terms; no terms means no filter."""
    if not terms:
        return True
    loc = normalized_location or ""
    return any(term in loc for term in terms)


def matches(normalized_query: Optional[str], normalized_location: Optional[str]) -> bool:
    return matches_any(filter_terms(normalized_query), normalized_location)
