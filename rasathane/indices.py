"""
Search index (precomputed normalized locations)
===============================================

Every record gets its location normalized once, when the listing is loaded.
Filtering then compares the normalized query against these keys instead of
re-normalizing every location on every keystroke.

`keys[i]` always belongs to `records[i]`, so the position in the list is
the record ID used by the listing view.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from .filtering import matches_any
from .models import EventRecord
from .text import normalize


@dataclass(frozen=True)
class SearchIndex:
    """Normalized location per record, in record order."""
    keys: tuple

    def __len__(self) -> int:
        return len(self.keys)

    def lookup(self, terms: Sequence[str]) -> List[int]:
        """Return sorted record IDs whose key matches any of `terms`."""
        return [i for i, key in enumerate(self.keys) if matches_any(terms, key)]


def build_search_index(records: Sequence[EventRecord]) -> SearchIndex:
    """Build the search index from parsed records."""
    return SearchIndex(keys=tuple(normalize(r.location) for r in records))
