"""
Text normalizer
===============

Folds Turkish diacritics to plain ASCII and flattens case so that a query
like "canakkale" finds "ÇANAKKALE" and "istanbul" finds "İSTANBUL".
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Optional

# Dotted and dotless i collapse on purpose: search should be forgiving.
TURKISH_FOLD = MappingProxyType({
    "ı": "i", "I": "i", "i": "i", "İ": "i",
    "ş": "s", "Ş": "s",
    "ğ": "g", "Ğ": "g",
    "ü": "u", "Ü": "u",
    "ö": "o", "Ö": "o",
    "ç": "c", "Ç": "c",
})

_FOLD_TABLE = str.maketrans(dict(TURKISH_FOLD))


def normalize(s: Optional[str]) -> str:
    """Return `s` with Turkish letters folded to ASCII, then lowercased.

    Substitution runs before lowercasing so that `str.lower()` never sees
    'İ' (which it would turn into 'i' + combining dot).
    """
    if not s:
        return ""
    return str(s).translate(_FOLD_TABLE).lower()
