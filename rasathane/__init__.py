"""
rasathane package
=================

Turns the observatory's fixed-width "latest earthquakes" listing into
structured, searchable records.

- Parsing lives in `rasathane/parser.py`.
- Search helpers: `rasathane/text.py` (normalize) and `rasathane/filtering.py`.
- "3h 12m ago" formatting is in `rasathane/timeago.py`.
- The filterable view used by the CLI/report is in `rasathane/engine.py`.
- The CLI entry point is in `rasathane/cli.py`.
"""

__version__ = '0.3.0'

from .filtering import filter_terms, matches
from .models import EventRecord, HeaderInfo, ParseResult, RowFailure
from .parser import parse
from .text import normalize
from .timeago import time_ago

__all__ = [
    "EventRecord",
    "HeaderInfo",
    "ParseResult",
    "RowFailure",
    "filter_terms",
    "matches",
    "normalize",
    "parse",
    "time_ago",
]
