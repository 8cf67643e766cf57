"""
Data model (HeaderInfo, EventRecord)
====================================

Each data row of the observatory listing is converted into an `EventRecord`.
Records are immutable (`frozen=True`) so that:
- nothing can edit a parsed event after the listing is loaded, and
- filtering works by selecting record IDs rather than changing data.

Raw column text is kept exactly as sliced (no float conversion) so the
original precision/formatting of coordinates and magnitudes survives.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class HeaderInfo:
    """Up to three free-text lines printed above the data table."""
    title: str = ""
    subtitle: str = ""
    note: str = ""


def _to_float(text: str) -> Optional[float]:
    """Convert a magnitude cell to float, returning None for blanks or '-.-'."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class EventRecord:
    """One parsed table row."""
    date: str
    time: str
    lat: str
    lon: str
    depth: str
    md: str
    ml: str
    mw: str
    location: str
    quality: str
    # derived from date + time; only used for age computation
    event_datetime: datetime
    source_line: str

    def magnitude(self) -> Optional[float]:
        """Preferred magnitude: Mw, then ML, then MD."""
        for text in (self.mw, self.ml, self.md):
            value = _to_float(text)
            if value is not None:
                return value
        return None

    def depth_km(self) -> Optional[float]:
        return _to_float(self.depth)


@dataclass(frozen=True)
class RowFailure:
    """Why a candidate data row was dropped."""
    line_number: int
    line: str
    reason: str


@dataclass(frozen=True)
class RowOutcome:
    """Result of parsing one candidate line: a record or a failure, never both."""
    record: Optional[EventRecord] = None
    failure: Optional[RowFailure] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class ParseResult:
    """Header summary plus the ordered records of one parse invocation."""
    header: HeaderInfo = field(default_factory=HeaderInfo)
    records: Tuple[EventRecord, ...] = ()
    diagnostics: Tuple[RowFailure, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)
