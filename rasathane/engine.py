"""
Listing view
============

This is what a renderer works against. The view:

1) Holds the parse result -> header + immutable EventRecord tuple
2) Holds the search index -> one normalized location per record
3) Maintains the *current selection* of record IDs (FilterState.visible_ids)
4) Re-evaluates the selection on every filter change
5) Produces display rows / exports for the current selection

Filtering only changes which IDs are visible; records are never removed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
import csv
import json
import logging

from .filtering import filter_terms
from .indices import SearchIndex, build_search_index
from .models import EventRecord, HeaderInfo, ParseResult
from .text import normalize
from .timeago import time_ago

log = logging.getLogger(__name__)

# Column headings of the rendered table, in display order
DISPLAY_COLUMNS = [
    "Tarih",
    "Saat",
    "Enlem(N)",
    "Boylam(E)",
    "Derinlik(km)",
    "MD",
    "ML",
    "Mw",
    "Yer",
    "Çözüm Niteliği",
    "Time Ago",
]

# Machine-friendly names used by CSV/JSON/XLSX exports
EXPORT_FIELDS = ["date", "time", "lat", "lon", "depth", "md", "ml", "mw", "location", "quality"]


@dataclass
class FilterState:
    """The current query and the record IDs it leaves visible."""
    visible_ids: List[int]
    query: str = ""
    terms: List[str] = field(default_factory=list)


@dataclass
class EventListing:
    """Parsed listing plus its current filter selection."""
    result: ParseResult
    source_path: Optional[str] = None
    index: SearchIndex = field(init=False)
    state: FilterState = field(init=False)

    def __post_init__(self) -> None:
        self.index = build_search_index(self.result.records)
        self.state = FilterState(visible_ids=list(range(len(self.result.records))))

    @property
    def header(self) -> HeaderInfo:
        return self.result.header

    @property
    def records(self) -> tuple:
        return self.result.records

    # ---------------- Filters ----------------
    def apply_filter(self, raw_query: str) -> List[int]:
        """Show only records whose location contains any comma-separated term."""
        terms = filter_terms(normalize(raw_query))
        self.state = FilterState(
            visible_ids=self.index.lookup(terms),
            query=raw_query or "",
            terms=terms,
        )
        log.debug("Filter %r -> %d/%d visible", raw_query, len(self.state.visible_ids), len(self.records))
        return self.state.visible_ids

    def clear_filter(self) -> None:
        self.apply_filter("")

    def visible_records(self) -> List[EventRecord]:
        return [self.records[i] for i in self.state.visible_ids]

    # ---------------- Output operations ----------------
    def rows(self, now: Optional[datetime] = None) -> List[List[str]]:
        """Display rows (DISPLAY_COLUMNS order) for the visible records."""
        return [
            [e.date, e.time, e.lat, e.lon, e.depth, e.md, e.ml, e.mw, e.location, e.quality,
             time_ago(e.event_datetime, now=now)]
            for e in self.visible_records()
        ]

    def stats(self) -> Dict[str, Any]:
        """Counts, time span and magnitude range of the visible selection."""
        evs = self.visible_records()
        mags = [m for m in (e.magnitude() for e in evs) if m is not None]
        times = [e.event_datetime for e in evs]
        return {
            "total": len(self.records),
            "visible": len(evs),
            "skipped_rows": len(self.result.diagnostics),
            "oldest": min(times) if times else None,
            "newest": max(times) if times else None,
            "min_magnitude": min(mags) if mags else None,
            "max_magnitude": max(mags) if mags else None,
        }

    def _export_dicts(self) -> List[Dict[str, str]]:
        out = []
        for e in self.visible_records():
            row = {name: getattr(e, name) for name in EXPORT_FIELDS}
            row["event_datetime"] = e.event_datetime.isoformat()
            out.append(row)
        return out

    def to_frame(self):
        """Visible records as a pandas DataFrame (one column per export field)."""
        import pandas as pd
        df = pd.DataFrame(self._export_dicts(), columns=EXPORT_FIELDS + ["event_datetime"])
        df["event_datetime"] = pd.to_datetime(df["event_datetime"])
        return df

    def export_csv(self, path: str) -> None:
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=EXPORT_FIELDS + ["event_datetime"])
            w.writeheader()
            w.writerows(self._export_dicts())

    def export_json(self, path: str) -> None:
        """Export the current selection (plus header) to a JSON file."""
        payload = {
            "header": {
                "title": self.header.title,
                "subtitle": self.header.subtitle,
                "note": self.header.note,
            },
            "events": self._export_dicts(),
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)

    def export_xlsx(self, path: str) -> None:
        """Export the current selection to an Excel workbook (openpyxl engine)."""
        self.to_frame().to_excel(path, index=False, sheet_name="events", engine="openpyxl")
