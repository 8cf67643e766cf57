"""
Listing parser (fixed-width text -> EventRecord list)
=====================================================

The observatory publishes its latest events as a monospaced report:

    ...KANDILLI RASATHANESI...            <- up to 3 header lines
    ----------  --------  ...             <- rule line, data starts below
    2024.01.15 12:34:56  40.1234   29.1234  ...

Key ideas:
- The column layout is fixed; it lives in one table (`COLUMNS`) read by one
  slicing routine, so a layout change touches a single place.
- Parsing is best-effort per row. A bad row becomes a `RowFailure` and the
  rest of the listing still parses.
- No I/O happens here; callers hand in the full text.
"""

from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Optional, Tuple
import logging
import re

from .models import EventRecord, HeaderInfo, ParseResult, RowFailure, RowOutcome

log = logging.getLogger(__name__)

# (name, start, end) character offsets, half-open; end=None runs to end of line
COLUMNS: Tuple[Tuple[str, int, Optional[int]], ...] = (
    ("date", 0, 10),
    ("time", 11, 19),
    ("lat", 21, 28),
    ("lon", 31, 38),
    ("depth", 40, 50),
    ("md", 54, 58),
    ("ml", 59, 63),
    ("mw", 64, 68),
    ("location", 71, 118),
    ("quality", 119, None),
)

RULE_PREFIX = "-" * 10
MAX_HEADER_LINES = 3

_ROW_START = re.compile(r"^\d{4}\.")
_HEADER_FIELDS = ("title", "subtitle", "note")


def is_rule_line(text: str) -> bool:
    """True for the dashed horizontal rule separating header and data."""
    return text.strip().startswith(RULE_PREFIX)


def clean_header_line(text: str) -> str:
    """Strip surrounding whitespace and '....' filler runs."""
    return text.strip().strip(".").strip()


def slice_columns(line: str) -> Dict[str, str]:
    """Cut one data line into named raw fields using `COLUMNS`.

    Every field is stripped except `location`, which is only right-stripped.
    """
    out: Dict[str, str] = {}
    for name, start, end in COLUMNS:
        raw = line[start:end] if end is not None else line[start:]
        out[name] = raw.rstrip() if name == "location" else raw.strip()
    return out


def parse_event_datetime(date_str: str, time_str: str) -> datetime:
    """Combine '2024.01.15' and '12:34:56' into a datetime.

    Raises ValueError for anything that is not a real calendar instant.
    """
    return datetime.fromisoformat(f"{date_str.replace('.', '-')}T{time_str}")


def parse_row(line: str, line_number: int = 0) -> RowOutcome:
    """Parse a single candidate data line into a RowOutcome."""
    try:
        fields = slice_columns(line)
        try:
            when = parse_event_datetime(fields["date"], fields["time"])
        except ValueError as e:
            return RowOutcome(failure=RowFailure(line_number, line, f"invalid date: {e}"))
        record = EventRecord(event_datetime=when, source_line=line, **fields)
    except Exception as e:
        return RowOutcome(failure=RowFailure(line_number, line, f"{type(e).__name__}: {e}"))
    return RowOutcome(record=record)


def parse(raw_text: Optional[str]) -> ParseResult:
    """Parse a full listing into a header summary and ordered records.

    Never raises for malformed content: a listing without a rule line or
    without valid rows simply yields zero records.
    """
    header: Dict[str, str] = {name: "" for name in _HEADER_FIELDS}
    header_count = 0
    data_started = False
    records: List[EventRecord] = []
    failures: List[RowFailure] = []

    # a leading byte-order mark would hide the first header or rule line
    text = (raw_text or "").lstrip("\ufeff")
    for line_number, line in enumerate(text.splitlines(), start=1):
        trimmed = line.strip()
        if not trimmed:
            continue

        rule = is_rule_line(trimmed)
        if not data_started and not rule and header_count < MAX_HEADER_LINES:
            header[_HEADER_FIELDS[header_count]] = clean_header_line(trimmed)
            header_count += 1
            continue

        if rule:
            data_started = True
            continue

        # stray text between the header block and the rule
        if not data_started:
            continue

        # footnotes, extra rules, separators
        if not _ROW_START.match(trimmed):
            continue

        outcome = parse_row(line, line_number)
        if outcome.ok:
            records.append(outcome.record)
        else:
            log.warning("Skipping row %d (%s): %r", line_number, outcome.failure.reason, line)
            failures.append(outcome.failure)

    if records:
        log.info("Parsed %d events (%d rows skipped)", len(records), len(failures))
    else:
        log.warning("No event rows found in listing (data_started=%s)", data_started)

    return ParseResult(
        header=HeaderInfo(**header),
        records=tuple(records),
        diagnostics=tuple(failures),
    )
