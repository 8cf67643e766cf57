from __future__ import annotations

"""
Listing report generator
------------------------
This module renders a DOCX report from an `EventListing`.

Design goals:
- Keep the package usable without report dependencies (lazy imports).
- Mirror the enhanced page: header block, summary, then the event table
  with a "Time Ago" column.
- Pick charts that say something about the *current selection*.
  Example: with a single location left after filtering, a "top locations"
  chart is pointless, so it is skipped.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple
import os
import tempfile
from collections import Counter

from .engine import DISPLAY_COLUMNS, EventListing


@dataclass
class ReportConfig:
    """High-level knobs to control how the report is written."""
    # used when the listing has no title line of its own
    title: str = "Earthquake Listing Report"
    dataset_name: str = "Observatory latest-events listing"

    # How many categories to show in bar charts
    top_n: int = 10

    # How many rows to put in the event table (None = all)
    max_rows: Optional[int] = 500


def _choose_bins(n: int) -> int:
    """Simple bin heuristic (keeps charts readable for small samples)."""
    if n <= 20:
        return 10
    if n <= 100:
        return 15
    return 30


def _fmt(value: Optional[float]) -> str:
    return "" if value is None else f"{value:.1f}"


def generate_docx_report(
    listing: EventListing,
    out_path: str,
    *,
    config: Optional[ReportConfig] = None,
    scope: str = "current",
    now: Optional[datetime] = None,
) -> str:
    """
    Generate a DOCX report + charts for a listing.

    scope="current" reports on the visible (filtered) records,
    scope="full" on every parsed record.
    """
    config = config or ReportConfig()
    if scope not in ("current", "full"):
        raise ValueError("scope must be: current | full")

    # Lazy imports: only required when a report is generated.
    try:
        from docx import Document
        from docx.shared import Pt, Inches
        from docx.enum.text import WD_ALIGN_PARAGRAPH
    except ImportError as e:
        raise ImportError(
            "Missing dependency: python-docx.\n"
            "Install it with: python -m pip install python-docx"
        ) from e

    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        import numpy as np
    except ImportError as e:
        raise ImportError(
            "Missing dependency: matplotlib (and numpy).\n"
            "Install with: python -m pip install matplotlib numpy"
        ) from e

    if scope == "full":
        events = list(listing.records)
        rows_source = EventListing(result=listing.result, source_path=listing.source_path)
        scope_label = "All events"
    else:
        events = listing.visible_records()
        rows_source = listing
        scope_label = "Current selection"

    if not events:
        raise ValueError("No events to report on (selection is empty).")

    now = now or datetime.now()

    # -----------------------------
    # 1) Compute stats + category counts
    # -----------------------------
    mags = [m for m in (e.magnitude() for e in events) if m is not None]
    pairs = [(e.depth_km(), e.magnitude()) for e in events]
    pairs = [(d, m) for d, m in pairs if d is not None and m is not None]
    c_location = Counter(e.location.strip() for e in events if e.location.strip())
    times = [e.event_datetime for e in events]

    # -----------------------------
    # 2) Create charts
    # -----------------------------
    with tempfile.TemporaryDirectory(prefix="rasathane_report_") as tmpdir:
        # Each chart is: (title, file_path)
        chart_paths: List[Tuple[str, str]] = []

        def _save(filename: str) -> str:
            path = os.path.join(tmpdir, filename)
            plt.tight_layout()
            plt.savefig(path, dpi=150)
            plt.close()
            return path

        if mags:
            plt.figure()
            counts, bins, patches = plt.hist(
                np.array(mags),
                bins=_choose_bins(len(mags)),
                edgecolor="black",
                linewidth=0.8,
            )
            for i, p in enumerate(patches):
                p.set_facecolor("C0" if i % 2 == 0 else "C1")
            plt.title(f"Magnitude distribution ({scope_label})")
            plt.xlabel("Magnitude")
            plt.ylabel("Count")
            chart_paths.append((f"Magnitude distribution ({scope_label})", _save("hist_magnitude.png")))

        if len(c_location) > 1:
            top = c_location.most_common(config.top_n)
            plt.figure()
            plt.bar([k for k, _ in top], [v for _, v in top])
            plt.xticks(rotation=45, ha="right")
            plt.title(f"Top {config.top_n} locations by number of events")
            plt.ylabel("Count")
            chart_paths.append((f"Top {config.top_n} locations by number of events", _save("top_locations.png")))

        if pairs:
            plt.figure()
            plt.scatter([m for _, m in pairs], [d for d, _ in pairs])
            plt.gca().invert_yaxis()
            plt.title(f"Depth vs magnitude ({scope_label})")
            plt.xlabel("Magnitude")
            plt.ylabel("Depth (km)")
            chart_paths.append((f"Depth vs magnitude ({scope_label})", _save("scatter_depth.png")))

        # -----------------------------
        # 3) Build DOCX report
        # -----------------------------
        doc = Document()
        style = doc.styles["Normal"]
        style.font.name = "Calibri"
        style.font.size = Pt(10)

        def _center_title(text: str, size: int, bold: bool = False, italic: bool = False) -> None:
            p = doc.add_paragraph()
            r = p.add_run(text)
            r.bold = bold
            r.italic = italic
            r.font.size = Pt(size)
            p.alignment = WD_ALIGN_PARAGRAPH.CENTER

        def _kv(key: str, value: str) -> None:
            p = doc.add_paragraph()
            r = p.add_run(f"{key}: ")
            r.bold = True
            p.add_run(value)

        header = listing.header
        _center_title(header.title or config.title, 18, bold=True)
        if header.subtitle:
            _center_title(header.subtitle, 12, italic=True)
        if header.note:
            doc.add_paragraph(header.note)

        doc.add_paragraph("")
        _kv("Dataset", config.dataset_name)
        if listing.source_path:
            _kv("Source file", os.path.basename(listing.source_path))
        _kv("Scope", scope_label)
        if scope == "current" and listing.state.terms:
            _kv("Location filter", ", ".join(listing.state.terms))
        _kv("Events in scope", f"{len(events)} of {len(listing.records)}")
        _kv("Time span", f"{min(times):%Y-%m-%d %H:%M:%S} to {max(times):%Y-%m-%d %H:%M:%S}")
        if mags:
            _kv("Magnitude range", f"{_fmt(min(mags))} to {_fmt(max(mags))}")
        if listing.result.diagnostics:
            _kv("Rows skipped while parsing", str(len(listing.result.diagnostics)))

        if chart_paths:
            doc.add_paragraph("")
            doc.add_heading("Visualizations", level=1)
            for title, path in chart_paths:
                doc.add_paragraph(title)
                doc.add_picture(path, width=Inches(6.0))

    doc.add_paragraph("")
    doc.add_heading("Events", level=1)
    rows = rows_source.rows(now=now)
    if config.max_rows is not None and len(rows) > config.max_rows:
        doc.add_paragraph(f"Showing the first {config.max_rows} of {len(rows)} events.")
        rows = rows[:config.max_rows]
    table = doc.add_table(rows=1, cols=len(DISPLAY_COLUMNS))
    for cell, text in zip(table.rows[0].cells, DISPLAY_COLUMNS):
        cell.text = text
    for row in rows:
        for cell, text in zip(table.add_row().cells, row):
            cell.text = text

    # -----------------------------
    # Reproducibility footer
    # -----------------------------
    doc.add_paragraph("")
    try:
        from . import __version__ as pkg_version
    except ImportError:
        pkg_version = "unknown"
    doc.add_paragraph(f"rasathane version: {pkg_version}")
    doc.add_paragraph(f"Report generated at: {now.isoformat(timespec='seconds')}")

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    doc.save(out_path)
    return out_path
