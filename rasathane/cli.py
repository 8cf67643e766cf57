"""
rasathane Command Line Interface (CLI)
======================================

This file provides the interactive terminal program you run like:

    python -m rasathane.cli --file "lasteq.txt"

It demonstrates:
- Argument parsing (argparse)
- A REPL loop (Read-Eval-Print Loop) for commands
- Mapping user commands to EventListing methods (filter, show, export, report)

The CLI DOES NOT modify the listing file. It loads it once and works on an
in-memory selection of records.
"""

from __future__ import annotations
import argparse, logging, shlex, sys
from typing import List, Optional
from .engine import DISPLAY_COLUMNS, EventListing
from .loader import load_listing

HELP = """
Commands:
  help
  header
  stats
  show [n]
  filter <terms>                   (example: filter marmara, ege)
  clear
  export csv|json|xlsx "<path>"    (example: export csv "subset.csv")
  report "<path.docx>" [current|full]
  quit

Filter terms are comma-separated alternatives; a row is shown if its
location contains ANY of them. Case and Turkish letters do not matter
("canakkale" finds "ÇANAKKALE").
"""


def _print_header(listing: EventListing) -> None:
    h = listing.header
    for text in (h.title, h.subtitle, h.note):
        if text:
            print(text)


def _print_rows(rows: List[List[str]]) -> None:
    if not rows:
        print("(no rows)")
        return
    # Tarih, Saat, Derinlik, MD, ML, Mw, Yer, Time Ago
    keep = (0, 1, 4, 5, 6, 7, 8, 10)
    widths = {i: max(len(DISPLAY_COLUMNS[i]), *(len(r[i]) for r in rows)) for i in keep}
    print("  ".join(DISPLAY_COLUMNS[i].ljust(widths[i]) for i in keep))
    for r in rows:
        print("  ".join(r[i].ljust(widths[i]) for i in keep))


def handle(listing: EventListing, line: str) -> None:
    """Handle one CLI command line.

    This parses the command and calls the appropriate listing method.
    """
    # filter takes the rest of the line verbatim (commas, spaces, quotes)
    if line.lower().startswith("filter "):
        query = line[len("filter "):].strip()
        listing.apply_filter(query)
        print(f"Filter terms={listing.state.terms}. Visible={len(listing.state.visible_ids)}")
        return

    parts = shlex.split(line)
    cmd = parts[0].lower()

    if cmd == "help":
        print(HELP)
        return

    if cmd == "header":
        _print_header(listing)
        return

    if cmd == "stats":
        s = listing.stats()
        print(f"Events: {s['total']} | Visible: {s['visible']} | Skipped rows: {s['skipped_rows']}")
        if s["oldest"] is not None:
            print(f"Time span: {s['oldest']} .. {s['newest']}")
        if s["max_magnitude"] is not None:
            print(f"Magnitude: {s['min_magnitude']} .. {s['max_magnitude']}")
        return

    if cmd in ("clear", "filter"):
        listing.clear_filter()
        print(f"Filter cleared. Visible={len(listing.state.visible_ids)}")
        return

    if cmd == "show":
        n = int(parts[1]) if len(parts) >= 2 else 10
        _print_rows(listing.rows()[:n])
        return

    if cmd == "export":
        if len(parts) < 3:
            print('Usage: export csv "out.csv"  OR  export json "out.json"  OR  export xlsx "out.xlsx"')
            return
        fmt, out_path = parts[1].lower(), parts[2]
        if not listing.state.visible_ids:
            print("Nothing to export: current selection is empty.")
            return
        if fmt == "csv":
            listing.export_csv(out_path)
        elif fmt == "json":
            listing.export_json(out_path)
        elif fmt == "xlsx":
            listing.export_xlsx(out_path)
        else:
            raise ValueError("export format must be: csv | json | xlsx")
        print(f"Exported {fmt.upper()} to {out_path}")
        return

    if cmd == "report":
        from .report import generate_docx_report, ReportConfig
        if len(parts) < 2:
            raise ValueError('Usage: report "<path.docx>" [current|full]')
        path = parts[1]
        scope = parts[2].lower() if len(parts) >= 3 else "current"
        generate_docx_report(listing, path, config=ReportConfig(), scope=scope)
        print(f"Report written to {path}")
        return

    print("Unknown command. Type 'help'.")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the rasathane CLI.

    1) Load and parse the listing
    2) Build the listing view
    3) Start an interactive REPL
    """
    ap = argparse.ArgumentParser(prog="rasathane")
    ap.add_argument("--file", required=True, help="Path to the saved listing text ('-' for stdin)")
    ap.add_argument("--encoding", default=None, help="Force a text encoding (default: auto)")
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log parser diagnostics")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    args = ap.parse_args(argv)

    level = logging.DEBUG if args.verbose else (logging.ERROR if args.quiet else logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    result = load_listing(args.file, encoding=args.encoding)
    if not result:
        print("No earthquake data found after parsing.", file=sys.stderr)
        return 1

    listing = EventListing(result=result, source_path=None if args.file == "-" else args.file)
    _print_header(listing)
    print(f"Loaded {len(result)} events ({len(result.diagnostics)} rows skipped). Type 'help' for commands.")

    while True:
        try:
            line = input("rasathane> ")
        except EOFError:
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in ("quit", "exit"):
            break
        try:
            handle(listing, line)
        except Exception as e:
            print(f"Error: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
