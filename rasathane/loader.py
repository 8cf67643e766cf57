"""
Listing loader (text file -> ParseResult)
=========================================

Reads the listing text from a local file (or stdin) and hands it to the
parser. The observatory serves its page in a Turkish code page, so when no
encoding is given we try a few candidates in order.

No network access happens here; fetch the page yourself and save it.
"""

from __future__ import annotations
from typing import Optional
import logging
import sys

from .models import ParseResult
from .parser import parse

log = logging.getLogger(__name__)

# Tried in order until one decodes cleanly
ENCODING_CANDIDATES = ("utf-8-sig", "cp1254", "iso-8859-9")


def _decode(raw: bytes) -> str:
    for enc in ENCODING_CANDIDATES:
        try:
            text = raw.decode(enc)
        except UnicodeDecodeError:
            continue
        log.debug("Decoded listing as %s", enc)
        return text
    # iso-8859-9 maps every byte, so this is unreachable in practice
    return raw.decode("utf-8", errors="replace")


def read_listing_text(path: str, encoding: Optional[str] = None) -> str:
    """Read the raw listing text. `path='-'` reads stdin."""
    if path == "-":
        raw = sys.stdin.buffer.read()
    else:
        with open(path, "rb") as f:
            raw = f.read()
    if encoding:
        return raw.decode(encoding)
    return _decode(raw)


def load_listing(path: str, encoding: Optional[str] = None) -> ParseResult:
    """Read and parse a listing file."""
    text = read_listing_text(path, encoding=encoding)
    result = parse(text)
    log.info("Loaded %s: %d events, %d rows skipped", path, len(result), len(result.diagnostics))
    return result
