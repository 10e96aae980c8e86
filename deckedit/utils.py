"""Utility helpers: deck file I/O and document title lookup."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)


def extract_title(html: str, default: str = "") -> str:
    """Return the trimmed ``<title>`` text of *html*, or *default* if absent."""
    match = _TITLE_RE.search(html)
    if not match:
        return default
    return match.group(1).strip()


def read_html(path: Path) -> str:
    """Read an HTML deck, keeping line endings byte-for-byte."""
    with open(path, encoding="utf-8", newline="") as f:
        html = f.read()
    logger.debug("Read %d chars from %s", len(html), path)
    return html


def write_html(path: Path, html: str) -> None:
    """Write an HTML deck without newline translation."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(html)
    logger.debug("Wrote %d chars to %s", len(html), path)
