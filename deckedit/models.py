"""Shared data models and parsing constants."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SlideInfo:
    index: int
    classes: str
    heading: str
    start_offset: int
    end_offset: int


@dataclass(frozen=True)
class SlideMapEntry:
    index: int
    type: str
    heading: str


# Opening <section ...> tag whose class attribute mentions "slide".
SLIDE_OPEN_RE = re.compile(r'<section\s[^>]*class="[^"]*slide[^"]*"[^>]*>', re.IGNORECASE)

# First class="..." attribute inside an opening tag.
CLASS_ATTR_RE = re.compile(r'class="([^"]*)"')

# First <h1>..<h6> element, attributes ignored, content may span lines.
HEADING_RE = re.compile(r"<h[1-6][^>]*>(.*?)</h[1-6]>", re.IGNORECASE | re.DOTALL)

# Any tag, used to strip markup from heading text.
TAG_RE = re.compile(r"<[^>]*>")

SECTION_OPEN = "<section"
SECTION_CLOSE = "</section>"

NO_HEADING = "(no heading)"
DEFAULT_CLASSES = "slide"
