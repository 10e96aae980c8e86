"""Compact slide map — one {index, type, heading} entry per slide."""

from __future__ import annotations

from .locator import find_slides
from .models import SlideMapEntry

# Checked in order; the first keyword found in the class string wins.
_SLIDE_TYPES: list[tuple[tuple[str, ...], str]] = [
    (("title-slide",), "title"),
    (("chart",), "chart"),
    (("quote",), "quote"),
    (("code",), "code"),
    (("grid",), "grid"),
    (("closing", "end"), "closing"),
]

DEFAULT_SLIDE_TYPE = "content"


def classify_slide(classes: str) -> str:
    """Map a slide's class attribute to a coarse slide type."""
    for keywords, slide_type in _SLIDE_TYPES:
        if any(keyword in classes for keyword in keywords):
            return slide_type
    return DEFAULT_SLIDE_TYPE


def extract_slide_map(html: str) -> list[SlideMapEntry]:
    """Summarize the slide structure of *html* without the slide markup."""
    return [
        SlideMapEntry(index=s.index, type=classify_slide(s.classes), heading=s.heading)
        for s in find_slides(html)
    ]


def format_slide_map(entries: list[SlideMapEntry]) -> str:
    """Render a slide map as one ``N. [type] heading`` line per slide."""
    if not entries:
        return "(no slides)"
    return "\n".join(f"{e.index}. [{e.type}] {e.heading}" for e in entries)
