"""Slide locator — finds <section class="slide"> boundaries in an HTML deck."""

from __future__ import annotations

import logging

from .models import (
    CLASS_ATTR_RE,
    DEFAULT_CLASSES,
    HEADING_RE,
    NO_HEADING,
    SECTION_CLOSE,
    SECTION_OPEN,
    SLIDE_OPEN_RE,
    TAG_RE,
    SlideInfo,
)

logger = logging.getLogger(__name__)


def _find_section_end(html: str, pos: int) -> int | None:
    """Return the offset just past the </section> closing the section open at *pos*.

    Nested ``<section`` tokens are counted, not parsed.  Returns None when
    the input runs out of closing tags.
    """
    depth = 1
    while depth > 0 and pos < len(html):
        next_close = html.find(SECTION_CLOSE, pos)
        if next_close == -1:
            return None
        next_open = html.find(SECTION_OPEN, pos)

        if next_open != -1 and next_open < next_close:
            depth += 1
            pos = next_open + len(SECTION_OPEN)
        else:
            depth -= 1
            pos = next_close + len(SECTION_CLOSE)
            if depth == 0:
                return pos
    return None


def _extract_heading(slide_html: str) -> str:
    match = HEADING_RE.search(slide_html)
    if not match:
        return NO_HEADING
    return TAG_RE.sub("", match.group(1)).strip()


def find_slides(html: str) -> list[SlideInfo]:
    """Locate every slide section in *html*, in document order.

    A slide is a ``<section>`` whose ``class`` attribute contains ``slide``.
    Candidates without a matching ``</section>`` are skipped.  The outer scan
    does not skip regions already covered by an earlier slide, so a nested
    slide-classed section is reported as a slide of its own.
    """
    slides: list[SlideInfo] = []

    for match in SLIDE_OPEN_RE.finditer(html):
        start = match.start()
        class_match = CLASS_ATTR_RE.search(match.group(0))
        classes = class_match.group(1) if class_match else DEFAULT_CLASSES

        end = _find_section_end(html, match.end())
        if end is None:
            logger.debug("Skipping unclosed slide section at offset %d", start)
            continue

        heading = _extract_heading(html[start:end])
        slides.append(SlideInfo(
            index=len(slides),
            classes=classes,
            heading=heading,
            start_offset=start,
            end_offset=end,
        ))
        logger.debug("  Slide %d: [%d:%d] class=%r heading=%r",
                     len(slides) - 1, start, end, classes, heading)

    return slides
