"""Edit engine — applies surgical edit operations to an HTML slide deck.

Every structural operation rescans the current string with
:func:`~deckedit.locator.find_slides`, so slide indices in a batch always
refer to the deck as left by the previous operation.  Nothing is rolled
back: if an operation fails, the ones before it have already produced the
string the caller holds.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .locator import find_slides
from .models import SlideInfo
from .operations import (
    DeleteSlide,
    EditOperation,
    InsertSlide,
    ReplaceSlide,
    SearchReplace,
    describe_operation,
    parse_operation,
)

logger = logging.getLogger(__name__)

SLIDE_SEPARATOR = "\n\n"

# Trailing characters swallowed along with a deleted slide.
_DELETE_TRAILING = "\n\r "


class EditError(ValueError):
    """An edit operation could not be applied to the current deck."""


class SlideIndexError(EditError):
    """A slide index falls outside the slides present in the deck."""

    def __init__(self, index: int, slide_count: int, *, low: int = 0, label: str = "Slide index") -> None:
        self.index = index
        self.slide_count = slide_count
        self.low = low
        self.high = slide_count - 1
        if slide_count == 0:
            message = f"{label} {index} out of range (deck has no slides)"
        elif low == -1:
            message = f"{label} {index} out of range (-1 to {self.high})"
        else:
            message = f"{label} {index} out of range ({low}-{self.high})"
        super().__init__(message)


class EmptyDeckError(EditError):
    """Tried to insert before the first slide of a deck with no slides."""


def _get_slide(html: str, slide_index: int) -> SlideInfo:
    slides = find_slides(html)
    if slide_index < 0 or slide_index >= len(slides):
        raise SlideIndexError(slide_index, len(slides))
    return slides[slide_index]


def search_replace(html: str, search: str, replace: str) -> str:
    """Replace every literal occurrence of *search*; empty *search* is a no-op."""
    if not search:
        logger.debug("Empty search string, nothing to replace")
        return html
    logger.debug("Replacing %d occurrence(s) of %r", html.count(search), search)
    return html.replace(search, replace)


def replace_slide(html: str, slide_index: int, new_html: str) -> str:
    """Swap the whole ``<section>`` of slide *slide_index* for *new_html*."""
    slide = _get_slide(html, slide_index)
    return html[:slide.start_offset] + new_html + html[slide.end_offset:]


def insert_slide(html: str, after_index: int, slide_html: str) -> str:
    """Insert *slide_html* after slide *after_index*, or first when it is -1."""
    slides = find_slides(html)

    if after_index == -1:
        if not slides:
            raise EmptyDeckError("No slides found to insert before")
        start = slides[0].start_offset
        return html[:start] + slide_html + SLIDE_SEPARATOR + html[start:]

    if after_index < 0 or after_index >= len(slides):
        raise SlideIndexError(after_index, len(slides), low=-1, label="afterIndex")
    end = slides[after_index].end_offset
    return html[:end] + SLIDE_SEPARATOR + slide_html + html[end:]


def delete_slide(html: str, slide_index: int) -> str:
    """Remove slide *slide_index* and the blank run that follows it."""
    slide = _get_slide(html, slide_index)

    end = slide.end_offset
    while end < len(html) and html[end] in _DELETE_TRAILING:
        end += 1

    return html[:slide.start_offset] + html[end:]


def apply_operation(html: str, op: EditOperation | Mapping[str, Any]) -> str:
    """Apply a single operation, given as a model or a wire-shaped mapping."""
    if isinstance(op, Mapping):
        op = parse_operation(op)

    if isinstance(op, SearchReplace):
        return search_replace(html, op.search, op.replace)
    elif isinstance(op, ReplaceSlide):
        return replace_slide(html, op.slide_index, op.new_html)
    elif isinstance(op, InsertSlide):
        return insert_slide(html, op.after_index, op.html)
    elif isinstance(op, DeleteSlide):
        return delete_slide(html, op.slide_index)
    raise TypeError(f"Unsupported edit operation: {op!r}")


def apply_operations(html: str, operations: Sequence[EditOperation | Mapping[str, Any]]) -> str:
    """Apply *operations* to *html* strictly in order and return the new HTML.

    The first failing operation raises; its :class:`EditError` propagates
    unchanged.  Callers that need the partially edited document apply the
    operations one at a time with :func:`apply_operation`.
    """
    result = html
    for i, op in enumerate(operations, start=1):
        if isinstance(op, Mapping):
            op = parse_operation(op)
        result = apply_operation(result, op)
        logger.debug("Operation %d/%d: %s", i, len(operations), describe_operation(op))

    if operations:
        logger.info("Applied %d operation(s), %d -> %d chars",
                    len(operations), len(html), len(result))
    return result
