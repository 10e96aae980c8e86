"""Shared fixtures for deckedit tests."""

from __future__ import annotations

import textwrap

import pytest


# ---------------------------------------------------------------------------
# Minimal HTML decks (strings) used across multiple test modules
# ---------------------------------------------------------------------------

THREE_SLIDES = (
    '<section class="slide title-slide"><h1>Intro</h1></section>\n'
    '<section class="slide"><h2>Point A</h2></section>\n'
    '<section class="slide closing"><h1>Thanks</h1></section>'
)

FULL_DECK = textwrap.dedent("""\
    <!DOCTYPE html>
    <html>
    <head>
      <title> Quarterly Review </title>
      <style>.slide { display: none; }</style>
    </head>
    <body>
    <section class="slide title-slide" data-index="0">
      <h1>Q3 <em>Results</em></h1>
    </section>

    <section id="s2" class="slide chart-slide">
      <h2 class="heading">Revenue</h2>
      <div class="chart"></div>
    </section>

    <section class="slide closing">
      <h1>Thanks</h1>
    </section>
    <script>go(0);</script>
    </body>
    </html>
    """)

UNCLOSED_SLIDE = (
    '<section class="slide"><h1>One</h1></section>\n'
    '<section class="slide"><h1>Broken</h1>\n'
)


@pytest.fixture
def three_slides():
    """Bare title / content / closing slides with no surrounding document."""
    return THREE_SLIDES


@pytest.fixture
def full_deck():
    """A complete HTML document with head, script and three slides."""
    return FULL_DECK


@pytest.fixture
def unclosed_slide():
    """One good slide followed by a slide that never closes."""
    return UNCLOSED_SLIDE


@pytest.fixture
def tmp_html(tmp_path):
    """Write FULL_DECK to a temp file and return its path."""
    p = tmp_path / "deck.html"
    p.write_text(FULL_DECK)
    return p
