"""Unit tests for heading extraction and duplicate-title suppression.

The fixtures here are hand-written HTML fragments rather than markdown so the
tests pin the heading policies independently of the markdown renderer.

Usage
-----
Run ``uv run pytest tests/test_headings.py -v``.
"""

from __future__ import annotations

import pytest

from manual_pages.headings import (
    LABEL_SYNONYMS,
    HeadingRecord,
    UnknownLabelError,
    extract_headings,
    label_synonyms,
    strip_duplicate_title,
)
from manual_pages.manual_items import ManualSection

PROMOTED_FRAGMENT = '<h2 id="a">A</h2><p>text</p><h3 id="b">B</h3>'


def _levels(html: str) -> list[int]:
    return [record.indent_level for record in extract_headings(html)]


def test_headings_without_h1_are_promoted() -> None:
    """Documents starting at ``h2`` treat it as the top level."""
    assert _levels(PROMOTED_FRAGMENT) == [1, 2]


def test_headings_with_leading_h1_keep_levels() -> None:
    """A top-level heading disables promotion."""
    records = extract_headings('<h1 id="t">Title</h1>' + PROMOTED_FRAGMENT)
    assert [(r.text, r.indent_level) for r in records] == [
        ("Title", 1),
        ("A", 2),
        ("B", 3),
    ]


def test_late_h1_disables_promotion_for_earlier_headings() -> None:
    """Promotion depends on ``h1`` absence anywhere, not on its position."""
    records = extract_headings(PROMOTED_FRAGMENT + '<h1 id="late">Late</h1>')
    assert [(r.text, r.indent_level) for r in records] == [
        ("A", 2),
        ("B", 3),
        ("Late", 1),
    ]


def test_records_follow_document_order_and_read_ids() -> None:
    """Records mirror document order, including nested markup."""
    html = (
        '<section><h3 id="deep">Deep</h3></section>'
        '<h2 id="top">Top <code>cli</code></h2>'
    )
    assert extract_headings(html) == [
        HeadingRecord(text="Deep", anchor_id="deep", indent_level=2),
        HeadingRecord(text="Top cli", anchor_id="top", indent_level=1),
    ]


def test_h6_and_missing_ids_are_handled() -> None:
    """``h6`` is not part of the table of contents; absent ids become empty."""
    records = extract_headings("<h2>No id</h2><h6 id='x'>Tiny</h6>")
    assert records == [HeadingRecord(text="No id", anchor_id="", indent_level=1)]


def test_document_without_headings_yields_nothing() -> None:
    """No headings means an empty sequence rather than an error."""
    assert extract_headings("<p>Just prose.</p>") == []
    assert extract_headings("") == []


def test_extraction_is_idempotent() -> None:
    """Extracting twice from the same fragment yields identical records."""
    html = '<h2 id="a">A</h2><h4 id="c">C</h4>'
    assert extract_headings(html) == extract_headings(html)


def test_single_synonym_heading_is_removed() -> None:
    """A lone ``Install`` heading duplicates the Installation label."""
    html = '<h1 id="install">Install</h1><p>Body</p>'
    stripped = strip_duplicate_title(html, "Installation")
    assert "<h1" not in stripped
    assert "<p>Body</p>" in stripped


def test_non_synonym_heading_is_retained() -> None:
    """``Install`` is not a synonym of Usage, so nothing changes."""
    html = '<h1 id="install">Install</h1><p>Body</p>'
    assert strip_duplicate_title(html, "Usage") == html


def test_whitespace_padded_heading_is_retained() -> None:
    """Heading text is compared as-is, so surrounding spaces prevent a match."""
    html = "<h1> Install </h1><p>x</p>"
    assert strip_duplicate_title(html, "Installation") == html


def test_repeated_label_headings_are_retained() -> None:
    """Two matching ``h1`` elements are ambiguous and both stay."""
    html = "<h1>Installation</h1><p>one</p><h1>Installation</h1>"
    assert strip_duplicate_title(html, "Installation") == html


def test_document_without_h1_is_untouched() -> None:
    """No top-level heading means nothing to remove."""
    assert strip_duplicate_title(PROMOTED_FRAGMENT, "Overview") == PROMOTED_FRAGMENT


@pytest.mark.parametrize(
    ("heading", "label"),
    [
        ("Overview", "Overview"),
        ("Examples", "Example"),
        ("FAQ", "FAQ"),
        ("CHANGE LOG", "Changelog"),
        ("changelog", "changelog"),
    ],
)
def test_synonyms_match_case_insensitively(heading: str, label: str) -> None:
    """Heading text and label are compared without regard to case."""
    stripped = strip_duplicate_title(f"<h1>{heading}</h1><p>x</p>", label)
    assert "<h1" not in stripped


def test_removal_then_extraction_promotes_remaining_headings() -> None:
    """Dropping the lone title leaves an ``h1``-free document."""
    html = '<h1 id="usage">Usage</h1><h2 id="cmd">Commands</h2>'
    assert _levels(strip_duplicate_title(html, "Usage")) == [1]


@pytest.mark.parametrize("label", ["Reference", "Glossary"])
def test_labels_without_synonyms_raise(label: str) -> None:
    """Labels outside the synonym table are a programming error."""
    with pytest.raises(UnknownLabelError):
        strip_duplicate_title("<h1>Reference</h1>", label)
    with pytest.raises(LookupError):
        label_synonyms(label)


def test_synonym_table_is_immutable() -> None:
    """The synonym table rejects mutation."""
    with pytest.raises(TypeError):
        LABEL_SYNONYMS[ManualSection.REFERENCE] = frozenset({"reference"})  # type: ignore[index]
    assert ManualSection.REFERENCE not in LABEL_SYNONYMS
