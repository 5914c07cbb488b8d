"""Unit tests for table-of-contents and navigation builders.

Usage
-----
Run ``uv run pytest tests/test_toc.py -v``.
"""

from __future__ import annotations

from pathlib import Path

from manual_pages.config import ManualConfig
from manual_pages.generator.models import NavEntry, TocEntry
from manual_pages.generator.toc import build_nav, build_toc
from manual_pages.identifiers import IdentifierGrouping
from manual_pages.manual_items import ManualItem, resolve_manual_items

REFERENCE = ManualItem(
    label="Reference", output_file_name="identifiers.html", is_reference_page=True
)


def test_reference_toc_skips_empty_categories() -> None:
    """Only categories with identifiers are listed."""
    grouping = IdentifierGrouping(class_=("Foo",), function=("bar",))
    assert build_toc(REFERENCE, identifiers=grouping) == [
        TocEntry("Class", "identifiers.html#class", "indent-h1"),
        TocEntry("Function", "identifiers.html#function", "indent-h1"),
    ]


def test_reference_toc_uses_canonical_order() -> None:
    """Category order ignores the order of the input mapping."""
    grouping = IdentifierGrouping.from_mapping(
        {
            "external": ["Ext"],
            "typedef": ["Alias"],
            "variable": ["count"],
            "interface": ["Shape"],
            "class": ["Circle"],
        }
    )
    labels = [entry.label for entry in build_toc(REFERENCE, identifiers=grouping)]
    assert labels == ["Class", "Interface", "Variable", "Typedef", "External"]


def test_reference_toc_is_always_top_level() -> None:
    """Reference entries never nest."""
    grouping = IdentifierGrouping.from_mapping(
        {name: ["x"] for name in ("class", "interface", "function")}
    )
    entries = build_toc(REFERENCE, identifiers=grouping)
    assert {entry.indent_class for entry in entries} == {"indent-h1"}


def test_reference_toc_without_identifiers_is_empty() -> None:
    """An empty grouping produces no entries."""
    assert build_toc(REFERENCE, identifiers=IdentifierGrouping()) == []
    assert build_toc(REFERENCE) == []


def test_content_toc_links_into_output_file() -> None:
    """Content entries link to ``<output file>#<anchor>`` with derived indents."""
    item = ManualItem(label="Usage", source_path=Path("usage.md"))
    html = '<h2 id="a">A</h2><h3 id="b">B</h3><h2 id="c">C</h2>'
    assert build_toc(item, html=html) == [
        TocEntry("A", "manual/usage.html#a", "indent-h1"),
        TocEntry("B", "manual/usage.html#b", "indent-h2"),
        TocEntry("C", "manual/usage.html#c", "indent-h1"),
    ]


def test_content_toc_without_promotion() -> None:
    """An ``h1`` keeps raw levels in the indent classes."""
    item = ManualItem(label="FAQ", source_path=Path("faq.md"))
    html = '<h1 id="q">Questions</h1><h2 id="why">Why?</h2>'
    classes = [entry.indent_class for entry in build_toc(item, html=html)]
    assert classes == ["indent-h1", "indent-h2"]


def test_nav_lists_every_item_in_order() -> None:
    """Navigation mirrors resolution order, one entry per item."""
    items = resolve_manual_items(
        ManualConfig(overview=Path("o.md"), faq=Path("f.md"))
    )
    nav = build_nav(items)
    assert len(nav) == len(items)
    assert nav == [
        NavEntry("Overview", "manual/overview.html"),
        NavEntry("Reference", "identifiers.html"),
        NavEntry("FAQ", "manual/faq.html"),
    ]
