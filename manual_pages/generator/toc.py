"""Table-of-contents and navigation builders for manual pages."""

from __future__ import annotations

import typing as typ

from manual_pages._constants import INDENT_CLASS_PREFIX, REFERENCE_FILENAME
from manual_pages.generator.models import NavEntry, TocEntry
from manual_pages.headings import extract_headings
from manual_pages.identifiers import IDENTIFIER_CATEGORIES
from manual_pages.manual_items import output_file_name

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from manual_pages.identifiers import IdentifierGrouping
    from manual_pages.manual_items import ManualItem


def indent_class(level: int) -> str:
    """Return the CSS class encoding a heading indent ``level``."""
    return f"{INDENT_CLASS_PREFIX}{level}"


def build_reference_toc(identifiers: IdentifierGrouping) -> list[TocEntry]:
    """Return one top-level entry per non-empty identifier category.

    Categories always appear in the order class, interface, function,
    variable, typedef, external, each linking to its anchor on the
    identifier index page.
    """
    return [
        TocEntry(
            label=category.capitalize(),
            link=f"{REFERENCE_FILENAME}#{category}",
            indent_class=indent_class(1),
        )
        for category in IDENTIFIER_CATEGORIES
        if identifiers.category(category)
    ]


def build_content_toc(item: ManualItem, html: str) -> list[TocEntry]:
    """Return entries for every heading in ``html`` in document order.

    Parameters
    ----------
    item : ManualItem
        Item whose output file name prefixes each link.
    html : str
        The item's rendered body, after duplicate-title removal.

    Returns
    -------
    list[TocEntry]
        Flat entries; nesting is carried solely by ``indent_class``.
    """
    file_name = output_file_name(item)
    return [
        TocEntry(
            label=record.text,
            link=f"{file_name}#{record.anchor_id}",
            indent_class=indent_class(record.indent_level),
        )
        for record in extract_headings(html)
    ]


def build_toc(
    item: ManualItem,
    *,
    html: str | None = None,
    identifiers: IdentifierGrouping | None = None,
) -> list[TocEntry]:
    """Return the table of contents for ``item``.

    The Reference item is described by ``identifiers``; content items by
    their rendered ``html``. A missing input yields an empty list.
    """
    if item.is_reference_page:
        if identifiers is None:
            return []
        return build_reference_toc(identifiers)
    if html is None:
        return []
    return build_content_toc(item, html)


def build_nav(items: cabc.Sequence[ManualItem]) -> list[NavEntry]:
    """Return one navigation entry per manual item, preserving order."""
    return [NavEntry(label=item.label, link=output_file_name(item)) for item in items]


__all__ = [
    "build_content_toc",
    "build_nav",
    "build_reference_toc",
    "build_toc",
    "indent_class",
]
