"""Shared dataclasses used by the manual generation pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """One table-of-contents line.

    Attributes
    ----------
    label : str
        Heading text or identifier category label.
    link : str
        Target in ``<output file>#<anchor>`` form.
    indent_class : str
        CSS class (``indent-h1`` ... ``indent-h5``) encoding nesting depth.
    """

    label: str
    link: str
    indent_class: str


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """Cross-page navigation link to a manual item's output file."""

    label: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class ManualIndexEntry:
    """Index page block listing one manual item and its table of contents."""

    label: str
    link: str
    toc: tuple[TocEntry, ...]


@dc.dataclass(slots=True)
class ManualPageModel:
    """Structured data passed to the manual layout template.

    Attributes
    ----------
    title : str
        Page title, ``"Manual"`` for the index or the item label otherwise.
    html_title : str
        Document ``<title>`` combining the page title and site title.
    output_path : str
        Output path relative to the site root.
    base_url : str
        Relative prefix leading from ``output_path`` back to the site root.
    nav : tuple[NavEntry, ...]
        Navigation shared by every manual page.
    content_html : str
        Rendered document body; empty for the index page.
    index_entries : list[ManualIndexEntry]
        Per-item table-of-contents blocks; only populated for the index page.
    """

    title: str
    html_title: str
    output_path: str
    base_url: str
    nav: tuple[NavEntry, ...]
    content_html: str = ""
    index_entries: list[ManualIndexEntry] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class RenderedPage:
    """Rendered HTML paired with the output path it belongs at."""

    html: str
    output_path: str


__all__ = [
    "ManualIndexEntry",
    "ManualPageModel",
    "NavEntry",
    "RenderedPage",
    "TocEntry",
]
