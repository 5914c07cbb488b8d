"""Resolve manual configuration into the ordered list of manual pages.

The manual always follows a fixed priority order: Overview, Installation,
Usage, Example, Reference, FAQ, Changelog. Sections are included only when
their source path is configured, except for the synthetic Reference item,
which is always present and points at the separately generated identifier
index.

Example
-------
>>> from pathlib import Path
>>> from manual_pages.config import ManualConfig
>>> from manual_pages.manual_items import output_file_name, resolve_manual_items
>>> items = resolve_manual_items(ManualConfig(usage=Path("docs/usage.md")))
>>> [item.label for item in items]
['Usage', 'Reference']
>>> [output_file_name(item) for item in items]
['manual/usage.html', 'identifiers.html']
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as typ

from ._constants import MANUAL_PAGE_TEMPLATE, REFERENCE_FILENAME

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import ManualConfig

logger = logging.getLogger(__name__)


class ManualSection(enum.StrEnum):
    """Closed set of manual page labels, declared in output priority order."""

    OVERVIEW = "Overview"
    INSTALLATION = "Installation"
    USAGE = "Usage"
    EXAMPLE = "Example"
    REFERENCE = "Reference"
    FAQ = "FAQ"
    CHANGELOG = "Changelog"


MANUAL_SECTIONS: tuple[tuple[ManualSection, str | None], ...] = (
    (ManualSection.OVERVIEW, "overview"),
    (ManualSection.INSTALLATION, "installation"),
    (ManualSection.USAGE, "usage"),
    (ManualSection.EXAMPLE, "example"),
    (ManualSection.REFERENCE, None),
    (ManualSection.FAQ, "faq"),
    (ManualSection.CHANGELOG, "changelog"),
)
"""Priority table pairing each section with its ``ManualConfig`` field.

The Reference section has no configuration field; it is always emitted.
"""


@dc.dataclass(frozen=True, slots=True)
class ManualItem:
    """One logical page of the manual.

    Attributes
    ----------
    label : str
        Display label, also used to derive the default output file name.
    source_path : Path or None
        Markdown document backing the page; ``None`` for the Reference item.
    output_file_name : str or None
        Explicit output file name overriding the ``manual/<label>.html``
        convention.
    is_reference_page : bool
        ``True`` for the synthetic Reference item only.
    """

    label: str
    source_path: Path | None = None
    output_file_name: str | None = None
    is_reference_page: bool = False


def resolve_manual_items(config: ManualConfig) -> list[ManualItem]:
    """Return the manual items for ``config`` in fixed priority order.

    Parameters
    ----------
    config : ManualConfig
        Configuration whose optional section paths decide which items are
        present. Unset paths are omitted without error.

    Returns
    -------
    list[ManualItem]
        Ordered items, always including exactly one Reference item placed
        between Example and FAQ.
    """
    items: list[ManualItem] = []
    for section, field in MANUAL_SECTIONS:
        if field is None:
            items.append(
                ManualItem(
                    label=section.value,
                    output_file_name=REFERENCE_FILENAME,
                    is_reference_page=True,
                )
            )
            continue
        path = getattr(config, field)
        if path is None:
            continue
        items.append(ManualItem(label=section.value, source_path=path))
    logger.debug("resolved manual items: %s", [item.label for item in items])
    return items


def output_file_name(item: ManualItem) -> str:
    """Return the output path for ``item``, honouring an explicit override."""
    if item.output_file_name:
        return item.output_file_name
    return MANUAL_PAGE_TEMPLATE.format(slug=item.label.lower())


__all__ = [
    "MANUAL_SECTIONS",
    "ManualItem",
    "ManualSection",
    "output_file_name",
    "resolve_manual_items",
]
