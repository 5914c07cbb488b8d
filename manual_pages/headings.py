r"""Heading extraction and duplicate-title suppression for manual documents.

Manual documents are authored in markdown and converted to HTML before their
headings are inspected. Two policies live here:

* Promotion: when a document contains no ``<h1>`` at all, its author started
  sectioning at ``<h2>`` because the page title is supplied by the manual
  template, so every heading is treated as one level shallower.
* Title suppression: when a document contains exactly one ``<h1>`` whose text
  restates the page label (or a known synonym such as ``Install`` for
  ``Installation``), that heading is dropped so the page does not show the
  title twice.

Example
-------
>>> from manual_pages.headings import extract_headings
>>> records = extract_headings('<h2 id="a">A</h2><h3 id="b">B</h3>')
>>> [record.indent_level for record in records]
[1, 2]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import types

from bs4 import BeautifulSoup

from .manual_items import ManualSection

logger = logging.getLogger(__name__)

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5")

LABEL_SYNONYMS: types.MappingProxyType[ManualSection, frozenset[str]] = (
    types.MappingProxyType(
        {
            ManualSection.OVERVIEW: frozenset({"overview"}),
            ManualSection.INSTALLATION: frozenset({"installation", "install"}),
            ManualSection.USAGE: frozenset({"usage"}),
            ManualSection.EXAMPLE: frozenset({"example", "examples"}),
            ManualSection.FAQ: frozenset({"faq"}),
            ManualSection.CHANGELOG: frozenset({"changelog", "change log"}),
        }
    )
)


class UnknownLabelError(LookupError):
    """Raised when a label has no synonym set; indicates a caller bug."""


@dc.dataclass(frozen=True, slots=True)
class HeadingRecord:
    """A heading found in a rendered document.

    Attributes
    ----------
    text : str
        Plain text content of the heading.
    anchor_id : str
        Value of the heading's ``id`` attribute, or ``""`` when absent.
    indent_level : int
        Semantic nesting depth after promotion, not the raw markup level.
    """

    text: str
    anchor_id: str
    indent_level: int


def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def label_synonyms(label: str) -> frozenset[str]:
    """Return the lower-cased heading texts treated as equal to ``label``.

    Raises
    ------
    UnknownLabelError
        If ``label`` is not one of the closed manual labels that carry a
        synonym set. The Reference label never has one.
    """
    section = next(
        (member for member in ManualSection if member.value.lower() == label.lower()),
        None,
    )
    if section is None or section not in LABEL_SYNONYMS:
        msg = f"No synonym set is defined for manual label '{label}'."
        raise UnknownLabelError(msg)
    return LABEL_SYNONYMS[section]


def extract_headings(html: str) -> list[HeadingRecord]:
    """Return one record per ``h1``-``h5`` element in document order.

    Parameters
    ----------
    html : str
        Rendered HTML fragment for a single document body. The fragment is
        parsed into a fresh tree and never modified.

    Returns
    -------
    list[HeadingRecord]
        Records in document order. When the fragment has no ``<h1>``, each
        record's ``indent_level`` is its markup level minus one; otherwise it
        equals the markup level. Empty when the fragment has no headings.
    """
    root = _parse(html)
    is_heading_raised = root.find("h1") is None
    records: list[HeadingRecord] = []
    for element in root.find_all(list(HEADING_TAGS)):
        level = int(element.name[1])
        if is_heading_raised:
            level -= 1
        records.append(
            HeadingRecord(
                text=element.get_text(),
                anchor_id=str(element.get("id") or ""),
                indent_level=level,
            )
        )
    return records


def strip_duplicate_title(html: str, label: str) -> str:
    """Remove a lone ``<h1>`` that merely restates ``label``.

    Parameters
    ----------
    html : str
        Rendered HTML fragment for a single document body.
    label : str
        Manual page label, for example ``"Installation"``.

    Returns
    -------
    str
        The fragment without the duplicate heading, or ``html`` itself when
        there is not exactly one ``<h1>`` or its text is not a synonym of
        ``label``.

    Raises
    ------
    UnknownLabelError
        If ``label`` has no synonym set.
    """
    synonyms = label_synonyms(label)
    root = _parse(html)
    top_headings = root.find_all("h1")
    if len(top_headings) != 1:
        return html
    heading = top_headings[0]
    if heading.get_text().lower() not in synonyms:
        return html
    logger.debug("removing duplicate '%s' title heading", label)
    heading.decompose()
    return str(root)


__all__ = [
    "HEADING_TAGS",
    "LABEL_SYNONYMS",
    "HeadingRecord",
    "UnknownLabelError",
    "extract_headings",
    "label_synonyms",
    "strip_duplicate_title",
]
