"""Identifier groupings consumed by the manual's Reference page.

API identifiers are discovered and documented by a separate generator; the
manual only needs to know which identifier categories are non-empty so it can
link into ``identifiers.html``. The grouping can be supplied either as a
mapping of categories or as a flat list of descriptors carrying a ``kind``.

Example
-------
>>> from manual_pages.identifiers import group_identifiers
>>> grouping = group_identifiers([{"kind": "class", "name": "Foo"}])
>>> grouping.non_empty_categories()
['class']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec.json as msgspec_json

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

IDENTIFIER_CATEGORIES: tuple[str, ...] = (
    "class",
    "interface",
    "function",
    "variable",
    "typedef",
    "external",
)


@dc.dataclass(frozen=True, slots=True)
class IdentifierGrouping:
    """Identifier descriptors bucketed by category.

    ``class`` is a keyword, so that category is stored as ``class_``; use
    :meth:`category` to read any bucket by its public name.
    """

    class_: tuple[typ.Any, ...] = ()
    interface: tuple[typ.Any, ...] = ()
    function: tuple[typ.Any, ...] = ()
    variable: tuple[typ.Any, ...] = ()
    typedef: tuple[typ.Any, ...] = ()
    external: tuple[typ.Any, ...] = ()

    def category(self, name: str) -> tuple[typ.Any, ...]:
        """Return the descriptors stored under category ``name``."""
        if name not in IDENTIFIER_CATEGORIES:
            msg = f"Unknown identifier category '{name}'."
            raise KeyError(msg)
        attr = "class_" if name == "class" else name
        return getattr(self, attr)

    def non_empty_categories(self) -> list[str]:
        """Return non-empty category names in canonical order."""
        return [name for name in IDENTIFIER_CATEGORIES if self.category(name)]

    @classmethod
    def from_mapping(
        cls, payload: cabc.Mapping[str, cabc.Iterable[typ.Any] | None]
    ) -> IdentifierGrouping:
        """Build a grouping from a ``{category: [descriptor, ...]}`` mapping."""
        buckets = {
            ("class_" if name == "class" else name): tuple(payload.get(name) or ())
            for name in IDENTIFIER_CATEGORIES
        }
        return cls(**buckets)


def group_identifiers(
    docs: cabc.Iterable[cabc.Mapping[str, typ.Any]],
) -> IdentifierGrouping:
    """Bucket identifier descriptors by their ``kind`` key.

    Descriptors whose kind is not one of the known categories are ignored.
    """
    buckets: dict[str, list[typ.Any]] = {name: [] for name in IDENTIFIER_CATEGORIES}
    for doc in docs:
        kind = doc.get("kind")
        if kind in buckets:
            buckets[kind].append(doc)
    return IdentifierGrouping.from_mapping(buckets)


def load_identifier_grouping(path: Path | None) -> IdentifierGrouping:
    """Decode an identifier index JSON file into an :class:`IdentifierGrouping`.

    Parameters
    ----------
    path : Path or None
        JSON file holding either a category mapping or a list of descriptors
        with ``kind`` keys. ``None`` yields an empty grouping.

    Raises
    ------
    OSError
        If the file cannot be read.
    msgspec.DecodeError
        If the file does not contain valid JSON.
    TypeError
        If the decoded JSON is neither an object nor an array.
    """
    if path is None:
        return IdentifierGrouping()
    payload = msgspec_json.decode(path.read_bytes())
    match payload:
        case dict():
            return IdentifierGrouping.from_mapping(payload)
        case list():
            return group_identifiers(doc for doc in payload if isinstance(doc, dict))
        case _:
            msg = f"Identifier index '{path}' must be a JSON object or array."
            raise TypeError(msg)


__all__ = [
    "IDENTIFIER_CATEGORIES",
    "IdentifierGrouping",
    "group_identifiers",
    "load_identifier_grouping",
]
