"""Unit tests for identifier grouping helpers.

Usage
-----
Run ``uv run pytest tests/test_identifiers.py -v``. Only pytest's
built-in ``tmp_path`` fixture is required.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

from manual_pages.identifiers import (
    IdentifierGrouping,
    group_identifiers,
    load_identifier_grouping,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_from_mapping_defaults_missing_categories() -> None:
    """Absent or null categories become empty buckets."""
    grouping = IdentifierGrouping.from_mapping({"class": ["A"], "function": None})
    assert grouping.category("class") == ("A",)
    assert grouping.category("function") == ()
    assert grouping.non_empty_categories() == ["class"]


def test_category_rejects_unknown_names() -> None:
    """Only the six known categories are addressable."""
    with pytest.raises(KeyError):
        IdentifierGrouping().category("method")


def test_group_identifiers_buckets_by_kind() -> None:
    """Descriptors are sorted into buckets; unknown kinds are dropped."""
    docs = [
        {"kind": "function", "name": "load"},
        {"kind": "class", "name": "Loader"},
        {"kind": "member", "name": "Loader.path"},
        {"kind": "function", "name": "dump"},
    ]
    grouping = group_identifiers(docs)
    assert [doc["name"] for doc in grouping.function] == ["load", "dump"]
    assert [doc["name"] for doc in grouping.class_] == ["Loader"]
    assert grouping.non_empty_categories() == ["class", "function"]


def test_load_mapping_form(tmp_path: Path) -> None:
    """A JSON object maps categories to descriptor arrays."""
    path = tmp_path / "identifiers.json"
    path.write_text(json.dumps({"typedef": [{"name": "Alias"}]}), encoding="utf-8")
    assert load_identifier_grouping(path).non_empty_categories() == ["typedef"]


def test_load_list_form(tmp_path: Path) -> None:
    """A JSON array is grouped by each descriptor's ``kind``."""
    path = tmp_path / "index.json"
    path.write_text(
        json.dumps([{"kind": "external", "name": "Buffer"}, "ignored"]),
        encoding="utf-8",
    )
    assert load_identifier_grouping(path).non_empty_categories() == ["external"]


def test_load_without_path_is_empty() -> None:
    """No identifier index means no Reference categories."""
    assert load_identifier_grouping(None) == IdentifierGrouping()


def test_load_rejects_scalar_json(tmp_path: Path) -> None:
    """Scalar JSON payloads are not identifier indexes."""
    path = tmp_path / "bad.json"
    path.write_text("42", encoding="utf-8")
    with pytest.raises(TypeError):
        load_identifier_grouping(path)
