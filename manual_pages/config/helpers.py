"""Utility helpers shared by the manual configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import ManualConfigError

MANUAL_SECTION_KEYS: tuple[str, ...] = (
    "overview",
    "installation",
    "usage",
    "example",
    "faq",
    "changelog",
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: str | None, base_dir: Path) -> Path | None:
    """Return ``value`` as a path anchored at ``base_dir`` when relative."""
    if value is None:
        return None
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _section_paths(
    manual_raw: typ.Mapping[str, typ.Any], base_dir: Path
) -> dict[str, Path | None]:
    """Collect the six optional manual section paths, ignoring other keys."""
    paths: dict[str, Path | None] = {}
    for key in MANUAL_SECTION_KEYS:
        value = manual_raw.get(key)
        match value:
            case None:
                paths[key] = None
            case str():
                paths[key] = _resolve_path(_optional_str(value), base_dir)
            case _:
                msg = f"Manual section '{key}' must be a file path string."
                raise ManualConfigError(msg)
    return paths


__all__ = [
    "MANUAL_SECTION_KEYS",
    "_optional_str",
    "_resolve_path",
    "_section_paths",
]
