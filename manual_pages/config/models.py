"""Typed dataclasses describing manual build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class ManualConfigError(ValueError):
    """Raised when the manual configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ManualConfig:
    """A fully resolved manual definition sourced from YAML config.

    Each section path is optional; an unset path simply omits that section
    from the manual.
    """

    overview: Path | None = None
    installation: Path | None = None
    usage: Path | None = None
    example: Path | None = None
    faq: Path | None = None
    changelog: Path | None = None
    output_dir: Path = Path("public")
    identifiers_path: Path | None = None
    pygments_style: str = "monokai"
    site_title: str = "Manual"


__all__ = ["ManualConfig", "ManualConfigError"]
