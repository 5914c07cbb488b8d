"""Load manual configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _optional_str, _resolve_path, _section_paths
from .models import ManualConfig, ManualConfigError

logger = logging.getLogger(__name__)


def load_manual_config(path: Path) -> ManualConfig:
    """Load the YAML configuration describing the manual section.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``manual.yaml``). Relative paths inside the file are resolved against
        the file's own directory.

    Returns
    -------
    ManualConfig
        Parsed configuration holding the optional section paths plus the
        output directory, identifier index path, and rendering defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ManualConfigError
        If the ``manual`` block is not a mapping or a section path is not a
        string.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from manual_pages.config import load_manual_config
    >>> config = load_manual_config(Path("manual.yaml"))  # doctest: +SKIP
    >>> config.usage  # doctest: +SKIP
    PosixPath('docs/usage.md')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.resolve().parent

    manual_raw = raw.get("manual") or {}
    if not isinstance(manual_raw, dict):
        msg = "The 'manual' block must be a mapping of section paths."
        raise ManualConfigError(msg)
    sections = _section_paths(manual_raw, base_dir)

    defaults = ManualConfig()
    output_dir = _resolve_path(_optional_str(raw.get("output_dir")), base_dir)
    identifiers_path = _resolve_path(_optional_str(raw.get("identifiers")), base_dir)
    config = ManualConfig(
        **sections,
        output_dir=output_dir or defaults.output_dir,
        identifiers_path=identifiers_path,
        pygments_style=_optional_str(raw.get("pygments_style"))
        or defaults.pygments_style,
        site_title=_optional_str(raw.get("site_title")) or defaults.site_title,
    )
    logger.debug(
        "loaded manual config from %s with sections %s",
        path,
        [key for key, value in sections.items() if value is not None],
    )
    return config


__all__ = ["load_manual_config"]
