"""Load and validate manual configuration YAML for documentation builds.

This subpackage parses the project's ``manual.yaml`` file, resolves the
optional section paths (overview, installation, usage, example, FAQ,
changelog) relative to the configuration file, and produces a
:class:`ManualConfig` dataclass that the manual generator consumes. The primary
entry point is :func:`load_manual_config`.

Examples
--------
>>> from pathlib import Path
>>> from manual_pages.config import load_manual_config
>>> config = load_manual_config(Path("config/manual.yaml"))  # doctest: +SKIP
>>> config.output_dir  # doctest: +SKIP
PosixPath('config/public')
"""

from .loader import load_manual_config
from .models import ManualConfig, ManualConfigError

__all__ = [
    "ManualConfig",
    "ManualConfigError",
    "load_manual_config",
]
