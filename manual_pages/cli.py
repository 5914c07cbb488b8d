"""Cyclopts CLI entrypoint for generating documentation manual pages.

The ``manual`` console script defined here renders the manual section of a
documentation site (``manual/index.html`` plus one page per configured
document) from the markdown files named in ``manual.yaml``. ``manual toc``
prints the derived table of contents without writing anything, which helps
when checking how heading levels were promoted.

Examples
--------
Generate the manual for the default configuration:

>>> from manual_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a custom directory:

>>> from manual_pages.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_manual_config
from .generator import ManualContentGenerator

DEFAULT_CONFIG = Path("config/manual.yaml")

app = App(name="manual", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Generate the manual pages from the configured markdown.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to manual config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Generate the manual index and one page per configured document.

    Parameters
    ----------
    config : Path, optional
        Path to the ``manual.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the output directory named in the configuration.
    verbose : bool, optional
        Emit debug logging describing resolved items and removed titles.

    Raises
    ------
    ManualSourceError
        If a configured markdown document cannot be read; no files are
        written in that case.
    """
    _configure_logging(verbose)
    manual_config = load_manual_config(config)
    generator = ManualContentGenerator(manual_config, output_dir=output_dir)
    for path in generator.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the manual table of contents without writing files.")
def toc(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to manual config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print each manual item followed by its indented table-of-contents entries."""
    manual_config = load_manual_config(config)
    generator = ManualContentGenerator(manual_config)
    for entry in generator.assembler.index_entries():
        print(f"{entry.label} -> {entry.link}")
        for toc_entry in entry.toc:
            print(f"  {toc_entry.indent_class} {toc_entry.label} -> {toc_entry.link}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``manual`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
