"""Utilities for generating the manual section of a documentation site.

This package resolves a declarative manual configuration into ordered pages,
derives per-page tables of contents and shared navigation from the rendered
markdown, and exposes the CLI entry points used by ``uv run manual``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from manual_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
