"""Jinja wrapper that fills manual templates with precomputed page data.

The templates only loop over entries and substitute text or attributes; all
table-of-contents and navigation decisions happen before rendering.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from manual_pages.generator.models import (
        ManualIndexEntry,
        ManualPageModel,
        NavEntry,
    )


class ManualTemplates:
    """Render the manual layout, navigation, index, and document templates."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Configure the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the manual templates; defaults to the
            ``manual_pages/templates`` directory shipped with the package.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def nav(self, entries: cabc.Sequence[NavEntry]) -> Markup:
        """Render the cross-page navigation list."""
        return self._render("manual_nav.jinja", nav=entries)

    def index(self, entries: cabc.Sequence[ManualIndexEntry]) -> Markup:
        """Render the index body listing every item's table of contents."""
        return self._render("manual_index.jinja", manuals=entries)

    def document(self, label: str, body_html: str) -> Markup:
        """Render a single manual document under a heading named ``label``."""
        return self._render(
            "manual_page.jinja",
            title=label,
            title_id=label.lower(),
            content=Markup(body_html),  # noqa: S704 - trusted markdown output
        )

    def layout(self, model: ManualPageModel, *, content: Markup, css: str) -> str:
        """Render the full page shell around ``content``."""
        template = self.env.get_template("manual_layout.jinja")
        return template.render(
            html_title=model.html_title,
            base_url=model.base_url,
            nav=self.nav(model.nav),
            content=content,
            pygments_css=Markup(css),  # noqa: S704 - generated stylesheet
        )

    def _render(self, name: str, **context: typ.Any) -> Markup:
        template = self.env.get_template(name)
        return Markup(template.render(**context))  # noqa: S704 - autoescaped


__all__ = ["ManualTemplates"]
