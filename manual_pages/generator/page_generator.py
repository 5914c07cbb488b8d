"""High-level orchestration for manual page generation.

This module turns a :class:`~manual_pages.config.ManualConfig` into the
rendered pages of a documentation site's manual section. It exposes
:class:`ManualPageAssembler`, which reads every configured markdown document,
derives per-page tables of contents and the shared navigation, and returns
``(html, output path)`` pairs, and :class:`ManualContentGenerator`, which
writes those pairs beneath an output directory.

Example
-------
>>> from pathlib import Path
>>> from manual_pages.config import load_manual_config
>>> from manual_pages.generator import ManualContentGenerator
>>> config = load_manual_config(Path("config/manual.yaml"))  # doctest: +SKIP
>>> ManualContentGenerator(config).run()  # doctest: +SKIP
[PosixPath('public/manual/index.html'), PosixPath('public/manual/usage.html')]
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from manual_pages._constants import MANUAL_INDEX_FILENAME, MANUAL_INDEX_TITLE
from manual_pages.generator.models import (
    ManualIndexEntry,
    ManualPageModel,
    NavEntry,
    RenderedPage,
)
from manual_pages.generator.renderer import HtmlContentRenderer
from manual_pages.generator.templates import ManualTemplates
from manual_pages.generator.toc import build_nav, build_toc
from manual_pages.headings import strip_duplicate_title
from manual_pages.identifiers import IdentifierGrouping, load_identifier_grouping
from manual_pages.manual_items import output_file_name, resolve_manual_items

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from manual_pages.config import ManualConfig
    from manual_pages.manual_items import ManualItem

logger = logging.getLogger(__name__)


class ManualSourceError(RuntimeError):
    """Raised when a configured manual document cannot be read."""


def base_url(file_name: str) -> str:
    """Return the relative prefix leading from ``file_name`` to the site root."""
    return "../" * file_name.count("/")


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


class ManualPageAssembler:
    """Compose the manual index and one page per documented item."""

    def __init__(
        self,
        items: cabc.Sequence[ManualItem],
        *,
        renderer: HtmlContentRenderer | None = None,
        templates: ManualTemplates | None = None,
        identifiers: IdentifierGrouping | None = None,
        reader: cabc.Callable[[Path], str] | None = None,
        site_title: str = MANUAL_INDEX_TITLE,
    ) -> None:
        """Initialize the assembler with resolved items and collaborators.

        Parameters
        ----------
        items : Sequence[ManualItem]
            Resolved manual items in output order.
        renderer : HtmlContentRenderer, optional
            Markdown renderer; defaults to one using the ``monokai`` style.
        templates : ManualTemplates, optional
            Template collaborator; defaults to the packaged templates.
        identifiers : IdentifierGrouping, optional
            Identifier categories feeding the Reference item's table of
            contents; defaults to an empty grouping.
        reader : Callable[[Path], str], optional
            Function returning a document's text; defaults to reading UTF-8
            from disk.
        site_title : str, optional
            Suffix used in each page's ``<title>``.
        """
        self.items = tuple(items)
        self.renderer = renderer or HtmlContentRenderer()
        self.templates = templates or ManualTemplates()
        self.identifiers = identifiers or IdentifierGrouping()
        self.reader = reader or _read_text
        self.site_title = site_title

    def build(self) -> list[RenderedPage]:
        """Render the index page followed by each item backed by a document.

        Returns
        -------
        list[RenderedPage]
            Rendered HTML paired with output paths relative to the site root.
            The index page comes first.

        Raises
        ------
        ManualSourceError
            If any configured document cannot be read. No pages are returned
            in that case.
        """
        bodies = self._convert_all()
        nav = build_nav(self.items)
        pages = [self._render_index(nav, bodies)]
        for item in self.items:
            if item.source_path is None:
                logger.debug("no source document for '%s'; skipping page", item.label)
                continue
            pages.append(self._render_item(item, nav, bodies[item.label]))
        return pages

    def index_entries(self) -> list[ManualIndexEntry]:
        """Return the per-item tables of contents shown on the index page."""
        return self._index_entries(self._convert_all())

    def _convert_all(self) -> dict[str, str]:
        """Return de-duplicated HTML bodies keyed by item label."""
        return {
            item.label: self._convert(item)
            for item in self.items
            if item.source_path is not None
        }

    def _convert(self, item: ManualItem) -> str:
        """Read, render, and strip a duplicate title from ``item``'s document."""
        path = typ.cast("Path", item.source_path)
        try:
            text = self.reader(path)
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Unable to read manual document '{path}' for '{item.label}'."
            raise ManualSourceError(msg) from exc
        html = self.renderer.markdown(text)
        return strip_duplicate_title(html, item.label)

    def _index_entries(self, bodies: dict[str, str]) -> list[ManualIndexEntry]:
        return [
            ManualIndexEntry(
                label=item.label,
                link=output_file_name(item),
                toc=tuple(
                    build_toc(
                        item,
                        html=bodies.get(item.label),
                        identifiers=self.identifiers,
                    )
                ),
            )
            for item in self.items
        ]

    def _render_index(
        self, nav: list[NavEntry], bodies: dict[str, str]
    ) -> RenderedPage:
        model = self._page_model(MANUAL_INDEX_TITLE, MANUAL_INDEX_FILENAME, nav)
        model.index_entries = self._index_entries(bodies)
        content = self.templates.index(model.index_entries)
        return self._emit(model, content)

    def _render_item(
        self, item: ManualItem, nav: list[NavEntry], body_html: str
    ) -> RenderedPage:
        model = self._page_model(item.label, output_file_name(item), nav)
        model.content_html = body_html
        content = self.templates.document(item.label, body_html)
        return self._emit(model, content)

    def _page_model(
        self, title: str, output_path: str, nav: list[NavEntry]
    ) -> ManualPageModel:
        return ManualPageModel(
            title=title,
            html_title=f"{title} | {self.site_title}",
            output_path=output_path,
            base_url=base_url(output_path),
            nav=tuple(nav),
        )

    def _emit(self, model: ManualPageModel, content: typ.Any) -> RenderedPage:
        html = self.templates.layout(
            model, content=content, css=self.renderer.stylesheet
        )
        return RenderedPage(html=html, output_path=model.output_path)


class ManualContentGenerator:
    """Resolve manual configuration and write the rendered pages to disk."""

    def __init__(
        self,
        config: ManualConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the generator from a loaded manual configuration.

        Parameters
        ----------
        config : ManualConfig
            Manual configuration naming the section documents.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the output directory; defaults to ``config.output_dir``.
        """
        self.config = config
        self.output_dir = output_dir or config.output_dir
        self.items = resolve_manual_items(config)
        self.assembler = ManualPageAssembler(
            self.items,
            renderer=HtmlContentRenderer(config.pygments_style),
            templates=ManualTemplates(templates_dir),
            identifiers=load_identifier_grouping(config.identifiers_path),
            site_title=config.site_title,
        )

    def run(self) -> list[Path]:
        """Render every manual page and write it beneath the output directory.

        Returns
        -------
        list[Path]
            Paths to the written HTML files, index first.

        Raises
        ------
        ManualSourceError
            If a configured document cannot be read; nothing is written.
        """
        pages = self.assembler.build()
        written: list[Path] = []
        for page in pages:
            path = self.output_dir / page.output_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(page.html, encoding="utf-8")
            logger.info("wrote manual page %s", path)
            written.append(path)
        return written


__all__ = [
    "ManualContentGenerator",
    "ManualPageAssembler",
    "ManualSourceError",
    "base_url",
]
