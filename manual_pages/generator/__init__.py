"""Utilities for rendering manual documents, tables of contents, and navigation."""

from .models import ManualIndexEntry, ManualPageModel, NavEntry, RenderedPage, TocEntry
from .page_generator import (
    ManualContentGenerator,
    ManualPageAssembler,
    ManualSourceError,
)
from .renderer import HtmlContentRenderer
from .templates import ManualTemplates
from .toc import build_nav, build_toc

__all__ = [
    "HtmlContentRenderer",
    "ManualContentGenerator",
    "ManualIndexEntry",
    "ManualPageAssembler",
    "ManualPageModel",
    "ManualSourceError",
    "ManualTemplates",
    "NavEntry",
    "RenderedPage",
    "TocEntry",
    "build_nav",
    "build_toc",
]
