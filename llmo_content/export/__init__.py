"""Document export: Markdown with front matter or standalone styled HTML."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from llmo_content.errors import UnsupportedFormat
from llmo_content.export.html import render_html
from llmo_content.export.markdown import render_markdown
from llmo_content.models import Article

# format -> (mime type, file extension)
FORMATS = {
    "markdown": ("text/markdown", "md"),
    "html": ("text/html", "html"),
}


@dataclass
class ExportOptions:
    include_seo: bool = False
    include_styles: bool = True
    filename: Optional[str] = None


@dataclass
class ExportedDocument:
    content: str
    mime_type: str
    filename: str


def ensure_supported(fmt) -> str:
    """Return ``fmt`` unchanged or raise UnsupportedFormat."""
    if not isinstance(fmt, str) or fmt not in FORMATS:
        raise UnsupportedFormat(fmt)
    return fmt


def export_filename(title: str, fmt: str) -> str:
    """Derive a download filename from the article title."""
    ensure_supported(fmt)
    slug = re.sub(r"[^\w\s-]", "", title)
    slug = re.sub(r"\s+", "-", slug).lower()
    return f"{slug or 'article'}.{FORMATS[fmt][1]}"


def export_article(
    article: Article,
    fmt: str,
    options: Optional[ExportOptions] = None,
    now: Optional[datetime] = None,
) -> ExportedDocument:
    """Serialize an article in the requested format.

    Raises:
        UnsupportedFormat: ``fmt`` is not ``markdown`` or ``html``; raised
            before anything is rendered.
    """
    ensure_supported(fmt)
    options = options or ExportOptions()
    mime_type, ext = FORMATS[fmt]

    if fmt == "markdown":
        content = render_markdown(article, include_seo=options.include_seo, now=now)
    else:
        content = render_html(
            article,
            include_seo=options.include_seo,
            include_styles=options.include_styles,
            now=now,
        )

    return ExportedDocument(
        content=content,
        mime_type=mime_type,
        filename=options.filename or f"article.{ext}",
    )


__all__ = [
    "FORMATS",
    "ExportOptions",
    "ExportedDocument",
    "ensure_supported",
    "export_article",
    "export_filename",
]
