"""Standalone HTML export.

Every interpolated value goes through ``escape_html``. The JSON-LD payload is
serialized rather than escaped, with ``<``, ``>`` and ``&`` written as
unicode escapes so no string inside it can close the script element.
"""

from __future__ import annotations

import html
import json
import textwrap
from datetime import datetime

from llmo_content.config import AUTHOR_NAME, HTML_LANG, SYSTEM_NAME
from llmo_content.models import Article, Section, SEOMetadata, StructuredData

STYLESHEET = """
  <style>
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', 'Oxygen', 'Ubuntu', 'Cantarell', sans-serif;
      line-height: 1.6;
      max-width: 800px;
      margin: 0 auto;
      padding: 20px;
      color: #333;
      background-color: #fff;
    }

    h1 {
      color: #2c3e50;
      border-bottom: 3px solid #3498db;
      padding-bottom: 10px;
      margin-bottom: 30px;
    }

    h2 {
      color: #34495e;
      margin-top: 40px;
      margin-bottom: 20px;
      padding-left: 10px;
      border-left: 4px solid #3498db;
    }

    h3 {
      color: #7f8c8d;
      margin-top: 30px;
      margin-bottom: 15px;
    }

    p {
      margin-bottom: 16px;
      text-align: justify;
    }

    .section {
      margin-bottom: 40px;
    }

    .subsection {
      margin-left: 20px;
      margin-bottom: 25px;
      padding: 15px;
      background-color: #f8f9fa;
      border-radius: 8px;
      border-left: 3px solid #28a745;
    }

    .footer {
      margin-top: 60px;
      padding: 20px;
      background-color: #ecf0f1;
      border-radius: 8px;
      text-align: center;
      color: #7f8c8d;
      font-size: 14px;
    }

    .meta-info {
      background-color: #e3f2fd;
      padding: 15px;
      border-radius: 8px;
      margin-bottom: 30px;
      border-left: 4px solid #2196f3;
    }

    .meta-info h4 {
      margin: 0 0 10px 0;
      color: #1976d2;
    }

    @media (max-width: 768px) {
      body {
        padding: 10px;
      }

      .subsection {
        margin-left: 10px;
      }
    }

    @media print {
      body {
        background-color: white;
      }

      .footer {
        background-color: white;
        border: 1px solid #ddd;
      }
    }
  </style>
"""

_JSON_SCRIPT_ESCAPES = {ord("<"): "\\u003c", ord(">"): "\\u003e", ord("&"): "\\u0026"}


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for text nodes and attribute values."""
    return html.escape(text, quote=True)


def json_ld(data: StructuredData) -> str:
    """Serialize structured data as schema.org JSON-LD safe for a script block."""
    payload = {
        "@context": "https://schema.org",
        "@type": data.type or "Article",
        "name": data.name,
        "description": data.description,
        "author": {"@type": "Organization", "name": data.author},
        "datePublished": data.date_published,
        "dateModified": data.date_modified,
        "keywords": list(data.keywords),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False).translate(_JSON_SCRIPT_ESCAPES)


def _paragraphs(text: str, indent: str) -> str:
    """Wrap a body in <p>, one paragraph per source line."""
    return f"{indent}<p>" + escape_html(text).replace("\n", f"</p>\n{indent}<p>") + "</p>\n"


def _head_seo(seo: SEOMetadata) -> str:
    out = f"  <title>{escape_html(seo.title)}</title>\n"
    out += f'  <meta name="description" content="{escape_html(seo.description)}">\n'
    out += f'  <meta name="keywords" content="{escape_html(", ".join(seo.keywords))}">\n'
    out += f'  <meta name="robots" content="{escape_html(seo.meta_robots)}">\n'
    if seo.canonical_url:
        out += f'  <link rel="canonical" href="{escape_html(seo.canonical_url)}">\n'

    # Open Graph
    out += f'  <meta property="og:title" content="{escape_html(seo.og_title)}">\n'
    out += f'  <meta property="og:description" content="{escape_html(seo.og_description)}">\n'
    out += '  <meta property="og:type" content="article">\n'
    if seo.canonical_url:
        out += f'  <meta property="og:url" content="{escape_html(seo.canonical_url)}">\n'

    # Twitter Cards
    out += '  <meta name="twitter:card" content="summary_large_image">\n'
    out += f'  <meta name="twitter:title" content="{escape_html(seo.twitter_title)}">\n'
    out += f'  <meta name="twitter:description" content="{escape_html(seo.twitter_description)}">\n'

    if seo.structured_data is not None:
        out += '  <script type="application/ld+json">\n'
        out += textwrap.indent(json_ld(seo.structured_data), "  ") + "\n"
        out += "  </script>\n"
    return out


def _meta_info(now: datetime) -> str:
    return (
        '  <div class="meta-info">\n'
        "    <h4>📊 Article info</h4>\n"
        f"    <p><strong>Generated:</strong> {now.strftime('%Y-%m-%d')}</p>\n"
        f"    <p><strong>Generator:</strong> {escape_html(SYSTEM_NAME)} ({escape_html(AUTHOR_NAME)})</p>\n"
        "    <p><strong>Optimization:</strong> SEO + LLMO/GEO</p>\n"
        "  </div>\n"
    )


def _section(section: Section) -> str:
    out = '  <div class="section">\n'
    out += f"    <h2>{escape_html(section.heading)}</h2>\n"
    out += _paragraphs(section.content, "    ")
    for sub in section.subheadings:
        out += '    <div class="subsection">\n'
        out += f"      <h3>{escape_html(sub.title)}</h3>\n"
        out += _paragraphs(sub.content, "      ")
        out += "    </div>\n"
    out += "  </div>\n\n"
    return out


def render_html(
    article: Article,
    include_seo: bool = False,
    include_styles: bool = True,
    now: datetime | None = None,
) -> str:
    """Render the article as a complete HTML document.

    With ``include_seo`` and metadata present, the head carries the meta,
    Open Graph, Twitter Card and JSON-LD tags and the body opens with an
    article-info banner; otherwise the page title is the article title.
    """
    now = now or datetime.now()
    with_seo = include_seo and article.seo_metadata is not None

    out = f'<!DOCTYPE html>\n<html lang="{escape_html(HTML_LANG)}">\n<head>\n'
    out += '  <meta charset="UTF-8">\n'
    out += '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'

    if with_seo:
        out += _head_seo(article.seo_metadata)
    else:
        out += f"  <title>{escape_html(article.title)}</title>\n"

    if include_styles:
        out += STYLESHEET

    out += "</head>\n<body>\n"

    if with_seo:
        out += _meta_info(now)

    out += f"  <h1>{escape_html(article.title)}</h1>\n\n"

    for section in article.sections:
        out += _section(section)

    out += '  <div class="footer">\n'
    out += "    <p>🤖 <strong>This article was generated automatically by AI</strong></p>\n"
    out += f"    <p><em>{escape_html(SYSTEM_NAME)}</em> - {escape_html(AUTHOR_NAME)}</p>\n"
    out += f"    <p>Generated: {now.strftime('%Y-%m-%d %H:%M:%S')}</p>\n"
    out += "  </div>\n"
    out += "</body>\n</html>"
    return out
