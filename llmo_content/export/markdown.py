"""Markdown export with an optional YAML front-matter block."""

from __future__ import annotations

from datetime import datetime

import frontmatter

from llmo_content.config import AUTHOR_NAME, PROJECT_URL, SYSTEM_NAME
from llmo_content.models import Article, SEOMetadata


def front_matter_fields(seo: SEOMetadata, now: datetime) -> dict:
    """Front-matter mapping in output order."""
    fields = {
        "title": seo.title,
        "description": seo.description,
        "keywords": list(seo.keywords),
        "robots": seo.meta_robots,
    }
    if seo.canonical_url:
        fields["canonical"] = seo.canonical_url
    fields["date"] = now.date().isoformat()
    fields["author"] = AUTHOR_NAME
    fields["og"] = {
        "title": seo.og_title,
        "description": seo.og_description,
        "type": "article",
    }
    fields["twitter"] = {
        "title": seo.twitter_title,
        "description": seo.twitter_description,
        "card": "summary_large_image",
    }
    return fields


def render_markdown(article: Article, include_seo: bool = False, now: datetime | None = None) -> str:
    """Render the article as Markdown.

    Front matter is emitted only when ``include_seo`` is set and the article
    carries metadata. Headings: ``#`` title, ``##`` sections, ``###``
    subsections; bodies are written verbatim.
    """
    now = now or datetime.now()

    body = f"# {article.title}\n\n"
    for section in article.sections:
        body += f"## {section.heading}\n\n"
        body += f"{section.content}\n\n"
        for sub in section.subheadings:
            body += f"### {sub.title}\n\n"
            body += f"{sub.content}\n\n"

    body += "---\n\n"
    body += f"*This article was generated automatically by [{SYSTEM_NAME}]({PROJECT_URL}).*\n"
    body += f"*Generated: {now.strftime('%Y-%m-%d')}*\n"

    if not (include_seo and article.seo_metadata is not None):
        return body

    post = frontmatter.Post(body, **front_matter_fields(article.seo_metadata, now))
    # dumps() strips the trailing newline of the body
    return frontmatter.dumps(post, sort_keys=False) + "\n"
