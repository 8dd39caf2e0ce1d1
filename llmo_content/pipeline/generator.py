"""Orchestrate article generation.

Two-step process:
1. Article generation (advanced model) — title, sections, subsections
2. SEO metadata (advanced model, optional) — keyed on the finished article

A failure in step 2 never loses the article from step 1: it is logged and
the article is returned without metadata.
"""

from __future__ import annotations

import logging
from typing import Optional

import anthropic

from llmo_content.config import ADVANCED_MODEL, ARTICLE_MAX_TOKENS, ARTICLE_TEMPERATURE
from llmo_content.errors import LlmoError
from llmo_content.models import Article
from llmo_content.pipeline.llm import request_json
from llmo_content.pipeline.prompts import build_article_prompts
from llmo_content.pipeline.seo import generate_seo_metadata
from llmo_content.validation.checks import parse_article_payload, require_fields

logger = logging.getLogger(__name__)


def write_article(
    client: anthropic.Anthropic,
    title: str,
    keyword: str,
    description: Optional[str] = None,
    overview: Optional[str] = None,
) -> Article:
    """Generate the article body only (no metadata)."""
    require_fields(title=title, keyword=keyword)
    system_prompt, user_prompt = build_article_prompts(
        title=title,
        keyword=keyword,
        description=description,
        overview=overview,
    )

    logger.info("Generating article %r (%s)", title, ADVANCED_MODEL)
    payload = request_json(
        client,
        model=ADVANCED_MODEL,
        system=system_prompt,
        user=user_prompt,
        temperature=ARTICLE_TEMPERATURE,
        max_tokens=ARTICLE_MAX_TOKENS,
    )
    article = parse_article_payload(payload)
    logger.info(
        "Generated %d sections, %d words", len(article.sections), article.word_count()
    )
    return article


def attach_seo_metadata(
    client: anthropic.Anthropic,
    article: Article,
    keyword: str,
    description: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Article:
    """Best-effort metadata enrichment; failures are logged, never raised."""
    try:
        article.seo_metadata = generate_seo_metadata(
            client,
            title=article.title,
            keyword=keyword,
            content=article.flatten_content(),
            description=description,
            base_url=base_url,
        )
    except (LlmoError, anthropic.APIError) as e:
        logger.warning(
            "SEO metadata generation failed, returning article without it: %s", e
        )
    return article


def generate_article(
    client: anthropic.Anthropic,
    title: str,
    keyword: str,
    description: Optional[str] = None,
    overview: Optional[str] = None,
    generate_seo: bool = True,
    base_url: Optional[str] = None,
) -> Article:
    """Generate an article and, optionally, its SEO metadata.

    Args:
        client: Anthropic API client.
        title: Chosen article title (required).
        keyword: Target keyword (required).
        description: Summary of the article, usually the title rationale.
        overview: Optional free-text context.
        generate_seo: Also run the metadata step and attach its result.
        base_url: Site base URL for the canonical URL suggestion.

    Returns:
        The article; ``seo_metadata`` is set only if the metadata step was
        requested and succeeded.

    Raises:
        InvalidInput: title or keyword is missing.
        UpstreamEmpty, ResponseUnparseable, ResponseMalformed: the article
            reply could not be used.
    """
    article = write_article(
        client,
        title=title,
        keyword=keyword,
        description=description,
        overview=overview,
    )
    if generate_seo:
        attach_seo_metadata(
            client,
            article,
            keyword=keyword,
            description=description,
            base_url=base_url,
        )
    return article
