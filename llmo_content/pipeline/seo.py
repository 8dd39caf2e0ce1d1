"""SEO metadata step: title/description tags, social cards, schema.org data.

Runs on the advanced model at a low temperature. Called directly by the ``/api/generate-seo`` endpoint and as the
dependent call after article generation.
"""

from __future__ import annotations

import logging
from typing import Optional

import anthropic

from llmo_content.config import ADVANCED_MODEL, SEO_MAX_TOKENS, SEO_TEMPERATURE
from llmo_content.models import SEOMetadata
from llmo_content.pipeline.llm import request_json
from llmo_content.pipeline.prompts import build_seo_prompts
from llmo_content.validation.checks import parse_seo_payload, require_fields

logger = logging.getLogger(__name__)


def generate_seo_metadata(
    client: anthropic.Anthropic,
    title: str,
    keyword: str,
    content: Optional[str] = None,
    description: Optional[str] = None,
    base_url: Optional[str] = None,
) -> SEOMetadata:
    """Generate page metadata for an article.

    Args:
        client: Anthropic API client.
        title: Article title (required).
        keyword: Main keyword (required).
        content: Article text; only an excerpt is sent to the model.
        description: Short article summary.
        base_url: Site base URL used to suggest the canonical URL.
    """
    require_fields(title=title, keyword=keyword)
    system_prompt, user_prompt = build_seo_prompts(
        title=title,
        keyword=keyword,
        content=content,
        description=description,
        base_url=base_url,
    )

    logger.info("Generating SEO metadata for %r (%s)", title, ADVANCED_MODEL)
    payload = request_json(
        client,
        model=ADVANCED_MODEL,
        system=system_prompt,
        user=user_prompt,
        temperature=SEO_TEMPERATURE,
        max_tokens=SEO_MAX_TOKENS,
    )
    return parse_seo_payload(payload)
