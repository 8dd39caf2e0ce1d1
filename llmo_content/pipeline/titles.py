"""Title ideation step.

Uses the fast model at a high temperature to propose a list of LLMO-oriented
blog titles, each with a short rationale, for one target keyword.
"""

from __future__ import annotations

import logging
from typing import Optional

import anthropic

from llmo_content.config import DEFAULT_MODEL, TITLE_MAX_TOKENS, TITLE_TEMPERATURE
from llmo_content.models import TitleCandidate
from llmo_content.pipeline.llm import request_json
from llmo_content.pipeline.prompts import build_title_prompts
from llmo_content.validation.checks import parse_titles_payload, require_fields

logger = logging.getLogger(__name__)


def generate_titles(
    client: anthropic.Anthropic,
    keyword: str,
    overview: Optional[str] = None,
) -> list[TitleCandidate]:
    """Generate title candidates for a keyword.

    Args:
        client: Anthropic API client.
        keyword: Target keyword (required).
        overview: Optional context about the article or audience.

    Returns:
        Candidates with ids ``ai-title-1``, ``ai-title-2``, ... in reply order.

    Raises:
        InvalidInput: keyword is missing.
        UpstreamEmpty, ResponseUnparseable, ResponseMalformed: the reply
            could not be turned into titles.
    """
    require_fields(keyword=keyword)
    system_prompt, user_prompt = build_title_prompts(keyword, overview)

    logger.info("Generating titles for %r (%s)", keyword, DEFAULT_MODEL)
    payload = request_json(
        client,
        model=DEFAULT_MODEL,
        system=system_prompt,
        user=user_prompt,
        temperature=TITLE_TEMPERATURE,
        max_tokens=TITLE_MAX_TOKENS,
    )
    titles = parse_titles_payload(payload)
    logger.info("Generated %d titles", len(titles))
    return titles
