"""Claude client construction and the single completion call every step uses.

The client is created once at startup (``create_client``) and handed to each
generation function, so a missing API key fails before any request is served.
Calls are not retried; an upstream failure surfaces to the caller as is.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import anthropic

from llmo_content.config import ANTHROPIC_API_KEY
from llmo_content.errors import ConfigurationError, UpstreamEmpty
from llmo_content.pipeline.json_recovery import parse_json_reply

logger = logging.getLogger(__name__)


def create_client(api_key: Optional[str] = None) -> anthropic.Anthropic:
    """Build the Anthropic client, failing fast when no key is configured."""
    key = ANTHROPIC_API_KEY if api_key is None else api_key
    if not key:
        raise ConfigurationError("ANTHROPIC_API_KEY not set. Add it to your .env file.")
    return anthropic.Anthropic(api_key=key)


def _extract_text(message) -> str:
    """Concatenate the text blocks of a Messages API response."""
    text_parts: list[str] = []
    for block in message.content or []:
        if getattr(block, "type", None) == "text":
            text_parts.append(block.text)
    return "".join(text_parts)


def complete(
    client: anthropic.Anthropic,
    *,
    model: str,
    system: str,
    user: str,
    temperature: float,
    max_tokens: int,
) -> str:
    """Send one system/user prompt pair and return the reply text.

    Raises:
        UpstreamEmpty: the model returned no text.
    """
    start = time.time()
    message = client.messages.create(
        model=model,
        max_tokens=max_tokens,
        temperature=temperature,
        system=system,
        messages=[{"role": "user", "content": user}],
    )
    elapsed = time.time() - start

    text = _extract_text(message)
    if not text.strip():
        raise UpstreamEmpty(f"No content returned from {model}")

    usage = getattr(message, "usage", None)
    if usage is not None:
        logger.info(
            "%s replied in %.1fs (%s in / %s out)",
            model, elapsed, usage.input_tokens, usage.output_tokens,
        )
    else:
        logger.info("%s replied in %.1fs", model, elapsed)
    return text


def request_json(client: anthropic.Anthropic, **kwargs):
    """``complete`` followed by JSON recovery and parsing."""
    return parse_json_reply(complete(client, **kwargs))
