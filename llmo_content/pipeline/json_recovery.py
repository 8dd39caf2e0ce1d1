"""Recover a JSON object from a model reply that may be wrapped in prose.

Models are told to answer with bare JSON but often add a sentence of preamble
or fence the payload in a Markdown code block. ``extract_json_text`` tries,
in order, and returns on the first hit:

    1. the whole (trimmed) reply, if it already parses
    2. the inside of the first ```json fenced block
    3. the inside of a plain fenced block that looks like an object
    4. everything from the first "{" to the last "}"
    5. the trimmed reply as-is (the caller's parse will fail loudly)
"""

import json
import logging
import re

from llmo_content.errors import ResponseUnparseable

logger = logging.getLogger(__name__)

_JSON_FENCE_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
_ANY_FENCE_RE = re.compile(r"```\s*(.*?)\s*```", re.DOTALL)


def extract_json_text(response: str) -> str:
    """Return the substring of ``response`` most likely to parse as JSON."""
    trimmed = response.strip()
    try:
        json.loads(trimmed)
        return trimmed
    except (ValueError, RecursionError):
        pass

    match = _JSON_FENCE_RE.search(response)
    if match:
        return match.group(1).strip()

    for match in _ANY_FENCE_RE.finditer(response):
        content = match.group(1).strip()
        if content.startswith("{") and content.endswith("}"):
            return content

    start = response.find("{")
    end = response.rfind("}")
    if start != -1 and end != -1 and end > start:
        return response[start:end + 1]

    return trimmed


def parse_json_reply(response: str):
    """Recover and parse the JSON payload of a model reply.

    Raises:
        ResponseUnparseable: the recovered text is not valid JSON. The
            exception carries the decoder message.
    """
    cleaned = extract_json_text(response)
    try:
        return json.loads(cleaned)
    except (json.JSONDecodeError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow
        logger.error("JSON parse error: %s", e)
        logger.error("Raw response: %s", response)
        logger.error("Cleaned response: %s", cleaned)
        raise ResponseUnparseable(str(e)) from e
