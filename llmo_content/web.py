"""Flask application exposing the generation and export endpoints.

    POST /api/generate-titles   {keyword, overview?}
    POST /api/generate-article  {title, description?, keyword, overview?, generateSEO?, baseUrl?}
    POST /api/generate-seo      {title, content?, keyword, description?, baseUrl?}
    POST /api/export            {format, article, options?}

Input errors answer 400 with ``{"error": ...}``. Anything else answers 500
with a short per-endpoint message; the detail only goes to the server log.
"""

from __future__ import annotations

import functools
import logging
from typing import Optional
from urllib.parse import quote

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from llmo_content.config import configure_logging
from llmo_content.errors import InvalidInput, ResponseMalformed, UnsupportedFormat
from llmo_content.export import ExportOptions, ensure_supported, export_article
from llmo_content.models import Article
from llmo_content.pipeline import (
    create_client,
    generate_article,
    generate_seo_metadata,
    generate_titles,
)
from llmo_content.validation import parse_article_payload, parse_seo_payload

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


def create_app(client=None) -> Flask:
    """Build the app around one Claude client.

    When ``client`` is omitted it is created from the environment, so a
    missing ``ANTHROPIC_API_KEY`` fails here, at startup.
    """
    configure_logging()
    app = Flask(__name__)
    app.extensions["llm_client"] = client if client is not None else create_client()
    app.register_blueprint(api)
    return app


# ── Request helpers ───────────────────────────────────────────────────────


def _client():
    return current_app.extensions["llm_client"]


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data


def _optional(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def json_endpoint(failure_message: str):
    """Map input errors to 400 and every other failure to a logged 500."""

    def decorator(view):
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except (InvalidInput, UnsupportedFormat) as e:
                return _error(str(e), 400)
            except Exception:
                logger.exception(failure_message)
                return _error(failure_message, 500)

        return wrapper

    return decorator


# ── Endpoints ─────────────────────────────────────────────────────────────


@api.post("/generate-titles")
@json_endpoint("Title generation failed")
def titles_endpoint():
    data = _json_body()
    titles = generate_titles(
        _client(),
        keyword=data.get("keyword"),
        overview=_optional(data, "overview"),
    )
    return jsonify({"titles": [t.to_dict() for t in titles]})


@api.post("/generate-article")
@json_endpoint("Article generation failed")
def article_endpoint():
    data = _json_body()
    article = generate_article(
        _client(),
        title=data.get("title"),
        keyword=data.get("keyword"),
        description=_optional(data, "description"),
        overview=_optional(data, "overview"),
        generate_seo=bool(data.get("generateSEO", True)),
        base_url=_optional(data, "baseUrl"),
    )
    return jsonify({"article": article.to_dict()})


@api.post("/generate-seo")
@json_endpoint("SEO metadata generation failed")
def seo_endpoint():
    data = _json_body()
    seo = generate_seo_metadata(
        _client(),
        title=data.get("title"),
        keyword=data.get("keyword"),
        content=_optional(data, "content"),
        description=_optional(data, "description"),
        base_url=_optional(data, "baseUrl"),
    )
    return jsonify({"seoMetadata": seo.to_dict()})


def _article_from_request(raw) -> Article:
    """Validate a client-supplied article; shape errors are input errors."""
    try:
        article = parse_article_payload(raw)
        if raw.get("seoMetadata"):
            article.seo_metadata = parse_seo_payload(raw["seoMetadata"])
    except ResponseMalformed as e:
        raise InvalidInput(f"Invalid article: {e}") from e
    return article


@api.post("/export")
@json_endpoint("Export failed")
def export_endpoint():
    data = _json_body()
    fmt = data.get("format")
    raw_article = data.get("article")
    if not fmt or not raw_article:
        raise InvalidInput("Both 'format' and 'article' are required")
    ensure_supported(fmt)

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise InvalidInput("'options' must be an object")

    document = export_article(
        _article_from_request(raw_article),
        fmt,
        ExportOptions(
            include_seo=bool(options.get("includeSEO")),
            include_styles=options.get("includeStyles") is not False,
            filename=_optional(options, "filename"),
        ),
    )

    encoded_name = quote(document.filename, safe="!*'()")
    return Response(
        document.content,
        content_type=f"{document.mime_type}; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{encoded_name}"'},
    )
