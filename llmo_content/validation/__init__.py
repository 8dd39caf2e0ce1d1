"""Reply validation, article quality checks, grading, and report formatting."""

from llmo_content.validation.checks import (
    parse_article_payload,
    parse_seo_payload,
    parse_titles_payload,
    require_fields,
    validate_article,
)
from llmo_content.validation.report import format_quality_report

__all__ = [
    "parse_article_payload",
    "parse_seo_payload",
    "parse_titles_payload",
    "require_fields",
    "validate_article",
    "format_quality_report",
]
