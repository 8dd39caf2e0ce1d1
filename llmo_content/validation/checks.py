"""Structural validation of model replies and quality checks on articles.

``require_fields`` guards service inputs. ``parse_*_payload`` turn parsed JSON into model records and raise
``ResponseMalformed`` when the shape is wrong; nothing malformed enters the
data model. ``validate_article`` runs non-blocking quality checks and is only
used for reporting.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from llmo_content.config import (
    ARTICLE_SECTION_COUNT,
    DEFAULT_META_ROBOTS,
    SEO_DESCRIPTION_LENGTH,
    SEO_TITLE_LENGTH,
)
from llmo_content.errors import InvalidInput, ResponseMalformed
from llmo_content.models import (
    Article,
    Section,
    SEOMetadata,
    StructuredData,
    Subsection,
    TitleCandidate,
)
from llmo_content.validation.report import compute_grade

logger = logging.getLogger(__name__)

ARTICLE_MIN_WORDS = 800


def _nonempty_str(value) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _optional_str(value, default: str = "") -> str:
    return value if isinstance(value, str) and value.strip() else default


def _str_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str) and v.strip()]


# ── Request inputs ────────────────────────────────────────────────────────


def require_fields(**fields) -> None:
    """Raise InvalidInput naming every missing or blank required field."""
    missing = [name for name, value in fields.items() if not _nonempty_str(value)]
    if missing:
        raise InvalidInput(f"Missing required field(s): {', '.join(missing)}")


# ── Reply shapes ──────────────────────────────────────────────────────────


def parse_titles_payload(data) -> list[TitleCandidate]:
    """Build title candidates from a ``{"titles": [...]}`` reply.

    Entries without a title are skipped; ids are ``ai-title-<n>`` in reply
    order, counting kept entries from 1.
    """
    if not isinstance(data, dict) or not isinstance(data.get("titles"), list):
        logger.error("Invalid titles structure: %r", data)
        raise ResponseMalformed("Response is missing a 'titles' array")

    candidates = []
    for entry in data["titles"]:
        if not isinstance(entry, dict) or not _nonempty_str(entry.get("title")):
            logger.warning("Skipping title entry without a title: %r", entry)
            continue
        description = entry.get("description")
        candidates.append(
            TitleCandidate(
                id=f"ai-title-{len(candidates) + 1}",
                title=entry["title"].strip(),
                description=description.strip() if isinstance(description, str) else "",
            )
        )

    if not candidates:
        raise ResponseMalformed("Response contained no usable titles")
    return candidates


def _parse_subsections(raw, section_index: int) -> list[Subsection]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ResponseMalformed(f"Section {section_index}: 'subheadings' must be an array")
    subsections = []
    for j, sub in enumerate(raw, start=1):
        if not isinstance(sub, dict) or not isinstance(sub.get("title"), str) or not isinstance(sub.get("content"), str):
            raise ResponseMalformed(
                f"Section {section_index}, subheading {j}: needs string 'title' and 'content'"
            )
        subsections.append(Subsection(title=sub["title"], content=sub["content"]))
    return subsections


def parse_article_payload(data) -> Article:
    """Build an Article from ``{"title": ..., "sections": [...]}``.

    Every section needs a non-empty ``heading`` and ``content``; optional
    ``subheadings`` must be an array of ``{title, content}`` objects.
    """
    if not isinstance(data, dict) or not _nonempty_str(data.get("title")) or not isinstance(data.get("sections"), list):
        logger.error("Invalid article structure: %r", data)
        raise ResponseMalformed("Response must contain a 'title' and a 'sections' array")
    if not data["sections"]:
        raise ResponseMalformed("Article has no sections")

    sections = []
    for i, raw in enumerate(data["sections"], start=1):
        if not isinstance(raw, dict):
            raise ResponseMalformed(f"Section {i} is not an object")
        if not _nonempty_str(raw.get("heading")) or not _nonempty_str(raw.get("content")):
            raise ResponseMalformed(f"Section {i} needs a non-empty 'heading' and 'content'")
        sections.append(
            Section(
                heading=raw["heading"],
                content=raw["content"],
                subheadings=_parse_subsections(raw.get("subheadings"), i),
            )
        )
    return Article(title=data["title"], sections=sections)


def _parse_structured_data(raw) -> Optional[StructuredData]:
    if not isinstance(raw, dict):
        return None
    return StructuredData(
        type=_optional_str(raw.get("type") or raw.get("@type"), "Article"),
        name=_optional_str(raw.get("name")),
        description=_optional_str(raw.get("description")),
        author=_optional_str(raw.get("author")),
        date_published=_optional_str(raw.get("datePublished")),
        date_modified=_optional_str(raw.get("dateModified")),
        keywords=_str_list(raw.get("keywords")),
    )


def parse_seo_payload(data) -> SEOMetadata:
    """Build SEOMetadata; ``title``, ``description`` and ``keywords`` are required.

    Social titles/descriptions fall back to the page title/description and
    robots falls back to ``DEFAULT_META_ROBOTS``.
    """
    if not isinstance(data, dict):
        raise ResponseMalformed("SEO metadata response is not an object")
    title = data.get("title")
    description = data.get("description")
    keywords = _str_list(data.get("keywords"))
    if not _nonempty_str(title) or not _nonempty_str(description) or not keywords:
        logger.error("Invalid SEO metadata structure: %r", data)
        raise ResponseMalformed("SEO metadata needs 'title', 'description' and 'keywords'")

    canonical = data.get("canonicalUrl")
    return SEOMetadata(
        title=title,
        description=description,
        keywords=keywords,
        og_title=_optional_str(data.get("ogTitle"), title),
        og_description=_optional_str(data.get("ogDescription"), description),
        twitter_title=_optional_str(data.get("twitterTitle"), title),
        twitter_description=_optional_str(data.get("twitterDescription"), description),
        meta_robots=_optional_str(data.get("metaRobots"), DEFAULT_META_ROBOTS),
        canonical_url=canonical if _nonempty_str(canonical) else None,
        structured_data=_parse_structured_data(data.get("structuredData")),
    )


# ── Quality checks ────────────────────────────────────────────────────────


def validate_article(article: Article, keyword: str = "") -> dict:
    """Run all quality checks on a generated article.

    Returns a dict with per-check results, issues, warnings, grade, and
    overall pass/fail. Never raises on a low-quality article.
    """
    results = {
        "word_count": check_word_count(article),
        "section_count": check_section_count(article),
        "subsections": check_subsections(article),
        "keyword_coverage": check_keyword_coverage(article, keyword),
        "seo_lengths": check_seo_lengths(article.seo_metadata),
    }

    issues, warnings = _collect_issues(results)
    results["issues"] = issues
    results["warnings"] = warnings
    results["pass"] = len(issues) == 0
    results["grade"] = compute_grade(issues, warnings)
    return results


def check_word_count(article: Article) -> dict:
    count = article.word_count()
    return {"count": count, "pass": count >= ARTICLE_MIN_WORDS}


def check_section_count(article: Article) -> dict:
    count = len(article.sections)
    return {"count": count, "pass": count == ARTICLE_SECTION_COUNT}


def check_subsections(article: Article) -> dict:
    with_subs = sum(1 for s in article.sections if s.subheadings)
    return {
        "sections_with_subsections": with_subs,
        "total_subsections": sum(len(s.subheadings) for s in article.sections),
        "pass": with_subs * 2 >= len(article.sections),
    }


def check_keyword_coverage(article: Article, keyword: str) -> dict:
    """Count sections that mention the keyword anywhere in their text."""
    if not keyword.strip():
        return {}
    pattern = re.compile(re.escape(keyword.strip()), re.IGNORECASE)
    missing = []
    for section in article.sections:
        text = "\n".join(
            [section.heading, section.content]
            + [f"{sub.title}\n{sub.content}" for sub in section.subheadings]
        )
        if not pattern.search(text):
            missing.append(section.heading)
    return {
        "keyword": keyword,
        "total": len(article.sections),
        "found": len(article.sections) - len(missing),
        "missing_sections": missing,
        "pass": not missing,
    }


def check_seo_lengths(seo: Optional[SEOMetadata]) -> dict:
    if seo is None:
        return {}
    title_min, title_max = SEO_TITLE_LENGTH
    desc_min, desc_max = SEO_DESCRIPTION_LENGTH
    title_len = len(seo.title)
    desc_len = len(seo.description)
    return {
        "title_length": title_len,
        "title_pass": title_min <= title_len <= title_max,
        "description_length": desc_len,
        "description_pass": desc_min <= desc_len <= desc_max,
    }


def _collect_issues(results: dict) -> tuple[list[str], list[str]]:
    """Walk through all check results and collect issues/warnings."""
    issues = []
    warnings = []

    wc = results["word_count"]
    if not wc["pass"]:
        issues.append(f"Too short: {wc['count']} words (need {ARTICLE_MIN_WORDS}+)")

    sc = results["section_count"]
    if sc["count"] < ARTICLE_SECTION_COUNT:
        issues.append(f"Too few sections: {sc['count']} (expected {ARTICLE_SECTION_COUNT})")
    elif sc["count"] > ARTICLE_SECTION_COUNT:
        warnings.append(f"Extra sections: {sc['count']} (expected {ARTICLE_SECTION_COUNT})")

    if not results["subsections"]["pass"]:
        warnings.append(
            f"Only {results['subsections']['sections_with_subsections']} sections have subsections"
        )

    kw = results["keyword_coverage"]
    if kw and not kw["pass"]:
        issues.append(
            f"Keyword '{kw['keyword']}' missing from {len(kw['missing_sections'])} section(s)"
        )

    seo = results["seo_lengths"]
    if seo:
        title_min, title_max = SEO_TITLE_LENGTH
        desc_min, desc_max = SEO_DESCRIPTION_LENGTH
        if not seo["title_pass"]:
            warnings.append(f"SEO title is {seo['title_length']} chars (target {title_min}-{title_max})")
        if not seo["description_pass"]:
            warnings.append(
                f"Meta description is {seo['description_length']} chars (target {desc_min}-{desc_max})"
            )

    return issues, warnings
