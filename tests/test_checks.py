import copy

import pytest

from fakes import ARTICLE_PAYLOAD, SEO_PAYLOAD, TITLES_PAYLOAD
from llmo_content.errors import InvalidInput, ResponseMalformed
from llmo_content.models import Article, Section, SEOMetadata, Subsection
from llmo_content.validation import (
    format_quality_report,
    parse_article_payload,
    parse_seo_payload,
    parse_titles_payload,
    require_fields,
    validate_article,
)
from llmo_content.validation.report import compute_grade


# ── require_fields ────────────────────────────────────────────────────────


def test_require_fields_accepts_non_blank_strings():
    require_fields(keyword="remote work", title="T")


@pytest.mark.parametrize("value", [None, "", "   ", 42, ["x"]])
def test_require_fields_rejects_missing_or_blank(value):
    with pytest.raises(InvalidInput, match="keyword"):
        require_fields(keyword=value)


def test_require_fields_names_every_missing_field():
    with pytest.raises(InvalidInput) as exc_info:
        require_fields(title="", keyword=None)
    assert "title" in str(exc_info.value)
    assert "keyword" in str(exc_info.value)


# ── titles ────────────────────────────────────────────────────────────────


def test_titles_get_sequential_ids():
    titles = parse_titles_payload(TITLES_PAYLOAD)
    assert [t.id for t in titles] == ["ai-title-1", "ai-title-2"]
    assert titles[0].title == "Remote Work Playbook: 12 Field-Tested Practices"
    assert titles[1].description == "Targets comparison queries."


def test_titles_skip_entries_without_title_and_default_description():
    titles = parse_titles_payload(
        {"titles": [{"description": "orphan"}, "junk", {"title": "Kept"}]}
    )
    assert len(titles) == 1
    assert titles[0].id == "ai-title-1"
    assert titles[0].description == ""


@pytest.mark.parametrize(
    "payload",
    [{}, {"titles": "nope"}, ["titles"], {"titles": []}, {"titles": [{"title": " "}]}],
)
def test_titles_malformed(payload):
    with pytest.raises(ResponseMalformed):
        parse_titles_payload(payload)


# ── article ───────────────────────────────────────────────────────────────


def test_article_preserves_order_and_text():
    article = parse_article_payload(ARTICLE_PAYLOAD)
    assert article.title == ARTICLE_PAYLOAD["title"]
    assert [s.heading for s in article.sections] == ["Why remote work matters", "Core concepts"]
    assert article.sections[0].content == ARTICLE_PAYLOAD["sections"][0]["content"]
    assert article.sections[0].subheadings == [
        Subsection(title="Expected impact", content="Remote work cuts commute time.")
    ]
    assert article.sections[1].subheadings == []
    assert article.seo_metadata is None


def test_article_round_trips_through_wire_format():
    assert parse_article_payload(ARTICLE_PAYLOAD).to_dict() == ARTICLE_PAYLOAD


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("title"),
        lambda d: d.pop("sections"),
        lambda d: d.update(sections={"heading": "x"}),
        lambda d: d.update(sections=[]),
        lambda d: d["sections"][0].update(heading=""),
        lambda d: d["sections"][1].pop("content"),
        lambda d: d["sections"].append("not a section"),
        lambda d: d["sections"][0].update(subheadings="nope"),
        lambda d: d["sections"][0]["subheadings"][0].pop("title"),
    ],
)
def test_article_malformed(mutate):
    payload = copy.deepcopy(ARTICLE_PAYLOAD)
    mutate(payload)
    with pytest.raises(ResponseMalformed):
        parse_article_payload(payload)


# ── seo ───────────────────────────────────────────────────────────────────


def test_seo_full_payload_round_trips():
    seo = parse_seo_payload(SEO_PAYLOAD)
    assert seo.keywords == ["remote work", "distributed teams", "async communication"]
    assert seo.structured_data.date_published == "2026-10-19"
    assert seo.to_dict() == SEO_PAYLOAD


def test_seo_minimal_payload_gets_fallbacks():
    seo = parse_seo_payload({"title": "T", "description": "D", "keywords": ["k"]})
    assert seo.og_title == "T"
    assert seo.twitter_title == "T"
    assert seo.og_description == "D"
    assert seo.twitter_description == "D"
    assert seo.meta_robots == "index, follow"
    assert seo.canonical_url is None
    assert seo.structured_data is None
    assert "canonicalUrl" not in seo.to_dict()
    assert "structuredData" not in seo.to_dict()


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {"description": "D", "keywords": ["k"]},
        {"title": "T", "keywords": ["k"]},
        {"title": "T", "description": "D"},
        {"title": "T", "description": "D", "keywords": []},
        {"title": "T", "description": "D", "keywords": "k1, k2"},
    ],
)
def test_seo_malformed(payload):
    with pytest.raises(ResponseMalformed):
        parse_seo_payload(payload)


# ── quality checks ────────────────────────────────────────────────────────


def _article(sections=6, with_subs=True, keyword="remote work", words=200):
    body = " ".join([keyword] + ["word"] * words)
    return Article(
        title="Remote work guide",
        sections=[
            Section(
                heading=f"Heading {i}",
                content=body,
                subheadings=[Subsection("Sub", "detail")] if with_subs else [],
            )
            for i in range(sections)
        ],
    )


def test_quality_checks_pass_for_complete_article():
    article = _article()
    article.seo_metadata = SEOMetadata(
        title="x" * 55,
        description="y" * 155,
        keywords=["remote work"],
        og_title="o",
        og_description="o",
        twitter_title="t",
        twitter_description="t",
        meta_robots="index, follow",
    )
    results = validate_article(article, keyword="Remote Work")
    assert results["pass"] is True
    assert results["grade"] == "A+"
    assert results["keyword_coverage"]["found"] == 6


def test_quality_checks_flag_short_article_and_missing_keyword():
    article = _article(sections=3, with_subs=False, keyword="office", words=5)
    results = validate_article(article, keyword="remote work")
    assert results["pass"] is False
    assert any("Too short" in i for i in results["issues"])
    assert any("Too few sections" in i for i in results["issues"])
    assert any("Keyword" in i for i in results["issues"])
    assert results["grade"] == "D"
    assert results["seo_lengths"] == {}


def test_quality_report_mentions_grade_and_missing_seo():
    results = validate_article(_article(), keyword="remote work")
    report = format_quality_report(results, "Remote work guide")
    assert "QUALITY REPORT: Remote work guide" in report
    assert f"Grade: {results['grade']}" in report
    assert "SEO metadata:  not generated" in report


@pytest.mark.parametrize(
    "issues, warnings, grade",
    [([], [], "A+"), ([], ["w"], "A"), (["i"], [], "B"), (["i", "j"], [], "C"), (["i"] * 4, [], "D")],
)
def test_compute_grade(issues, warnings, grade):
    assert compute_grade(issues, warnings) == grade
