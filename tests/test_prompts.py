from datetime import date

from llmo_content.pipeline.prompts import (
    build_article_prompts,
    build_seo_prompts,
    build_title_prompts,
)


def test_title_prompts_carry_keyword_and_optional_overview():
    system, user = build_title_prompts("remote work", "for startup founders")
    assert "Generate 8-10 titles" in system
    assert "TARGET KEYWORD: remote work" in user
    assert "CONTEXT: for startup founders" in user
    assert '"titles"' in user


def test_title_prompts_omit_missing_overview():
    _, user = build_title_prompts("remote work")
    assert "CONTEXT:" not in user


def test_article_prompts_list_six_sections_and_require_keyword():
    _, user = build_article_prompts(
        "Remote Work Playbook", "remote work", description="A practical guide"
    )
    assert "Title: Remote Work Playbook" in user
    assert "Summary: A practical guide" in user
    assert "Context:" not in user
    assert "6. Action plan" in user
    assert 'mention the keyword "remote work"' in user


def test_seo_prompts_truncate_content_excerpt():
    content = "a" * 1500
    _, user = build_seo_prompts("T", "k", content=content, today=date(2026, 10, 19))
    assert f"Article content (excerpt): {'a' * 1000}..." in user
    assert "a" * 1001 not in user


def test_seo_prompts_use_base_url_for_canonical_example():
    _, user = build_seo_prompts(
        "T", "k", base_url="https://blog.example.org/", today=date(2026, 10, 19)
    )
    assert "Base URL: https://blog.example.org/" in user
    assert "https://blog.example.org/article-slug" in user


def test_seo_prompts_default_canonical_and_date_stamp():
    _, user = build_seo_prompts("T", "k", today=date(2026, 10, 19))
    assert "https://example.com/article-slug" in user
    assert '"datePublished": "2026-10-19"' in user
    assert "Article content" not in user


def test_prompts_are_deterministic():
    day = date(2026, 1, 2)
    assert build_seo_prompts("T", "k", "body", today=day) == build_seo_prompts(
        "T", "k", "body", today=day
    )
    assert build_title_prompts("k") == build_title_prompts("k")
