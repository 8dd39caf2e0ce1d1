"""LLMO/SEO blog content generator.

Package structure:
    llmo_content/config.py       – API key, model settings, labels, logging setup
    llmo_content/errors.py       – error types and their HTTP mapping
    llmo_content/models.py       – titles, articles, sections, SEO metadata
    llmo_content/pipeline/       – prompts, Claude calls, JSON reply recovery
    llmo_content/validation/     – reply shape checks, quality checks, reports
    llmo_content/export/         – Markdown and HTML export
    llmo_content/web.py          – Flask API
"""
