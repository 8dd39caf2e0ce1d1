"""Build the system and user prompts for the three generation tasks.

Each ``build_*_prompts`` function returns a ``(system_prompt, user_prompt)``
pair. Output is deterministic for identical inputs apart from the date stamp
in the metadata example, which defaults to today.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Optional

from llmo_content.config import (
    ARTICLE_SECTION_COUNT,
    AUTHOR_NAME,
    CONTENT_LANGUAGE,
    SEO_CONTENT_EXCERPT_CHARS,
    SEO_DESCRIPTION_LENGTH,
    SEO_TITLE_LENGTH,
    TITLE_COUNT_RANGE,
)

JSON_ONLY_RULE = (
    "IMPORTANT: Output pure JSON only. Do not wrap it in a code block (```) "
    "and do not add any explanation before or after it."
)


# ── Shared fragments ──────────────────────────────────────────────────────


EEAT_PRINCIPLES = """## E-E-A-T SIGNALS
- **Experience**: first-hand practice, concrete successes and failures and what was learned
- **Expertise**: technical depth, accurate detail, comparison with industry standards
- **Authoritativeness**: normative procedures, best practices, definitive-guide coverage
- **Trustworthiness**: verifiable numbers with sources, freshness, transparent limitations and risks"""


MACHINE_READABILITY = """## WRITING FOR RETRIEVAL (RAG) SYSTEMS
1. **Semantic clarity**: avoid pronouns and vague references ("it", "this"); name the concrete noun
2. **Self-containment**: every unit of text must make sense without its surrounding context
3. **Structure**: prefer numbers, steps and classifications over loose prose
4. **Problem-solution framing**: state the concrete pain point and its resolution"""


def _language_rule() -> str:
    return f"Write every human-readable value in {CONTENT_LANGUAGE}."


def _context_line(label: str, value: Optional[str]) -> Optional[str]:
    return f"{label}: {value}" if value else None


def _join(*parts: Optional[str]) -> str:
    # None marks an omitted optional line; "" is an intentional blank line
    return "\n".join(p for p in parts if p is not None)


# ── Titles ────────────────────────────────────────────────────────────────


def build_title_prompts(keyword: str, overview: Optional[str] = None) -> tuple[str, str]:
    """Prompt pair for blog title ideas optimized for LLM citation."""
    low, high = TITLE_COUNT_RANGE
    system_prompt = f"""You are an expert in Generative Engine Optimization (GEO) and Large Language Model Optimization (LLMO).
Generate blog titles that maximize the chance of being cited by large language models such as ChatGPT, Claude and Gemini.

{EEAT_PRINCIPLES}

{MACHINE_READABILITY}

## GENERATION RULES
- Generate {low}-{high} titles
- Give every title a short strategic explanation of why it is LLMO-optimized
- Use natural language that matches long-tail keywords and conversational queries
- Titles must also work for autonomous AI agents that collect information"""

    user_prompt = _join(
        f"TARGET KEYWORD: {keyword}",
        _context_line("CONTEXT", overview),
        "",
        """## TASK
Based on the information above, generate titles that retrieval-augmented generation (RAG) systems will preferentially retrieve and cite.

## E-E-A-T REQUIREMENTS
Every title must explicitly signal at least one of:
- proof of experience ("field-tested", "implementation case study", "in production")
- expertise (appropriate technical terms and depth)
- authority ("complete guide", "standard method", "best practices")
- trust (specific numbers, time frames, measurable outcomes)

## QUERY TYPES TO COVER
- conversational questions ("How do I ...?")
- comparisons ("X vs Y")
- implementation guides ("How to set up X")
- troubleshooting ("Why X fails")""",
        "",
        _language_rule(),
        JSON_ONLY_RULE,
        "",
        json.dumps(
            {
                "titles": [
                    {
                        "title": "Concrete title (40-60 characters recommended)",
                        "description": "Why this title scores well for E-E-A-T and RAG retrieval (1-2 sentences)",
                    }
                ]
            },
            indent=2,
        ),
    )
    return system_prompt, user_prompt


# ── Article ───────────────────────────────────────────────────────────────


ARTICLE_OUTLINE = [
    "Introduction and value proposition (why it matters, expected impact, scope)",
    "Definitions and core concepts (terms, classification, how it differs from older approaches)",
    "Implementation strategy and best practices (step-by-step, success factors, pitfalls)",
    "Verified success stories (concrete numbers, industry examples, ROI)",
    "Technology trends and outlook (emerging technology, market forecasts)",
    "Action plan (next steps, checklist, recommended resources)",
]


def build_article_prompts(
    title: str,
    keyword: str,
    description: Optional[str] = None,
    overview: Optional[str] = None,
) -> tuple[str, str]:
    """Prompt pair for a full article with sections and subsections.

    Args:
        title: Chosen article title.
        keyword: Target keyword to weave into every section.
        description: Short summary of the article (usually the title rationale).
        overview: Optional free-text context from the user.
    """
    system_prompt = f"""You are a content architect specializing in Generative Engine Optimization (GEO/LLMO).
Design articles that retrieval-augmented generation (RAG) systems and large language models will cite first.

## CORE PRINCIPLES
1. **Chunking-friendly**: every paragraph carries meaning on its own, without surrounding context
2. **Semantic clarity**: replace pronouns with concrete nouns
3. **API-style structure**: each heading is a query endpoint; the text directly below answers it completely
4. **Self-contained terminology**: define technical terms at first use within each section

{EEAT_PRINCIPLES}

## MACHINE-FRIENDLY SENTENCES
- Clear subjects and predicates, minimal passive voice
- One idea per sentence
- Structured information: lists, tables, step-by-step procedures

Every section should carry enough authority that an AI judges it a trustworthy source worth citing."""

    outline = "\n".join(f"{i + 1}. {s}" for i, s in enumerate(ARTICLE_OUTLINE[:ARTICLE_SECTION_COUNT]))
    user_prompt = _join(
        "## ARTICLE BRIEF",
        f"Title: {title}",
        f"Target keyword: {keyword}",
        _context_line("Summary", description),
        _context_line("Context", overview),
        "",
        f"""## MISSION
Using the information above, write an authoritative article that RAG systems will cite first.

## STRUCTURE ({ARTICLE_SECTION_COUNT} sections, each 150-250 words plus subsections)
{outline}

Each section must work as an independent answer:
- the heading is phrased as an answer to a clear query
- the body is understandable without any other section
- technical terms are defined again inside each section""",
        "",
        _language_rule(),
        JSON_ONLY_RULE,
        "",
        json.dumps(
            {
                "title": "Article title",
                "sections": [
                    {
                        "heading": "Clear, searchable heading",
                        "content": "Self-contained body text including term definitions",
                        "subheadings": [
                            {
                                "title": "Specific subheading",
                                "content": "Detailed explanation focused on numbers and examples",
                            }
                        ],
                    }
                ],
            },
            indent=2,
        ),
        "",
        f'REQUIRED: mention the keyword "{keyword}" naturally 2-3 times in every section and cover the related technical vocabulary.',
    )
    return system_prompt, user_prompt


# ── SEO metadata ──────────────────────────────────────────────────────────


def build_seo_prompts(
    title: str,
    keyword: str,
    content: Optional[str] = None,
    description: Optional[str] = None,
    base_url: Optional[str] = None,
    today: Optional[date] = None,
) -> tuple[str, str]:
    """Prompt pair for page metadata, social cards and schema.org data.

    Only the first ``SEO_CONTENT_EXCERPT_CHARS`` characters of ``content`` are
    included.
    """
    title_min, title_max = SEO_TITLE_LENGTH
    desc_min, desc_max = SEO_DESCRIPTION_LENGTH
    stamp = (today or date.today()).isoformat()
    canonical = f"{base_url.rstrip('/')}/article-slug" if base_url else "https://example.com/article-slug"

    system_prompt = f"""You are an expert in search engine optimization (SEO) and Large Language Model Optimization (LLMO).
Generate comprehensive metadata for the article, optimized for both search engines and generative AI.

## STRATEGY
1. **Classic SEO**: ranking in Google, Bing and other search engines
2. **LLMO/GEO**: being quoted by ChatGPT, Claude, Gemini and other assistants
3. **Hybrid**: one set of metadata that serves both

{EEAT_PRINCIPLES}

## MODERN SEO PRACTICE
- Title tag: {title_min}-{title_max} characters, keyword near the front
- Meta description: {desc_min}-{desc_max} characters with a compelling call to action
- Open Graph metadata for social sharing
- schema.org Article structured data"""

    excerpt = f"{content[:SEO_CONTENT_EXCERPT_CHARS]}..." if content else ""
    example = {
        "title": f"SEO-optimized page title ({title_min}-{title_max} characters)",
        "description": f"Compelling meta description ({desc_min}-{desc_max} characters, with a CTA)",
        "keywords": ["main keyword", "related keyword 1", "related keyword 2", "long-tail keyword"],
        "ogTitle": "Title for social sharing (Open Graph)",
        "ogDescription": "Description for social sharing (Open Graph)",
        "twitterTitle": "Title for Twitter Cards",
        "twitterDescription": "Description for Twitter Cards",
        "metaRobots": "index, follow",
        "canonicalUrl": canonical,
        "structuredData": {
            "type": "Article",
            "name": "Article title",
            "description": "Detailed article description",
            "author": AUTHOR_NAME,
            "datePublished": stamp,
            "dateModified": stamp,
            "keywords": ["keyword list"],
        },
    }

    user_prompt = _join(
        "## CONTENT",
        f"Title: {title}",
        f"Main keyword: {keyword}",
        _context_line("Summary", description),
        _context_line("Article content (excerpt)", excerpt),
        _context_line("Base URL", base_url),
        "",
        f"""## TASK
Generate metadata for the article above that satisfies:
1. **Classic SEO**: natural keyword placement (no stuffing), wording that earns the click
2. **LLMO/GEO**: clear, authoritative phrasing that AI systems can quote
3. **Coverage**: HTML meta tags, Open Graph, Twitter Cards, schema.org structured data

Respect the length limits strictly (title: {title_min}-{title_max} characters, description: {desc_min}-{desc_max} characters).""",
        "",
        _language_rule(),
        JSON_ONLY_RULE,
        "",
        json.dumps(example, indent=2, ensure_ascii=False),
        "",
        f"""## QUALITY CHECK
- Is the keyword "{keyword}" placed naturally?
- Is every field within its length limit?
- Does the wording make users want to click?
- Does it signal the authority that makes an AI want to cite it?""",
    )
    return system_prompt, user_prompt
