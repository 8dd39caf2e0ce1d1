#!/usr/bin/env python3
"""Generate an LLMO-optimized article from a keyword and export it.

Usage:
    python generate.py --keyword "remote work"                 # Titles -> article -> SEO -> md + html
    python generate.py --keyword "remote work" --titles-only   # Only list title ideas
    python generate.py --keyword "remote work" --pick 3        # Write the 3rd title idea
    python generate.py --keyword "remote work" --no-seo --format markdown
    python generate.py --keyword "remote work" --base-url https://example.com/blog
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import anthropic

from llmo_content.config import ARTICLE_OUTPUT_DIR, configure_logging
from llmo_content.errors import InvalidInput, LlmoError
from llmo_content.export import FORMATS, ExportOptions, export_article, export_filename
from llmo_content.models import Article, TitleCandidate
from llmo_content.pipeline import create_client, generate_article, generate_titles
from llmo_content.validation import format_quality_report, validate_article


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate LLMO-optimized blog articles with Claude")
    parser.add_argument("--keyword", required=True, help="Target keyword")
    parser.add_argument("--overview", default="", help="Optional context for the title and article prompts")
    parser.add_argument("--pick", type=int, default=1, help="Which title idea to write (1-based)")
    parser.add_argument("--titles-only", action="store_true", help="List title ideas and stop")
    parser.add_argument("--no-seo", action="store_true", help="Skip the SEO metadata step")
    parser.add_argument("--base-url", default="", help="Site base URL for the canonical URL suggestion")
    parser.add_argument(
        "--format",
        choices=[*FORMATS, "both"],
        default="both",
        help="Export format (default: both)",
    )
    parser.add_argument("--no-styles", action="store_true", help="Omit the inline stylesheet from HTML")
    parser.add_argument("--output-dir", type=Path, default=ARTICLE_OUTPUT_DIR, help="Where to write exports")
    return parser.parse_args(argv)


def print_titles(titles: list[TitleCandidate]) -> None:
    for i, t in enumerate(titles, 1):
        print(f"  {i:>2}. {t.title}")
        if t.description:
            print(f"      {t.description}")


def choose_title(titles: list[TitleCandidate], pick: int) -> TitleCandidate:
    if not 1 <= pick <= len(titles):
        raise InvalidInput(f"--pick must be between 1 and {len(titles)}")
    return titles[pick - 1]


def save_outputs(
    article: Article,
    formats: list[str],
    output_dir: Path,
    include_styles: bool,
    quality: dict,
) -> list[Path]:
    """Write exports plus the article JSON and quality results."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    for fmt in formats:
        filename = export_filename(article.title, fmt)
        document = export_article(
            article,
            fmt,
            ExportOptions(include_seo=True, include_styles=include_styles, filename=filename),
        )
        path = output_dir / document.filename
        path.write_text(document.content, encoding="utf-8")
        written.append(path)

    stem = Path(export_filename(article.title, "markdown")).stem
    article_path = output_dir / f"{stem}.json"
    article_path.write_text(json.dumps(article.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    written.append(article_path)

    quality_path = output_dir / f"{stem}_quality.json"
    quality_path.write_text(json.dumps(quality, indent=2, ensure_ascii=False), encoding="utf-8")
    written.append(quality_path)
    return written


def run(args: argparse.Namespace, client) -> int:
    print(f"\n{'='*60}")
    print(f"Keyword: {args.keyword}")
    print(f"{'='*60}")

    # ── 1. Titles ──────────────────────────────────────────────────────
    print("  -> Generating title ideas...")
    titles = generate_titles(client, keyword=args.keyword, overview=args.overview or None)
    print(f"  OK {len(titles)} titles")
    print_titles(titles)
    if args.titles_only:
        return 0

    chosen = choose_title(titles, args.pick)
    print(f"\n  Writing: {chosen.title}")

    # ── 2. Article (+ SEO metadata) ────────────────────────────────────
    print("  -> Generating article" + ("" if args.no_seo else " and SEO metadata") + "...")
    article = generate_article(
        client,
        title=chosen.title,
        keyword=args.keyword,
        description=chosen.description or None,
        overview=args.overview or None,
        generate_seo=not args.no_seo,
        base_url=args.base_url or None,
    )
    print(f"  OK {len(article.sections)} sections, {article.word_count()} words")
    if not args.no_seo and article.seo_metadata is None:
        print("  !! SEO metadata could not be generated; exporting without it")

    # ── 3. Quality report ──────────────────────────────────────────────
    quality = validate_article(article, keyword=args.keyword)
    print(f"\n{format_quality_report(quality, article.title)}")

    # ── 4. Export ──────────────────────────────────────────────────────
    formats = list(FORMATS) if args.format == "both" else [args.format]
    for path in save_outputs(article, formats, args.output_dir, not args.no_styles, quality):
        print(f"  OK Saved {path}")
    return 0


def main(argv: list[str] | None = None, client=None) -> int:
    args = parse_args(argv)
    configure_logging()
    try:
        client = client if client is not None else create_client()
        return run(args, client)
    except (LlmoError, anthropic.APIError) as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
