"""Grading and human-readable report formatting for quality check results."""

from llmo_content.config import ARTICLE_SECTION_COUNT, SEO_DESCRIPTION_LENGTH, SEO_TITLE_LENGTH


def compute_grade(issues: list, warnings: list) -> str:
    """Compute article grade from issues and warnings.

    A+ = no issues, no warnings
    A  = no issues, some warnings
    B  = 1 issue
    C  = 2 issues
    D  = 3+ issues
    """
    if not issues:
        return "A" if warnings else "A+"
    if len(issues) == 1:
        return "B"
    if len(issues) == 2:
        return "C"
    return "D"


def format_quality_report(results: dict, title: str) -> str:
    """Format quality check results as a readable CLI report."""

    def _status(ok: bool) -> str:
        return "PASS" if ok else "FAIL"

    wc = results["word_count"]
    sc = results["section_count"]
    subs = results["subsections"]
    kw = results.get("keyword_coverage", {})
    seo = results.get("seo_lengths", {})

    lines = [
        f"{'='*60}",
        f"QUALITY REPORT: {title}",
        f"{'='*60}",
        f"Grade: {results['grade']}",
        "",
        f"  [{_status(wc['pass'])}] Word count:    {wc['count']}",
        f"  [{_status(sc['pass'])}] Sections:      {sc['count']}  (target: {ARTICLE_SECTION_COUNT})",
        f"  [{_status(subs['pass'])}] Subsections:   {subs['total_subsections']} across {subs['sections_with_subsections']} sections",
    ]

    if kw:
        lines.append(
            f"  [{_status(kw['pass'])}] Keyword '{kw['keyword']}': in {kw['found']}/{kw['total']} sections"
        )

    if seo:
        lines.append(
            f"  [{_status(seo['title_pass'])}] SEO title:     {seo['title_length']} chars  (target: {SEO_TITLE_LENGTH[0]}-{SEO_TITLE_LENGTH[1]})"
        )
        lines.append(
            f"  [{_status(seo['description_pass'])}] Description:   {seo['description_length']} chars  (target: {SEO_DESCRIPTION_LENGTH[0]}-{SEO_DESCRIPTION_LENGTH[1]})"
        )
    else:
        lines.append("  [----] SEO metadata:  not generated")

    if results["issues"]:
        lines.append(f"\nISSUES ({len(results['issues'])}):")
        for issue in results["issues"]:
            lines.append(f"  - {issue}")

    if results.get("warnings"):
        lines.append(f"\nWARNINGS ({len(results['warnings'])}):")
        for warning in results["warnings"]:
            lines.append(f"  ~ {warning}")

    if not results["issues"] and not results.get("warnings"):
        lines.append("\nAll checks passed!")

    lines.append(f"{'='*60}")
    return "\n".join(lines)
