from __future__ import annotations

from typing import Iterable

from app.schemas.ats import ATSScore, SectionScore
from app.scoring.issues import count_by_severity, round_half_up, sort_issues_by_severity
from app.scoring.sections import PASSING_SCORE


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def build_summary(overall: int, critical: int, warnings: int) -> str:
    criticals = _plural(critical, "critical issue")
    if overall >= 90:
        return (
            f"Excellent! Scored {overall}/100 with {criticals}. "
            "Your resume is highly optimized and should pass most automated screening filters."
        )
    if overall >= 80:
        return (
            f"Very good. Scored {overall}/100 with {criticals}. "
            "Focus on the suggestions below to reach 90+."
        )
    if overall >= PASSING_SCORE:
        return (
            f"Decent, but needs work. Scored {overall}/100 with {criticals} and "
            f"{_plural(warnings, 'warning')} worth addressing."
        )
    if overall >= 50:
        return (
            f"Needs significant improvement. Scored {overall}/100 with {criticals} and "
            f"{_plural(warnings, 'warning')}. Address critical issues first."
        )
    return (
        f"Major ATS compatibility problems. Scored {overall}/100 with {criticals}; "
        "fix them before applying or the resume will likely be auto-rejected."
    )


def compose_ats_score(sections: Iterable[SectionScore]) -> ATSScore:
    section_list = list(sections)
    total = sum(section.score for section in section_list)
    overall = max(0, min(100, round_half_up(total)))

    issues = sort_issues_by_severity([issue for section in section_list for issue in section.issues])
    counts = count_by_severity(issues)

    return ATSScore(
        overall=overall,
        passes_ats=overall >= PASSING_SCORE,
        summary=build_summary(overall, counts["critical"], counts["warning"]),
        issues=issues,
        sections=section_list,
    )
