from __future__ import annotations

import math

from app.schemas.ats import ATSIssue, IssueSeverity, SectionScore
from app.scoring.sections import ATSSection, section_max

SEVERITY_ORDER: dict[str, int] = {"critical": 0, "warning": 1, "suggestion": 2}


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative points (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


class IssueCollector:
    """Ordered findings for a single section, turned into a SectionScore at the end."""

    def __init__(self, section: ATSSection) -> None:
        self.section = section
        self.issues: list[ATSIssue] = []

    def add(
        self,
        issue_id: str,
        severity: IssueSeverity,
        title: str,
        description: str = "",
        *,
        fix: str | None = None,
    ) -> None:
        self.issues.append(
            ATSIssue(
                id=issue_id,
                section=self.section,
                severity=severity,
                title=title,
                description=description,
                fix=fix,
            )
        )

    def finish(self, score: float, *, notes: str | None = None) -> SectionScore:
        max_score = section_max(self.section)
        bounded = max(0, min(max_score, round_half_up(score)))
        return SectionScore(
            section=self.section,
            score=bounded,
            max_score=max_score,
            issues=list(self.issues),
            notes=notes,
        )


def sort_issues_by_severity(issues: list[ATSIssue]) -> list[ATSIssue]:
    return sorted(issues, key=lambda issue: SEVERITY_ORDER.get(issue.severity, len(SEVERITY_ORDER)))


def count_by_severity(issues: list[ATSIssue]) -> dict[str, int]:
    counts = {severity: 0 for severity in SEVERITY_ORDER}
    for issue in issues:
        counts[issue.severity] = counts.get(issue.severity, 0) + 1
    return counts
