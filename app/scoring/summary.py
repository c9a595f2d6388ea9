from __future__ import annotations

import re

from app.schemas.ats import SectionScore
from app.schemas.resume import Resume
from app.scoring.issues import IssueCollector
from app.scoring.sections import ATSSection
from app.scoring.text import has_metric, word_count

_FIRST_PERSON_RE = re.compile(r"\b(?:I|[Mm]e|[Mm]y|[Mm]yself)\b")
_MIN_WORDS = 20
_MAX_WORDS = 80
_SUBSTANCE_CHARS = 50


def score_professional_summary(resume: Resume) -> SectionScore:
    issues = IssueCollector(ATSSection.PROFESSIONAL_SUMMARY)
    summary = resume.summary.strip()
    if not summary:
        issues.add(
            "s-missing",
            "warning",
            "No professional summary",
            "A summary is the first block ATS scans for keywords and gives recruiters a quick overview.",
            fix="Generate a professional summary",
        )
        return issues.finish(0)

    score = 0
    words = word_count(summary)
    if words < _MIN_WORDS:
        issues.add(
            "s-short",
            "warning",
            "Summary too short",
            f"Only {words} words. Keyword matching works best with 30-60 words.",
            fix="Expand summary to 30-60 words",
        )
        score += 1
    elif words > _MAX_WORDS:
        issues.add(
            "s-long",
            "suggestion",
            "Summary is too long",
            f"{words} words. Keep it under 60 words for maximum impact.",
            fix="Condense summary to under 60 words",
        )
        score += 3
    else:
        score += 4

    if _FIRST_PERSON_RE.search(summary):
        issues.add(
            "s-pronoun",
            "warning",
            "First-person pronouns detected",
            "Summaries use implied first person: 'Managed a team of 15 engineers', not 'I managed a team'.",
            fix="Remove first-person pronouns",
        )
    else:
        score += 2

    if has_metric(summary):
        score += 2
    else:
        issues.add(
            "s-metrics",
            "suggestion",
            "No quantified results in summary",
            "Figures like '8+ years' or 'managed $2M budget' make the summary more compelling.",
        )
        score += 1

    if len(summary) > _SUBSTANCE_CHARS:
        score += 2

    return issues.finish(score)
