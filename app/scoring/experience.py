from __future__ import annotations

import re

from app.schemas.ats import SectionScore
from app.schemas.resume import ExperienceEntry, Resume
from app.scoring.issues import IssueCollector, round_half_up
from app.scoring.sections import ATSSection
from app.scoring.text import (
    DATE_FORMAT_LABELS,
    classify_date,
    has_metric,
    majority_date_format,
    non_blank,
    ratio,
    resume_dates,
    starts_with_action_verb,
    word_count,
)

_CURRENT_RE = re.compile(r"present|current", re.IGNORECASE)
_BASE_POINTS = 5
_ORDER_POINTS = 2
_ROLE_POOL = 23
_ROLE_MAX = 10


def _entry_points(
    issues: IssueCollector,
    entry: ExperienceEntry,
    idx: int,
    majority_format: str | None,
) -> float:
    prefix = f"e{idx}"
    label = entry.role.strip() or f"Experience {idx + 1}"
    points = 0.0

    if not entry.role.strip():
        issues.add(
            f"{prefix}-role",
            "critical",
            f"Experience {idx + 1}: Missing job title",
            "Job titles are a primary matching criterion. Without one this role won't match any listing.",
            fix="Add the job title for this role",
        )
    else:
        points += 2

    start, end = entry.start_date.strip(), entry.end_date.strip()
    present = [value for value in (start, end) if value]
    if len(present) < 2:
        issues.add(
            f"{prefix}-dates",
            "warning",
            f"{label}: Missing dates",
            "Years of experience are calculated from dates; this role won't count toward requirements.",
            fix="Add start and end dates",
        )
    formats = [classify_date(value) for value in present]
    if "unknown" in formats:
        issues.add(
            f"{prefix}-date-fmt",
            "suggestion",
            f"{label}: Non-standard date format",
            "Use 'Month Year' (e.g. 'January 2023' or 'Jan 2023') for best compatibility.",
            fix="Rewrite dates as 'Mon YYYY'",
        )
        if len(present) == 2:
            points += 0.5
    elif majority_format and any(kind not in (majority_format, "current") for kind in formats):
        expected = DATE_FORMAT_LABELS[majority_format]
        issues.add(
            f"{prefix}-date-mix",
            "warning",
            f"{label}: Inconsistent date format",
            f"'{' - '.join(present)}' differs from the {expected} format used elsewhere in the resume.",
            fix=f"Use {expected} for every date",
        )
        if len(present) == 2:
            points += 0.5
    elif len(present) == 2:
        points += 1

    bullets = non_blank(entry.bullets)
    if not bullets:
        issues.add(
            f"{prefix}-bullets",
            "critical",
            f"{label}: No bullet points",
            "Keyword matching relies on bullet content. This role contributes zero keywords.",
            fix="Add 3-6 bullet points with achievements",
        )
        return points
    if len(bullets) < 3:
        issues.add(
            f"{prefix}-few-bullets",
            "warning",
            f"{label}: Only {len(bullets)} bullet(s)",
            "3-6 bullets per role gives parsers enough keyword matching opportunities.",
            fix="Add more bullet points",
        )
        points += 1
    elif len(bullets) > 8:
        issues.add(
            f"{prefix}-many-bullets",
            "suggestion",
            f"{label}: Too many bullets ({len(bullets)})",
            "Keep 4-6 bullets per role. Long lists dilute impact.",
            fix="Trim to the 6 strongest bullets",
        )
        points += 2
    else:
        points += 3

    action_count = sum(1 for bullet in bullets if starts_with_action_verb(bullet))
    action_ratio = ratio(action_count, len(bullets))
    if action_ratio >= 0.75:
        points += 2
    elif action_ratio >= 0.5:
        points += 1
        issues.add(
            f"{prefix}-verbs",
            "warning",
            f"{label}: {len(bullets) - action_count} bullets lack strong action verbs",
            "Start every bullet with a strong action verb (Led, Developed, Optimized, Implemented).",
            fix="Rewrite bullets to start with strong action verbs",
        )
    else:
        issues.add(
            f"{prefix}-verbs",
            "warning",
            f"{label}: Most bullets lack action verbs",
            f"Only {action_count}/{len(bullets)} bullets start with a strong action verb.",
            fix="Rewrite bullets to start with strong action verbs",
        )

    metric_count = sum(1 for bullet in bullets if has_metric(bullet))
    if metric_count == 0:
        issues.add(
            f"{prefix}-metrics",
            "warning",
            f"{label}: No quantified achievements",
            "Add percentages, amounts, team sizes, or counts to show impact.",
            fix="Add quantifiable metrics to bullets",
        )
    elif ratio(metric_count, len(bullets)) < 0.4:
        issues.add(
            f"{prefix}-few-metrics",
            "suggestion",
            f"{label}: Only {metric_count}/{len(bullets)} bullets have metrics",
            "Aim for at least half of the bullets to include quantifiable results.",
        )
        points += 1
    else:
        points += 2

    for b_idx, bullet in enumerate(bullets):
        words = word_count(bullet)
        if words > 30:
            issues.add(
                f"{prefix}-b{b_idx}-long",
                "suggestion",
                f"{label}: Bullet {b_idx + 1} too long",
                f"{words} words. Long bullets may be truncated; keep under 25 words.",
                fix="Shorten bullet to under 25 words",
            )
        elif words < 5:
            issues.add(
                f"{prefix}-b{b_idx}-short",
                "suggestion",
                f"{label}: Bullet {b_idx + 1} too brief",
                f"Only {words} words. Expand with specific achievements and context.",
                fix="Expand bullet with more detail",
            )

    lowered = [bullet.strip().lower() for bullet in bullets]
    if len(set(lowered)) < len(lowered):
        issues.add(
            f"{prefix}-dup",
            "warning",
            f"{label}: Duplicate bullet points",
            "Duplicate content wastes keyword space.",
            fix="Remove duplicate bullets",
        )

    return points


def score_work_experience(resume: Resume) -> SectionScore:
    issues = IssueCollector(ATSSection.WORK_EXPERIENCE)
    entries = [entry for entry in resume.experience if entry.company_or_client.strip()]
    if not entries:
        issues.add(
            "e-missing",
            "critical",
            "No work experience listed",
            "Work experience is the most heavily weighted section. Without it the resume scores extremely low.",
            fix="Add your work history with employer names",
        )
        return issues.finish(0)

    score = _BASE_POINTS

    end_dates = non_blank(entry.end_date for entry in entries)
    if len(end_dates) > 1 and _CURRENT_RE.search(end_dates[-1]) and not _CURRENT_RE.search(end_dates[0]):
        issues.add(
            "e-order",
            "warning",
            "Not in reverse chronological order",
            "Recruiters and parsers expect the most recent role first.",
            fix="Reorder roles from newest to oldest",
        )
    else:
        score += _ORDER_POINTS

    majority_format = majority_date_format(resume_dates(resume))
    earned = sum(_entry_points(issues, entry, idx, majority_format) for idx, entry in enumerate(entries))
    score += round_half_up(earned / (_ROLE_MAX * len(entries)) * _ROLE_POOL)

    return issues.finish(score, notes=f"{len(entries)} role(s) scored")
