from __future__ import annotations

import logging
from typing import Any, Iterable

from app.schemas.ats import ATSIssue, ATSScore, KeywordMatch
from app.schemas.resume import coerce_resume
from app.scoring.composer import compose_ats_score
from app.scoring.fix_prompts import build_section_fix_prompt as _build_fix_prompt
from app.scoring.issues import count_by_severity
from app.scoring.keywords import DEFAULT_MAX_KEYWORDS, match_keywords
from app.scoring.registry import score_sections
from app.scoring.sections import ATSSection

logger = logging.getLogger(__name__)


def calculate_ats_score(resume: Any, job_description: str | None = None) -> ATSScore:
    """Score a resume record across the seven fixed sections.

    Anything resume-like is accepted; malformed fields degrade the score instead of
    raising. ``job_description`` is accepted for call-site parity and does not
    change the section scores.
    """
    record = coerce_resume(resume)
    result = compose_ats_score(score_sections(record))
    counts = count_by_severity(result.issues)
    logger.info(
        "ats_score_computed overall=%s passes=%s critical=%s issues=%s with_jd=%s",
        result.overall,
        result.passes_ats,
        counts["critical"],
        len(result.issues),
        bool(job_description and job_description.strip()),
    )
    return result


def match_job_description_keywords(
    resume: Any,
    job_description: str,
    *,
    max_keywords: int = DEFAULT_MAX_KEYWORDS,
) -> list[KeywordMatch]:
    record = coerce_resume(resume)
    matches = match_keywords(record, job_description or "", max_keywords=max_keywords)
    logger.info(
        "ats_keywords_matched matched=%s total=%s jd_len=%s",
        sum(1 for match in matches if match.found),
        len(matches),
        len(job_description or ""),
    )
    return matches


def keyword_coverage(matches: list[KeywordMatch]) -> float:
    if not matches:
        return 0.0
    return round(sum(1 for match in matches if match.found) / len(matches), 4)


def build_section_fix_prompt(
    section: ATSSection,
    resume: Any,
    issues: Iterable[ATSIssue] | None = None,
) -> str:
    """Prompt for rewriting one section.

    When ``issues`` is omitted the resume is scored and that section's own issues are used.
    """
    record = coerce_resume(resume)
    if issues is None:
        result = compose_ats_score(score_sections(record))
        issues = [issue for issue in result.issues if issue.section == section]
    return _build_fix_prompt(section, record, issues)
