from __future__ import annotations

from app.schemas.ats import SectionScore
from app.schemas.resume import Resume
from app.scoring.issues import IssueCollector, round_half_up
from app.scoring.sections import ATSSection

_BASE_POINTS = 3
_DETAIL_POOL = 7


def score_education(resume: Resume) -> SectionScore:
    issues = IssueCollector(ATSSection.EDUCATION)
    entries = [entry for entry in resume.education if entry.institution.strip()]
    if not entries:
        issues.add(
            "ed-missing",
            "warning",
            "No education listed",
            "Many ATS filters screen on education level. Missing education can auto-reject the application.",
            fix="Add your highest degree and institution",
        )
        return issues.finish(0)

    earned = 0
    for idx, entry in enumerate(entries):
        institution = entry.institution.strip()
        if entry.degree.strip():
            earned += 3
        else:
            issues.add(
                f"ed{idx}-degree",
                "warning",
                f"{institution}: Missing degree type",
                "Degree-level filters (Bachelor's, Master's, PhD) can't match without it.",
                fix="Add the degree type",
            )
        if entry.graduation_date.strip():
            earned += 2
        else:
            issues.add(
                f"ed{idx}-date",
                "suggestion",
                f"{institution}: Missing graduation date",
                "Dates help verify degree completion.",
                fix="Add the graduation date",
            )
        if entry.field.strip():
            earned += 2
        else:
            issues.add(
                f"ed{idx}-field",
                "warning",
                f"{institution}: Missing field of study",
                "Some screens filter by major, e.g. 'Computer Science degree required'.",
                fix="Add your field of study",
            )

    # each entry is worth up to _DETAIL_POOL points
    score = _BASE_POINTS + round_half_up(earned / len(entries))
    return issues.finish(score)
