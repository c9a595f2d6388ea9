from __future__ import annotations

from app.schemas.ats import SectionScore
from app.schemas.resume import Resume
from app.scoring.issues import IssueCollector
from app.scoring.sections import ATSSection
from app.scoring.text import non_blank, word_count

# (upper bound exclusive, points); counts above the last bound score _OVERFULL_POINTS.
_COUNT_BANDS: tuple[tuple[int, int], ...] = ((5, 2), (8, 4), (12, 6), (26, 8))
_OVERFULL_POINTS = 6
_VERBOSE_WORDS = 4


def _count_points(count: int) -> int:
    for bound, points in _COUNT_BANDS:
        if count < bound:
            return points
    return _OVERFULL_POINTS


def score_skills(resume: Resume) -> SectionScore:
    issues = IssueCollector(ATSSection.SKILLS)
    all_skills = resume.all_skills()
    if not all_skills:
        issues.add(
            "sk-missing",
            "critical",
            "No skills listed",
            "The skills section is where ATS performs primary keyword matching. "
            "Without it the resume fails keyword matching for almost every listing.",
            fix="Add a skills section grouped by category",
        )
        return issues.finish(0)

    count = len(all_skills)
    score = _count_points(count)
    if count < 5:
        issues.add(
            "sk-few",
            "warning",
            f"Only {count} skills listed",
            "Competitive resumes list 10-20 relevant skills.",
            fix="Add more relevant skills",
        )
    elif count < 8:
        issues.add(
            "sk-more",
            "suggestion",
            f"{count} skills, could add more",
            "Adding 5-10 more relevant skills will improve match rates.",
        )
    elif count < 12:
        issues.add(
            "sk-good",
            "suggestion",
            "Good skill count, consider adding more",
            f"{count} skills is solid. 15-20 is optimal for keyword coverage.",
        )
    elif count > 25:
        issues.add(
            "sk-too-many",
            "suggestion",
            f"{count} skills may be too many",
            "Focus on the 15-20 most relevant skills.",
        )

    categories = [key for key, values in resume.skills.items() if non_blank(values)]
    if len(categories) < 2:
        issues.add(
            "sk-cats",
            "suggestion",
            "Skills not categorized",
            "Grouping skills (Languages, Tools, Frameworks) helps parsers categorize them.",
            fix="Group skills into categories such as Languages, Tools, Frameworks",
        )
        score += 1
    elif len(categories) < 3:
        score += 3
    else:
        score += 4

    verbose = [skill for skill in all_skills if word_count(skill) > _VERBOSE_WORDS]
    if verbose:
        issues.add(
            "sk-long",
            "suggestion",
            "Some skills are too verbose",
            f"'{verbose[0].strip()}' reads like a phrase. Keep skills to 1-3 words.",
            fix="Shorten skills to 1-3 words each",
        )
        score += 1
    else:
        score += 3

    return issues.finish(score, notes=f"{count} skills in {len(categories)} categories")
