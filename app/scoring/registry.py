from __future__ import annotations

from typing import Callable

from app.schemas.ats import SectionScore
from app.schemas.resume import Resume
from app.scoring.contact import score_contact_info
from app.scoring.content_quality import score_content_quality
from app.scoring.education import score_education
from app.scoring.experience import score_work_experience
from app.scoring.formatting import score_formatting
from app.scoring.sections import ATSSection
from app.scoring.skills import score_skills
from app.scoring.summary import score_professional_summary

SectionScorer = Callable[[Resume], SectionScore]

SECTION_SCORERS: dict[ATSSection, SectionScorer] = {
    ATSSection.CONTACT_INFO: score_contact_info,
    ATSSection.PROFESSIONAL_SUMMARY: score_professional_summary,
    ATSSection.WORK_EXPERIENCE: score_work_experience,
    ATSSection.EDUCATION: score_education,
    ATSSection.SKILLS: score_skills,
    ATSSection.FORMATTING: score_formatting,
    ATSSection.CONTENT_QUALITY: score_content_quality,
}

if tuple(SECTION_SCORERS) != tuple(ATSSection):
    raise RuntimeError("Section scorers must cover every ATS section in declaration order.")


def score_sections(resume: Resume) -> list[SectionScore]:
    """Run every section scorer in fixed order."""
    return [scorer(resume) for scorer in SECTION_SCORERS.values()]
