from __future__ import annotations

from enum import Enum

PASSING_SCORE = 70
TOTAL_POINTS = 100


class ATSSection(str, Enum):
    CONTACT_INFO = "Contact Info"
    PROFESSIONAL_SUMMARY = "Professional Summary"
    WORK_EXPERIENCE = "Work Experience"
    EDUCATION = "Education"
    SKILLS = "Skills"
    FORMATTING = "Formatting"
    CONTENT_QUALITY = "Content Quality"


SECTION_MAX_SCORES: dict[ATSSection, int] = {
    ATSSection.CONTACT_INFO: 10,
    ATSSection.PROFESSIONAL_SUMMARY: 10,
    ATSSection.WORK_EXPERIENCE: 30,
    ATSSection.EDUCATION: 10,
    ATSSection.SKILLS: 15,
    ATSSection.FORMATTING: 10,
    ATSSection.CONTENT_QUALITY: 15,
}


def section_max(section: ATSSection) -> int:
    return SECTION_MAX_SCORES[section]


def parse_section(value: str) -> ATSSection | None:
    """Resolve a section from its display name or enum key, case-insensitively."""
    cleaned = (value or "").strip().lower()
    if not cleaned:
        return None
    for section in ATSSection:
        if cleaned in {section.value.lower(), section.name.lower()}:
            return section
    aliases = {"summary": ATSSection.PROFESSIONAL_SUMMARY, "experience": ATSSection.WORK_EXPERIENCE, "contact": ATSSection.CONTACT_INFO}
    return aliases.get(cleaned)


if set(SECTION_MAX_SCORES) != set(ATSSection):
    raise RuntimeError("Every ATS section needs a fixed maximum score.")

if sum(SECTION_MAX_SCORES.values()) != TOTAL_POINTS:
    raise RuntimeError(f"ATS section maxima must sum to {TOTAL_POINTS}.")
