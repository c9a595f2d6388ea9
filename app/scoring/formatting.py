from __future__ import annotations

from app.schemas.ats import SectionScore
from app.schemas.resume import Resume
from app.scoring.issues import IssueCollector, round_half_up
from app.scoring.sections import ATSSection
from app.scoring.text import has_control_chars, has_emoji, has_tab, resume_text_parts, word_count

_ESSENTIAL_POINTS = 3


def _missing_essential_sections(resume: Resume) -> list[str]:
    missing: list[str] = []
    if not (resume.header.name.strip() and resume.header.email.strip()):
        missing.append("Contact Info (name + email)")
    if not resume.summary.strip():
        missing.append("Professional Summary")
    if not any(entry.company_or_client.strip() for entry in resume.experience):
        missing.append("Work Experience")
    if not any(entry.institution.strip() for entry in resume.education):
        missing.append("Education")
    if not resume.all_skills():
        missing.append("Skills")
    return missing


def score_formatting(resume: Resume) -> SectionScore:
    issues = IssueCollector(ATSSection.FORMATTING)
    parts = resume_text_parts(resume)
    all_text = " ".join(parts)
    total_words = word_count(all_text)

    if total_words == 0:
        issues.add(
            "f-empty",
            "critical",
            "No parseable content",
            "The resume has no summary, experience, education, skills, or projects to parse.",
            fix="Fill in the core resume sections",
        )
        return issues.finish(0)

    score = 0
    if has_emoji(all_text):
        issues.add(
            "f-emoji",
            "warning",
            "Emojis detected in resume",
            "Most ATS parsers cannot read emojis and will corrupt the surrounding text.",
            fix="Remove all emojis from resume content",
        )
    else:
        score += 2

    # one finding per resume, however many characters are affected
    tabbed = has_tab(all_text)
    controlled = has_control_chars(all_text)
    if tabbed:
        issues.add(
            "f-tabs",
            "warning",
            "Tab characters detected",
            "Tabs cause parsing errors and misaligned fields.",
            fix="Replace tab characters with single spaces",
        )
    if controlled:
        issues.add(
            "f-control",
            "warning",
            "Control characters detected",
            "Invisible control characters, often pasted from PDFs, break ATS text extraction.",
            fix="Remove invisible control characters",
        )
    if not tabbed and not controlled:
        score += 2

    if total_words < 100:
        issues.add(
            "f-short",
            "warning",
            "Resume is too sparse",
            f"Only ~{total_words} words. Competitive resumes have 300-700 words.",
        )
    elif total_words < 150:
        issues.add(
            "f-brief",
            "suggestion",
            "Resume could use more content",
            f"~{total_words} words. Aim for 400-600 words on a single page.",
        )
        score += 2
    elif total_words > 1200:
        issues.add(
            "f-long",
            "suggestion",
            "Resume may be too long",
            f"~{total_words} words. Aim for 1-2 pages (400-800 words).",
        )
        score += 2
    else:
        score += 3

    missing = _missing_essential_sections(resume)
    if missing:
        issues.add(
            "f-sections",
            "warning",
            f"Missing essential sections: {', '.join(missing)}",
            "ATS expects five core sections: Contact Info, Summary, Experience, Education, and Skills.",
            fix=f"Add the missing sections: {', '.join(missing)}",
        )
    present = 5 - len(missing)
    score += round_half_up(present / 5 * _ESSENTIAL_POINTS)

    return issues.finish(score, notes=f"~{total_words} words")
