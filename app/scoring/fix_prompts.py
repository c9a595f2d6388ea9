from __future__ import annotations

import json
from typing import Iterable

from app.schemas.ats import ATSIssue
from app.schemas.resume import Resume
from app.scoring.sections import ATSSection

_PROMPT_SKILL_LIMIT = 15


def _issue_lines(issues: Iterable[ATSIssue]) -> str:
    return "\n".join(f"- [{issue.severity.upper()}] {issue.title}: {issue.description}" for issue in issues)


def _employers(resume: Resume) -> list[str]:
    return [entry.company_or_client for entry in resume.experience if entry.company_or_client.strip()]


def _summary_prompt(resume: Resume, issue_list: str) -> str:
    title = resume.header.title.strip() or "Professional"
    skills = ", ".join(resume.all_skills()[:_PROMPT_SKILL_LIMIT])
    return (
        "You are an ATS-optimization expert. Fix this professional summary to resolve these ATS issues:\n\n"
        f"ISSUES:\n{issue_list}\n\n"
        f'CURRENT SUMMARY:\n"{resume.summary}"\n\n'
        f"CONTEXT: {title} with experience at {', '.join(_employers(resume))}. Skills: {skills}.\n\n"
        "RULES: No first-person pronouns. Include metrics. 30-60 words. "
        "Start with years of experience or key strength. Output ONLY the improved summary text, nothing else."
    )


def _experience_prompt(resume: Resume, issue_list: str) -> str:
    blocks = []
    for entry in resume.experience:
        if not entry.company_or_client.strip():
            continue
        bullets = "\n".join(f"- {bullet}" for bullet in entry.bullets)
        blocks.append(f"{entry.role} at {entry.company_or_client}:\n{bullets}")
    return (
        "You are an ATS-optimization expert. Improve these experience bullet points to resolve ATS issues:\n\n"
        f"ISSUES:\n{issue_list}\n\n"
        "EXPERIENCE:\n" + "\n\n".join(blocks) + "\n\n"
        "RULES: Start every bullet with a strong action verb (Led, Developed, Optimized, etc). "
        "Add quantifiable metrics (percentages, numbers, dollar amounts). Keep each bullet under 25 words. "
        'Return ONLY a JSON array of experience objects with "role", "company_or_client", and "bullets" fields.'
    )


def _skills_prompt(resume: Resume, issue_list: str) -> str:
    title = resume.header.title.strip() or "Professional"
    roles = ", ".join(entry.role for entry in resume.experience if entry.company_or_client.strip())
    return (
        "You are an ATS-optimization expert. The skills section has these issues:\n\n"
        f"ISSUES:\n{issue_list}\n\n"
        f"CURRENT SKILLS:\n{json.dumps(resume.skills, indent=2, ensure_ascii=False)}\n\n"
        f"CONTEXT: {title} role. Experience includes: {roles}.\n\n"
        "RULES: Organize into clear categories. Add relevant technical skills based on experience. "
        "Keep skill names concise (1-3 words each). Return ONLY a JSON object with category keys and string array values."
    )


def build_section_fix_prompt(section: ATSSection, resume: Resume, issues: Iterable[ATSIssue]) -> str:
    """LLM prompt asking for a rewrite of one section that resolves the given issues."""
    issue_list = _issue_lines(issues)
    if section is ATSSection.PROFESSIONAL_SUMMARY:
        return _summary_prompt(resume, issue_list)
    if section is ATSSection.WORK_EXPERIENCE:
        return _experience_prompt(resume, issue_list)
    if section is ATSSection.SKILLS:
        return _skills_prompt(resume, issue_list)
    return f"Fix ATS issues for the {section.value} section:\n{issue_list}"
