from __future__ import annotations

import re

from app.schemas.ats import SectionScore
from app.schemas.resume import Resume
from app.scoring.issues import IssueCollector
from app.scoring.sections import ATSSection

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_NAME_SPECIAL_CHARS_RE = re.compile(r"[<>{}\[\]\\/|@#$%^&*()+=~`]")
_LINKEDIN_PROFILE_RE = re.compile(r"linkedin\.com/in/", re.IGNORECASE)
_PHONE_MIN_DIGITS = 7
_PHONE_MAX_DIGITS = 15


def _phone_digits(phone: str) -> int:
    return sum(1 for char in phone if char.isdigit())


def score_contact_info(resume: Resume) -> SectionScore:
    header = resume.header
    issues = IssueCollector(ATSSection.CONTACT_INFO)
    score = 0

    name = header.name.strip()
    if not name:
        issues.add(
            "h-name",
            "critical",
            "Missing name",
            "ATS systems require a full name to create a candidate profile.",
            fix="Add your full legal name",
        )
    else:
        score += 3
        if name.upper() == name and len(name) > 3 and any(char.isalpha() for char in name):
            issues.add(
                "h-name-case",
                "warning",
                "Name is ALL CAPS",
                "Some parsers misread ALL CAPS names. Use Title Case instead.",
                fix="Convert name to Title Case",
            )
            score -= 1
        if _NAME_SPECIAL_CHARS_RE.search(name):
            issues.add(
                "h-name-chars",
                "warning",
                "Special characters in name",
                "Special characters may corrupt your name in ATS databases.",
                fix="Remove special characters from your name",
            )
            score -= 1

    email = header.email.strip()
    if not email:
        issues.add(
            "h-email",
            "critical",
            "Missing email address",
            "Without an email, recruiters cannot contact you and the application is flagged as incomplete.",
            fix="Add a professional email address",
        )
    elif not _EMAIL_RE.match(email):
        issues.add(
            "h-email-fmt",
            "critical",
            "Invalid email format",
            f"'{email}' is not a valid address. ATS may reject improperly formatted emails.",
            fix="Use the format name@domain.com",
        )
    else:
        score += 2

    phone = header.phone.strip()
    if not phone:
        issues.add(
            "h-phone",
            "warning",
            "Missing phone number",
            "Most recruiters expect a phone number for initial screening calls.",
            fix="Add a phone number with country code",
        )
    elif not _PHONE_MIN_DIGITS <= _phone_digits(phone) <= _PHONE_MAX_DIGITS:
        issues.add(
            "h-phone-fmt",
            "warning",
            "Invalid phone number",
            f"'{phone}' does not look like a dialable number.",
            fix="Use a full phone number, e.g. +1 (555) 123-4567",
        )
        score += 1
    else:
        score += 2

    if not header.location.strip():
        issues.add(
            "h-location",
            "warning",
            "Missing location",
            "Location filters will exclude your resume. Add 'City, State' or 'Remote'.",
            fix="Add your city and state, or 'Remote'",
        )
    else:
        score += 1

    if not header.title.strip():
        issues.add(
            "h-title",
            "suggestion",
            "No professional title",
            "A target job title helps ATS match you to relevant positions.",
            fix="Add a target job title under your name",
        )
    else:
        score += 1

    linkedin = header.linkedin.strip()
    if not linkedin:
        issues.add(
            "h-linkedin",
            "suggestion",
            "No LinkedIn URL",
            "LinkedIn profiles help recruiters verify your background.",
            fix="Add your LinkedIn profile URL (linkedin.com/in/your-name)",
        )
    else:
        score += 1
        if not _LINKEDIN_PROFILE_RE.search(linkedin):
            issues.add(
                "h-linkedin-fmt",
                "suggestion",
                "Non-standard LinkedIn URL",
                "Use the standard format: linkedin.com/in/your-name",
                fix="Use linkedin.com/in/your-name",
            )

    return issues.finish(score)
