from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Literal

from app.schemas.resume import Resume

DateFormat = Literal["month_year", "numeric", "year", "current", "unknown"]

DATE_FORMAT_LABELS: dict[str, str] = {
    "month_year": "'Mon YYYY' (e.g. 'Jan 2023')",
    "numeric": "'MM/YYYY' (e.g. '01/2023')",
    "year": "'YYYY' (e.g. '2023')",
}

STRONG_ACTION_VERBS = frozenset(
    {
        "achieved", "accelerated", "administered", "advised", "analyzed", "architected",
        "automated", "built", "championed", "coached", "collaborated", "conducted",
        "configured", "consolidated", "coordinated", "created", "decreased", "delivered",
        "deployed", "designed", "developed", "directed", "drove", "eliminated", "enabled",
        "engineered", "enhanced", "established", "exceeded", "executed", "expanded",
        "facilitated", "formulated", "founded", "generated", "grew", "guided", "identified",
        "implemented", "improved", "increased", "initiated", "innovated", "integrated",
        "introduced", "launched", "led", "maintained", "managed", "maximized", "mentored",
        "migrated", "minimized", "modernized", "negotiated", "optimized", "orchestrated",
        "organized", "overhauled", "oversaw", "partnered", "pioneered", "planned",
        "presented", "produced", "programmed", "propelled", "provided", "published",
        "re-engineered", "realized", "recommended", "reduced", "refactored", "refined",
        "resolved", "restructured", "revamped", "scaled", "secured", "simplified",
        "spearheaded", "standardized", "streamlined", "strengthened", "supervised",
        "surpassed", "tested", "trained", "transformed", "tripled", "unified", "upgraded",
    }
)

_METRIC_RE = re.compile(r"\d|%|[$€£]")
_FIRST_WORD_CLEAN_RE = re.compile(r"[^a-z-]")
_MONTH_YEAR_RE = re.compile(
    r"^(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?|"
    r"sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?,?\s+\d{4}$",
    re.IGNORECASE,
)
_NUMERIC_DATE_RE = re.compile(r"^\d{1,2}/\d{4}$")
_YEAR_RE = re.compile(r"^\d{4}$")
_CURRENT_RE = re.compile(r"^(?:present|current|now)$", re.IGNORECASE)
_EMOJI_RE = re.compile(
    "[\U0001F300-\U0001F5FF\U0001F600-\U0001F64F\U0001F680-\U0001F6FF\U0001F900-\U0001F9FF\u2600-\u26FF]"
)
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def non_blank(values: Iterable[str]) -> list[str]:
    return [value for value in values if value.strip()]


def word_count(text: str) -> int:
    return len(text.split())


def first_word(text: str) -> str:
    parts = text.strip().split()
    if not parts:
        return ""
    return _FIRST_WORD_CLEAN_RE.sub("", parts[0].lower())


def starts_with_action_verb(text: str) -> bool:
    return first_word(text) in STRONG_ACTION_VERBS


def has_metric(text: str) -> bool:
    return bool(_METRIC_RE.search(text))


def has_emoji(text: str) -> bool:
    return bool(_EMOJI_RE.search(text))


def has_tab(text: str) -> bool:
    return "\t" in text


def has_control_chars(text: str) -> bool:
    return bool(_CONTROL_CHARS_RE.search(text))


def ratio(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return part / whole


def classify_date(value: str) -> DateFormat | None:
    cleaned = value.strip()
    if not cleaned:
        return None
    if _CURRENT_RE.match(cleaned):
        return "current"
    if _MONTH_YEAR_RE.match(cleaned):
        return "month_year"
    if _NUMERIC_DATE_RE.match(cleaned):
        return "numeric"
    if _YEAR_RE.match(cleaned):
        return "year"
    return "unknown"


def resume_dates(resume: Resume) -> list[str]:
    dates: list[str] = []
    for entry in resume.experience:
        dates.extend([entry.start_date, entry.end_date])
    dates.extend(entry.graduation_date for entry in resume.education)
    return non_blank(dates)


def majority_date_format(dates: Iterable[str]) -> DateFormat | None:
    """Most common concrete date format; ties go to month_year, then numeric, then year."""
    counts: Counter[str] = Counter()
    for value in dates:
        kind = classify_date(value)
        if kind in DATE_FORMAT_LABELS:
            counts[kind] += 1
    if not counts:
        return None
    best = max(counts.values())
    for kind in DATE_FORMAT_LABELS:
        if counts.get(kind) == best:
            return kind  # type: ignore[return-value]
    return None


def resume_text_parts(resume: Resume) -> list[str]:
    """Every free-text field a parser would read, header excluded."""
    parts: list[str] = [resume.summary]
    for entry in resume.experience:
        parts.extend([entry.role, entry.company_or_client, *entry.bullets])
    for entry in resume.education:
        parts.append(f"{entry.degree} {entry.field} {entry.institution}")
    for values in resume.skills.values():
        parts.extend(values)
    for project in resume.projects:
        parts.extend([project.title, *project.bullets])
    for cert in resume.certifications:
        parts.append(f"{cert.name} {cert.issuer}")
    return parts
