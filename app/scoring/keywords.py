from __future__ import annotations

import re
from collections import Counter

from app.schemas.ats import KeywordMatch
from app.schemas.resume import Resume

DEFAULT_MAX_KEYWORDS = 40
# Callers may lower the cap; nothing may raise it to 50 or beyond.
HARD_MAX_KEYWORDS = 49
MIN_TOKEN_LENGTH = 3

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
        "by", "from", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may", "might", "shall",
        "can", "must", "need", "that", "this", "these", "those", "it", "its", "we", "our",
        "you", "your", "they", "their", "he", "she", "him", "her", "not", "no", "all", "each",
        "every", "any", "some", "such", "than", "too", "very", "just", "about", "also",
        "into", "through", "during", "before", "after", "above", "below", "between", "under",
        "over", "again", "further", "then", "once", "here", "there", "when", "where", "why",
        "how", "what", "which", "who", "whom", "both", "few", "more", "most", "other",
        "only", "own", "same", "so", "as", "if", "while", "per", "via", "etc",
        "including", "include", "includes", "required", "requirements", "preferred",
        "experience", "ability", "strong", "excellent", "proven", "minimum", "years",
        "work", "working", "role", "position", "job", "team", "company", "environment",
        "responsibilities", "qualifications", "skills", "candidate", "looking", "seeking",
    }
)

_NON_KEYWORD_CHARS_RE = re.compile(r"[^a-z0-9\s+#.\-]")


def _clean_token(token: str) -> str:
    return token.lstrip("-").rstrip(".-")


def _is_keyword(token: str) -> bool:
    return len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS


def extract_job_keywords(text: str, *, max_keywords: int = DEFAULT_MAX_KEYWORDS) -> list[str]:
    """Deduplicated job-description keywords in first-seen order.

    Long descriptions are cut down to the ``max_keywords`` most frequent tokens,
    earlier tokens winning ties.
    """
    if not text or not text.strip():
        return []
    limit = max(0, min(int(max_keywords), HARD_MAX_KEYWORDS))

    lowered = _NON_KEYWORD_CHARS_RE.sub(" ", text.lower())
    counts: Counter[str] = Counter()
    first_seen: dict[str, int] = {}
    for raw in lowered.split():
        token = _clean_token(raw)
        if not _is_keyword(token):
            continue
        counts[token] += 1
        first_seen.setdefault(token, len(first_seen))

    ordered = sorted(first_seen, key=first_seen.__getitem__)
    if len(ordered) <= limit:
        return ordered
    keep = set(sorted(ordered, key=lambda token: (-counts[token], first_seen[token]))[:limit])
    return [token for token in ordered if token in keep]


def flatten_resume_text(resume: Resume) -> str:
    """Lowercased projection of every resume field that keyword matching looks at."""
    parts: list[str] = [resume.header.title, resume.summary]
    for entry in resume.experience:
        parts.extend([entry.role, entry.company_or_client, *entry.bullets])
    for entry in resume.education:
        parts.extend([entry.degree, entry.field, entry.institution])
    parts.extend(resume.all_skills())
    for project in resume.projects:
        parts.extend([project.title, *project.bullets])
    for cert in resume.certifications:
        parts.append(f"{cert.name} {cert.issuer}")
    return "\n".join(part for part in parts if part).lower()


def match_keywords(
    resume: Resume,
    job_description: str,
    *,
    max_keywords: int = DEFAULT_MAX_KEYWORDS,
) -> list[KeywordMatch]:
    keywords = extract_job_keywords(job_description, max_keywords=max_keywords)
    if not keywords:
        return []
    haystack = flatten_resume_text(resume)
    return [KeywordMatch(keyword=keyword, found=keyword in haystack) for keyword in keywords]
