from __future__ import annotations

from app.schemas.ats import SectionScore
from app.schemas.resume import Resume
from app.scoring.issues import IssueCollector
from app.scoring.sections import ATSSection
from app.scoring.text import has_metric, non_blank, ratio, starts_with_action_verb

_LOW_DIVERSITY_WORDS = 40


def _vocabulary_size(resume: Resume) -> int:
    chunks = [resume.summary, *resume.all_skills()]
    for entry in resume.experience:
        chunks.extend([entry.role, *entry.bullets])
    words = " ".join(chunks).lower().split()
    return len({word for word in words if len(word) > 3})


def score_content_quality(resume: Resume) -> SectionScore:
    """Bullet-level quality across the whole resume: action verbs, metrics, extras."""
    issues = IssueCollector(ATSSection.CONTENT_QUALITY)
    score = 0

    bullets = non_blank(bullet for entry in resume.experience for bullet in entry.bullets)
    if bullets:
        action_count = sum(1 for bullet in bullets if starts_with_action_verb(bullet))
        action_ratio = ratio(action_count, len(bullets))
        if action_ratio >= 0.75:
            score += 5
        elif action_ratio >= 0.5:
            score += 3
        elif action_ratio > 0:
            score += 1
            issues.add(
                "cq-verbs-few",
                "warning",
                "Most bullets lack strong action verbs",
                f"Only {action_count}/{len(bullets)} bullets open with a strong action verb.",
                fix="Rewrite bullets to start with strong action verbs",
            )
        else:
            issues.add(
                "cq-verbs-none",
                "warning",
                "No bullets start with an action verb",
                "Open each bullet with a verb such as Led, Built, Reduced, or Delivered.",
                fix="Rewrite bullets to start with strong action verbs",
            )

        metric_count = sum(1 for bullet in bullets if has_metric(bullet))
        metric_ratio = ratio(metric_count, len(bullets))
        if metric_ratio >= 0.5:
            score += 5
        elif metric_ratio >= 0.3:
            score += 4
            issues.add(
                "cq-metrics-more",
                "suggestion",
                "Add more quantified achievements",
                f"{metric_count}/{len(bullets)} bullets have metrics. Top resumes quantify 50%+ of bullets.",
            )
        elif metric_ratio > 0:
            score += 2
            issues.add(
                "cq-metrics-few",
                "warning",
                "Low metrics density",
                f"Only {metric_count}/{len(bullets)} bullets include numbers.",
                fix="Add numbers, percentages, or amounts to more bullets",
            )
        else:
            issues.add(
                "cq-no-metrics",
                "warning",
                "No quantified achievements anywhere",
                "No bullet contains a metric. Add percentages, amounts, team sizes, or counts.",
                fix="Add quantifiable metrics to bullets",
            )

    projects = [project for project in resume.projects if project.title.strip()]
    if not projects:
        issues.add(
            "cq-no-proj",
            "suggestion",
            "No projects section",
            "Projects demonstrate practical skills, especially for career changers and new graduates.",
        )
    elif any(non_blank(project.bullets) for project in projects):
        score += 3
    else:
        score += 1
        issues.add(
            "cq-proj-desc",
            "suggestion",
            "Projects lack descriptions",
            "Add 1-3 bullets per project describing what you built and with which tools.",
        )

    certifications = [cert for cert in resume.certifications if cert.name.strip()]
    if certifications:
        if any(cert.issuer.strip() for cert in certifications):
            score += 2
        else:
            score += 1
            issues.add(
                "cq-cert-issuer",
                "suggestion",
                "Certifications missing issuing organizations",
                "Include the certifying body (e.g. AWS, PMI, AHA) so it can be verified.",
                fix="Add the issuing organization to each certification",
            )

    if bullets or resume.summary.strip():
        vocabulary = _vocabulary_size(resume)
        if vocabulary <= _LOW_DIVERSITY_WORDS:
            issues.add(
                "cq-diversity",
                "suggestion",
                "Low keyword diversity",
                f"Only {vocabulary} distinct substantive words. Varied terminology improves keyword matching.",
            )

    return issues.finish(score)
