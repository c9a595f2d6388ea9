from fastapi import APIRouter, Header, HTTPException, Request, status

from app.core.config.scoring import get_scoring_int
from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.schemas.ats import (
    ATSScore,
    ATSScoreRequest,
    KeywordMatchRequest,
    KeywordMatchResponse,
    SectionFixPromptRequest,
    SectionFixPromptResponse,
)
from app.scoring.keywords import DEFAULT_MAX_KEYWORDS
from app.scoring.sections import ATSSection, parse_section
from app.services.ats_service import (
    build_section_fix_prompt,
    calculate_ats_score,
    keyword_coverage,
    match_job_description_keywords,
)

router = APIRouter()


@router.post("/ats/score", response_model=ATSScore, summary="Score a structured resume")
@rate_limit()
async def ats_score(
    request: Request,
    payload: ATSScoreRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    accept_language: str | None = Header(default=None, alias="Accept-Language"),
):
    _ = request
    check_api_key(x_api_key, accept_language)
    return calculate_ats_score(payload.resume, payload.job_description)


@router.post("/ats/keywords", response_model=KeywordMatchResponse, summary="Match job description keywords")
@rate_limit()
async def ats_keywords(
    request: Request,
    payload: KeywordMatchRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    accept_language: str | None = Header(default=None, alias="Accept-Language"),
):
    _ = request
    check_api_key(x_api_key, accept_language)
    max_keywords = get_scoring_int("keywords.max_keywords", DEFAULT_MAX_KEYWORDS)
    matches = match_job_description_keywords(payload.resume, payload.job_description, max_keywords=max_keywords)
    return KeywordMatchResponse(
        keywords=matches,
        matched=sum(1 for match in matches if match.found),
        total=len(matches),
        coverage=keyword_coverage(matches),
    )


@router.post("/ats/fix-prompt", response_model=SectionFixPromptResponse, summary="Build a section fix prompt")
@rate_limit()
async def ats_fix_prompt(
    request: Request,
    payload: SectionFixPromptRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    accept_language: str | None = Header(default=None, alias="Accept-Language"),
):
    _ = request
    check_api_key(x_api_key, accept_language)
    section = parse_section(payload.section)
    if section is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown section '{payload.section}'. Expected one of: {', '.join(s.value for s in ATSSection)}.",
        )

    score = calculate_ats_score(payload.resume)
    max_issues = get_scoring_int("fix_prompts.max_issues", 12)
    issues = [issue for issue in score.issues if issue.section == section][:max_issues]
    return SectionFixPromptResponse(
        section=section,
        issue_count=len(issues),
        prompt=build_section_fix_prompt(section, payload.resume, issues),
    )
