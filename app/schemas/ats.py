from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.scoring.sections import ATSSection

IssueSeverity = Literal["critical", "warning", "suggestion"]


class ATSIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    section: ATSSection
    severity: IssueSeverity
    title: str
    description: str = ""
    fix: str | None = None


class SectionScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    section: ATSSection
    score: int = Field(ge=0)
    max_score: int = Field(ge=0, serialization_alias="maxScore")
    issues: list[ATSIssue] = Field(default_factory=list)
    notes: str | None = None

    @model_validator(mode="after")
    def _score_within_max(self) -> "SectionScore":
        if self.score > self.max_score:
            raise ValueError("score must not exceed max_score")
        return self


class ATSScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100)
    passes_ats: bool = Field(serialization_alias="passesATS")
    summary: str = Field(min_length=1)
    issues: list[ATSIssue] = Field(default_factory=list)
    sections: list[SectionScore] = Field(default_factory=list)


class KeywordMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str
    found: bool


class ATSScoreRequest(BaseModel):
    resume: Any = None
    job_description: str | None = Field(default=None, max_length=50000)


class KeywordMatchRequest(BaseModel):
    resume: Any = None
    job_description: str = Field(default="", max_length=50000)


class KeywordMatchResponse(BaseModel):
    keywords: list[KeywordMatch]
    matched: int = Field(ge=0)
    total: int = Field(ge=0)
    coverage: float = Field(ge=0.0, le=1.0)


class SectionFixPromptRequest(BaseModel):
    resume: Any = None
    section: str = Field(min_length=2, max_length=60)


class SectionFixPromptResponse(BaseModel):
    section: ATSSection
    issue_count: int = Field(ge=0, serialization_alias="issueCount")
    prompt: str
