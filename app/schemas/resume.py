from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        try:
            return str(value)
        except ValueError:
            # ints past the interpreter digit limit refuse str()
            return ""
    return ""


def _as_text_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [_as_text(item) for item in value if isinstance(item, (str, int, float)) and not isinstance(item, bool)]


def _as_record(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, Mapping):
        return value
    return {}


def _as_record_list(value: Any) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        return []
    return [_as_record(item) for item in value if isinstance(item, (Mapping, BaseModel))]


class _ResumeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ResumeHeader(_ResumeModel):
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""

    @field_validator("name", "title", "email", "phone", "location", "linkedin", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)


_COMPANY_KEYS = ("company_or_client", "organization", "company")


class ExperienceEntry(_ResumeModel):
    role: str = ""
    company_or_client: str = Field(
        default="",
        validation_alias=AliasChoices(*_COMPANY_KEYS),
    )
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    bullets: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _pick_company(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        for key in _COMPANY_KEYS:
            text = _as_text(data.get(key))
            if text.strip():
                return {**data, "company_or_client": text}
        return data

    @field_validator("role", "company_or_client", "start_date", "end_date", "location", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("bullets", mode="before")
    @classmethod
    def _coerce_bullets(cls, value: Any) -> list[str]:
        return _as_text_list(value)


class EducationEntry(_ResumeModel):
    degree: str = ""
    field: str = ""
    institution: str = ""
    gpa: str = ""
    graduation_date: str = ""
    location: str = ""

    @field_validator("degree", "field", "institution", "gpa", "graduation_date", "location", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class CertificationEntry(_ResumeModel):
    name: str = ""
    issuer: str = ""
    date: str = ""

    @field_validator("name", "issuer", "date", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class ProjectEntry(_ResumeModel):
    title: str = ""
    organization: str = ""
    date: str = ""
    bullets: list[str] = Field(default_factory=list)

    @field_validator("title", "organization", "date", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("bullets", mode="before")
    @classmethod
    def _coerce_bullets(cls, value: Any) -> list[str]:
        return _as_text_list(value)


class Resume(_ResumeModel):
    """Structured resume record produced upstream by the resume extractor."""

    header: ResumeHeader = Field(default_factory=ResumeHeader)
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    skills: dict[str, list[str]] = Field(default_factory=dict)
    projects: list[ProjectEntry] = Field(default_factory=list)

    @field_validator("header", mode="before")
    @classmethod
    def _coerce_header(cls, value: Any) -> Any:
        return _as_record(value)

    @field_validator("summary", mode="before")
    @classmethod
    def _coerce_summary(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("experience", "education", "certifications", "projects", mode="before")
    @classmethod
    def _coerce_entries(cls, value: Any) -> list[Any]:
        return _as_record_list(value)

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> dict[str, list[str]]:
        if not isinstance(value, Mapping):
            return {}
        return {str(key): _as_text_list(items) for key, items in value.items()}

    def all_skills(self) -> list[str]:
        return [skill for values in self.skills.values() for skill in values if skill.strip()]


def coerce_resume(raw: Any) -> Resume:
    """Turn any resume-like value into a Resume without raising.

    Missing or mistyped fields fall back to empty values; anything that is not a
    mapping becomes an empty record.
    """
    if isinstance(raw, Resume):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning("resume_coercion_fallback reason=not_a_mapping type=%s", type(raw).__name__)
        return Resume()
    try:
        return Resume.model_validate(dict(raw))
    except ValidationError as exc:
        logger.warning("resume_coercion_fallback reason=validation_error errors=%s", exc.error_count())
        return Resume()
