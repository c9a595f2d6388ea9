from __future__ import annotations

from app.core.config import settings

_ALLOWED_METHODS = ("GET", "POST", "OPTIONS")


def cors_allowed_origins() -> list[str]:
    return list(settings.cors_allowed_origins)


def cors_allow_origin_regex() -> str | None:
    regex = (settings.cors_allow_origin_regex or "").strip()
    return regex or None


def cors_allowed_methods() -> list[str]:
    return list(_ALLOWED_METHODS)
