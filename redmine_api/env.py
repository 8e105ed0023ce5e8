from __future__ import annotations

import os
from typing import Optional

from .auth import ApiKeyAuth, AuthProvider, BasicAuth


def auth_from_env() -> Optional[AuthProvider]:
    api_key = os.getenv("REDMINE_API_KEY")
    username = os.getenv("REDMINE_USERNAME")
    password = os.getenv("REDMINE_PASSWORD")

    if api_key and api_key.strip():
        return ApiKeyAuth(api_key)
    if username and password:
        return BasicAuth(username, password)
    return None


def redmine_url_from_env() -> Optional[str]:
    url = os.getenv("REDMINE_URL")
    if url and url.strip():
        return url.strip().rstrip("/")
    return None


def impersonate_user_id_from_env() -> Optional[int]:
    raw = (os.getenv("REDMINE_IMPERSONATE_USER_ID") or "").strip()
    if not raw:
        return None
    if not raw.isdigit():
        raise ValueError("REDMINE_IMPERSONATE_USER_ID must be a numeric user id")
    return int(raw)


def require_env_config() -> tuple[str, AuthProvider]:
    base_url = redmine_url_from_env()
    if not base_url:
        raise ValueError("Missing Redmine base URL. Set REDMINE_URL, e.g. https://redmine.example.com")

    auth = auth_from_env()
    if auth is None:
        raise ValueError(
            "Missing credentials. Set REDMINE_API_KEY, or "
            "(REDMINE_USERNAME + REDMINE_PASSWORD) for Basic auth."
        )
    return base_url, auth
