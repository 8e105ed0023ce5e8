from __future__ import annotations

import base64
from typing import MutableMapping, Protocol, runtime_checkable

API_KEY_HEADER = "X-Redmine-API-Key"


@runtime_checkable
class AuthProvider(Protocol):
    def apply(self, headers: MutableMapping[str, str]) -> None:
        ...


class ApiKeyAuth:
    def __init__(self, api_key: str):
        if not api_key or not api_key.strip():
            raise ValueError("api_key is required")
        self._api_key = api_key.strip()

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers[API_KEY_HEADER] = self._api_key

    def __repr__(self) -> str:
        return "ApiKeyAuth(api_key=<redacted>)"


class BasicAuth:
    def __init__(self, username: str, password: str):
        if not username or not password:
            raise ValueError("username and password are required for Basic auth")
        self._username = username
        self._password = password

    def apply(self, headers: MutableMapping[str, str]) -> None:
        raw = f"{self._username}:{self._password}".encode("utf-8")
        headers["Authorization"] = f"Basic {base64.b64encode(raw).decode('ascii')}"

    def __repr__(self) -> str:
        return f"BasicAuth(username={self._username!r}, password=<redacted>)"
