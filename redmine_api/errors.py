from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


class RedmineError(Exception):
    pass


class ConstructionError(RedmineError, ValueError):
    def __init__(self, endpoint_name: str, reason: str, missing: Iterable[str] = ()):
        missing_fields = tuple(missing)
        message = f"Cannot build {endpoint_name}: {reason}"
        if missing_fields:
            message = f"{message}; missing={', '.join(missing_fields)}"
        super().__init__(message)
        self.endpoint_name = endpoint_name
        self.reason = reason
        self.missing = missing_fields


class EndpointCapabilityError(RedmineError, TypeError):
    def __init__(self, endpoint_name: str, required: str):
        super().__init__(f"{endpoint_name} does not support {required}")
        self.endpoint_name = endpoint_name
        self.required = required


class TransportError(RedmineError):
    def __init__(self, method: str, url: str, reason: str):
        super().__init__(f"{method} {url} failed: {reason}")
        self.method = method
        self.url = url
        self.reason = reason


class StatusError(RedmineError):
    def __init__(self, status_code: int, body: str, method: str = "", url: str = ""):
        message = f"Unexpected HTTP status {status_code}"
        if method and url:
            message = f"{message} for {method} {url}"
        if body:
            message = f"{message}; body={body[:200]}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600


class DecodeError(RedmineError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EnvelopeMismatch(DecodeError):
    def __init__(self, expected_key: str, found_keys: Iterable[str]):
        found = sorted(found_keys)
        super().__init__(f"Expected envelope key {expected_key!r}; found keys={found}")
        self.expected_key = expected_key
        self.found_keys = found


class PaginationKeyError(DecodeError):
    def __init__(self, key: str, wrong_type: bool = False):
        problem = "has wrong type" if wrong_type else "is missing"
        super().__init__(f"Pagination key {key!r} {problem}")
        self.key = key
        self.wrong_type = wrong_type


class UploadFileError(RedmineError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read upload file {path}: {reason}")
        self.path = path
        self.reason = reason
