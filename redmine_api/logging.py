from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

_LOGGER_NAME = "redmine_api"
_REDACTED = "<redacted>"
_SENSITIVE_HEADERS = frozenset({"authorization", "x-redmine-api-key", "cookie"})
_BODY_LOG_LIMIT = 2000

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(logger: Optional[logging.Logger] = None) -> logging.Logger:
    if logger is not None:
        return logger
    return logging.getLogger(_LOGGER_NAME)


def sanitize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    sanitized: Dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() in _SENSITIVE_HEADERS:
            sanitized[key] = _REDACTED
        else:
            sanitized[key] = value
    return sanitized


def truncate_body(body: str, limit: int = _BODY_LOG_LIMIT) -> str:
    if len(body) <= limit:
        return body
    return f"{body[:limit]}... ({len(body) - limit} more characters)"
