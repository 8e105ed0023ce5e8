from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, NamedTuple

from .errors import DecodeError, EnvelopeMismatch, PaginationKeyError


class EnvelopeKeys(NamedTuple):
    singular: str
    plural: str


ENTITY_KEYS: Mapping[str, EnvelopeKeys] = {
    "attachment": EnvelopeKeys("attachment", "attachments"),
    "custom_field": EnvelopeKeys("custom_field", "custom_fields"),
    "file": EnvelopeKeys("file", "files"),
    "group": EnvelopeKeys("group", "groups"),
    "issue": EnvelopeKeys("issue", "issues"),
    "issue_category": EnvelopeKeys("issue_category", "issue_categories"),
    "issue_priority": EnvelopeKeys("issue_priority", "issue_priorities"),
    "issue_status": EnvelopeKeys("issue_status", "issue_statuses"),
    "membership": EnvelopeKeys("membership", "memberships"),
    "news": EnvelopeKeys("news", "news"),
    "project": EnvelopeKeys("project", "projects"),
    "query": EnvelopeKeys("query", "queries"),
    "relation": EnvelopeKeys("relation", "relations"),
    "role": EnvelopeKeys("role", "roles"),
    "time_entry": EnvelopeKeys("time_entry", "time_entries"),
    "time_entry_activity": EnvelopeKeys("time_entry_activity", "time_entry_activities"),
    "tracker": EnvelopeKeys("tracker", "trackers"),
    "upload": EnvelopeKeys("upload", "uploads"),
    "user": EnvelopeKeys("user", "users"),
    "version": EnvelopeKeys("version", "versions"),
    "wiki_page": EnvelopeKeys("wiki_page", "wiki_pages"),
}

PAGINATION_KEYS = ("total_count", "offset", "limit")


def keys_for(entity: str) -> EnvelopeKeys:
    try:
        return ENTITY_KEYS[entity]
    except KeyError:
        raise KeyError(f"No envelope keys registered for entity {entity!r}") from None


def wrap(key: str, payload: Any) -> Dict[str, Any]:
    return {key: payload}


def unwrap(body: Any, key: str, allowed_extra: Iterable[str] = ()) -> Any:
    """Return the value under ``key``, the only top-level key allowed besides ``allowed_extra``.

    Non-paginated collections (versions, issue categories) still report
    ``total_count``; pass ``PAGINATION_KEYS`` as ``allowed_extra`` for them.
    """
    if not isinstance(body, dict):
        raise DecodeError(f"Expected JSON object wrapped in {key!r}, got {type(body).__name__}")
    extra = set(body) - {key} - set(allowed_extra)
    if key not in body or extra:
        raise EnvelopeMismatch(key, body.keys())
    return body[key]


def unwrap_page(body: Any, key: str) -> tuple[List[Any], int, int, int]:
    """Split a collection response into its values and pagination counters.

    Returns ``(values, total_count, offset, limit)``. Unlike ``unwrap`` the
    collection key sits next to the pagination keys, so extra keys are
    expected here.
    """
    if not isinstance(body, dict):
        raise DecodeError(f"Expected JSON object with {key!r}, got {type(body).__name__}")

    counters: Dict[str, int] = {}
    for name in PAGINATION_KEYS:
        if name not in body:
            raise PaginationKeyError(name)
        value = body[name]
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise PaginationKeyError(name, wrong_type=True)
        counters[name] = value

    if key not in body:
        raise EnvelopeMismatch(key, body.keys())
    values = body[key]
    if not isinstance(values, list):
        raise DecodeError(f"Expected {key!r} to be a JSON array, got {type(values).__name__}")
    return values, counters["total_count"], counters["offset"], counters["limit"]
