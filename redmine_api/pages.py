from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .envelope import unwrap_page
from .errors import DecodeError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 100

Decoder = Callable[[Any], T]


@dataclass(frozen=True)
class ResponsePage(Generic[T]):
    values: List[T] = field(default_factory=list)
    total_count: int = 0
    offset: int = 0
    limit: int = 0


def decode_value(value: Any, model: Optional[Decoder], status_code: Optional[int] = None) -> Any:
    if model is None:
        return value
    try:
        return model(value)
    except (KeyError, TypeError, ValueError) as exc:
        raise DecodeError(f"Failed to decode response value: {exc!r}", status_code=status_code) from exc


def parse_page(
    body: Any,
    wrapper_key: str,
    model: Optional[Decoder] = None,
    status_code: Optional[int] = None,
) -> ResponsePage[Any]:
    raw_values, total_count, offset, limit = unwrap_page(body, wrapper_key)
    values = [decode_value(item, model, status_code) for item in raw_values]
    return ResponsePage(values=values, total_count=total_count, offset=offset, limit=limit)


def next_page_offset(page: ResponsePage[Any], requested_offset: int) -> Optional[int]:
    """Offset of the page after ``page``, or ``None`` once the collection is exhausted.

    The step is the limit the server reported, since Redmine caps the
    requested limit server side.
    """
    if requested_offset + len(page.values) >= page.total_count:
        return None
    next_offset = requested_offset + page.limit
    if next_offset >= page.total_count:
        return None
    if page.limit <= 0:
        raise DecodeError(
            f"Server reported limit={page.limit} at offset={requested_offset}; cannot advance pagination"
        )
    return next_offset
