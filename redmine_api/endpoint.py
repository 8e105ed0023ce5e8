"""Endpoint descriptors and the capability markers the dispatchers check.

An endpoint is a frozen dataclass describing one Redmine REST call. The
marker base classes declare which consumption modes are legal for it:

* ``NoResponseBody``: the call returns nothing worth decoding (updates, deletes).
* ``ReturnsJsonResponse``: the call returns one JSON object, usually wrapped
  in a single-key envelope named after the entity.
* ``Pageable``: the call returns one page of a collection together with
  ``total_count``, ``offset`` and ``limit``.

List endpoints carry both ``Pageable`` and ``ReturnsJsonResponse`` so that a
caller who knows the result is small can read the first page only.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import MISSING
from datetime import date, datetime
from enum import Enum
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
)
from urllib.parse import quote

from .envelope import keys_for, wrap
from .errors import ConstructionError

E = TypeVar("E", bound="Endpoint")

JSON_CONTENT_TYPE = "application/json"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"


def format_param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_param_value(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return ",".join(format_param_value(item) for item in items)
    return str(value)


def path_segment(value: Any) -> str:
    return quote(format_param_value(value), safe="")


class QueryParams:
    def __init__(self) -> None:
        self._params: List[Tuple[str, str]] = []

    def push(self, key: str, value: Any) -> "QueryParams":
        if value is None:
            raise ValueError(f"query parameter {key!r} requires a value; use push_opt for optional ones")
        self._params.append((key, format_param_value(value)))
        return self

    def push_opt(self, key: str, value: Any) -> "QueryParams":
        if value is not None:
            self._params.append((key, format_param_value(value)))
        return self

    def extend(self, pairs: Iterable[Tuple[str, Any]]) -> "QueryParams":
        for key, value in pairs:
            self.push_opt(key, value)
        return self

    def items(self) -> List[Tuple[str, str]]:
        return list(self._params)

    def keys(self) -> List[str]:
        return [key for key, _ in self._params]

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"QueryParams({self._params!r})"


@dataclasses.dataclass(frozen=True)
class RenderedRequest:
    method: str
    path: str
    params: Tuple[Tuple[str, str], ...] = ()
    content_type: Optional[str] = None
    content: Optional[bytes] = None

    def paged(self, offset: int, limit: int) -> "RenderedRequest":
        if offset < 0:
            raise ValueError("offset must be >= 0")
        if limit <= 0:
            raise ValueError("limit must be > 0")
        params = tuple(p for p in self.params if p[0] not in ("offset", "limit"))
        params += (("offset", str(offset)), ("limit", str(limit)))
        return dataclasses.replace(self, params=params)


def _to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _to_json_value(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, (list, tuple)):
        return [_to_json_value(item) for item in value]
    if isinstance(value, dict):
        return {k: _to_json_value(v) for k, v in value.items()}
    return value


class Endpoint:
    entity: ClassVar[Optional[str]] = None

    def __post_init__(self) -> None:
        self.validate()

    def method(self) -> str:
        return "GET"

    def endpoint(self) -> str:
        raise NotImplementedError

    def parameters(self) -> QueryParams:
        return QueryParams()

    def body(self) -> Optional[Tuple[str, bytes]]:
        return None

    def validate(self) -> None:
        return None

    @classmethod
    def builder(cls: Type[E]) -> "EndpointBuilder[E]":
        return EndpointBuilder(cls)

    def render(self) -> RenderedRequest:
        body = self.body()
        content_type, content = body if body is not None else (None, None)
        return RenderedRequest(
            method=self.method().upper(),
            path=self.endpoint().lstrip("/"),
            params=tuple(self.parameters()),
            content_type=content_type,
            content=content,
        )

    def payload(self, *exclude: str) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for f in dataclasses.fields(self):  # type: ignore[arg-type]
            if f.name in exclude:
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.name] = _to_json_value(value)
        return result

    def json_body(self, payload: Any, wrapper_key: Optional[str] = None) -> Tuple[str, bytes]:
        if wrapper_key is None and self.entity is not None:
            wrapper_key = keys_for(self.entity).singular
        document = wrap(wrapper_key, payload) if wrapper_key else payload
        return JSON_CONTENT_TYPE, json.dumps(document).encode("utf-8")

    def fail(self, reason: str) -> ConstructionError:
        return ConstructionError(type(self).__name__, reason)


class NoResponseBody(Endpoint):
    pass


class ReturnsJsonResponse(Endpoint):
    returns_collection: ClassVar[bool] = False

    def response_wrapper_key(self) -> Optional[str]:
        if self.entity is None:
            return None
        keys = keys_for(self.entity)
        return keys.plural if self.returns_collection else keys.singular


class Pageable(Endpoint):
    def page_wrapper_key(self) -> str:
        if self.entity is None:
            raise NotImplementedError(f"{type(self).__name__} must declare an entity")
        return keys_for(self.entity).plural


class EndpointBuilder(Generic[E]):
    """Fluent builder: every dataclass field of the endpoint is a setter.

    ``Issue.builder().id(5).include([IssueInclude.JOURNALS]).build()``.
    ``build()`` is the only place that raises ``ConstructionError``.

    Setters are resolved at runtime, so a type checker cannot catch a
    misspelled parameter or a wrongly typed value here; an unknown name
    fails with ``AttributeError`` on first use. Keyword construction
    (``Issue(id=5, include=[...])``) is the statically checked path and
    runs the same validation.
    """

    def __init__(self, endpoint_cls: Type[E]):
        self._endpoint_cls = endpoint_cls
        self._fields = {f.name: f for f in dataclasses.fields(endpoint_cls) if f.init}  # type: ignore[arg-type]
        self._values: Dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], "EndpointBuilder[E]"]:
        fields = self.__dict__.get("_fields", {})
        if name.startswith("_") or name not in fields:
            cls_name = self.__dict__.get("_endpoint_cls", type(self)).__name__
            raise AttributeError(f"{cls_name} has no parameter {name!r}")

        def setter(value: Any) -> "EndpointBuilder[E]":
            return self.set(name, value)

        return setter

    def set(self, name: str, value: Any) -> "EndpointBuilder[E]":
        if name not in self._fields:
            raise AttributeError(f"{self._endpoint_cls.__name__} has no parameter {name!r}")
        self._values[name] = value
        return self

    def build(self) -> E:
        missing = [
            name
            for name, f in self._fields.items()
            if f.default is MISSING
            and f.default_factory is MISSING
            and self._values.get(name) is None
        ]
        if missing:
            raise ConstructionError(
                self._endpoint_cls.__name__,
                "required parameters were not set",
                missing,
            )
        return self._endpoint_cls(**self._values)
