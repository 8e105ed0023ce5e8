from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Iterator, List, Optional, TypeVar

import httpx

from .auth import AuthProvider
from .endpoint import Endpoint, Pageable, RenderedRequest, ReturnsJsonResponse
from .env import impersonate_user_id_from_env, require_env_config
from .envelope import PAGINATION_KEYS, unwrap
from .errors import DecodeError, EndpointCapabilityError, StatusError, TransportError
from .logging import get_logger, sanitize_headers, truncate_body
from .pages import (
    DEFAULT_PAGE_SIZE,
    ResponsePage,
    decode_value,
    next_page_offset,
    parse_page,
)

T = TypeVar("T")

SWITCH_USER_HEADER = "X-Redmine-Switch-User"


def require_capability(endpoint: Any, capability: type, label: str) -> None:
    if not isinstance(endpoint, capability):
        raise EndpointCapabilityError(type(endpoint).__name__, label)


def check_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise ValueError("page_size must be > 0")


class RedmineBase:
    """Configuration and response handling shared by the blocking and async clients.

    Nothing here changes after ``__init__``; a client can be shared by any
    number of callers.
    """

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider,
        *,
        impersonate_user_id: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
        user_agent: Optional[str] = None,
    ):
        if not base_url or not base_url.strip():
            raise ValueError("base_url is required")
        if auth is None:
            raise ValueError("auth is required")
        if impersonate_user_id is not None and impersonate_user_id <= 0:
            raise ValueError("impersonate_user_id must be > 0")

        self.base_url = base_url.strip().rstrip("/")
        self.auth = auth
        self.impersonate_user_id = impersonate_user_id
        self._logger = get_logger(logger)
        self._user_agent = user_agent or "redmine-api-python/0.2.4"
        self._base_headers: list[tuple[str, str]] = [
            ("Accept", "application/json"),
            ("User-Agent", self._user_agent),
        ]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self.base_url!r}, "
            f"impersonate_user_id={self.impersonate_user_id!r})"
        )

    def issue_url(self, issue_id: int) -> str:
        return f"{self.base_url}/issues/{issue_id}"

    def _url(self, rendered: RenderedRequest) -> str:
        return f"{self.base_url}/{rendered.path}"

    def _build_headers(self, rendered: RenderedRequest) -> httpx.Headers:
        headers = httpx.Headers(list(self._base_headers))
        self.auth.apply(headers)
        if self.impersonate_user_id is not None:
            headers[SWITCH_USER_HEADER] = str(self.impersonate_user_id)
        if rendered.content_type is not None:
            headers["Content-Type"] = rendered.content_type
        return headers

    def _log_request_body(self, rendered: RenderedRequest) -> None:
        if rendered.content is None or not self._logger.isEnabledFor(logging.DEBUG):
            return
        if rendered.content_type and rendered.content_type.startswith("application/json"):
            body = rendered.content.decode("utf-8", errors="replace")
        else:
            body = f"<{len(rendered.content)} bytes>"
        self._logger.debug(
            "Redmine request body",
            extra={"content_type": rendered.content_type, "body": truncate_body(body)},
        )

    def _transport_failed(self, rendered: RenderedRequest, url: str, exc: httpx.RequestError) -> TransportError:
        self._logger.error(
            "Redmine request failed",
            exc_info=exc,
            extra={"method": rendered.method, "url": url},
        )
        return TransportError(rendered.method, url, str(exc) or type(exc).__name__)

    def _check_response(
        self,
        rendered: RenderedRequest,
        url: str,
        headers: httpx.Headers,
        response: httpx.Response,
        duration: float,
    ) -> None:
        self._logger.debug(
            "Redmine request completed",
            extra={
                "method": rendered.method,
                "path": rendered.path,
                "params": list(rendered.params),
                "status_code": response.status_code,
                "duration_sec": round(duration, 4),
                "headers": sanitize_headers(headers),
            },
        )
        if self._logger.isEnabledFor(logging.DEBUG) and response.content:
            self._logger.debug(
                "Redmine response body",
                extra={"body": truncate_body(response.text)},
            )

        if 400 <= response.status_code <= 599:
            kind = "server error" if response.status_code >= 500 else "client error"
            self._logger.error(
                f"Redmine status error ({kind})",
                extra={
                    "method": rendered.method,
                    "url": url,
                    "status_code": response.status_code,
                    "body": truncate_body(response.text),
                },
            )
            raise StatusError(
                status_code=response.status_code,
                body=response.text,
                method=rendered.method,
                url=url,
            )

    def _parse_json(self, response: httpx.Response) -> Any:
        if not response.content:
            raise DecodeError("Empty response body", status_code=response.status_code)
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Failed to parse JSON: {exc}", status_code=response.status_code) from exc

    def _decode_single(
        self,
        endpoint: ReturnsJsonResponse,
        response: httpx.Response,
        model: Optional[Callable[[Any], T]],
    ) -> T:
        body = self._parse_json(response)
        wrapper_key = endpoint.response_wrapper_key()
        allowed_extra = PAGINATION_KEYS if endpoint.returns_collection else ()
        value = unwrap(body, wrapper_key, allowed_extra) if wrapper_key else body
        return decode_value(value, model, response.status_code)

    def _decode_page(
        self,
        endpoint: Pageable,
        response: httpx.Response,
        model: Optional[Callable[[Any], T]],
    ) -> ResponsePage[T]:
        body = self._parse_json(response)
        page = parse_page(body, endpoint.page_wrapper_key(), model, response.status_code)
        self._logger.debug(
            "Parsed Redmine page",
            extra={
                "endpoint": type(endpoint).__name__,
                "total_count": page.total_count,
                "offset": page.offset,
                "limit": page.limit,
                "count": len(page.values),
            },
        )
        return page

    def _first_page_values(self, endpoint: Pageable, page: ResponsePage[Any]) -> List[Any]:
        if page.offset + len(page.values) < page.total_count:
            self._logger.debug(
                "Returning first page only",
                extra={
                    "endpoint": type(endpoint).__name__,
                    "total_count": page.total_count,
                    "count": len(page.values),
                },
            )
        return page.values


class Redmine(RedmineBase):
    """Blocking Redmine client.

    Every call blocks the calling thread for the whole round trip. Use
    ``AsyncRedmine`` for concurrent callers.
    """

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider,
        *,
        impersonate_user_id: Optional[int] = None,
        timeout_seconds: float = 30.0,
        logger: Optional[logging.Logger] = None,
        user_agent: Optional[str] = None,
        http_client: httpx.Client | None = None,
    ):
        if timeout_seconds is None or timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        super().__init__(
            base_url,
            auth,
            impersonate_user_id=impersonate_user_id,
            logger=logger,
            user_agent=user_agent,
        )
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=timeout_seconds)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Redmine":
        """Build a client from ``REDMINE_URL`` and ``REDMINE_API_KEY``.

        ``REDMINE_USERNAME``/``REDMINE_PASSWORD`` are used for Basic auth when
        no API key is set, and ``REDMINE_IMPERSONATE_USER_ID`` sets the user
        to switch to. Keyword arguments are passed to the constructor.
        """
        base_url, auth = require_env_config()
        kwargs.setdefault("impersonate_user_id", impersonate_user_id_from_env())
        return cls(base_url, auth, **kwargs)

    def _send(self, rendered: RenderedRequest) -> httpx.Response:
        url = self._url(rendered)
        headers = self._build_headers(rendered)
        self._logger.debug(
            "Calling Redmine",
            extra={"method": rendered.method, "url": url},
        )
        self._log_request_body(rendered)
        start = time.perf_counter()
        try:
            response = self._client.request(
                rendered.method,
                url,
                params=list(rendered.params),
                content=rendered.content,
                headers=headers,
            )
        except httpx.RequestError as exc:
            raise self._transport_failed(rendered, url, exc) from exc

        try:
            self._check_response(rendered, url, headers, response, time.perf_counter() - start)
            return response
        finally:
            response.close()

    def ignore_response_body(self, endpoint: Endpoint) -> None:
        """Execute ``endpoint`` and discard whatever it returns.

        Use this for updates and deletes. Transport failures and 4xx/5xx
        statuses are still raised.
        """
        require_capability(endpoint, Endpoint, "request execution")
        self._send(endpoint.render())

    def json_response_body(
        self,
        endpoint: ReturnsJsonResponse,
        model: Optional[Callable[[Any], T]] = None,
    ) -> T:
        """Execute ``endpoint`` and decode its single JSON response.

        ``model`` converts the unwrapped JSON value (e.g. ``Issue.from_dict``);
        without one the plain JSON value is returned.

        For a paginated endpoint this returns the values of the FIRST PAGE
        ONLY, without signalling that more pages exist. It is meant for
        filtered queries known to be small; use
        ``json_response_body_all_pages`` or ``json_response_body_stream``
        otherwise.
        """
        require_capability(endpoint, ReturnsJsonResponse, "JSON responses")
        response = self._send(endpoint.render())
        if isinstance(endpoint, Pageable):
            page = self._decode_page(endpoint, response, model)
            return self._first_page_values(endpoint, page)  # type: ignore[return-value]
        return self._decode_single(endpoint, response, model)

    def json_response_body_page(
        self,
        endpoint: Pageable,
        offset: int,
        limit: int,
        model: Optional[Callable[[Any], T]] = None,
    ) -> ResponsePage[T]:
        require_capability(endpoint, Pageable, "pagination")
        return self._fetch_page(endpoint, endpoint.render(), offset, limit, model)

    def json_response_body_all_pages(
        self,
        endpoint: Pageable,
        model: Optional[Callable[[Any], T]] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> List[T]:
        """Fetch every page of ``endpoint`` and return all values in order.

        Any failing page aborts the whole call; nothing partial is returned.
        """
        require_capability(endpoint, Pageable, "pagination")
        check_page_size(page_size)
        return list(self._iter_values(endpoint, endpoint.render(), model, page_size))

    def json_response_body_stream(
        self,
        endpoint: Pageable,
        model: Optional[Callable[[Any], T]] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Iterator[T]:
        """Lazily iterate over every value of ``endpoint``.

        The next page is only requested once the buffered page has been
        consumed. An error raised while fetching a page ends the iteration;
        breaking out of the loop early issues no further requests.
        """
        require_capability(endpoint, Pageable, "pagination")
        check_page_size(page_size)
        return self._iter_values(endpoint, endpoint.render(), model, page_size)

    def _fetch_page(
        self,
        endpoint: Pageable,
        rendered: RenderedRequest,
        offset: int,
        limit: int,
        model: Optional[Callable[[Any], T]],
    ) -> ResponsePage[T]:
        response = self._send(rendered.paged(offset, limit))
        return self._decode_page(endpoint, response, model)

    def _iter_values(
        self,
        endpoint: Pageable,
        rendered: RenderedRequest,
        model: Optional[Callable[[Any], T]],
        page_size: int,
    ) -> Iterator[T]:
        offset: Optional[int] = 0
        while offset is not None:
            page = self._fetch_page(endpoint, rendered, offset, page_size, model)
            yield from page.values
            offset = next_page_offset(page, offset)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Redmine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
