from __future__ import annotations

import logging
import time
from typing import Any, AsyncIterator, Callable, List, Optional, TypeVar

import httpx

from .auth import AuthProvider
from .client import RedmineBase, check_page_size, require_capability
from .endpoint import Endpoint, Pageable, RenderedRequest, ReturnsJsonResponse
from .env import impersonate_user_id_from_env, require_env_config
from .pages import DEFAULT_PAGE_SIZE, ResponsePage, next_page_offset

T = TypeVar("T")


class AsyncRedmine(RedmineBase):
    """Redmine client for asyncio callers.

    Same contract as ``Redmine``; each call suspends the calling task
    instead of blocking a thread. The client holds no per-call state, so
    cancelling an awaiting task leaves nothing to clean up.
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
        http_client: httpx.AsyncClient | None = None,
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
        self._client = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout_seconds)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncRedmine":
        base_url, auth = require_env_config()
        kwargs.setdefault("impersonate_user_id", impersonate_user_id_from_env())
        return cls(base_url, auth, **kwargs)

    async def _send(self, rendered: RenderedRequest) -> httpx.Response:
        url = self._url(rendered)
        headers = self._build_headers(rendered)
        self._logger.debug(
            "Calling Redmine",
            extra={"method": rendered.method, "url": url},
        )
        self._log_request_body(rendered)
        start = time.perf_counter()
        try:
            response = await self._client.request(
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
            await response.aclose()

    async def ignore_response_body(self, endpoint: Endpoint) -> None:
        require_capability(endpoint, Endpoint, "request execution")
        await self._send(endpoint.render())

    async def json_response_body(
        self,
        endpoint: ReturnsJsonResponse,
        model: Optional[Callable[[Any], T]] = None,
    ) -> T:
        """See ``Redmine.json_response_body``; paginated endpoints yield the first page only."""
        require_capability(endpoint, ReturnsJsonResponse, "JSON responses")
        response = await self._send(endpoint.render())
        if isinstance(endpoint, Pageable):
            page = self._decode_page(endpoint, response, model)
            return self._first_page_values(endpoint, page)  # type: ignore[return-value]
        return self._decode_single(endpoint, response, model)

    async def json_response_body_page(
        self,
        endpoint: Pageable,
        offset: int,
        limit: int,
        model: Optional[Callable[[Any], T]] = None,
    ) -> ResponsePage[T]:
        require_capability(endpoint, Pageable, "pagination")
        return await self._fetch_page(endpoint, endpoint.render(), offset, limit, model)

    async def json_response_body_all_pages(
        self,
        endpoint: Pageable,
        model: Optional[Callable[[Any], T]] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> List[T]:
        require_capability(endpoint, Pageable, "pagination")
        check_page_size(page_size)
        return [value async for value in self._iter_values(endpoint, endpoint.render(), model, page_size)]

    def json_response_body_stream(
        self,
        endpoint: Pageable,
        model: Optional[Callable[[Any], T]] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> AsyncIterator[T]:
        """Lazily iterate over every value with ``async for``.

        Each step may suspend on a page request. Pages are fetched strictly
        one after another. Call ``aclose()`` on the iterator (or just stop
        iterating) to abandon the traversal.
        """
        require_capability(endpoint, Pageable, "pagination")
        check_page_size(page_size)
        return self._iter_values(endpoint, endpoint.render(), model, page_size)

    async def _fetch_page(
        self,
        endpoint: Pageable,
        rendered: RenderedRequest,
        offset: int,
        limit: int,
        model: Optional[Callable[[Any], T]],
    ) -> ResponsePage[T]:
        response = await self._send(rendered.paged(offset, limit))
        return self._decode_page(endpoint, response, model)

    async def _iter_values(
        self,
        endpoint: Pageable,
        rendered: RenderedRequest,
        model: Optional[Callable[[Any], T]],
        page_size: int,
    ) -> AsyncIterator[T]:
        offset: Optional[int] = 0
        while offset is not None:
            page = await self._fetch_page(endpoint, rendered, offset, page_size, model)
            for value in page.values:
                yield value
            offset = next_page_offset(page, offset)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncRedmine":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
