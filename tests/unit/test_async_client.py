import asyncio

import httpx
import pytest

from redmine_api import models
from redmine_api.async_client import AsyncRedmine
from redmine_api.auth import ApiKeyAuth
from redmine_api.endpoints.issues import DeleteIssue, Issue, Issues
from redmine_api.errors import EndpointCapabilityError, StatusError, TransportError

BASE_URL = "https://redmine.example.com"


def _paged_handler(total: int, max_limit: int, seen: list):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        offset = int(request.url.params.get("offset", "0"))
        limit = min(int(request.url.params.get("limit", "25")), max_limit)
        values = [{"id": i} for i in range(offset + 1, min(offset + limit, total) + 1)]
        return httpx.Response(
            200,
            json={"issues": values, "total_count": total, "offset": offset, "limit": limit},
            request=request,
        )

    return handler


def test_async_all_pages_and_stream_match():
    seen = []

    async def run():
        transport = httpx.MockTransport(_paged_handler(55, 25, seen))
        async with httpx.AsyncClient(transport=transport, timeout=5.0) as http_client:
            redmine = AsyncRedmine(BASE_URL, auth=ApiKeyAuth("key"), http_client=http_client)
            collected = await redmine.json_response_body_all_pages(Issues())
            streamed = [issue async for issue in redmine.json_response_body_stream(Issues())]
            return collected, streamed

    collected, streamed = asyncio.run(run())

    assert [issue["id"] for issue in collected] == list(range(1, 56))
    assert streamed == collected
    assert [request.url.params["offset"] for request in seen[:3]] == ["0", "25", "50"]
    assert len(seen) == 6


def test_async_stream_is_lazy():
    seen = []

    async def run():
        transport = httpx.MockTransport(_paged_handler(100, 25, seen))
        async with httpx.AsyncClient(transport=transport, timeout=5.0) as http_client:
            redmine = AsyncRedmine(BASE_URL, auth=ApiKeyAuth("key"), http_client=http_client)
            stream = redmine.json_response_body_stream(Issues(), page_size=25)
            before = len(seen)
            first = []
            async for issue in stream:
                first.append(issue)
                if len(first) == 3:
                    break
            await stream.aclose()
            return before, first

    before, first = asyncio.run(run())

    assert before == 0
    assert [issue["id"] for issue in first] == [1, 2, 3]
    assert len(seen) == 1


def test_async_single_object_and_model():
    issue_json = {
        "id": 3,
        "project": {"id": 1, "name": "Ops"},
        "tracker": {"id": 1, "name": "Bug"},
        "status": {"id": 1, "name": "New"},
        "priority": {"id": 2, "name": "Normal"},
        "author": {"id": 5, "name": "Ada"},
        "subject": "Fan noise",
        "created_on": "2024-01-01T00:00:00Z",
        "updated_on": "2024-01-01T00:00:00Z",
    }

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["X-Redmine-API-Key"] == "key"
        return httpx.Response(200, json={"issue": issue_json}, request=request)

    async def run():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, timeout=5.0) as http_client:
            redmine = AsyncRedmine(BASE_URL, auth=ApiKeyAuth("key"), http_client=http_client)
            return await redmine.json_response_body(Issue(id=3), model=models.Issue.from_dict)

    issue = asyncio.run(run())

    assert issue.subject == "Fan noise"
    assert issue.author.name == "Ada"


def test_async_status_and_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "DELETE":
            raise httpx.ConnectTimeout("timed out", request=request)
        return httpx.Response(404, json={"errors": ["Not found"]}, request=request)

    async def run():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, timeout=5.0) as http_client:
            redmine = AsyncRedmine(BASE_URL, auth=ApiKeyAuth("key"), http_client=http_client)
            with pytest.raises(StatusError) as status_info:
                await redmine.json_response_body(Issue(id=404))
            with pytest.raises(TransportError):
                await redmine.ignore_response_body(DeleteIssue(id=1))
            return status_info.value

    status_error = asyncio.run(run())

    assert status_error.status_code == 404


def test_async_capability_checked_before_iteration():
    seen = []

    async def run():
        transport = httpx.MockTransport(_paged_handler(10, 25, seen))
        async with httpx.AsyncClient(transport=transport, timeout=5.0) as http_client:
            redmine = AsyncRedmine(BASE_URL, auth=ApiKeyAuth("key"), http_client=http_client)
            with pytest.raises(EndpointCapabilityError):
                redmine.json_response_body_stream(Issue(id=1))  # type: ignore[arg-type]
            with pytest.raises(ValueError):
                redmine.json_response_body_stream(Issues(), page_size=0)
            with pytest.raises(EndpointCapabilityError):
                await redmine.json_response_body_all_pages(Issue(id=1))  # type: ignore[arg-type]

    asyncio.run(run())

    assert seen == []


def test_async_concurrent_callers_share_one_client():
    seen = []

    async def run():
        transport = httpx.MockTransport(_paged_handler(40, 10, seen))
        async with httpx.AsyncClient(transport=transport, timeout=5.0) as http_client:
            redmine = AsyncRedmine(BASE_URL, auth=ApiKeyAuth("key"), http_client=http_client)
            return await asyncio.gather(
                redmine.json_response_body_all_pages(Issues(), page_size=10),
                redmine.json_response_body_all_pages(Issues(project_id=[2]), page_size=10),
            )

    first, second = asyncio.run(run())

    assert first == second
    assert len(first) == 40
    assert len(seen) == 8
