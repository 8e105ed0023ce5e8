"""Time entry endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_TimeEntries
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple, Union

from ..endpoint import NoResponseBody, Pageable, QueryParams, ReturnsJsonResponse, path_segment


@dataclass(frozen=True)
class TimeEntries(Pageable, ReturnsJsonResponse):
    entity = "time_entry"

    user_id: Optional[int] = None
    project_id_or_name: Optional[Union[int, str]] = None
    issue_id: Optional[int] = None
    activity_id: Optional[int] = None
    spent_on: Optional[date] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None

    def validate(self) -> None:
        if self.from_date and self.to_date and self.from_date > self.to_date:
            raise self.fail("from_date must not be after to_date")

    def endpoint(self) -> str:
        return "time_entries.json"

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.push_opt("user_id", self.user_id)
        params.push_opt("project_id", self.project_id_or_name)
        params.push_opt("issue_id", self.issue_id)
        params.push_opt("activity_id", self.activity_id)
        params.push_opt("spent_on", self.spent_on)
        params.push_opt("from", self.from_date)
        params.push_opt("to", self.to_date)
        return params


@dataclass(frozen=True)
class TimeEntry(ReturnsJsonResponse):
    entity = "time_entry"

    id: int

    def endpoint(self) -> str:
        return f"time_entries/{path_segment(self.id)}.json"


@dataclass(frozen=True)
class CreateTimeEntry(ReturnsJsonResponse):
    entity = "time_entry"

    issue_id: Optional[int] = None
    project_id: Optional[int] = None
    spent_on: Optional[date] = None
    hours: Optional[float] = None
    activity_id: Optional[int] = None
    comments: Optional[str] = None
    user_id: Optional[int] = None

    def validate(self) -> None:
        if self.issue_id is None and self.project_id is None:
            raise self.fail("either issue_id or project_id needs to be specified")
        if self.hours is not None and self.hours <= 0:
            raise self.fail("hours must be > 0")

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "time_entries.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload())


@dataclass(frozen=True)
class UpdateTimeEntry(NoResponseBody):
    entity = "time_entry"

    id: int
    issue_id: Optional[int] = None
    project_id: Optional[int] = None
    spent_on: Optional[date] = None
    hours: Optional[float] = None
    activity_id: Optional[int] = None
    comments: Optional[str] = None
    user_id: Optional[int] = None

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"time_entries/{path_segment(self.id)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("id"))


@dataclass(frozen=True)
class DeleteTimeEntry(NoResponseBody):
    id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"time_entries/{path_segment(self.id)}.json"
