"""Issue endpoints, including watchers.

https://www.redmine.org/projects/redmine/wiki/Rest_Issues
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..endpoint import NoResponseBody, Pageable, QueryParams, ReturnsJsonResponse, path_segment


@dataclass(frozen=True)
class SortByColumn:
    column_name: str
    descending: bool = False

    def __str__(self) -> str:
        return f"{self.column_name}:desc" if self.descending else self.column_name


class IssueListInclude(str, Enum):
    ATTACHMENTS = "attachments"
    RELATIONS = "relations"


class IssueInclude(str, Enum):
    CHILDREN = "children"
    ATTACHMENTS = "attachments"
    RELATIONS = "relations"
    CHANGESETS = "changesets"
    JOURNALS = "journals"
    WATCHERS = "watchers"
    ALLOWED_STATUSES = "allowed_statuses"


class StatusFilter(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    ALL = "*"


@dataclass(frozen=True)
class CustomFieldValue:
    id: int
    value: str
    name: Optional[str] = None


@dataclass(frozen=True)
class UploadedAttachment:
    token: str
    filename: str
    content_type: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Issues(Pageable, ReturnsJsonResponse):
    entity = "issue"

    include: Optional[List[IssueListInclude]] = None
    sort: Optional[List[SortByColumn]] = None
    issue_id: Optional[List[int]] = None
    project_id: Optional[List[int]] = None
    subproject_id: Optional[List[int]] = None
    tracker_id: Optional[List[int]] = None
    status_id: Optional[List[int]] = None
    status: Optional[StatusFilter] = None
    category_id: Optional[List[int]] = None
    priority_id: Optional[List[int]] = None
    author_id: Optional[List[int]] = None
    assigned_to_id: Optional[List[int]] = None
    fixed_version_id: Optional[List[int]] = None
    parent_id: Optional[List[int]] = None
    is_private: Optional[bool] = None
    subject: Optional[str] = None
    custom_fields: Optional[Sequence[Tuple[int, str]]] = None

    def validate(self) -> None:
        if self.status is not None and self.status_id is not None:
            raise self.fail("status and status_id are mutually exclusive")
        for field_id, value in self.custom_fields or ():
            if value is None:
                raise self.fail(f"custom field filter cf_{field_id} needs a value")

    def endpoint(self) -> str:
        return "issues.json"

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.push_opt("include", self.include)
        params.push_opt("sort", self.sort)
        params.push_opt("issue_id", self.issue_id)
        params.push_opt("project_id", self.project_id)
        params.push_opt("subproject_id", self.subproject_id)
        params.push_opt("tracker_id", self.tracker_id)
        params.push_opt("status_id", self.status if self.status is not None else self.status_id)
        params.push_opt("category_id", self.category_id)
        params.push_opt("priority_id", self.priority_id)
        params.push_opt("author_id", self.author_id)
        params.push_opt("assigned_to_id", self.assigned_to_id)
        params.push_opt("fixed_version_id", self.fixed_version_id)
        params.push_opt("parent_id", self.parent_id)
        params.push_opt("is_private", self.is_private)
        params.push_opt("subject", self.subject)
        for field_id, value in self.custom_fields or ():
            params.push(f"cf_{field_id}", value)
        return params


@dataclass(frozen=True)
class Issue(ReturnsJsonResponse):
    entity = "issue"

    id: int
    include: Optional[List[IssueInclude]] = None

    def endpoint(self) -> str:
        return f"issues/{path_segment(self.id)}.json"

    def parameters(self) -> QueryParams:
        return QueryParams().push_opt("include", self.include)


@dataclass(frozen=True)
class CreateIssue(ReturnsJsonResponse):
    entity = "issue"

    project_id: int
    tracker_id: Optional[int] = None
    status_id: Optional[int] = None
    priority_id: Optional[int] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    fixed_version_id: Optional[int] = None
    assigned_to_id: Optional[int] = None
    parent_issue_id: Optional[int] = None
    custom_fields: Optional[List[CustomFieldValue]] = None
    watcher_user_ids: Optional[List[int]] = None
    is_private: Optional[bool] = None
    estimated_hours: Optional[float] = None
    uploads: Optional[List[UploadedAttachment]] = None

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "issues.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload())


@dataclass(frozen=True)
class UpdateIssue(NoResponseBody):
    entity = "issue"

    id: int
    project_id: Optional[int] = None
    tracker_id: Optional[int] = None
    status_id: Optional[int] = None
    priority_id: Optional[int] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    fixed_version_id: Optional[int] = None
    assigned_to_id: Optional[int] = None
    parent_issue_id: Optional[int] = None
    custom_fields: Optional[List[CustomFieldValue]] = None
    watcher_user_ids: Optional[List[int]] = None
    is_private: Optional[bool] = None
    estimated_hours: Optional[float] = None
    notes: Optional[str] = None
    private_notes: Optional[bool] = None
    uploads: Optional[List[UploadedAttachment]] = None

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"issues/{path_segment(self.id)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("id"))


@dataclass(frozen=True)
class DeleteIssue(NoResponseBody):
    id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"issues/{path_segment(self.id)}.json"


@dataclass(frozen=True)
class AddWatcher(NoResponseBody):
    issue_id: int
    user_id: int

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"issues/{path_segment(self.issue_id)}/watchers.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body({"user_id": self.user_id})


@dataclass(frozen=True)
class RemoveWatcher(NoResponseBody):
    issue_id: int
    user_id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"issues/{path_segment(self.issue_id)}/watchers/{path_segment(self.user_id)}.json"
