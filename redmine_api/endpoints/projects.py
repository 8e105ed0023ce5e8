"""Project endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_Projects
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..endpoint import NoResponseBody, Pageable, QueryParams, ReturnsJsonResponse, path_segment

ProjectIdOrName = Union[int, str]


class ProjectInclude(str, Enum):
    TRACKERS = "trackers"
    ISSUE_CATEGORIES = "issue_categories"
    ENABLED_MODULES = "enabled_modules"
    TIME_ENTRY_ACTIVITIES = "time_entry_activities"
    ISSUE_CUSTOM_FIELDS = "issue_custom_fields"


class ProjectStatus(int, Enum):
    ACTIVE = 1
    CLOSED = 5
    ARCHIVED = 9


@dataclass(frozen=True)
class Projects(Pageable, ReturnsJsonResponse):
    entity = "project"

    include: Optional[List[ProjectInclude]] = None
    status: Optional[ProjectStatus] = None

    def endpoint(self) -> str:
        return "projects.json"

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.push_opt("include", self.include)
        params.push_opt("status", self.status)
        return params


@dataclass(frozen=True)
class Project(ReturnsJsonResponse):
    entity = "project"

    project_id_or_name: ProjectIdOrName
    include: Optional[List[ProjectInclude]] = None

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}.json"

    def parameters(self) -> QueryParams:
        return QueryParams().push_opt("include", self.include)


@dataclass(frozen=True)
class ArchiveProject(NoResponseBody):
    project_id_or_name: ProjectIdOrName

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/archive.json"


@dataclass(frozen=True)
class UnarchiveProject(NoResponseBody):
    project_id_or_name: ProjectIdOrName

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/unarchive.json"


@dataclass(frozen=True)
class CreateProject(ReturnsJsonResponse):
    entity = "project"

    name: str
    identifier: str
    description: Optional[str] = None
    homepage: Optional[str] = None
    is_public: Optional[bool] = None
    parent_id: Optional[int] = None
    inherit_members: Optional[bool] = None
    default_assigned_to_id: Optional[int] = None
    default_version_id: Optional[int] = None
    tracker_ids: Optional[List[int]] = None
    enabled_module_names: Optional[List[str]] = None
    issue_custom_field_ids: Optional[List[int]] = None

    def validate(self) -> None:
        if not self.identifier or not self.identifier.strip():
            raise self.fail("identifier must be non-empty")

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "projects.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload())


@dataclass(frozen=True)
class UpdateProject(NoResponseBody):
    entity = "project"

    project_id_or_name: ProjectIdOrName
    name: Optional[str] = None
    identifier: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    is_public: Optional[bool] = None
    parent_id: Optional[int] = None
    inherit_members: Optional[bool] = None
    default_assigned_to_id: Optional[int] = None
    default_version_id: Optional[int] = None
    tracker_ids: Optional[List[int]] = None
    enabled_module_names: Optional[List[str]] = None
    issue_custom_field_ids: Optional[List[int]] = None

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("project_id_or_name"))


@dataclass(frozen=True)
class DeleteProject(NoResponseBody):
    project_id_or_name: ProjectIdOrName

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}.json"
