"""Project membership endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_Memberships
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..endpoint import NoResponseBody, Pageable, ReturnsJsonResponse, path_segment

ProjectIdOrName = Union[int, str]


@dataclass(frozen=True)
class ProjectMemberships(Pageable, ReturnsJsonResponse):
    entity = "membership"

    project_id_or_name: ProjectIdOrName

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/memberships.json"


@dataclass(frozen=True)
class ProjectMembership(ReturnsJsonResponse):
    entity = "membership"

    id: int

    def endpoint(self) -> str:
        return f"memberships/{path_segment(self.id)}.json"


@dataclass(frozen=True)
class CreateProjectMembership(ReturnsJsonResponse):
    """Add a user or group (``user_id`` accepts group ids too) to a project."""

    entity = "membership"

    project_id_or_name: ProjectIdOrName
    user_id: int
    role_ids: List[int]

    def validate(self) -> None:
        if not self.role_ids:
            raise self.fail("role_ids must be non-empty")

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/memberships.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("project_id_or_name"))


@dataclass(frozen=True)
class UpdateProjectMembership(NoResponseBody):
    entity = "membership"

    id: int
    role_ids: List[int]

    def validate(self) -> None:
        if not self.role_ids:
            raise self.fail("role_ids must be non-empty")

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"memberships/{path_segment(self.id)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("id"))


@dataclass(frozen=True)
class DeleteProjectMembership(NoResponseBody):
    id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"memberships/{path_segment(self.id)}.json"
