"""Issue category endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_IssueCategories
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..endpoint import NoResponseBody, QueryParams, ReturnsJsonResponse, path_segment

ProjectIdOrName = Union[int, str]


@dataclass(frozen=True)
class ProjectIssueCategories(ReturnsJsonResponse):
    entity = "issue_category"
    returns_collection = True

    project_id_or_name: ProjectIdOrName

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/issue_categories.json"


@dataclass(frozen=True)
class IssueCategory(ReturnsJsonResponse):
    entity = "issue_category"

    id: int

    def endpoint(self) -> str:
        return f"issue_categories/{path_segment(self.id)}.json"


@dataclass(frozen=True)
class CreateIssueCategory(ReturnsJsonResponse):
    entity = "issue_category"

    project_id_or_name: ProjectIdOrName
    name: str
    assigned_to_id: Optional[int] = None

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/issue_categories.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("project_id_or_name"))


@dataclass(frozen=True)
class UpdateIssueCategory(NoResponseBody):
    entity = "issue_category"

    id: int
    name: Optional[str] = None
    assigned_to_id: Optional[int] = None

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"issue_categories/{path_segment(self.id)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("id"))


@dataclass(frozen=True)
class DeleteIssueCategory(NoResponseBody):
    """Delete a category; issues using it are moved to ``reassign_to_id`` if given."""

    id: int
    reassign_to_id: Optional[int] = None

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"issue_categories/{path_segment(self.id)}.json"

    def parameters(self) -> QueryParams:
        return QueryParams().push_opt("reassign_to_id", self.reassign_to_id)
