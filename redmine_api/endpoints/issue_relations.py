"""Issue relation endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_IssueRelations
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..endpoint import NoResponseBody, ReturnsJsonResponse, path_segment


class RelationType(str, Enum):
    RELATES = "relates"
    DUPLICATES = "duplicates"
    DUPLICATED = "duplicated"
    BLOCKS = "blocks"
    BLOCKED = "blocked"
    PRECEDES = "precedes"
    FOLLOWS = "follows"
    COPIED_TO = "copied_to"
    COPIED_FROM = "copied_from"


@dataclass(frozen=True)
class IssueRelations(ReturnsJsonResponse):
    entity = "relation"
    returns_collection = True

    issue_id: int

    def endpoint(self) -> str:
        return f"issues/{path_segment(self.issue_id)}/relations.json"


@dataclass(frozen=True)
class IssueRelation(ReturnsJsonResponse):
    entity = "relation"

    id: int

    def endpoint(self) -> str:
        return f"relations/{path_segment(self.id)}.json"


@dataclass(frozen=True)
class CreateIssueRelation(ReturnsJsonResponse):
    entity = "relation"

    issue_id: int
    issue_to_id: int
    relation_type: RelationType = RelationType.RELATES
    delay: Optional[int] = None

    def validate(self) -> None:
        if self.issue_id == self.issue_to_id:
            raise self.fail("an issue cannot be related to itself")
        if self.delay is not None and self.relation_type not in (RelationType.PRECEDES, RelationType.FOLLOWS):
            raise self.fail("delay is only valid for precedes/follows relations")

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"issues/{path_segment(self.issue_id)}/relations.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("issue_id"))


@dataclass(frozen=True)
class DeleteIssueRelation(NoResponseBody):
    id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"relations/{path_segment(self.id)}.json"
