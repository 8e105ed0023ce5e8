"""Group endpoints. Requires admin privileges.

https://www.redmine.org/projects/redmine/wiki/Rest_Groups
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..endpoint import NoResponseBody, QueryParams, ReturnsJsonResponse, path_segment


class GroupInclude(str, Enum):
    USERS = "users"
    MEMBERSHIPS = "memberships"


@dataclass(frozen=True)
class Groups(ReturnsJsonResponse):
    entity = "group"
    returns_collection = True

    def endpoint(self) -> str:
        return "groups.json"


@dataclass(frozen=True)
class Group(ReturnsJsonResponse):
    entity = "group"

    id: int
    include: Optional[List[GroupInclude]] = None

    def endpoint(self) -> str:
        return f"groups/{path_segment(self.id)}.json"

    def parameters(self) -> QueryParams:
        return QueryParams().push_opt("include", self.include)


@dataclass(frozen=True)
class CreateGroup(ReturnsJsonResponse):
    entity = "group"

    name: str
    user_ids: Optional[List[int]] = None

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "groups.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload())


@dataclass(frozen=True)
class UpdateGroup(NoResponseBody):
    entity = "group"

    id: int
    name: Optional[str] = None
    user_ids: Optional[List[int]] = None

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"groups/{path_segment(self.id)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("id"))


@dataclass(frozen=True)
class DeleteGroup(NoResponseBody):
    id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"groups/{path_segment(self.id)}.json"


@dataclass(frozen=True)
class AddGroupUser(NoResponseBody):
    group_id: int
    user_id: int

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"groups/{path_segment(self.group_id)}/users.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body({"user_id": self.user_id})


@dataclass(frozen=True)
class RemoveGroupUser(NoResponseBody):
    group_id: int
    user_id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"groups/{path_segment(self.group_id)}/users/{path_segment(self.user_id)}.json"
