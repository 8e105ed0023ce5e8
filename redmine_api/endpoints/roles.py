"""Role endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_Roles
"""

from __future__ import annotations

from dataclasses import dataclass

from ..endpoint import ReturnsJsonResponse, path_segment


@dataclass(frozen=True)
class Roles(ReturnsJsonResponse):
    entity = "role"
    returns_collection = True

    def endpoint(self) -> str:
        return "roles.json"


@dataclass(frozen=True)
class Role(ReturnsJsonResponse):
    """A single role including its permissions."""

    entity = "role"

    id: int

    def endpoint(self) -> str:
        return f"roles/{path_segment(self.id)}.json"
