"""Version endpoints (a.k.a. target versions, ``fixed_version`` in the API).

https://www.redmine.org/projects/redmine/wiki/Rest_Versions
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple, Union

from ..endpoint import NoResponseBody, ReturnsJsonResponse, path_segment

ProjectIdOrName = Union[int, str]


class VersionStatus(str, Enum):
    OPEN = "open"
    LOCKED = "locked"
    CLOSED = "closed"


class VersionSharing(str, Enum):
    NONE = "none"
    DESCENDANTS = "descendants"
    HIERARCHY = "hierarchy"
    TREE = "tree"
    SYSTEM = "system"


@dataclass(frozen=True)
class Versions(ReturnsJsonResponse):
    entity = "version"
    returns_collection = True

    project_id_or_name: ProjectIdOrName

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/versions.json"


@dataclass(frozen=True)
class Version(ReturnsJsonResponse):
    entity = "version"

    id: int

    def endpoint(self) -> str:
        return f"versions/{path_segment(self.id)}.json"


@dataclass(frozen=True)
class CreateVersion(ReturnsJsonResponse):
    entity = "version"

    project_id_or_name: ProjectIdOrName
    name: str
    status: Optional[VersionStatus] = None
    sharing: Optional[VersionSharing] = None
    due_date: Optional[date] = None
    description: Optional[str] = None
    wiki_page_title: Optional[str] = None

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/versions.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("project_id_or_name"))


@dataclass(frozen=True)
class UpdateVersion(NoResponseBody):
    entity = "version"

    id: int
    name: Optional[str] = None
    status: Optional[VersionStatus] = None
    sharing: Optional[VersionSharing] = None
    due_date: Optional[date] = None
    description: Optional[str] = None
    wiki_page_title: Optional[str] = None

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"versions/{path_segment(self.id)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("id"))


@dataclass(frozen=True)
class DeleteVersion(NoResponseBody):
    id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"versions/{path_segment(self.id)}.json"
