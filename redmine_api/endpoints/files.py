"""Project file endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_Files
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..endpoint import NoResponseBody, ReturnsJsonResponse, path_segment

ProjectIdOrName = Union[int, str]


@dataclass(frozen=True)
class ProjectFiles(ReturnsJsonResponse):
    entity = "file"
    returns_collection = True

    project_id_or_name: ProjectIdOrName

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/files.json"


@dataclass(frozen=True)
class CreateProjectFile(NoResponseBody):
    """Attach a previously uploaded file (see ``UploadFile``) to a project."""

    entity = "file"

    project_id_or_name: ProjectIdOrName
    token: str
    version_id: Optional[int] = None
    filename: Optional[str] = None
    description: Optional[str] = None

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/files.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("project_id_or_name"))
