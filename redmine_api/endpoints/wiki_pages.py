"""Wiki page endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_WikiPages
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..endpoint import NoResponseBody, QueryParams, ReturnsJsonResponse, path_segment
from .issues import UploadedAttachment

ProjectIdOrName = Union[int, str]


@dataclass(frozen=True)
class ProjectWikiPages(ReturnsJsonResponse):
    """Index of all wiki pages of a project; Redmine does not paginate it."""

    entity = "wiki_page"
    returns_collection = True

    project_id_or_name: ProjectIdOrName

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/wiki/index.json"


@dataclass(frozen=True)
class WikiPage(ReturnsJsonResponse):
    entity = "wiki_page"

    project_id_or_name: ProjectIdOrName
    title: str
    version: Optional[int] = None
    include_attachments: Optional[bool] = None

    def validate(self) -> None:
        if not self.title:
            raise self.fail("title must be non-empty")
        if self.version is not None and self.version <= 0:
            raise self.fail("version must be > 0")

    def endpoint(self) -> str:
        base = f"projects/{path_segment(self.project_id_or_name)}/wiki/{path_segment(self.title)}"
        if self.version is not None:
            return f"{base}/{path_segment(self.version)}.json"
        return f"{base}.json"

    def parameters(self) -> QueryParams:
        return QueryParams().push_opt("include", "attachments" if self.include_attachments else None)


@dataclass(frozen=True)
class CreateOrUpdateWikiPage(NoResponseBody):
    """Create a page, or update it when it exists.

    Redmine answers a create with 201 and the page, an update with 204; both
    are treated as bodiless here. Set ``version`` to guard against
    concurrent edits (409 on conflict).
    """

    entity = "wiki_page"

    project_id_or_name: ProjectIdOrName
    title: str
    text: str
    comments: Optional[str] = None
    version: Optional[int] = None
    parent_title: Optional[str] = None
    uploads: Optional[List[UploadedAttachment]] = None

    def validate(self) -> None:
        if not self.title:
            raise self.fail("title must be non-empty")

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/wiki/{path_segment(self.title)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("project_id_or_name", "title"))


@dataclass(frozen=True)
class DeleteWikiPage(NoResponseBody):
    project_id_or_name: ProjectIdOrName
    title: str

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/wiki/{path_segment(self.title)}.json"
