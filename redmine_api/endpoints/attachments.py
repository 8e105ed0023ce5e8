"""Attachment endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_Attachments
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..endpoint import NoResponseBody, ReturnsJsonResponse, path_segment


@dataclass(frozen=True)
class Attachment(ReturnsJsonResponse):
    entity = "attachment"

    id: int

    def endpoint(self) -> str:
        return f"attachments/{path_segment(self.id)}.json"


@dataclass(frozen=True)
class UpdateAttachment(NoResponseBody):
    entity = "attachment"

    id: int
    filename: Optional[str] = None
    description: Optional[str] = None

    def validate(self) -> None:
        if self.filename is None and self.description is None:
            raise self.fail("nothing to update; set filename or description")

    def method(self) -> str:
        return "PATCH"

    def endpoint(self) -> str:
        return f"attachments/{path_segment(self.id)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("id"))


@dataclass(frozen=True)
class DeleteAttachment(NoResponseBody):
    id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"attachments/{path_segment(self.id)}.json"
