"""File upload endpoint.

The token returned by ``UploadFile`` has to be passed on to an issue
(``uploads=[UploadedAttachment(...)]``) or to ``CreateProjectFile`` before
the file becomes visible anywhere in Redmine.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from ..endpoint import OCTET_STREAM_CONTENT_TYPE, QueryParams, ReturnsJsonResponse
from ..errors import UploadFileError


@dataclass(frozen=True)
class UploadFile(ReturnsJsonResponse):
    entity = "upload"

    file: Path
    filename: Optional[str] = None

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "uploads.json"

    def upload_filename(self) -> str:
        return self.filename or Path(self.file).name

    def parameters(self) -> QueryParams:
        return QueryParams().push_opt("filename", self.upload_filename() or None)

    def body(self) -> Optional[Tuple[str, bytes]]:
        path = Path(self.file)
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise UploadFileError(path, exc.strerror or str(exc)) from exc
        return OCTET_STREAM_CONTENT_TYPE, content
