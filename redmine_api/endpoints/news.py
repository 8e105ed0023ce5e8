"""News endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_News
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..endpoint import Pageable, ReturnsJsonResponse, path_segment


@dataclass(frozen=True)
class News(Pageable, ReturnsJsonResponse):
    entity = "news"

    def endpoint(self) -> str:
        return "news.json"


@dataclass(frozen=True)
class ProjectNews(Pageable, ReturnsJsonResponse):
    entity = "news"

    project_id_or_name: Union[int, str]

    def endpoint(self) -> str:
        return f"projects/{path_segment(self.project_id_or_name)}/news.json"
