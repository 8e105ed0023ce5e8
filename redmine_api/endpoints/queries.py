"""Saved query endpoint.

https://www.redmine.org/projects/redmine/wiki/Rest_Queries
"""

from __future__ import annotations

from dataclasses import dataclass

from ..endpoint import Pageable, ReturnsJsonResponse


@dataclass(frozen=True)
class Queries(Pageable, ReturnsJsonResponse):
    entity = "query"

    def endpoint(self) -> str:
        return "queries.json"
