"""Issue status endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_IssueStatuses
"""

from __future__ import annotations

from dataclasses import dataclass

from ..endpoint import ReturnsJsonResponse


@dataclass(frozen=True)
class IssueStatuses(ReturnsJsonResponse):
    entity = "issue_status"
    returns_collection = True

    def endpoint(self) -> str:
        return "issue_statuses.json"
