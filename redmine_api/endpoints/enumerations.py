"""Enumeration endpoints (issue priorities, time entry activities).

https://www.redmine.org/projects/redmine/wiki/Rest_Enumerations
"""

from __future__ import annotations

from dataclasses import dataclass

from ..endpoint import ReturnsJsonResponse


@dataclass(frozen=True)
class IssuePriorities(ReturnsJsonResponse):
    entity = "issue_priority"
    returns_collection = True

    def endpoint(self) -> str:
        return "enumerations/issue_priorities.json"


@dataclass(frozen=True)
class TimeEntryActivities(ReturnsJsonResponse):
    entity = "time_entry_activity"
    returns_collection = True

    def endpoint(self) -> str:
        return "enumerations/time_entry_activities.json"
