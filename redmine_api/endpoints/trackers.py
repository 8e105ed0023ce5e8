"""Tracker endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_Trackers
"""

from __future__ import annotations

from dataclasses import dataclass

from ..endpoint import ReturnsJsonResponse


@dataclass(frozen=True)
class Trackers(ReturnsJsonResponse):
    entity = "tracker"
    returns_collection = True

    def endpoint(self) -> str:
        return "trackers.json"
