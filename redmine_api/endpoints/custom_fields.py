"""Custom field definitions. Requires admin privileges.

https://www.redmine.org/projects/redmine/wiki/Rest_CustomFields
"""

from __future__ import annotations

from dataclasses import dataclass

from ..endpoint import ReturnsJsonResponse


@dataclass(frozen=True)
class CustomFields(ReturnsJsonResponse):
    entity = "custom_field"
    returns_collection = True

    def endpoint(self) -> str:
        return "custom_fields.json"
