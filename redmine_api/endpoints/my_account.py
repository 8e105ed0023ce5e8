"""The account the API key belongs to.

https://www.redmine.org/projects/redmine/wiki/Rest_MyAccount
"""

from __future__ import annotations

from dataclasses import dataclass

from ..endpoint import ReturnsJsonResponse


@dataclass(frozen=True)
class MyAccount(ReturnsJsonResponse):
    entity = "user"

    def endpoint(self) -> str:
        return "my/account.json"
