"""User endpoints.

https://www.redmine.org/projects/redmine/wiki/Rest_Users
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..endpoint import NoResponseBody, Pageable, QueryParams, ReturnsJsonResponse, path_segment


class UserStatus(str, Enum):
    ACTIVE = "1"
    REGISTERED = "2"
    LOCKED = "3"
    ANY = ""


class UserInclude(str, Enum):
    MEMBERSHIPS = "memberships"
    GROUPS = "groups"


class MailNotification(str, Enum):
    ALL = "all"
    SELECTED = "selected"
    ONLY_MY_EVENTS = "only_my_events"
    ONLY_ASSIGNED = "only_assigned"
    ONLY_OWNER = "only_owner"
    NONE = "none"


@dataclass(frozen=True)
class Users(Pageable, ReturnsJsonResponse):
    entity = "user"

    status: Optional[UserStatus] = None
    name: Optional[str] = None
    group_id: Optional[int] = None

    def endpoint(self) -> str:
        return "users.json"

    def parameters(self) -> QueryParams:
        params = QueryParams()
        params.push_opt("status", self.status)
        params.push_opt("name", self.name)
        params.push_opt("group_id", self.group_id)
        return params


@dataclass(frozen=True)
class User(ReturnsJsonResponse):
    """A single user; ``id="current"`` returns the user the API key belongs to."""

    entity = "user"

    id: Union[int, str]
    include: Optional[List[UserInclude]] = None

    def endpoint(self) -> str:
        return f"users/{path_segment(self.id)}.json"

    def parameters(self) -> QueryParams:
        return QueryParams().push_opt("include", self.include)


@dataclass(frozen=True)
class CreateUser(ReturnsJsonResponse):
    entity = "user"

    login: str
    firstname: str
    lastname: str
    mail: str
    password: Optional[str] = None
    generate_password: Optional[bool] = None
    auth_source_id: Optional[int] = None
    mail_notification: Optional[MailNotification] = None
    must_change_passwd: Optional[bool] = None
    admin: Optional[bool] = None
    send_information: Optional[bool] = None

    def validate(self) -> None:
        if self.password is not None and self.generate_password:
            raise self.fail("password and generate_password are mutually exclusive")

    def method(self) -> str:
        return "POST"

    def endpoint(self) -> str:
        return "users.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        user = self.payload("send_information")
        document = {"user": user}
        if self.send_information is not None:
            document["send_information"] = self.send_information
        return self.json_body(document, wrapper_key="")


@dataclass(frozen=True)
class UpdateUser(NoResponseBody):
    entity = "user"

    id: int
    login: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    mail: Optional[str] = None
    password: Optional[str] = None
    auth_source_id: Optional[int] = None
    mail_notification: Optional[MailNotification] = None
    must_change_passwd: Optional[bool] = None
    admin: Optional[bool] = None

    def method(self) -> str:
        return "PUT"

    def endpoint(self) -> str:
        return f"users/{path_segment(self.id)}.json"

    def body(self) -> Optional[Tuple[str, bytes]]:
        return self.json_body(self.payload("id"))


@dataclass(frozen=True)
class DeleteUser(NoResponseBody):
    id: int

    def method(self) -> str:
        return "DELETE"

    def endpoint(self) -> str:
        return f"users/{path_segment(self.id)}.json"
