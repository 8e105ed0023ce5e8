from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _require_dict(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{path} must be a JSON object")
    return value


def _require_int(data: Dict[str, Any], key: str, path: str) -> int:
    value = data.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{path}.{key} is required and must be an integer")
    return value


def _require_str(data: Dict[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{path}.{key} is required")
    return value


def _opt_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _opt_int(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _opt_float(data: Dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return None


def _opt_ref(data: Dict[str, Any], key: str, path: str) -> Optional["IdName"]:
    value = data.get(key)
    if value is None:
        return None
    return IdName.from_dict(value, f"{path}.{key}")


@dataclass(frozen=True)
class IdName:
    """Reference to another Redmine object as embedded in responses (``{"id": 1, "name": "Bug"}``)."""

    id: int
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "ref") -> "IdName":
        data = _require_dict(data, path)
        return cls(id=_require_int(data, "id", path), name=_opt_str(data, "name"))


@dataclass(frozen=True)
class Issue:
    id: int
    project: IdName
    tracker: IdName
    status: IdName
    priority: IdName
    author: IdName
    subject: str
    created_on: str
    updated_on: str
    description: Optional[str] = None
    assigned_to: Optional[IdName] = None
    category: Optional[IdName] = None
    fixed_version: Optional[IdName] = None
    parent_id: Optional[int] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    done_ratio: Optional[int] = None
    is_private: Optional[bool] = None
    estimated_hours: Optional[float] = None
    closed_on: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Issue":
        data = _require_dict(data, "issue")
        parent = data.get("parent")
        return cls(
            id=_require_int(data, "id", "issue"),
            project=IdName.from_dict(data.get("project"), "issue.project"),
            tracker=IdName.from_dict(data.get("tracker"), "issue.tracker"),
            status=IdName.from_dict(data.get("status"), "issue.status"),
            priority=IdName.from_dict(data.get("priority"), "issue.priority"),
            author=IdName.from_dict(data.get("author"), "issue.author"),
            subject=_require_str(data, "subject", "issue"),
            created_on=_require_str(data, "created_on", "issue"),
            updated_on=_require_str(data, "updated_on", "issue"),
            description=_opt_str(data, "description"),
            assigned_to=_opt_ref(data, "assigned_to", "issue"),
            category=_opt_ref(data, "category", "issue"),
            fixed_version=_opt_ref(data, "fixed_version", "issue"),
            parent_id=_opt_int(parent, "id") if isinstance(parent, dict) else None,
            start_date=_opt_str(data, "start_date"),
            due_date=_opt_str(data, "due_date"),
            done_ratio=_opt_int(data, "done_ratio"),
            is_private=data.get("is_private") if isinstance(data.get("is_private"), bool) else None,
            estimated_hours=_opt_float(data, "estimated_hours"),
            closed_on=_opt_str(data, "closed_on"),
        )


@dataclass(frozen=True)
class Project:
    id: int
    name: str
    identifier: str
    description: Optional[str] = None
    homepage: Optional[str] = None
    status: Optional[int] = None
    is_public: Optional[bool] = None
    parent: Optional[IdName] = None
    created_on: Optional[str] = None
    updated_on: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Project":
        data = _require_dict(data, "project")
        is_public = data.get("is_public")
        return cls(
            id=_require_int(data, "id", "project"),
            name=_require_str(data, "name", "project"),
            identifier=_require_str(data, "identifier", "project"),
            description=_opt_str(data, "description"),
            homepage=_opt_str(data, "homepage"),
            status=_opt_int(data, "status"),
            is_public=is_public if isinstance(is_public, bool) else None,
            parent=_opt_ref(data, "parent", "project"),
            created_on=_opt_str(data, "created_on"),
            updated_on=_opt_str(data, "updated_on"),
        )


@dataclass(frozen=True)
class User:
    id: int
    login: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    mail: Optional[str] = None
    admin: Optional[bool] = None
    status: Optional[int] = None
    created_on: Optional[str] = None
    last_login_on: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        data = _require_dict(data, "user")
        admin = data.get("admin")
        return cls(
            id=_require_int(data, "id", "user"),
            login=_opt_str(data, "login"),
            firstname=_opt_str(data, "firstname"),
            lastname=_opt_str(data, "lastname"),
            mail=_opt_str(data, "mail"),
            admin=admin if isinstance(admin, bool) else None,
            status=_opt_int(data, "status"),
            created_on=_opt_str(data, "created_on"),
            last_login_on=_opt_str(data, "last_login_on"),
        )

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.firstname, self.lastname) if p]
        if parts:
            return " ".join(parts)
        return self.login or str(self.id)


@dataclass(frozen=True)
class TimeEntry:
    id: int
    project: IdName
    user: IdName
    activity: IdName
    hours: float
    spent_on: str
    issue_id: Optional[int] = None
    comments: Optional[str] = None
    created_on: Optional[str] = None
    updated_on: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "TimeEntry":
        data = _require_dict(data, "time_entry")
        hours = _opt_float(data, "hours")
        if hours is None:
            raise ValueError("time_entry.hours is required")
        issue = data.get("issue")
        return cls(
            id=_require_int(data, "id", "time_entry"),
            project=IdName.from_dict(data.get("project"), "time_entry.project"),
            user=IdName.from_dict(data.get("user"), "time_entry.user"),
            activity=IdName.from_dict(data.get("activity"), "time_entry.activity"),
            hours=hours,
            spent_on=_require_str(data, "spent_on", "time_entry"),
            issue_id=_opt_int(issue, "id") if isinstance(issue, dict) else None,
            comments=_opt_str(data, "comments"),
            created_on=_opt_str(data, "created_on"),
            updated_on=_opt_str(data, "updated_on"),
        )


@dataclass(frozen=True)
class Attachment:
    id: int
    filename: str
    filesize: int
    content_url: Optional[str] = None
    content_type: Optional[str] = None
    description: Optional[str] = None
    author: Optional[IdName] = None
    created_on: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Attachment":
        data = _require_dict(data, "attachment")
        return cls(
            id=_require_int(data, "id", "attachment"),
            filename=_require_str(data, "filename", "attachment"),
            filesize=_require_int(data, "filesize", "attachment"),
            content_url=_opt_str(data, "content_url"),
            content_type=_opt_str(data, "content_type"),
            description=_opt_str(data, "description"),
            author=_opt_ref(data, "author", "attachment"),
            created_on=_opt_str(data, "created_on"),
        )


@dataclass(frozen=True)
class UploadToken:
    token: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "UploadToken":
        data = _require_dict(data, "upload")
        return cls(token=_require_str(data, "token", "upload"), id=_opt_int(data, "id"))


@dataclass(frozen=True)
class WikiPage:
    title: str
    version: Optional[int] = None
    text: Optional[str] = None
    parent_title: Optional[str] = None
    author: Optional[IdName] = None
    comments: Optional[str] = None
    created_on: Optional[str] = None
    updated_on: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "WikiPage":
        data = _require_dict(data, "wiki_page")
        parent = data.get("parent")
        return cls(
            title=_require_str(data, "title", "wiki_page"),
            version=_opt_int(data, "version"),
            text=_opt_str(data, "text"),
            parent_title=_opt_str(parent, "title") if isinstance(parent, dict) else None,
            author=_opt_ref(data, "author", "wiki_page"),
            comments=_opt_str(data, "comments"),
            created_on=_opt_str(data, "created_on"),
            updated_on=_opt_str(data, "updated_on"),
        )
