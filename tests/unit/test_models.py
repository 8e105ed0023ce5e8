import pytest

from redmine_api.models import Attachment, IdName, Issue, Project, TimeEntry, UploadToken, User, WikiPage


def test_issue_from_dict_maps_nested_refs():
    issue = Issue.from_dict(
        {
            "id": 7,
            "project": {"id": 1, "name": "Ops"},
            "tracker": {"id": 2, "name": "Feature"},
            "status": {"id": 3, "name": "Resolved", "is_closed": False},
            "priority": {"id": 4, "name": "High"},
            "author": {"id": 5, "name": "Ada Lovelace"},
            "assigned_to": {"id": 6, "name": "Grace Hopper"},
            "parent": {"id": 2},
            "subject": "Add dark mode",
            "done_ratio": 40,
            "estimated_hours": 3,
            "is_private": False,
            "created_on": "2024-01-01T00:00:00Z",
            "updated_on": "2024-01-03T00:00:00Z",
        }
    )

    assert issue.assigned_to == IdName(id=6, name="Grace Hopper")
    assert issue.parent_id == 2
    assert issue.estimated_hours == 3.0
    assert issue.is_private is False
    assert issue.category is None


def test_issue_from_dict_requires_core_fields():
    with pytest.raises(ValueError):
        Issue.from_dict({"id": 7, "subject": "x"})
    with pytest.raises(ValueError):
        Issue.from_dict(["not", "an", "object"])


def test_project_and_user_models():
    project = Project.from_dict({"id": 1, "name": "Ops", "identifier": "ops", "status": 1, "parent": {"id": 9}})
    assert project.parent == IdName(id=9)
    assert project.is_public is None

    user = User.from_dict({"id": 3, "login": "ada", "firstname": "Ada", "lastname": "Lovelace"})
    assert user.display_name == "Ada Lovelace"
    assert User.from_dict({"id": 4, "login": "svc"}).display_name == "svc"


def test_id_must_be_an_integer():
    with pytest.raises(ValueError):
        IdName.from_dict({"id": "1"})
    with pytest.raises(ValueError):
        IdName.from_dict({"id": True})


def test_time_entry_requires_hours():
    data = {
        "id": 1,
        "project": {"id": 1},
        "user": {"id": 2},
        "activity": {"id": 3, "name": "Dev"},
        "hours": 0.5,
        "spent_on": "2024-02-01",
        "issue": {"id": 11},
    }
    entry = TimeEntry.from_dict(data)
    assert entry.issue_id == 11
    assert entry.hours == 0.5

    with pytest.raises(ValueError):
        TimeEntry.from_dict({**data, "hours": None})


def test_attachment_upload_and_wiki_models():
    attachment = Attachment.from_dict({"id": 2, "filename": "a.png", "filesize": 120, "author": {"id": 1, "name": "A"}})
    assert attachment.author.name == "A"

    assert UploadToken.from_dict({"token": "7.ed32", "id": 7}) == UploadToken(token="7.ed32", id=7)
    with pytest.raises(ValueError):
        UploadToken.from_dict({"id": 7})

    page = WikiPage.from_dict({"title": "Child", "parent": {"title": "Start"}, "version": 2})
    assert page.parent_title == "Start"
    assert page.version == 2
