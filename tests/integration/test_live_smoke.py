import logging
import os
from pathlib import Path

import pytest

from redmine_api import Redmine, models
from redmine_api.endpoints.issues import Issues
from redmine_api.endpoints.projects import Projects
from redmine_api.endpoints.users import User
from redmine_api.env import auth_from_env, redmine_url_from_env

pytestmark = pytest.mark.integration


def _load_dotenv_if_present() -> None:
    env_path = Path(__file__).resolve().parents[2] / ".env"
    if not env_path.exists():
        return
    for raw in env_path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key or key in os.environ:
            continue
        value = value.strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        os.environ[key] = value


@pytest.fixture
def live_client():
    _load_dotenv_if_present()
    base_url = redmine_url_from_env()
    auth = auth_from_env()
    if not base_url or auth is None:
        pytest.skip("Integration credentials not provided")

    client = Redmine(base_url, auth, logger=logging.getLogger("redmine_api.integration"))
    yield client
    client.close()


def test_live_current_user(live_client):
    user = live_client.json_response_body(User(id="current"), model=models.User.from_dict)
    assert user.id > 0


def test_live_projects_pagination(live_client, caplog):
    with caplog.at_level(logging.DEBUG):
        first_page = live_client.json_response_body_page(Projects(), offset=0, limit=2)
        streamed = []
        for project in live_client.json_response_body_stream(Projects(), model=models.Project.from_dict, page_size=2):
            streamed.append(project)
            if len(streamed) >= 5:
                break

    assert first_page.limit > 0
    assert len(streamed) == min(5, first_page.total_count)
    assert any(rec.message == "Redmine request completed" for rec in caplog.records)


def test_live_issue_stream_matches_total(live_client):
    page = live_client.json_response_body_page(Issues(), offset=0, limit=1)
    if page.total_count > 300:
        pytest.skip("Too many issues for a full traversal")
    issues = live_client.json_response_body_all_pages(Issues(), page_size=100)
    assert len(issues) == page.total_count
