import httpx
import pytest

from redmine_api.auth import ApiKeyAuth, BasicAuth
from redmine_api.client import Redmine
from redmine_api.env import auth_from_env, impersonate_user_id_from_env, redmine_url_from_env, require_env_config

_ENV_VARS = (
    "REDMINE_URL",
    "REDMINE_API_KEY",
    "REDMINE_USERNAME",
    "REDMINE_PASSWORD",
    "REDMINE_IMPERSONATE_USER_ID",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_api_key_takes_precedence(monkeypatch):
    monkeypatch.setenv("REDMINE_API_KEY", "k")
    monkeypatch.setenv("REDMINE_USERNAME", "u")
    monkeypatch.setenv("REDMINE_PASSWORD", "p")
    assert isinstance(auth_from_env(), ApiKeyAuth)


def test_basic_auth_from_env(monkeypatch):
    monkeypatch.setenv("REDMINE_USERNAME", "u")
    monkeypatch.setenv("REDMINE_PASSWORD", "p")
    assert isinstance(auth_from_env(), BasicAuth)


def test_no_credentials():
    assert auth_from_env() is None


def test_url_is_normalized(monkeypatch):
    monkeypatch.setenv("REDMINE_URL", " https://redmine.example.com/ ")
    assert redmine_url_from_env() == "https://redmine.example.com"


def test_impersonation_id(monkeypatch):
    assert impersonate_user_id_from_env() is None
    monkeypatch.setenv("REDMINE_IMPERSONATE_USER_ID", "12")
    assert impersonate_user_id_from_env() == 12
    monkeypatch.setenv("REDMINE_IMPERSONATE_USER_ID", "bob")
    with pytest.raises(ValueError):
        impersonate_user_id_from_env()


def test_require_env_config_reports_missing_values(monkeypatch):
    with pytest.raises(ValueError, match="REDMINE_URL"):
        require_env_config()
    monkeypatch.setenv("REDMINE_URL", "https://redmine.example.com")
    with pytest.raises(ValueError, match="REDMINE_API_KEY"):
        require_env_config()


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("REDMINE_URL", "https://redmine.example.com/")
    monkeypatch.setenv("REDMINE_API_KEY", "k")
    monkeypatch.setenv("REDMINE_IMPERSONATE_USER_ID", "5")

    transport = httpx.MockTransport(lambda request: httpx.Response(204, request=request))
    with httpx.Client(transport=transport, timeout=5.0) as http_client:
        client = Redmine.from_env(http_client=http_client)
        assert client.base_url == "https://redmine.example.com"
        assert client.impersonate_user_id == 5
        assert repr(client) == "Redmine(base_url='https://redmine.example.com', impersonate_user_id=5)"
