"""Health check and configuration tests"""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from developer_api.config import Settings
from developer_api.main import app
from developer_api.validators import RuleMode


def test_health_check(client: TestClient):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["dependencies"]["developer_validator"] == {
        "status": "healthy",
        "message": "2 rule sets",
    }


def test_health_reports_missing_validator(client: TestClient):
    del app.state.developer_validator
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "unhealthy"


def test_root(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["health"] == "/api/health"


def test_rule_mode_from_environment(monkeypatch):
    monkeypatch.setenv("FIRST_NAME_RULE_MODE", "accumulate")
    assert Settings().FIRST_NAME_RULE_MODE is RuleMode.ACCUMULATE


def test_default_settings():
    settings = Settings(_env_file=None)
    assert settings.FIRST_NAME_RULE_MODE is RuleMode.SHORT_CIRCUIT
    assert settings.PORT == 8000


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert Settings(_env_file=None).LOG_LEVEL == "warning"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
