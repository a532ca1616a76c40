"""Shared fixtures for the Developer API test suite."""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from developer_api.main import app
from developer_api.models.requests import Developer
from developer_api.validators import build_developer_validator


@pytest.fixture(scope="function")
def client() -> TestClient:
    """FastAPI TestClient with the lifespan (validator construction) applied."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def validator():
    """Developer validator in the default short-circuit mode."""
    return build_developer_validator()


@pytest.fixture(scope="function")
def valid_payload() -> Dict[str, Any]:
    return {"FirstName": "Al", "Email": "al@example.com"}


@pytest.fixture(scope="function")
def valid_developer(valid_payload) -> Developer:
    return Developer(**valid_payload)
