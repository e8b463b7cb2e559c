"""Shared test fixtures."""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """FastAPI TestClient with the lifespan run (fresh rig per test)."""
    with TestClient(app) as test_client:
        yield test_client
