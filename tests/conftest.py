# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from todo_api.core.config import Settings
from todo_api.domain.repositories import TaskStore
from todo_api.domain.services import TaskService
from todo_api.main import create_app


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def service(store: TaskStore) -> TaskService:
    return TaskService(store)


@pytest.fixture()
def app(store: TaskStore):
    """Application sans tâches d'exemple, branchée sur le store du test."""
    return create_app(Settings(SEED_EXAMPLE_TASKS=False, ENV="test"), store=store)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
