from __future__ import annotations

import pytest

from src.overtime_tracker.overtime_tracker.container import build_container
from src.overtime_tracker.overtime_tracker.main import create_app
from src.overtime_tracker.overtime_tracker.records.json_repository import JsonFileRecordRepository


@pytest.fixture
def json_repo(tmp_path):
    return JsonFileRecordRepository(tmp_path / "records.json")


@pytest.fixture
def container(json_repo):
    return build_container(records_repo=json_repo, default_wage=10000)


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()
