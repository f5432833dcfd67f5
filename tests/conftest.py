"""Shared fixtures: stores (memory and SQLite), Flask app and test client, payload factories."""

from __future__ import annotations

from typing import Callable

import pytest

import workout_core
from app import create_app
from workout_app.database import DatabaseStorage
from workout_app.storage import MemoryStorage


@pytest.fixture(autouse=True)
def action_log(tmp_path, monkeypatch):
    """Keep the action log out of the repository during tests."""
    path = tmp_path / "actions.jsonl"
    monkeypatch.setattr(workout_core, "LOG_FILE", str(path))
    return path


def _sqlite_storage(tmp_path, seed: bool) -> DatabaseStorage:
    storage = DatabaseStorage(f"sqlite:///{tmp_path / 'workouts.db'}")
    storage.create_all()
    if seed:
        storage.seed_defaults()
    return storage


@pytest.fixture(params=["memory", "database"])
def storage(request, tmp_path):
    """Seeded store; every test using it runs against both backends."""
    if request.param == "memory":
        yield MemoryStorage()
    else:
        db = _sqlite_storage(tmp_path, seed=True)
        yield db
        db.dispose()


@pytest.fixture(params=["memory", "database"])
def empty_storage(request, tmp_path):
    if request.param == "memory":
        yield MemoryStorage(seed=False)
    else:
        db = _sqlite_storage(tmp_path, seed=False)
        yield db
        db.dispose()


@pytest.fixture
def app(action_log):
    app = create_app(storage=MemoryStorage(), config={"ACTION_LOG_FILE": str(action_log)})
    app.testing = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def day_payload() -> Callable[..., dict]:
    def make(**overrides) -> dict:
        payload = {"dayNumber": 6, "title": "Arms", "focus": "Pump"}
        payload.update(overrides)
        return payload

    return make


@pytest.fixture
def exercise_payload() -> Callable[..., dict]:
    """Factory for a valid camelCase exercise insert payload."""

    def make(workout_day_id: str, **overrides) -> dict:
        payload = {
            "workoutDayId": workout_day_id,
            "name": "Cable Chest Fly",
            "sets": 3,
            "reps": "8-12",
            "rpe": "RPE 7-8",
            "progressionRule": "Top of range twice → +5 lb",
            "videoUrl": "https://example.com/fly",
            "order": 1,
        }
        payload.update(overrides)
        return payload

    return make
