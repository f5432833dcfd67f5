"""Tests for app configuration (storage selection) and the init_db script."""

from __future__ import annotations

import pytest

import init_db
from app import build_storage, create_app
from workout_app.database import DatabaseStorage
from workout_app.errors import ConfigurationError
from workout_app.storage import MemoryStorage


class TestBuildStorage:
    def test_memory_is_default(self) -> None:
        assert isinstance(build_storage({}), MemoryStorage)

    def test_kind_is_case_insensitive(self) -> None:
        assert isinstance(build_storage({"WORKOUT_STORAGE": " Memory "}), MemoryStorage)

    def test_database_seeds_once(self, tmp_path) -> None:
        config = {"WORKOUT_STORAGE": "database", "DATABASE_URL": f"sqlite:///{tmp_path / 'w.db'}"}
        first = build_storage(config)
        assert isinstance(first, DatabaseStorage)
        assert len(first.list_days()) == 5
        first.dispose()

        second = build_storage(config)
        assert len(second.list_days()) == 5
        second.dispose()

    def test_database_requires_url(self) -> None:
        with pytest.raises(ConfigurationError, match="DATABASE_URL"):
            build_storage({"WORKOUT_STORAGE": "database"})

    def test_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationError, match="redis"):
            build_storage({"WORKOUT_STORAGE": "redis"})


class TestCreateApp:
    def test_each_app_gets_its_own_store(self) -> None:
        a = create_app(config={"WORKOUT_STORAGE": "memory"})
        b = create_app(config={"WORKOUT_STORAGE": "memory"})
        assert a.extensions["workout_storage"] is not b.extensions["workout_storage"]

    def test_injected_store_is_used(self) -> None:
        storage = MemoryStorage(seed=False)
        app = create_app(storage=storage)
        assert app.test_client().get("/api/workout-days").get_json() == []

    def test_health(self, client) -> None:
        r = client.get("/health")
        assert r.get_json() == {"status": "ok", "storage": "MemoryStorage"}


class TestInitDb:
    def test_creates_and_seeds(self, tmp_path, capsys) -> None:
        url = f"sqlite:///{tmp_path / 'w.db'}"
        assert init_db.main(["--database-url", url]) == 0
        assert "Seeded 5 workout days" in capsys.readouterr().out

        storage = DatabaseStorage(url)
        assert len(storage.list_days()) == 5
        storage.dispose()

    def test_second_run_skips_seed(self, tmp_path, capsys) -> None:
        url = f"sqlite:///{tmp_path / 'w.db'}"
        init_db.main(["--database-url", url])
        assert init_db.main(["--database-url", url]) == 0
        assert "nothing seeded" in capsys.readouterr().out

    def test_force_seeds_again(self, tmp_path) -> None:
        url = f"sqlite:///{tmp_path / 'w.db'}"
        init_db.main(["--database-url", url])
        init_db.main(["--database-url", url, "--force"])
        storage = DatabaseStorage(url)
        assert len(storage.list_days()) == 10
        storage.dispose()

    def test_missing_url(self, monkeypatch, capsys) -> None:
        monkeypatch.delenv("DATABASE_URL", raising=False)
        assert init_db.main([]) == 1
        assert "DATABASE_URL is not set" in capsys.readouterr().out
