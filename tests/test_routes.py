"""Tests for the /api blueprint: status codes, JSON shapes and action logging."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from app import create_app
from workout_app.storage import MemoryStorage


def _first_day(client) -> dict:
    return client.get("/api/workout-days").get_json()[0]


def _first_exercise(client) -> dict:
    return client.get(f"/api/exercises/{_first_day(client)['id']}").get_json()[0]


# ---------------------------------------------------------------------------
# Workout days
# ---------------------------------------------------------------------------


class TestWorkoutDayRoutes:
    def test_list(self, client) -> None:
        r = client.get("/api/workout-days")
        assert r.status_code == 200
        days = r.get_json()
        assert [d["dayNumber"] for d in days] == [1, 2, 3, 4, 5]
        assert set(days[0]) == {"id", "dayNumber", "title", "focus"}

    def test_get_with_exercises(self, client) -> None:
        day = _first_day(client)
        r = client.get(f"/api/workout-days/{day['id']}")
        assert r.status_code == 200
        body = r.get_json()
        assert body["title"] == "Upper Body"
        assert len(body["exercises"]) == 8
        assert [e["order"] for e in body["exercises"]] == list(range(1, 9))

    def test_get_unknown(self, client) -> None:
        r = client.get("/api/workout-days/nope")
        assert r.status_code == 404
        assert r.get_json() == {"message": "Workout day not found"}

    def test_create(self, client, day_payload) -> None:
        r = client.post("/api/workout-days", json=day_payload())
        assert r.status_code == 201
        body = r.get_json()
        assert body["id"]
        assert body["dayNumber"] == 6
        assert len(client.get("/api/workout-days").get_json()) == 6

    def test_create_invalid(self, client) -> None:
        r = client.post("/api/workout-days", json={"dayNumber": "six"})
        assert r.status_code == 400
        body = r.get_json()
        assert body["message"] == "Invalid payload"
        assert {e["field"] for e in body["errors"]} == {"dayNumber", "title", "focus"}
        assert len(client.get("/api/workout-days").get_json()) == 5

    def test_create_non_json_body(self, client) -> None:
        r = client.post("/api/workout-days", data="not json", content_type="text/plain")
        assert r.status_code == 400
        assert r.get_json()["errors"][0]["field"] == "body"

    def test_patch(self, client) -> None:
        day = _first_day(client)
        r = client.patch(f"/api/workout-days/{day['id']}", json={"focus": "Chest Day"})
        assert r.status_code == 200
        assert r.get_json() == {**day, "focus": "Chest Day"}

    def test_patch_invalid(self, client) -> None:
        day = _first_day(client)
        r = client.patch(f"/api/workout-days/{day['id']}", json={"title": None})
        assert r.status_code == 400

    def test_patch_unknown(self, client) -> None:
        r = client.patch("/api/workout-days/nope", json={"title": "x"})
        assert r.status_code == 404

    def test_summary(self, client) -> None:
        day = _first_day(client)
        r = client.get(f"/api/workout-days/{day['id']}/summary")
        assert r.status_code == 200
        body = r.get_json()
        assert body["fullTitle"] == "Day 1 - Upper Body (Horizontal Focus)"
        assert body["exerciseCount"] == 8
        assert body["totalSets"] == 25
        assert body["duration"] == {"min": 58, "max": 76}
        assert body["estimatedTime"] == "56-71"
        assert body["exercises"][0]["badges"][-1]["label"] == "Compound"
        assert body["exercises"][0]["progress"]["status"] == "maintain"

    def test_summary_unknown(self, client) -> None:
        assert client.get("/api/workout-days/nope/summary").status_code == 404


# ---------------------------------------------------------------------------
# Exercises
# ---------------------------------------------------------------------------


class TestExerciseRoutes:
    def test_list_for_day(self, client) -> None:
        day = _first_day(client)
        r = client.get(f"/api/exercises/{day['id']}")
        assert r.status_code == 200
        exercises = r.get_json()
        assert len(exercises) == 8
        assert exercises[0]["name"] == "Dumbbell Bench Press"
        assert exercises[0]["completedSets"] == []

    def test_list_unknown_day_is_empty(self, client) -> None:
        r = client.get("/api/exercises/nope")
        assert r.status_code == 200
        assert r.get_json() == []

    def test_create(self, client, exercise_payload) -> None:
        day = _first_day(client)
        r = client.post("/api/exercises", json=exercise_payload(day["id"], order=0))
        assert r.status_code == 201
        created = r.get_json()
        listed = client.get(f"/api/exercises/{day['id']}").get_json()
        assert listed[0]["id"] == created["id"]

    def test_create_invalid(self, client, exercise_payload) -> None:
        day = _first_day(client)
        r = client.post("/api/exercises", json=exercise_payload(day["id"], sets=0, reps=12))
        assert r.status_code == 400
        assert {e["field"] for e in r.get_json()["errors"]} == {"sets", "reps"}

    def test_create_unknown_day(self, client, exercise_payload) -> None:
        r = client.post("/api/exercises", json=exercise_payload("nope"))
        assert r.status_code == 400
        assert r.get_json()["errors"][0]["field"] == "workoutDayId"

    def test_patch_one_field(self, client) -> None:
        ex = _first_exercise(client)
        r = client.patch(f"/api/exercises/{ex['id']}", json={"currentWeight": "50 lb"})
        assert r.status_code == 200
        assert r.get_json() == {**ex, "currentWeight": "50 lb"}

    def test_patch_completed_sets(self, client) -> None:
        ex = _first_exercise(client)
        sets = [{"reps": 10}, None, {"reps": 9}]
        r = client.patch(f"/api/exercises/{ex['id']}", json={"completedSets": sets})
        assert r.get_json()["completedSets"] == sets

    def test_patch_invalid(self, client) -> None:
        ex = _first_exercise(client)
        r = client.patch(f"/api/exercises/{ex['id']}", json={"sets": "four"})
        assert r.status_code == 400
        assert _first_exercise(client) == ex

    def test_patch_unknown(self, client) -> None:
        r = client.patch("/api/exercises/nope", json={"currentWeight": "50 lb"})
        assert r.status_code == 404
        assert r.get_json() == {"message": "Exercise not found"}

    def test_delete(self, client) -> None:
        ex = _first_exercise(client)
        r = client.delete(f"/api/exercises/{ex['id']}")
        assert r.status_code == 204
        assert r.data == b""
        assert client.delete(f"/api/exercises/{ex['id']}").status_code == 404

    def test_delete_unknown(self, client) -> None:
        day = _first_day(client)
        before = client.get(f"/api/exercises/{day['id']}").get_json()
        assert client.delete("/api/exercises/nope").status_code == 404
        assert client.get(f"/api/exercises/{day['id']}").get_json() == before


# ---------------------------------------------------------------------------
# Failures and logging
# ---------------------------------------------------------------------------


class TestInternalFailures:
    @pytest.fixture
    def broken_client(self, action_log):
        storage = MagicMock()
        storage.list_days.side_effect = RuntimeError("connection refused at 10.0.0.7")
        app = create_app(storage=storage, config={"ACTION_LOG_FILE": str(action_log)})
        app.testing = True
        return app.test_client()

    def test_storage_fault_is_generic_500(self, broken_client) -> None:
        r = broken_client.get("/api/workout-days")
        assert r.status_code == 500
        assert r.get_json() == {"message": "Internal server error"}
        assert b"10.0.0.7" not in r.data

    def test_storage_fault_is_logged(self, broken_client, action_log) -> None:
        broken_client.get("/api/workout-days")
        entries = [json.loads(line) for line in action_log.read_text().splitlines()]
        assert entries[-1]["action"] == "internal_error"
        assert "connection refused" in entries[-1]["details"]["error"]


class TestActionLog:
    def test_routes_append_entries(self, client, action_log) -> None:
        ex = _first_exercise(client)
        client.patch(f"/api/exercises/{ex['id']}", json={"currentWeight": "50 lb"})
        entries = [json.loads(line) for line in action_log.read_text().splitlines()]
        actions = [e["action"] for e in entries]
        assert actions[-1] == "exercise_updated"
        assert entries[-1]["path"] == f"/api/exercises/{ex['id']}"
        assert entries[-1]["details"] == {"id": ex["id"], "fields": ["currentWeight"]}

    def test_rejections_logged_per_endpoint(self, client, action_log) -> None:
        ex = _first_exercise(client)
        client.patch(f"/api/exercises/{ex['id']}", json={"sets": "four"})
        client.get("/api/workout-days/nope")
        actions = [json.loads(line)["action"] for line in action_log.read_text().splitlines()]
        assert actions[-2:] == ["update_exercise_invalid", "get_workout_day_not_found"]

    def test_unwritable_log_does_not_break_requests(self, tmp_path) -> None:
        app = create_app(
            storage=MemoryStorage(),
            config={"ACTION_LOG_FILE": str(tmp_path / "missing-dir" / "log.jsonl")},
        )
        assert app.test_client().get("/api/workout-days").status_code == 200


class TestUnknownRoutes:
    def test_unknown_api_path_is_json(self, client) -> None:
        r = client.get("/api/nope")
        assert r.status_code == 404
        assert r.is_json
        assert r.get_json() == {"message": "Not found"}

    def test_unknown_path_outside_api_is_untouched(self, client) -> None:
        r = client.get("/nope")
        assert r.status_code == 404
        assert not r.is_json
