"""
Client side of the workout API.

WorkoutApiClient speaks the REST API. ExerciseEditor keeps a local working
copy of one exercise: every edit lands locally first and is then sent
upstream as a single-field PATCH; a failed send leaves the local edit in
place so it can be retried. SnapshotCache mirrors the last known server
state on disk for continuity across restarts; it is never the source of truth.
"""
import copy
import json
import os
from types import SimpleNamespace

import requests
from pydantic import ValidationError

from .derive import progress_status
from .errors import ApiError, EditLockedError
from .models import CompletedSet

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 5.0

# Plan parameters are only editable in edit mode; per-set logging always is.
PLAN_FIELDS = frozenset({"sets", "reps", "currentWeight"})


class WorkoutApiClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, session=None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, payload=None):
        url = f"{self.base_url}/api{path}"
        try:
            r = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ApiError(0, "Workout API unreachable") from exc

        if r.status_code == 204:
            return None
        try:
            data = r.json()
        except ValueError:
            data = None

        if r.status_code >= 400:
            body = data if isinstance(data, dict) else {}
            raise ApiError(r.status_code, body.get("message") or r.reason or "Request failed", body.get("errors"))
        return data

    # Workout days
    def list_days(self):
        return self._request("GET", "/workout-days")

    def get_day(self, day_id: str):
        return self._request("GET", f"/workout-days/{day_id}")

    def get_day_summary(self, day_id: str):
        return self._request("GET", f"/workout-days/{day_id}/summary")

    def create_day(self, payload: dict):
        return self._request("POST", "/workout-days", payload)

    def update_day(self, day_id: str, changes: dict):
        return self._request("PATCH", f"/workout-days/{day_id}", changes)

    # Exercises
    def list_exercises(self, day_id: str):
        return self._request("GET", f"/exercises/{day_id}")

    def create_exercise(self, payload: dict):
        return self._request("POST", "/exercises", payload)

    def update_exercise(self, exercise_id: str, changes: dict):
        return self._request("PATCH", f"/exercises/{exercise_id}", changes)

    def delete_exercise(self, exercise_id: str) -> bool:
        try:
            self._request("DELETE", f"/exercises/{exercise_id}")
        except ApiError as exc:
            if exc.status == 404:
                return False
            raise
        return True


def filter_exercises(exercises, global_query: str = "", day_query: str = ""):
    """Exercises whose name contains both queries (case-insensitive); empty queries match all."""
    queries = [q.lower() for q in (global_query, day_query) if q]
    return [e for e in exercises if all(q in e["name"].lower() for q in queries)]


def _padded(values, index: int) -> list:
    if index < 0:
        raise ValueError(f"set index must be >= 0, got {index}")
    values = list(values or [])
    if index >= len(values):
        values.extend([None] * (index + 1 - len(values)))
    return values


class ExerciseEditor:
    def __init__(self, api: WorkoutApiClient, exercise: dict, edit_mode: bool = False, cache=None):
        self.api = api
        self.exercise = copy.deepcopy(exercise)
        self.edit_mode = edit_mode
        self.cache = cache
        self.notifications = []
        self.last_error = None

    @property
    def id(self):
        return self.exercise["id"]

    def toggle_edit_mode(self) -> bool:
        self.edit_mode = not self.edit_mode
        return self.edit_mode

    def update_field(self, field: str, value) -> bool:
        """
        Apply one field edit locally, then send it upstream.

        Returns False when the upstream update failed; the local value is kept.
        """
        if field in PLAN_FIELDS and not self.edit_mode:
            raise EditLockedError(field)
        self.exercise[field] = value
        if self.cache is not None:
            self.cache.update_exercise(self.exercise["workoutDayId"], self.id, {field: value})
        return self._send({field: value})

    def set_target_reps(self, set_index: int, reps: int) -> bool:
        current = _padded(self.exercise.get("currentReps"), set_index)
        current[set_index] = reps
        return self.update_field("currentReps", current)

    def log_set(self, set_index: int, reps: int) -> bool:
        completed = _padded(self.exercise.get("completedSets"), set_index)
        completed[set_index] = {"reps": reps}
        return self.update_field("completedSets", completed)

    def _send(self, changes: dict) -> bool:
        try:
            self.api.update_exercise(self.id, changes)
        except ApiError as exc:
            self.last_error = exc
            self.notifications.append({
                "title": "Error",
                "description": "Failed to update exercise. Please try again.",
                "variant": "destructive",
            })
            return False
        self.last_error = None
        self.notifications.append({
            "title": "Exercise Updated",
            "description": "Your exercise has been saved successfully.",
        })
        return True

    def reconcile(self, server_exercise: dict):
        """Replace the working copy with a freshly fetched server record."""
        self.exercise = copy.deepcopy(server_exercise)

    def progress(self) -> dict:
        """Progression status from the local reps range and logged sets only."""
        reps = self.exercise.get("reps")
        view = SimpleNamespace(
            reps=reps if isinstance(reps, str) else "",
            completed_sets=_valid_sets(self.exercise.get("completedSets")),
        )
        return progress_status(view)


def _valid_sets(sets) -> list:
    # Invalid entries left by a failed edit count as unrecorded
    valid = []
    for entry in sets if isinstance(sets, list) else []:
        if entry is None:
            continue
        try:
            valid.append(CompletedSet.model_validate(entry))
        except ValidationError:
            continue
    return valid


# ───────── Local snapshot cache ─────────

class SnapshotCache:
    """Day-id keyed snapshot of {workout day + exercises}, rewritten in full on every change."""

    def __init__(self, path: str):
        self.path = path
        self.data = {}

    def load(self) -> dict:
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError):
            data = {}
        self.data = data if isinstance(data, dict) else {}
        return self.data

    def save(self, data: dict):
        # write-then-rename
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.path)
        self.data = data

    def update_day(self, day_id: str, day: dict):
        self.save({**self.data, day_id: day})

    def update_exercise(self, day_id: str, exercise_id: str, changes: dict):
        day = self.data.get(day_id)
        if not day:
            return
        exercises = [
            {**e, **changes} if e.get("id") == exercise_id else e
            for e in day.get("exercises", [])
        ]
        self.update_day(day_id, {**day, "exercises": exercises})
