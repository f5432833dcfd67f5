from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from workout_core import log_action

from . import workout_bp
from .derive import day_summary
from .errors import NotFoundError, PayloadError
from .storage import Storage


def _storage() -> Storage:
    return current_app.extensions["workout_storage"]


def _action(suffix: str) -> str:
    # "workout.update_exercise" -> "update_exercise_invalid"
    return f"{request.endpoint.rsplit('.', 1)[-1]}_{suffix}"


def _json_body():
    # None for a missing or malformed body; validation reports it as a body error
    return request.get_json(silent=True)


# ───────── Error handlers ─────────

@workout_bp.errorhandler(PayloadError)
def handle_payload_error(exc):
    log_action(_action("invalid"), {"errors": exc.errors})
    return jsonify({"message": "Invalid payload", "errors": exc.errors}), 400


@workout_bp.errorhandler(NotFoundError)
def handle_not_found(exc):
    log_action(_action("not_found"), {"kind": exc.kind, "id": exc.id})
    return jsonify({"message": exc.message}), 404


@workout_bp.errorhandler(Exception)
def handle_internal_error(exc):
    if isinstance(exc, HTTPException):
        return jsonify({"message": exc.description}), exc.code
    log_action("internal_error", {"error": repr(exc)})
    return jsonify({"message": "Internal server error"}), 500


# ───────── Workout days ─────────

@workout_bp.route("/workout-days", methods=["GET"])
def list_workout_days():
    days = _storage().list_days()
    log_action("workout_days_list", {"count": len(days)})
    return jsonify([d.to_json() for d in days])


@workout_bp.route("/workout-days/<day_id>", methods=["GET"])
def get_workout_day(day_id):
    day = _storage().get_day_with_exercises(day_id)
    log_action("workout_day_view", {"id": day_id})
    return jsonify(day.to_json())


@workout_bp.route("/workout-days/<day_id>/summary", methods=["GET"])
def workout_day_summary(day_id):
    day = _storage().get_day_with_exercises(day_id)
    log_action("workout_day_summary", {"id": day_id})
    return jsonify(day_summary(day, day.exercises))


@workout_bp.route("/workout-days", methods=["POST"])
def create_workout_day():
    day = _storage().create_day(_json_body())
    log_action("workout_day_created", {"id": day.id, "day_number": day.day_number})
    return jsonify(day.to_json()), 201


@workout_bp.route("/workout-days/<day_id>", methods=["PATCH"])
def update_workout_day(day_id):
    payload = _json_body()
    day = _storage().update_day(day_id, payload)
    log_action("workout_day_updated", {"id": day_id, "fields": sorted(payload)})
    return jsonify(day.to_json())


# ───────── Exercises ─────────

@workout_bp.route("/exercises/<workout_day_id>", methods=["GET"])
def list_exercises(workout_day_id):
    exercises = _storage().list_exercises_by_day(workout_day_id)
    log_action("exercises_list", {"workout_day_id": workout_day_id, "count": len(exercises)})
    return jsonify([e.to_json() for e in exercises])


@workout_bp.route("/exercises", methods=["POST"])
def create_exercise():
    exercise = _storage().create_exercise(_json_body())
    log_action("exercise_created", {"id": exercise.id, "name": exercise.name})
    return jsonify(exercise.to_json()), 201


@workout_bp.route("/exercises/<exercise_id>", methods=["PATCH"])
def update_exercise(exercise_id):
    payload = _json_body()
    exercise = _storage().update_exercise(exercise_id, payload)
    log_action("exercise_updated", {"id": exercise_id, "fields": sorted(payload)})
    return jsonify(exercise.to_json())


@workout_bp.route("/exercises/<exercise_id>", methods=["DELETE"])
def delete_exercise(exercise_id):
    if not _storage().delete_exercise(exercise_id):
        raise NotFoundError("Exercise", exercise_id)
    log_action("exercise_deleted", {"id": exercise_id})
    return "", 204
