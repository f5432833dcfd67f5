import uuid
from typing import List, Protocol

from .defaults import seed_plan
from .errors import NotFoundError, PayloadError
from .models import (
    Exercise,
    ExerciseInsert,
    ExercisePatch,
    WorkoutDay,
    WorkoutDayInsert,
    WorkoutDayPatch,
    WorkoutDayWithExercises,
    patch_changes,
    validate_payload,
)


class Storage(Protocol):
    """
    Operations every workout store provides.

    Payload arguments may be a mapping (camelCase or snake_case keys) or the
    matching model instance; both are validated before anything is written.
    Lookups of unknown ids raise NotFoundError.
    """

    def list_days(self) -> List[WorkoutDay]: ...

    def get_day(self, day_id: str) -> WorkoutDay: ...

    def get_day_with_exercises(self, day_id: str) -> WorkoutDayWithExercises: ...

    def create_day(self, payload) -> WorkoutDay: ...

    def update_day(self, day_id: str, payload) -> WorkoutDay: ...

    def list_exercises_by_day(self, day_id: str) -> List[Exercise]: ...

    def get_exercise(self, exercise_id: str) -> Exercise: ...

    def create_exercise(self, payload) -> Exercise: ...

    def update_exercise(self, exercise_id: str, payload) -> Exercise: ...

    def delete_exercise(self, exercise_id: str) -> bool: ...


def new_id() -> str:
    return str(uuid.uuid4())


def unknown_day_error() -> PayloadError:
    return PayloadError.single("workoutDayId", "Workout day does not exist", "reference_error")


class MemoryStorage:
    """
    Process-local store backed by two dicts.

    Dicts keep insertion order, so the stable sort in list_exercises_by_day
    breaks `order` ties by insertion. Not shared across processes.
    """

    def __init__(self, seed: bool = True):
        self._days = {}
        self._exercises = {}
        if seed:
            seed_plan(self)

    # ───────── Workout days ─────────

    def list_days(self) -> List[WorkoutDay]:
        days = sorted(self._days.values(), key=lambda d: d.day_number)
        return [d.model_copy(deep=True) for d in days]

    def _day(self, day_id: str) -> WorkoutDay:
        day = self._days.get(day_id)
        if day is None:
            raise NotFoundError("Workout day", day_id)
        return day

    def get_day(self, day_id: str) -> WorkoutDay:
        return self._day(day_id).model_copy(deep=True)

    def get_day_with_exercises(self, day_id: str) -> WorkoutDayWithExercises:
        day = self._day(day_id)
        return WorkoutDayWithExercises(
            **day.model_dump(),
            exercises=self.list_exercises_by_day(day_id),
        )

    def create_day(self, payload) -> WorkoutDay:
        insert = validate_payload(WorkoutDayInsert, payload)
        day = WorkoutDay(id=new_id(), **insert.model_dump())
        self._days[day.id] = day
        return day.model_copy(deep=True)

    def update_day(self, day_id: str, payload) -> WorkoutDay:
        patch = validate_payload(WorkoutDayPatch, payload)
        current = self._day(day_id)
        updated = WorkoutDay.model_validate({**current.model_dump(), **patch_changes(patch)})
        self._days[day_id] = updated
        return updated.model_copy(deep=True)

    # ───────── Exercises ─────────

    def list_exercises_by_day(self, day_id: str) -> List[Exercise]:
        exercises = [e for e in self._exercises.values() if e.workout_day_id == day_id]
        exercises.sort(key=lambda e: e.order)
        return [e.model_copy(deep=True) for e in exercises]

    def _exercise(self, exercise_id: str) -> Exercise:
        exercise = self._exercises.get(exercise_id)
        if exercise is None:
            raise NotFoundError("Exercise", exercise_id)
        return exercise

    def get_exercise(self, exercise_id: str) -> Exercise:
        return self._exercise(exercise_id).model_copy(deep=True)

    def create_exercise(self, payload) -> Exercise:
        insert = validate_payload(ExerciseInsert, payload)
        if insert.workout_day_id not in self._days:
            raise unknown_day_error()
        exercise = Exercise(id=new_id(), **insert.model_dump())
        self._exercises[exercise.id] = exercise
        return exercise.model_copy(deep=True)

    def update_exercise(self, exercise_id: str, payload) -> Exercise:
        patch = validate_payload(ExercisePatch, payload)
        current = self._exercise(exercise_id)
        changes = patch_changes(patch)
        if "workout_day_id" in changes and changes["workout_day_id"] not in self._days:
            raise unknown_day_error()
        updated = Exercise.model_validate({**current.model_dump(), **changes})
        self._exercises[exercise_id] = updated
        return updated.model_copy(deep=True)

    def delete_exercise(self, exercise_id: str) -> bool:
        return self._exercises.pop(exercise_id, None) is not None

