"""
Relational store for the workout plan (SQLAlchemy).

Two tables, `workout_days` and `exercises`, with `exercises.workout_day_id`
referencing `workout_days.id`. Each operation runs in its own short-lived
session; concurrent partial updates to one record are last-write-wins.
"""
from typing import List, Optional

from sqlalchemy import JSON, ForeignKey, Integer, String, Text, create_engine, func, select
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from .defaults import seed_plan
from .errors import NotFoundError
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
from .storage import new_id, unknown_day_error


class Base(DeclarativeBase):
    pass


class WorkoutDayRow(Base):
    __tablename__ = "workout_days"

    # surrogate key; records insertion order
    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, default=new_id)
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    focus: Mapped[str] = mapped_column(Text, nullable=False)


class ExerciseRow(Base):
    __tablename__ = "exercises"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, default=new_id)
    workout_day_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("workout_days.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[str] = mapped_column(Text, nullable=False)
    rpe: Mapped[str] = mapped_column(Text, nullable=False)
    progression_rule: Mapped[str] = mapped_column(Text, nullable=False)
    video_url: Mapped[str] = mapped_column(Text, nullable=False)
    current_weight: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    current_reps: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    completed_sets: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    last_workout: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False)


DAY_FIELDS = ("id", "day_number", "title", "focus")
EXERCISE_FIELDS = tuple(Exercise.model_fields)


def _day_model(row: WorkoutDayRow) -> WorkoutDay:
    return WorkoutDay.model_validate({name: getattr(row, name) for name in DAY_FIELDS})


def _exercise_model(row: ExerciseRow) -> Exercise:
    return Exercise.model_validate({name: getattr(row, name) for name in EXERCISE_FIELDS})


class DatabaseStorage:
    def __init__(self, database_url: str, **engine_options):
        self.engine = create_engine(database_url, **engine_options)
        self.Session = sessionmaker(self.engine, expire_on_commit=False)

    def create_all(self):
        Base.metadata.create_all(self.engine)

    def seed_defaults(self, force: bool = False) -> int:
        """Load the starter plan unless days already exist. Returns the number of days created."""
        with self.Session() as session:
            existing = session.scalar(select(func.count()).select_from(WorkoutDayRow))
        if existing and not force:
            return 0
        return len(seed_plan(self))

    def dispose(self):
        self.engine.dispose()

    # ───────── Workout days ─────────

    def list_days(self) -> List[WorkoutDay]:
        with self.Session() as session:
            rows = session.scalars(
                select(WorkoutDayRow).order_by(WorkoutDayRow.day_number, WorkoutDayRow.row_id)
            )
            return [_day_model(row) for row in rows]

    def _day_row(self, session, day_id: str) -> Optional[WorkoutDayRow]:
        return session.scalar(select(WorkoutDayRow).where(WorkoutDayRow.id == day_id))

    def get_day(self, day_id: str) -> WorkoutDay:
        with self.Session() as session:
            row = self._day_row(session, day_id)
            if row is None:
                raise NotFoundError("Workout day", day_id)
            return _day_model(row)

    def get_day_with_exercises(self, day_id: str) -> WorkoutDayWithExercises:
        day = self.get_day(day_id)
        return WorkoutDayWithExercises(
            **day.model_dump(),
            exercises=self.list_exercises_by_day(day_id),
        )

    def create_day(self, payload) -> WorkoutDay:
        insert = validate_payload(WorkoutDayInsert, payload)
        with self.Session() as session:
            row = WorkoutDayRow(id=new_id(), **insert.model_dump())
            session.add(row)
            session.commit()
            return _day_model(row)

    def update_day(self, day_id: str, payload) -> WorkoutDay:
        patch = validate_payload(WorkoutDayPatch, payload)
        with self.Session() as session:
            row = self._day_row(session, day_id)
            if row is None:
                raise NotFoundError("Workout day", day_id)
            for name, value in patch_changes(patch).items():
                setattr(row, name, value)
            session.commit()
            return _day_model(row)

    # ───────── Exercises ─────────

    def list_exercises_by_day(self, day_id: str) -> List[Exercise]:
        with self.Session() as session:
            rows = session.scalars(
                select(ExerciseRow)
                .where(ExerciseRow.workout_day_id == day_id)
                .order_by(ExerciseRow.order, ExerciseRow.row_id)
            )
            return [_exercise_model(row) for row in rows]

    def _exercise_row(self, session, exercise_id: str) -> Optional[ExerciseRow]:
        return session.scalar(select(ExerciseRow).where(ExerciseRow.id == exercise_id))

    def get_exercise(self, exercise_id: str) -> Exercise:
        with self.Session() as session:
            row = self._exercise_row(session, exercise_id)
            if row is None:
                raise NotFoundError("Exercise", exercise_id)
            return _exercise_model(row)

    def create_exercise(self, payload) -> Exercise:
        insert = validate_payload(ExerciseInsert, payload)
        with self.Session() as session:
            if self._day_row(session, insert.workout_day_id) is None:
                raise unknown_day_error()
            row = ExerciseRow(id=new_id(), **insert.model_dump())
            session.add(row)
            session.commit()
            return _exercise_model(row)

    def update_exercise(self, exercise_id: str, payload) -> Exercise:
        patch = validate_payload(ExercisePatch, payload)
        changes = patch_changes(patch)
        with self.Session() as session:
            row = self._exercise_row(session, exercise_id)
            if row is None:
                raise NotFoundError("Exercise", exercise_id)
            if "workout_day_id" in changes and self._day_row(session, changes["workout_day_id"]) is None:
                raise unknown_day_error()
            for name, value in changes.items():
                setattr(row, name, value)
            session.commit()
            return _exercise_model(row)

    def delete_exercise(self, exercise_id: str) -> bool:
        with self.Session() as session:
            row = self._exercise_row(session, exercise_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True
