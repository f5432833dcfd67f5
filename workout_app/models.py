"""
Record shapes for the workout plan.

Each entity has three models: the insert shape (no server-assigned id), the
patch shape (every updatable field optional) and the stored record. JSON uses
camelCase field names; Python code uses the snake_case attribute names.
"""
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

from .errors import PayloadError


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class CompletedSet(_Model):
    reps: StrictInt = Field(ge=0)


# ───────── Workout days ─────────

class WorkoutDayInsert(_Model):
    day_number: StrictInt = Field(ge=1)
    title: StrictStr
    focus: StrictStr


class WorkoutDayPatch(_Model):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset()

    day_number: Optional[StrictInt] = Field(default=None, ge=1)
    title: Optional[StrictStr] = None
    focus: Optional[StrictStr] = None


class WorkoutDay(WorkoutDayInsert):
    id: StrictStr


# ───────── Exercises ─────────

class ExerciseInsert(_Model):
    workout_day_id: StrictStr = Field(min_length=1)
    name: StrictStr = Field(min_length=1)
    sets: StrictInt = Field(ge=1)
    reps: StrictStr
    rpe: StrictStr
    progression_rule: StrictStr
    video_url: StrictStr
    current_weight: Optional[StrictStr] = None
    # None marks a set whose target has not been entered yet
    current_reps: List[Optional[StrictInt]] = Field(default_factory=list)
    # sparse: None marks a set that was not logged
    completed_sets: List[Optional[CompletedSet]] = Field(default_factory=list)
    last_workout: Optional[StrictStr] = None
    order: StrictInt


class ExercisePatch(_Model):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"current_weight", "last_workout"})

    workout_day_id: Optional[StrictStr] = Field(default=None, min_length=1)
    name: Optional[StrictStr] = Field(default=None, min_length=1)
    sets: Optional[StrictInt] = Field(default=None, ge=1)
    reps: Optional[StrictStr] = None
    rpe: Optional[StrictStr] = None
    progression_rule: Optional[StrictStr] = None
    video_url: Optional[StrictStr] = None
    current_weight: Optional[StrictStr] = None
    current_reps: Optional[List[Optional[StrictInt]]] = None
    completed_sets: Optional[List[Optional[CompletedSet]]] = None
    last_workout: Optional[StrictStr] = None
    order: Optional[StrictInt] = None


class Exercise(ExerciseInsert):
    id: StrictStr


class WorkoutDayWithExercises(WorkoutDay):
    exercises: List[Exercise] = Field(default_factory=list)


# ───────── Validation helpers ─────────

def _field_errors(exc: ValidationError) -> list:
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "body"
        errors.append({"field": field, "message": err["msg"], "type": err["type"]})
    return errors


def validate_payload(model_cls, data):
    """
    Validate `data` (a mapping, or an instance of `model_cls`) as a whole.

    Raises PayloadError with one entry per violated field.
    """
    if isinstance(data, model_cls):
        model = data
    else:
        if not isinstance(data, dict):
            raise PayloadError.single("body", "Expected a JSON object", "type_error")
        try:
            model = model_cls.model_validate(data)
        except ValidationError as exc:
            raise PayloadError(_field_errors(exc)) from exc

    nullable = getattr(model_cls, "NULLABLE", None)
    if nullable is not None:
        errors = []
        for name in sorted(model.model_fields_set):
            if getattr(model, name) is None and name not in nullable:
                errors.append({
                    "field": model_cls.model_fields[name].alias or name,
                    "message": "Field cannot be null",
                    "type": "none_forbidden",
                })
        if errors:
            raise PayloadError(errors)
    return model


def patch_changes(patch) -> dict:
    """The fields a patch actually carries, keyed by attribute name."""
    return patch.model_dump(exclude_unset=True)
