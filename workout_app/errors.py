class WorkoutError(Exception):
    """Base class for errors raised by the workout app."""


class ConfigurationError(WorkoutError):
    pass


class NotFoundError(WorkoutError):
    def __init__(self, kind: str, id: str):
        self.kind = kind
        self.id = id
        super().__init__(f"{kind} not found: {id}")

    @property
    def message(self):
        return f"{self.kind} not found"


class PayloadError(WorkoutError):
    """
    A write payload was rejected as a whole.

    `errors` is a list of {"field", "message", "type"} dicts, one per violation.
    """

    def __init__(self, errors: list):
        self.errors = errors
        fields = ", ".join(e["field"] for e in errors) or "payload"
        super().__init__(f"Invalid payload: {fields}")

    @classmethod
    def single(cls, field: str, message: str, type: str = "value_error"):
        return cls([{"field": field, "message": message, "type": type}])


class EditLockedError(WorkoutError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"'{field}' can only be changed in edit mode")


class ApiError(WorkoutError):
    """Non-2xx response (or no response at all, status 0) from the workout API."""

    def __init__(self, status: int, message: str, errors=None):
        self.status = status
        self.message = message
        self.errors = errors or []
        super().__init__(f"{status}: {message}")
