"""Domain exceptions.

Routers do not catch these; handlers registered in main.py turn them into
HTTP responses.
"""


class DesignOpsError(Exception):
    """Base exception for the DesignOps backend."""

    pass


class ValidationError(DesignOpsError):
    """A record failed category-conditional validation.

    ``field_errors`` maps each offending field name to a message so a form can
    point at the specific control.
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid fields: {fields}")


class DuplicateError(DesignOpsError):
    """A name or key collides with an existing entry."""

    def __init__(self, field: str, value: str, message: str | None = None):
        self.field = field
        self.value = value
        self.message = message or f"'{value}' already exists."
        super().__init__(self.message)

    @property
    def field_errors(self) -> dict[str, str]:
        return {self.field: self.message}


class NotFoundError(DesignOpsError):
    """The addressed record does not exist."""

    def __init__(self, resource: str, key):
        self.resource = resource
        self.key = key
        super().__init__(f"{resource} '{key}' not found")


class ReferenceInUseError(DesignOpsError):
    """A record cannot be deleted while other records still point at it."""

    pass


class ConcurrentUpdateError(DesignOpsError):
    """A conditional write kept losing to other writers."""

    def __init__(self, resource: str, attempts: int):
        self.resource = resource
        self.attempts = attempts
        super().__init__(
            f"{resource} was modified concurrently; gave up after {attempts} attempts"
        )


class StorageError(DesignOpsError):
    """The database rejected or failed an operation."""

    pass
