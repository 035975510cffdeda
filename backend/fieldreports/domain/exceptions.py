"""Domain-specific exceptions — framework-independent."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fieldreports.domain.validation import FieldError


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class MalformedIdentifierError(Exception):
    """Raised when a record id parameter is not a valid positive integer."""

    def __init__(self, raw_value: str):
        self.raw_value = raw_value
        super().__init__(f"Invalid identifier: '{raw_value}'")


class ReportValidationError(Exception):
    """Raised when a report submission fails validation.

    Carries every field error found so the caller can report them in one go.
    """

    def __init__(self, errors: list["FieldError"]):
        self.errors = errors
        fields = ", ".join(e.field for e in errors)
        super().__init__(f"Report validation failed: {fields}")


class NotificationError(Exception):
    """Raised when a notification channel rejects or fails to deliver a message.

    Channel-agnostic — the dispatcher catches and logs it.
    """

    def __init__(self, channel: str, message: str, status_code: int | None = None):
        self.channel = channel
        self.status_code = status_code
        self.message = message
        prefix = f"[{channel}] {status_code}" if status_code is not None else f"[{channel}]"
        super().__init__(f"{prefix}: {message}")
