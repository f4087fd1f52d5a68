"""Domain error codes for the event registry."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    INVALID_QUANTITY = "INVALID_QUANTITY"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when an event fails one or more validation rules."""

    def __init__(self, title: str, failed_rules: Sequence[str] = ()) -> None:
        message = f'Invalid event "{title}"'
        if failed_rules:
            message = f"{message}: failed {', '.join(failed_rules)}"
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.title = title
        self.failed_rules = tuple(failed_rules)


class InsufficientCapacityError(DomainError):
    """Raised when more tickets are requested than the venue has left."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_CAPACITY,
            message=f"Not enough tickets available ({requested} requested, {available} left)",
        )
        self.requested = requested
        self.available = available


class NotConfiguredError(DomainError):
    """Raised when tickets are purchased before a price calculator is set."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_CONFIGURED,
            message="No price calculator configured",
        )


class InvalidQuantityError(DomainError):
    """Raised when a ticket quantity is not a positive integer."""

    def __init__(self, quantity: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QUANTITY,
            message=f"Ticket quantity must be a positive integer, got {quantity!r}",
        )
        self.quantity = quantity
