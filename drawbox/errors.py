"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class RangeExhaustedError(AppError):
    """A unique draw asks for more values than the range holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            code="range_exhausted",
            message=f"Cannot draw {requested} unique numbers from a range of {available}",
            status_code=400,
            details={"requested": requested, "available": available},
        )


class UnauthorizedError(AppError):
    """Admin action without a valid credential."""

    def __init__(self, message: str = "Unauthorized", details: Any | None = None) -> None:
        super().__init__(code="unauthorized", message=message, status_code=401, details=details)


class ConflictError(AppError):
    """Conflict (e.g., a draw already animating for this client)."""

    def __init__(
        self, message: str = "Conflict", details: Any | None = None, code: str = "conflict"
    ) -> None:
        super().__init__(code=code, message=message, status_code=409, details=details)


class CollaboratorUnavailable(Exception):
    """A storage collaborator failed; callers degrade instead of failing the draw."""


class OverrideUnavailable(CollaboratorUnavailable):
    """Pending override could not be read or consumed."""


class PersistenceUnavailable(CollaboratorUnavailable):
    """History log could not be read or written."""
