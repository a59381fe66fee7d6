"""Exception hierarchy for the debug playground."""

from typing import Any


class PlaygroundError(Exception):
    """Base exception for all playground errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ArithmeticOperationError(PlaygroundError):
    """Arithmetic helper errors."""

    pass


class DivisionByZeroError(ArithmeticOperationError):
    """Divisor was zero."""

    def __init__(self, dividend: float):
        super().__init__(
            code="DIVISION_BY_ZERO",
            message="divisor cannot be zero",
            details={"dividend": dividend, "divisor": 0},
        )
