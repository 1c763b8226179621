"""
Common exception classes for arg-fn.

Unrecognized arguments are never errors here; they are routed to the parser's
fallback handler. These exceptions only cover misuse of the parser API.
"""

from __future__ import annotations


class ArgFnError(Exception):
    """Base exception class for all arg-fn errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        return {
            "error": {
                "message": self.message,
                "type": self.__class__.__name__,
                "details": self.details,
            }
        }


class ArgumentRegistrationError(ArgFnError):
    """Raised when an argument handler cannot be registered."""

    def __init__(
        self,
        message: str = "Invalid argument registration",
        argument: object | None = None,
        details: dict | None = None,
    ):
        det = details.copy() if details else {}
        det.setdefault("argument", repr(argument))
        super().__init__(message, det)
        self.argument = argument


class ParserConsumedError(ArgFnError):
    """Raised when a parser is used again after ``parse`` has run."""

    def __init__(
        self,
        message: str = "Parser has already been consumed by parse()",
        details: dict | None = None,
    ):
        super().__init__(message, details)
