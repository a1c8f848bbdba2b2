"""Typed errors raised by signoff operations.

Operations raise SignoffError; the CLI boundary turns it into an
"Error: ..." line on stderr and exit code 1.
"""

from enum import Enum


class ErrorKind(Enum):
    """Category of a signoff failure."""

    PRECONDITION = "precondition"
    MISSING_DEPENDENCY = "missing_dependency"
    EXTERNAL_CALL = "external_call"


class SignoffError(Exception):
    """Exception raised when a signoff operation cannot complete."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def precondition_failed(message: str) -> SignoffError:
    return SignoffError(ErrorKind.PRECONDITION, message)


def external_call_failed(message: str) -> SignoffError:
    return SignoffError(ErrorKind.EXTERNAL_CALL, message)
