"""
Tagged result type returned by every procedure.

A Result is exactly one of:
    Ok(value)   : the procedure succeeded and carries its payload.
    Err(error)  : the procedure failed with a structured ProcedureError.

The variants expose different attributes (``value`` vs ``error``), so a
caller has to branch on the variant before touching the payload::

    match result:
        case Ok(value):
            ...
        case Err(error):
            ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Error categories surfaced to callers of a procedure."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorCode.BAD_REQUEST: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
}


@dataclass(frozen=True)
class ProcedureError:
    """Structured failure payload.

    Attributes:
        code: Client-fault or server-fault category.
        message: Human readable message.
        cause: Diagnostic detail. Traceback text for recognized storage
            errors, the original raised value otherwise.
    """

    code: ErrorCode
    message: str = ""
    cause: Any = None

    @classmethod
    def not_found(cls, message: str) -> "ProcedureError":
        return cls(code=ErrorCode.NOT_FOUND, message=message)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome."""

    error: ProcedureError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise ValueError(f"Called unwrap on Err: {self.error.code.value} {self.error.message}")


Result = Union[Ok[T], Err]


def not_found(message: str) -> Err:
    """Shortcut for the NOT_FOUND failure every getter returns."""
    return Err(ProcedureError.not_found(message))
