"""
Storage error normalization.

Turns whatever the storage layer raised into a single Err(ProcedureError).
Classification is ordered, first match wins:

1. Known request errors (constraint violations, malformed values)
   → BAD_REQUEST, driver message, cause = traceback text.
2. Unknown request errors and query validation errors
   → INTERNAL_SERVER_ERROR, driver message, cause = traceback text.
3. Anything else → INTERNAL_SERVER_ERROR, best-effort message,
   cause = the original value.

The traceback-text vs original-value asymmetry of ``cause`` is kept on
purpose; callers must not rely on ``cause`` having one shape.

The driver message is the wrapped DBAPI exception's text when there is
one. SQLAlchemy's own string form appends the statement and its bound
parameters, which stay in ``cause`` only.
"""

import json
import logging
import traceback
from collections.abc import Mapping
from typing import Any, Optional, Protocol

from sqlalchemy.exc import (
    ArgumentError,
    CompileError,
    DataError,
    DBAPIError,
    IntegrityError,
    StatementError,
)

from backlog.shared.result import Err, ErrorCode, ProcedureError

logger = logging.getLogger(__name__)

KNOWN_REQUEST_ERRORS = (IntegrityError, DataError)
UNKNOWN_REQUEST_ERRORS = (DBAPIError,)
VALIDATION_ERRORS = (StatementError, ArgumentError, CompileError)

_MISSING = object()


class ErrorWithMessage(Protocol):
    """Anything that carries a string ``message``."""

    message: str


class MessageError(Exception):
    """Exception built from a value that had no usable message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


def _message_of(value: Any) -> Optional[str]:
    """Return the string message carried by ``value``, or None.

    Lookups that raise (a failing ``message`` property, a broken mapping)
    count as no message.
    """
    try:
        if isinstance(value, Mapping):
            message = value.get("message")
        else:
            message = getattr(value, "message", None)
    except Exception:  # noqa: BLE001 - arbitrary user objects
        return None
    return message if isinstance(message, str) else None


def is_error_with_message(error: Any) -> bool:
    """Return True when ``error`` carries a string message.

    Accepts both attribute access (exceptions, objects) and mappings
    with a ``"message"`` key. Never raises.
    """
    return _message_of(error) is not None


def to_error_with_message(maybe_error: Any = _MISSING) -> ErrorWithMessage:
    """Coerce an arbitrary value into something with a string message.

    Objects that already expose a string ``message`` attribute are returned
    unchanged. Never raises.
    """
    if maybe_error is _MISSING:
        return MessageError("")
    message = _message_of(maybe_error)
    if message is not None:
        if isinstance(maybe_error, Mapping):
            return MessageError(message)
        return maybe_error

    try:
        return MessageError(json.dumps(maybe_error))
    except (TypeError, ValueError, RecursionError):
        return MessageError(_plain_str(maybe_error))


def get_error_message(error: Any = _MISSING) -> str:
    """Best-effort message extraction for any raised or returned value.

    Calling with no argument is the "nothing was raised" case and
    yields an empty string; ``None`` yields ``"null"``.
    """
    if error is not _MISSING:
        message = _message_of(error)
        if message is not None:
            return message
    return to_error_with_message(error).message


def _plain_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001 - __str__ of an arbitrary object
        return object.__repr__(value)


def _driver_message(err: BaseException) -> str:
    orig = getattr(err, "orig", None)
    return _plain_str(orig if orig is not None else err)


def _diagnostic_detail(err: BaseException) -> str:
    return "".join(traceback.format_exception(type(err), err, err.__traceback__))


def handle_storage_error(err: Any) -> Err:
    """Map a storage-layer failure to a Result failure.

    Args:
        err: Whatever was raised while talking to the storage layer.

    Returns:
        Err wrapping a ProcedureError with the matching code.
    """
    if isinstance(err, KNOWN_REQUEST_ERRORS):
        logger.warning("Rejected storage request: %s", type(err).__name__)
        return Err(
            ProcedureError(
                code=ErrorCode.BAD_REQUEST,
                message=_driver_message(err),
                cause=_diagnostic_detail(err),
            )
        )

    if isinstance(err, UNKNOWN_REQUEST_ERRORS + VALIDATION_ERRORS):
        logger.error("Storage request failed: %s", type(err).__name__)
        return Err(
            ProcedureError(
                code=ErrorCode.INTERNAL_SERVER_ERROR,
                message=_driver_message(err),
                cause=_diagnostic_detail(err),
            )
        )

    logger.error("Unexpected storage failure: %s", type(err).__name__)
    return Err(
        ProcedureError(
            code=ErrorCode.INTERNAL_SERVER_ERROR,
            message=get_error_message(err),
            cause=err,
        )
    )
