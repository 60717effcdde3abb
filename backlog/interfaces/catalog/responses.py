"""
Result → HTTP response translation.

Ok becomes ``{"ok": true, "value": ...}``; Err becomes
``{"ok": false, "error": {"code", "message"}}`` with the status that
matches the error code. The error cause is logged, never returned.
"""

import logging

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backlog.interfaces.catalog.schemas import ErrResponse
from backlog.shared.result import Err, ErrorCode, Ok, Result

logger = logging.getLogger(__name__)

ERR_RESPONSES = {
    400: {"model": ErrResponse},
    404: {"model": ErrResponse},
    500: {"model": ErrResponse},
}


def _serialize(value, item_schema: type[BaseModel]):
    if isinstance(value, list):
        return [item_schema.model_validate(item).model_dump(mode="json") for item in value]
    return item_schema.model_validate(value).model_dump(mode="json")


def result_response(
    result: Result, item_schema: type[BaseModel], success_status: int = 200
) -> JSONResponse:
    """Render a procedure Result as a JSON envelope.

    Args:
        result: Outcome of a procedure.
        item_schema: Schema used to serialize the Ok payload (or each
            element of it, for lists).
        success_status: Status code used for Ok.
    """
    match result:
        case Ok(value):
            return JSONResponse(
                status_code=success_status,
                content={"ok": True, "value": _serialize(value, item_schema)},
            )
        case Err(error):
            if error.code is ErrorCode.INTERNAL_SERVER_ERROR:
                logger.error("Procedure failed: %s | cause: %r", error.message, error.cause)
            else:
                logger.info("Procedure rejected (%s): %s", error.code.value, error.message)
            return JSONResponse(
                status_code=error.code.http_status,
                content=jsonable_encoder(
                    {"ok": False, "error": {"code": error.code.value, "message": error.message}}
                ),
            )
    raise TypeError(f"Not a Result: {result!r}")
