import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from item_analysis.api.schemas import ErrorDetail
from item_analysis.core.data import ParseError

logger = logging.getLogger(__name__)


class DataSizeExceededError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _get_request_id(request: Request) -> str | None:
    if hasattr(request.state, "request_id"):
        result: str = request.state.request_id
        return result
    return None


async def parse_error_handler(
    request: Request, exc: ParseError
) -> JSONResponse:
    logger.info(f"Rejected upload: {exc}")
    detail = ErrorDetail(
        code="PARSE_ERROR",
        message=str(exc),
        request_id=_get_request_id(request),
    )
    return JSONResponse(status_code=422, content=detail.model_dump())


async def data_size_exceeded_handler(
    request: Request, exc: DataSizeExceededError
) -> JSONResponse:
    detail = ErrorDetail(
        code="DATA_SIZE_EXCEEDED",
        message=exc.message,
        request_id=_get_request_id(request),
    )
    return JSONResponse(status_code=422, content=detail.model_dump())


async def validation_error_handler(
    request: Request, exc: ValidationError | RequestValidationError
) -> JSONResponse:
    message = "; ".join(str(err.get("msg", err)) for err in exc.errors())
    detail = ErrorDetail(
        code="VALIDATION_ERROR",
        message=message,
        request_id=_get_request_id(request),
    )
    return JSONResponse(status_code=422, content=detail.model_dump())


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.exception("Unhandled exception")
    detail = ErrorDetail(
        code="INTERNAL_ERROR",
        message="Internal server error",
        request_id=_get_request_id(request),
    )
    return JSONResponse(status_code=500, content=detail.model_dump())
