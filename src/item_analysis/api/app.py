import uuid
from collections.abc import Awaitable, Callable
from typing import cast

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.types import ExceptionHandler

from item_analysis.api.config import ApiSettings
from item_analysis.api.dependencies import (
    get_settings,
    init_analysis_service,
)
from item_analysis.api.errors import (
    DataSizeExceededError,
    data_size_exceeded_handler,
    parse_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from item_analysis.api.routes import router
from item_analysis.core.data import ParseError


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    if settings is None:
        settings = get_settings()

    app = FastAPI(title="Item Analysis API")
    app.state.settings = settings
    init_analysis_service(settings)

    # Exception handlers; cast needed because FastAPI expects
    # (Request, Exception) but our handlers use specific exc types.
    _eh = cast(ExceptionHandler, parse_error_handler)
    app.add_exception_handler(ParseError, _eh)
    _eh = cast(ExceptionHandler, data_size_exceeded_handler)
    app.add_exception_handler(DataSizeExceededError, _eh)
    _eh = cast(ExceptionHandler, validation_error_handler)
    app.add_exception_handler(ValidationError, _eh)
    app.add_exception_handler(RequestValidationError, _eh)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Request-ID middleware
    @app.middleware("http")
    async def request_id_middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get("X-Request-ID", uuid.uuid4().hex[:12])
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(router)

    return app
