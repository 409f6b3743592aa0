"""
Error mapping.

Turns pick'em errors into JSON responses with a stable ``code``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.pickem.errors import (AlreadySubmitted, ConfigUnavailable, DataServiceError, DataServiceTimeout,
                               EmptySession, GameNotOnSlate, GameStarted, InvalidSide, LimitReached,
                               LinesUnavailable, PickemError, PickLocked, PickNotFound, SubmissionFailed,
                               SubmissionInProgress, )

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[PickemError], int] = {
    AlreadySubmitted: status.HTTP_409_CONFLICT,
    LimitReached: status.HTTP_409_CONFLICT,
    SubmissionInProgress: status.HTTP_409_CONFLICT,
    EmptySession: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidSide: status.HTTP_422_UNPROCESSABLE_ENTITY,
    GameNotOnSlate: status.HTTP_422_UNPROCESSABLE_ENTITY,
    LinesUnavailable: status.HTTP_422_UNPROCESSABLE_ENTITY,
    GameStarted: status.HTTP_422_UNPROCESSABLE_ENTITY,
    PickLocked: status.HTTP_403_FORBIDDEN,
    PickNotFound: status.HTTP_404_NOT_FOUND,
    ConfigUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
    SubmissionFailed: status.HTTP_502_BAD_GATEWAY,
}


async def pickem_error_handler(request: Request, exc: PickemError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.info("Rejected %s %s: %s (%s)", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=status_code,
                        content={ "code": exc.code, "detail": exc.message, "context": exc.context })


async def data_service_error_handler(request: Request, exc: DataServiceError) -> JSONResponse:
    logger.error("Data service error on %s %s: %s", request.method, request.url.path, exc)
    if isinstance(exc, DataServiceTimeout):
        return JSONResponse(status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                            content={ "code": "data_service_timeout", "detail": str(exc) })
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                        content={ "code": "data_service_error", "detail": str(exc) })


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PickemError, pickem_error_handler)
    app.add_exception_handler(DataServiceError, data_service_error_handler)
