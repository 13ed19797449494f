import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from app.mappers.response_builder import build_error_response

from .custom import InvalidUsernameError, SnapshotFetchError, UnauthorizedError

logger = logging.getLogger(__name__)


async def snapshot_fetch_error_handler(request: Request, exc: SnapshotFetchError) -> JSONResponse:
    logger.error(
        "Snapshot fetch failed for %s: %s (status=%s)",
        request.url.path, exc.message, exc.status_code,
    )
    # The underlying cause stays in the logs.
    return JSONResponse(status_code=503, content=build_error_response().model_dump())


async def unauthorized_error_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    logger.warning("Rejected unauthenticated request to %s", request.url.path)
    return JSONResponse(
        status_code=401,
        content=build_error_response(exc.message).model_dump(),
    )


async def invalid_username_error_handler(_request: Request, exc: InvalidUsernameError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=build_error_response(exc.message).model_dump(),
    )
