"""FastAPI application exposing POST /check-downloadable."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gdrivecheck.dispatcher import RequestDispatcher
from gdrivecheck.errors import GDriveCheckError, RequestError

from .schemas import CheckRequest, CheckResponse, ErrorResponse

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid body, type, or link"},
    500: {"model": ErrorResponse, "description": "Google Drive request failed"},
}


def status_for_error(exc: GDriveCheckError) -> int:
    """Caller mistakes are 400; everything else (Drive failures) is 500."""
    if isinstance(exc, RequestError):
        return 400
    return 500


def create_app(dispatcher: RequestDispatcher) -> FastAPI:
    """Build the HTTP app around an already-configured dispatcher."""
    app = FastAPI(title="gdrivecheck", docs_url=None, redoc_url=None)
    app.state.dispatcher = dispatcher

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid parameters"})

    @app.exception_handler(GDriveCheckError)
    async def _check_error(request: Request, exc: GDriveCheckError) -> JSONResponse:
        status = status_for_error(exc)
        if status == 400:
            logger.info("Rejected request: %s", exc)
        else:
            logger.error("Check failed: %s", exc)
        return JSONResponse(status_code=status, content={"error": str(exc)})

    @app.post(
        "/check-downloadable",
        response_model=CheckResponse,
        responses=ERROR_RESPONSES,
    )
    def check_downloadable(body: CheckRequest, request: Request) -> CheckResponse:
        """Answer whether the link holds anything of the requested type."""
        downloadable = request.app.state.dispatcher.dispatch(body.link, body.type)
        return CheckResponse.from_bool(downloadable)

    return app
