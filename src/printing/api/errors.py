"""Map domain errors onto HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from printing.exceptions import DependencyFailure, IntegrityError, InvalidStateError

ERROR_STATUS_CODES = {
    ValidationError: 400,
    ObjectNotFoundError: 404,
    InvalidStateError: 409,
    ExpectedVersionError: 409,
    IntegrityError: 500,
    DependencyFailure: 503,
}


def _error_payload(exc) -> dict:
    messages = getattr(exc, "messages", None)
    return {"error": messages if messages is not None else str(exc)}


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers for Protean and printing errors on ``app``."""
    register_exception_handlers(app)

    for exc_class, status_code in ERROR_STATUS_CODES.items():

        async def handler(request: Request, exc: Exception, status_code: int = status_code) -> JSONResponse:
            return JSONResponse(status_code=status_code, content=_error_payload(exc))

        app.add_exception_handler(exc_class, handler)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": jsonable_encoder(exc.errors())})
