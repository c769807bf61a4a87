"""
Exception handlers mapping domain errors to the API error shape
``{"message": str, "errors": [str]}``.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.exceptions import InvalidIdentifier, NotFound, ServerFault, ValidationFailed
from infrastructure.logging.structlog_logs import logger


def _error(status_code: int, message: str, errors: list[str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "errors": errors})


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, exc.message, exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append(f"{'.'.join(loc)}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


async def invalid_identifier_handler(request: Request, exc: InvalidIdentifier) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, exc.message, [exc.message])


async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, exc.message, [])


async def server_fault_handler(request: Request, exc: ServerFault) -> JSONResponse:
    logger.error("server_fault", path=request.url.path, error=exc.message)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error", [exc.message])


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(InvalidIdentifier, invalid_identifier_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(ServerFault, server_fault_handler)
