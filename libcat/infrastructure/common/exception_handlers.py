"""Map exceptions raised while serving a request to the failure envelope."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from libcat.constants import ErrorCode, ErrorMessages
from libcat.domain.common.exceptions import DomainError
from libcat.exceptions import LibraryError
from libcat.infrastructure.common.schemas import ApiResponse

logger = structlog.get_logger(__name__)


def _failure(status_code: int, code: ErrorCode, details: str) -> JSONResponse:
    body = ApiResponse[None].fail(ErrorMessages.BY_CODE[code], code, details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def library_error_handler(request: Request, exc: LibraryError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "request_failed",
            path=request.url.path,
            code=exc.code,
            error=exc.message,
            exc_info=exc,
        )
    else:
        logger.warning("request_rejected", path=request.url.path, code=exc.code, error=exc.message)
    return _failure(exc.status_code, exc.code, exc.message)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("domain_rule_violated", path=request.url.path, error=str(exc))
    return _failure(
        status.HTTP_422_UNPROCESSABLE_CONTENT, ErrorCode.VALIDATION_ERROR, exc.message
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning("request_invalid", path=request.url.path, error=details)
    return _failure(status.HTTP_422_UNPROCESSABLE_CONTENT, ErrorCode.VALIDATION_ERROR, details)


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("datastore_failed", path=request.url.path, exc_info=exc)
    return _failure(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.UPSTREAM_ERROR,
        "Datastore operation failed",
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("request_crashed", path=request.url.path, exc_info=exc)
    return _failure(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.UPSTREAM_ERROR,
        "Unexpected server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the failure envelope handlers on ``app``."""
    app.add_exception_handler(LibraryError, library_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        request_validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
