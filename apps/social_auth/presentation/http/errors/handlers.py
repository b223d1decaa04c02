"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.social_auth.application.common.exceptions import ApplicationError
from apps.social_auth.domain.exceptions import DomainError
from apps.social_auth.presentation.http.errors.translators import translate_error

logger = logging.getLogger(__name__)


def _error_response(exc: Exception) -> JSONResponse:
    status_code, code = translate_error(exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": code.replace("_", " ").capitalize(), "code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        logger.info(
            "Request failed",
            extra={"path": request.url.path, "error": type(exc).__name__, "reason": exc.message},
        )
        return _error_response(exc)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.info(
            "Request failed",
            extra={"path": request.url.path, "error": type(exc).__name__, "reason": exc.message},
        )
        return _error_response(exc)
