import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas.common import ErrorResponse
from services.exceptions import ResultServiceError

logger = logging.getLogger(__name__)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.of(code, message).model_dump(mode="json"),
    )


def add_error_handlers(app: FastAPI):
    # ✅ 도메인 예외 → 상태코드 (400 / 401 / 404 / 409)
    @app.exception_handler(ResultServiceError)
    async def service_exception_handler(request: Request, exc: ResultServiceError):
        logger.info(f"{request.method} {request.url.path} → {exc.status_code} {exc.code}: {exc.message}")
        return error_response(exc.status_code, exc.code, exc.message)

    # ✅ 요청 형식 오류 (필수값 누락, 타입 오류, 숫자가 아닌 id) → 400
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} → 400 invalid request: {exc.errors()}")
        return error_response(400, "VALIDATION_ERROR", "Invalid request data")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        response = error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))
        # 405의 Allow 등 원래 헤더 유지
        if getattr(exc, "headers", None):
            response.headers.update(exc.headers)
        return response

    # ✅ 그 외 예상 못 한 오류 → 500 (내부 메시지는 로그에만)
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"unhandled error on {request.method} {request.url.path}")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")
