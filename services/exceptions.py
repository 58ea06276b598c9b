"""
services/exceptions.py

- 서비스/저장소 계층에서 던지는 도메인 예외
- HTTP 상태코드 매핑은 middlewares/error_handler.py 에서 처리
"""


class ResultServiceError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class ValidationError(ResultServiceError):
    """요청 값이 잘못됨 (필수값 누락, 타입 오류 등)"""
    status_code = 400
    code = "VALIDATION_ERROR"


class InvalidReferenceError(ValidationError):
    """성적이 존재하지 않는 학생/과목/교사를 가리킴"""
    code = "INVALID_REFERENCE"


class AuthError(ResultServiceError):
    status_code = 401
    code = "INVALID_CREDENTIALS"


class NotFoundError(ResultServiceError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(ResultServiceError):
    """이메일/학번/과목코드 중복"""
    status_code = 409
    code = "CONFLICT"
