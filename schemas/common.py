"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 에러 응답 표준: ErrorDetail, ErrorResponse
  2) 단순 메시지 응답: MessageResponse
  3) id 범위 제한: MAX_DB_INT, EntityId
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, Field, ConfigDict

# DB 정수 컬럼(64비트 부호 있음)에 들어가는 최대값. 넘으면 400
MAX_DB_INT = 2**63 - 1

# ✅ 경로의 id 파라미터 (양의 정수, DB 범위 이내)
EntityId = Annotated[int, Path(ge=1, le=MAX_DB_INT)]


# =========================================================
# 1) 에러 응답 표준
# =========================================================

class ErrorDetail(BaseModel):
    """에러 코드/메시지를 담는 최소 단위"""
    code: str = Field(..., description="에러 식별 코드 (예: NOT_FOUND, VALIDATION_ERROR)")
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")


class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - message: 프론트에서 바로 토스트로 띄우는 문구 (기존 클라이언트 호환)
    - error: 코드까지 포함한 상세 (검증 실패와 404를 코드로 구분)
    - 내부 예외 메시지는 절대 담지 않음
    """
    message: str
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="응답 생성 시각 (UTC)"
    )

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def of(cls, code: str, message: str) -> "ErrorResponse":
        return cls(message=message, error=ErrorDetail(code=code, message=message))


# =========================================================
# 2) 단순 메시지 응답
# =========================================================

class MessageResponse(BaseModel):
    message: str
