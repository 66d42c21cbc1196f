"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 요청/응답 공통 베이스: CamelModel (JSON은 camelCase, 파이썬 속성은 snake_case)
  2) 날짜 문자열 타입: IsoDate ("YYYY-MM-DD", 0 채움 필수)
  3) 에러 응답 표준: ErrorResponse
"""

from __future__ import annotations

import re
from datetime import date
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =========================================================
# 1) camelCase 베이스 모델
# =========================================================

class CamelModel(BaseModel):
    """
    프론트와 주고받는 JSON 필드는 camelCase (className, studentId ...)
    - 파이썬 코드에서는 snake_case 로 접근
    - by_alias 덤프 시 camelCase 로 직렬화
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =========================================================
# 2) 날짜 문자열
# =========================================================

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_iso_date(value: str) -> str:
    """
    "YYYY-MM-DD" 형식(0 채움)만 허용.
    기간 조회를 문자열 대소 비교로 하기 때문에 "2025-9-1" 같은 값이 섞이면 조회가 틀어짐.
    """
    if not _ISO_DATE.match(value):
        raise ValueError("date must be in YYYY-MM-DD form")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError("date is not a valid calendar day")
    return value


IsoDate = Annotated[str, AfterValidator(validate_iso_date)]


# =========================================================
# 3) 에러 응답 표준
# =========================================================

class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - message 는 항상 포함
    - error 는 내부 오류 상세/검증 오류 목록 등 (선택)
    """
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")
    error: Optional[Any] = Field(default=None, description="원인 상세 (검증 오류 목록, 내부 예외 메시지 등)")

    model_config = ConfigDict(extra="ignore")
