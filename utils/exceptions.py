from typing import Any, Optional


class AppError(Exception):
    """요청 처리 중 발생하는 오류의 기반 클래스. 에러 핸들러가 {message} JSON으로 변환합니다."""

    status_code = 500

    def __init__(self, message: str, error: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.error = error


class ValidationError(AppError):
    """요청 필드 누락/형식 오류"""

    status_code = 400


class InvalidCredentialsError(AppError):
    """로그인 이메일/비밀번호 불일치 (기존 동작대로 400)"""

    status_code = 400


class ConflictError(AppError):
    """중복 등록 (예: 이미 존재하는 이메일)"""

    status_code = 400


class AuthError(AppError):
    """토큰 누락/형식 오류/검증 실패/만료"""

    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class InternalError(AppError):
    status_code = 500
