from typing import Optional, Annotated
from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import Settings
from database.db import get_db
from models.teachers import Teacher as TeacherModel
from services.auth_service import get_teacher_by_id
from utils.exceptions import AuthError
from utils.security import decode_access_token

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def require_teacher(
    authorization: AuthHeader = None,
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> TeacherModel:
    if not authorization:
        raise AuthError("Unauthorized")

    # "Bearer <token>" 파싱
    try:
        scheme, token = authorization.split(" ", 1)
    except ValueError:
        raise AuthError("Invalid Authorization header format")

    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Invalid auth scheme")

    teacher_id = decode_access_token(token.strip(), settings.JWT_SECRET, settings.JWT_ALGORITHM)

    # 토큰은 유효하지만 교사 계정이 사라진 경우
    teacher = await get_teacher_by_id(db, teacher_id)
    if teacher is None:
        raise AuthError("Invalid token")
    return teacher
