import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from config.settings import Settings
from models.teachers import Teacher as TeacherModel
from schemas.teachers import TeacherRegister
from utils.exceptions import ConflictError, InvalidCredentialsError
from utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


async def get_teacher_by_email(db: AsyncSession, email: str) -> Optional[TeacherModel]:
    result = await db.execute(select(TeacherModel).where(TeacherModel.email == email))
    return result.scalar_one_or_none()


async def get_teacher_by_id(db: AsyncSession, teacher_id: int) -> Optional[TeacherModel]:
    return await db.get(TeacherModel, teacher_id)


async def register_teacher(db: AsyncSession, data: TeacherRegister, settings: Settings) -> TeacherModel:
    if await get_teacher_by_email(db, data.email) is not None:
        raise ConflictError("Email already registered")

    # bcrypt는 CPU 작업이라 이벤트 루프 밖에서 실행
    hashed = await run_in_threadpool(hash_password, data.password, settings.BCRYPT_ROUNDS)
    teacher = TeacherModel(
        name=data.name,
        email=data.email,
        password_hash=hashed,
        phone=data.phone,
        subject=data.subject,
    )
    db.add(teacher)
    try:
        await db.commit()
    except IntegrityError:
        # 동시 가입 요청으로 유니크 제약에 걸린 경우
        await db.rollback()
        raise ConflictError("Email already registered")
    await db.refresh(teacher)
    logger.info(f"Teacher registered: id={teacher.id}")
    return teacher


async def authenticate(db: AsyncSession, email: str, password: str, settings: Settings):
    """이메일/비밀번호 확인 후 (토큰, 교사) 반환. 실패 시 InvalidCredentialsError (400)."""
    teacher = await get_teacher_by_email(db, email)
    if teacher is None:
        logger.warning(f"Login failed: unknown email {email}")
        raise InvalidCredentialsError("Invalid credentials (email not found)")

    valid = await run_in_threadpool(verify_password, password, teacher.password_hash)
    if not valid:
        logger.warning(f"Login failed: wrong password for teacher id={teacher.id}")
        raise InvalidCredentialsError("Invalid credentials (password incorrect)")

    token = create_access_token(
        teacher.id,
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_hours=settings.JWT_EXPIRE_HOURS,
    )
    return token, teacher
