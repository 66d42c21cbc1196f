from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import Settings
from database.db import get_db
from dependencies.security import get_settings
from schemas.teachers import LoginRequest, Teacher, TeacherBrief, TeacherRegister
from services import auth_service

router = APIRouter(prefix="/auth", tags=["인증"])


# ✅ [REGISTER] 교사 회원가입
@router.post("/register-teacher", status_code=201)
async def register_teacher(
    payload: TeacherRegister,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    teacher = await auth_service.register_teacher(db, payload, settings)
    return {"teacher": Teacher.model_validate(teacher).model_dump(by_alias=True)}


# ✅ [LOGIN] 로그인 → JWT 발급 (24시간 유효)
@router.post("/login")
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token, teacher = await auth_service.authenticate(db, payload.email, payload.password, settings)
    return {
        "token": token,
        "teacher": TeacherBrief.model_validate(teacher).model_dump(by_alias=True),
    }
