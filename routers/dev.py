from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import Settings
from database.db import get_db
from dependencies.security import get_settings
from schemas.teachers import Teacher
from services.seed_service import seed_demo_data

router = APIRouter(prefix="/dev", tags=["개발용"])


# ✅ [SEED] 전체 데이터 삭제 후 데모 교사/학생 입력 (인증 없음, 개발 환경 전용)
@router.post("/seed")
async def seed(db: AsyncSession = Depends(get_db), settings: Settings = Depends(get_settings)):
    teacher = await seed_demo_data(db, settings)
    return {
        "message": "Seeded demo data",
        "teacher": Teacher.model_validate(teacher).model_dump(by_alias=True),
    }
