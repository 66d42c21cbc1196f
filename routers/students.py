from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database.db import get_db
from dependencies.security import require_teacher
from schemas.students import Student, StudentBatch
from services import roster_service

router = APIRouter(
    prefix="/students",
    tags=["학생 명부"],
    dependencies=[Depends(require_teacher)],
)


# ==========================================================
# 학생 명부 (반, 번호 기준)
# ==========================================================

# ✅ [UPSERT] 학생 일괄 추가/수정
@router.post("")
async def save_students(payload: StudentBatch, db: AsyncSession = Depends(get_db)):
    result = await roster_service.upsert_students(db, payload.students)
    return {"message": "Students saved", **result.model_dump(by_alias=True)}


# ✅ [READ] 반별 학생 목록 (번호 오름차순)
@router.get("")
async def read_students(
    class_name: Optional[str] = Query(None, alias="className"),
    db: AsyncSession = Depends(get_db),
):
    students = await roster_service.list_students(db, class_name)
    return [Student.model_validate(s).model_dump(by_alias=True) for s in students]
