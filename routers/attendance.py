from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database.db import get_db
from dependencies.security import require_teacher
from schemas.attendance import AttendanceMark, AttendanceRecord
from schemas.common import validate_iso_date
from services import attendance_service
from utils.exceptions import NotFoundError, ValidationError

router = APIRouter(
    prefix="/attendance",
    tags=["attendance"],
    dependencies=[Depends(require_teacher)],
)


# ✅ [MARK] 출결 저장 (같은 날짜+반이면 전체 교체)
@router.post("/mark")
async def mark_attendance(payload: AttendanceMark, db: AsyncSession = Depends(get_db)):
    record_id = await attendance_service.mark_attendance(
        db, payload.date, payload.class_name, payload.entries
    )
    return {"message": "Attendance saved", "attendanceId": record_id}


# ✅ [READ] 특정 날짜+반 출결 기록 조회
@router.get("")
async def read_attendance(
    date: str = Query(..., description="조회할 날짜 (예: 2025-09-17)"),
    class_name: str = Query(..., alias="className", min_length=1),
    db: AsyncSession = Depends(get_db),
):
    try:
        validate_iso_date(date)
    except ValueError as e:
        raise ValidationError(str(e))

    record = await attendance_service.get_attendance(db, date, class_name)
    if record is None:
        raise NotFoundError("Attendance record not found")
    return AttendanceRecord.model_validate(record).model_dump(by_alias=True)
