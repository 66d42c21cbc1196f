from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database.db import get_db
from dependencies.security import require_teacher
from schemas.common import validate_iso_date
from services.report_service import build_class_summary
from utils.exceptions import ValidationError

router = APIRouter(
    prefix="/reports",
    tags=["출결 리포트"],
    dependencies=[Depends(require_teacher)],
)


# ==========================================================
# [SUMMARY] 반별 기간 출결 요약
#   - from ~ to 양 끝 포함, "YYYY-MM-DD" 문자열 비교
# ==========================================================
@router.get("/summary")
async def attendance_summary(
    class_name: str = Query(..., alias="className", min_length=1),
    date_from: str = Query(..., alias="from", description="시작일 (예: 2025-09-01)"),
    date_to: str = Query(..., alias="to", description="종료일 (예: 2025-09-30)"),
    db: AsyncSession = Depends(get_db),
):
    for name, value in (("from", date_from), ("to", date_to)):
        try:
            validate_iso_date(value)
        except ValueError as e:
            raise ValidationError(f"{name}: {e}")

    summary = await build_class_summary(db, class_name, date_from, date_to)
    return summary.model_dump(by_alias=True)
