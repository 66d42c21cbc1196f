import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.upsert import build_upsert
from models.attendance import AttendanceRecord as AttendanceModel
from schemas.attendance import AttendanceEntry
from utils.exceptions import InternalError, ValidationError

logger = logging.getLogger(__name__)


async def mark_attendance(db: AsyncSession, date: str, class_name: str,
                          entries: List[AttendanceEntry]) -> int:
    """
    (날짜, 반) 출결 기록 저장 후 기록 ID 반환.

    기록이 이미 있으면 entries 전체를 새 목록으로 교체 (병합 아님).
    유니크 제약 + 단일 upsert 문으로 처리하므로 같은 키로 동시에 요청이 와도
    기록은 하나만 남고, 마지막 쓰기가 반영됩니다.
    """
    if not date or not class_name:
        raise ValidationError("date and className are required")
    if not entries:
        raise ValidationError("entries must be a non-empty array")

    values = {
        "date": date,
        "class_name": class_name,
        "entries": [e.model_dump(by_alias=True) for e in entries],
    }
    stmt = build_upsert(
        db.bind.dialect.name,
        AttendanceModel.__table__,
        values,
        conflict_columns=("date", "class_name"),
        update_columns=("entries",),
    )
    try:
        await db.execute(stmt)

        # 새로 만든 기록이든 기존 기록이든 같은 트랜잭션 안에서 ID 조회
        result = await db.execute(
            select(AttendanceModel.id).where(
                AttendanceModel.date == date,
                AttendanceModel.class_name == class_name,
            )
        )
        record_id = result.scalar_one()
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Attendance save failed: date={date} class={class_name}: {e}")
        raise InternalError("Failed to save attendance", error=str(e))

    logger.info(f"Attendance saved: id={record_id} date={date} class={class_name} entries={len(entries)}")
    return record_id


async def get_attendance(db: AsyncSession, date: str, class_name: str) -> Optional[AttendanceModel]:
    result = await db.execute(
        select(AttendanceModel)
        .where(AttendanceModel.date == date, AttendanceModel.class_name == class_name)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def list_attendance_range(db: AsyncSession, class_name: str,
                                date_from: str, date_to: str) -> List[AttendanceModel]:
    """date_from ~ date_to (양 끝 포함) 기록. "YYYY-MM-DD" 문자열 비교."""
    result = await db.execute(
        select(AttendanceModel)
        .where(
            AttendanceModel.class_name == class_name,
            AttendanceModel.date >= date_from,
            AttendanceModel.date <= date_to,
        )
        .order_by(AttendanceModel.date)
        .execution_options(populate_existing=True)
    )
    return list(result.scalars())
