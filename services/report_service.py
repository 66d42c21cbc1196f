"""
반별 출결 요약 통계.

- summarize_entries(): DB 없이 동작하는 순수 집계 함수 (기록 목록 → 통계)
- build_class_summary(): 기간 내 기록 조회 + 학생 ID를 명부에서 찾아 이름/번호 채움

집계 규칙
- days: 기간 내 기록이 존재하는 날짜 수 (기록이 없는 날은 세지 않음)
- 학생별 total 은 그 학생 항목이 있는 날 수. 그날 목록에 없으면 결석으로 치지 않음
- 75% 미만 / 50% 미만 집계는 서로 겹칠 수 있음
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from schemas.reports import AttendanceSummary, StudentStat
from services.attendance_service import list_attendance_range
from services.roster_service import get_students_by_ids

logger = logging.getLogger(__name__)

BELOW_THRESHOLD = 75
CHRONIC_THRESHOLD = 50


def round_half_up(value: float) -> float:
    """소수점 한 자리, 끝자리 5는 올림 (6.25 → 6.3)"""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass
class StudentTally:
    present: int = 0
    total: int = 0

    @property
    def percentage(self) -> float:
        return round_half_up(self.present / self.total * 100) if self.total else 0.0

    def below(self, threshold: int) -> bool:
        # present/total*100 < threshold 를 정수 비교로 (부동소수 오차 없음)
        return self.total > 0 and self.present * 100 < threshold * self.total

    @property
    def perfect(self) -> bool:
        return self.total > 0 and self.present == self.total


def tally_entries(records: Iterable[Sequence[Mapping]]) -> Dict[int, StudentTally]:
    """날짜별 entries 목록들을 학생 ID별 (present, total) 로 누적. 처음 등장한 순서 유지."""
    tallies: Dict[int, StudentTally] = OrderedDict()
    for entries in records:
        for entry in entries:
            tally = tallies.setdefault(entry["studentId"], StudentTally())
            if entry["present"]:
                tally.present += 1
            tally.total += 1
    return tallies


def summarize_entries(records: Sequence[Sequence[Mapping]]) -> AttendanceSummary:
    tallies = tally_entries(records)
    tracked = [t for t in tallies.values() if t.total > 0]

    total_present = sum(t.present for t in tracked)
    total_entries = sum(t.total for t in tracked)
    average = round_half_up(total_present / total_entries * 100) if total_entries else 0

    return AttendanceSummary(
        average=average,
        perfect_count=sum(1 for t in tracked if t.perfect),
        below75_count=sum(1 for t in tracked if t.below(BELOW_THRESHOLD)),
        chronic_absence_count=sum(1 for t in tracked if t.below(CHRONIC_THRESHOLD)),
        days=len(records),
        total_students_tracked=len(tracked),
        total_present_across_all=total_present,
        total_entries_across_all=total_entries,
        students=[
            StudentStat(student_id=sid, present=t.present, total=t.total, percentage=t.percentage)
            for sid, t in tallies.items()
        ],
    )


async def build_class_summary(db: AsyncSession, class_name: str,
                              date_from: str, date_to: str) -> AttendanceSummary:
    records = await list_attendance_range(db, class_name, date_from, date_to)
    summary = summarize_entries([r.entries for r in records])

    # ✅ 학생 ID → 명부 조회 (약한 참조라 없을 수도 있음)
    roster = await get_students_by_ids(db, [s.student_id for s in summary.students])
    unresolved = []
    for stat in summary.students:
        student = roster.get(stat.student_id)
        if student is None:
            unresolved.append(stat.student_id)
            continue
        stat.roll = student.roll
        stat.name = student.name

    if unresolved:
        # 집계에는 그대로 포함하고 목록으로 표시만 함
        logger.warning(f"Unresolved student ids in {class_name} {date_from}~{date_to}: {unresolved}")

    summary.unresolved_student_ids = unresolved
    summary.students.sort(key=lambda s: (s.roll is None, s.roll or 0, s.student_id))
    return summary
