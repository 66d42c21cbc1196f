from pydantic import Field
from typing import List, Optional
from schemas.common import CamelModel

# ==========================================================
# [출력용 스키마] 반별 출결 요약 (GET /reports/summary)
# ==========================================================
class StudentStat(CamelModel):
    student_id: int                     # 학생 ID
    roll: Optional[int] = None          # 명부에서 찾지 못하면 None
    name: Optional[str] = None
    present: int                        # 출석 횟수
    total: int                          # 기록된 항목 수 (결석 포함)
    percentage: float                   # 출석률 (소수점 한 자리)


class AttendanceSummary(CamelModel):
    average: float = 0                  # 전체 출석률(%)
    perfect_count: int = 0              # 개근 학생 수
    below75_count: int = Field(0, alias="below75Count")  # 출석률 75% 미만
    chronic_absence_count: int = 0      # 출석률 50% 미만 (below75 와 중복 집계)
    days: int = 0                       # 기록이 존재하는 날짜 수
    total_students_tracked: int = 0     # 기록이 1건 이상인 학생 수
    total_present_across_all: int = 0
    total_entries_across_all: int = 0
    students: List[StudentStat] = Field(default_factory=list)
    unresolved_student_ids: List[int] = Field(default_factory=list)  # 명부에 없는 학생 ID
