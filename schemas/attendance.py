from pydantic import ConfigDict, Field, StrictBool
from typing import List
from schemas.common import CamelModel, IsoDate

# ✅ 출결 항목 (학생 1명)
#    - present 는 반드시 true/false (문자열 "true", 1 등은 거부)
class AttendanceEntry(CamelModel):
    student_id: int                          # 학생 ID (students.id 약한 참조)
    present: StrictBool                      # 출석 여부
    remarks: str = ""                        # 비고

# ✅ 입력용 (POST /attendance/mark)
class AttendanceMark(CamelModel):
    date: IsoDate                            # 날짜 "YYYY-MM-DD"
    class_name: str = Field(..., min_length=1)
    entries: List[AttendanceEntry] = Field(..., min_length=1)

# ✅ 출력용 (GET /attendance)
class AttendanceRecord(CamelModel):
    id: int                                  # 출결 기록 고유 ID
    date: str
    class_name: str
    entries: List[AttendanceEntry]

    model_config = ConfigDict(from_attributes=True)
