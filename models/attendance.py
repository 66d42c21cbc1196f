from sqlalchemy import Column, Integer, String, JSON, UniqueConstraint
from database.db import Base

class AttendanceRecord(Base):
    __tablename__ = "attendance"  # 반별 일일 출결 기록 테이블

    # ✅ 하루 한 반당 기록은 하나뿐 (DB 유니크 제약으로 보장)
    __table_args__ = (
        UniqueConstraint("date", "class_name", name="uq_attendance_date_class"),
    )

    id = Column(Integer, primary_key=True, index=True)      # 출결 기록 ID (PK)
    date = Column(String(10), nullable=False, index=True)   # 날짜 "YYYY-MM-DD" (문자열 비교로 기간 조회)
    class_name = Column(String(50), nullable=False)         # 반 이름

    # ✅ 학생별 출결 항목 목록 (순서 유지)
    #    [{"studentId": 1, "present": true, "remarks": ""}, ...]
    #    - studentId는 students.id 약한 참조 (FK 없음, 학생이 없어져도 기록은 유지)
    #    - 재제출 시 목록 전체를 한 번에 교체
    entries = Column(JSON, nullable=False, default=list)
