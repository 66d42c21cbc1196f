from sqlalchemy import Column, Integer, String, UniqueConstraint
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 명부 테이블

    # ✅ (반, 번호) 조합이 학생 식별 키 → 일괄 upsert 충돌 기준
    __table_args__ = (
        UniqueConstraint("class_name", "roll", name="uq_students_class_roll"),
    )

    id = Column(Integer, primary_key=True, index=True)      # 고유 학생 ID (PK)
    roll = Column(Integer, nullable=False)                  # 반 내 번호
    name = Column(String(100), nullable=False)              # 학생 이름
    class_name = Column(String(50), nullable=False, index=True)  # 반 이름 (예: Class 5-A)
    parent_phone = Column(String(20))                       # 보호자 연락처
