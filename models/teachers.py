from sqlalchemy import Column, Integer, String
from database.db import Base

class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, index=True)                  # 교사 고유 ID (PK)
    name = Column(String(100), nullable=False)                          # 교사 이름
    email = Column(String(255), unique=True, nullable=False, index=True)  # 로그인 이메일 (유일)
    password_hash = Column(String(100), nullable=False)                 # bcrypt 해시 (응답에 노출 금지)
    phone = Column(String(20))                                          # 전화번호
    subject = Column(String(100))                                       # 담당 과목
