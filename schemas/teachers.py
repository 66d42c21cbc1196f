from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from schemas.common import CamelModel

# ✅ 입력용 스키마: 교사 회원가입 (POST /auth/register-teacher)
class TeacherRegister(CamelModel):
    name: str = Field(..., min_length=1)     # 교사 이름
    email: str = Field(..., min_length=1)    # 로그인 이메일 (유일)
    password: str = Field(..., min_length=1) # 평문 비밀번호 (서버에서 bcrypt 해시)
    phone: Optional[str] = None              # 연락처
    subject: Optional[str] = None            # 담당 과목

# ✅ 로그인 요청
class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

# ✅ 출력용 스키마: 비밀번호 해시는 절대 포함하지 않음
class Teacher(CamelModel):
    id: int                                  # 고유 교사 ID
    name: str
    email: str
    phone: Optional[str] = None
    subject: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

# ✅ 로그인 응답에 들어가는 최소 교사 정보
class TeacherBrief(CamelModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
