from pydantic import ConfigDict, Field
from typing import List, Optional
from schemas.common import CamelModel

# ✅ 입력용 (POST /students 일괄 upsert 의 한 항목)
#    - roll/name/className 필수
#    - 나머지는 보낸 필드만 갱신 (보내지 않은 필드는 기존 값 유지)
class StudentInput(CamelModel):
    roll: int                                      # 반 내 번호
    name: str = Field(..., min_length=1)           # 학생 이름
    class_name: str = Field(..., min_length=1)     # 반 이름
    parent_phone: Optional[str] = None             # 보호자 연락처

class StudentBatch(CamelModel):
    students: List[StudentInput]

# ✅ 전체 출력용 (GET /students)
class Student(StudentInput):
    id: int

    model_config = ConfigDict(from_attributes=True)

# ✅ 일괄 upsert 결과
class UpsertResult(CamelModel):
    matched_count: int = 0       # 이미 있던 (반, 번호)
    modified_count: int = 0      # 그 중 실제로 값이 바뀐 수
    upserted_count: int = 0      # 새로 생성된 수
