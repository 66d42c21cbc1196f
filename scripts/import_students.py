# 실행: python -m scripts.import_students data/students.csv
import asyncio
import csv
import sys
from typing import List

from config.settings import settings
from database.db import Database
from schemas.students import StudentInput
from services.roster_service import upsert_students

CSV_PATH = "data/students.csv"  # ✅ 기본 파일 경로 (roll,name,className,parentPhone)


def read_students_csv(path: str) -> List[StudentInput]:
    students = []
    with open(path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            data = {
                "roll": int(row["roll"]),              # 반 내 번호
                "name": row["name"].strip(),           # 학생 이름
                "className": row["className"].strip(), # 반 이름
            }
            # 빈 칸이면 보내지 않음 → 기존 연락처 유지
            if (row.get("parentPhone") or "").strip():
                data["parentPhone"] = row["parentPhone"].strip()
            students.append(StudentInput.model_validate(data))
    return students


async def import_students(path: str = CSV_PATH):
    students = read_students_csv(path)
    db = Database(settings.DB_URL, echo=settings.DB_ECHO)
    await db.connect()
    try:
        async with db.session() as session:
            result = await upsert_students(session, students)
    finally:
        await db.close()
    print(f"✅ 학생 명부 CSV → DB 반영 완료 (신규 {result.upserted_count}, 수정 {result.modified_count})")
    return result


if __name__ == "__main__":
    asyncio.run(import_students(sys.argv[1] if len(sys.argv) > 1 else CSV_PATH))
