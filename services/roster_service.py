from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.upsert import build_upsert
from models.students import Student as StudentModel
from schemas.students import StudentInput, UpsertResult

KEY_COLUMNS = ("class_name", "roll")


async def upsert_students(db: AsyncSession, students: List[StudentInput]) -> UpsertResult:
    """
    (반, 번호) 기준 학생 일괄 upsert.

    - 항목마다 INSERT ... ON CONFLICT UPDATE 한 문장씩 실행
    - 요청에 포함된 필드만 갱신 (보내지 않은 parentPhone 등은 기존 값 유지)
    - 결과는 matched / modified / upserted 개수로 보고
    """
    result = UpsertResult()
    if not students:
        return result

    # 기존 행 스냅샷: 개수 집계용 (쓰기 자체는 upsert 문이 원자적으로 처리)
    class_names = {s.class_name for s in students}
    rows = await db.execute(
        select(StudentModel.class_name, StudentModel.roll, StudentModel.name, StudentModel.parent_phone)
        .where(StudentModel.class_name.in_(class_names))
    )
    existing: Dict[tuple, dict] = {
        (r.class_name, r.roll): {"name": r.name, "parent_phone": r.parent_phone}
        for r in rows
    }

    dialect_name = db.bind.dialect.name
    table = StudentModel.__table__

    for student in students:
        values = student.model_dump(exclude_unset=True)
        key = (values["class_name"], values["roll"])
        update_columns = [col for col in values if col not in KEY_COLUMNS]

        stmt = build_upsert(dialect_name, table, values, KEY_COLUMNS, update_columns)
        await db.execute(stmt)

        before = existing.get(key)
        if before is None:
            result.upserted_count += 1
            existing[key] = {col: values.get(col) for col in ("name", "parent_phone")}
        else:
            result.matched_count += 1
            if any(before.get(col) != values[col] for col in update_columns):
                result.modified_count += 1
            before.update({col: values[col] for col in update_columns})

    await db.commit()
    return result


async def list_students(db: AsyncSession, class_name: Optional[str] = None) -> List[StudentModel]:
    """반 이름이 있으면 해당 반만, 없으면 전체. 번호 오름차순."""
    query = select(StudentModel)
    if class_name:
        query = query.where(StudentModel.class_name == class_name)
        query = query.order_by(StudentModel.roll, StudentModel.id)
    else:
        query = query.order_by(StudentModel.class_name, StudentModel.roll, StudentModel.id)
    result = await db.execute(query)
    return list(result.scalars())


async def get_students_by_ids(db: AsyncSession, ids: Iterable[int]) -> Dict[int, StudentModel]:
    ids = set(ids)
    if not ids:
        return {}
    result = await db.execute(select(StudentModel).where(StudentModel.id.in_(ids)))
    return {s.id: s for s in result.scalars()}
