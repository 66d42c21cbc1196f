from typing import Iterable

from sqlalchemy import Table
from sqlalchemy.dialects import mysql, postgresql, sqlite


def build_upsert(dialect_name: str, table: Table, values: dict,
                 conflict_columns: Iterable[str], update_columns: Iterable[str]):
    """
    유니크 키 충돌 시 UPDATE 하는 단일 INSERT 문을 DB 방언에 맞게 생성합니다.

    - sqlite / postgresql : INSERT ... ON CONFLICT (...) DO UPDATE SET ...
    - mysql / mariadb     : INSERT ... ON DUPLICATE KEY UPDATE ...

    조회 후 삽입(read-then-insert)과 달리 한 문장으로 처리되므로
    동시 요청이 와도 유니크 제약 아래에서 한 행으로 수렴합니다.
    """
    update_columns = list(update_columns)

    if dialect_name in ("mysql", "mariadb"):
        stmt = mysql.insert(table).values(**values)
        return stmt.on_duplicate_key_update(
            {col: stmt.inserted[col] for col in update_columns}
        )

    if dialect_name == "sqlite":
        insert = sqlite.insert
    elif dialect_name == "postgresql":
        insert = postgresql.insert
    else:
        raise NotImplementedError(f"upsert not supported for dialect: {dialect_name}")

    stmt = insert(table).values(**values)
    return stmt.on_conflict_do_update(
        index_elements=list(conflict_columns),
        set_={col: stmt.excluded[col] for col in update_columns},
    )
