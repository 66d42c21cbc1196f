import asyncio

import pytest
from sqlalchemy import func, select, text

import services.attendance_service as attendance_service
from models.attendance import AttendanceRecord as AttendanceModel
from schemas.attendance import AttendanceEntry
from services.attendance_service import get_attendance, list_attendance_range, mark_attendance
from utils.exceptions import InternalError, ValidationError

pytestmark = pytest.mark.anyio


def entries(*pairs):
    return [AttendanceEntry(student_id=sid, present=present) for sid, present in pairs]


async def count_records(database):
    async with database.session() as s:
        return (await s.execute(select(func.count(AttendanceModel.id)))).scalar_one()


async def test_mark_twice_keeps_one_record(database):
    payload = entries((1, True), (2, False))

    async with database.session() as s:
        first = await mark_attendance(s, "2025-09-01", "Class 5-A", payload)
    async with database.session() as s:
        second = await mark_attendance(s, "2025-09-01", "Class 5-A", payload)

    assert first == second
    assert await count_records(database) == 1
    async with database.session() as s:
        record = await get_attendance(s, "2025-09-01", "Class 5-A")
    assert record.entries == [
        {"studentId": 1, "present": True, "remarks": ""},
        {"studentId": 2, "present": False, "remarks": ""},
    ]


async def test_resubmission_replaces_entries(database):
    async with database.session() as s:
        await mark_attendance(s, "2025-09-01", "Class 5-A", entries((1, True), (2, True), (3, True)))
    async with database.session() as s:
        await mark_attendance(s, "2025-09-01", "Class 5-A", entries((4, False)))

    async with database.session() as s:
        record = await get_attendance(s, "2025-09-01", "Class 5-A")
    assert record.entries == [{"studentId": 4, "present": False, "remarks": ""}]


async def test_same_date_other_class_is_separate(database):
    async with database.session() as s:
        a = await mark_attendance(s, "2025-09-01", "Class 5-A", entries((1, True)))
    async with database.session() as s:
        b = await mark_attendance(s, "2025-09-01", "Class 5-B", entries((1, True)))

    assert a != b
    assert await count_records(database) == 2


async def test_concurrent_marks_converge_to_one_record(database):
    payload_a = entries((1, True), (2, True))
    payload_b = entries((3, False))

    async def mark(payload):
        async with database.session() as s:
            return await mark_attendance(s, "2025-09-02", "Class 5-A", payload)

    ids = await asyncio.gather(mark(payload_a), mark(payload_b))

    assert ids[0] == ids[1]
    assert await count_records(database) == 1
    async with database.session() as s:
        record = await get_attendance(s, "2025-09-02", "Class 5-A")
    dumped = [[e.model_dump(by_alias=True) for e in p] for p in (payload_a, payload_b)]
    assert record.entries in dumped


async def test_empty_entries_rejected_before_write(database):
    async with database.session() as s:
        with pytest.raises(ValidationError):
            await mark_attendance(s, "2025-09-01", "Class 5-A", [])

    assert await count_records(database) == 0


async def test_range_is_inclusive_and_ordered(database):
    for day in ("2025-09-03", "2025-09-01", "2025-09-05", "2025-08-31"):
        async with database.session() as s:
            await mark_attendance(s, day, "Class 5-A", entries((1, True)))
    async with database.session() as s:
        await mark_attendance(s, "2025-09-02", "Class 5-B", entries((1, True)))

    async with database.session() as s:
        records = await list_attendance_range(s, "Class 5-A", "2025-09-01", "2025-09-05")

    assert [r.date for r in records] == ["2025-09-01", "2025-09-03", "2025-09-05"]


async def test_missing_record_returns_none(database):
    async with database.session() as s:
        assert await get_attendance(s, "2025-09-01", "Class 5-A") is None


async def test_store_failure_raises_internal_error(database, monkeypatch):
    monkeypatch.setattr(
        attendance_service, "build_upsert",
        lambda *args, **kwargs: text("INSERT INTO missing_table VALUES (1)"),
    )

    async with database.session() as s:
        with pytest.raises(InternalError) as exc_info:
            await mark_attendance(s, "2025-09-01", "Class 5-A", entries((1, True)))

    assert exc_info.value.status_code == 500
    assert "missing_table" in exc_info.value.error
    assert await count_records(database) == 0
