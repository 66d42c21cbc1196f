import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from config.settings import Settings
from models.attendance import AttendanceRecord as AttendanceModel
from models.students import Student as StudentModel
from models.teachers import Teacher as TeacherModel
from utils.security import hash_password

logger = logging.getLogger(__name__)

DEMO_TEACHER = {"name": "Demo Teacher", "email": "teacher@demo.com"}

DEMO_STUDENTS = [
    {"roll": 1, "name": "Aarav Kumar", "class_name": "Class 5-A"},
    {"roll": 2, "name": "Ishita Sharma", "class_name": "Class 5-A"},
    {"roll": 3, "name": "Vihaan Gupta", "class_name": "Class 5-A"},
]


async def seed_demo_data(db: AsyncSession, settings: Settings) -> TeacherModel:
    """세 테이블을 비우고 데모 교사 1명 + 학생 3명 입력"""
    await db.execute(delete(AttendanceModel))
    await db.execute(delete(StudentModel))
    await db.execute(delete(TeacherModel))

    hashed = await run_in_threadpool(hash_password, settings.DEMO_TEACHER_PASSWORD, settings.BCRYPT_ROUNDS)
    teacher = TeacherModel(**DEMO_TEACHER, password_hash=hashed)
    db.add(teacher)
    db.add_all([StudentModel(**s) for s in DEMO_STUDENTS])
    await db.commit()
    await db.refresh(teacher)

    logger.info("✅ Demo data seeded")
    return teacher
