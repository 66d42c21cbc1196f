import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


class Database:
    """
    프로세스 전역 DB 컨텍스트.

    앱 생성 시 한 번 만들어 app.state.db 에 보관하고,
    lifespan에서 connect() → (서비스) → close() 순서로 수명을 관리합니다.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        # ✅ 비동기 엔진 + 세션 팩토리
        self.engine = create_async_engine(url, echo=echo, future=True)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    async def connect(self):
        """테이블 생성 + 연결 확인. 실패하면 로그를 남기고 예외를 그대로 올립니다."""
        # 모델 등록 (metadata.create_all 대상)
        from models import attendance, students, teachers  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.run_sync(Base.metadata.create_all)
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            raise
        logger.info(f"Database connected ({self.dialect_name})")

    async def close(self):
        await self.engine.dispose()
        logger.info("Database connection closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """라우터 밖(스크립트, 테스트)에서 쓰는 세션 컨텍스트"""
        async with self.session_factory() as session:
            yield session


# ✅ FastAPI 의존성: 요청마다 세션 생성 후 반납
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    db: Database = request.app.state.db
    async with db.session() as session:
        yield session
