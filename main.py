import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings, settings as default_settings
from database.db import Database

# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import attendance, auth, dev, reports, students

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # HTTP / 드라이버 라이브러리 디버그 로그 비활성화
    for name in ("httpcore", "httpx", "aiosqlite"):
        logging.getLogger(name).setLevel(logging.WARNING)


# ----- Lifespan: DB 연결 → 서비스 → 연결 해제 -----
@asynccontextmanager
async def lifespan(app: FastAPI):
    db: Database = app.state.db
    await db.connect()
    logger.info(f"🚀 {app.title} ready")
    yield
    await db.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    # ✅ 요청마다 꺼내 쓰는 전역 컨텍스트 (설정 + DB)
    app.state.settings = settings
    app.state.db = Database(settings.DB_URL, echo=settings.DB_ECHO)

    # ✅ CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ✅ 요청 지연 측정 + 접근 로그 (응답 헤더 X-Latency-Ms 추가)
    app.add_middleware(TimingMiddleware)

    # ✅ 전역 에러 핸들러 등록 (모든 에러 응답은 {message} JSON)
    add_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(students.router)
    app.include_router(attendance.router)
    app.include_router(reports.router)
    if settings.ENABLE_DEV_ROUTES:
        app.include_router(dev.router)

    # ✅ 헬스체크 엔드포인트
    @app.get("/health")
    async def health_check():
        return {"status": "ok", "message": "API is running"}

    return app


app = create_app()
