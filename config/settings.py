"""
config/settings.py

- .env 및 환경변수를 읽어 애플리케이션 전역 설정으로 제공합니다.
- pydantic v2 / pydantic-settings v2 사용.
- DB URL은 DATABASE_URL을 직접 지정하거나, 부분 값(DB_USER/DB_PASSWORD/DB_HOST/DB_PORT/DB_NAME)으로
  MySQL(aiomysql) URL을 구성합니다. 둘 다 없으면 로컬 SQLite(aiosqlite) 파일을 사용합니다.
"""

from typing import List, Optional, Literal
from pydantic import field_validator, model_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "dev-secret-change-me"


class Settings(BaseSettings):
    # =========================
    # 앱/런타임
    # =========================
    ENV: Literal["dev", "test", "stage", "prod"] = "dev"
    APP_TITLE: str = "School Attendance API"
    APP_DESCRIPTION: str = "교사용 출결 기록 및 통계 백엔드 API"
    APP_VERSION: str = "1.0.0"

    # =========================
    # CORS
    # =========================
    # 콤마(,)로 구분된 문자열 → List[str] 로 파싱
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            # "a,b , c" → ["a","b","c"]
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # =========================
    # Database
    # =========================
    # 명시적 URL이 있으면 최우선 (예: sqlite+aiosqlite:///./attendance.db)
    DATABASE_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_NAME: str = "attendance"
    SQLITE_PATH: str = "./attendance.db"
    DB_ECHO: bool = False

    @computed_field  # type: ignore[misc]
    @property
    def DB_URL(self) -> str:
        """
        실제 엔진 생성에 쓰는 URL.
        DATABASE_URL > DB_HOST(MySQL) > SQLite 파일 순으로 결정.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST:
            return f"mysql+aiomysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"sqlite+aiosqlite:///{self.SQLITE_PATH}"

    # =========================
    # 인증 (JWT / bcrypt)
    # =========================
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = 24
    BCRYPT_ROUNDS: int = 10

    # =========================
    # 개발용 라우트 (/dev/seed)
    # =========================
    ENABLE_DEV_ROUTES: bool = True
    DEMO_TEACHER_PASSWORD: str = "teacher@demo.com"

    # =========================
    # Logging / Misc
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @model_validator(mode="after")
    def _check_prod_secret(self):
        # 운영 환경에서 기본 시크릿 사용 금지
        if self.ENV == "prod" and self.JWT_SECRET == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set in prod")
        return self

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",               # .env에서 값 로드
        env_file_encoding="utf-8",
        case_sensitive=False,          # 환경변수 대소문자 비구분
        extra="ignore",                # 정의되지 않은 키는 무시
    )


# ✅ settings 객체를 통해 어디서든 접근 가능
settings = Settings()
