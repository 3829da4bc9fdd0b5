# 설정 모듈
# - 환경변수(+ 비운영 환경에서는 .env 파일) 값을 한 곳에서 관리
# - 전역 os.environ 을 수정하지 않고, Settings 객체를 앱 빌더에 명시적으로 전달

import os
from pathlib import Path
from typing import Optional, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# backend/todo_api/core/config.py 기준 3단계 상위가 프로젝트 루트입니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

PRODUCTION = "production"


class Settings(BaseSettings):
    APP_NAME: str = "todo-api"
    ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    MONGODB_URI: str = "mongodb://localhost:27017/TodoApp"
    # 비어 있으면 URI 에 적힌 데이터베이스를 사용합니다 (없으면 TodoApp).
    MONGODB_DATABASE: Optional[str] = None
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGODB_CONNECT_ATTEMPTS: int = 3

    JWT_SECRET: str = Field(..., description="토큰 서명에 사용되는 비밀키. 없으면 서버가 시작되지 않습니다.")
    JWT_ALGORITHM: str = "HS256"
    # None 이면 만료 없는 토큰을 발급합니다 (로그아웃으로만 폐기).
    AUTH_TOKEN_EXPIRE_MINUTES: Optional[int] = None

    CORS_ALLOW_ORIGINS: str = ""
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENV == PRODUCTION

    @property
    def cors_origins(self) -> list:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


def env_files_for(env: str) -> Optional[Tuple[str, ...]]:
    """환경별로 읽을 .env 파일 목록을 반환합니다.

    운영(production)에서는 프로세스 환경변수만 사용하므로 None 을 반환합니다.
    나머지 환경에서는 공통 .env 다음에 .env.<env> 를 읽어 뒤의 값이 우선합니다.
    """
    if env == PRODUCTION:
        return None
    return (
        str(PROJECT_ROOT / ".env"),
        str(PROJECT_ROOT / f".env.{env}"),
    )


def load_settings(env: Optional[str] = None, **overrides) -> Settings:
    env = env or os.getenv("ENV", "development")
    return Settings(_env_file=env_files_for(env), ENV=env, **overrides)
