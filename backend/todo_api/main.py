# FastAPI 앱 빌더
# - Settings 를 명시적으로 받아 앱을 만듭니다 (전역 앱/전역 DB 연결 없음)
# - lifespan 에서 저장소 컨텍스트(Database) 생성 및 Beanie 초기화
# - 도메인 예외 -> HTTP 응답 매핑
# - CORS 설정, 헬스체크

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.todos import router as todos_router
from .api.users import router as users_router
from .core.config import Settings, load_settings
from .core.database import Database
from .core.exceptions import TodoApiError
from .core.security import AUTH_HEADER, TokenCodec

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)


async def todo_api_error_handler(request: Request, exc: TodoApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 본문 형식 오류, 허용되지 않은 필드는 모두 400 으로 응답합니다
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(settings: Optional[Settings] = None, mongo_client=None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)

    # 서명 비밀키가 없으면 여기서 ConfigurationError 로 시작을 멈춥니다
    token_codec = TokenCodec.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings, client=mongo_client)
        await database.connect()
        app.state.database = database
        logger.info(f"[App] {settings.APP_NAME} 시작 (env={settings.ENV})")
        try:
            yield
        finally:
            database.close()
            logger.info(f"[App] {settings.APP_NAME} 종료")

    app = FastAPI(
        title="Todo API",
        description="사용자별 Todo 관리 REST API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.token_codec = token_codec

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=bool(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[AUTH_HEADER],
    )

    app.add_exception_handler(TodoApiError, todo_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "app": settings.APP_NAME}

    app.include_router(users_router)
    app.include_router(todos_router)
    return app
