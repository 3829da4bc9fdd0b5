# 저장소(MongoDB) 연결 컨텍스트
# - Motor 클라이언트와 데이터베이스를 명시적으로 소유
# - Beanie 초기화 (User, Todo)
# - pymongo 예외를 도메인 예외로 변환하는 데코레이터

import functools
import logging
from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import DuplicateKeyError, PyMongoError

from .config import Settings
from .exceptions import StoreError, ValidationError
from .retry import create_connect_retry_decorator
from ..models.todo import Todo
from ..models.user import User

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "TodoApp"
DOCUMENT_MODELS = [User, Todo]


class Database:
    """앱 수명 동안 하나만 만들어 app.state 에 보관하는 저장소 컨텍스트

    client 를 넘기지 않으면 설정의 MONGODB_URI 로 직접 만들고, 종료 시 닫습니다.
    테스트에서는 인메모리 클라이언트(mongomock-motor)를 넘겨 사용합니다.
    """

    def __init__(self, settings: Settings, client=None):
        self.settings = settings
        self._owns_client = client is None
        if client is None:
            client = AsyncIOMotorClient(
                settings.MONGODB_URI,
                serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            )
        self.client = client
        if settings.MONGODB_DATABASE:
            self.db = client.get_database(settings.MONGODB_DATABASE)
        else:
            self.db = client.get_default_database(DEFAULT_DATABASE)
        self.name = settings.MONGODB_DATABASE or self.db.name
        self.ready = False

    async def connect(self) -> None:
        if self._owns_client:
            ping = create_connect_retry_decorator(max_attempts=self.settings.MONGODB_CONNECT_ATTEMPTS)(self._ping)
            await ping()
        await init_beanie(database=self.db, document_models=DOCUMENT_MODELS)
        self.ready = True
        logger.info(f"[Database] Beanie 초기화 완료: {self.name}")

    async def _ping(self) -> None:
        await self.client.admin.command("ping")

    def close(self) -> None:
        self.ready = False
        if self._owns_client:
            self.client.close()
            logger.info("[Database] MongoDB 연결 종료")


def translate_store_errors(operation: str):
    """저장소 메서드에서 발생한 pymongo 예외를 도메인 예외로 바꾸는 데코레이터

    - DuplicateKeyError -> ValidationError (유니크 키 중복)
    - 그 외 PyMongoError -> StoreError
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except DuplicateKeyError as e:
                logger.warning(f"[Database] {operation}: duplicate key")
                raise ValidationError("Duplicate key") from e
            except PyMongoError as e:
                logger.error(f"[Database] {operation} 실패: {e}", exc_info=True)
                raise StoreError(operation, str(e)) from e
        return wrapper
    return decorator
