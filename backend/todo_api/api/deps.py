# 공용 API 의존성
# - app.state 에 있는 저장소 컨텍스트/토큰 코덱을 핸들러에 주입
# - 인증 가드 (x-auth 헤더 -> 사용자)
# - 경로의 id 형식 검증

import logging
import re
from dataclasses import dataclass
from typing import Optional

from beanie import PydanticObjectId
from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader

from ..core.database import Database
from ..core.exceptions import MalformedIdentifierError, StoreError, UnauthenticatedError
from ..core.security import AUTH_HEADER, AUTH_PURPOSE, TokenCodec
from ..models.user import User
from ..repositories.todo_repository import TodoRepository
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

auth_header_scheme = APIKeyHeader(name=AUTH_HEADER, auto_error=False)


def get_database(request: Request) -> Database:
    database = getattr(request.app.state, "database", None)
    if database is None or not database.ready:
        raise StoreError("database", "Store is not initialized")
    return database


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def get_user_repository(database: Database = Depends(get_database)) -> UserRepository:
    return UserRepository(database)


def get_todo_repository(database: Database = Depends(get_database)) -> TodoRepository:
    return TodoRepository(database)


def parse_object_id(value: str) -> PydanticObjectId:
    # 24자리 16진수만 허용합니다. 12바이트 문자열 같은 ObjectId 의 다른 입력 형식은 받지 않습니다.
    if not OBJECT_ID_PATTERN.match(value):
        raise MalformedIdentifierError(value)
    return PydanticObjectId(value)


def valid_todo_id(id: str) -> PydanticObjectId:
    return parse_object_id(id)


@dataclass
class AuthContext:
    user: User
    token: str


async def authenticate(
    request: Request,
    token: Optional[str] = Security(auth_header_scheme),
    codec: TokenCodec = Depends(get_token_codec),
    repo: UserRepository = Depends(get_user_repository),
) -> AuthContext:
    """x-auth 헤더의 토큰으로 현재 사용자를 찾습니다.

    서명이 유효하고, 용도가 "auth" 이고, 그 토큰이 사용자의 토큰 목록에
    아직 남아 있어야 통과합니다. 하나라도 어긋나면 401 입니다.
    """
    if not token:
        raise UnauthenticatedError()

    claims = codec.verify(token)
    if claims is None or claims.purpose != AUTH_PURPOSE:
        logger.info("[Auth] 토큰 검증 실패")
        raise UnauthenticatedError()

    user = await repo.find_by_token(claims.user_id, token, AUTH_PURPOSE)
    if user is None:
        logger.info(f"[Auth] 폐기되었거나 알 수 없는 토큰: user={claims.user_id}")
        raise UnauthenticatedError()

    request.state.user = user
    request.state.token = token
    return AuthContext(user=user, token=token)
