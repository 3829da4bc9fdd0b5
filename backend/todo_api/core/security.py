# 보안/인증 유틸리티
# - 비밀번호 해싱/검증 (passlib bcrypt)
# - 인증 토큰 발급/검증 (PyJWT)
# 요청 단위의 인증 가드는 api/deps.py 에 있습니다.

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from bson import ObjectId
from passlib.context import CryptContext

from .config import Settings
from .exceptions import ConfigurationError

AUTH_HEADER = "x-auth"
AUTH_PURPOSE = "auth"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    purpose: str


class TokenCodec:
    """사용자 id 와 토큰 용도(purpose)를 묶어 서명하는 토큰 코덱

    서명 검증만으로는 유효성을 확정하지 않습니다. 폐기(로그아웃)는
    사용자 문서의 토큰 목록에서 빠지는 것으로 표현되므로, 가드는
    verify() 결과와 토큰 목록 포함 여부를 함께 확인해야 합니다.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: Optional[int] = None):
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        return cls(settings.JWT_SECRET, settings.JWT_ALGORITHM, settings.AUTH_TOKEN_EXPIRE_MINUTES)

    def issue(self, user_id, purpose: str = AUTH_PURPOSE) -> str:
        # jti 로 세션마다 다른 토큰이 되어야 로그아웃이 해당 세션 하나만 지웁니다
        now = datetime.now(tz=timezone.utc)
        payload = {
            "_id": str(user_id),
            "access": purpose,
            "iat": now,
            "jti": secrets.token_hex(8),
        }
        if self.expire_minutes is not None:
            payload["exp"] = now + timedelta(minutes=self.expire_minutes)
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[TokenClaims]:
        """서명이 올바르면 TokenClaims, 아니면 None 을 반환합니다.

        변조/만료/클레임 누락/ObjectId 가 아닌 subject 는 모두 None 입니다.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            return None

        user_id = payload.get("_id")
        purpose = payload.get("access")
        if not isinstance(user_id, str) or not isinstance(purpose, str):
            return None
        if not ObjectId.is_valid(user_id):
            return None
        return TokenClaims(user_id=user_id, purpose=purpose)
