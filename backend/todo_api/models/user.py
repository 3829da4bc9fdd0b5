# User 도메인 모델 (Beanie Document)
# - 이메일, 비밀번호 해시, 인증 토큰 목록, 생성일
# - 이메일은 unique 인덱스

from datetime import datetime, timezone
from typing import List

from beanie import Document, Indexed
from pydantic import BaseModel, EmailStr, Field

from ..core.security import get_password_hash


class AuthToken(BaseModel):
    access: str
    token: str = Field(repr=False)


class User(Document):
    email: Indexed(EmailStr, unique=True)  # 중복 방지 인덱스
    hashed_password: str = Field(repr=False)
    tokens: List[AuthToken] = Field(default_factory=list, repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    class Settings:
        name = "users"  # 컬렉션명

    def set_password(self, password: str) -> None:
        # 평문 비밀번호가 바뀔 때마다 해시를 다시 계산합니다. 평문은 저장하지 않습니다.
        self.hashed_password = get_password_hash(password)
