# 인증 서비스 레이어
# - 이메일 중복 체크, 회원가입
# - 로그인 (비밀번호 검증, 토큰 발급 후 토큰 목록에 추가)
# - 로그아웃 (현재 요청에 사용된 토큰만 목록에서 제거)

import logging
from typing import Tuple

from fastapi import Depends
from pydantic import EmailStr

from ..api.deps import get_token_codec, get_user_repository
from ..core.exceptions import ValidationError
from ..core.security import AUTH_PURPOSE, TokenCodec, verify_password
from ..models.user import AuthToken, User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, repo: UserRepository, codec: TokenCodec):
        self.repo = repo
        self.codec = codec

    async def register(self, email: EmailStr, password: str) -> Tuple[User, str]:
        existing = await self.repo.get_by_email(email)
        if existing:
            raise ValidationError("Email already registered")
        # 동시에 같은 이메일로 가입하면 unique 인덱스가 DuplicateKeyError -> ValidationError 로 막습니다
        user = await self.repo.create(email, password)
        token = await self.issue_auth_token(user)
        logger.info(f"[AuthService] 회원가입 완료: user={user.id}")
        return user, token

    async def login(self, email: EmailStr, password: str) -> Tuple[User, str]:
        user = await self.repo.get_by_email(email)
        # 이메일/비밀번호 중 무엇이 틀렸는지 구분하지 않습니다
        if not user or not verify_password(password, user.hashed_password):
            logger.info("[AuthService] 로그인 실패")
            raise ValidationError("Invalid credentials")
        token = await self.issue_auth_token(user)
        logger.info(f"[AuthService] 로그인 성공: user={user.id}")
        return user, token

    async def logout(self, user: User, token: str) -> None:
        await self.repo.pull_token(user.id, token)
        logger.info(f"[AuthService] 로그아웃: user={user.id}")

    async def issue_auth_token(self, user: User) -> str:
        token = self.codec.issue(user.id, AUTH_PURPOSE)
        await self.repo.push_token(user.id, AuthToken(access=AUTH_PURPOSE, token=token))
        return token


def get_auth_service(
    repo: UserRepository = Depends(get_user_repository),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthService:
    return AuthService(repo, codec)
