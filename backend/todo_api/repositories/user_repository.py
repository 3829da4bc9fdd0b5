# 사용자 저장소 레이어
# - 데이터 접근(조회/생성/토큰 목록 변경)만 담당 (서비스 로직 분리)
# - 토큰 추가/삭제는 $push / $pull 한 번으로 끝나는 원자적 갱신입니다

from typing import Optional

from beanie import PydanticObjectId
from beanie.operators import Pull, Push
from pydantic import EmailStr

from ..core.database import Database, translate_store_errors
from ..models.user import AuthToken, User


class UserRepository:
    def __init__(self, database: Database):
        # Beanie 문서는 init_beanie 시점에 컬렉션에 묶입니다. database 는 준비가 끝난
        # 저장소 컨텍스트를 받았다는 보증(get_database 의 ready 검사)으로만 씁니다.
        self.database = database

    @translate_store_errors("users.get_by_email")
    async def get_by_email(self, email: EmailStr) -> Optional[User]:
        return await User.find_one(User.email == email)

    @translate_store_errors("users.create")
    async def create(self, email: EmailStr, password: str) -> User:
        user = User(email=email, hashed_password="")
        user.set_password(password)
        return await user.insert()

    @translate_store_errors("users.find_by_token")
    async def find_by_token(self, user_id: str, token: str, purpose: str) -> Optional[User]:
        # 같은 토큰 항목에 token/access 가 함께 있어야 합니다
        return await User.find_one({
            "_id": PydanticObjectId(user_id),
            "tokens": {"$elemMatch": {"token": token, "access": purpose}},
        })

    @translate_store_errors("users.push_token")
    async def push_token(self, user_id: PydanticObjectId, token: AuthToken) -> None:
        await User.find_one(User.id == user_id).update(Push({User.tokens: token.model_dump()}))

    @translate_store_errors("users.pull_token")
    async def pull_token(self, user_id: PydanticObjectId, token: str) -> None:
        # 이미 없는 토큰이어도 오류 없이 끝납니다
        await User.find_one(User.id == user_id).update(Pull({User.tokens: {"token": token}}))
