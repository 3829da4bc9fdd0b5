# 요청/응답 스키마 정의 (Pydantic 모델)
# - 요청 스키마는 허용된 필드만 받습니다 (그 외 필드는 400)

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..models.user import User

PASSWORD_MIN_LENGTH = 6


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)


class UserLogin(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str


class UserPublic(BaseModel):
    # 비밀번호 해시와 토큰 목록은 응답에 포함하지 않습니다
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    email: EmailStr

    @classmethod
    def from_document(cls, user: User) -> "UserPublic":
        return cls(id=str(user.id), email=user.email)
