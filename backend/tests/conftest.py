# 공용 테스트 픽스처
# - mongomock-motor 인메모리 MongoDB 를 create_app 에 주입
# - 사용자 2명(각각 auth 토큰 1개), Todo 2개(사용자별 1개, 두 번째는 완료 상태) 시드

import asyncio
from dataclasses import dataclass, field
from typing import List

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from todo_api.core.config import Settings
from todo_api.core.security import AUTH_HEADER, AUTH_PURPOSE, TokenCodec
from todo_api.main import create_app
from todo_api.models.todo import Todo
from todo_api.models.user import AuthToken, User

TEST_SECRET = "test-secret"


@dataclass
class SeedUser:
    id: ObjectId
    email: str
    password: str
    token: str

    @property
    def headers(self):
        return {AUTH_HEADER: self.token}


@dataclass
class SeedTodo:
    id: ObjectId
    text: str
    creator: ObjectId
    completed: bool = False
    completed_at: int = None


@dataclass
class Seed:
    users: List[SeedUser] = field(default_factory=list)
    todos: List[SeedTodo] = field(default_factory=list)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ENV="test",
        JWT_SECRET=TEST_SECRET,
        MONGODB_DATABASE="todo_api_test",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def codec(settings):
    return TokenCodec.from_settings(settings)


@pytest.fixture
def client(settings):
    app = create_app(settings, mongo_client=AsyncMongoMockClient())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database(client):
    return client.app.state.database


async def _populate(seed: Seed) -> None:
    for u in seed.users:
        user = User(id=u.id, email=u.email, hashed_password="", tokens=[AuthToken(access=AUTH_PURPOSE, token=u.token)])
        user.set_password(u.password)
        await user.insert()
    for t in seed.todos:
        await Todo(id=t.id, text=t.text, creator=t.creator, completed=t.completed, completed_at=t.completed_at).insert()


@pytest.fixture
def seed(client, codec) -> Seed:
    # client 픽스처가 lifespan 에서 Beanie 초기화를 끝낸 뒤에 시드합니다
    user_one_id, user_two_id = ObjectId(), ObjectId()
    data = Seed(
        users=[
            SeedUser(user_one_id, "example@gmail.com", "anotherpass", codec.issue(user_one_id, AUTH_PURPOSE)),
            SeedUser(user_two_id, "jo@yahoo.com", "password", codec.issue(user_two_id, AUTH_PURPOSE)),
        ],
        todos=[
            SeedTodo(ObjectId(), "First test", user_one_id),
            SeedTodo(ObjectId(), "Second test", user_two_id, completed=True, completed_at=333),
        ],
    )
    asyncio.run(_populate(data))
    return data