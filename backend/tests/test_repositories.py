# 저장소 계층 테스트 (인메모리 MongoDB)
# - pymongo 예외 -> 도메인 예외 변환
# - 토큰 제거 멱등성, 소유자 범위 삭제
import asyncio
from datetime import timezone
from unittest.mock import patch

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure

from todo_api.core.exceptions import StoreError, ValidationError
from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.repositories.todo_repository import TodoRepository
from todo_api.repositories.user_repository import UserRepository


# ---- 저장소 오류 변환 ----

def test_store_failure_becomes_store_error(database, seed):
    repo = TodoRepository(database)
    with patch("todo_api.repositories.todo_repository.Todo.find", side_effect=OperationFailure("boom")):
        with pytest.raises(StoreError) as exc_info:
            asyncio.run(repo.list_for_owner(seed.users[0].id))
    assert exc_info.value.operation == "todos.list"
    assert "boom" in exc_info.value.detail


def test_store_failure_returns_400(client, seed):
    with patch("todo_api.repositories.todo_repository.Todo.find", side_effect=OperationFailure("boom")):
        res = client.get("/todos", headers=seed.users[0].headers)
    assert res.status_code == 400
    assert res.json() == {"detail": "[todos.list] boom"}


def test_duplicate_email_hits_unique_index(database, seed):
    # 서비스의 사전 중복 검사를 거치지 않고 바로 insert 해도 unique 인덱스가 막습니다
    repo = UserRepository(database)
    with pytest.raises(ValidationError):
        asyncio.run(repo.create(seed.users[0].email, "abc12345"))
    assert asyncio.run(User.find(User.email == seed.users[0].email).count()) == 1


def test_store_not_ready_returns_400(client, seed, database):
    database.ready = False
    try:
        res = client.get("/todos", headers=seed.users[0].headers)
    finally:
        database.ready = True
    assert res.status_code == 400
    assert "Store is not initialized" in res.json()["detail"]


# ---- 토큰 목록 ----

def test_pull_missing_token_is_a_no_op(database, seed):
    user = seed.users[0]
    repo = UserRepository(database)
    asyncio.run(repo.pull_token(user.id, "not-there"))
    stored = asyncio.run(User.get(user.id))
    assert [t.token for t in stored.tokens] == [user.token]


def test_pull_token_twice(database, seed):
    user = seed.users[0]
    repo = UserRepository(database)
    asyncio.run(repo.pull_token(user.id, user.token))
    asyncio.run(repo.pull_token(user.id, user.token))
    assert asyncio.run(User.get(user.id)).tokens == []


# ---- 소유자 범위 삭제 ----

def test_delete_owned_returns_document_once(database, seed):
    todo = seed.todos[0]
    repo = TodoRepository(database)
    deleted = asyncio.run(repo.delete_owned(todo.id, todo.creator))
    assert deleted.id == todo.id
    assert deleted.text == todo.text
    assert asyncio.run(repo.delete_owned(todo.id, todo.creator)) is None


def test_delete_owned_ignores_other_owner(database, seed):
    todo = seed.todos[0]
    repo = TodoRepository(database)
    assert asyncio.run(repo.delete_owned(todo.id, ObjectId())) is None
    assert asyncio.run(Todo.get(todo.id)) is not None


# ---- 모델 기본값 ----

def test_user_created_at_is_timezone_aware():
    created_at = User.model_fields["created_at"].default_factory()
    assert created_at.tzinfo is timezone.utc
