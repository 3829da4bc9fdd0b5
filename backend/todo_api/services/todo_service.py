# Todo 서비스 레이어
# - 소유자 범위의 CRUD
# - completed / completedAt 파생 규칙

import logging
from typing import Any, Dict, List

from beanie import PydanticObjectId
from fastapi import Depends

from ..api.deps import get_todo_repository
from ..core.exceptions import NotFoundError
from ..models.todo import Todo, now_millis
from ..models.user import User
from ..repositories.todo_repository import TodoRepository
from ..schemas.todo_schema import TodoUpdate

logger = logging.getLogger(__name__)


def build_changes(update: TodoUpdate, now: int) -> Dict[str, Any]:
    """PATCH 본문에서 실제로 $set 할 값을 만듭니다.

    completed 가 정확히 True 일 때만 완료 상태가 되고 completed_at 은 요청 시각입니다.
    그 외(False 또는 생략)는 미완료로 되돌리며 completed_at 은 항상 None 입니다.
    """
    changes: Dict[str, Any] = {}
    if update.text is not None:
        changes["text"] = update.text
    if update.completed is True:
        changes["completed"] = True
        changes["completed_at"] = now
    else:
        changes["completed"] = False
        changes["completed_at"] = None
    return changes


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    async def create(self, owner: User, text: str) -> Todo:
        todo = await self.repo.create(text, owner.id)
        logger.info(f"[TodoService] 생성: todo={todo.id} user={owner.id}")
        return todo

    async def list(self, owner: User) -> List[Todo]:
        return await self.repo.list_for_owner(owner.id)

    async def get(self, owner: User, todo_id: PydanticObjectId) -> Todo:
        todo = await self.repo.get_owned(todo_id, owner.id)
        if todo is None:
            raise NotFoundError("Todo not found")
        return todo

    async def delete(self, owner: User, todo_id: PydanticObjectId) -> Todo:
        todo = await self.repo.delete_owned(todo_id, owner.id)
        if todo is None:
            raise NotFoundError("Todo not found")
        logger.info(f"[TodoService] 삭제: todo={todo_id} user={owner.id}")
        return todo

    async def update(self, owner: User, todo_id: PydanticObjectId, update: TodoUpdate) -> Todo:
        changes = build_changes(update, now_millis())
        todo = await self.repo.update_owned(todo_id, owner.id, changes)
        if todo is None:
            raise NotFoundError("Todo not found")
        return todo


def get_todo_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoService:
    return TodoService(repo)
