# Todo 저장소 레이어
# - 모든 조회/수정/삭제 쿼리에 creator 조건을 함께 겁니다 (소유자 범위)
# - 다른 사용자의 Todo 는 "없음"과 똑같이 None 으로 돌아옵니다

from typing import Any, Dict, List, Optional

from beanie import PydanticObjectId, SortDirection, UpdateResponse
from beanie.odm.utils.parsing import parse_obj
from beanie.operators import Set

from ..core.database import Database, translate_store_errors
from ..models.todo import Todo


class TodoRepository:
    def __init__(self, database: Database):
        # UserRepository 와 같이 database 는 준비 완료 보증으로만 받습니다
        self.database = database

    def _owned(self, todo_id: PydanticObjectId, owner_id: PydanticObjectId):
        return Todo.find_one(Todo.id == todo_id, Todo.creator == owner_id)

    @translate_store_errors("todos.create")
    async def create(self, text: str, owner_id: PydanticObjectId) -> Todo:
        todo = Todo(text=text, creator=owner_id)
        return await todo.insert()

    @translate_store_errors("todos.list")
    async def list_for_owner(self, owner_id: PydanticObjectId) -> List[Todo]:
        return await Todo.find(Todo.creator == owner_id).sort(("_id", SortDirection.ASCENDING)).to_list()

    @translate_store_errors("todos.get")
    async def get_owned(self, todo_id: PydanticObjectId, owner_id: PydanticObjectId) -> Optional[Todo]:
        return await self._owned(todo_id, owner_id)

    @translate_store_errors("todos.delete")
    async def delete_owned(self, todo_id: PydanticObjectId, owner_id: PydanticObjectId) -> Optional[Todo]:
        # find-and-delete 한 번으로 조회와 삭제를 함께 처리합니다.
        # 동시에 같은 Todo 를 지우면 한 요청만 문서를 돌려받습니다.
        raw = await Todo.get_motor_collection().find_one_and_delete(
            {"_id": todo_id, "creator": owner_id}
        )
        if raw is None:
            return None
        return parse_obj(Todo, raw)

    @translate_store_errors("todos.update")
    async def update_owned(
        self,
        todo_id: PydanticObjectId,
        owner_id: PydanticObjectId,
        changes: Dict[str, Any],
    ) -> Optional[Todo]:
        # find-and-modify 한 번으로 갱신 후 새 문서를 돌려받습니다
        return await self._owned(todo_id, owner_id).update(
            Set(changes),
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
