# Todo 라우터 (모두 인증 필요)
# - POST   /todos       : 생성
# - GET    /todos       : 내 Todo 목록
# - GET    /todos/{id}  : 조회
# - DELETE /todos/{id}  : 삭제
# - PATCH  /todos/{id}  : 부분 수정 (text, completed)
# id 형식이 틀리면 400, 없거나 남의 것이면 404 입니다.

from beanie import PydanticObjectId
from fastapi import APIRouter, Depends

from ..schemas.todo_schema import TodoCreate, TodoEnvelope, TodoList, TodoPublic, TodoUpdate
from ..services.todo_service import TodoService, get_todo_service
from .deps import AuthContext, authenticate, valid_todo_id

router = APIRouter(prefix="/todos", tags=["todos"])


@router.post("", response_model=TodoPublic, summary="Todo 생성")
async def create_todo(
    payload: TodoCreate,
    auth: AuthContext = Depends(authenticate),
    service: TodoService = Depends(get_todo_service),
):
    todo = await service.create(auth.user, payload.text)
    return TodoPublic.from_document(todo)


@router.get("", response_model=TodoList, summary="내 Todo 목록")
async def list_todos(auth: AuthContext = Depends(authenticate), service: TodoService = Depends(get_todo_service)):
    todos = await service.list(auth.user)
    return TodoList(todos=[TodoPublic.from_document(t) for t in todos])


@router.get("/{id}", response_model=TodoEnvelope, summary="Todo 조회")
async def get_todo(
    auth: AuthContext = Depends(authenticate),
    todo_id: PydanticObjectId = Depends(valid_todo_id),
    service: TodoService = Depends(get_todo_service),
):
    todo = await service.get(auth.user, todo_id)
    return TodoEnvelope(todo=TodoPublic.from_document(todo))


@router.delete("/{id}", response_model=TodoEnvelope, summary="Todo 삭제")
async def delete_todo(
    auth: AuthContext = Depends(authenticate),
    todo_id: PydanticObjectId = Depends(valid_todo_id),
    service: TodoService = Depends(get_todo_service),
):
    todo = await service.delete(auth.user, todo_id)
    return TodoEnvelope(todo=TodoPublic.from_document(todo))


@router.patch("/{id}", response_model=TodoEnvelope, summary="Todo 부분 수정")
async def update_todo(
    payload: TodoUpdate,
    auth: AuthContext = Depends(authenticate),
    todo_id: PydanticObjectId = Depends(valid_todo_id),
    service: TodoService = Depends(get_todo_service),
):
    todo = await service.update(auth.user, todo_id, payload)
    return TodoEnvelope(todo=TodoPublic.from_document(todo))
