# Todo 요청/응답 스키마
# - 응답 필드명은 기존 클라이언트와 같은 _id / completedAt / _creator 형식

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from ..models.todo import Todo


class TodoCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: str = Field(min_length=1)


class TodoUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: Optional[str] = Field(default=None, min_length=1)
    completed: Optional[StrictBool] = None


class TodoPublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    text: str
    completed: bool
    completed_at: Optional[int] = Field(default=None, alias="completedAt")
    creator: str = Field(alias="_creator")

    @classmethod
    def from_document(cls, todo: Todo) -> "TodoPublic":
        return cls(
            id=str(todo.id),
            text=todo.text,
            completed=todo.completed,
            completed_at=todo.completed_at,
            creator=str(todo.creator),
        )


class TodoEnvelope(BaseModel):
    todo: TodoPublic


class TodoList(BaseModel):
    todos: List[TodoPublic]
