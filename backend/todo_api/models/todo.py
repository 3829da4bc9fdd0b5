# Todo 도메인 모델 (Beanie Document)
# - 텍스트, 완료 여부, 완료 시각(epoch ms), 작성자
# - 모든 조회/수정은 creator 로 범위를 제한합니다

import time
from typing import Optional

from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field


def now_millis() -> int:
    return int(time.time() * 1000)


class Todo(Document):
    text: str = Field(min_length=1)
    completed: bool = False
    completed_at: Optional[int] = None
    creator: Indexed(PydanticObjectId)

    class Settings:
        name = "todos"
