# completed / completedAt 파생 규칙 단위 테스트 (DB 의존성 없음)
from todo_api.services.todo_service import build_changes
from todo_api.schemas.todo_schema import TodoUpdate

NOW = 1_700_000_000_000


def test_completed_true_sets_timestamp():
    changes = build_changes(TodoUpdate(completed=True), NOW)
    assert changes == {"completed": True, "completed_at": NOW}


def test_completed_false_clears_timestamp():
    changes = build_changes(TodoUpdate(text="x", completed=False), NOW)
    assert changes == {"text": "x", "completed": False, "completed_at": None}


def test_omitted_completed_resets_to_incomplete():
    changes = build_changes(TodoUpdate(text="only text"), NOW)
    assert changes == {"text": "only text", "completed": False, "completed_at": None}
