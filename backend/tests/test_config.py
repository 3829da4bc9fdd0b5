# 설정 로딩 테스트
import pydantic
import pytest

from todo_api.core.config import PROJECT_ROOT, Settings, env_files_for, load_settings


def test_env_files_for_development():
    assert env_files_for("development") == (
        str(PROJECT_ROOT / ".env"),
        str(PROJECT_ROOT / ".env.development"),
    )


def test_env_files_for_production_reads_environment_only():
    assert env_files_for("production") is None


def test_load_settings_uses_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("PORT", "8080")
    settings = load_settings("production")
    assert settings.JWT_SECRET == "from-env"
    assert settings.PORT == 8080
    assert settings.is_production


def test_load_settings_overrides_win(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    settings = load_settings("production", JWT_SECRET="explicit")
    assert settings.JWT_SECRET == "explicit"


def test_missing_jwt_secret_fails(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_defaults():
    settings = Settings(_env_file=None, JWT_SECRET="s")
    assert settings.PORT == 3000
    assert settings.MONGODB_URI == "mongodb://localhost:27017/TodoApp"
    assert settings.AUTH_TOKEN_EXPIRE_MINUTES is None
    assert settings.cors_origins == []


def test_cors_origins_are_split():
    settings = Settings(_env_file=None, JWT_SECRET="s", CORS_ALLOW_ORIGINS="http://a.com, http://b.com,")
    assert settings.cors_origins == ["http://a.com", "http://b.com"]
