import pytest

from supplier_api.core.config import DEFAULT_DATABASE_URL, Settings, parse_origins

ENV_KEYS = (
    "DATABASE_URL",
    "APP_HOST",
    "APP_PORT",
    "DB_STATEMENT_TIMEOUT_MS",
    "RUN_MIGRATIONS",
    "LOG_LEVEL",
    "CORS_ALLOW_ORIGINS",
)


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    # Boş değerler tanımsız sayılır; teardown'da eski hâl geri gelir
    for k in ENV_KEYS:
        monkeypatch.setenv(k, "")
    empty = tmp_path / ".env"
    empty.write_text("", encoding="utf-8")
    return str(empty)


def test_defaults(clean_env):
    s = Settings.from_env(clean_env)

    assert s.database_url == DEFAULT_DATABASE_URL
    assert s.host == "0.0.0.0"
    assert s.port == 8080
    assert s.statement_timeout_ms == 0
    assert s.run_migrations is True
    assert s.log_level == "INFO"
    assert s.cors_allow_origins == ["*"]


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./dev.db")
    monkeypatch.setenv("APP_PORT", "9001")
    monkeypatch.setenv("DB_STATEMENT_TIMEOUT_MS", "2500")
    monkeypatch.setenv("RUN_MIGRATIONS", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings.from_env(clean_env)

    assert s.database_url == "sqlite:///./dev.db"
    assert s.port == 9001
    assert s.statement_timeout_ms == 2500
    assert s.run_migrations is False
    assert s.log_level == "DEBUG"


def test_dotenv_does_not_override_existing_env(clean_env, monkeypatch, tmp_path):
    dotenv = tmp_path / "app.env"
    dotenv.write_text("\ufeffAPP_PORT=7000\nAPP_HOST=127.0.0.1\n", encoding="utf-8")
    monkeypatch.setenv("APP_HOST", "10.0.0.5")

    s = Settings.from_env(str(dotenv))

    assert s.port == 7000
    assert s.host == "10.0.0.5"


def test_invalid_integer_raises(clean_env, monkeypatch):
    monkeypatch.setenv("APP_PORT", "sekiz")
    with pytest.raises(ValueError, match="APP_PORT"):
        Settings.from_env(clean_env)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ["*"]),
        ("*", ["*"]),
        ('["http://a.test", "http://b.test"]', ["http://a.test", "http://b.test"]),
        ("http://a.test, http://b.test ,", ["http://a.test", "http://b.test"]),
    ],
)
def test_parse_origins(raw, expected):
    assert parse_origins(raw) == expected
