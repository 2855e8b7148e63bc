from shared.settings import Settings


def test_defaults(monkeypatch) -> None:
    for var in ("APP_ENV", "ENVIRONMENT", "NODE_ENV", "LANGFUSE_HOST", "GEMINI_MODEL"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.app_env == "production"
    assert s.is_development is False
    assert s.langfuse_host == "https://cloud.langfuse.com"
    assert s.gemini_model == "gemini-2.5-flash"
    assert s.trace_name == "search-triggered"


def test_legacy_env_names(monkeypatch) -> None:
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("LANGFUSE_PUBLIC_KEY", raising=False)
    monkeypatch.delenv("LANGFUSE_SECRET_KEY", raising=False)
    monkeypatch.setenv("NODE_ENV", "development")
    monkeypatch.setenv("LF_PUBLIC_KEY", "pk-lf-1")
    monkeypatch.setenv("LF_SECRET_KEY", "sk-lf-1")
    s = Settings(_env_file=None)
    assert s.is_development is True
    assert s.langfuse_public_key == "pk-lf-1"
    assert s.langfuse_secret_key == "sk-lf-1"


def test_cors_origin_list() -> None:
    s = Settings(cors_origins="https://a.example/, http://localhost:3000 ,,")
    assert s.cors_origin_list == ["https://a.example", "http://localhost:3000"]
