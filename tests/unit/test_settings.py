from venueguard.core.settings import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "ALLOWED_ORIGINS", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)
    assert settings.PORT == 8000
    assert settings.LOG_LEVEL == "INFO"
    assert settings.allowed_origins == ["*"]


def test_allowed_origins_from_environment(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings(_env_file=None)
    assert settings.allowed_origins == ["https://a.example", "https://b.example"]
    assert settings.PORT == 9000
