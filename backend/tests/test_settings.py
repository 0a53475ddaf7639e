"""
Tests for environment-driven configuration
"""
from senior_care.config.settings import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "NODE_ENV", "APP_ENV", "ENVIRONMENT", "ANTHROPIC_API_KEY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.environment == "development"
    assert settings.is_development
    assert settings.anthropic_api_key == ""
    assert settings.anthropic_max_tokens == 300
    assert settings.anthropic_temperature == 0.7
    assert settings.rate_limit_max_requests == 100
    assert settings.rate_limit_window_seconds == 900
    assert settings.max_body_bytes == 10 * 1024 * 1024
    assert not settings.log_conversations


def test_reads_node_env_and_port(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FRONTEND_URL", "https://care.example.com")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-env")

    settings = Settings(_env_file=None)

    assert settings.is_production
    assert settings.port == 8080
    assert settings.anthropic_api_key == "sk-env"
    assert settings.allowed_origins == ["https://care.example.com"]
    assert settings.allowed_origin_regex == r"https://.*\.ondigitalocean\.app"


def test_development_origins_follow_port():
    settings = Settings(_env_file=None, port=5000, environment="development")

    assert settings.allowed_origins == ["http://localhost:5000", "http://127.0.0.1:5000"]
    assert settings.allowed_origin_regex is None


def test_production_without_frontend_url_has_only_the_pattern():
    settings = Settings(_env_file=None, environment="production", frontend_url=None)

    assert settings.allowed_origins == []
