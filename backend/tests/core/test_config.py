"""Settings: URL normalization and TLS switch."""

from inventory.config import Settings


def test_plain_postgres_url_gets_asyncpg_driver():
    s = Settings(database_url="postgresql://u:p@host:5432/db")
    assert s.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_postgres_scheme_alias_is_normalized():
    s = Settings(database_url="postgres://u:p@host/db")
    assert s.database_url == "postgresql+asyncpg://u:p@host/db"


def test_other_urls_are_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///local.db")
    assert s.database_url == "sqlite+aiosqlite:///local.db"


def test_ssl_follows_production_environment():
    assert Settings(environment="production").use_ssl is True
    assert Settings(environment="development").use_ssl is False
    assert Settings(environment="development", database_ssl=True).use_ssl is True


def test_server_defaults(monkeypatch):
    for var in ("PORT", "HOST", "CORS_ORIGINS", "DATABASE_SSL", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.port == 3000
    assert s.host == "0.0.0.0"
    assert s.cors_origins == ["*"]
    assert s.use_ssl is False
