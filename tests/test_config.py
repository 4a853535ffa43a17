from visitor_log.core.config import DatabaseSettings, Settings, get_settings


def test_individual_parameters(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "frontdesk")

    db = DatabaseSettings(_env_file=None)

    assert db.database_url is None
    assert db.connect_kwargs == {
        "host": "db.internal",
        "port": 6543,
        "database": "frontdesk",
        "user": db.user,
        "password": db.password,
    }


def test_database_url_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://app:secret@db/visitors_db")
    monkeypatch.setenv("DB_HOST", "ignored")

    db = DatabaseSettings(_env_file=None)

    assert db.connect_kwargs == {"dsn": "postgresql://app:secret@db/visitors_db"}


def test_empty_database_url_is_unset(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    assert DatabaseSettings(_env_file=None).database_url is None


def test_pool_sizes(monkeypatch):
    monkeypatch.setenv("DB_POOL_MIN_CONN", "2")
    monkeypatch.setenv("DB_POOL_MAX_CONN", "20")

    db = DatabaseSettings(_env_file=None)

    assert (db.pool_min_conn, db.pool_max_conn) == (2, 20)


def test_settings_sections():
    settings = Settings()
    assert isinstance(settings.database, DatabaseSettings)
    assert settings.logging.log_level


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
