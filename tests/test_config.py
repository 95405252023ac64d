from sqlalchemy import make_url

from config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.db_host == "localhost"
        assert settings.db_port == 5432
        assert settings.db_pool_min_size == 5
        assert settings.db_pool_max_size == 20

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DB_HOST", "db.internal")
        monkeypatch.setenv("DB_PORT", "6543")

        settings = Settings(_env_file=None)

        assert settings.db_host == "db.internal"
        assert settings.db_port == 6543

    def test_database_url(self):
        settings = Settings(
            _env_file=None,
            db_host="db",
            db_port=5433,
            db_user="app",
            db_password="secret",
            db_name="jobly",
        )

        assert settings.database_url.render_as_string(hide_password=False) == (
            "postgresql+asyncpg://app:secret@db:5433/jobly"
        )

    def test_database_url_special_characters(self):
        """비밀번호의 @, / 같은 문자는 URL에서 이스케이프"""
        settings = Settings(_env_file=None, db_host="db", db_user="app", db_password="p@ss/word")

        url = make_url(settings.database_url.render_as_string(hide_password=False))

        assert url.host == "db"
        assert url.username == "app"
        assert url.password == "p@ss/word"

    def test_password_not_in_dump(self):
        settings = Settings(_env_file=None, db_password="secret")

        assert "database_url" not in settings.model_dump()
