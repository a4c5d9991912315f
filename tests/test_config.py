import pytest
from pydantic import ValidationError
from sqlalchemy import inspect

from galaxy_api.api.deps import build_router
from galaxy_api.api.matching import SegmentMatcher
from galaxy_api.config import Settings
from galaxy_api.db.session import normalize_database_url


def test_database_url_is_required():
    with pytest.raises(ValidationError):
        Settings()


def test_settings_read_aliases():
    settings = Settings(
        DATABASE_URL="sqlite://",
        ADMIN_PASSWORD="s3cret",
        ADMIN_SESSION_TTL_HOURS="2",
        ROUTE_MATCHING="segment",
    )

    assert settings.database_url == "sqlite://"
    assert settings.admin_password == "s3cret"
    assert settings.admin_session_ttl_hours == 2


def test_normalize_legacy_postgres_scheme():
    assert normalize_database_url("postgres://u:p@h/db") == "postgresql://u:p@h/db"
    assert normalize_database_url("sqlite://") == "sqlite://"


def test_build_router_uses_settings(session_factory):
    settings = Settings(
        DATABASE_URL="sqlite://",
        ADMIN_PASSWORD="s3cret",
        ADMIN_SESSION_TTL_HOURS="2",
        ROUTE_MATCHING="segment",
    )

    router = build_router(settings, session_factory=session_factory)

    assert isinstance(router.matcher, SegmentMatcher)
    assert router.sessions.ttl.total_seconds() == 2 * 3600
    assert router.credentials.verify("s3cret")
    assert not router.credentials.verify("galaxy2024")


def test_build_router_binds_database_from_given_settings(tmp_path):
    db_file = tmp_path / "custom.db"
    settings = Settings(DATABASE_URL=f"sqlite:///{db_file}")

    router = build_router(settings)

    engine = router.session_factory.kw["bind"]
    assert engine.url.database == str(db_file)
    assert {"bookings", "contacts"} <= set(inspect(engine).get_table_names())
    engine.dispose()
