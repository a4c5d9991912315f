from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from galaxy_api.api.matching import SubstringMatcher
from galaxy_api.api.router import RequestRouter
from galaxy_api.core.security import AdminCredentialVerifier
from galaxy_api.core.sessions import AdminSessionManager, InMemorySessionStore
from galaxy_api.db.session import init_db

ADMIN_SECRET = "galaxy2024"


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    init_db(engine)
    TestingSessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )
    yield TestingSessionLocal
    engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def clock():
    return FakeClock(datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture()
def session_store():
    return InMemorySessionStore()


@pytest.fixture()
def admin_sessions(session_store, clock):
    return AdminSessionManager(session_store, clock=clock)


@pytest.fixture()
def router(session_factory, admin_sessions):
    return RequestRouter(
        session_factory=session_factory,
        sessions=admin_sessions,
        credentials=AdminCredentialVerifier(secret=ADMIN_SECRET),
        matcher=SubstringMatcher(),
    )
