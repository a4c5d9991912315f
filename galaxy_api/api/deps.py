from datetime import timedelta

from sqlalchemy.orm import sessionmaker

from ..config import Settings, get_settings
from ..core.security import AdminCredentialVerifier
from ..core.sessions import AdminSessionManager, InMemorySessionStore, SessionStore
from ..db.session import create_db_engine, create_session_factory, init_db
from .matching import get_matcher
from .router import RequestRouter


def build_router(
    settings: Settings | None = None,
    session_factory: sessionmaker | None = None,
    store: SessionStore | None = None,
) -> RequestRouter:
    settings = settings or get_settings()
    if session_factory is None:
        engine = create_db_engine(settings)
        init_db(engine)
        session_factory = create_session_factory(engine)
    sessions = AdminSessionManager(
        store if store is not None else InMemorySessionStore(),
        ttl=timedelta(hours=settings.admin_session_ttl_hours),
    )
    return RequestRouter(
        session_factory=session_factory,
        sessions=sessions,
        credentials=AdminCredentialVerifier.from_settings(settings),
        matcher=get_matcher(settings.route_matching),
    )
