"""Admin session table.

Sessions live only in the store handed to ``AdminSessionManager``. The bundled
``InMemorySessionStore`` is per process: a session issued by one worker
process does not validate in another.
"""

from __future__ import annotations

import logging
import secrets
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Protocol

from .constants import ADMIN_SESSION_TTL

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionStore(Protocol):
    def get(self, session_id: str) -> datetime | None: ...

    def set(self, session_id: str, expires_at: datetime) -> None: ...

    def delete(self, session_id: str) -> None: ...


class InMemorySessionStore:
    def __init__(self) -> None:
        self._expiry: dict[str, datetime] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str) -> datetime | None:
        with self._lock:
            return self._expiry.get(session_id)

    def set(self, session_id: str, expires_at: datetime) -> None:
        with self._lock:
            self._expiry[session_id] = expires_at

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._expiry.pop(session_id, None)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._expiry

    def __len__(self) -> int:
        with self._lock:
            return len(self._expiry)


class AdminSessionManager:
    def __init__(
        self,
        store: SessionStore,
        ttl: timedelta = ADMIN_SESSION_TTL,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.store = store
        self.ttl = ttl
        self._clock = clock

    def create(self) -> str:
        session_id = secrets.token_urlsafe(24)
        expires_at = self._clock() + self.ttl
        self.store.set(session_id, expires_at)
        logger.info("Admin session issued", extra={"expires_at": expires_at.isoformat()})
        return session_id

    def is_valid(self, session_id: str | None) -> bool:
        # Expired entries are evicted on lookup; there is no background sweep.
        if not isinstance(session_id, str) or not session_id:
            return False
        expires_at = self.store.get(session_id)
        if expires_at is None:
            return False
        if self._clock() < expires_at:
            return True
        self.store.delete(session_id)
        logger.info("Admin session expired and evicted")
        return False
