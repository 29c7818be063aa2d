"""Session storage contract and an in-memory reference store.

The render core only needs ``get_unviewed_ids``. Recording sessions and
tracking which ones a user has seen belongs to the storage side; the
in-memory store below implements that side for tests and the CLI.
"""

import logging
import threading
from typing import Protocol
from uuid import UUID

from ..models import Session

logger = logging.getLogger(__name__)


class SessionStorage(Protocol):
    """Read side of session storage used when building a render payload."""

    def get_unviewed_ids(self, user: str | None) -> list[UUID]:
        """Return ids not yet delivered to ``user``, oldest first."""
        ...


class InMemoryStorage:
    """Thread-safe storage keeping sessions and per-user unviewed ids in memory.

    Saving a session marks it unviewed for its user. Ids are unique per
    user, so concurrent saves and views never duplicate or drop an id.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[UUID, Session] = {}
        self._unviewed: dict[str | None, list[UUID]] = {}

    def save(self, session: Session) -> None:
        with self._lock:
            self._sessions[session.id] = session
        if not session.has_user_viewed:
            self.set_unviewed(session.user, session.id)

    def load(self, session_id: UUID) -> Session | None:
        with self._lock:
            return self._sessions.get(session_id)

    def set_unviewed(self, user: str | None, session_id: UUID) -> None:
        with self._lock:
            ids = self._unviewed.setdefault(user, [])
            if session_id not in ids:
                ids.append(session_id)

    def set_viewed(self, user: str | None, session_id: UUID) -> None:
        """Remove ``session_id`` from the user's unviewed list."""
        with self._lock:
            ids = self._unviewed.get(user, [])
            if session_id in ids:
                ids.remove(session_id)
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions[session_id] = session.model_copy(update={"has_user_viewed": True})
        logger.debug(f"Session {session_id} marked viewed for {user or 'anonymous'}")

    def get_unviewed_ids(self, user: str | None) -> list[UUID]:
        with self._lock:
            return list(self._unviewed.get(user, []))
