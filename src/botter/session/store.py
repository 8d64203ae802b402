"""Thread-safe in-memory registry of user sessions"""

import logging
from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from threading import Lock, RLock

from botter.core.types import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Thread-safe registry mapping a user identifier to its Session.

    Sessions are created lazily on first lookup and kept for the lifetime
    of the process. The registry itself is guarded by one lock; each user
    additionally gets a lock of their own so that events for the same user
    are applied one at a time while different users proceed in parallel.

    Usage:
        store = SessionStore()

        with store.borrow(user_id) as session:
            replies = engine.handle(session, text)
    """

    def __init__(self) -> None:
        self._sessions: dict[Hashable, Session] = {}
        self._user_locks: dict[Hashable, RLock] = {}
        self._lock = Lock()

    def get(self, user_id: Hashable) -> Session:
        """
        Get the session for a user, creating it if needed (thread-safe).

        Args:
            user_id: Stable identifier of the user

        Returns:
            The live Session owned by this store
        """
        with self._lock:
            return self._get_or_create(user_id)

    def find(self, user_id: Hashable) -> Session | None:
        """Return the session for a known user without creating one."""
        with self._lock:
            return self._sessions.get(user_id)

    @contextmanager
    def borrow(self, user_id: Hashable) -> Iterator[Session]:
        """
        Hold the user's lock while processing one event.

        The yielded session must not be retained after the block exits.

        Args:
            user_id: Stable identifier of the user

        Yields:
            The live Session for the user
        """
        with self._lock:
            session = self._get_or_create(user_id)
            user_lock = self._user_locks[user_id]

        with user_lock:
            yield session

    def user_ids(self) -> list[Hashable]:
        """List identifiers of every user seen so far."""
        with self._lock:
            return list(self._sessions)

    def _get_or_create(self, user_id: Hashable) -> Session:
        # Caller must hold self._lock
        session = self._sessions.get(user_id)
        if session is None:
            session = Session()
            self._sessions[user_id] = session
            self._user_locks[user_id] = RLock()
            logger.debug("Created session", extra={"user_id": user_id})
        return session

    def __contains__(self, user_id: Hashable) -> bool:
        with self._lock:
            return user_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
