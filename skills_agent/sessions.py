"""In-memory session management, one orchestrator per session."""

import asyncio
import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from skills_agent.core import Orchestrator

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """A conversation session.

    The lock serializes turns: an orchestrator must not run two turns at
    once.
    """

    session_id: str
    orchestrator: Orchestrator
    created_at: datetime = field(default_factory=datetime.now)
    last_accessed: datetime = field(default_factory=datetime.now)
    message_count: int = 0
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    def touch(self) -> None:
        """Update last accessed time."""
        self.last_accessed = datetime.now()

    def increment_messages(self) -> None:
        """Increment message count."""
        self.message_count += 1

    async def run(self, message: str) -> str:
        """Run one turn, waiting for any turn already in progress."""
        async with self.lock:
            self.touch()
            response = await self.orchestrator.run(message)
            self.increment_messages()
            return response

    async def clear(self) -> None:
        """Reset history, tools and loaded skills."""
        async with self.lock:
            self.touch()
            self.orchestrator.clear_history()
            self.message_count = 0


class SessionStore:
    """Process-local session store. Sessions are lost on restart.

    Sessions idle for longer than ``ttl`` are dropped, and once
    ``max_sessions`` are live the least recently used one is evicted to make
    room for a new one. Dropped sessions are shut down.
    """

    def __init__(
        self,
        orchestrator_factory: Callable[[], Orchestrator],
        ttl: timedelta | None = None,
        max_sessions: int | None = None,
    ):
        """Initialize the session store.

        Args:
            orchestrator_factory: Callable that creates an uninitialized
                Orchestrator.
            ttl: Idle time after which a session expires. None keeps
                sessions forever.
            max_sessions: Maximum number of live sessions. None means no
                limit.
        """
        self._orchestrator_factory = orchestrator_factory
        self._ttl = ttl
        self._max_sessions = max_sessions
        self._sessions: dict[str, Session] = {}

    def _is_expired(self, session: Session) -> bool:
        if self._ttl is None:
            return False
        return datetime.now() - session.last_accessed > self._ttl

    async def prune(self) -> int:
        """Shut down expired sessions.

        Returns:
            Number of sessions removed.
        """
        expired = [s.session_id for s in self._sessions.values() if self._is_expired(s)]
        for session_id in expired:
            await self.delete(session_id)
        if expired:
            logger.info("Expired %d idle sessions", len(expired))
        return len(expired)

    async def _make_room(self) -> None:
        if self._max_sessions is None:
            return
        while self._sessions and len(self._sessions) >= self._max_sessions:
            oldest = min(self._sessions.values(), key=lambda s: s.last_accessed)
            logger.warning("Session limit reached, evicting session %s", oldest.session_id)
            await self.delete(oldest.session_id)

    async def create(self) -> Session:
        """Create a new session with an initialized orchestrator."""
        await self.prune()
        await self._make_room()

        orchestrator = self._orchestrator_factory()
        await orchestrator.initialize()

        session = Session(session_id=str(uuid.uuid4()), orchestrator=orchestrator)
        self._sessions[session.session_id] = session
        logger.info("Created session %s", session.session_id)
        return session

    async def get(self, session_id: str) -> Session | None:
        """Get a live session by ID. Expired sessions are shut down first."""
        session = self._sessions.get(session_id)
        if session is not None and self._is_expired(session):
            await self.delete(session_id)
            return None
        return session

    async def delete(self, session_id: str) -> bool:
        """Delete a session and run its skills' cleanup hooks.

        Returns:
            True if deleted, False if not found.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False

        async with session.lock:
            await session.orchestrator.shutdown()
        logger.info("Deleted session %s", session_id)
        return True

    async def list_all(self) -> list[Session]:
        """List live sessions."""
        await self.prune()
        return list(self._sessions.values())

    async def count(self) -> int:
        """Number of live sessions."""
        await self.prune()
        return len(self._sessions)

    async def close_all(self) -> None:
        """Shut down every session."""
        for session_id in list(self._sessions):
            await self.delete(session_id)
