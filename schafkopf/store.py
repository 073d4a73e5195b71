"""Per-room session ownership."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from .game import GameSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Own one GameSession per room key.

    All mutation of a room's session should happen inside ``locked`` so that
    plays against the same room are applied one at a time.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._sessions: Dict[str, GameSession] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def get(self, room_id: str) -> Optional[GameSession]:
        return self._sessions.get(room_id)

    def get_or_create(self, room_id: str) -> GameSession:
        with self._guard:
            session = self._sessions.get(room_id)
            if session is None:
                session = GameSession(room_id=room_id, seed=self._seed)
                self._sessions[room_id] = session
                self._locks[room_id] = threading.Lock()
                logger.info("Created room %s", room_id)
            return session

    def evict(self, room_id: str) -> None:
        with self._guard:
            if self._sessions.pop(room_id, None) is not None:
                logger.info("Evicted room %s", room_id)
            self._locks.pop(room_id, None)

    def rooms(self) -> List[str]:
        return sorted(self._sessions)

    @contextmanager
    def locked(self, room_id: str) -> Iterator[GameSession]:
        session = self.get_or_create(room_id)
        with self._guard:
            lock = self._locks.setdefault(room_id, threading.Lock())
        with lock:
            yield session
