"""In-memory server-side session store.

Each client is correlated with a ``SessionRecord`` through an opaque,
cryptographically random identifier. Records live until ``destroy`` or
until the optional TTL elapses.
"""

import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

SESSION_ID_BYTES = 32
# Expired records are swept on every Nth create
PRUNE_EVERY = 100


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionRecord:
    session_id: str
    is_admin: bool = False
    created_at: datetime = field(default_factory=_now)


class SessionStore:
    def __init__(self, ttl: timedelta | None = None, prune_every: int = PRUNE_EVERY):
        self._ttl = ttl
        self._prune_every = max(1, prune_every)
        self._creates = 0
        self._records: dict[str, SessionRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _expired(self, record: SessionRecord, now: datetime) -> bool:
        return self._ttl is not None and now - record.created_at >= self._ttl

    def _prune_locked(self) -> int:
        if self._ttl is None:
            return 0
        now = _now()
        stale = [sid for sid, rec in self._records.items() if self._expired(rec, now)]
        for sid in stale:
            del self._records[sid]
        return len(stale)

    def create(self) -> str:
        with self._lock:
            self._creates += 1
            if self._creates % self._prune_every == 0:
                self._prune_locked()
            session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
            while session_id in self._records:
                session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
            self._records[session_id] = SessionRecord(session_id=session_id)
            return session_id

    def get(self, session_id: str | None) -> SessionRecord | None:
        """Return the live record for ``session_id`` or None for anything unknown."""
        if not session_id:
            return None
        with self._lock:
            record = self._records.get(session_id)
            if record is None:
                return None
            if self._expired(record, _now()):
                del self._records[session_id]
                return None
            return record

    def set_admin(self, session_id: str) -> bool:
        with self._lock:
            record = self._records.get(session_id)
            if record is None:
                return False
            record.is_admin = True
            return True

    def destroy(self, session_id: str | None) -> None:
        if not session_id:
            return
        with self._lock:
            self._records.pop(session_id, None)

    def prune(self) -> int:
        """Drop expired records. Returns how many were removed."""
        with self._lock:
            return self._prune_locked()
