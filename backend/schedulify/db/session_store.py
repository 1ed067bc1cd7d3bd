# backend/schedulify/db/session_store.py
import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

SCHEDULE_KEY = "schedule"
GENERATED_SCHEDULE_KEY = "generatedSchedule"


@dataclass
class _Entry:
    expires_at: float
    data: Dict[str, Any] = field(default_factory=dict)


class SessionStore:
    """
    Server-side session data keyed by the id carried in the signed session cookie.

    Entries live for `max_age` seconds after their last access. An expired entry reads
    exactly like one that never existed. Writes to the same session are last-write-wins.
    """

    def __init__(self, max_age: int = 3600, clock: Callable[[], float] = time.monotonic):
        self.max_age = max_age
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def new_session_id() -> str:
        return uuid.uuid4().hex

    def _live_entry(self, session_id: str) -> Optional[_Entry]:
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[session_id]
            return None
        return entry

    def load(self, session_id: str) -> Dict[str, Any]:
        """Return a snapshot of the session fields and push back its expiry."""
        with self._lock:
            entry = self._live_entry(session_id)
            if entry is None:
                return {}
            entry.expires_at = self._clock() + self.max_age
            return dict(entry.data)

    def _purge_locked(self, now: float) -> int:
        expired = [sid for sid, e in self._entries.items() if e.expires_at <= now]
        for sid in expired:
            del self._entries[sid]
        return len(expired)

    def set(self, session_id: str, key: str, value: Any) -> None:
        with self._lock:
            entry = self._live_entry(session_id)
            if entry is None:
                # New sessions sweep out abandoned ones so the store stays bounded
                self._purge_locked(self._clock())
                entry = _Entry(expires_at=0.0)
                self._entries[session_id] = entry
            entry.data[key] = value
            entry.expires_at = self._clock() + self.max_age

    def purge_expired(self) -> int:
        with self._lock:
            return self._purge_locked(self._clock())

    def __len__(self) -> int:
        self.purge_expired()
        return len(self._entries)


class ScheduleSession:
    """
    Handle on one client's session, handed to each request handler.
    Fields are read from the snapshot taken when the request started; writes go straight
    to the store and replace the whole field.
    """

    def __init__(self, store: SessionStore, session_id: str):
        self.store = store
        self.session_id = session_id
        self._data = store.load(session_id)

    @property
    def schedule(self) -> Optional[Dict[str, str]]:
        return self._data.get(SCHEDULE_KEY)

    def set_schedule(self, schedule: Dict[str, str]) -> None:
        value = dict(schedule)
        self.store.set(self.session_id, SCHEDULE_KEY, value)
        self._data[SCHEDULE_KEY] = value

    @property
    def generated_schedule(self) -> Optional[str]:
        return self._data.get(GENERATED_SCHEDULE_KEY)

    def set_generated_schedule(self, text: str) -> None:
        self.store.set(self.session_id, GENERATED_SCHEDULE_KEY, text)
        self._data[GENERATED_SCHEDULE_KEY] = text
