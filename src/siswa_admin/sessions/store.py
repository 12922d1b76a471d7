from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional, Protocol

from ..common.datetime_utils import now_local


class SessionStore(Protocol):
    """Server-side session records keyed by session id."""

    def get(self, sid: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def save(self, sid: str, data: Dict[str, Any], lifetime: timedelta) -> None:
        raise NotImplementedError

    def delete(self, sid: str) -> None:
        raise NotImplementedError


@dataclass
class _Entry:
    data: Dict[str, Any]
    expires_at: datetime


class InMemorySessionStore(SessionStore):
    """Process-local store. Every save pushes the expiry forward (sliding)."""

    def __init__(self, clock: Callable[[], datetime] = now_local):
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def get(self, sid: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            entry = self._entries.get(sid)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[sid]
                return None
            return dict(entry.data)

    def save(self, sid: str, data: Dict[str, Any], lifetime: timedelta) -> None:
        now = self._clock()
        with self._lock:
            # records whose sid is never presented again are only reclaimed here
            self._drop_expired(now)
            self._entries[sid] = _Entry(data=dict(data), expires_at=now + lifetime)

    def delete(self, sid: str) -> None:
        with self._lock:
            self._entries.pop(sid, None)

    def _drop_expired(self, now: datetime) -> None:
        expired = [sid for sid, e in self._entries.items() if e.expires_at <= now]
        for sid in expired:
            del self._entries[sid]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
