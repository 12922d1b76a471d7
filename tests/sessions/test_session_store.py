from __future__ import annotations

from datetime import datetime, timedelta

from siswa_admin.sessions.store import InMemorySessionStore


class FakeClock:
    def __init__(self):
        self.now = datetime(2025, 6, 1, 8, 0, 0)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


def test_session_expires_after_lifetime():
    clock = FakeClock()
    store = InMemorySessionStore(clock=clock)
    store.save("sid", {"user_id": 1}, timedelta(hours=1))

    clock.advance(minutes=59)
    assert store.get("sid") == {"user_id": 1}

    clock.advance(minutes=1)
    assert store.get("sid") is None
    assert len(store) == 0


def test_save_slides_expiry_forward():
    clock = FakeClock()
    store = InMemorySessionStore(clock=clock)
    store.save("sid", {"user_id": 1}, timedelta(hours=1))

    clock.advance(minutes=50)
    store.save("sid", {"user_id": 1}, timedelta(hours=1))
    clock.advance(minutes=50)

    assert store.get("sid") == {"user_id": 1}


def test_returned_data_is_a_copy():
    store = InMemorySessionStore()
    store.save("sid", {"user_id": 1}, timedelta(hours=1))

    store.get("sid")["user_id"] = 99

    assert store.get("sid") == {"user_id": 1}


def test_delete_is_idempotent():
    clock = FakeClock()
    store = InMemorySessionStore(clock=clock)
    store.save("a", {}, timedelta(minutes=5))
    store.save("b", {}, timedelta(hours=1))
    store.delete("missing")

    clock.advance(minutes=10)

    store.delete("b")
    store.delete("b")
    assert len(store) == 1
    assert store.get("a") is None
    assert len(store) == 0


def test_save_reclaims_records_nobody_comes_back_for():
    clock = FakeClock()
    store = InMemorySessionStore(clock=clock)
    for i in range(200):
        store.save(f"abandoned-{i}", {"_flashes": [("danger", "x")]}, timedelta(hours=1))
    assert len(store) == 200

    clock.advance(days=30)
    store.save("fresh", {}, timedelta(hours=1))

    assert len(store) == 1
    assert store.get("fresh") == {}


def test_save_keeps_live_records():
    clock = FakeClock()
    store = InMemorySessionStore(clock=clock)
    store.save("old", {}, timedelta(minutes=5))
    store.save("live", {"user_id": 1}, timedelta(hours=1))

    clock.advance(minutes=10)
    store.save("new", {}, timedelta(hours=1))

    assert len(store) == 2
    assert store.get("live") == {"user_id": 1}
