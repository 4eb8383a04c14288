from app.core.config import settings
from app.utils import cache


def test_set_get_delete():
    cache.set("key", {"value": 1})
    assert cache.get("key") == {"value": 1}
    assert cache.delete("key") is True
    assert cache.get("key") is None
    assert cache.delete("key") is False


def test_expired_entries_are_dropped(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(cache.time, "time", lambda: now[0])

    cache.set("key", "value", ttl=10)
    assert cache.get("key") == "value"
    now[0] += 11
    assert cache.get("key") is None


def test_disabled_cache_never_stores(monkeypatch):
    monkeypatch.setattr(settings, "CACHE_ENABLED", False)

    assert cache.set("key", "value") is False
    assert cache.get("key") is None


def test_fill_after_invalidation_is_refused():
    marker = cache.generation("key")
    cache.delete("key")

    assert cache.set("key", "stale", expected_generation=marker) is False
    assert cache.get("key") is None

    assert cache.set("key", "fresh", expected_generation=cache.generation("key")) is True
    assert cache.get("key") == "fresh"


def test_clear_refuses_fills_started_before_it():
    marker = cache.generation("key")
    cache.clear()

    assert cache.set("key", "stale", expected_generation=marker) is False
