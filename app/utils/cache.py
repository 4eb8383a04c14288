import threading
import time
from typing import Optional, Dict, Any, Tuple
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)

_memory_cache: Dict[str, Dict[str, Any]] = {}
# Bumped by every delete so a fill computed before an invalidation is refused.
_generations: Dict[str, int] = {}
_epoch = 0
_cache_lock = threading.Lock()

def get(key: str) -> Optional[Any]:
    """Get item from cache, None when missing, expired or caching is off."""
    if not settings.CACHE_ENABLED:
        return None
    with _cache_lock:
        item = _memory_cache.get(key)
        if item is None:
            return None
        if item["expiry"] and time.time() >= item["expiry"]:
            del _memory_cache[key]
            return None
        logger.debug(f"Cache HIT for key: {key}")
        return item["value"]

def generation(key: str) -> Tuple[int, int]:
    """Invalidation marker for key. Read it before computing a value to cache."""
    with _cache_lock:
        return _epoch, _generations.get(key, 0)

def set(key: str, value: Any, ttl: Optional[int] = None, expected_generation: Optional[Tuple[int, int]] = None) -> bool:
    """Set item in cache. A ttl of 0 keeps the entry until it is deleted.

    With expected_generation, the value is dropped when the key was
    invalidated after that generation was read.
    """
    if not settings.CACHE_ENABLED:
        return False
    if ttl is None:
        ttl = settings.RATING_STATS_CACHE_TTL

    with _cache_lock:
        if expected_generation is not None and (_epoch, _generations.get(key, 0)) != expected_generation:
            logger.debug(f"Cache fill skipped for invalidated key: {key}")
            return False
        _cleanup_expired()
        _memory_cache[key] = {
            "value": value,
            "expiry": time.time() + ttl if ttl > 0 else 0,
        }
    return True

def delete(key: str) -> bool:
    with _cache_lock:
        _generations[key] = _generations.get(key, 0) + 1
        removed = _memory_cache.pop(key, None) is not None
    if removed:
        logger.debug(f"Cache invalidated for key: {key}")
    return removed

def clear() -> bool:
    global _epoch
    with _cache_lock:
        _memory_cache.clear()
        _generations.clear()
        _epoch += 1
    return True

def _cleanup_expired():
    current_time = time.time()
    expired_keys = [
        key for key, item in _memory_cache.items()
        if item["expiry"] and current_time >= item["expiry"]
    ]
    for key in expired_keys:
        del _memory_cache[key]
