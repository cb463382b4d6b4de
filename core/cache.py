# core/cache.py
from __future__ import annotations

import hashlib
import logging
import time
from typing import Any, Callable

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


def _generation_key(path: str) -> str:
    return f"view-generation:{path}"


def _fresh_generation() -> int:
    # Never reuse a number an evicted counter may have held.
    return time.time_ns()


def path_generation(path: str) -> int:
    """Current generation of cached data for a view path."""
    key = _generation_key(path)
    generation = cache.get(key)
    if generation is None:
        cache.add(key, _fresh_generation(), timeout=None)
        generation = cache.get(key)
    return generation


def invalidate_path(path: str) -> None:
    """Mark everything cached for `path` stale.

    Bumping the generation orphans every entry built under the old one, so
    the next request recomputes. Cache faults are logged, never raised: a
    stored mutation must not be reported as failed because of the cache.
    """
    key = _generation_key(path)
    try:
        try:
            cache.incr(key)
        except ValueError:
            # Counter missing (never read or evicted)
            cache.set(key, _fresh_generation(), timeout=None)
    except Exception:
        logger.warning("Could not invalidate cached view %s", path, exc_info=True)
        return
    logger.debug("Invalidated cached view %s", path)


def cached_for_path(path: str, key: str, compute: Callable[[], Any], timeout: int | None = None) -> Any:
    """Memoise `compute()` under `path` until the path is invalidated."""
    digest = hashlib.md5(key.encode("utf-8"), usedforsecurity=False).hexdigest()
    full_key = f"view:{path}:{path_generation(path)}:{digest}"
    if timeout is None:
        timeout = getattr(settings, "VIEW_CACHE_TIMEOUT", 300)
    return cache.get_or_set(full_key, compute, timeout=timeout)
