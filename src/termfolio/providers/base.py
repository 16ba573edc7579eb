"""
Data providers with a cached, fallback-safe fetch policy.

A provider starts out LOADING. ``start()`` resolves it in a background
thread; readers never block and see either LOADING or Loaded(items).
Fetch failures are absorbed here: the provider falls back to stale cache,
then to its static fallback list.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from termfolio.core.datamodels import LOADING, Loaded, ProviderState
from termfolio.providers.cache import FileCache

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DEFAULT_TTL_SECONDS = 60 * 60 * 24  # 24 hours


class DataProvider(Generic[M]):
    """Cached accessor for one category of portfolio records.

    Args:
        name: Category name, used in logs and the cache key.
        model: Record model used to validate cached payloads.
        loader: Zero-argument callable fetching fresh records. None for
            static providers.
        fallback: Records served when the loader fails and nothing is cached.
        cache: Cache backend. None disables caching.
        ttl_seconds: How long a cached value counts as fresh.
    """

    def __init__(
        self,
        name: str,
        model: type[M],
        loader: Optional[Callable[[], Sequence[M]]] = None,
        fallback: Sequence[M] = (),
        cache: Optional[FileCache] = None,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
    ):
        self.name = name
        self.model = model
        self.loader = loader
        self.fallback = list(fallback)
        self.cache = cache
        self.ttl_seconds = ttl_seconds

        self._state: ProviderState = LOADING
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._done = threading.Event()

    @classmethod
    def static(cls, name: str, model: type[M], items: Sequence[M]) -> "DataProvider[M]":
        """Create a provider that is loaded from the start."""
        provider = cls(name, model, fallback=items)
        provider._resolve(list(items))
        return provider

    @property
    def cache_key(self) -> str:
        return f"{self.name}-cache"

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def __call__(self) -> ProviderState:
        return self.state()

    def state(self) -> ProviderState:
        with self._lock:
            return self._state

    @property
    def is_loaded(self) -> bool:
        return isinstance(self.state(), Loaded)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until resolved. For non-interactive callers and tests."""
        return self._done.wait(timeout)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _resolve(self, items: list[M]) -> None:
        with self._lock:
            self._state = Loaded(items)
        self._done.set()

    def _decode(self, data: object) -> Optional[list[M]]:
        """Validate a cached payload, or None if it no longer fits the model."""
        if not isinstance(data, list):
            return None
        try:
            return [self.model.model_validate(item) for item in data]
        except ValidationError as e:
            logger.warning(f"Discarding cached {self.name} data: {e}")
            return None

    def load(self, force: bool = False) -> list[M]:
        """Resolve records using the cache/fetch/fallback policy.

        Args:
            force: Skip a fresh cache and fetch anyway.
        """
        if self.loader is None:
            items = self.fallback
            self._resolve(items)
            return items

        record = self.cache.read(self.cache_key) if self.cache else None
        cached = self._decode(record.data) if record else None
        if record is not None and cached is None:
            self.cache.invalidate(self.cache_key)

        if cached is not None and not force and FileCache.is_fresh(record, self.ttl_seconds):
            logger.info(f"Using cached {self.name} data")
            self._resolve(cached)
            return cached

        try:
            items = list(self.loader())
        except Exception as e:
            logger.warning(f"Failed to fetch {self.name}, using fallback data: {e}")
            if cached is not None:
                logger.info(f"Using expired {self.name} cache as fallback")
                items = cached
            else:
                items = self.fallback
            self._resolve(items)
            return items

        if self.cache:
            try:
                self.cache.write(self.cache_key, [item.model_dump() for item in items])
            except OSError as e:
                logger.warning(f"Could not cache {self.name} data: {e}")
        logger.info(f"Fetched and cached new {self.name} data")
        self._resolve(items)
        return items

    def start(self, force: bool = False) -> None:
        """Resolve in a background thread. No-op if already started."""
        if self._thread is not None or self._done.is_set():
            return
        self._thread = threading.Thread(
            target=self.load,
            kwargs={"force": force},
            name=f"provider-{self.name}",
            daemon=True,
        )
        self._thread.start()

    def refresh(self) -> None:
        """Re-fetch in the background, ignoring a fresh cache.

        The current state stays visible until the new fetch resolves.
        """
        if self._thread is not None and self._thread.is_alive():
            return
        self._thread = threading.Thread(
            target=self.load,
            kwargs={"force": True},
            name=f"provider-{self.name}-refresh",
            daemon=True,
        )
        self._thread.start()
