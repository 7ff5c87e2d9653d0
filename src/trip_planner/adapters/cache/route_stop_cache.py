"""Persistent cache of the stop list of each route."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from trip_planner.domain.contracts.route_stop_cache import RouteStopCacheProtocol

logger = logging.getLogger(__name__)


class RouteStopCache(RouteStopCacheProtocol):
    """In-memory route to stops cache backed by a JSON file.

    Create it at startup and call load() once. Readers wait on the ready
    event; entries never change once cached, so reads take no lock. Writes
    rewrite the whole file and are serialised.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize the cache.

        Args:
            path: JSON file to load from and persist to, None for memory only.
        """
        self._path = Path(path) if path else None
        self._cache: dict[str, list[dict[str, Any]]] = {}
        self._write_lock = asyncio.Lock()
        self.ready = asyncio.Event()

    async def load(self) -> None:
        """Load persisted entries and mark the cache ready.

        A missing or unreadable file leaves the cache empty.
        """
        try:
            if self._path is None or not self._path.exists():
                logger.info("No route cache found, starting with empty cache")
                return
            data = await asyncio.to_thread(self._read_file, self._path)
            if isinstance(data, dict):
                self._cache.update(
                    {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, list)}
                )
            logger.info(f"Route stops cache loaded from {self._path} ({len(self._cache)} route(s))")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading route cache from {self._path}: {e}")
        finally:
            self.ready.set()

    async def wait_ready(self) -> None:
        await self.ready.wait()

    def get(self, route_id: str) -> list[dict[str, Any]] | None:
        """Get the cached stops of a route.

        Args:
            route_id: Backend route identifier.

        Returns:
            Cached stop list, or None if not cached.
        """
        return self._cache.get(route_id)

    async def set(self, route_id: str, stops: list[dict[str, Any]]) -> None:
        """Cache the stops of a route and persist the cache.

        Args:
            route_id: Backend route identifier.
            stops: Stop objects of the route.
        """
        async with self._write_lock:
            self._cache[route_id] = stops
            if self._path is None:
                return
            snapshot = dict(self._cache)
            try:
                await asyncio.to_thread(self._write_file, self._path, snapshot)
            except (OSError, TypeError, ValueError) as e:
                logger.error(f"Error saving route cache to {self._path}: {e}")

    def get_all_route_ids(self) -> set[str]:
        return set(self._cache.keys())

    @staticmethod
    def _read_file(path: Path) -> Any:
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def _write_file(path: Path, data: dict[str, list[dict[str, Any]]]) -> None:
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        tmp_path.replace(path)
