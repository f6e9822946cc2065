"""In-process dict-backed implementation of CacheClient."""

from __future__ import annotations


class InMemoryCacheClient:
    """Unbounded local cache with no eviction and no TTL."""

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key."""
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        """Store a value."""
        self._data[key] = value

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        self._data.pop(key, None)

    async def exists(self, key: str) -> bool:
        """Check if a key exists."""
        return key in self._data

    def clear(self) -> None:
        """Drop every cached entry."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
