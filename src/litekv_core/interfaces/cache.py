"""Abstract local cache interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheClient(Protocol):
    """Local cache consulted by KVStore; implementations can be swapped."""

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key, or None if not cached."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Store a value."""
        ...

    async def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        ...

    async def exists(self, key: str) -> bool:
        """Check if a key is cached."""
        ...
