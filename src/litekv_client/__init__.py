"""Async client for the LiteKV hosted key-value service.

Example:
    from litekv_client import KVStore

    async with KVStore("my-app-id", should_cache=True) as store:
        await store.set("greeting", "hello world")
        value = await store.get("greeting")
        await store.inc("visits")
"""

from litekv_client.store import KVStore
from litekv_core.exceptions import AppNotFoundError, LiteKVError, TransportError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AppNotFoundError",
    "KVStore",
    "LiteKVError",
    "TransportError",
]
