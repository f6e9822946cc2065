"""Public interface re-exports for litekv_core."""

from litekv_core.interfaces.cache import CacheClient

__all__ = [
    "CacheClient",
]
