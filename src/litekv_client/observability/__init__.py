"""Observability: structured logging."""

from litekv_client.observability.logging import (
    bind_store_context,
    clear_store_context,
    configure_logging,
    drop_stored_values,
)

__all__ = [
    "bind_store_context",
    "clear_store_context",
    "configure_logging",
    "drop_stored_values",
]
