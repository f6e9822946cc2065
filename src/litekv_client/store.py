"""Async client for the LiteKV HTTP key-value service."""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING

import httpx
import structlog

from litekv_client.encoding import build_path, decode_component, encode_component
from litekv_core.constants import (
    ABSENT_BODIES,
    DEFAULT_API_URL,
    OP_DEC,
    OP_EXISTS,
    OP_GET,
    OP_INC,
    OP_SET,
    TRUE_BODY,
)
from litekv_core.exceptions import AppNotFoundError, TransportError
from litekv_infra.cache.memory_cache import InMemoryCacheClient

if TYPE_CHECKING:
    from litekv_core.config.settings import Settings
    from litekv_core.interfaces.cache import CacheClient

logger = structlog.get_logger()


class KVStore:
    """Key-value store bound to one application id and one API base URL.

    Every operation validates the application id once per instance, then
    issues a single GET whose path carries the operation and its
    percent-encoded arguments. Responses are plain text: ``"true"`` marks
    a successful mutation, and ``"null"``, ``"undefined"`` or an empty body
    mark a missing key.

    With caching enabled, reads are served from a local cache populated by
    successful writes and reads. The cache is never evicted and is not
    shared between instances. Counter updates are predicted locally from
    the cached value, so writers outside this instance can make it drift
    from the server.
    """

    def __init__(
        self,
        app_id: str,
        *,
        api_url: str = DEFAULT_API_URL,
        should_cache: bool = False,
        cache: CacheClient | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize with an app id and optional cache and HTTP client."""
        self.app_id = app_id
        self.api_url = api_url.rstrip("/")
        self.should_cache = should_cache or cache is not None
        self._cache: CacheClient | None = None
        if self.should_cache:
            self._cache = cache if cache is not None else InMemoryCacheClient()
        self._client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout
        self._checked = False
        self._app_exists = False
        self._log = logger.bind(app_id=app_id, api_url=self.api_url)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> KVStore:
        """Build a store from application settings."""
        if not settings.app_id:
            msg = "app_id is required to build a KVStore"
            raise ValueError(msg)
        return cls(
            settings.app_id,
            api_url=settings.api_url,
            should_cache=settings.should_cache,
            http_client=http_client,
            timeout=settings.request_timeout_seconds,
        )

    @property
    def checked(self) -> bool:
        """Whether the one-time existence check has run."""
        return self._checked

    @property
    def app_exists(self) -> bool:
        """Result of the existence check (False until it succeeds)."""
        return self._app_exists

    @property
    def cache(self) -> CacheClient | None:
        """The local cache, or None when caching is disabled."""
        return self._cache

    async def set(self, key: str, value: str) -> bool:
        """Store a value; return True iff the service acknowledged it."""
        await self.check_app_exists()
        body = await self._fetch(
            OP_SET, self.app_id, encode_component(key), encode_component(value)
        )
        if body != TRUE_BODY:
            return False
        if self._cache is not None:
            await self._cache.set(key, value)
        return True

    async def get(self, key: str) -> str | None:
        """Return the value for key, or None if the service has none."""
        await self.check_app_exists()
        if self._cache is not None and await self._cache.exists(key):
            self._log.debug("litekv_cache_hit", key=key)
            return await self._cache.get(key)

        body = await self._fetch(OP_GET, self.app_id, encode_component(key))
        if body in ABSENT_BODIES:
            return None
        value = decode_component(body)
        if self._cache is not None:
            await self._cache.set(key, value)
        return value

    async def delete(self, key: str) -> bool:
        """Delete key remotely; the local copy is dropped before the request."""
        await self.check_app_exists()
        if self._cache is not None:
            await self._cache.delete(key)
        # setVal without a value segment deletes
        body = await self._fetch(OP_SET, self.app_id, encode_component(key))
        return body == TRUE_BODY

    async def inc(self, key: str, inc_by: int = 1) -> bool:
        """Increment a numeric value by inc_by."""
        return await self._adjust(OP_INC, key, inc_by)

    async def dec(self, key: str, dec_by: int = 1) -> bool:
        """Decrement a numeric value by dec_by."""
        return await self._adjust(OP_DEC, key, dec_by)

    async def check_app_exists(self) -> None:
        """Validate the app id once; later calls return immediately.

        The check is never retried, even when it failed.
        """
        if self._checked:
            return
        try:
            body = await self._fetch(OP_EXISTS, self.app_id)
        except TransportError as exc:
            self._checked = True
            raise AppNotFoundError(
                f"Failed to check app existence: {exc}", app_id=self.app_id
            ) from exc

        self._checked = True
        self._app_exists = body == TRUE_BODY
        self._log.info("litekv_app_checked", exists=self._app_exists)
        if not self._app_exists:
            raise AppNotFoundError(
                "Failed to check app existence: "
                f"App with ID '{self.app_id}' does not exist",
                app_id=self.app_id,
            )

    async def aclose(self) -> None:
        """Close the HTTP client if this store created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> KVStore:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _adjust(self, operation: str, key: str, amount: int) -> bool:
        """Apply inc/dec remotely and mirror the change in the local cache."""
        await self.check_app_exists()
        body = await self._fetch(
            operation, self.app_id, encode_component(key), str(amount)
        )
        succeeded = body == TRUE_BODY
        if succeeded and self._cache is not None:
            current = await self.get(key)
            if current is not None:
                delta = amount if operation == OP_INC else -amount
                try:
                    updated = int(current) + delta
                except ValueError:
                    self._log.warning(
                        "litekv_cache_counter_unparseable",
                        key=key,
                        operation=operation,
                    )
                    await self._cache.delete(key)
                else:
                    await self._cache.set(key, str(updated))
        return succeeded

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def _fetch(self, operation: str, *segments: str) -> str:
        """GET {api_url}/{operation}/{segments...} and return the body text."""
        url = f"{self.api_url}/{build_path(operation, *segments)}"
        self._log.debug("litekv_request", operation=operation)
        try:
            response = await self._get_client().get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._log.warning("litekv_transport_error", operation=operation, error=str(exc))
            raise TransportError(f"Fetch failed: {exc}") from exc

        if not response.is_success:
            self._log.warning(
                "litekv_http_error",
                operation=operation,
                status_code=response.status_code,
            )
            raise TransportError(
                f"Fetch failed: HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        return response.text
