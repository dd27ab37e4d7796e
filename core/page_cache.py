"""
Rendered-page cache keyed by path.

Pages are stored in Valkey as JSON and expire after a TTL. Writes call
revalidate_path so the next view of the page is rebuilt from the database.
"""

import logging

import redis

from clients.valkey_client import ValkeyClient

logger = logging.getLogger(__name__)


class PageCache:
    """Path-keyed page cache over ValkeyClient."""

    KEY_PREFIX = "page:"

    def __init__(self, valkey: ValkeyClient, ttl_seconds: int = 300):
        self.valkey = valkey
        self.ttl_seconds = ttl_seconds

    def _key(self, path: str) -> str:
        return f"{self.KEY_PREFIX}{path}"

    def get_page(self, path: str) -> dict | list | None:
        """Cached payload for path, or None when stale or never rendered."""
        return self.valkey.get_json(self._key(path))

    def set_page(self, path: str, payload: dict | list) -> None:
        self.valkey.set_json(self._key(path), payload, expire_seconds=self.ttl_seconds)

    def revalidate_path(self, path: str) -> None:
        """
        Mark the cached page for path as stale.

        Fire-and-forget: the write that triggered this has already committed,
        so cache errors are logged and never propagate. The TTL bounds how
        long a page that failed to invalidate stays stale.
        """
        try:
            self.valkey.delete(self._key(path))
        except redis.RedisError:
            logger.exception("Failed to revalidate %s", path)
            return
        logger.debug("Revalidated %s", path)
