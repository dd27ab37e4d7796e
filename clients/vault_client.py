"""
Vault access for the invoicing service's connection secrets.

The service authenticates with AppRole and reads KV v2 secrets under the
'invoicing/' mount path. Configuration comes from VAULT_ADDR, VAULT_ROLE_ID,
VAULT_SECRET_ID and the optional VAULT_NAMESPACE; missing values stop startup.
"""

import os
import logging
from functools import lru_cache
from typing import Any, Dict

import hvac
from hvac.exceptions import Forbidden, InvalidPath, Unauthorized

logger = logging.getLogger(__name__)

SECRET_PREFIX = "invoicing"


class VaultError(Exception):
    """A secret was read but did not hold the expected field."""


def _require_env(*names: str) -> list[str]:
    values = [os.getenv(name) for name in names]
    if not all(values):
        raise ValueError(f"{' and '.join(names)} environment variable(s) required")
    return values


class VaultClient:
    """AppRole-authenticated reader for secrets under invoicing/."""

    def __init__(self, addr: str, role_id: str, secret_id: str, namespace: str | None = None):
        self.addr = addr
        self.client = hvac.Client(url=addr, namespace=namespace) if namespace else hvac.Client(url=addr)
        self._authenticate(role_id, secret_id)
        logger.info("Vault session opened at %s", addr)

    @classmethod
    def from_env(cls) -> "VaultClient":
        """Build a client from the VAULT_* environment variables."""
        [addr] = _require_env("VAULT_ADDR")
        role_id, secret_id = _require_env("VAULT_ROLE_ID", "VAULT_SECRET_ID")
        return cls(addr, role_id, secret_id, namespace=os.getenv("VAULT_NAMESPACE"))

    def _authenticate(self, role_id: str, secret_id: str) -> None:
        try:
            login = self.client.auth.approle.login(role_id=role_id, secret_id=secret_id)
        except (Unauthorized, Forbidden, InvalidPath) as e:
            raise PermissionError(f"AppRole login rejected: {e}") from e
        self.client.token = login["auth"]["client_token"]
        if not self.client.is_authenticated():
            raise PermissionError("Vault token was not accepted")

    def read(self, path: str) -> Dict[str, Any]:
        """Return the key/value pairs of invoicing/<path>, latest version."""
        full_path = f"{SECRET_PREFIX}/{path}"
        try:
            response = self.client.secrets.kv.v2.read_secret_version(
                path=full_path, raise_on_deleted_version=True
            )
        except (InvalidPath, Unauthorized, Forbidden) as e:
            logger.error("Cannot read secret %s: %s", full_path, e)
            raise PermissionError(f"Cannot read secret '{full_path}'") from e
        return response["data"]["data"]

    def get_secret(self, path: str, field: str) -> str:
        """
        One field of invoicing/<path>.

        Raises:
            PermissionError: The path is missing or this role may not read it.
            VaultError: The secret has no such field.
        """
        values = self.read(path)
        try:
            return values[field]
        except KeyError:
            raise VaultError(
                f"Secret '{SECRET_PREFIX}/{path}' has no field '{field}'. "
                f"Available: {', '.join(sorted(values))}"
            ) from None


@lru_cache(maxsize=1)
def _default_client() -> VaultClient:
    return VaultClient.from_env()


@lru_cache(maxsize=None)
def _cached_secret(path: str, field: str) -> str:
    return _default_client().get_secret(path, field)


def clear_secret_cache() -> None:
    """Forget the process-wide client and every secret read through it."""
    _cached_secret.cache_clear()
    _default_client.cache_clear()


def get_database_url() -> str:
    """PostgreSQL connection URL for the invoices database."""
    return _cached_secret("database", "url")


def get_valkey_url() -> str:
    """Valkey (Redis) URL for the page cache."""
    return _cached_secret("valkey", "url")
