"""Helium REST client - slim coordinator over the session, transport and resources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from .config import ConfigurationError, env_bool, env_int, env_seconds, env_str
from .models.context import Account, Block, Context, Hotspot, Validator
from .session_manager import SessionManager
from .transactions import ScopedTransactions, TransactionLister
from .transport import HttpTransport

__all__ = ["HeliumClient", "HeliumConfig"]

logger = logging.getLogger(__name__)

DEFAULT_HELIUM_BASE_URL = "https://api.helium.io/v1"
DEFAULT_HELIUM_REQUEST_TIMEOUT_SECONDS = 30
DEFAULT_HELIUM_CONNECT_TIMEOUT_SECONDS = 10
DEFAULT_HELIUM_SOCK_READ_TIMEOUT_SECONDS = 20
DEFAULT_HELIUM_NETWORK_MAX_RETRIES = 3
DEFAULT_HELIUM_BACKOFF_BASE_SECONDS = 1.0
DEFAULT_HELIUM_BACKOFF_MAX_SECONDS = 30.0
DEFAULT_HELIUM_USER_AGENT = "helium-api-python"


def ensure_http_url(request_url: str) -> str:
    """Ensure the provided URL uses an allowed HTTP/HTTPS scheme."""
    parsed = urlsplit(request_url)
    scheme = parsed.scheme.lower()
    if scheme not in {"http", "https"}:
        raise ConfigurationError.invalid_value("base_url", request_url, "Unsupported URL scheme")
    if not parsed.netloc:
        raise ConfigurationError.invalid_value("base_url", request_url, "URL missing network location")
    return request_url


@dataclass(frozen=True)
class HeliumConfig:
    """Configuration for the Helium API client."""

    base_url: str = DEFAULT_HELIUM_BASE_URL
    request_timeout_seconds: float = DEFAULT_HELIUM_REQUEST_TIMEOUT_SECONDS
    connect_timeout_seconds: float = DEFAULT_HELIUM_CONNECT_TIMEOUT_SECONDS
    sock_read_timeout_seconds: float = DEFAULT_HELIUM_SOCK_READ_TIMEOUT_SECONDS
    network_max_retries: int = DEFAULT_HELIUM_NETWORK_MAX_RETRIES
    network_backoff_base_seconds: float = DEFAULT_HELIUM_BACKOFF_BASE_SECONDS
    network_backoff_max_seconds: float = DEFAULT_HELIUM_BACKOFF_MAX_SECONDS
    user_agent: str = DEFAULT_HELIUM_USER_AGENT
    trust_env: bool = False

    def __post_init__(self) -> None:
        ensure_http_url(self.base_url)
        if self.network_max_retries < 1:
            raise ConfigurationError.invalid_value("network_max_retries", self.network_max_retries, "Must be at least 1")

    @classmethod
    def from_env(cls) -> "HeliumConfig":
        """Build a config from ``HELIUM_API_*`` environment variables, falling back to defaults."""
        return cls(
            base_url=env_str("HELIUM_API_BASE_URL", DEFAULT_HELIUM_BASE_URL),
            request_timeout_seconds=env_seconds("HELIUM_API_REQUEST_TIMEOUT_SECONDS", DEFAULT_HELIUM_REQUEST_TIMEOUT_SECONDS),
            connect_timeout_seconds=env_seconds("HELIUM_API_CONNECT_TIMEOUT_SECONDS", DEFAULT_HELIUM_CONNECT_TIMEOUT_SECONDS),
            sock_read_timeout_seconds=env_seconds("HELIUM_API_SOCK_READ_TIMEOUT_SECONDS", DEFAULT_HELIUM_SOCK_READ_TIMEOUT_SECONDS),
            network_max_retries=env_int("HELIUM_API_MAX_RETRIES", DEFAULT_HELIUM_NETWORK_MAX_RETRIES),
            network_backoff_base_seconds=env_seconds("HELIUM_API_BACKOFF_BASE_SECONDS", DEFAULT_HELIUM_BACKOFF_BASE_SECONDS),
            network_backoff_max_seconds=env_seconds("HELIUM_API_BACKOFF_MAX_SECONDS", DEFAULT_HELIUM_BACKOFF_MAX_SECONDS),
            user_agent=env_str("HELIUM_API_USER_AGENT", DEFAULT_HELIUM_USER_AGENT),
            trust_env=env_bool("HELIUM_API_TRUST_ENV", False),
        )


class HeliumClient:
    """Client for the Helium blockchain API."""

    def __init__(
        self,
        config: HeliumConfig | None = None,
        *,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        self._config = config if config else HeliumConfig()
        self._session_manager = SessionManager(self._config)
        self._transport = transport if transport is not None else HttpTransport(
            self._config.base_url,
            self._session_manager,
            max_retries=self._config.network_max_retries,
            backoff_base=self._config.network_backoff_base_seconds,
            backoff_max=self._config.network_backoff_max_seconds,
        )
        self.transactions = TransactionLister(self._transport)

    @property
    def config(self) -> HeliumConfig:
        return self._config

    async def initialize(self) -> None:
        """Initialize the client's HTTP session."""
        await self._session_manager.ensure_session()
        logger.debug("Helium client initialized for %s", self._config.base_url)

    async def close(self) -> None:
        """Close the client's HTTP session."""
        await self._session_manager.close()

    async def __aenter__(self) -> "HeliumClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def activity(self, context: Context) -> ScopedTransactions:
        """Transaction operations scoped to a block, account, hotspot or validator."""
        return ScopedTransactions(self.transactions, context)

    @staticmethod
    def block(reference: int | str) -> Block:
        return Block.from_reference(reference)

    @staticmethod
    def account(address: str) -> Account:
        return Account(address)

    @staticmethod
    def hotspot(address: str) -> Hotspot:
        return Hotspot(address)

    @staticmethod
    def validator(address: str) -> Validator:
        return Validator(address)
