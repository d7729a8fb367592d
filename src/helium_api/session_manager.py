"""Shared aiohttp session for Helium API requests."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import aiohttp

if TYPE_CHECKING:
    from .client import HeliumConfig

logger = logging.getLogger(__name__)


def is_session_open(session: Optional[Any]) -> bool:
    """Return True when the provided aiohttp session exists and remains open."""
    if session is None:
        return False
    if not hasattr(session, "closed"):
        return False
    return not bool(session.closed)


def default_headers(config: HeliumConfig) -> Dict[str, str]:
    """Headers sent with every request: the client identity and JSON negotiation."""
    return {"User-Agent": config.user_agent, "Accept": "application/json"}


class SessionManager:
    """Opens the client session on first use and reopens it after a close."""

    def __init__(self, config: HeliumConfig) -> None:
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return is_session_open(self._session)

    async def ensure_session(self) -> aiohttp.ClientSession:
        """Return the open session, creating one with the configured timeouts if needed."""
        async with self._lock:
            if self._session is None or not is_session_open(self._session):
                self._session = self._build_session()
                logger.debug("Opened Helium HTTP session for %s", self._config.base_url)
            return self._session

    def _build_session(self) -> aiohttp.ClientSession:
        timeout = aiohttp.ClientTimeout(
            total=self._config.request_timeout_seconds,
            connect=self._config.connect_timeout_seconds,
            sock_read=self._config.sock_read_timeout_seconds,
        )
        return aiohttp.ClientSession(
            timeout=timeout,
            headers=default_headers(self._config),
            trust_env=self._config.trust_env,
        )

    async def close(self) -> None:
        """Close the session; a later request opens a fresh one."""
        async with self._lock:
            session, self._session = self._session, None
        if is_session_open(session):
            await session.close()
