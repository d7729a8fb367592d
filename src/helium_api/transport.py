"""Request execution for the Helium API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import aiohttp
import orjson

from .errors import NotFoundError, TransportError

if TYPE_CHECKING:
    from .session_manager import SessionManager

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404
HTTP_TOO_MANY_REQUESTS = 429
_JSON_BODY_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class ApiResponse:
    """Decoded response envelope: the ``data`` member plus an optional page cursor."""

    data: Any
    cursor: Optional[str] = None


def _build_query(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    if not params:
        return {}
    return {key: str(value) for key, value in params.items() if value is not None}


def _extract_cursor(payload: Mapping[str, Any]) -> Optional[str]:
    cursor_val = payload.get("cursor")
    if cursor_val is None or not isinstance(cursor_val, str) or not cursor_val.strip():
        return None
    return cursor_val


class HttpTransport:
    """Executes Helium API requests over a managed aiohttp session."""

    def __init__(
        self,
        base_url: str,
        session_manager: SessionManager,
        *,
        max_retries: int,
        backoff_base: float,
        backoff_max: float,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session_manager = session_manager
        self._max_retries = max_retries
        self._backoff_base = backoff_base
        self._backoff_max = backoff_max

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """Issue a GET request and return the decoded envelope."""
        query = _build_query(params)
        request_kwargs: Dict[str, Any] = {}
        if query:
            request_kwargs["params"] = query
        return await self._execute("GET", path, request_kwargs, retry_on_error=True)

    async def post(self, path: str, body: Mapping[str, Any]) -> ApiResponse:
        """Issue a POST request with a JSON body and return the decoded envelope.

        Only a 429 is retried. Connection errors and timeouts raise immediately
        since the server may already hold the body.
        """
        request_kwargs: Dict[str, Any] = {
            "headers": dict(_JSON_BODY_HEADERS),
            "data": orjson.dumps(dict(body)),
        }
        return await self._execute("POST", path, request_kwargs, retry_on_error=False)

    def build_url(self, path: str) -> str:
        if not path.startswith("/"):
            raise TransportError("Path must begin with '/' for Helium requests", path=path)
        return f"{self._base_url}{path}"

    async def _execute(
        self, method: str, path: str, request_kwargs: Dict[str, Any], *, retry_on_error: bool
    ) -> ApiResponse:
        url = self.build_url(path)
        session = await self._session_manager.ensure_session()
        logger.debug("Helium %s %s params=%s", method, path, request_kwargs.get("params"))
        return await self._retry_request(session, method, url, request_kwargs, path, retry_on_error=retry_on_error)

    async def _retry_request(
        self,
        session: aiohttp.ClientSession,
        method: str,
        url: str,
        request_kwargs: Dict[str, Any],
        path: str,
        *,
        retry_on_error: bool,
    ) -> ApiResponse:
        max_attempts = max(1, self._max_retries)
        for attempt in range(1, max_attempts + 1):
            try:
                async with session.request(method, url, **request_kwargs) as response:
                    if response.status == HTTP_TOO_MANY_REQUESTS and attempt < max_attempts:
                        delay = self._compute_retry_delay(attempt)
                        logger.warning("Helium rate limited %s (%d/%d); retrying in %.1fs", path, attempt, max_attempts, delay)
                        await asyncio.sleep(delay)
                        continue
                    body = await response.read()
                    return self._parse_response(response.status, body, path=path)
            except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
                if not retry_on_error:
                    raise TransportError(f"Helium {method} {path} failed: {exc}", path=path) from exc
                if attempt < max_attempts:
                    delay = self._compute_retry_delay(attempt)
                    logger.warning("Helium request %s failed (%d/%d): %s; retrying in %.1fs", path, attempt, max_attempts, exc, delay)
                    await asyncio.sleep(delay)
                    continue
                raise TransportError(f"Helium request {path} failed after {max_attempts} attempts: {exc}", path=path) from exc
        raise TransportError(f"Helium request {path} failed without a response", path=path)

    def _compute_retry_delay(self, attempt: int) -> float:
        if attempt < 1:
            raise TypeError("Retry attempt must be at least 1")
        base_backoff = max(0.5, float(self._backoff_base))
        max_backoff = max(base_backoff, float(self._backoff_max))
        return min(base_backoff * (2 ** (attempt - 1)), max_backoff)

    @staticmethod
    def _parse_response(status: int, body: bytes, *, path: str) -> ApiResponse:
        try:
            payload = orjson.loads(body) if body else None
        except orjson.JSONDecodeError as exc:
            if status == HTTP_NOT_FOUND:
                raise NotFoundError(path) from exc
            raise TransportError(f"Helium response was not JSON for {path}", path=path, status=status) from exc
        if status == HTTP_NOT_FOUND:
            raise NotFoundError(path, payload)
        if not 200 <= status < 300:
            raise TransportError(f"Helium request {path} returned {status}: {payload}", path=path, status=status, payload=payload)
        if not isinstance(payload, dict):
            raise TransportError(f"Helium response for {path} was not a JSON object", path=path, status=status, payload=payload)
        return ApiResponse(data=payload.get("data"), cursor=_extract_cursor(payload))


__all__ = ["ApiResponse", "HttpTransport"]
