"""Shared JSON-RPC transport for the chain providers.

Maps every transport outcome onto the ProviderError taxonomy so callers never
see raw httpx exceptions.
"""

import asyncio
from typing import Any

import httpx
from loguru import logger

from launch_verifier.providers.exceptions import (
    InvalidResponseError,
    NetworkError,
    ProviderTimeoutError,
)
from launch_verifier.providers.rate_limiter import RateLimiter

RETRY_DELAYS = [1.0, 3.0]


class JsonRpcClient:
    """Rate-limited async JSON-RPC 2.0 client with retry on transient errors."""

    def __init__(
        self,
        url: str,
        *,
        tag: str,
        timeout: float = 10.0,
        max_rps: float = 10.0,
        max_retries: int = 2,
    ) -> None:
        self._url = url
        self._tag = tag
        self._max_retries = max_retries
        self._rate_limiter = RateLimiter(max_rps)
        self._client = httpx.AsyncClient(timeout=timeout)
        self._request_id = 0

    async def close(self) -> None:
        await self._client.aclose()

    async def call(self, method: str, params: list[Any] | dict[str, Any]) -> Any:
        """Invoke ``method`` and return its ``result`` member.

        Raises ProviderTimeoutError, NetworkError or InvalidResponseError.
        """
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }

        for attempt in range(self._max_retries + 1):
            await self._rate_limiter.acquire()
            try:
                resp = await self._client.post(self._url, json=payload)
            except httpx.TimeoutException as e:
                if attempt < self._max_retries:
                    await asyncio.sleep(_retry_delay(attempt))
                    continue
                logger.warning(f"[{self._tag}] {method} timed out after {attempt + 1} attempts")
                raise ProviderTimeoutError(f"{method} timed out") from e
            except httpx.ConnectError as e:
                if attempt < self._max_retries:
                    await asyncio.sleep(_retry_delay(attempt))
                    continue
                logger.warning(f"[{self._tag}] {method} connect failed: {e}")
                raise NetworkError(str(e) or "connection failed") from e
            except httpx.RequestError as e:
                raise NetworkError(str(e) or type(e).__name__) from e

            if resp.status_code == 429 or resp.status_code >= 500:
                if attempt < self._max_retries:
                    logger.debug(
                        f"[{self._tag}] {method} HTTP {resp.status_code}, "
                        f"retry in {_retry_delay(attempt)}s"
                    )
                    await asyncio.sleep(_retry_delay(attempt))
                    continue
                if resp.status_code == 429:
                    raise NetworkError("rate limited (429)")
            if resp.status_code != 200:
                logger.debug(f"[{self._tag}] {method} HTTP {resp.status_code}")
                raise InvalidResponseError(f"HTTP {resp.status_code}")

            try:
                data = resp.json()
            except ValueError as e:
                raise InvalidResponseError("body is not JSON") from e

            if not isinstance(data, dict):
                raise InvalidResponseError("unexpected JSON-RPC envelope")
            if data.get("error") is not None:
                logger.debug(f"[{self._tag}] {method} RPC error: {data['error']}")
                raise InvalidResponseError(f"RPC error: {_error_message(data['error'])}")
            if "result" not in data:
                raise InvalidResponseError("missing result")
            return data["result"]

        raise NetworkError("max retries exceeded")


def _retry_delay(attempt: int) -> float:
    return RETRY_DELAYS[min(attempt, len(RETRY_DELAYS) - 1)]


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        return str(error.get("message", error))
    return str(error)
