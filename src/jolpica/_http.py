"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import json
from typing import Any

import httpx

from jolpica.exceptions import (
    JolpicaAPIError,
    JolpicaConnectionError,
    JolpicaTimeoutError,
    JolpicaValidationError,
)

DEFAULT_TIMEOUT = 30.0

_HEADERS = {"Accept": "application/json", "User-Agent": "jolpica-python"}


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise JolpicaAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()  # type: ignore[no-any-return]
    except json.JSONDecodeError as exc:
        raise JolpicaValidationError(f"Response from {response.url} is not valid JSON: {exc}") from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(timeout=timeout, headers=_HEADERS)

    def get(self, url: str) -> dict[str, Any]:
        """Perform a GET request for an absolute URL and return parsed JSON."""
        try:
            response = self._client.get(url)
        except httpx.TimeoutException as exc:
            raise JolpicaTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise JolpicaConnectionError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, headers=_HEADERS)

    async def get(self, url: str) -> dict[str, Any]:
        """Perform an async GET request for an absolute URL and return parsed JSON."""
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as exc:
            raise JolpicaTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise JolpicaConnectionError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
