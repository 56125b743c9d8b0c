"""HTTP transport: one GET per call, body returned as text."""

from __future__ import annotations

from types import TracebackType
from typing import Protocol

import httpx
import structlog

from pridews.errors import TransportError
from pridews.settings import Settings

logger = structlog.get_logger(__name__)

JSON_HEADERS = {"Accept": "application/json"}


class Transport(Protocol):
    """Protocol for components that perform a single GET and return the body."""

    def fetch(self, url: str) -> str:
        ...


class HttpTransport:
    """Issues GET requests through an ``httpx.Client``.

    A client passed in by the caller is left open; one created here is closed by
    :meth:`close` or on leaving the ``with`` block.
    """

    def __init__(self, settings: Settings, client: httpx.Client | None = None) -> None:
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=settings.timeout)

    def fetch(self, url: str) -> str:
        try:
            with self._client.stream(
                "GET", url, headers=JSON_HEADERS, timeout=self._settings.timeout
            ) as response:
                if response.status_code != 200:
                    logger.warning("transport.status_error", url=url, status=response.status_code)
                    raise TransportError(
                        f"Failed : HTTP error code : {response.status_code}",
                        status_code=response.status_code,
                        url=url,
                    )
                response.read()
                return response.text
        except httpx.HTTPError as exc:
            logger.warning("transport.network_error", url=url, error=str(exc))
            raise TransportError(f"Request to {url} failed: {exc}", url=url, cause=exc) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
