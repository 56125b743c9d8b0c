"""Exceptions raised by the PRIDE Archive client."""

from __future__ import annotations


class PrideWsError(Exception):
    """Base class for every failure surfaced by the client."""


class TransportError(PrideWsError):
    """The HTTP exchange failed: non-200 status or network-level error."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.cause = cause


class ParseError(PrideWsError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, message: str, *, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text
