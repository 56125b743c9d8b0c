"""Service abstractions for the PRIDE Archive client."""

from .client import ArchiveClient
from .transport import HttpTransport, Transport

__all__ = [
    "ArchiveClient",
    "HttpTransport",
    "Transport",
]
