"""Read-only client for the PRIDE Archive REST web service."""

from pridews.errors import ParseError, PrideWsError, TransportError
from pridews.models import (
    AssayDetail,
    AssayDetailList,
    FileDetail,
    FileDetailList,
    ProjectDetail,
    ProjectSummary,
    ProjectSummaryList,
)
from pridews.services import ArchiveClient, HttpTransport, Transport
from pridews.settings import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    "ArchiveClient",
    "AssayDetail",
    "AssayDetailList",
    "FileDetail",
    "FileDetailList",
    "HttpTransport",
    "ParseError",
    "PrideWsError",
    "ProjectDetail",
    "ProjectSummary",
    "ProjectSummaryList",
    "Settings",
    "Transport",
    "TransportError",
    "get_settings",
]
