"""hyphen link library."""

from .client import LinkClient
from .exceptions import LinkError, LinkErrorCodes
from .http_client import HttpLinkClient, format_rfc3339
from .models import (
    DEFAULT_LINK_URIS,
    ClicksByDay,
    ClicksStats,
    CreateQRCodeOptions,
    CreateShortCodeOptions,
    GetCodeStatsResponse,
    GetQRCodesResponse,
    GetShortCodesResponse,
    LinkConfig,
    OrganizationRef,
    QRCodeResponse,
    QRSize,
    ShortCodeResponse,
    UpdateShortCodeOptions,
)

__all__ = [
    "ClicksByDay",
    "ClicksStats",
    "CreateQRCodeOptions",
    "CreateShortCodeOptions",
    "DEFAULT_LINK_URIS",
    "GetCodeStatsResponse",
    "GetQRCodesResponse",
    "GetShortCodesResponse",
    "HttpLinkClient",
    "LinkClient",
    "LinkConfig",
    "LinkError",
    "LinkErrorCodes",
    "OrganizationRef",
    "QRCodeResponse",
    "QRSize",
    "ShortCodeResponse",
    "UpdateShortCodeOptions",
    "format_rfc3339",
]
