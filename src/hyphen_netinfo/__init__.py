"""hyphen netinfo library."""

from .client import NetInfoClient
from .exceptions import NetInfoError, NetInfoErrorCodes
from .http_client import HttpNetInfoClient
from .models import DEFAULT_BASE_URI, IPInfo, IPInfoError, Location, NetInfoConfig

__all__ = [
    "DEFAULT_BASE_URI",
    "HttpNetInfoClient",
    "IPInfo",
    "IPInfoError",
    "Location",
    "NetInfoClient",
    "NetInfoConfig",
    "NetInfoError",
    "NetInfoErrorCodes",
]
