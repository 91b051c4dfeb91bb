"""Hyphen SDK: Toggle (feature flags), NetInfo (IP geolocation), Link (URL shortening)."""

from hyphen_config import EnvOptions, HyphenSettings, load, load_env
from hyphen_link import (
    CreateQRCodeOptions,
    CreateShortCodeOptions,
    GetCodeStatsResponse,
    GetQRCodesResponse,
    GetShortCodesResponse,
    HttpLinkClient,
    LinkConfig,
    LinkError,
    QRCodeResponse,
    QRSize,
    ShortCodeResponse,
    UpdateShortCodeOptions,
)
from hyphen_netinfo import HttpNetInfoClient, IPInfo, IPInfoError, NetInfoConfig, NetInfoError
from hyphen_telemetry import new_logger
from hyphen_toggle import (
    AllEndpointsFailedError,
    HttpToggleClient,
    ToggleConfig,
    ToggleContext,
    ToggleError,
    ToggleUser,
)

from .client import Hyphen

__all__ = [
    "AllEndpointsFailedError",
    "CreateQRCodeOptions",
    "CreateShortCodeOptions",
    "EnvOptions",
    "GetCodeStatsResponse",
    "GetQRCodesResponse",
    "GetShortCodesResponse",
    "HttpLinkClient",
    "HttpNetInfoClient",
    "HttpToggleClient",
    "Hyphen",
    "HyphenSettings",
    "IPInfo",
    "IPInfoError",
    "LinkConfig",
    "LinkError",
    "NetInfoConfig",
    "NetInfoError",
    "QRCodeResponse",
    "QRSize",
    "ShortCodeResponse",
    "ToggleConfig",
    "ToggleContext",
    "ToggleError",
    "ToggleUser",
    "UpdateShortCodeOptions",
    "load",
    "load_env",
    "new_logger",
]
