"""hyphen config library."""

from .env import EnvOptions, load_env
from .exceptions import ConfigError, ConfigErrorCodes
from .loader import load
from .merger import deep_merge
from .models import (
    ContextSection,
    HyphenSettings,
    LinkSection,
    LogSection,
    NetInfoSection,
    ToggleSection,
    UserSection,
)

__all__ = [
    "ConfigError",
    "ConfigErrorCodes",
    "ContextSection",
    "EnvOptions",
    "HyphenSettings",
    "LinkSection",
    "LogSection",
    "NetInfoSection",
    "ToggleSection",
    "UserSection",
    "deep_merge",
    "load",
    "load_env",
]
