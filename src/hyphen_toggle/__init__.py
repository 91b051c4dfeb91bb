"""hyphen toggle library."""

from .client import ErrorHandler, ToggleClient
from .config import DEFAULT_ENVIRONMENT, ResolvedToggleConfig, ToggleConfig
from .context import build_evaluation_request
from .exceptions import AllEndpointsFailedError, ToggleError, ToggleErrorCodes
from .http_client import HttpToggleClient
from .keys import (
    DEFAULT_HORIZON_URL,
    PUBLIC_KEY_PREFIX,
    get_horizon_urls,
    get_org_id_from_public_key,
)
from .memory import InMemoryToggleClient
from .models import (
    Evaluation,
    EvaluationResponse,
    ToggleContext,
    ToggleEvaluationRequest,
    ToggleUser,
)
from .targeting import generate_targeting_key, resolve_targeting_key

__all__ = [
    "AllEndpointsFailedError",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_HORIZON_URL",
    "ErrorHandler",
    "Evaluation",
    "EvaluationResponse",
    "HttpToggleClient",
    "InMemoryToggleClient",
    "PUBLIC_KEY_PREFIX",
    "ResolvedToggleConfig",
    "ToggleClient",
    "ToggleConfig",
    "ToggleContext",
    "ToggleError",
    "ToggleErrorCodes",
    "ToggleEvaluationRequest",
    "ToggleUser",
    "build_evaluation_request",
    "generate_targeting_key",
    "get_horizon_urls",
    "get_org_id_from_public_key",
    "resolve_targeting_key",
]
