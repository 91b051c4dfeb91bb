"""hyphen http transport library."""

from .client import HttpClient, create_headers
from .exceptions import HttpClientError, HttpClientErrorCodes
from .models import HttpResponse

__all__ = [
    "HttpClient",
    "HttpClientError",
    "HttpClientErrorCodes",
    "HttpResponse",
    "create_headers",
]
