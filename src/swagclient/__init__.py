"""Generic HTTP client core for generated API endpoint methods."""

from ._config import Config
from ._http_client import HttpClient
from ._transport import Fetch, FetchOptions, HttpxTransport
from ._utils import (
    AbortController,
    AbortSignal,
    CancellationRegistry,
    ContentType,
    FormData,
    RequestParams,
    RequestSpec,
    ResponseFormat,
    setup_logging,
)
from .models import (
    HttpResponse,
    HttpResponseError,
    RequestAbortedError,
    SwagClientError,
    TransportError,
)

__all__ = [
    "AbortController",
    "AbortSignal",
    "CancellationRegistry",
    "Config",
    "ContentType",
    "Fetch",
    "FetchOptions",
    "FormData",
    "HttpClient",
    "HttpResponse",
    "HttpResponseError",
    "HttpxTransport",
    "RequestAbortedError",
    "RequestParams",
    "RequestSpec",
    "ResponseFormat",
    "SwagClientError",
    "TransportError",
    "setup_logging",
]
