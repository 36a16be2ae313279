from .errors import (
    HttpResponseError,
    RequestAbortedError,
    SwagClientError,
    TransportError,
)
from .response import HttpResponse

__all__ = [
    "HttpResponse",
    "HttpResponseError",
    "RequestAbortedError",
    "SwagClientError",
    "TransportError",
]
