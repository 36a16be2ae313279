from ._body import ContentType, FormData, encode_body
from ._cancellation import (
    AbortController,
    AbortSignal,
    CancellationRegistry,
    CancelToken,
    resolve_signal,
)
from ._logs import setup_logging
from ._query import add_query_params, to_query_string
from ._request_override import (
    SecurityWorker,
    merge_request_params,
    resolve_security_params,
)
from ._request_spec import RESPONSE_FORMATS, RequestParams, RequestSpec, ResponseFormat

__all__ = [
    "AbortController",
    "AbortSignal",
    "CancelToken",
    "CancellationRegistry",
    "ContentType",
    "FormData",
    "RESPONSE_FORMATS",
    "RequestParams",
    "RequestSpec",
    "ResponseFormat",
    "SecurityWorker",
    "add_query_params",
    "encode_body",
    "merge_request_params",
    "resolve_security_params",
    "resolve_signal",
    "setup_logging",
    "to_query_string",
]
