from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .response import HttpResponse


class SwagClientError(Exception):
    """Base class for errors raised by the client."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TransportError(SwagClientError):
    """The transport call itself failed (network failure, abort).

    Raised directly to the caller, never wrapped in a response envelope.
    """


class RequestAbortedError(TransportError):
    def __init__(self, message: str = "The request was aborted.", reason: Any = None):
        self.reason = reason
        super().__init__(message)


class HttpResponseError(SwagClientError):
    """Raised when the server answered with a non-2xx status.

    The classified envelope is kept on ``response``; when a response format was
    requested its ``error`` field holds the parsed error body.
    """

    def __init__(self, response: "HttpResponse[Any, Any]") -> None:
        self.response = response
        self.status_code = response.status_code
        super().__init__(self._build_message(response))

    @staticmethod
    def _build_message(response: "HttpResponse[Any, Any]") -> str:
        raw = response.raw_response
        message: Optional[str] = None
        if isinstance(response.error, dict):
            message = (
                response.error.get("message")
                or response.error.get("error")
                or response.error.get("detail")
            )
        elif isinstance(response.error, str) and response.error:
            message = response.error

        prefix = f"{raw.status_code} {raw.reason_phrase}"
        try:
            prefix = f"{prefix} for {raw.request.method} {raw.request.url}"
        except RuntimeError:
            # response built without a request, e.g. by a custom transport
            pass
        return f"{prefix}: {message}" if message else prefix
