from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from httpx import Headers, Response

T = TypeVar("T")
E = TypeVar("E")


@dataclass
class HttpResponse(Generic[T, E]):
    """Envelope around a transport response.

    Once parsing completes exactly one of ``data`` or ``error`` is populated.
    When no response format was requested both stay ``None`` and the caller
    reads the raw response directly. Attributes not defined here are looked
    up on ``raw_response``.
    """

    raw_response: Response
    data: Optional[T] = None
    error: Optional[E] = None

    @property
    def ok(self) -> bool:
        return self.raw_response.is_success

    @property
    def status_code(self) -> int:
        return self.raw_response.status_code

    @property
    def headers(self) -> Headers:
        return self.raw_response.headers

    def __getattr__(self, name: str) -> Any:
        if name == "raw_response":
            raise AttributeError(name)
        return getattr(self.raw_response, name)
