from dataclasses import dataclass
from typing import Any, Awaitable, Optional, Protocol, Union

from httpx import AsyncClient, Response

from ._utils import AbortSignal, FormData
from ._utils._body import dump_json
from ._utils.constants import DEFAULT_REDIRECT


@dataclass
class FetchOptions:
    """Everything the transport needs besides the URL."""

    method: str = "GET"
    headers: Optional[dict[str, str]] = None
    body: Any = None
    signal: Optional[AbortSignal] = None
    credentials: Optional[str] = None
    redirect: Optional[str] = None
    referrer_policy: Optional[str] = None
    timeout: Union[int, float, None] = None
    extensions: Optional[dict[str, Any]] = None


class Fetch(Protocol):
    def __call__(self, url: str, options: FetchOptions) -> Awaitable[Response]: ...


class HttpxTransport:
    """Default transport backed by ``httpx.AsyncClient``.

    ``credentials`` and ``referrer_policy`` are browser policies with no httpx
    equivalent and are ignored here.
    """

    def __init__(self, client: Optional[AsyncClient] = None) -> None:
        self._client = client or AsyncClient()

    async def __call__(self, url: str, options: FetchOptions) -> Response:
        kwargs: dict[str, Any] = {
            "headers": options.headers or {},
            "follow_redirects": (options.redirect or DEFAULT_REDIRECT) == "follow",
        }
        if options.timeout is not None:
            kwargs["timeout"] = options.timeout
        if options.extensions:
            kwargs["extensions"] = options.extensions

        body = options.body
        if isinstance(body, FormData):
            kwargs["files"] = body.to_httpx_files()
        elif isinstance(body, (bool, int, float)):
            kwargs["content"] = dump_json(body)
        elif isinstance(body, bytearray):
            kwargs["content"] = bytes(body)
        elif body is not None:
            kwargs["content"] = body

        return await self._client.request(options.method, url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()
