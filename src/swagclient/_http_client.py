import asyncio
import inspect
from logging import getLogger
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    Mapping,
    Optional,
    TypeVar,
    Union,
)

import httpx
from httpx import Response

from ._config import Config
from ._transport import Fetch, FetchOptions, HttpxTransport
from ._utils import (
    RESPONSE_FORMATS,
    AbortSignal,
    CancellationRegistry,
    CancelToken,
    ContentType,
    RequestParams,
    RequestSpec,
    ResponseFormat,
    SecurityWorker,
    add_query_params,
    encode_body,
    merge_request_params,
    resolve_security_params,
    resolve_signal,
    setup_logging,
)
from ._utils.constants import (
    DEFAULT_CREDENTIALS,
    DEFAULT_REDIRECT,
    DEFAULT_REFERRER_POLICY,
    HEADER_CONTENT_TYPE,
    LOGGER_NAME,
)
from .models import (
    HttpResponse,
    HttpResponseError,
    RequestAbortedError,
    TransportError,
)

SecurityDataType = TypeVar("SecurityDataType")
T = TypeVar("T")


def _read_json(response: Response) -> Any:
    return response.json()


def _read_text(response: Response) -> Any:
    return response.text


def _read_bytes(response: Response) -> Any:
    return response.content


RESPONSE_PARSERS: dict[str, Callable[[Response], Any]] = {
    "json": _read_json,
    "text": _read_text,
    "blob": _read_bytes,
    "bytes": _read_bytes,
    "array_buffer": _read_bytes,
}

# failures raised while reading or decoding a response body
PARSE_ERRORS = (ValueError, httpx.HTTPError, httpx.StreamError)


class HttpClient(Generic[SecurityDataType]):
    """Generic client behind the generated endpoint methods.

    Each call to :meth:`request` merges the client's base params, the call's
    own params and whatever the security worker returns, encodes the query and
    body, sends the request through the transport and wraps the result in an
    :class:`HttpResponse` envelope.

    Requests issued with the same ``cancel_token`` share one abort signal, so
    :meth:`abort_request` cancels all of them at once.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        base_api_params: Union[RequestParams, Mapping[str, Any], None] = None,
        security_worker: Optional[SecurityWorker] = None,
        custom_fetch: Optional[Fetch] = None,
        debug: bool = False,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = Config.from_env(base_url)

        self.base_api_params = merge_request_params(
            RequestParams(
                credentials=DEFAULT_CREDENTIALS,
                headers={},
                redirect=DEFAULT_REDIRECT,
                referrer_policy=DEFAULT_REFERRER_POLICY,
            ),
            RequestParams.from_value(base_api_params),
        )
        self.security_worker = security_worker
        self._security_data: Optional[SecurityDataType] = None
        self._cancellations = CancellationRegistry()

        self._transport: Optional[HttpxTransport] = None
        if custom_fetch is None:
            self._transport = HttpxTransport()
            custom_fetch = self._transport
        self._fetch: Fetch = custom_fetch

        if debug:
            setup_logging(debug)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._config = Config(base_url=value)

    @property
    def security_data(self) -> Optional[SecurityDataType]:
        return self._security_data

    def set_security_data(self, data: Optional[SecurityDataType]) -> None:
        """Replace the value handed to the security worker.

        Calls that have not yet composed their request observe the new value.
        """
        self._security_data = data

    def abort_request(self, cancel_token: CancelToken, reason: Any = None) -> None:
        """Abort every in-flight request issued with ``cancel_token``."""
        self._logger.debug(f"Aborting requests for cancel token {cancel_token!r}")
        self._cancellations.abort(cancel_token, reason)

    async def request(
        self,
        spec: RequestSpec,
        params: Union[RequestParams, Mapping[str, Any], None] = None,
    ) -> HttpResponse[Any, Any]:
        """Send one request and classify its response.

        Args:
            spec: The request description. ``params`` are overlaid on it first.
            params: Extra per-call params, as passed to an endpoint method.

        Returns:
            HttpResponse: The envelope. ``data`` holds the parsed body when a
                response format was requested and parsing succeeded.

        Raises:
            HttpResponseError: The server answered with a non-2xx status; the
                envelope is available as ``error.response``.
            RequestAbortedError: The request's abort signal fired.
            TransportError: The transport failed to deliver the request.
        """
        if params is not None:
            spec = spec.with_params(params)

        security_params = await resolve_security_params(
            spec.secure,
            self.base_api_params,
            self.security_worker,
            self._security_data,
        )
        request_params = merge_request_params(
            self.base_api_params, spec.to_params(), security_params
        )

        response_format = spec.response_format or request_params.response_format
        if response_format is not None and response_format not in RESPONSE_FORMATS:
            raise ValueError(
                f"Unsupported response format {response_format!r}, "
                f"expected one of {', '.join(RESPONSE_FORMATS)}"
            )

        base_url = spec.base_url or self.base_url or ""
        url = f"{base_url}{spec.path}{add_query_params(spec.query)}"
        headers = dict(request_params.headers or {})
        if spec.content_type and spec.content_type != ContentType.FORM_DATA:
            headers[HEADER_CONTENT_TYPE] = ContentType(spec.content_type).value

        body = None
        if spec.body is not None:
            body = encode_body(spec.content_type, spec.body)

        cancel_token = spec.cancel_token
        signal = resolve_signal(
            self._cancellations, cancel_token, request_params.signal
        )
        options = FetchOptions(
            method=request_params.method or "GET",
            headers=headers,
            body=body,
            signal=signal,
            credentials=request_params.credentials,
            redirect=request_params.redirect,
            referrer_policy=request_params.referrer_policy,
            timeout=request_params.timeout,
            extensions=request_params.extensions,
        )

        self._logger.debug(f"Request: {options.method} {url}")
        try:
            response = await self._send(url, options)
            result = await self._classify(response, response_format, signal)
        except RequestAbortedError:
            self._logger.debug(f"Request aborted: {options.method} {url}")
            raise
        finally:
            if cancel_token is not None:
                self._cancellations.release(cancel_token, signal)

        self._logger.debug(
            f"Response: {options.method} {url} -> {response.status_code}"
        )
        if not result.ok:
            raise HttpResponseError(result)
        return result

    async def _send(self, url: str, options: FetchOptions) -> Response:
        try:
            return await self._until_aborted(
                self._fetch(url, options), options.signal
            )
        except httpx.RequestError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

    async def _until_aborted(
        self, awaitable: Awaitable[T], signal: Optional[AbortSignal]
    ) -> T:
        """Await ``awaitable``, cancelling it if ``signal`` fires first."""
        if signal is None:
            return await awaitable

        if signal.aborted:
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            signal.throw_if_aborted()

        work_task = asyncio.ensure_future(awaitable)
        abort_task = asyncio.ensure_future(signal.wait())
        try:
            await asyncio.wait(
                {work_task, abort_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (work_task, abort_task):
                if not task.done():
                    task.cancel()

        if work_task.done() and not work_task.cancelled():
            return work_task.result()

        await asyncio.gather(work_task, return_exceptions=True)
        raise RequestAbortedError(reason=signal.reason)

    async def _classify(
        self,
        response: Response,
        response_format: Optional[ResponseFormat],
        signal: Optional[AbortSignal] = None,
    ) -> HttpResponse[Any, Any]:
        result: HttpResponse[Any, Any] = HttpResponse(raw_response=response)
        if response_format is None:
            return result

        # the body is buffered on the response, so the caller can read it again
        try:
            await self._until_aborted(response.aread(), signal)
            parsed = RESPONSE_PARSERS[response_format](response)
        except RequestAbortedError:
            await response.aclose()
            raise
        except PARSE_ERRORS as e:
            self._logger.debug(f"Failed to parse {response_format} response: {e}")
            result.error = e
            return result

        if result.ok:
            result.data = parsed
        else:
            result.error = parsed
        return result

    async def aclose(self) -> None:
        if self._transport is not None:
            await self._transport.aclose()

    async def __aenter__(self) -> "HttpClient[SecurityDataType]":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
