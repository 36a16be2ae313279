import inspect
from dataclasses import fields
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from ._request_spec import RequestParams

SecurityWorkerResult = Union[RequestParams, Mapping[str, Any], None]
SecurityWorker = Callable[
    [Any], Union[SecurityWorkerResult, Awaitable[SecurityWorkerResult]]
]


def merge_request_params(
    base: RequestParams,
    override: RequestParams,
    security: Optional[RequestParams] = None,
) -> RequestParams:
    """Merge request params layers into the effective params.

    Precedence is ``security`` > ``override`` > ``base``: the last layer that
    sets a field wins. ``headers`` is the exception, it is the union of all
    three layers with later layers replacing same-named keys.
    """
    layers = [base, override] + ([security] if security is not None else [])

    merged: dict[str, Any] = {}
    headers: dict[str, str] = {}
    for layer in layers:
        for f in fields(RequestParams):
            value = getattr(layer, f.name)
            if value is None:
                continue
            if f.name == "headers":
                headers.update(value)
            else:
                merged[f.name] = value

    return RequestParams(headers=headers, **merged)


async def resolve_security_params(
    secure: Optional[bool],
    base: RequestParams,
    security_worker: Optional[SecurityWorker],
    security_data: Any,
) -> Optional[RequestParams]:
    """Run the security worker when the call is secure.

    The call's own ``secure`` flag wins over the client default. The worker may
    be sync or async and may return ``None``.
    """
    is_secure = secure if secure is not None else base.secure
    if not is_secure or security_worker is None:
        return None

    result = security_worker(security_data)
    if inspect.isawaitable(result):
        result = await result
    if not result:
        return None
    return RequestParams.from_value(result)
