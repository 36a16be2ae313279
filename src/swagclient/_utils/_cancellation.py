import asyncio
from typing import Any, Hashable, Optional

from ..models.errors import RequestAbortedError

CancelToken = Hashable


class AbortSignal:
    """Cooperative cancellation flag observed by in-flight requests."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: Any = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()

    def throw_if_aborted(self) -> None:
        if self.aborted:
            raise RequestAbortedError(reason=self.reason)

    def _abort(self, reason: Any) -> None:
        if not self._event.is_set():
            self.reason = reason
            self._event.set()


class AbortController:
    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: Any = None) -> None:
        self.signal._abort(reason)


class CancellationRegistry:
    """Maps cancellation tokens to the abort controller of in-flight requests.

    Every operation is synchronous, so lookup-or-create never interleaves with
    another task. Requests issued with the same token share one controller
    until the entry is aborted or released.
    """

    def __init__(self) -> None:
        self._controllers: dict[CancelToken, AbortController] = {}

    def get_signal(self, token: CancelToken) -> AbortSignal:
        controller = self._controllers.get(token)
        if controller is None:
            controller = AbortController()
            self._controllers[token] = controller
        return controller.signal

    def abort(self, token: CancelToken, reason: Any = None) -> None:
        controller = self._controllers.pop(token, None)
        if controller is not None:
            controller.abort(reason)

    def release(
        self, token: CancelToken, signal: Optional[AbortSignal] = None
    ) -> None:
        """Remove the token's entry.

        With ``signal`` given, the entry is only removed while it still belongs
        to that signal, so a finished request never drops a newer request's
        controller registered under the same token.
        """
        controller = self._controllers.get(token)
        if controller is None:
            return
        if signal is None or controller.signal is signal:
            del self._controllers[token]

    def __contains__(self, token: object) -> bool:
        return token in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)


def resolve_signal(
    registry: CancellationRegistry,
    cancel_token: Optional[CancelToken],
    signal: Optional[AbortSignal],
) -> Optional[AbortSignal]:
    if cancel_token is not None:
        return registry.get_signal(cancel_token)
    return signal
