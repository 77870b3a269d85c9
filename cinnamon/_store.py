import logging

from collections import deque
from typing import Callable, Generic, TypeVar

from ._reducer import Reducer


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Listener",
    "Store",
    "Unsubscribe",
)


logger = logging.getLogger(__name__)


Listener = Callable[[S], None]
Unsubscribe = Callable[[], None]


class Store(Generic[S, A]):
    """Observable holder of one state value and the reducer governing it.

    ``publish`` applies the reducer and notifies listeners synchronously.
    A ``publish`` issued by a listener while a notification cycle is running
    is queued and applied once that cycle has finished, in FIFO order.
    """

    _state: S
    _reducer: Reducer

    _listeners: dict[Listener, None]

    _notify_unchanged: bool
    _notifying: bool
    _draining: bool
    _pending: deque[A]

    def __init__(
        self,
        state: S,
        reducer: Reducer,
        *,
        notify_unchanged: bool = False
    ) -> None:
        self._state = state
        self._reducer = reducer

        self._listeners = {}

        self._notify_unchanged = notify_unchanged
        self._notifying = False
        self._draining = False
        self._pending = deque()

    @property
    def state(self) -> S:
        return self._state

    @property
    def reducer(self) -> Reducer:
        return self._reducer

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    def replace_reducer(self, reducer: Reducer) -> None:
        self._reducer = reducer

    def _apply(self, action: A) -> None:
        previous_state = self._state

        try:
            next_state = self._reducer(previous_state, action)
        except Exception:
            logger.debug("Reducer failed on %r", action, exc_info=True)

            raise

        self._state = next_state

        if next_state is previous_state and not self._notify_unchanged:
            logger.debug("State unchanged by %r, skipping notify", action)

            return

        self.notify()

    def _drain(self) -> None:
        self._draining = True

        try:
            while self._pending:
                self._apply(self._pending.popleft())
        except Exception:
            self._pending.clear()

            raise
        finally:
            self._draining = False

    def publish(self, action: A) -> S:
        if self._notifying:
            logger.debug("Queueing re-entrant publish of %r", action)
            self._pending.append(action)

            return self._state

        logger.debug("Publishing %r", action)

        self._apply(action)

        return self._state

    def notify(self) -> None:
        listeners = tuple(self._listeners)
        state = self._state

        logger.debug("Notifying %d listener(s) with %r", len(listeners), state)

        notifying = self._notifying
        self._notifying = True

        try:
            for listener in listeners:
                listener(state)
        except Exception:
            self._pending.clear()

            raise
        finally:
            self._notifying = notifying

        if not notifying and not self._draining:
            self._drain()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        if listener not in self._listeners:
            logger.debug("Subscribing %r", listener)
            self._listeners[listener] = None

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            logger.debug("Unsubscribing %r", listener)
            del self._listeners[listener]
