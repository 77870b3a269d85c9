from __future__ import annotations

import logging

from typing import Any, Callable, Generic, Optional, TypeVar

from ._errors import InvalidStateError
from ._store import Listener, Store


A = TypeVar("A")
P = TypeVar("P")
S = TypeVar("S")
V = TypeVar("V")


__all__ = (
    "Connected",
    "Publish",
    "Render",
    "RenderCallback",

    "connect",
)


logger = logging.getLogger(__name__)


Publish = Callable[[A], S]
Render = Callable[[P, S, Publish], V]
RenderCallback = Callable[[V], None]


class Connected(Generic[P, S, A, V]):
    """A view bound to a store for as long as it is active.

    The host view layer calls :meth:`activate` when the view is mounted and
    :meth:`deactivate` once when it is torn down. In between, every store
    notification re-runs ``render`` with the new state.
    """

    _store: Store[S, A]
    _render: Render
    _on_render: Optional[RenderCallback]

    _listener: Optional[Listener]
    _state: Optional[S]
    _output: Optional[V]

    def __init__(
        self,
        store: Store[S, A],
        render: Render,
        props: Optional[P] = None,
        on_render: Optional[RenderCallback] = None
    ) -> None:
        self.props = props

        self._store = store
        self._render = render
        self._on_render = on_render

        self._listener = None
        self._state = None
        self._output = None

    @property
    def active(self) -> bool:
        return self._listener is not None

    @property
    def state(self) -> Optional[S]:
        return self._state

    @property
    def output(self) -> Optional[V]:
        return self._output

    def _update(self, state: S) -> None:
        self._state = state
        self._output = self._render(self.props, state, self._store.publish)

        if self._on_render is not None:
            self._on_render(self._output)

    def activate(self) -> None:
        if self.active:
            raise InvalidStateError("already active")

        def listener(state: S) -> None:
            # a running notify cycle may still hold a deactivated listener
            if self._listener is not listener:
                return

            self._update(state)

        state = self._store.state

        # render may publish; settle on the latest state before subscribing
        while True:
            self._update(state)

            if self._store.state is state:
                break

            state = self._store.state

        self._listener = listener
        self._store.subscribe(listener)

        logger.debug("Activated %r", self)

    def deactivate(self) -> None:
        if self._listener is None:
            raise InvalidStateError("not active")

        self._store.unsubscribe(self._listener)
        self._listener = None

        logger.debug("Deactivated %r", self)

    def __enter__(self) -> Connected[P, S, A, V]:
        self.activate()

        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.deactivate()

    def __repr__(self) -> str:
        return f"<Connected props={self.props!r} active={self.active}>"


def connect(
    store: Store[S, A],
    render: Render,
    props: Optional[P] = None,
    on_render: Optional[RenderCallback] = None
) -> Connected[P, S, A, Any]:
    return Connected(store, render, props, on_render)
