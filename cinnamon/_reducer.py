import logging

from typing import Any, Callable, Mapping, TypeVar

from ._action import Action
from ._errors import UnknownActionError


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Handler",
    "Reducer",

    "create_reducer",
)


logger = logging.getLogger(__name__)


Reducer = Callable[[S, A], S]
Handler = Callable[[S, Action[Any]], S]


def create_reducer(handlers: Mapping[str, Handler]) -> Reducer:
    """Build a reducer dispatching on ``action.type``.

    Each handler receives the current state and the whole action. A tag
    missing from ``handlers`` raises :class:`UnknownActionError`.
    """
    table = dict(handlers)

    def reducer(state: Any, action: Action[Any]) -> Any:
        handler = table.get(action.type)

        if handler is None:
            logger.debug("No handler for action %r", action.type)

            raise UnknownActionError(action)

        return handler(state, action)

    return reducer
