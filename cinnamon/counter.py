"""Counter actions and reducer over ``int`` state."""

from typing import Any

from ._action import Action
from ._reducer import create_reducer


__all__ = (
    "ADD",
    "INC",

    "add",
    "inc",
    "reducer",
)


INC = "inc"
ADD = "add"


def inc() -> Action[None]:
    return Action(type=INC)


def add(amount: int) -> Action[int]:
    return Action(type=ADD, payload=amount)


def _inc(state: int, action: Action[Any]) -> int:
    return state + 1


def _add(state: int, action: Action[Any]) -> int:
    return state + action.payload


reducer = create_reducer({INC: _inc, ADD: _add})
