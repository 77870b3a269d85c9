import logging

from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from ._action import Action
from ._errors import UnsupportedActionError
from ._reducer import Reducer


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "CREATE_INSTANCE",
    "REDUCE_INSTANCE",

    "CreateInstance",
    "InstanceReducer",
    "InstanceState",
    "ReduceInstance",
)


logger = logging.getLogger(__name__)


CREATE_INSTANCE = "createInstance"
REDUCE_INSTANCE = "reduceInstance"


InstanceState = Mapping[str, S]


class CreateInstance(BaseModel, Generic[S]):
    model_config = ConfigDict(frozen=True)

    ref: str
    state: S


class ReduceInstance(BaseModel, Generic[A]):
    model_config = ConfigDict(frozen=True)

    ref: str
    action: A


class InstanceReducer(Generic[S, A]):
    """Lifts a reducer over one state into a reducer over named instances.

    The state managed by :attr:`reducer` is a mapping from instance key to
    that instance's state. Every call returns a new ``dict``; the input
    mapping is never modified, so a changed reference always means a changed
    mapping.

    Reducing a key that was never created hands ``None`` to the delegate.
    Delegates that cannot cope with that must be fed a ``create`` first.
    """

    delegate: Reducer

    def __init__(self, delegate: Reducer) -> None:
        self.delegate = delegate

    def create(self, ref: str, state: S) -> Action[CreateInstance[S]]:
        return Action(
            type=CREATE_INSTANCE,
            payload=CreateInstance(ref=ref, state=state)
        )

    def reduce(self, ref: str, action: A) -> Action[ReduceInstance[A]]:
        return Action(
            type=REDUCE_INSTANCE,
            payload=ReduceInstance(ref=ref, action=action)
        )

    def create_instance(
        self,
        instances: InstanceState[S],
        ref: str,
        state: S
    ) -> dict[str, S]:
        if ref in instances:
            logger.debug("Overwriting instance %r", ref)

        return {**instances, ref: state}

    def reduce_instance(
        self,
        instances: InstanceState[S],
        ref: str,
        action: A
    ) -> dict[str, S]:
        previous: Optional[S] = instances.get(ref)

        return {**instances, ref: self.delegate(previous, action)}

    def reducer(
        self,
        instances: InstanceState[S],
        action: Action[Any]
    ) -> dict[str, S]:
        if action.type == CREATE_INSTANCE:
            return self.create_instance(
                instances,
                action.payload.ref,
                action.payload.state
            )

        if action.type == REDUCE_INSTANCE:
            return self.reduce_instance(
                instances,
                action.payload.ref,
                action.payload.action
            )

        raise UnsupportedActionError(action)
