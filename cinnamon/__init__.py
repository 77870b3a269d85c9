from . import counter
from ._action import Action
from ._connect import Connected, Publish, Render, RenderCallback, connect
from ._errors import (
    ActionError,
    InvalidStateError,
    StoreError,
    UnknownActionError,
    UnsupportedActionError
)
from ._instance import (
    CREATE_INSTANCE,
    REDUCE_INSTANCE,
    CreateInstance,
    InstanceReducer,
    InstanceState,
    ReduceInstance
)
from ._reducer import Handler, Reducer, create_reducer
from ._store import Listener, Store, Unsubscribe


__all__ = (
    "CREATE_INSTANCE",
    "REDUCE_INSTANCE",

    "Action",
    "ActionError",
    "Connected",
    "CreateInstance",
    "Handler",
    "InstanceReducer",
    "InstanceState",
    "InvalidStateError",
    "Listener",
    "Publish",
    "ReduceInstance",
    "Reducer",
    "Render",
    "RenderCallback",
    "Store",
    "StoreError",
    "UnknownActionError",
    "UnsupportedActionError",
    "Unsubscribe",

    "connect",
    "counter",
    "create_reducer",
)
