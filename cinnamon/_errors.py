from typing import Any


__all__ = (
    "ActionError",
    "InvalidStateError",
    "StoreError",
    "UnknownActionError",
    "UnsupportedActionError",
)


class StoreError(Exception):
    pass


class InvalidStateError(StoreError):
    pass


class ActionError(StoreError):
    def __init__(self, action: Any, message: str) -> None:
        super().__init__(message)

        self.action = action


class UnknownActionError(ActionError):
    def __init__(self, action: Any) -> None:
        super().__init__(
            action,
            f"unknown action: {getattr(action, 'type', action)!r}"
        )


class UnsupportedActionError(ActionError):
    def __init__(self, action: Any) -> None:
        super().__init__(
            action,
            f"action not supported: {getattr(action, 'type', action)!r}"
        )
