from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict


P = TypeVar("P")


__all__ = (
    "Action",
)


class Action(BaseModel, Generic[P]):
    """Immutable tagged description of a state transition."""

    model_config = ConfigDict(frozen=True)

    type: str
    payload: Optional[P] = None
