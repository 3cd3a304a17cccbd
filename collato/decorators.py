"""
Descriptors for exposing collator state as attributes.
"""

from collato.exceptions import ReceiverTypeMismatch, UninitializedCollator
from collato.state import CollatorState

from typing import Any, Callable, cast, Generic, Optional, Type, TypeVar


T = TypeVar("T")


def state_of(obj: Any, name: str) -> CollatorState:
    """
    The state behind a collator, for use in its accessors. A receiver
    whose class declares `_state` but never got one was allocated
    without running `__init__`.
    """
    state = getattr(obj, "_state", None)
    if state is None and "_state" in dir(type(obj)):
        raise UninitializedCollator(
            "{}() called on an uninitialized collator".format(name))
    if not isinstance(state, CollatorState):
        raise ReceiverTypeMismatch(
            "'{}' requires a Collator, not {}".format(
                name, type(obj).__name__))
    return state


class stateproperty(Generic[T]):
    """
    A read-only property computed from the `CollatorState` of the object
    it is read through. Reading it on the class returns the descriptor;
    reading it through anything that does not carry a state raises
    `ReceiverTypeMismatch`, or `UninitializedCollator` when the class
    declares a state the instance never received.
    """

    def __init__(self, func: Callable[[CollatorState], T]) -> None:
        if not callable(func):
            raise ValueError("`stateproperty` called on non-callable")
        self.func = func
        self.__doc__ = func.__doc__

    def __set_name__(self, owner: Type[Any], name: str) -> None:
        self.name = name

    def __get__(
            self, obj: Any,
            objtype: Optional[Type[Any]] = None) -> Any:
        if obj is None:
            return self
        name = getattr(self, "name", self.func.__name__)
        return cast(T, self.func(state_of(obj, name)))

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError("Collator attributes are read-only.")


__all__ = ["stateproperty", "state_of"]
