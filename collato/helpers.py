from typing import Callable, Optional, TypeVar
from typing_extensions import TypeAlias


T = TypeVar("T")
Comparator: TypeAlias = Callable[[str, str], int]


def check_none(value: Optional[T]) -> T:
    if value is None:
        raise ValueError("Value is unexpectedly None.")
    return value
