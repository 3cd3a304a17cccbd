"""
The boundary to whatever actually knows how to order two strings. The
default engine is PyICU (see `collato.icu_engine`), but anything with the
`CollationEngine` methods can be plugged into a collator through its
`engine_factory` argument.
"""

from typing import Callable
from typing_extensions import Protocol, TypeAlias


PRIMARY = 0
SECONDARY = 1
TERTIARY = 2

CANONICAL = "canonical"


class CollationEngine(Protocol):

    def set_strength(self, strength: int) -> None: ...

    def set_decomposition(self, mode: str) -> None: ...

    def supports_alternate_handling(self) -> bool: ...

    def set_alternate_handling_shifted(self, shifted: bool) -> None: ...

    def compare(self, one: str, two: str) -> int: ...


EngineFactory: TypeAlias = Callable[[str], CollationEngine]


def default_engine_factory() -> EngineFactory:
    """ The PyICU engine. Imported here so PyICU stays optional. """
    from collato.icu_engine import IcuEngine
    return IcuEngine


__all__ = [
    "PRIMARY",
    "SECONDARY",
    "TERTIARY",
    "CANONICAL",
    "CollationEngine",
    "EngineFactory",
    "default_engine_factory",
]
