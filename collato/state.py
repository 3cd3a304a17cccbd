"""
The per-collator state and the comparators built on top of it.

A state is filled in once by `collato.options.resolve` and is not changed
afterwards, apart from the comparator cache. Comparators are created on
first use, at most once per mode, and the same callable is handed out on
every later request so that `collator.compare is collator.compare` holds.
"""

import threading

from collato.constants import DEFAULT_COLLATION, FALSE, SORT, VARIANT
from collato.engine import CollationEngine
from collato.exceptions import UninitializedCollator
from collato.helpers import check_none, Comparator
from collato.normalizer import strip_accents

from typing import Dict, Optional


STANDARD = "standard"
CASE_SENSITIVE = "case-sensitive"
COMPARATOR_MODES = (STANDARD, CASE_SENSITIVE)


class CollatorState(object):
    """ Everything a collator knows after negotiation and resolution. """

    locale = None  # type: Optional[str]
    usage = SORT  # type: str
    sensitivity = VARIANT  # type: str
    collation = DEFAULT_COLLATION  # type: str
    numeric = False  # type: bool
    case_first = FALSE  # type: str
    ignore_punctuation = False  # type: bool
    engine = None  # type: Optional[CollationEngine]

    def __init__(
            self,
            locale: Optional[str] = None,
            usage: str = SORT,
            sensitivity: str = VARIANT,
            collation: str = DEFAULT_COLLATION,
            numeric: bool = False,
            case_first: str = FALSE,
            ignore_punctuation: bool = False,
            engine: Optional[CollationEngine] = None) -> None:
        self.locale = locale
        self.usage = usage
        self.sensitivity = sensitivity
        self.collation = collation
        self.numeric = numeric
        self.case_first = case_first
        self.ignore_punctuation = ignore_punctuation
        self.engine = engine
        self._comparators = {}  # type: Dict[str, Comparator]
        self._comparators_lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self.engine is not None

    def __repr__(self) -> str:
        return "<CollatorState locale:{} usage:{} sensitivity:{}>".format(
            self.locale, self.usage, self.sensitivity)


def _require_engine(state: CollatorState, operation: str) -> CollationEngine:
    if not state.initialized:
        raise UninitializedCollator(
            "{}() called on an uninitialized collator".format(operation))
    return check_none(state.engine)


def compare(state: CollatorState, one: str, two: str) -> int:
    """ Three-way comparison under the state's engine settings. """
    return _require_engine(state, "compare").compare(one, two)


def case_sensitive_compare(state: CollatorState, one: str, two: str) -> int:
    """ Like `compare`, but accents are stripped from both sides first. """
    engine = _require_engine(state, "compare")
    return engine.compare(
        check_none(strip_accents(one)), check_none(strip_accents(two)))


def _build_comparator(state: CollatorState, mode: str) -> Comparator:
    if mode == CASE_SENSITIVE:
        def case_sensitive_comparator(one: str, two: str) -> int:
            return case_sensitive_compare(state, one, two)
        return case_sensitive_comparator

    def comparator(one: str, two: str) -> int:
        return compare(state, one, two)
    return comparator


def get_comparator(state: CollatorState, mode: str = STANDARD) -> Comparator:
    """
    Returns the comparator for `mode`, building it on first use. The
    lookup outside the lock is safe because a comparator is only stored
    once it is complete.
    """
    if mode not in COMPARATOR_MODES:
        raise ValueError("Unknown comparator mode {}".format(mode))
    _require_engine(state, "compare")
    comparator = state._comparators.get(mode)
    if comparator is not None:
        return comparator
    with state._comparators_lock:
        comparator = state._comparators.get(mode)
        if comparator is None:
            comparator = _build_comparator(state, mode)
            state._comparators[mode] = comparator
    return comparator


__all__ = [
    "CollatorState",
    "STANDARD",
    "CASE_SENSITIVE",
    "compare",
    "case_sensitive_compare",
    "get_comparator",
]
