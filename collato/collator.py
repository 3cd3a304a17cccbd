"""
The collator itself. Construction negotiates a locale, resolves the
options against it and builds the collation engine; after that the
collator is read-only.

Usage example:

from collato import Collator

collator = Collator(["de-DE-u-co-phonebk"], sensitivity="base")
collator.compare("Müller", "Mueller")       # 0
collator.sorted(["Zoë", "zoe", "Zoe"])
collator.resolved_options().collation       # "phonebk"
"""

import functools

import collato
from collato.constants import BEST_FIT, CASE, SORT
from collato.decorators import state_of, stateproperty
from collato.engine import EngineFactory
from collato.exceptions import UninitializedCollator
from collato.helpers import Comparator
from collato.mongo import to_mongo_collation
from collato.negotiator import canonicalize_locale_list, LocaleMatcher
from collato.negotiator import LookupMatcher, negotiate
from collato.options import resolve, validate_options
from collato.state import CASE_SENSITIVE, CollatorState, get_comparator
from collato.state import STANDARD

from pymongo.collation import Collation

from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Union


class ResolvedOptions(NamedTuple):
    locale: str
    usage: str
    sensitivity: str
    ignore_punctuation: bool
    collation: str
    numeric: bool
    case_first: str

    def as_dict(self) -> Dict[str, Any]:
        """ The options keyed the way Intl.Collator reports them. """
        return {
            "locale": self.locale,
            "usage": self.usage,
            "sensitivity": self.sensitivity,
            "ignorePunctuation": self.ignore_punctuation,
            "collation": self.collation,
            "numeric": self.numeric,
            "caseFirst": self.case_first,
        }


def _select_comparator(state: CollatorState) -> Comparator:
    """
    The comparison function bound to this collator. With sensitivity
    "case" accents are stripped before comparing.
    """
    if state.sensitivity == CASE:
        return get_comparator(state, CASE_SENSITIVE)
    return get_comparator(state, STANDARD)


def project(state: CollatorState) -> ResolvedOptions:
    if not state.initialized:
        raise UninitializedCollator(
            "resolved_options() called on an uninitialized collator")
    return ResolvedOptions(
        locale=str(state.locale),
        usage=state.usage,
        sensitivity=state.sensitivity,
        ignore_punctuation=state.ignore_punctuation,
        collation=state.collation,
        numeric=state.numeric,
        case_first=state.case_first)


class Collator(object):
    """
    Locale aware string comparison.

    `locales` is a tag or a list of tags in order of preference; the
    first usable one wins, otherwise the default locale is used. Unicode
    extension keywords in the tag (`kn`, `kf`, `co`) act as defaults for
    `numeric`, `case_first` and `collation`.
    """

    # Overrides collato.DEFAULT_LOCALE for this class when set.
    DEFAULT_LOCALE = None  # type: Optional[str]

    _state = None  # type: Optional[CollatorState]

    def __init__(
            self,
            locales: Union[None, str, Iterable[str]] = None,
            usage: str = SORT,
            sensitivity: Optional[str] = None,
            ignore_punctuation: bool = False,
            numeric: Optional[bool] = None,
            case_first: Optional[str] = None,
            collation: Optional[str] = None,
            locale_matcher: str = BEST_FIT,
            matcher: Optional[LocaleMatcher] = None,
            engine_factory: Optional[EngineFactory] = None) -> None:
        requested = canonicalize_locale_list(locales)
        options = validate_options(
            usage=usage,
            sensitivity=sensitivity,
            ignore_punctuation=ignore_punctuation,
            numeric=numeric,
            case_first=case_first,
            collation=collation,
            locale_matcher=locale_matcher)
        # "lookup" and "best fit" share one matcher.
        negotiation = negotiate(requested, self._default_locale, matcher)
        self._state = resolve(
            options, negotiation.extensions, negotiation.base,
            engine_factory)

    @property
    def _default_locale(self) -> str:
        if self.DEFAULT_LOCALE is not None:
            return self.DEFAULT_LOCALE
        return collato.DEFAULT_LOCALE

    compare = stateproperty(_select_comparator)

    def resolved_options(self) -> ResolvedOptions:
        return project(state_of(self, "resolved_options"))

    def sorted(
            self,
            values: Iterable[str],
            reverse: bool = False) -> List[str]:
        """ Sorts `values` with this collator's compare function. """
        return sorted(
            values, key=functools.cmp_to_key(self.compare), reverse=reverse)

    def to_mongo(self) -> Collation:
        """ A pymongo Collation mirroring the resolved options. """
        return to_mongo_collation(state_of(self, "to_mongo"))

    @classmethod
    def supported_locales_of(
            cls,
            locales: Union[None, str, Iterable[str]],
            matcher: Optional[LookupMatcher] = None) -> List[str]:
        """ The requested locales a collator could actually use. """
        if matcher is None:
            matcher = LookupMatcher()
        return matcher.supported(canonicalize_locale_list(locales))

    def __repr__(self) -> str:
        state = self._state
        if state is None or not state.initialized:
            return "<Collator uninitialized>"
        return "<Collator locale:{} usage:{} sensitivity:{}>".format(
            state.locale, state.usage, state.sensitivity)


__all__ = ["Collator", "ResolvedOptions"]
