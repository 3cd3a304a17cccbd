"""
Option validation and resolution.

`validate_options` is the strict part: it rejects option values a caller
could not have meant. `resolve` is the lenient part: it merges the
validated options with the keywords found in the locale tag and quietly
falls back to defaults for anything it cannot honour, such as an unknown
collation type or an engine without alternate handling.

For every option an explicit value wins over a locale keyword, which
wins over the default.
"""

import logging
import re

from collato.constants import ACCENT, BASE, BEST_FIT, CASE, CASE_FIRSTS
from collato.constants import COLLATION_TYPES, DEFAULT_COLLATION, FALSE
from collato.constants import LOCALE_MATCHERS, SEARCH, SENSITIVITIES, SORT
from collato.constants import USAGES, VARIANT
from collato.engine import CANONICAL, PRIMARY, SECONDARY, TERTIARY
from collato.engine import default_engine_factory, EngineFactory
from collato.exceptions import InvalidOption
from collato.negotiator import COLLATION_KEY, ExtensionValues
from collato.state import CollatorState
from collato.tags import parse_tag

from typing import Any, Dict, NamedTuple, Optional, Sequence


_COLLATION_TYPE = re.compile(r"^[a-z0-9]{3,8}(?:-[a-z0-9]{3,8})*$")

_STRENGTHS = {
    BASE: PRIMARY,
    ACCENT: SECONDARY,
    CASE: TERTIARY,
    VARIANT: TERTIARY,
}  # type: Dict[str, int]


class CollatorOptions(NamedTuple):
    """ Caller supplied options. None means the caller left it out. """

    usage: str = SORT
    sensitivity: Optional[str] = None
    ignore_punctuation: bool = False
    numeric: Optional[bool] = None
    case_first: Optional[str] = None
    collation: Optional[str] = None
    locale_matcher: str = BEST_FIT


def _check_choice(name: str, value: Any, choices: Sequence[str]) -> None:
    if value not in choices:
        raise InvalidOption(
            "Invalid value {!r} for option '{}', expected one of {}".format(
                value, name, ", ".join(choices)))


def validate_options(
        usage: str = SORT,
        sensitivity: Optional[str] = None,
        ignore_punctuation: Any = False,
        numeric: Optional[bool] = None,
        case_first: Optional[str] = None,
        collation: Optional[str] = None,
        locale_matcher: str = BEST_FIT) -> CollatorOptions:
    _check_choice("usage", usage, USAGES)
    _check_choice("localeMatcher", locale_matcher, LOCALE_MATCHERS)
    if sensitivity is not None:
        _check_choice("sensitivity", sensitivity, SENSITIVITIES)
    if case_first is not None:
        _check_choice("caseFirst", case_first, CASE_FIRSTS)
    if numeric is not None and not isinstance(numeric, bool):
        raise InvalidOption(
            "Option 'numeric' must be a bool, not {}".format(type(numeric)))
    if collation is not None:
        if not isinstance(collation, str) or \
                not _COLLATION_TYPE.match(collation.lower()):
            raise InvalidOption(
                "Invalid value {!r} for option 'collation'".format(collation))
        collation = collation.lower()
    return CollatorOptions(
        usage=usage,
        sensitivity=sensitivity,
        ignore_punctuation=bool(ignore_punctuation),
        numeric=numeric,
        case_first=case_first,
        collation=collation,
        locale_matcher=locale_matcher)


def resolve(
        options: CollatorOptions,
        extensions: ExtensionValues,
        base_locale: str,
        engine_factory: Optional[EngineFactory] = None) -> CollatorState:
    """
    Builds a fully initialized state for `base_locale` (a tag without
    extensions). The engine is created and configured before the state
    exists, so an exception here never leaves a half-built collator.
    """
    base = parse_tag(base_locale).strip_extensions()
    locale = base
    engine_locale = base
    collation = DEFAULT_COLLATION

    if options.usage == SEARCH:
        # the reported locale never carries co-search, only the engine's
        collation = SEARCH
        engine_locale = base.with_unicode_keyword(COLLATION_KEY, SEARCH)
    else:
        candidate = options.collation
        if candidate is None:
            candidate = extensions.collation
        if candidate in COLLATION_TYPES:
            collation = candidate
            locale = base.with_unicode_keyword(COLLATION_KEY, candidate)
            engine_locale = locale
        elif candidate is not None:
            logging.debug(
                "Ignoring unsupported collation {!r} for {}".format(
                    candidate, base))

    numeric = options.numeric
    if numeric is None:
        numeric = bool(extensions.numeric)
    case_first = options.case_first
    if case_first is None:
        case_first = extensions.case_first or FALSE
    sensitivity = options.sensitivity or VARIANT

    if engine_factory is None:
        engine_factory = default_engine_factory()
    engine = engine_factory(str(engine_locale))
    engine.set_decomposition(CANONICAL)
    engine.set_strength(_STRENGTHS[sensitivity])
    if options.ignore_punctuation:
        if engine.supports_alternate_handling():
            engine.set_alternate_handling_shifted(True)
        else:
            logging.debug(
                "Engine for {} cannot ignore punctuation, "
                "comparing it as usual".format(engine_locale))

    return CollatorState(
        locale=str(locale),
        usage=options.usage,
        sensitivity=sensitivity,
        collation=collation,
        numeric=numeric,
        case_first=case_first,
        ignore_punctuation=options.ignore_punctuation,
        engine=engine)


__all__ = ["CollatorOptions", "validate_options", "resolve"]
