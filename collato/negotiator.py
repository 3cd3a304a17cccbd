""" Picks the locale a collator runs in and reads its collation keywords. """

import logging

from collato.exceptions import InvalidOption
from collato.tags import is_well_formed, LanguageTag, parse_tag

from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence
from typing import Set, Union
from typing_extensions import Protocol


NUMERIC_KEY = "kn"
CASE_FIRST_KEY = "kf"
COLLATION_KEY = "co"


class ExtensionValues(NamedTuple):
    """ Collation keywords found in the selected tag. None means unset. """

    numeric: Optional[bool] = None
    case_first: Optional[str] = None
    collation: Optional[str] = None


class Negotiation(NamedTuple):
    selected: str
    base: str
    extensions: ExtensionValues


class LocaleMatcher(Protocol):

    def select(self, requested: Sequence[str], fallback: str) -> str: ...


class LookupMatcher(object):
    """
    Returns the first usable requested tag. Without an `available` list
    every well-formed tag is usable; with one, a tag is usable when
    truncating it subtag by subtag reaches an available locale, and the
    available locale then replaces the requested base while the requested
    extensions are carried over.
    """

    _available = None  # type: Optional[Dict[str, str]]

    def __init__(self, available: Optional[Iterable[str]] = None) -> None:
        self._available = None
        if available is not None:
            self._available = {}
            for locale in available:
                canonical = str(parse_tag(locale).strip_extensions())
                self._available[canonical.lower()] = canonical

    def match(self, tag: str) -> Optional[str]:
        """ The usable form of `tag`, or None. """
        if not is_well_formed(tag):
            logging.debug("Skipping malformed locale tag {!r}".format(tag))
            return None
        parsed = parse_tag(tag)
        if self._available is None:
            return str(parsed)
        found = self._lookup(parsed)
        if found is None:
            return None
        return str(parse_tag(found)._replace(extensions=parsed.extensions))

    def _lookup(self, tag: LanguageTag) -> Optional[str]:
        available = self._available or {}
        subtags = tag.strip_extensions().subtags()
        while subtags:
            candidate = "-".join(subtags).lower()
            if candidate in available:
                return available[candidate]
            subtags.pop()
        return None

    def select(self, requested: Sequence[str], fallback: str) -> str:
        for tag in requested:
            matched = self.match(tag)
            if matched is not None:
                return matched
        return fallback

    def supported(self, requested: Sequence[str]) -> List[str]:
        return [tag for tag in requested if self.match(tag) is not None]


def extract_extension_values(tag: LanguageTag) -> ExtensionValues:
    """
    Reads `kn`, `kf` and `co` from the Unicode extension of `tag`. Only
    the first occurrence of a key is looked at, even when its value turns
    out to be unusable.
    """
    found = {}  # type: Dict[str, Any]
    seen = set()  # type: Set[str]
    for key, value in tag.unicode_keywords():
        if key in seen:
            continue
        seen.add(key)
        if key == NUMERIC_KEY:
            if value in ("", "true"):
                found["numeric"] = True
        elif key == CASE_FIRST_KEY:
            if value:
                found["case_first"] = value
        elif key == COLLATION_KEY:
            if value:
                found["collation"] = value
    return ExtensionValues(**found)


def negotiate(
        requested: Sequence[str],
        fallback: str,
        matcher: Optional[LocaleMatcher] = None) -> Negotiation:
    """
    Selects a tag from `requested` (or `fallback`) and splits it into the
    extension-free base used to build the engine and the collation
    keywords it carried.
    """
    if matcher is None:
        matcher = LookupMatcher()
    selected = parse_tag(matcher.select(requested, fallback))
    return Negotiation(
        selected=str(selected),
        base=str(selected.strip_extensions()),
        extensions=extract_extension_values(selected))


def canonicalize_locale_list(
        locales: Union[None, str, Iterable[str]]) -> List[str]:
    """
    Turns the `locales` argument into a list of canonical tags without
    duplicates. A single string counts as a one-element list.
    """
    if locales is None:
        return []
    if isinstance(locales, str):
        locales = [locales]
    seen = []  # type: List[str]
    for locale in locales:
        if not isinstance(locale, str):
            raise InvalidOption(
                "Locale tags must be strings, not {}".format(type(locale)))
        canonical = str(parse_tag(locale))
        if canonical not in seen:
            seen.append(canonical)
    return seen


__all__ = [
    "ExtensionValues",
    "LocaleMatcher",
    "LookupMatcher",
    "Negotiation",
    "canonicalize_locale_list",
    "extract_extension_values",
    "negotiate",
]
