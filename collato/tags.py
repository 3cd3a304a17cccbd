"""
A small BCP-47 language tag model. It only knows as much about tags as
collation needs: the base subtags (language, script, region, variants),
the extension sequences in the order they were written, and the keywords
of the Unicode (`-u-`) extension.

Usage example:

from collato.tags import parse_tag

tag = parse_tag("de-de-u-co-phonebk")
str(tag)                      # "de-DE-u-co-phonebk"
str(tag.strip_extensions())   # "de-DE"
tag.unicode_keywords()        # [("co", "phonebk")]
"""

import re

from collato.exceptions import InvalidLocaleTag

from typing import List, NamedTuple, Optional, Tuple


_LANGUAGE = re.compile(r"^(?:[a-z]{2,3}|[a-z]{5,8})$")
_EXTLANG = re.compile(r"^[a-z]{3}$")
_SCRIPT = re.compile(r"^[a-z]{4}$")
_REGION = re.compile(r"^(?:[a-z]{2}|[0-9]{3})$")
_VARIANT = re.compile(r"^(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3})$")
_SINGLETON = re.compile(r"^[0-9a-wy-z]$")
_EXTENSION_SUBTAG = re.compile(r"^[a-z0-9]{2,8}$")
_PRIVATE_SUBTAG = re.compile(r"^[a-z0-9]{1,8}$")
_UNICODE_KEY = re.compile(r"^[a-z0-9][a-z]$")

UNICODE_SINGLETON = "u"
PRIVATE_USE_SINGLETON = "x"

Extension = Tuple[str, Tuple[str, ...]]


class LanguageTag(NamedTuple):
    """ A parsed tag. All subtags are stored lowercase. """

    language: str
    extlangs: Tuple[str, ...] = ()
    script: Optional[str] = None
    region: Optional[str] = None
    variants: Tuple[str, ...] = ()
    extensions: Tuple[Extension, ...] = ()
    private_use: Tuple[str, ...] = ()

    def subtags(self) -> List[str]:
        """ The subtags in canonical case and order. """
        parts = [self.language]
        parts.extend(self.extlangs)
        if self.script:
            parts.append(self.script.title())
        if self.region:
            parts.append(self.region.upper())
        parts.extend(self.variants)
        for singleton, values in self.extensions:
            parts.append(singleton)
            parts.extend(values)
        if self.private_use:
            parts.append(PRIVATE_USE_SINGLETON)
            parts.extend(self.private_use)
        return parts

    def __str__(self) -> str:
        return "-".join(self.subtags())

    def strip_extensions(self) -> "LanguageTag":
        return self._replace(extensions=(), private_use=())

    def unicode_keywords(self) -> List[Tuple[str, str]]:
        """
        Keywords of every Unicode extension sequence, in tag order.
        Repeated keys are kept; callers decide which occurrence counts.
        Attributes (the subtags before the first key) are skipped.
        """
        keywords = []  # type: List[Tuple[str, str]]
        for singleton, values in self.extensions:
            if singleton != UNICODE_SINGLETON:
                continue
            key = None  # type: Optional[str]
            types = []  # type: List[str]
            for value in values:
                if _UNICODE_KEY.match(value):
                    if key is not None:
                        keywords.append((key, "-".join(types)))
                    key = value
                    types = []
                elif key is not None:
                    types.append(value)
            if key is not None:
                keywords.append((key, "-".join(types)))
        return keywords

    def with_unicode_keyword(self, key: str, value: str) -> "LanguageTag":
        """
        Returns a copy carrying `-u-<key>-<value>`. An existing keyword
        with the same key in the first Unicode extension is replaced.
        """
        keyword = (key,) + tuple(value.lower().split("-") if value else ())
        extensions = list(self.extensions)
        for index, (singleton, values) in enumerate(extensions):
            if singleton != UNICODE_SINGLETON:
                continue
            extensions[index] = (
                singleton, _replace_keyword(values, key) + keyword)
            break
        else:
            extensions.append((UNICODE_SINGLETON, keyword))
        return self._replace(extensions=tuple(extensions))


def _replace_keyword(values: Tuple[str, ...], key: str) -> Tuple[str, ...]:
    """ Drops `key` and its types from a Unicode extension sequence. """
    kept = []  # type: List[str]
    dropping = False
    for value in values:
        if _UNICODE_KEY.match(value):
            dropping = value == key
        if not dropping:
            kept.append(value)
    return tuple(kept)


def parse_tag(tag: str) -> LanguageTag:
    """
    Parses a BCP-47 tag. Underscores are accepted as separators so that
    POSIX style names like `pt_BR` work as well.
    """
    if not isinstance(tag, str) or not tag:
        raise InvalidLocaleTag("Invalid locale tag {!r}".format(tag))
    subtags = tag.replace("_", "-").lower().split("-")
    position = 0

    def peek(pattern: "re.Pattern[str]") -> bool:
        return position < len(subtags) and \
            pattern.match(subtags[position]) is not None

    if not peek(_LANGUAGE):
        raise InvalidLocaleTag("Invalid language in tag {!r}".format(tag))
    language = subtags[position]
    position += 1

    extlangs = []  # type: List[str]
    while len(language) <= 3 and len(extlangs) < 3 and peek(_EXTLANG):
        extlangs.append(subtags[position])
        position += 1

    script = None  # type: Optional[str]
    if peek(_SCRIPT):
        script = subtags[position]
        position += 1

    region = None  # type: Optional[str]
    if peek(_REGION):
        region = subtags[position]
        position += 1

    variants = []  # type: List[str]
    while peek(_VARIANT):
        if subtags[position] in variants:
            raise InvalidLocaleTag(
                "Duplicate variant in tag {!r}".format(tag))
        variants.append(subtags[position])
        position += 1

    extensions = []  # type: List[Extension]
    while peek(_SINGLETON):
        singleton = subtags[position]
        if any(singleton == seen for seen, _ in extensions):
            raise InvalidLocaleTag(
                "Duplicate extension '{}' in tag {!r}".format(singleton, tag))
        position += 1
        values = []  # type: List[str]
        while peek(_EXTENSION_SUBTAG):
            values.append(subtags[position])
            position += 1
        if not values:
            raise InvalidLocaleTag(
                "Empty extension '{}' in tag {!r}".format(singleton, tag))
        extensions.append((singleton, tuple(values)))

    private_use = []  # type: List[str]
    if position < len(subtags) and \
            subtags[position] == PRIVATE_USE_SINGLETON:
        position += 1
        while peek(_PRIVATE_SUBTAG):
            private_use.append(subtags[position])
            position += 1
        if not private_use:
            raise InvalidLocaleTag(
                "Empty private use sequence in tag {!r}".format(tag))

    if position != len(subtags):
        raise InvalidLocaleTag(
            "Unexpected subtag '{}' in tag {!r}".format(
                subtags[position], tag))

    return LanguageTag(
        language=language,
        extlangs=tuple(extlangs),
        script=script,
        region=region,
        variants=tuple(variants),
        extensions=tuple(extensions),
        private_use=tuple(private_use))


def is_well_formed(tag: str) -> bool:
    try:
        parse_tag(tag)
    except InvalidLocaleTag:
        return False
    return True


__all__ = ["LanguageTag", "parse_tag", "is_well_formed"]
