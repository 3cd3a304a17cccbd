""" The PyICU backed collation engine. """

import icu

from collato.engine import CANONICAL, PRIMARY, SECONDARY, TERTIARY

from typing import Any, Dict


_STRENGTHS = {
    PRIMARY: icu.Collator.PRIMARY,
    SECONDARY: icu.Collator.SECONDARY,
    TERTIARY: icu.Collator.TERTIARY,
}  # type: Dict[int, Any]


class IcuEngine(object):
    """ Wraps an `icu.Collator` built for a BCP-47 tag. """

    def __init__(self, locale_tag: str) -> None:
        self.locale_tag = locale_tag
        self._collator = icu.Collator.createInstance(
            icu.Locale.forLanguageTag(locale_tag))

    def set_strength(self, strength: int) -> None:
        self._collator.setStrength(_STRENGTHS[strength])

    def set_decomposition(self, mode: str) -> None:
        if mode != CANONICAL:
            raise ValueError("Unsupported decomposition {}".format(mode))
        self._collator.setAttribute(
            icu.UCollAttribute.NORMALIZATION_MODE, icu.UCollAttributeValue.ON)

    def supports_alternate_handling(self) -> bool:
        return isinstance(self._collator, icu.RuleBasedCollator)

    def set_alternate_handling_shifted(self, shifted: bool) -> None:
        value = icu.UCollAttributeValue.SHIFTED if shifted \
            else icu.UCollAttributeValue.NON_IGNORABLE
        self._collator.setAttribute(
            icu.UCollAttribute.ALTERNATE_HANDLING, value)

    def compare(self, one: str, two: str) -> int:
        return self._collator.compare(one, two)


__all__ = ["IcuEngine"]
