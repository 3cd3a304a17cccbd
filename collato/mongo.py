"""
Projects a collator onto a MongoDB collation so queries sorted by the
server follow the same rules as the collator. Use it like any other
pymongo collation:

    collator = Collator("de-DE-u-co-phonebk")
    db.people.find().sort("name").collation(collator.to_mongo())
"""

from pymongo.collation import Collation, CollationAlternate
from pymongo.collation import CollationCaseFirst, CollationStrength

from collato.constants import ACCENT, BASE, CASE, DEFAULT_COLLATION, LOWER
from collato.constants import UPPER
from collato.exceptions import UninitializedCollator
from collato.helpers import check_none
from collato.state import CollatorState
from collato.tags import parse_tag

from typing import Dict


# ICU locale ids spell some collation types out in full.
_ICU_COLLATION_NAMES = {
    "dict": "dictionary",
    "gb2312": "gb2312han",
    "phonebk": "phonebook",
    "trad": "traditional",
}  # type: Dict[str, str]

_CASE_FIRST = {
    UPPER: CollationCaseFirst.UPPER,
    LOWER: CollationCaseFirst.LOWER,
}  # type: Dict[str, str]


def mongo_locale(state: CollatorState) -> str:
    """ The ICU style locale id, e.g. `de_DE@collation=phonebook`. """
    base = parse_tag(check_none(state.locale)).strip_extensions()
    locale = "_".join(base.subtags())
    if state.collation != DEFAULT_COLLATION:
        locale += "@collation={}".format(
            _ICU_COLLATION_NAMES.get(state.collation, state.collation))
    return locale


def to_mongo_collation(state: CollatorState) -> Collation:
    if not state.initialized:
        raise UninitializedCollator(
            "to_mongo() called on an uninitialized collator")
    case_level = False
    if state.sensitivity == BASE:
        strength = CollationStrength.PRIMARY
    elif state.sensitivity == ACCENT:
        strength = CollationStrength.SECONDARY
    elif state.sensitivity == CASE:
        strength = CollationStrength.PRIMARY
        case_level = True
    else:
        strength = CollationStrength.TERTIARY
    alternate = CollationAlternate.NON_IGNORABLE
    if state.ignore_punctuation:
        alternate = CollationAlternate.SHIFTED
    return Collation(
        locale=mongo_locale(state),
        caseLevel=case_level,
        caseFirst=_CASE_FIRST.get(state.case_first, CollationCaseFirst.OFF),
        strength=strength,
        numericOrdering=state.numeric,
        alternate=alternate,
        normalization=True)


__all__ = ["mongo_locale", "to_mongo_collation"]
