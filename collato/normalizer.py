import re
import unicodedata

from typing import Optional


# U+0141 / U+0142 have no canonical decomposition, so NFD keeps the stroke.
_STROKED_L = str.maketrans({"\u0141": "L", "\u0142": "l"})
_COMBINING_MARKS = re.compile("[\u0300-\u036f]+")


def strip_accents(value: Optional[str]) -> Optional[str]:
    """ Reduces `value` to its base letters. None stays None. """
    if value is None:
        return None
    decomposed = unicodedata.normalize("NFD", value).translate(_STROKED_L)
    return _COMBINING_MARKS.sub("", decomposed)


__all__ = ["strip_accents"]
