""" Locale aware string collation, with a MongoDB bridge. """

from collato.exceptions import *  # noqa: F403,F401
from collato.collator import *  # noqa: F403,F401
from collato.normalizer import *  # noqa: F403,F401

# Locale used when none of the requested locales is usable.
DEFAULT_LOCALE = "en-US"


__all__ = [  # noqa: F405
    "Collator",
    "ResolvedOptions",
    "strip_accents",
    "CollatorError",
    "InvalidOption",
    "InvalidLocaleTag",
    "UninitializedCollator",
    "ReceiverTypeMismatch",
]
