""" Option values understood by a collator. """

SORT = "sort"
SEARCH = "search"
USAGES = (SORT, SEARCH)

BASE = "base"
ACCENT = "accent"
CASE = "case"
VARIANT = "variant"
SENSITIVITIES = (BASE, ACCENT, CASE, VARIANT)

UPPER = "upper"
LOWER = "lower"
FALSE = "false"
CASE_FIRSTS = (UPPER, LOWER, FALSE)

LOOKUP = "lookup"
BEST_FIT = "best fit"
LOCALE_MATCHERS = (LOOKUP, BEST_FIT)

DEFAULT_COLLATION = "default"

# Collation types a `co` keyword may select, from CLDR's
# common/bcp47/collation.xml. "standard" and "search" are deliberately
# absent; "search" is only reachable through usage="search".
COLLATION_TYPES = frozenset([
    "big5han",
    "compat",
    "dict",
    "direct",
    "ducet",
    "emoji",
    "eor",
    "gb2312",
    "phonebk",
    "phonetic",
    "pinyin",
    "reformed",
    "searchjl",
    "stroke",
    "trad",
    "unihan",
    "zhuyin",
])
