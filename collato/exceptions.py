__all__ = [
    "CollatorError",
    "InvalidOption",
    "InvalidLocaleTag",
    "UninitializedCollator",
    "ReceiverTypeMismatch",
]


class CollatorError(Exception):
    """ Base class for everything raised by collato. """
    pass


class InvalidOption(CollatorError, ValueError):
    """ Raised when a constructor option has an unsupported value. """
    pass


class InvalidLocaleTag(InvalidOption):
    """ Raised when a locale tag is not a well-formed BCP-47 tag. """
    pass


class UninitializedCollator(CollatorError, TypeError):
    """ Raised when a collator state is used before it is initialized. """
    pass


class ReceiverTypeMismatch(CollatorError, TypeError):
    """ Raised when a collator accessor is read from a non-collator. """
    pass
