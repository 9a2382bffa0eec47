"""Exceptions raised when a collection of mode symbols can't be translated into a mode string."""


class ModeError(ValueError):
    """Base class for all errors raised while translating mode symbols."""


class ConflictError(ModeError):
    """Raised when two mutually exclusive mode symbols are requested together."""

    def __init__(self, first, second):
        super().__init__("%s and %s are mutually exclusive" % (first.value, second.value))
        self.symbols = (first, second)


class InvalidSymbolError(ModeError, TypeError):
    """Raised when a value isn't one of the recognized mode symbols."""

    def __init__(self, value):
        super().__init__("invalid mode symbol: %r" % (value, ))
        self.value = value
