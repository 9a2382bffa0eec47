"""Module that defines the symbols describing how a file should be opened."""

import collections.abc
import enum

from sugario.errors import InvalidSymbolError


class ModeSymbol(enum.Enum):
    """A single intent of the caller when opening a file."""

    READ = "read"
    OVERWRITE = "overwrite"
    APPEND = "append"
    BINARY = "binary"
    TEXT = "text"


def to_symbol(value):
    """Returns the ModeSymbol for 'value', which may be a member or its string value."""
    if isinstance(value, ModeSymbol):
        return value

    if isinstance(value, str):
        try:
            return ModeSymbol(value)
        except ValueError:
            pass

    raise InvalidSymbolError(value)


def to_mode_set(values):
    """Collapses an iterable of mode symbols into a frozenset of ModeSymbol members."""
    # A lone string is iterable too, but "read" must not become {"r", "e", "a", "d"}. A mapping
    # would only contribute its keys, so {"overwrite": False} would still mean OVERWRITE.
    if isinstance(values, (str, bytes, ModeSymbol, collections.abc.Mapping)):
        raise InvalidSymbolError(values)

    try:
        iterator = iter(values)
    except TypeError:
        raise InvalidSymbolError(values) from None

    return frozenset(to_symbol(value) for value in iterator)
