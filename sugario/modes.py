"""Module that translates mode symbols into the mode strings understood by io.open()."""

from sugario.errors import ConflictError
from sugario.symbols import ModeSymbol, to_mode_set


def translate(modes):
    """Converts a collection of mode symbols to a classic mode string.

    'modes' may contain ModeSymbol members or their string values, in any order and with
    duplicates. The result is made of an optional "b" or "t" prefix followed by one of "r", "w",
    "w+", "a", or "a+". An empty collection translates to "r".

    Raises ConflictError if BINARY and TEXT, or OVERWRITE and APPEND, are both present.
    """
    modes = to_mode_set(modes)

    if ModeSymbol.BINARY in modes and ModeSymbol.TEXT in modes:
        raise ConflictError(ModeSymbol.BINARY, ModeSymbol.TEXT)

    if ModeSymbol.BINARY in modes:
        mode_string = "b"
    elif ModeSymbol.TEXT in modes:
        mode_string = "t"
    else:
        mode_string = ""

    if ModeSymbol.OVERWRITE in modes or ModeSymbol.APPEND in modes:
        if ModeSymbol.OVERWRITE in modes and ModeSymbol.APPEND in modes:
            raise ConflictError(ModeSymbol.OVERWRITE, ModeSymbol.APPEND)

        mode_string += "a" if ModeSymbol.APPEND in modes else "w"

        if ModeSymbol.READ in modes:
            mode_string += "+"
    else:
        # Opening without any write intent always reads, whether or not READ was given.
        mode_string += "r"

    return mode_string
