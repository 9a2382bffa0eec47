"""Module that provides utility functions and constants for opening files."""

import os
import sys

if sys.platform in ("win32", "cygwin"):
    O_BINARY = os.O_BINARY  # pylint: disable=no-member
    O_NOINHERIT = O_CLOEXEC = os.O_NOINHERIT  # pylint: disable=no-member
else:
    O_BINARY = 0
    O_NOINHERIT = O_CLOEXEC = os.O_CLOEXEC  # pylint: disable=no-member

MODE_CHARACTERS = frozenset("btrwa+")


def mode_to_flags(mode):
    """Converts the string 'mode' to the flags constants for use with the os.open() function.

    Only the mode strings produced by sugario.modes.translate() are accepted: at most one of "b"
    and "t", exactly one of "r", "w", and "a", and at most one "+", in any order.
    """
    if not isinstance(mode, str):
        raise TypeError("invalid mode: %r" % (mode, ))

    modes = set(mode)

    if modes - MODE_CHARACTERS or len(modes) < len(mode):
        raise ValueError("invalid mode: %s" % (mode, ))

    if sum(c in "rwa" for c in mode) != 1:
        raise ValueError("Must have exactly one of read/write/append mode and at most one plus")

    if "b" in modes and "t" in modes:
        raise ValueError("can't have text and binary mode at once")

    if "r" in modes:
        flags = 0
        writable = False
    elif "w" in modes:
        flags = os.O_CREAT | os.O_TRUNC
        writable = True
    else:
        flags = os.O_APPEND | os.O_CREAT
        writable = True

    if "+" in modes:
        flags |= os.O_RDWR
    elif writable:
        flags |= os.O_WRONLY
    else:
        flags |= os.O_RDONLY

    # Newline translation is left to io.open(), so the descriptor itself is always binary.
    flags |= O_BINARY
    flags |= O_NOINHERIT

    return flags
