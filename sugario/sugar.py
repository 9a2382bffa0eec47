"""Sugar-enhanced open() taking mode symbols instead of a raw mode string."""

import logging
import pathlib

import sugario.io_shim
from sugario.options import build_options

logger = logging.getLogger(__name__)


def open(file, modes=(), options=None, callback=None):  # pylint: disable=redefined-builtin
    """Opens 'file' according to the mode symbols in 'modes'.

    'options' may hold any other keyword argument of io.open(), e.g. "encoding" or "newline".
    When 'callback' is given, the file is closed after calling it and its result is returned.

    Example:
        with sugario.open("log.txt", [ModeSymbol.APPEND, ModeSymbol.TEXT],
                          {"encoding": "utf-8"}) as fileobj:
            fileobj.write("started\\n")
    """
    options = build_options(modes, options)
    logger.debug("Opening %r with mode %r", file, options["mode"])
    return sugario.io_shim.open(file, options, callback=callback)


class SugarOpenMixin:  # pylint: disable=too-few-public-methods
    """Mixin providing sugar_open() for objects that already identify a file."""

    def _open_target(self):
        """Returns the path-like object or file descriptor sugar_open() should open."""
        return self

    def sugar_open(self, modes=(), options=None, callback=None):
        """Same as sugario.open() but opening the file this object refers to."""
        return open(self._open_target(), modes, options, callback=callback)


class SugarPath(SugarOpenMixin, type(pathlib.Path())):  # pylint: disable=too-many-ancestors
    """Concrete pathlib path for the current platform with sugar_open()."""
