"""Opening files from declarative mode symbols instead of mode strings."""

from sugario.errors import ConflictError, InvalidSymbolError, ModeError
from sugario.flags import O_BINARY, O_CLOEXEC, O_NOINHERIT
from sugario.modes import translate
from sugario.options import DEPRECATED_OPTION_KEYS, build_options
from sugario.sugar import SugarOpenMixin, SugarPath
from sugario.sugar import open as sugar_open
from sugario.symbols import ModeSymbol

__version__ = "0.1.0"

READ = ModeSymbol.READ
OVERWRITE = ModeSymbol.OVERWRITE
APPEND = ModeSymbol.APPEND
BINARY = ModeSymbol.BINARY
TEXT = ModeSymbol.TEXT

open = sugar_open  # pylint: disable=redefined-builtin,invalid-name
