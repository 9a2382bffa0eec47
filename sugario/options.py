"""Module that builds the keyword arguments for opening a file from mode symbols."""

from sugario.modes import translate

# Superseded by the BINARY and TEXT mode symbols and never forwarded to the open call.
DEPRECATED_OPTION_KEYS = ("binmode", "textmode")


def build_options(modes=(), options=None):
    """Returns a copy of 'options' with "mode" set to the translation of 'modes'.

    The caller's mapping is left untouched. Any deprecated "binmode" or "textmode" keys are
    dropped and a "mode" key supplied by the caller is replaced. Errors raised by translate()
    propagate to the caller.
    """
    options = dict(options) if options is not None else {}

    for key in DEPRECATED_OPTION_KEYS:
        options.pop(key, None)

    options["mode"] = translate(modes)
    return options
