"""Replacement for io.open() taking its keyword arguments as a single options mapping."""

import io
import os

import sugario.flags


def os_open(file, flags):
    """Default opener: os.open() with the usual 0o666 permissions.

    The close-on-exec flag is already part of the flags returned by mode_to_flags().
    """
    return os.open(file, flags, 0o666)


def open(file, options, callback=None):  # pylint: disable=redefined-builtin
    """Opens 'file' using the keyword arguments of io.open() found in 'options'.

    'file' is either a path-like object or an integer file descriptor. 'options' must contain a
    "mode" key; its remaining keys ("buffering", "encoding", "errors", "newline", "closefd", and
    "opener") have the same meaning as for io.open(). The opener() function is called with the
    os.open() flags computed by sugario.flags.mode_to_flags().

    If 'callback' is given, it is called with the file object, the file object is closed once the
    callback returns or raises, and the callback's return value is returned. Otherwise the open
    file object is returned.
    """
    options = dict(options)
    mode = options.pop("mode")
    opener = options.pop("opener", None)
    closefd = options.pop("closefd", True)

    if isinstance(file, int):
        fileobj = io.open(file, mode=mode, closefd=closefd, **options)
    else:
        file = os.fspath(file)

        if not closefd:
            raise ValueError("Cannot use closefd=False with file name")

        flags = sugario.flags.mode_to_flags(mode)

        if opener is None:
            opener = os_open

        # io.open() only calls the opener once it has validated the remaining arguments, and it
        # takes responsibility for closing the returned descriptor if anything goes wrong later.
        fileobj = io.open(file, mode=mode, opener=lambda path, _: opener(path, flags), **options)

    if callback is None:
        return fileobj

    with fileobj:
        return callback(fileobj)
