# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import locale
import os
import sys


if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_text(f):
    """Read and return the text content of a file.

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows), which reads as
            an empty string. Alternatively a file-like object can be passed.
    """
    if f == EXPLICIT_MISSING_FILE:
        return ""
    if isinstance(f, str):
        with io.open(f, encoding="utf8", newline="") as fh:
            return fh.read()
    return f.read()


def write_text(f, text):
    with io.open(f, "w", encoding="utf8", newline="") as fh:
        fh.write(text)


def split_sequence(text, mode):
    """Split text into the sequence to diff.

    mode is "chars" for a character sequence or "lines" for a
    sequence of lines with their line endings kept.
    """
    if mode == "chars":
        return text
    elif mode == "lines":
        return text.splitlines(True)
    raise ValueError('Not valid value for `mode`: %r. Valid values '
                     'are "chars" or "lines"' % (mode,))


def join_sequence(items):
    "Join a split sequence back into text."
    if isinstance(items, str):
        return items
    return "".join(items)


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
