# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

from .reader import TtbinReader

__all__ = ['decode', 'decode_file']


def decode(fileish, variant=None, **options):
    """
    Lazily decode *fileish* (a path, a binary file object or a bytes-like
    object) and yield its records.

    This is a thin generator over `ttbindecode.TtbinReader`, to which
    *variant* and the keyword *options* are passed as is. Stopping the
    iteration early is always safe.
    """
    with TtbinReader(fileish, variant=variant, **options) as reader:
        yield from reader


def decode_file(path, variant=None, **options):
    """Decode the whole file at *path* at once and return a `list` of records."""
    return list(decode(path, variant=variant, **options))
