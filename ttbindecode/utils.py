# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import time

__all__ = []


HEXDUMP_BYTES_PER_LINE = 32


def hexdump(byteslike, *, bytes_per_line=HEXDUMP_BYTES_PER_LINE):
    """
    Format *byteslike* as space-prefixed, upper case hex pairs, with a line
    break after every *bytes_per_line* bytes.

    The returned `str` always ends with a line break unless *byteslike* is
    empty.
    """
    lines = []
    view = memoryview(byteslike)
    for start in range(0, len(view), bytes_per_line):
        lines.append(''.join(
            f' {byte:02X}' for byte in view[start:start + bytes_per_line]))
        lines.append('\n')

    return ''.join(lines)


def blocking_read(istream, size=-1, nonblocking_reads_delay=0.06):
    """
    Read from *istream* and do not return until *size* `bytes` have been read
    unless EOF has been reached.

    Return all the data read so far. The length of the returned data may still
    be less than *size* in case EOF has been reached.

    *nonblocking_reads_delay* specifies the number of seconds (float) to wait
    before trying to read from *istream* again in case `BlockingIOError` has
    been raised during previous call.
    """
    if not size:
        return b''

    data = b''
    while True:
        try:
            chunk = istream.read(-1 if size < 0 else size - len(data))
            if chunk is None:
                # raw non-blocking stream with no data available yet
                raise BlockingIOError()

            if not data:
                data = chunk
            else:
                data += chunk

            if not chunk or (size > 0 and len(data) >= size):
                return data
        except BlockingIOError:
            time.sleep(nonblocking_reads_delay)
