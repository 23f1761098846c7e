# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import enum
import io
import logging
import os

from .exceptions import TtbinError, TtbinEOFError
from .types import SchemaVariant
from . import records
from . import schema
from . import utils

__all__ = ['ReaderState', 'TtbinReader']

_logger = logging.getLogger(__name__)


class ReaderState(enum.Enum):
    """The successive states of a `TtbinReader`."""

    #: Nothing read yet; the schema is not resolved
    START = 0

    #: Schema resolved and, if it has one, the leading header consumed
    HEADER_CONSUMED = 1

    #: Reading tags and records
    STREAMING = 2

    #: End of stream reached cleanly (terminal)
    DONE = 3

    #: Decoding stopped on an error or an unknown tag (terminal)
    ERROR = 4


class TtbinReader:
    """
    Decode the content of a ttbin stream or storage, one record at a time.

    Usage::

        import ttbindecode

        with ttbindecode.TtbinReader('activity.ttbin') as ttbin:
            for record in ttbin:
                # The yielded record is one of the ttbindecode.Ttbin* record
                # classes, for instance:
                # * ttbindecode.TtbinHeader
                # * ttbindecode.TtbinGps and ttbindecode.TtbinGpsNoFix
                # * ttbindecode.TtbinHeartRate
                # * ttbindecode.TtbinRawDump
                # * ttbindecode.TtbinUnknownTag (always the last one)

                if isinstance(record, ttbindecode.TtbinGps):
                    print(record.time, record.latitude, record.longitude)

    Schema variant:

    * The two known generations of the format share tag values but not
      payload widths. Pass *variant* (a `SchemaVariant`) whenever it is known.
    * If *variant* is `None`, the first two bytes of the stream are inspected
      and `TtbinSchemaError` is raised if they match neither signature.

    Termination:

    * Iteration ends normally when the stream ends right before a tag byte.
    * `TtbinEOFError` is raised if a record is cut short.
    * An unknown tag is yielded as a `TtbinUnknownTag` record, after which
      iteration ends: the payload length of an unknown tag cannot be known, so
      there is no way to find the next record. A caller that knows better can
      create a new reader with *resume_offset* (an absolute position in the
      stream, *variant* required) to carry on from there; the header is not
      expected in that case.

    Raw chunks:

    * If *keep_raw_chunks* is true, every record gets a `TtbinChunk` holding
      the exact bytes it was decoded from, tag byte included.

    The reader never seeks while decoding and reads one record at a time. If
    *fileish* is a path, the file is opened here and closed by `close()`;
    file objects passed by the caller are left open.
    """

    def __init__(self, fileish, *,
                 variant=None, keep_raw_chunks=False, resume_offset=None):
        # immutable options (private)
        self._declared_variant = variant
        self._keep_raw = keep_raw_chunks
        self._resume_offset = resume_offset

        # state (private)
        self._fd = None           # the file object to read from
        self._owns_fd = False     # whether *fileish* was opened by us
        self._read_offset = 0     # position of the next byte to be read
        self._pushback = b''      # bytes peeked during schema detection
        self._chunk_index = 0     # the index number of the record being read
        self._schema = None       # `schema.Schema` once resolved
        self._header = None       # last `TtbinHeader` read
        self._state = ReaderState.START

        if variant is not None and not isinstance(variant, SchemaVariant):
            raise ValueError(f'not a schema variant: {variant!r}')
        if resume_offset is not None:
            if variant is None:
                raise ValueError('resume_offset requires a declared variant')
            if resume_offset < 0:
                raise ValueError('resume_offset must be positive')

        if hasattr(fileish, '__fspath__'):
            fileish = os.fspath(fileish)

        if hasattr(fileish, 'read'):
            self._fd = fileish
        elif isinstance(fileish, str):
            self._fd = open(fileish, mode='rb')
            self._owns_fd = True
        else:
            self._fd = io.BytesIO(fileish)
            self._owns_fd = True

        try:
            self._read_offset = self._fd.tell()
        except (AttributeError, OSError):
            pass

    def __del__(self):
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        return self.close()

    def __iter__(self):
        yield from self._read_next()

    @property
    def variant(self):
        """
        The `SchemaVariant` in effect: the declared one, or the detected one
        once iteration has started. May be `None`.
        """
        if self._schema:
            return self._schema.variant
        return self._declared_variant

    @property
    def schema(self):
        """The resolved `ttbindecode.schema.Schema`. May be `None`."""
        return self._schema

    @property
    def last_header(self):
        """The last read `TtbinHeader` object. May be `None`."""
        return self._header

    @property
    def state(self):
        """The current `ReaderState`."""
        return self._state

    @property
    def offset(self):
        """Position of the next byte to be read from the stream."""
        return self._read_offset

    def close(self):
        """
        Release the file handle if it was opened by this reader, and clear the
        internal state.
        """
        if self._fd and self._owns_fd and hasattr(self._fd, 'close'):
            self._fd.close()

        self._fd = None
        self._owns_fd = False
        self._pushback = b''
        if self._state not in (ReaderState.DONE, ReaderState.ERROR):
            self._state = ReaderState.DONE

    # ONLY PRIVATE METHODS BELOW ***********************************************

    def _read_next(self):
        try:
            if self._state is ReaderState.START and self._fd:
                header = self._start()
                if header is not None:
                    self._chunk_index += 1
                    yield header

            if self._state is ReaderState.HEADER_CONSUMED:
                self._state = ReaderState.STREAMING

            while self._fd and self._state is ReaderState.STREAMING:
                record = self._read_record()
                if record is None:
                    break

                self._chunk_index += 1
                yield record
        except TtbinError:
            self._state = ReaderState.ERROR
            raise

    def _start(self):
        if self._resume_offset is not None:
            self._skip_to(self._resume_offset)
            self._schema = schema.resolve_schema(self._declared_variant)
            _logger.debug(
                'resuming %s stream @ %d',
                self._schema.variant.name, self._read_offset)
            self._state = ReaderState.HEADER_CONSUMED
            return None

        if self._declared_variant is None:
            leading = self._peek_bytes(schema.LEADING_SIZE)
            if not leading:
                # regular EOF: storage is empty
                self._state = ReaderState.DONE
                return None
            self._schema = schema.resolve_schema(None, leading)
            _logger.debug('detected schema variant %s', self._schema.variant.name)
        else:
            self._schema = schema.resolve_schema(self._declared_variant)
            _logger.debug('declared schema variant %s', self._schema.variant.name)

        header = None
        if self._schema.has_leading_header:
            header = self._read_leading_header()
            if header is None:
                self._state = ReaderState.DONE
                return None

        self._state = ReaderState.HEADER_CONSUMED
        return header

    def _read_leading_header(self):
        codec = self._schema.header_codec
        offset = self._read_offset
        chunk = self._read_bytes(codec.size)
        if not chunk:
            return None

        self._header = codec.decode(
            chunk, offset=offset, chunk=self._keep_chunk(offset, chunk))
        return self._header

    def _read_record(self):
        offset = self._read_offset
        tag_chunk = self._read_bytes(1)
        if not tag_chunk:
            self._state = ReaderState.DONE
            return None

        tag = tag_chunk[0]
        codec = self._schema.codecs.get(tag)
        if codec is None:
            _logger.warning(
                'unknown tag %#04x @ %d in %s stream, cannot go further',
                tag, offset, self._schema.variant.name)
            self._state = ReaderState.ERROR
            return records.TtbinUnknownTag(
                tag, offset, self._keep_chunk(offset, tag_chunk))

        payload = self._read_bytes(codec.size)
        if len(payload) < codec.size:
            raise TtbinEOFError(tag, codec.size, len(payload), offset + 1)

        _logger.debug('%s (tag %#04x) @ %d', codec.name, tag, offset)

        record = codec.decode(
            payload, offset=offset + 1,
            chunk=self._keep_chunk(offset, tag_chunk + payload))

        if isinstance(record, records.TtbinHeader):
            self._header = record

        return record

    def _read_bytes(self, size):
        data = b''
        if self._pushback:
            data = self._pushback[:size]
            self._pushback = self._pushback[size:]

        if len(data) < size:
            data += utils.blocking_read(self._fd, size - len(data))

        self._read_offset += len(data)
        return data

    def _peek_bytes(self, size):
        data = self._read_bytes(size)
        self._pushback = data + self._pushback
        self._read_offset -= len(data)
        return data

    def _skip_to(self, offset):
        try:
            self._fd.seek(offset)
        except (AttributeError, OSError):
            # not seekable: read forward
            if offset < self._read_offset:
                raise ValueError(
                    f'cannot go back to offset {offset} on a non-seekable '
                    f'stream (current offset: {self._read_offset})')
            self._read_bytes(offset - self._read_offset)
        else:
            self._read_offset = offset
            self._pushback = b''

    def _keep_chunk(self, offset, chunk):
        if not self._keep_raw:
            return None

        return records.TtbinChunk(self._chunk_index, offset, bytes(chunk))
