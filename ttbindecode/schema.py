# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import struct

from .exceptions import TtbinSchemaError
from .types import SchemaVariant
from . import codec
from . import types

__all__ = [
    'Schema', 'LEADING_SIZE', 'VARIANT_A_FILE_FORMATS', 'VARIANT_B_MAGIC',
    'detect_variant', 'resolve_schema']


#: Number of bytes `detect_variant` needs to look at
LEADING_SIZE = 2

#: ``file_format`` values seen right after the ``0x20`` header tag
VARIANT_A_FILE_FORMATS = frozenset((5, 7))

#: Leading 16-bit ``file_format`` of an untagged header
VARIANT_B_MAGIC = 4


class Schema:
    """
    The codec table and header policy in effect for a stream.

    *header_codec* is `None` when the header is a regular tagged record
    (`SchemaVariant.A`), or the `ttbindecode.codec.Codec` to apply once to the
    leading bytes of the stream before any tag is read (`SchemaVariant.B`).
    """

    __slots__ = ('variant', 'codecs', 'header_codec')

    def __init__(self, variant, codecs, header_codec):
        self.variant = variant
        self.codecs = codecs
        self.header_codec = header_codec

    def __repr__(self):
        return f'<Schema {self.variant.name}>'

    @property
    def has_leading_header(self):
        return self.header_codec is not None


def detect_variant(leading):
    """
    Guess the `SchemaVariant` from the first `LEADING_SIZE` bytes of a
    stream.

    Only the two observed signatures are accepted: a ``0x20`` tag followed by
    a known ``file_format`` byte, or the 16-bit ``file_format`` magic of an
    untagged header. `TtbinSchemaError` is raised for anything else.
    """
    leading = bytes(leading[:LEADING_SIZE])
    if len(leading) < LEADING_SIZE:
        raise TtbinSchemaError(leading, 'not enough bytes')

    if (leading[0] == types.TAG_HEADER and
            leading[1] in VARIANT_A_FILE_FORMATS):
        return SchemaVariant.A

    (magic, ) = struct.unpack('<H', leading)
    if magic == VARIANT_B_MAGIC:
        return SchemaVariant.B

    raise TtbinSchemaError(leading)


def resolve_schema(variant=None, leading=b''):
    """
    Return the `Schema` for *variant*, or for the variant detected from the
    *leading* bytes if *variant* is `None`.

    A declared *variant* always wins; *leading* is not even looked at in that
    case.
    """
    if variant is None:
        variant = detect_variant(leading)
    elif not isinstance(variant, SchemaVariant):
        raise ValueError(f'not a schema variant: {variant!r}')

    if variant is SchemaVariant.A:
        return Schema(variant, codec.CODECS_A, None)
    else:
        return Schema(variant, codec.CODECS_B, codec.HEADER_CODEC_B)
