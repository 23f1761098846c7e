# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import enum

__all__ = ['SchemaVariant']


TAG_RECORD_LENGTHS = 0x16
TAG_HEADER = 0x20
TAG_LAP = 0x21
TAG_GPS = 0x22
TAG_23 = 0x23
TAG_HEART_RATE = 0x25
TAG_26 = 0x26
TAG_SUMMARY = 0x27
TAG_30 = 0x30
TAG_TREADMILL = 0x32
TAG_SWIM = 0x34
TAG_TIMED_EVENT = 0x35
TAG_37 = 0x37


class SchemaVariant(enum.Enum):
    """
    The two known generations of the ttbin layout.

    Both share tag values but not payload widths, so a stream decoded with the
    wrong variant is silently misread rather than rejected.
    """

    #: Header travels as a regular record under tag ``0x20``; GPS records
    #: carry float distances and a cycles counter; heart rate is 8-bit.
    A = 1

    #: Header is the first, untagged, block of the file; GPS records carry a
    #: 16-bit distance in decimeters; heart rate is 16-bit.
    B = 2

    @classmethod
    def from_name(cls, name):
        """
        Return the variant named *name* (case insensitive), or `None` if
        *name* is ``auto``, empty or `None`.
        """
        if not name or name.lower() == 'auto':
            return None
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f'unknown schema variant: {name!r}') from None
