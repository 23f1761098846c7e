# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

"""
Conversion of raw ttbin field values into engineering units.

Every function here is total: any value the underlying field can hold gives a
result, never an exception.
"""

import datetime

__all__ = [
    'EPOCH', 'ACTIVITY_NAMES', 'NO_FIX_TIME',
    'decode_geo_degrees', 'decode_speed', 'decode_heading',
    'decode_decimeters', 'decode_epoch_utc', 'decode_epoch_local',
    'to_local', 'activity_name']


#: Timestamps (uint32) represent seconds since this reference
EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

#: Raw GPS time value written when the watch has no satellite lock
NO_FIX_TIME = 0xffffffff

ACTIVITY_NAMES = {
    0: 'Run',
    1: 'Cycle',
    2: 'Swim',
    7: 'Treadmill'}


def decode_geo_degrees(raw):
    """Latitude or longitude stored in 1e-7 degrees."""
    return raw * 1e-7


def decode_speed(raw):
    """Speed stored in cm/s, returned in m/s."""
    return raw * 0.01


def decode_heading(raw):
    """Heading stored in 1/100 degrees (0 is North, 9000 is East)."""
    return raw * 0.01


def decode_decimeters(raw):
    return raw * 0.1


def decode_epoch_utc(raw):
    """
    Return an aware UTC `datetime.datetime` from a count of seconds since
    1970-01-01T00:00:00Z.

    Uses `datetime.timedelta` arithmetic rather than
    `datetime.datetime.fromtimestamp` so that the result does not depend on
    the platform's ``time_t`` range.
    """
    return EPOCH + datetime.timedelta(seconds=raw)


def decode_epoch_local(raw):
    """
    Same instant as `decode_epoch_utc`, expressed in the time zone configured
    for this process.
    """
    return to_local(decode_epoch_utc(raw))


def to_local(dt):
    try:
        return dt.astimezone()
    except (OverflowError, OSError, ValueError):
        # platform cannot resolve a local offset for this instant
        return dt


def activity_name(code):
    try:
        return ACTIVITY_NAMES[code]
    except KeyError:
        return f'Type {code}'
