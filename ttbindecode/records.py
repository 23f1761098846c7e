# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT


__all__ = [
    'TtbinChunk', 'TtbinHeader', 'TtbinLap', 'TtbinGps', 'TtbinGpsNoFix',
    'TtbinHeartRate', 'TtbinSummary', 'TtbinTreadmill', 'TtbinSwim',
    'TtbinTimedEvent', 'TtbinRawDump', 'TtbinUnknownTag',
    'TTBIN_RECORD_HEADER', 'TTBIN_RECORD_LAP', 'TTBIN_RECORD_GPS',
    'TTBIN_RECORD_GPS_NOFIX', 'TTBIN_RECORD_HEART_RATE',
    'TTBIN_RECORD_SUMMARY', 'TTBIN_RECORD_TREADMILL', 'TTBIN_RECORD_SWIM',
    'TTBIN_RECORD_TIMED_EVENT', 'TTBIN_RECORD_RAW', 'TTBIN_RECORD_UNKNOWN']


TTBIN_RECORD_HEADER = 1
TTBIN_RECORD_LAP = 2
TTBIN_RECORD_GPS = 3
TTBIN_RECORD_GPS_NOFIX = 4
TTBIN_RECORD_HEART_RATE = 5
TTBIN_RECORD_SUMMARY = 6
TTBIN_RECORD_TREADMILL = 7
TTBIN_RECORD_SWIM = 8
TTBIN_RECORD_TIMED_EVENT = 9
TTBIN_RECORD_RAW = 10
TTBIN_RECORD_UNKNOWN = 11


class TtbinChunk:
    __slots__ = ('index', 'offset', 'bytes')

    def __init__(self, index, offset, bytes):
        self.index = index    #: zero-based index of this record in the file
        self.offset = offset  #: the offset at which this record starts in the file
        self.bytes = bytes    #: the record itself (tag included) as a `bytes` object


class TtbinHeader:
    record_type = TTBIN_RECORD_HEADER
    name = 'header'

    __slots__ = (
        'tag', 'variant', 'file_format', 'version', 'timestamp', 'unknown1',
        'reserved', 'chunk')

    def __init__(self, tag, variant, file_format, version, timestamp,
                 unknown1, reserved, chunk):
        self.tag = tag  #: ``0x20``, or `None` if the header is not tagged
        self.variant = variant  #: `ttbindecode.SchemaVariant`
        self.file_format = file_format
        self.version = version  #: watch software version as a 4-tuple
        self.timestamp = timestamp  #: aware UTC `datetime.datetime`
        self.unknown1 = unknown1
        self.reserved = reserved  #: opaque `bytes`, never interpreted
        self.chunk = chunk  #: `TtbinChunk` or `None` (depends on ``keep_raw_chunks`` option)


class TtbinLap:
    record_type = TTBIN_RECORD_LAP
    name = 'lap'

    __slots__ = ('tag', 'lap', 'activity', 'activity_name', 'time', 'chunk')

    def __init__(self, tag, lap, activity, activity_name, time, chunk):
        self.tag = tag
        self.lap = lap
        self.activity = activity  #: raw activity code
        self.activity_name = activity_name  #: e.g. ``Run`` or ``Type 5``
        self.time = time
        self.chunk = chunk


class TtbinGps:
    """
    A GPS sample with a satellite fix.

    *distance* is the cumulative distance in meters. With
    `SchemaVariant.B`, it comes from a 16-bit field of decimeters, and
    *inc_distance* and *cycles* are `None` since that layout does not carry
    them.
    """

    record_type = TTBIN_RECORD_GPS
    name = 'gps'

    __slots__ = (
        'tag', 'variant', 'latitude', 'longitude', 'heading', 'speed', 'time',
        'calories', 'distance', 'inc_distance', 'cycles', 'chunk')

    def __init__(self, tag, variant, latitude, longitude, heading, speed, time,
                 calories, distance, inc_distance, cycles, chunk):
        self.tag = tag
        self.variant = variant
        self.latitude = latitude    #: degrees
        self.longitude = longitude  #: degrees
        self.heading = heading      #: degrees, 0 is North
        self.speed = speed          #: m/s
        self.time = time
        self.calories = calories
        self.distance = distance          #: meters
        self.inc_distance = inc_distance  #: meters, may be `None`
        self.cycles = cycles              #: steps or cycles, may be `None`
        self.chunk = chunk

    @property
    def has_fix(self):
        return True


class TtbinGpsNoFix:
    """A GPS record written while the watch had no satellite lock."""

    record_type = TTBIN_RECORD_GPS_NOFIX
    name = 'gps_nofix'

    __slots__ = ('tag', 'variant', 'chunk')

    def __init__(self, tag, variant, chunk):
        self.tag = tag
        self.variant = variant
        self.chunk = chunk

    @property
    def has_fix(self):
        return False


class TtbinHeartRate:
    record_type = TTBIN_RECORD_HEART_RATE
    name = 'heart_rate'

    __slots__ = ('tag', 'heart_rate', 'time', 'chunk')

    def __init__(self, tag, heart_rate, time, chunk):
        self.tag = tag
        self.heart_rate = heart_rate  #: beats per minute
        self.time = time
        self.chunk = chunk


class TtbinSummary:
    record_type = TTBIN_RECORD_SUMMARY
    name = 'summary'

    __slots__ = (
        'tag', 'activity', 'activity_name', 'distance', 'duration', 'calories',
        'chunk')

    def __init__(self, tag, activity, activity_name, distance, duration,
                 calories, chunk):
        self.tag = tag
        self.activity = activity
        self.activity_name = activity_name
        self.distance = distance  #: meters
        self.duration = duration  #: seconds, already corrected by one
        self.calories = calories
        self.chunk = chunk


class TtbinTreadmill:
    record_type = TTBIN_RECORD_TREADMILL
    name = 'treadmill'

    __slots__ = ('tag', 'time', 'distance', 'calories', 'steps', 'chunk')

    def __init__(self, tag, time, distance, calories, steps, chunk):
        self.tag = tag
        self.time = time
        self.distance = distance  #: meters
        self.calories = calories
        self.steps = steps
        self.chunk = chunk


class TtbinSwim:
    record_type = TTBIN_RECORD_SWIM
    name = 'swim'

    __slots__ = ('tag', 'time', 'calories', 'unknown', 'chunk')

    def __init__(self, tag, time, calories, unknown, chunk):
        self.tag = tag
        self.time = time
        self.calories = calories
        self.unknown = unknown  #: 14 `bytes`, kept verbatim
        self.chunk = chunk


class TtbinTimedEvent:
    record_type = TTBIN_RECORD_TIMED_EVENT
    name = 'timed_event'

    __slots__ = ('tag', 'unknown', 'time', 'chunk')

    def __init__(self, tag, unknown, time, chunk):
        self.tag = tag
        self.unknown = unknown  #: 2 `bytes`, kept verbatim
        self.time = time
        self.chunk = chunk


class TtbinRawDump:
    """
    A record which length is known but which fields are not.

    The record length table (tag ``0x16``) is delivered this way too.
    """

    record_type = TTBIN_RECORD_RAW

    __slots__ = ('tag', 'data', 'chunk')

    def __init__(self, tag, data, chunk):
        self.tag = tag
        self.data = data  #: the untouched payload
        self.chunk = chunk

    @property
    def name(self):
        return f'tag_{self.tag:02x}'

    @property
    def size(self):
        return len(self.data)


class TtbinUnknownTag:
    """
    A tag byte which payload length is unknown for the active schema.

    This is always the last record yielded by `ttbindecode.TtbinReader`
    since the rest of the stream cannot be located reliably.
    """

    record_type = TTBIN_RECORD_UNKNOWN
    name = 'unknown'

    __slots__ = ('tag', 'offset', 'chunk')

    def __init__(self, tag, offset, chunk):
        self.tag = tag
        self.offset = offset  #: file offset of the tag byte
        self.chunk = chunk
