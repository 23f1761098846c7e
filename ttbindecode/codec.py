# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

"""
Fixed byte layouts of ttbin records, and the functions that turn them into
`ttbindecode.records` objects.

A layout is a little-endian `struct` format (``<`` prefix: standard sizes, no
padding), so field offsets only depend on the format string, never on the
host. Lengths below exclude the tag byte::

    tag   name          variant A  variant B
    ----  ------------  ---------  ---------
    0x20  header        116        117 (untagged, see HEADER_CODEC_B)
    0x16  rec. lengths  69         -
    0x21  lap           6          6
    0x22  gps           27         20
    0x23  tag_23        19         19
    0x25  heart_rate    6          6
    0x26  tag_26        6          6
    0x27  summary       16         16
    0x30  tag_30        2          2
    0x32  treadmill     18         18
    0x34  swim          22         22
    0x35  timed_event   6          6
    0x37  tag_37        1          1
"""

import struct

from .exceptions import TtbinEOFError
from .types import SchemaVariant
from . import records
from . import types
from . import units

__all__ = [
    'Codec', 'CODECS_A', 'CODECS_B', 'HEADER_CODEC_A', 'HEADER_CODEC_B',
    'get_codecs']


class Codec:
    """
    Pairs the fixed layout of a record with the function building the record
    object from the unpacked values.

    Decoding only extracts and converts fields; reading bytes from the stream
    is `ttbindecode.TtbinReader`'s job.
    """

    __slots__ = ('tag', 'name', 'size', '_unpacker', '_builder')

    def __init__(self, tag, name, fmt, builder):
        self.tag = tag
        self.name = name
        self._unpacker = struct.Struct(fmt)
        self.size = self._unpacker.size
        self._builder = builder

    def __repr__(self):
        tag = 'untagged' if self.tag is None else f'{self.tag:#04x}'
        return f'<Codec {self.name} {tag} size={self.size}>'

    def decode(self, data, *, offset=0, chunk=None):
        """
        Decode the first `size` bytes of *data* and return a record object.

        `TtbinEOFError` is raised if *data* is too short, in which case
        *offset* is reported as the place reading took place from.
        """
        if len(data) < self.size:
            raise TtbinEOFError(self.tag, self.size, len(data), offset)

        values = self._unpacker.unpack_from(data)
        return self._builder(self.tag, values, bytes(data[:self.size]), chunk)


def _header_builder(variant):
    def _build(tag, values, data, chunk):
        file_format, v0, v1, v2, v3, unknown1, timestamp, reserved = values
        return records.TtbinHeader(
            tag=tag,
            variant=variant,
            file_format=file_format,
            version=(v0, v1, v2, v3),
            timestamp=units.decode_epoch_utc(timestamp),
            unknown1=unknown1,
            reserved=reserved,
            chunk=chunk)

    return _build


def _build_gps_a(tag, values, data, chunk):
    (lat, lon, heading, speed, time, calories, inc_distance, cum_distance,
     cycles) = values

    if time == units.NO_FIX_TIME:
        return records.TtbinGpsNoFix(tag, SchemaVariant.A, chunk)

    return records.TtbinGps(
        tag=tag,
        variant=SchemaVariant.A,
        latitude=units.decode_geo_degrees(lat),
        longitude=units.decode_geo_degrees(lon),
        heading=units.decode_heading(heading),
        speed=units.decode_speed(speed),
        time=units.decode_epoch_utc(time),
        calories=calories,
        distance=cum_distance,
        inc_distance=inc_distance,
        cycles=cycles,
        chunk=chunk)


def _build_gps_b(tag, values, data, chunk):
    lat, lon, heading, speed, time, calories, distance = values

    if time == units.NO_FIX_TIME:
        return records.TtbinGpsNoFix(tag, SchemaVariant.B, chunk)

    return records.TtbinGps(
        tag=tag,
        variant=SchemaVariant.B,
        latitude=units.decode_geo_degrees(lat),
        longitude=units.decode_geo_degrees(lon),
        heading=units.decode_heading(heading),
        speed=units.decode_speed(speed),
        time=units.decode_epoch_utc(time),
        calories=calories,
        distance=units.decode_decimeters(distance),
        inc_distance=None,
        cycles=None,
        chunk=chunk)


def _build_heart_rate_a(tag, values, data, chunk):
    heart_rate, _, time = values
    return records.TtbinHeartRate(
        tag, heart_rate, units.decode_epoch_utc(time), chunk)


def _build_heart_rate_b(tag, values, data, chunk):
    heart_rate, time = values
    return records.TtbinHeartRate(
        tag, heart_rate, units.decode_epoch_utc(time), chunk)


def _build_lap(tag, values, data, chunk):
    lap, activity, time = values
    return records.TtbinLap(
        tag, lap, activity, units.activity_name(activity),
        units.decode_epoch_utc(time), chunk)


def _build_summary(tag, values, data, chunk):
    activity, distance, duration, calories = values

    # the watch stores the duration minus one second
    return records.TtbinSummary(
        tag, activity, units.activity_name(activity), distance, duration + 1,
        calories, chunk)


def _build_treadmill(tag, values, data, chunk):
    time, distance, calories, steps, _ = values
    return records.TtbinTreadmill(
        tag, units.decode_epoch_utc(time), distance, calories, steps, chunk)


def _build_swim(tag, values, data, chunk):
    time, unknown, calories = values
    return records.TtbinSwim(
        tag, units.decode_epoch_utc(time), calories, unknown, chunk)


def _build_timed_event(tag, values, data, chunk):
    unknown, time = values
    return records.TtbinTimedEvent(
        tag, unknown, units.decode_epoch_utc(time), chunk)


def _build_raw(tag, values, data, chunk):
    return records.TtbinRawDump(tag, data, chunk)


def _raw_codec(tag, size):
    return Codec(tag, f'tag_{tag:02x}', f'<{size}s', _build_raw)


def _codec_table(*codecs):
    return {codec.tag: codec for codec in codecs}


_COMMON_CODECS = (
    Codec(types.TAG_LAP, 'lap', '<BBI', _build_lap),
    _raw_codec(types.TAG_23, 19),
    _raw_codec(types.TAG_26, 6),
    Codec(types.TAG_SUMMARY, 'summary', '<4I', _build_summary),
    _raw_codec(types.TAG_30, 2),
    Codec(types.TAG_TREADMILL, 'treadmill', '<IfIIH', _build_treadmill),
    Codec(types.TAG_SWIM, 'swim', '<I14sI', _build_swim),
    Codec(types.TAG_TIMED_EVENT, 'timed_event', '<2sI', _build_timed_event),
    _raw_codec(types.TAG_37, 1))

#: file_format, version[4], unknown1, timestamp, reserved[105]
HEADER_CODEC_A = Codec(
    types.TAG_HEADER, 'header', '<B4BHI105s',
    _header_builder(SchemaVariant.A))

#: Same as `HEADER_CODEC_A` but with a 16-bit file_format, and no tag since
#: this block is consumed once, before any tag dispatch
HEADER_CODEC_B = Codec(
    None, 'header', '<H4BHI105s', _header_builder(SchemaVariant.B))

CODECS_A = _codec_table(
    HEADER_CODEC_A,
    # one {uint8 tag; uint16 length + 1} entry per tag, kept opaque
    _raw_codec(types.TAG_RECORD_LENGTHS, 69),
    # lat, lon, heading, speed, time, calories, inc_distance, cum_distance,
    # cycles
    Codec(types.TAG_GPS, 'gps', '<iiHHIHffB', _build_gps_a),
    # heart_rate, unknown, time
    Codec(types.TAG_HEART_RATE, 'heart_rate', '<BBI', _build_heart_rate_a),
    *_COMMON_CODECS)

CODECS_B = _codec_table(
    # lat, lon, heading, speed, time, calories, distance (dm)
    Codec(types.TAG_GPS, 'gps', '<iiHHIHH', _build_gps_b),
    # heart_rate, time
    Codec(types.TAG_HEART_RATE, 'heart_rate', '<HI', _build_heart_rate_b),
    *_COMMON_CODECS)


def get_codecs(variant):
    """Return the tag-to-`Codec` mapping of the given `SchemaVariant`."""
    if variant is SchemaVariant.A:
        return CODECS_A
    if variant is SchemaVariant.B:
        return CODECS_B
    raise ValueError(f'not a schema variant: {variant!r}')
