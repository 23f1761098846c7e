#!/usr/bin/env python3
# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import datetime
import struct
import unittest

import ttbindecode
from ttbindecode import codec
from ttbindecode.types import SchemaVariant

TIME = 1700000000
TIME_DT = datetime.datetime(
    2023, 11, 14, 22, 13, 20, tzinfo=datetime.timezone.utc)

EXPECTED_CLASSES = {
    0x16: ttbindecode.TtbinRawDump,
    0x20: ttbindecode.TtbinHeader,
    0x21: ttbindecode.TtbinLap,
    0x22: ttbindecode.TtbinGps,
    0x23: ttbindecode.TtbinRawDump,
    0x25: ttbindecode.TtbinHeartRate,
    0x26: ttbindecode.TtbinRawDump,
    0x27: ttbindecode.TtbinSummary,
    0x30: ttbindecode.TtbinRawDump,
    0x32: ttbindecode.TtbinTreadmill,
    0x34: ttbindecode.TtbinSwim,
    0x35: ttbindecode.TtbinTimedEvent,
    0x37: ttbindecode.TtbinRawDump}

EXPECTED_SIZES_A = {
    0x16: 69, 0x20: 116, 0x21: 6, 0x22: 27, 0x23: 19, 0x25: 6, 0x26: 6,
    0x27: 16, 0x30: 2, 0x32: 18, 0x34: 22, 0x35: 6, 0x37: 1}

EXPECTED_SIZES_B = {
    0x21: 6, 0x22: 20, 0x23: 19, 0x25: 6, 0x26: 6, 0x27: 16, 0x30: 2,
    0x32: 18, 0x34: 22, 0x35: 6, 0x37: 1}


def _gps_a(lat=487654321, lon=23456789, heading=18000, speed=275, time=TIME,
           calories=12, inc_distance=2.5, cum_distance=1000.25, cycles=3):
    return struct.pack(
        '<iiHHIHffB', lat, lon, heading, speed, time, calories, inc_distance,
        cum_distance, cycles)


def _gps_b(lat=487654321, lon=23456789, heading=18000, speed=275, time=TIME,
           calories=12, distance=12345):
    return struct.pack(
        '<iiHHIHH', lat, lon, heading, speed, time, calories, distance)


class CodecTableTestCase(unittest.TestCase):

    def test_layout_sizes(self):
        self.assertEqual(
            {tag: c.size for tag, c in codec.CODECS_A.items()},
            EXPECTED_SIZES_A)
        self.assertEqual(
            {tag: c.size for tag, c in codec.CODECS_B.items()},
            EXPECTED_SIZES_B)
        self.assertEqual(codec.HEADER_CODEC_B.size, 117)
        self.assertIsNone(codec.HEADER_CODEC_B.tag)

    def test_exact_length_decodes(self):
        for variant in SchemaVariant:
            for tag, tag_codec in codec.get_codecs(variant).items():
                record = tag_codec.decode(bytes(tag_codec.size))
                self.assertIsInstance(
                    record, EXPECTED_CLASSES[tag],
                    msg=f'tag {tag:#04x}, variant {variant.name}')
                self.assertEqual(record.tag, tag)

        header = codec.HEADER_CODEC_B.decode(bytes(117))
        self.assertIsInstance(header, ttbindecode.TtbinHeader)

    def test_one_byte_short_is_truncated(self):
        all_codecs = [codec.HEADER_CODEC_B]
        for variant in SchemaVariant:
            all_codecs.extend(codec.get_codecs(variant).values())

        for tag_codec in all_codecs:
            with self.assertRaises(ttbindecode.TtbinEOFError) as cm:
                tag_codec.decode(bytes(tag_codec.size - 1), offset=42)
            self.assertEqual(cm.exception.tag, tag_codec.tag)
            self.assertEqual(cm.exception.expected, tag_codec.size)
            self.assertEqual(cm.exception.got, tag_codec.size - 1)
            self.assertEqual(cm.exception.offset, 42)

    def test_get_codecs(self):
        self.assertIs(codec.get_codecs(SchemaVariant.A), codec.CODECS_A)
        self.assertIs(codec.get_codecs(SchemaVariant.B), codec.CODECS_B)
        with self.assertRaises(ValueError):
            codec.get_codecs('a')

    def test_extra_bytes_are_ignored(self):
        tag_codec = codec.CODECS_A[0x26]
        record = tag_codec.decode(b'abcdefgh')
        self.assertEqual(record.data, b'abcdef')


class RecordCodecTestCase(unittest.TestCase):

    def test_header_a(self):
        data = struct.pack(
            '<B4BHI105s', 7, 1, 7, 4, 2, 0x1234, TIME, b'\xaa' * 105)
        header = codec.CODECS_A[0x20].decode(data)

        self.assertEqual(header.tag, 0x20)
        self.assertIs(header.variant, SchemaVariant.A)
        self.assertEqual(header.file_format, 7)
        self.assertEqual(header.version, (1, 7, 4, 2))
        self.assertEqual(header.unknown1, 0x1234)
        self.assertEqual(header.timestamp, TIME_DT)
        self.assertEqual(header.reserved, b'\xaa' * 105)

    def test_header_b(self):
        data = struct.pack('<H4BHI105s', 4, 1, 2, 3, 4, 0, TIME, bytes(105))
        header = codec.HEADER_CODEC_B.decode(data)

        self.assertIsNone(header.tag)
        self.assertIs(header.variant, SchemaVariant.B)
        self.assertEqual(header.file_format, 4)
        self.assertEqual(header.version, (1, 2, 3, 4))
        self.assertEqual(header.timestamp, TIME_DT)

    def test_gps_a(self):
        gps = codec.CODECS_A[0x22].decode(_gps_a())

        self.assertIsInstance(gps, ttbindecode.TtbinGps)
        self.assertTrue(gps.has_fix)
        self.assertIs(gps.variant, SchemaVariant.A)
        self.assertAlmostEqual(gps.latitude, 487654321 * 1e-7)
        self.assertAlmostEqual(gps.longitude, 2.3456789)
        self.assertAlmostEqual(gps.heading, 180.0)
        self.assertAlmostEqual(gps.speed, 2.75)
        self.assertEqual(gps.time, TIME_DT)
        self.assertEqual(gps.calories, 12)
        self.assertEqual(gps.distance, 1000.25)
        self.assertEqual(gps.inc_distance, 2.5)
        self.assertEqual(gps.cycles, 3)

    def test_gps_negative_coordinates(self):
        gps = codec.CODECS_A[0x22].decode(
            _gps_a(lat=-338688000, lon=-1512093000))
        self.assertAlmostEqual(gps.latitude, -33.8688)
        self.assertAlmostEqual(gps.longitude, -151.2093)

    def test_gps_b(self):
        gps = codec.CODECS_B[0x22].decode(_gps_b())

        self.assertIsInstance(gps, ttbindecode.TtbinGps)
        self.assertIs(gps.variant, SchemaVariant.B)
        self.assertAlmostEqual(gps.latitude, 48.7654321)
        self.assertAlmostEqual(gps.distance, 1234.5)
        self.assertIsNone(gps.inc_distance)
        self.assertIsNone(gps.cycles)

    def test_gps_no_fix(self):
        for data, variant in (
                (_gps_a(time=0xffffffff), SchemaVariant.A),
                (_gps_a(time=0xffffffff, lat=-1, speed=0xffff),
                 SchemaVariant.A),
                (_gps_b(time=0xffffffff), SchemaVariant.B)):
            gps = codec.get_codecs(variant)[0x22].decode(data)
            self.assertIsInstance(gps, ttbindecode.TtbinGpsNoFix)
            self.assertFalse(gps.has_fix)
            self.assertIs(gps.variant, variant)
            self.assertFalse(hasattr(gps, 'latitude'))

    def test_heart_rate_a(self):
        hr = codec.CODECS_A[0x25].decode(struct.pack('<BBI', 72, 0, TIME))
        self.assertEqual(hr.heart_rate, 72)
        self.assertEqual(hr.time, TIME_DT)

    def test_heart_rate_b_is_16_bits(self):
        hr = codec.CODECS_B[0x25].decode(struct.pack('<HI', 300, TIME))
        self.assertEqual(hr.heart_rate, 300)
        self.assertEqual(hr.time, TIME_DT)

    def test_lap(self):
        lap = codec.CODECS_A[0x21].decode(struct.pack('<BBI', 3, 1, TIME))
        self.assertEqual(lap.lap, 3)
        self.assertEqual(lap.activity, 1)
        self.assertEqual(lap.activity_name, 'Cycle')
        self.assertEqual(lap.time, TIME_DT)

    def test_summary_duration_is_off_by_one(self):
        summary = codec.CODECS_A[0x27].decode(
            struct.pack('<4I', 7, 5000, 1799, 400))
        self.assertEqual(summary.activity_name, 'Treadmill')
        self.assertEqual(summary.distance, 5000)
        self.assertEqual(summary.duration, 1800)
        self.assertEqual(summary.calories, 400)

        summary = codec.CODECS_B[0x27].decode(struct.pack('<4I', 99, 0, 0, 0))
        self.assertEqual(summary.activity, 99)
        self.assertEqual(summary.activity_name, 'Type 99')
        self.assertEqual(summary.duration, 1)

    def test_treadmill(self):
        treadmill = codec.CODECS_A[0x32].decode(
            struct.pack('<IfIIH', TIME, 1500.5, 120, 2000, 0))
        self.assertEqual(treadmill.time, TIME_DT)
        self.assertEqual(treadmill.distance, 1500.5)
        self.assertEqual(treadmill.calories, 120)
        self.assertEqual(treadmill.steps, 2000)

    def test_swim(self):
        swim = codec.CODECS_A[0x34].decode(
            struct.pack('<I14sI', TIME, bytes(range(14)), 55))
        self.assertEqual(swim.time, TIME_DT)
        self.assertEqual(swim.calories, 55)
        self.assertEqual(swim.unknown, bytes(range(14)))

    def test_timed_event(self):
        event = codec.CODECS_A[0x35].decode(
            struct.pack('<2sI', b'\x01\x02', TIME))
        self.assertEqual(event.unknown, b'\x01\x02')
        self.assertEqual(event.time, TIME_DT)

    def test_raw_dumps(self):
        for tag, size in ((0x16, 69), (0x23, 19), (0x26, 6), (0x30, 2),
                          (0x37, 1)):
            data = bytes(range(1, size + 1))
            record = codec.CODECS_A[tag].decode(data)
            self.assertEqual(record.data, data)
            self.assertEqual(record.size, size)
            self.assertEqual(record.name, f'tag_{tag:02x}')

    def test_chunk_is_passed_through(self):
        chunk = ttbindecode.TtbinChunk(3, 100, b'\x37\x01')
        record = codec.CODECS_A[0x37].decode(b'\x01', chunk=chunk)
        self.assertIs(record.chunk, chunk)


if __name__ == '__main__':
    unittest.main()
