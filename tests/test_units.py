#!/usr/bin/env python3
# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import datetime
import unittest

from ttbindecode import units

UTC = datetime.timezone.utc


class UnitsTestCase(unittest.TestCase):

    def test_geo_degrees(self):
        self.assertAlmostEqual(units.decode_geo_degrees(525000000), 52.5)
        self.assertAlmostEqual(units.decode_geo_degrees(-1225000000), -122.5)
        self.assertAlmostEqual(units.decode_geo_degrees(-1), -1e-7)
        self.assertEqual(units.decode_geo_degrees(0), 0.0)

    def test_speed_heading_decimeters(self):
        self.assertAlmostEqual(units.decode_speed(350), 3.5)
        self.assertAlmostEqual(units.decode_heading(9000), 90.0)
        self.assertAlmostEqual(units.decode_heading(0xffff), 655.35)
        self.assertAlmostEqual(units.decode_decimeters(12345), 1234.5)

    def test_epoch_utc(self):
        self.assertEqual(
            units.decode_epoch_utc(1700000000),
            datetime.datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC))
        self.assertEqual(units.decode_epoch_utc(0), units.EPOCH)

    def test_epoch_utc_does_not_fail_on_extreme_values(self):
        self.assertEqual(
            units.decode_epoch_utc(units.NO_FIX_TIME),
            datetime.datetime(2106, 2, 7, 6, 28, 15, tzinfo=UTC))

    def test_epoch_local_is_the_same_instant(self):
        for raw in (0, 1700000000, 0xffffffff):
            local = units.decode_epoch_local(raw)
            self.assertIsNotNone(local.tzinfo)
            self.assertEqual(local, units.decode_epoch_utc(raw))

    def test_activity_name(self):
        self.assertEqual(units.activity_name(0), 'Run')
        self.assertEqual(units.activity_name(1), 'Cycle')
        self.assertEqual(units.activity_name(2), 'Swim')
        self.assertEqual(units.activity_name(7), 'Treadmill')
        self.assertEqual(units.activity_name(99), 'Type 99')
        self.assertEqual(units.activity_name(3), 'Type 3')


if __name__ == '__main__':
    unittest.main()
