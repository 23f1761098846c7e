#!/usr/bin/env python3
# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import argparse
import logging
import struct
import sys

import ttbindecode
from ttbindecode import units
from ttbindecode import utils

_logger = logging.getLogger('ttbintxt')

TIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def format_time(dt, *, local=False):
    if local:
        dt = units.to_local(dt)
    return dt.strftime(TIME_FORMAT)


def format_record(record, *, utc=False):
    """
    Return the text block describing *record*, trailing line break included.

    Header, lap, heart rate, treadmill and swim times are always rendered in
    UTC. GPS and ``0x35`` times are rendered in the local time zone unless *utc*
    is true.
    """
    local = not utc

    if isinstance(record, ttbindecode.TtbinHeader):
        return (
            f'[{format_time(record.timestamp)}] Header: '
            f'file format {record.file_format}, '
            f'watch version ({",".join(str(v) for v in record.version)})\n')

    if isinstance(record, ttbindecode.TtbinLap):
        return (
            f'[{format_time(record.time)}] Lap: {record.lap} '
            f'activity: {record.activity_name}\n')

    if isinstance(record, ttbindecode.TtbinGps):
        text = (
            f'[{format_time(record.time, local=local)}] GPS: '
            f'Lat: {record.latitude:f}, Long: {record.longitude:f}, '
            f'Speed: {record.speed:.2f} m/s, Cal: {record.calories}, '
            f'Distance: {record.distance:f} m')
        if record.inc_distance is not None:
            text += f' (+ {record.inc_distance:f} m)'
        if record.cycles is not None:
            text += f', Cycles: {record.cycles}'
        text += f'   Heading {record.heading:.2f}°'
        return '\n' + text + '\n\n'

    if isinstance(record, ttbindecode.TtbinGpsNoFix):
        return '\nNo GPS lock\n\n'

    if isinstance(record, ttbindecode.TtbinHeartRate):
        return (
            f'[{format_time(record.time)}] Heart BPM: {record.heart_rate}\n')

    if isinstance(record, ttbindecode.TtbinSummary):
        return (
            'Summary:\n'
            f'  Activity type: {record.activity_name}\n'
            f'  Distance {record.distance}m\n'
            f'  Duration: {record.duration} s\n'
            f'  Calories: {record.calories}\n')

    if isinstance(record, ttbindecode.TtbinTreadmill):
        return (
            f'[{format_time(record.time)}] Treadmill: '
            f'Distance: {record.distance:.2f} m  '
            f'Calories: {record.calories}  Steps: {record.steps}\n')

    if isinstance(record, ttbindecode.TtbinSwim):
        return (
            f'Swim: {format_time(record.time)} '
            f'Calories: {record.calories}\n' +
            utils.hexdump(record.unknown))

    if isinstance(record, ttbindecode.TtbinTimedEvent):
        return (
            f'Tag 0x{record.tag:02X}: '
            f'{record.unknown[0]:02X} {record.unknown[1]:02X}  '
            f'{format_time(record.time, local=local)}\n')

    if isinstance(record, ttbindecode.TtbinRawDump):
        if record.tag == ttbindecode.types.TAG_RECORD_LENGTHS:
            return 'Record lengths (ignored)\n'

        if record.tag == ttbindecode.types.TAG_23:
            u1, u2, u3 = struct.unpack_from('<HHB', record.data)
            return (
                f'Tag 0x{record.tag:02X}: {u1:04X}  {u2:04X}  {u3:02X}\n' +
                utils.hexdump(record.data))

        return f'Tag 0x{record.tag:02X}: ' + utils.hexdump(record.data)

    if isinstance(record, ttbindecode.TtbinUnknownTag):
        return f'Unknown tag: {record.tag:02X} at {record.offset}\n'

    raise TypeError(f'unexpected record type: {type(record)}')


def parse_args(args=None):
    parser = argparse.ArgumentParser(
        description='Dump a ttbin activity file in a human readable form',
        epilog='ttbindecode version ' + ttbindecode.__version__)

    parser.add_argument(
        'infile', metavar='TTBINFILE', type=argparse.FileType(mode='rb'),
        help='Input .ttbin file (use - for stdin)')

    parser.add_argument(
        '--variant', metavar='{auto,a,b}',
        type=ttbindecode.SchemaVariant.from_name, default=None,
        help=(
            'Schema variant of the file. Auto-detected from its first bytes '
            'by default.'))

    parser.add_argument(
        '--utc', action='store_true',
        help='Render GPS times in UTC instead of the local time zone.')

    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Log decoding details to stderr.')

    options = parser.parse_args(args)

    return options


def main(args=None):
    options = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s')

    try:
        with ttbindecode.TtbinReader(
                options.infile, variant=options.variant) as ttbin:
            for record in ttbin:
                sys.stdout.write(format_record(record, utc=options.utc))
    except ttbindecode.TtbinError as exc:
        _logger.error('%s: %s', options.infile.name, exc)
    finally:
        if options.infile is not sys.stdin.buffer:
            options.infile.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
