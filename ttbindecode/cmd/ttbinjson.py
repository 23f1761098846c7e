#!/usr/bin/env python3
# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import argparse
from collections import OrderedDict
import datetime
import json
import logging
import types
import sys

import ttbindecode

_logger = logging.getLogger('ttbinjson')


class RecordJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, types.GeneratorType):
            return list(obj)

        if isinstance(obj, datetime.datetime):
            return obj.isoformat()

        if isinstance(obj, (bytes, bytearray)):
            return obj.hex()

        if isinstance(obj, ttbindecode.SchemaVariant):
            return obj.name

        if isinstance(obj, ttbindecode.TtbinChunk):
            return OrderedDict((
                ('index', obj.index),
                ('offset', obj.offset),
                ('size', len(obj.bytes))))

        if hasattr(obj, 'record_type'):
            result = OrderedDict((
                ('record_type', obj.name),
                ('tag', f'{obj.tag:#04x}' if obj.tag is not None else None)))
            for slot in type(obj).__slots__:
                if slot not in ('tag', 'chunk'):
                    result[slot] = getattr(obj, slot)
            if isinstance(obj, ttbindecode.TtbinRawDump):
                result['size'] = obj.size
            result['chunk'] = obj.chunk
            return result

        # fall back to original to raise a TypeError
        return super().default(obj)


def parse_args(args=None):
    parser = argparse.ArgumentParser(
        description='Dump a ttbin activity file to JSON format',
        epilog='ttbindecode version ' + ttbindecode.__version__)

    parser.add_argument(
        '-o', '--output', type=argparse.FileType(mode='wt', encoding='utf-8'),
        default='-',
        help='File to output data into (defaults to stdout)')

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
        '-f', '--filter', action='append',
        help=(
            'Record name(s) (e.g. gps, heart_rate, tag_26) to filter-in ' +
            '(other records are then ignored).'))

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

    records = []

    try:
        with ttbindecode.TtbinReader(
                options.infile,
                variant=options.variant,
                keep_raw_chunks=True) as ttbin:
            for record in ttbin:
                if options.filter and record.name not in options.filter:
                    continue

                records.append(record)
    except ttbindecode.TtbinError as exc:
        _logger.error(
            'the following error occurred while decoding %s, output might be '
            'incomplete: %s', options.infile.name, exc)
    finally:
        if options.infile is not sys.stdin.buffer:
            options.infile.close()

    json.dump(records, fp=options.output, cls=RecordJSONEncoder)
    if options.output is not sys.stdout:
        options.output.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
