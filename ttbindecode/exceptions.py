# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

__all__ = ['TtbinError', 'TtbinSchemaError', 'TtbinEOFError']


class TtbinError(Exception):
    pass


class TtbinSchemaError(TtbinError):
    def __init__(self, leading, message=''):
        self.leading = bytes(leading)  #: the leading bytes that were inspected

        desc = 'unrecognized ttbin schema'
        if self.leading:
            desc += ' (leading bytes: ' + self.leading.hex(' ') + ')'
        if message:
            desc += ': ' + message

        super().__init__(desc)


class TtbinEOFError(TtbinError):
    def __init__(self, tag, expected, got, offset, message=''):
        self.tag = tag            #: record tag, `None` for a leading header
        self.expected = expected  #: number of expected bytes
        self.got = got            #: number of bytes read
        self.offset = offset  #: the file offset from which reading took place

        what = 'header' if tag is None else f'tag {tag:#04x}'
        desc = (
            f'truncated record ({what}): expected {self.expected} bytes, '
            f'got {self.got} @ {self.offset}')
        if not message:
            message = desc
        else:
            message += ' (' + desc + ')'

        super().__init__(message)
