# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

__version__ = '0.1.0'
version_info = (0, 1, 0)

__title__ = 'ttbindecode'
__fancy_title__ = 'ttbindecode'
__description__ = 'TomTom GPS watch ttbin activity file decoder'
__license__ = 'MIT'
__author__ = 'Jean-Charles Lefebvre'
__author_email__ = 'polyvertex@gmail.com'
__copyright__ = 'Copyright 2019 Jean-Charles Lefebvre'

__keywords__ = [
    'ttbin', 'tomtom', 'gps', 'watch', 'activity', 'parser', 'decode',
    'decoder']
