# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

from sys import version_info
if version_info < (3, 6):
    raise ImportError('ttbindecode requires Python 3.6+')
del version_info

from .__version__ import (
    __version__, version_info,
    __title__, __fancy_title__, __description__,
    __license__, __author__, __copyright__)

from .exceptions import *
from .types import *
from .records import *
from .reader import *
from .decoder import *

from . import codec
from . import reader
from . import schema
from . import types
from . import units
from . import utils
