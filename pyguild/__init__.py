"""
Guild Chat API Wrapper
~~~~~~~~~~~~~~~~~~~~~~

An entity cache and REST wrapper for a guild-based chat API.

:copyright: (c) 2024-present MCausc78
:license: MIT, see LICENSE for more details.

"""

from . import (
    routes as routes,
    utils as utils,
)

from .actions import *
from .application_command import *
from .audit_logs import *
from .base import *
from .channel import *
from .client import *
from .collection import *
from .collectors import *
from .core import *
from .enums import *
from .errors import *
from .events import *
from .flags import *
from .gateway import *
from .guild import *
from .http import *
from .interaction import *
from .invite import *
from .managers import *
from .message import *
from .parser import *
from .permissions import *
from .presence import *
from .stage_instance import *
from .state import *
from .sticker import *
from .user import *
from .utils import *
from .voice import *
from .webhook import *

import typing

if typing.TYPE_CHECKING:
    from . import raw as raw

del typing
