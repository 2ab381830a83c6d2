"""
The entire public API is available at root level::

    from funcbox import Pipe, With, partial, PLACEHOLDER, pick, when, ...
"""
import logging

from . import containers, text, util
from .containers import *  # noqa
from .pipe import *  # noqa
from .placeholder import *  # noqa
from .text import *  # noqa
from .util import *  # noqa
from .wrap import *  # noqa

__version__ = __import__("importlib.metadata").metadata.version(__name__)
__all__ = ["containers", "text", "util"]

logging.getLogger(__name__).addHandler(logging.NullHandler())
