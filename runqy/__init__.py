r"""
'     _ __ _   _ _ __   __ _ _   _
'    | '__| | | | '_ \ / _` | | | |
'    | |  | |_| | | | | (_| | |_| |
'    |_|   \__,_|_| |_|\__, |\__, |
'                         |_||___/
"""

import logging

# expose the main class
from .enumerable import Enumerable

# expose the operators
from .extensions.grouping import group_consecutives_by
from .extensions.utility import do

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    P,
    p
)

# expose supporting data classes
from .types import Grouping

# the host application decides where log records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "group_consecutives_by",
    "do",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "P",
    "p",
    "Grouping"
]
