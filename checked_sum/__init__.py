"""Top-level package for checked_sum.

Sum iterables of fixed-width integers, or any type with overflow-checked
addition, getting ``None`` instead of a wrapped value when the total does not
fit.
"""

import logging

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "cli",
    "core",
    *_core_all,
]
