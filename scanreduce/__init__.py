# -*- coding: utf-8 -*
"""Scans and single-argument reduce, eager and lazy.

See ``dir(scanreduce)`` and submodule docstrings for more.
"""

__version__ = '0.1.0'

from .fold import *  # noqa: F401, F403
from .lazy import *  # noqa: F401, F403
