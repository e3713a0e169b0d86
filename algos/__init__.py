# -*- coding: utf-8 -*
"""Generic sequence algorithms, cursors and lazy sequence adaptors.

See ``dir(algos)`` and submodule docstrings for more.

**CAUTION**: ``from algos import *`` shadows the builtin ``zip`` with
``algos.zipper.zip`` (which takes exactly two inputs).
"""

__version__ = '0.1.0'

from .algorithms import *  # noqa: F401, F403
from .cursor import *  # noqa: F401, F403
from .numutil import *  # noqa: F401, F403
from .ranges import *  # noqa: F401, F403
from .zipper import *  # noqa: F401, F403
