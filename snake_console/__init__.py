"""
Console Snake
Classic Snake for the terminal: a platform-independent engine in ``core``
and a curses front-end in ``terminal``.
"""

import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
