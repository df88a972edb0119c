"""
ansi_escapes - ANSI escape codes for manipulating the terminal.

Every code is an immutable value that renders to its escape sequence.
Use ``str(code)``, an f-string, or ``code.write(file)``:

    print(f"{CursorHide}Hello", end="")
    EraseLines(2).write(sys.stdout)

Nothing is detected or read from the terminal; this package only
produces text.
"""

from .utils import ESC, CSI, BEL  # noqa
from ._base import EscapeCode, join  # noqa
from ._fixed import *  # noqa
from ._fixed import FixedCode, FIXED_CODES  # noqa
from ._cursor import (  # noqa
    CursorUp,
    CursorDown,
    CursorForward,
    CursorBackward,
    CursorTo,
    CursorMove,
)
from ._erase import EraseLines  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
