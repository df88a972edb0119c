"""
Escape codes to move the cursor around.
"""

from ._base import EscapeCode
from .utils import CSI, as_count


# %% Moving by a number of rows/columns


class _CursorStep(EscapeCode):
    """Move the cursor n cells in a fixed direction. n must not be negative."""

    __slots__ = ("_n",)
    _final = ""

    def __init__(self, n=1):
        self._init_attr("_n", as_count(n))

    @property
    def n(self):
        return self._n

    def render(self):
        return f"{CSI}{self._n}{self._final}"

    def _key(self):
        return self._n

    def _args(self):
        return (self._n,)

    def __repr__(self):
        return f"{type(self).__name__}({self._n})"


class CursorUp(_CursorStep):
    """Move cursor up a specific amount of rows."""

    __slots__ = ()
    _final = "A"


class CursorDown(_CursorStep):
    """Move cursor down a specific amount of rows."""

    __slots__ = ()
    _final = "B"


class CursorForward(_CursorStep):
    """Move cursor forward a specific amount of columns."""

    __slots__ = ()
    _final = "C"


class CursorBackward(_CursorStep):
    """Move cursor backward a specific amount of columns."""

    __slots__ = ()
    _final = "D"


# %% Positioning


class CursorTo(EscapeCode):
    """Set the absolute position of the cursor.

    Coordinates are zero-based, x=0 y=0 is the top left of the screen.

    * ``CursorTo()`` moves to the top left.
    * ``CursorTo(x)`` moves to column x, staying on the current row.
    * ``CursorTo(x, y)`` moves to column x and row y.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x=None, y=None):
        if x is None and y is not None:
            raise ValueError("CursorTo needs a column (x) when a row (y) is given.")
        self._init_attr("_x", None if x is None else as_count(x, "x"))
        self._init_attr("_y", None if y is None else as_count(y, "y"))

    @classmethod
    def top_left(cls):
        return cls()

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def render(self):
        x, y = self._x, self._y
        if x is None:
            return f"{CSI}1;1H"
        elif y is None:
            return f"{CSI}{x + 1}G"
        else:
            # Row goes first
            return f"{CSI}{y + 1};{x + 1}H"

    def _key(self):
        return (self._x, self._y)

    def _args(self):
        return (self._x, self._y)

    def __repr__(self):
        if self._x is None:
            return "CursorTo()"
        elif self._y is None:
            return f"CursorTo({self._x})"
        return f"CursorTo({self._x}, {self._y})"


class CursorMove(EscapeCode):
    """Set the position of the cursor relative to its current position.

    Positive x moves forward (right), positive y moves down. An axis
    with a zero delta produces no output. The horizontal move is always
    emitted before the vertical move.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x=0, y=0):
        self._init_attr("_x", as_count(x, "x", unsigned=False))
        self._init_attr("_y", as_count(y, "y", unsigned=False))

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def render(self):
        x, y = self._x, self._y
        parts = []
        if x > 0:
            parts.append(f"{CSI}{x}C")
        elif x < 0:
            parts.append(f"{CSI}{-x}D")
        if y > 0:
            parts.append(f"{CSI}{y}B")
        elif y < 0:
            parts.append(f"{CSI}{-y}A")
        return "".join(parts)

    def _key(self):
        return (self._x, self._y)

    def _args(self):
        return (self._x, self._y)

    def __repr__(self):
        return f"CursorMove({self._x}, {self._y})"
