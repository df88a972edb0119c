from ._base import EscapeCode
from ._cursor import CursorUp
from ._fixed import CursorLeft, EraseEndLine
from .utils import as_count


class EraseLines(EscapeCode):
    """Erase from the current cursor position up the specified amount of rows.

    The count includes the current line. The cursor ends up at the start
    of the topmost erased line. A count of zero produces no output.
    """

    __slots__ = ("_n",)

    def __init__(self, n):
        self._init_attr("_n", as_count(n))

    @property
    def n(self):
        return self._n

    def render(self):
        up = CursorUp(1).render()
        erase = CursorLeft.render() + EraseEndLine.render()
        parts = []
        for idx in range(self._n):
            if idx > 0:
                parts.append(up)
            parts.append(erase)
        return "".join(parts)

    def _key(self):
        return self._n

    def _args(self):
        return (self._n,)

    def __repr__(self):
        return f"EraseLines({self._n})"
