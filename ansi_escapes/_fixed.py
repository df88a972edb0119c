"""
Escape codes that take no parameters.

All of these are generated from the table below, so that there is a
single place where the actual sequences are defined.
"""

from types import MappingProxyType

from ._base import EscapeCode
from .utils import ESC, CSI, BEL


class FixedCode(EscapeCode):
    """An escape code that always renders the same sequence."""

    __slots__ = ("_name", "_sequence", "_description")

    def __init__(self, name, sequence, description=""):
        self._init_attr("_name", name)
        self._init_attr("_sequence", sequence)
        self._init_attr("_description", description)

    @property
    def name(self):
        return self._name

    @property
    def sequence(self):
        return self._sequence

    @property
    def description(self):
        return self._description

    def render(self):
        return self._sequence

    def _key(self):
        return self._sequence

    def _args(self):
        return (self._name, self._sequence, self._description)

    def __repr__(self):
        return f"<{self._name} {self._sequence!r}>"


# %% The table

# name -> (sequence, description)
_TABLE = {
    # Cursor
    "CursorLeft": (CSI + "1000D", "Move cursor to the left side."),
    "CursorSavePosition": (CSI + "s", "Save cursor position."),
    "CursorRestorePosition": (CSI + "u", "Restore saved cursor position."),
    "CursorGetPosition": (CSI + "6n", "Get cursor position."),
    "CursorNextLine": (CSI + "E", "Move cursor to the next line."),
    "CursorPrevLine": (CSI + "F", "Move cursor to the previous line."),
    "CursorHide": (CSI + "?25l", "Hide cursor."),
    "CursorShow": (CSI + "?25h", "Show cursor."),
    # Erasing lines
    "EraseEndLine": (
        CSI + "K",
        "Erase from the current cursor position to the end of the current line.",
    ),
    "EraseStartLine": (
        CSI + "1K",
        "Erase from the current cursor position to the start of the current line.",
    ),
    "EraseLine": (CSI + "2K", "Erase the entire current line."),
    # Erasing the screen
    "EraseDown": (
        CSI + "J",
        "Erase the screen from the current line down to the bottom of the screen.",
    ),
    "EraseUp": (
        CSI + "1J",
        "Erase the screen from the current line up to the top of the screen.",
    ),
    "EraseScreen": (
        CSI + "2J",
        "Erase the screen and move the cursor the top left position.",
    ),
    "ScrollUp": (CSI + "S", "Scroll display up one line."),
    "ScrollDown": (CSI + "T", "Scroll display down one line."),
    # Misc
    "ClearScreen": (ESC + "c", "Clear the terminal screen."),
    "EnterAlternativeScreen": (CSI + "?1049h", "Enter the alternative screen."),
    "ExitAlternativeScreen": (CSI + "?1049l", "Exit the alternative screen."),
    "Beep": (BEL, "Output a beeping sound."),
}

FIXED_CODES = MappingProxyType(
    {
        name: FixedCode(name, sequence, description)
        for name, (sequence, description) in _TABLE.items()
    }
)

globals().update(FIXED_CODES)

__all__ = ["FixedCode", "FIXED_CODES"] + list(FIXED_CODES)
