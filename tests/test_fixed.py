import pytest

from ansi_escapes import (
    FIXED_CODES,
    FixedCode,
    CursorLeft,
    CursorSavePosition,
    CursorRestorePosition,
    CursorGetPosition,
    CursorNextLine,
    CursorPrevLine,
    CursorHide,
    CursorShow,
    EraseEndLine,
    EraseStartLine,
    EraseLine,
    EraseDown,
    EraseUp,
    EraseScreen,
    ScrollUp,
    ScrollDown,
    ClearScreen,
    EnterAlternativeScreen,
    ExitAlternativeScreen,
    Beep,
)


EXPECTED = [
    (CursorLeft, "\x1b[1000D"),
    (CursorSavePosition, "\x1b[s"),
    (CursorRestorePosition, "\x1b[u"),
    (CursorGetPosition, "\x1b[6n"),
    (CursorNextLine, "\x1b[E"),
    (CursorPrevLine, "\x1b[F"),
    (CursorHide, "\x1b[?25l"),
    (CursorShow, "\x1b[?25h"),
    (EraseEndLine, "\x1b[K"),
    (EraseStartLine, "\x1b[1K"),
    (EraseLine, "\x1b[2K"),
    (EraseDown, "\x1b[J"),
    (EraseUp, "\x1b[1J"),
    (EraseScreen, "\x1b[2J"),
    (ScrollUp, "\x1b[S"),
    (ScrollDown, "\x1b[T"),
    (ClearScreen, "\x1bc"),
    (EnterAlternativeScreen, "\x1b[?1049h"),
    (ExitAlternativeScreen, "\x1b[?1049l"),
    (Beep, "\x07"),
]


def test_fixed_sequences():
    for code, expected in EXPECTED:
        assert code.render() == expected, f"{code.name} renders wrong"
        assert str(code) == expected
        assert f"{code}" == expected
        # Rendering again gives the same result
        assert code.render() == code.render()


def test_catalog_is_complete():
    assert len(FIXED_CODES) == len(EXPECTED)
    for code, _ in EXPECTED:
        assert isinstance(code, FixedCode)
        assert FIXED_CODES[code.name] is code
        assert code.description.endswith(".")


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        FIXED_CODES["CursorHide"] = None


def test_fixed_repr():
    assert repr(CursorHide) == "<CursorHide '\\x1b[?25l'>"


if __name__ == "__main__":
    test_fixed_sequences()
    test_catalog_is_complete()
    test_catalog_is_read_only()
    test_fixed_repr()
