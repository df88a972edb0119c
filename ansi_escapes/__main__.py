import os
import sys
import time

# Enable importing also if not installed
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))


import ansi_escapes
from ansi_escapes.utils import enable_logging


def demo(file=None, delay=1.0):
    """Print a line, erase it, and print another one in its place."""
    file = sys.stdout if file is None else file

    ansi_escapes.CursorHide.write(file)
    try:
        file.write("Hello, World!\n")
        file.flush()
        time.sleep(delay)

        # Erase the printed line, and the empty line below it
        ansi_escapes.EraseLines(2).write(file)
        file.write("Hello, Terminal!\n")
    finally:
        ansi_escapes.CursorShow.write(file, flush=True)


# Special hooks exit early
if __name__ == "__main__" and len(sys.argv) >= 2:
    if sys.argv[1] in ("--version", "version"):
        print("ansi_escapes", ansi_escapes.__version__)
        sys.exit(0)


if __name__ == "__main__":
    if "--verbose" in sys.argv:
        enable_logging()
    demo()
