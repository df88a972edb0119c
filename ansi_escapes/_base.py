import sys
import logging

from .utils import logger


class EscapeCode:
    """Base class for all escape codes.

    An escape code is an immutable value that knows how to render
    itself to text. Subclasses implement ``render()`` and ``_key()``.
    """

    __slots__ = ()

    def render(self):
        """Get the escape sequence as a string."""
        raise NotImplementedError()

    def _key(self):
        raise NotImplementedError()

    def _args(self):
        # The arguments to pass to the constructor to recreate this code
        raise NotImplementedError()

    def write(self, file=None, flush=False):
        """Write the escape sequence to the given file (default sys.stdout).

        Errors raised by the file are propagated as-is.
        """
        file = sys.stdout if file is None else file
        text = self.render()
        debug = logger.isEnabledFor(logging.DEBUG)
        if debug:
            logger.debug(f"write {self!r} to {id(file)}: {text!r}")
        try:
            file.write(text)
            if flush:
                file.flush()
        except Exception as err:
            if debug:
                logger.debug(f"writing {self!r} failed: {err}")
            raise

    def __str__(self):
        return self.render()

    def __format__(self, format_spec):
        return format(self.render(), format_spec)

    def __add__(self, other):
        if isinstance(other, (EscapeCode, str)):
            return self.render() + str(other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, str):
            return other + self.render()
        return NotImplemented

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    # Copying and pickling go via the constructor, since __setattr__ is blocked

    def __reduce__(self):
        return (type(self), self._args())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def _init_attr(self, name, value):
        # Bypass __setattr__, only to be used from __init__
        object.__setattr__(self, name, value)


def join(*codes):
    """Render the given codes (or strings) back to back."""
    return "".join(str(code) for code in codes)
