import logging
import operator


logger = logging.getLogger("ansi_escapes")
logger.addHandler(logging.NullHandler())


ESC = "\x1b"
CSI = ESC + "["
BEL = "\x07"


def as_count(value, name="n", unsigned=True):
    """Get the integer value of a count or delta.

    Accepts anything that implements ``__index__``, so bools and numpy
    integers are fine, but floats and strings are not. Unless unsigned
    is False, negative values raise a ValueError.
    """
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, not {type(value).__name__}"
        ) from None
    if unsigned and value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def enable_logging(level=logging.DEBUG, stream=None):
    """Send the log messages of this package to stderr (or the given stream)."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
