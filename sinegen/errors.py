class SinegenError(Exception):
    """Base class for errors raised by sinegen."""


class InvalidParameter(SinegenError, ValueError):
    """A generation parameter is out of range (duration, sample rate, frame)."""
