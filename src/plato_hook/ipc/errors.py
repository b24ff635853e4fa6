"""Errors raised by the event channel.

All of them are ``OSError`` subclasses, so callers that only care about
I/O failure can catch ``OSError``.
"""


class ChannelError(OSError):
    """Base class for event channel failures."""


class SerializationError(ChannelError):
    """An outbound message could not be turned into bytes."""


class ChannelWriteError(ChannelError):
    """The sink rejected or failed to accept bytes."""


class ChannelReadError(ChannelError):
    """The source failed or reached end of input."""
