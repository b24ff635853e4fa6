"""JSON messaging between a fetch hook and the Plato host."""

from .channel import EventChannel
from .errors import ChannelError, ChannelReadError, ChannelWriteError, SerializationError
from .messages import NetworkEvent, NotificationRequest, WifiRequest

__all__ = [
    "ChannelError",
    "ChannelReadError",
    "ChannelWriteError",
    "EventChannel",
    "NetworkEvent",
    "NotificationRequest",
    "SerializationError",
    "WifiRequest",
]
