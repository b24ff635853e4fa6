import codecs
from dataclasses import dataclass

from .base import BaseConfig

DEFAULT_ENCODING = "utf-8"


@dataclass
class ChannelConfig(BaseConfig):
    """
    Settings for an EventChannel.

    Attributes:
        encoding: Encoding of outbound bytes and inbound lines.
        message_terminator: Appended after each outbound JSON object. Empty by
            default; the host reads objects without a trailing newline.
        flush_writes: Flush the sink after every message when it supports it.
    """
    encoding: str = DEFAULT_ENCODING
    message_terminator: str = ""
    flush_writes: bool = True

    def __post_init__(self):
        # Fail here rather than on the first write.
        codecs.lookup(self.encoding)
        if not isinstance(self.message_terminator, str):
            raise TypeError("message_terminator must be a string")
