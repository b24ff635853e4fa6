"""Configuration for the event channel."""

from .base import BaseConfig
from .channel import ChannelConfig

__all__ = [
    "BaseConfig",
    "ChannelConfig",
]
