"""
Helpers for writing Plato fetch hooks.

A fetch hook is a helper process that talks to the Plato document reader
over its standard streams using JSON messages.
"""

from .enums import WifiState
from .ipc import EventChannel, NetworkEvent

__all__ = ["EventChannel", "NetworkEvent", "WifiState", "__version__"]

__version__ = "0.1.0"
