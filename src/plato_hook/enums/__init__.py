from .wifi import WifiState

__all__ = ["WifiState"]
