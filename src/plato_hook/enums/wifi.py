from enum import Enum


class WifiState(Enum):
    """Requested state of the device's Wi-Fi."""
    ENABLED = "enabled"
    DISABLED = "disabled"

    def as_enable_flag(self) -> bool:
        """Return the value sent in the ``enable`` field of a ``setWifi`` message."""
        return self is WifiState.ENABLED

    @classmethod
    def from_enable_flag(cls, enable: bool) -> "WifiState":
        """Return the state matching an ``enable`` field value."""
        return cls.ENABLED if enable else cls.DISABLED
