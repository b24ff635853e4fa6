"""Message shapes exchanged with the Plato host."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..configs.channel import DEFAULT_ENCODING
from ..enums import WifiState

# Discriminator values understood by the host.
NOTIFY_TYPE = "notify"
SET_WIFI_TYPE = "setWifi"

TYPE_FIELD = "type"
MESSAGE_FIELD = "message"
ENABLE_FIELD = "enable"
STATUS_FIELD = "status"


def _lenient_int(digits: str) -> int | float:
    # Past the interpreter's int digit limit, fall back to float like serde does.
    try:
        return int(digits)
    except ValueError:
        return float(digits)


def _compact(payload: dict[str, Any]) -> str:
    # Non-ASCII text goes out as UTF-8 rather than \u escapes.
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class NotificationRequest:
    """Ask the host to display ``message`` on the device."""
    message: str
    kind: str = field(default=NOTIFY_TYPE, init=False)

    def __post_init__(self):
        if not isinstance(self.message, str):
            raise TypeError(
                f"Notification message must be str, got {type(self.message).__name__}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {TYPE_FIELD: self.kind, MESSAGE_FIELD: self.message}

    def to_json(self) -> str:
        return _compact(self.to_dict())


@dataclass(frozen=True)
class WifiRequest:
    """Ask the host to turn the Wi-Fi on or off."""
    enable: bool
    kind: str = field(default=SET_WIFI_TYPE, init=False)

    @classmethod
    def for_state(cls, state: WifiState | str) -> WifiRequest:
        """
        Build a request from a Wi-Fi state.
        Args:
            state: A WifiState, or its value ("enabled" / "disabled").
        Returns:
            WifiRequest: The request carrying the matching ``enable`` flag.
        Raises:
            ValueError: If ``state`` is not a valid Wi-Fi state.
        """
        return cls(enable=WifiState(state).as_enable_flag())

    def to_dict(self) -> dict[str, Any]:
        return {TYPE_FIELD: self.kind, ENABLE_FIELD: self.enable}

    def to_json(self) -> str:
        return _compact(self.to_dict())


@dataclass(frozen=True)
class NetworkEvent:
    """A network status change reported by the host.

    ``kind`` is whatever the host put in the ``type`` field; it is not
    checked against a fixed set of values.
    """
    kind: str
    status: str

    @classmethod
    def from_dict(cls, data: Any) -> NetworkEvent | None:
        """Return an event if ``data`` has string ``type`` and ``status`` fields."""
        if not isinstance(data, dict):
            return None
        kind = data.get(TYPE_FIELD)
        status = data.get(STATUS_FIELD)
        if not isinstance(kind, str) or not isinstance(status, str):
            return None
        return cls(kind=kind, status=status)

    @classmethod
    def from_line(
        cls, line: bytes | str, encoding: str = DEFAULT_ENCODING
    ) -> NetworkEvent | None:
        """
        Decode one input line.
        Args:
            line: The raw line, with or without its terminator.
            encoding: Encoding used when ``line`` is bytes.
        Returns:
            NetworkEvent | None: The event, or None if the line does not match.
        """
        try:
            text = line.decode(encoding) if isinstance(line, bytes) else line
            data = json.loads(text, parse_int=_lenient_int)
        except (ValueError, RecursionError):
            # ValueError covers UnicodeDecodeError and JSONDecodeError.
            return None
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {TYPE_FIELD: self.kind, STATUS_FIELD: self.status}
