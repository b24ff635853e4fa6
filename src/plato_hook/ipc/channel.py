"""Event channel between a fetch hook and the Plato host over byte streams."""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from typing import Any, BinaryIO

from ..configs import ChannelConfig
from ..enums import WifiState
from .errors import ChannelReadError, ChannelWriteError, SerializationError
from .messages import NetworkEvent, NotificationRequest, WifiRequest

logger = logging.getLogger(__name__)


class EventChannel:
    """
    Writes host requests to a sink and reads network events from a source.

    The sink needs ``write(bytes)`` and may offer ``flush()``. The source needs
    ``readline()``. Both belong to the channel for its lifetime; there is no
    locking, so one caller at a time.
    """

    def __init__(self, sink: BinaryIO, source: BinaryIO, config: ChannelConfig | None = None):
        """
        Initialize the channel.
        Args:
            sink: Destination for outbound messages.
            source: Line-oriented origin of inbound events.
            config: Channel settings. Defaults to ChannelConfig().
        """
        self._sink = sink
        self._source = source
        self.config = config or ChannelConfig()

    @classmethod
    def stdio(cls, config: ChannelConfig | None = None) -> EventChannel:
        """Bind the channel to the process's stdout and stdin."""
        return cls(sys.stdout.buffer, sys.stdin.buffer, config)

    def emit_notification(self, message: str) -> None:
        """
        Ask the host to display a notification.
        Args:
            message: Text to show. Any content is allowed.
        Raises:
            TypeError: If ``message`` is not a string.
            SerializationError: If the message cannot be encoded.
            ChannelWriteError: If the sink fails.
        """
        self._send(NotificationRequest(message))

    def set_wifi_state(self, state: WifiState) -> None:
        """
        Ask the host to turn the Wi-Fi on or off.
        Args:
            state: The requested state.
        Raises:
            ValueError: If ``state`` is not a WifiState.
            ChannelWriteError: If the sink fails.
        """
        self._send(WifiRequest.for_state(state))

    def await_network_event(self) -> NetworkEvent:
        """
        Block until the host reports a network event.

        Lines that are not a JSON object with string ``type`` and ``status``
        fields are skipped, with no limit on how many. Text sources decode
        their own input, so a line that is not valid in their encoding fails
        inside ``readline()`` and raises ChannelReadError instead of being
        skipped. Pass a binary source to have such lines skipped.
        Returns:
            NetworkEvent: The first well-formed event.
        Raises:
            ChannelReadError: If the source fails or is closed.
        """
        while True:
            line = self._read_line()
            event = NetworkEvent.from_line(line, self.config.encoding)
            if event is not None:
                logger.debug("Received network event: %r", event)
                return event
            logger.debug("Discarding malformed input line: %r", line)

    async def await_network_event_async(self, timeout: float | None = None) -> NetworkEvent:
        """
        Wait for a network event without blocking the event loop.

        The read runs on a daemon thread. If ``timeout`` expires the thread is
        abandoned with its read still pending, so the channel must not be read
        from again.
        Args:
            timeout: Seconds to wait, or None to wait forever.
        Returns:
            NetworkEvent: The first well-formed event.
        Raises:
            asyncio.TimeoutError: If ``timeout`` expires first.
            ChannelReadError: If the source fails or is closed.
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[NetworkEvent] = loop.create_future()

        def _deliver(setter, value: Any) -> None:
            if not future.done():
                setter(value)

        def _run() -> None:
            try:
                event = self.await_network_event()
            except Exception as e:
                outcome = (future.set_exception, e)
            else:
                outcome = (future.set_result, event)
            try:
                loop.call_soon_threadsafe(_deliver, *outcome)
            except RuntimeError:
                logger.debug("Event loop closed before the read finished; dropping result")

        threading.Thread(target=_run, name="plato-hook-reader", daemon=True).start()
        return await asyncio.wait_for(future, timeout)

    def _send(self, request: NotificationRequest | WifiRequest) -> None:
        try:
            raw = (request.to_json() + self.config.message_terminator).encode(self.config.encoding)
        except (TypeError, ValueError) as e:
            # UnicodeEncodeError is a ValueError.
            raise SerializationError(f"Failed to serialize {request.kind} message: {e}") from e
        logger.debug("Sending %s message (%d bytes)", request.kind, len(raw))
        self._write_all(raw)

    def _write_all(self, raw: bytes) -> None:
        try:
            while raw:
                written = self._sink.write(raw)
                # Buffered sinks return the full length or None.
                if not isinstance(written, int) or written >= len(raw):
                    break
                if written == 0:
                    raise ChannelWriteError("Sink accepted no bytes")
                raw = raw[written:]
            if self.config.flush_writes and hasattr(self._sink, "flush"):
                self._sink.flush()
        except ChannelWriteError:
            raise
        except (OSError, ValueError) as e:
            logger.error("Failed to write to sink: %s", e)
            raise ChannelWriteError(f"Failed to write to sink: {e}") from e

    def _read_line(self) -> bytes | str:
        try:
            line = self._source.readline()
        except (OSError, ValueError) as e:
            logger.error("Failed to read from source: %s", e)
            raise ChannelReadError(f"Failed to read from source: {e}") from e
        if not line:
            raise ChannelReadError("Source closed before a network event was received")
        return line
