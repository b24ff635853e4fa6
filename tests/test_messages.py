import json

import pytest
from plato_hook.enums import WifiState
from plato_hook.ipc.messages import NetworkEvent, NotificationRequest, WifiRequest


def test_notification_json_is_compact_and_ordered():
    assert NotificationRequest("Hello, World!").to_json() == '{"type":"notify","message":"Hello, World!"}'


def test_notification_escapes_json_but_keeps_unicode():
    text = NotificationRequest('Say "hi"\nnaïve ✓').to_json()
    assert text == '{"type":"notify","message":"Say \\"hi\\"\\nnaïve ✓"}'
    assert json.loads(text)["message"] == 'Say "hi"\nnaïve ✓'


def test_notification_rejects_non_text():
    with pytest.raises(TypeError, match="must be str"):
        NotificationRequest(42)


def test_notification_kind_is_fixed():
    with pytest.raises(TypeError):
        NotificationRequest("hi", kind="setWifi")


@pytest.mark.parametrize(
    "state, expected",
    [
        (WifiState.ENABLED, '{"type":"setWifi","enable":true}'),
        (WifiState.DISABLED, '{"type":"setWifi","enable":false}'),
        ("enabled", '{"type":"setWifi","enable":true}'),
    ],
)
def test_wifi_request_json(state, expected):
    assert WifiRequest.for_state(state).to_json() == expected


def test_wifi_request_rejects_unknown_state():
    with pytest.raises(ValueError):
        WifiRequest.for_state(True)


def test_network_event_from_line_with_spaces_and_newline():
    """Matches the original library's round-trip case."""
    event = NetworkEvent.from_line(b'{"type": "network", "status": "up"}\n')
    assert event == NetworkEvent(kind="network", status="up")


def test_network_event_round_trip():
    event = NetworkEvent(kind="network", status="down")
    assert NetworkEvent.from_line(json.dumps(event.to_dict())) == event


def test_network_event_ignores_extra_fields():
    event = NetworkEvent.from_line('{"type":"network","status":"up","ssid":"home"}')
    assert event == NetworkEvent(kind="network", status="up")


@pytest.mark.parametrize(
    "line",
    [
        b"",
        b"\n",
        b"not json\n",
        b"{}\n",
        b"[]\n",
        b'"network"\n',
        b'{"type":"network"}\n',
        b'{"status":"up"}\n',
        b'{"type":1,"status":"up"}\n',
        b'{"type":"network","status":null}\n',
        b"\xff\xfe\n",
        b"[" * 100000 + b"\n",
        b"1" * 5000 + b"\n",
    ],
)
def test_network_event_rejects_malformed(line):
    assert NetworkEvent.from_line(line) is None


def test_network_event_ignores_oversized_extra_field():
    line = b'{"type":"network","status":"up","n":' + b"9" * 5000 + b"}\n"
    assert NetworkEvent.from_line(line) == NetworkEvent(kind="network", status="up")
