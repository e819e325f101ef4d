"""Tests for the UDP OSC transport."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from avatarmenu.core.osc import AvatarOscTransport, RecordingTransport
from avatarmenu.core.params.models import BoolValue, FloatValue, IntValue


@pytest.fixture
def mock_client():
    with patch("avatarmenu.core.osc.udp.SimpleUDPClient") as client_cls:
        client = MagicMock()
        client_cls.return_value = client
        yield client_cls, client


def test_client_created_for_target(mock_client):
    client_cls, _ = mock_client

    transport = AvatarOscTransport("10.0.0.2", 9100)

    client_cls.assert_called_once_with("10.0.0.2", 9100)
    assert transport.target == "10.0.0.2:9100"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(BoolValue(value=True), True), (IntValue(value=7), 7), (FloatValue(value=0.25), 0.25)],
)
def test_send_uses_parameter_address(mock_client, value, expected):
    _, client = mock_client
    transport = AvatarOscTransport()

    assert transport.send("Hat_Toggle", value) is True
    client.send_message.assert_called_once_with("/avatar/parameters/Hat_Toggle", expected)


def test_custom_address_prefix(mock_client):
    _, client = mock_client
    transport = AvatarOscTransport(address_prefix="/test/")

    transport.send("Jump", BoolValue(value=False))

    client.send_message.assert_called_once_with("/test/Jump", False)


def test_send_failure_returns_false(mock_client, caplog):
    _, client = mock_client
    client.send_message.side_effect = OSError("Network is unreachable")
    transport = AvatarOscTransport()

    assert transport.send("Jump", BoolValue(value=True)) is False
    assert "Failed to send /avatar/parameters/Jump" in caplog.text


def test_recording_transport_records_sends():
    transport = RecordingTransport()

    transport.send("Jump", BoolValue(value=True))
    transport.send("VRCEmote", IntValue(value=2))

    assert transport.sent == [("Jump", BoolValue(value=True)), ("VRCEmote", IntValue(value=2))]


def test_recording_transport_can_fail():
    assert RecordingTransport(succeed=False).send("Jump", BoolValue()) is False
