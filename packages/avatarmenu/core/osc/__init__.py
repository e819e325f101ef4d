"""Outbound OSC transport for avatar parameters."""

from avatarmenu.core.osc.fake import RecordingTransport
from avatarmenu.core.osc.protocols import ParameterTransport
from avatarmenu.core.osc.target import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TARGET, parse_target
from avatarmenu.core.osc.udp import DEFAULT_ADDRESS_PREFIX, AvatarOscTransport

__all__ = [
    "DEFAULT_ADDRESS_PREFIX",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_TARGET",
    "AvatarOscTransport",
    "ParameterTransport",
    "RecordingTransport",
    "parse_target",
]
