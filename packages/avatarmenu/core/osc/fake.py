"""In-memory transport for dry runs and tests."""

from __future__ import annotations

from avatarmenu.core.params.models import ParameterValue


class RecordingTransport:
    """Transport that records every send instead of touching the network.

    Args:
        succeed: Value returned from every send
    """

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.sent: list[tuple[str, ParameterValue]] = []

    def send(self, name: str, value: ParameterValue) -> bool:
        self.sent.append((name, value))
        return self.succeed
