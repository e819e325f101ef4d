"""Protocol for outbound parameter transports."""

from typing import Protocol

from avatarmenu.core.params.models import ParameterValue


class ParameterTransport(Protocol):
    """Sends single parameter changes to the avatar host.

    Implementations send exactly one message per call and never batch.
    """

    def send(self, name: str, value: ParameterValue) -> bool:
        """Send one parameter value.

        Args:
            name: Normalized parameter name
            value: Typed value to send

        Returns:
            True if the message was handed to the network, False otherwise
        """
        ...
