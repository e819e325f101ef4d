"""UDP OSC transport for avatar parameters."""

from __future__ import annotations

from pythonosc.udp_client import SimpleUDPClient

from avatarmenu.core.osc.target import DEFAULT_HOST, DEFAULT_PORT
from avatarmenu.core.params.models import ParameterValue
from avatarmenu.core.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ADDRESS_PREFIX = "/avatar/parameters/"


class AvatarOscTransport:
    """Send parameter changes as OSC messages over UDP.

    Each value goes to ``<address_prefix><name>`` with a single float, int or
    bool argument.

    Example:
        >>> transport = AvatarOscTransport("127.0.0.1", 9000)
        >>> transport.send("Jump", BoolValue(value=True))
        True
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        address_prefix: str = DEFAULT_ADDRESS_PREFIX,
    ):
        self.host = host
        self.port = port
        self.address_prefix = address_prefix
        self._client = SimpleUDPClient(host, port)
        logger.info(f"OSC transport targeting {self.target}")

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"

    def address_for(self, name: str) -> str:
        return f"{self.address_prefix}{name}"

    def send(self, name: str, value: ParameterValue) -> bool:
        """Send one parameter value; network errors are reported as False."""
        address = self.address_for(name)
        try:
            self._client.send_message(address, value.value)
        except OSError as e:
            logger.warning(f"Failed to send {address} to {self.target}: {e}")
            return False

        logger.debug(f"Sent {address} = {value.value!r}")
        return True
