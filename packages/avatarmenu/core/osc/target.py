"""Parsing of ``host:port`` OSC targets."""

from __future__ import annotations

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9000
DEFAULT_TARGET = f"{DEFAULT_HOST}:{DEFAULT_PORT}"


def parse_target(target: str) -> tuple[str, int]:
    """Split an OSC target into host and port.

    An empty target means the local VRChat client on its default input port.

    Args:
        target: ``host:port`` string

    Returns:
        (host, port) tuple

    Raises:
        ValueError: If the target has no port or the port is not in 1..65535

    Example:
        >>> parse_target("192.168.1.20:9000")
        ('192.168.1.20', 9000)
        >>> parse_target("")
        ('127.0.0.1', 9000)
    """
    target = target.strip()
    if not target:
        return DEFAULT_HOST, DEFAULT_PORT

    host, sep, port_text = target.rpartition(":")
    if not sep or not host:
        raise ValueError(f"OSC target must be host:port, got {target!r}")

    try:
        port = int(port_text)
    except ValueError as e:
        raise ValueError(f"Invalid OSC port in {target!r}") from e

    if not 0 < port < 65536:
        raise ValueError(f"OSC port out of range in {target!r}")

    return host, port
