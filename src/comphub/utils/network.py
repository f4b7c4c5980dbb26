"""LAN address discovery for the startup banner."""

from __future__ import annotations

import socket


def get_local_ip() -> str:
    """Best-effort IPv4 address of the interface used for outbound traffic.

    No packet is sent: connecting a UDP socket only selects a route.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.connect(("10.255.255.255", 1))
        address = sock.getsockname()[0]
    except OSError:
        return "localhost"
    finally:
        sock.close()
    if not address or address.startswith("127."):
        return "localhost"
    return address
