# Standard library
import ipaddress


def encode(ip_addr: str) -> bytes:
    """Convert IPv4 dotted-quad or IPv6 colon-hex text to packed bytes.

    Args:
        ip_addr (str): Address text, e.g. "192.0.2.1" or "2001:db8::1".

    Returns:
        bytes: 4 bytes for IPv4, 16 bytes for IPv6.

    Raises:
        ValueError: If the text is not a valid IP address.
    """
    return ipaddress.ip_address(ip_addr.strip()).packed


def decode(packed: bytes) -> str:
    """Convert 4 or 16 packed bytes back to address text.

    IPv6 addresses come back in compressed form ("2001:db8::1").

    Raises:
        ValueError: If the buffer is neither 4 nor 16 bytes long.
    """
    return str(ipaddress.ip_address(bytes(packed)))


def is_ipv4(ip_addr: str) -> bool:
    """Return True if the text is an IPv4 address, False for IPv6."""
    return ipaddress.ip_address(ip_addr.strip()).version == 4
