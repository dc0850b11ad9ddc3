# Standard library
from typing import Collection

# Errors
from cryptopan.errors import InvalidAddressLength, InvalidAddressType


IPV4_LENGTH = 4
IPV6_LENGTH = 16
MAX_RAW_LENGTH = 16

_LENGTH_DESCRIPTIONS = {
    (IPV4_LENGTH,): "IPv4 address buffer must be 4 bytes (32 bits) in length",
    (IPV6_LENGTH,): "IPv6 address buffer must be 16 bytes (128 bits) in length",
    (IPV4_LENGTH, IPV6_LENGTH): (
        "IP address buffer must be 4 bytes (32 bits) in length for IPv4, "
        "or 16 bytes (128 bits) for IPv6"
    ),
}


def ensure_bytes(value, name: str = "address") -> None:
    """Reject anything that is not a genuine byte buffer.

    Text, integers and lists of integers are refused even when they could be
    coerced, since they almost always mean the caller skipped the codec.

    Args:
        value: Candidate buffer.
        name (str, optional): Argument name used in the message.

    Raises:
        InvalidAddressType: If `value` is not bytes or bytearray.
    """
    if not isinstance(value, (bytes, bytearray)):
        raise InvalidAddressType(f"'{name}' must be provided as bytes or bytearray, got {type(value).__name__}")


def ensure_length(value: bytes, allowed: Collection[int]) -> None:
    """Check that a buffer has one of the accepted lengths.

    Args:
        value (bytes): Buffer to check.
        allowed (Collection[int]): Accepted lengths.

    Raises:
        InvalidAddressLength: If the length is not accepted.
    """
    if len(value) in allowed:
        return
    description = _LENGTH_DESCRIPTIONS.get(
        tuple(sorted(allowed)),
        f"Address buffer must be one of {sorted(allowed)} bytes in length",
    )
    raise InvalidAddressLength(f"{description}, was {len(value)} bytes")


def ensure_raw_length(value: bytes) -> None:
    """Check a buffer against the 0..16 byte range of the raw transform."""
    if not 0 <= len(value) <= MAX_RAW_LENGTH:
        raise InvalidAddressLength(
            f"Buffer must be between 0 and {MAX_RAW_LENGTH} bytes (128 bits) in length, was {len(value)} bytes"
        )


def validate_ipv4(value) -> None:
    ensure_bytes(value)
    ensure_length(value, (IPV4_LENGTH,))


def validate_ipv6(value) -> None:
    ensure_bytes(value)
    ensure_length(value, (IPV6_LENGTH,))


def validate_ip(value) -> None:
    ensure_bytes(value)
    ensure_length(value, (IPV4_LENGTH, IPV6_LENGTH))


def validate_raw(value) -> None:
    ensure_bytes(value)
    ensure_raw_length(value)
