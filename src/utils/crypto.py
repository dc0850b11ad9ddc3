# Standard library
import base64
import binascii
import ipaddress

# Services
from cryptopan.engine import CryptoPAn

# Utility Handlers
from utils import ip_codec

# Configuration
from config import crypto_config
from config.logging_config import logger


def parse_master_key(value: str, encoding: str = "hex") -> bytes:
    """Decode the configured master key text.

    Args:
        value (str): Encoded key, as found in the environment.
        encoding (str, optional): "hex" or "base64". Defaults to "hex".

    Returns:
        bytes: The decoded key. Its length is checked by the engine.

    Raises:
        ValueError: If the encoding is unknown or the text does not decode.
    """
    try:
        if encoding == "hex":
            return bytes.fromhex(value.strip())
        if encoding == "base64":
            return base64.b64decode(value.strip(), validate=True)
    except (ValueError, binascii.Error) as e:
        raise ValueError(f"CRYPTOPAN_KEY is not valid {encoding}: {e}") from e
    raise ValueError(f"Unsupported CRYPTOPAN_KEY_ENCODING '{encoding}' (expected 'hex' or 'base64')")


if crypto_config.CRYPTOPAN_KEY is None:
    raise ValueError("CRYPTOPAN_KEY not found in environment variables")

# Create the engine from environment
key = parse_master_key(crypto_config.CRYPTOPAN_KEY, crypto_config.CRYPTOPAN_KEY_ENCODING)
engine = CryptoPAn(key)


def encrypt_ip(ip_addr: str) -> str:
    """Pseudonymize an IPv4 or IPv6 address, preserving shared prefixes.

    Args:
        ip_addr (str): The plaintext address (e.g., "192.168.0.1").

    Returns:
        str: The pseudonymized address, in the same family.
    """
    try:
        return ip_codec.decode(engine.pseudonymize_ip(ip_codec.encode(ip_addr)))
    except ValueError as e:
        logger.error(f"[crypto] Failed to encrypt address: {e}")
        raise


def decrypt_ip(encrypted_ip: str) -> str:
    """Recover the original address from a pseudonymized one.

    Args:
        encrypted_ip (str): An address produced by `encrypt_ip` under the same key.

    Returns:
        str: The original plaintext address.
    """
    try:
        return ip_codec.decode(engine.depseudonymize_ip(ip_codec.encode(encrypted_ip)))
    except ValueError as e:
        logger.error(f"[crypto] Failed to decrypt address: {e}")
        raise


def encrypt_cidr(cidr: str) -> str:
    """Map a CIDR block to its pseudonymized block of the same size.

    Every address inside `cidr` pseudonymizes to an address inside the
    returned block.

    Args:
        cidr (str): CIDR block (e.g., "192.168.1.0/24"). Host bits are ignored.

    Returns:
        str: The pseudonymized block, e.g. "61.43.7.0/24".
    """
    try:
        network = ipaddress.ip_network(cidr.strip(), strict=False)
        pseudonym = engine.pseudonymize_ip(network.network_address.packed)
        return str(ipaddress.ip_network((ip_codec.decode(pseudonym), network.prefixlen), strict=False))
    except ValueError as e:
        logger.error(f"[crypto] Failed to encrypt block '{cidr}': {e}")
        raise
