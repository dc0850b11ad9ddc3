# Key material and block permutation
from cryptopan.errors import InvalidAddressLength
from cryptopan.key_material import derive_key_material
from cryptopan.permutation import PermutationFactory, aes128_permutation

# Utility Handlers
from utils.validation import (
    MAX_RAW_LENGTH,
    validate_ip,
    validate_ipv4,
    validate_ipv6,
    validate_raw,
)

# Configuration
from config.logging_config import logger

MSB_OF_BYTE_MASK = 0b1000_0000


def _mix(known_byte: int, padding_byte: int, known_bits: int) -> int:
    """Take the high `known_bits` bits from `known_byte` and the rest from `padding_byte`."""
    known_mask = (0xFF << (8 - known_bits)) & 0xFF
    return (known_byte & known_mask) | (padding_byte & ~known_mask & 0xFF)


class CryptoPAn:
    """Prefix-preserving pseudonymization of IPv4 and IPv6 addresses (Crypto-PAn).

    Two addresses sharing their first n bits are mapped to pseudonyms that
    also share their first n bits. The engine is immutable once built, so a
    single instance can serve any number of threads.
    """

    def __init__(self, key: bytes, permutation: PermutationFactory = aes128_permutation):
        """Derive the cipher key and padding block from a master key.

        Args:
            key (bytes): 32-byte master key.
            permutation (PermutationFactory, optional): Factory keying the
                128-bit block permutation. Defaults to AES-128.

        Raises:
            InvalidKeyType: If the key is not a byte sequence.
            InvalidKeyLength: If the key is not 32 bytes.
        """
        self._material = derive_key_material(key, permutation)
        permute_name = getattr(self._material.permute, "__name__", "custom")
        logger.debug(f"[CryptoPAn] Engine ready with {permute_name} permutation")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # ─── Pseudonymization ─────────────────────────────────────────────────

    def pseudonymize(self, address: bytes) -> bytes:
        """Pseudonymize a byte sequence of 0 to 16 bytes.

        Args:
            address (bytes): Raw bytes to transform.

        Returns:
            bytes: Pseudonym of the same length.

        Raises:
            InvalidAddressType: If `address` is not bytes or bytearray.
            InvalidAddressLength: If `address` is longer than 16 bytes.
        """
        validate_raw(address)
        return self._pseudonymize(address)

    def pseudonymize_ipv4(self, address: bytes) -> bytes:
        """Pseudonymize a 4-byte IPv4 address."""
        validate_ipv4(address)
        return self._pseudonymize(address)

    def pseudonymize_ipv6(self, address: bytes) -> bytes:
        """Pseudonymize a 16-byte IPv6 address."""
        validate_ipv6(address)
        return self._pseudonymize(address)

    def pseudonymize_ip(self, address: bytes) -> bytes:
        """Pseudonymize a 4-byte IPv4 or 16-byte IPv6 address."""
        validate_ip(address)
        return self._pseudonymize(address)

    # ─── De-pseudonymization ──────────────────────────────────────────────

    def depseudonymize(self, pseudonym: bytes) -> bytes:
        """Recover the original byte sequence from a pseudonym of 0 to 16 bytes.

        Args:
            pseudonym (bytes): Output of `pseudonymize` under the same key.

        Returns:
            bytes: The original bytes.

        Raises:
            InvalidAddressType: If `pseudonym` is not bytes or bytearray.
            InvalidAddressLength: If `pseudonym` is longer than 16 bytes.
        """
        validate_raw(pseudonym)
        return self._depseudonymize(pseudonym)

    def depseudonymize_ipv4(self, pseudonym: bytes) -> bytes:
        """Recover a 4-byte IPv4 address from its pseudonym."""
        validate_ipv4(pseudonym)
        return self._depseudonymize(pseudonym)

    def depseudonymize_ipv6(self, pseudonym: bytes) -> bytes:
        """Recover a 16-byte IPv6 address from its pseudonym."""
        validate_ipv6(pseudonym)
        return self._depseudonymize(pseudonym)

    def depseudonymize_ip(self, pseudonym: bytes) -> bytes:
        """Recover a 4-byte IPv4 or 16-byte IPv6 address from its pseudonym."""
        validate_ip(pseudonym)
        return self._depseudonymize(pseudonym)

    # ─── Bit-feedback transform ───────────────────────────────────────────

    @staticmethod
    def _check_length(data: bytes) -> None:
        # Precondition of the transform itself, independent of the public entry points.
        if len(data) > MAX_RAW_LENGTH:
            raise InvalidAddressLength(
                f"Buffer must be between 0 and {MAX_RAW_LENGTH} bytes (128 bits) in length, was {len(data)} bytes"
            )

    def _pseudonymize(self, original: bytes) -> bytes:
        """Build the one-time pad bit by bit from the original's prefixes and XOR it in.

        The cipher input for bit i holds the first i bits of `original`
        followed by the remaining bits of the padding block; the pad bit is
        the most significant bit of its encryption.
        """
        self._check_length(original)
        padding = self._material.padding
        permute = self._material.permute

        otp = bytearray(len(original))
        cipher_input = bytearray(padding)

        for position in range(len(original) * 8):
            byte_index, bit_index = position >> 3, position & 7
            cipher_output = permute(bytes(cipher_input))
            otp[byte_index] |= (cipher_output[0] & MSB_OF_BYTE_MASK) >> bit_index
            # Reveal one more original bit for the next position.
            cipher_input[byte_index] = _mix(original[byte_index], padding[byte_index], bit_index + 1)

        return bytes(o ^ p for o, p in zip(original, otp))

    def _depseudonymize(self, pseudonym: bytes) -> bytes:
        """Undo `_pseudonymize` in place, one bit at a time.

        Each recovered original bit is needed to build the cipher input for
        the next position, so the pad cannot be computed up front.
        """
        self._check_length(pseudonym)
        padding = self._material.padding
        permute = self._material.permute

        result = bytearray(pseudonym)
        cipher_input = bytearray(padding)

        for position in range(len(pseudonym) * 8):
            byte_index, bit_index = position >> 3, position & 7
            cipher_output = permute(bytes(cipher_input))
            result[byte_index] ^= (cipher_output[0] & MSB_OF_BYTE_MASK) >> bit_index
            cipher_input[byte_index] = _mix(result[byte_index], padding[byte_index], bit_index + 1)

        return bytes(result)
