# Standard library
from dataclasses import dataclass, field

# Errors
from cryptopan.errors import InvalidKeyLength, InvalidKeyType

# Block permutation
from cryptopan.permutation import (
    BLOCK_SIZE,
    CIPHER_KEY_SIZE,
    BlockPermutation,
    PermutationFactory,
    aes128_permutation,
)


MASTER_KEY_SIZE = CIPHER_KEY_SIZE + BLOCK_SIZE


@dataclass(frozen=True)
class KeyMaterial:
    """Key-derived state fixed for the lifetime of an engine.

    Attributes:
        cipher_key (bytes): First half of the master key, keys the permutation.
        padding (bytes): Encryption of the second half of the master key.
        permute (BlockPermutation): The permutation keyed with `cipher_key`.
    """

    cipher_key: bytes = field(repr=False)
    padding: bytes = field(repr=False)
    permute: BlockPermutation = field(repr=False)


def derive_key_material(master_key: bytes, permutation: PermutationFactory = aes128_permutation) -> KeyMaterial:
    """Split a 32-byte master key into the cipher key and the padding block.

    The second half is encrypted once, as a single unpadded block, under the
    first half. Both halves are copied so later changes to a caller-owned
    buffer cannot reach the derived state.

    Args:
        master_key (bytes): 32-byte master secret.
        permutation (PermutationFactory, optional): Factory keying the block
            permutation. Defaults to AES-128.

    Returns:
        KeyMaterial: The derived, immutable key material.

    Raises:
        InvalidKeyType: If the key is not bytes or bytearray.
        InvalidKeyLength: If the key is not exactly 32 bytes.
    """
    if not isinstance(master_key, (bytes, bytearray)):
        raise InvalidKeyType(f"'key' must be bytes or bytearray, got {type(master_key).__name__}")
    if len(master_key) != MASTER_KEY_SIZE:
        raise InvalidKeyLength(
            f"'key' must be {MASTER_KEY_SIZE} bytes (256 bits) in length, was {len(master_key)} bytes"
        )

    cipher_key = bytes(master_key[:CIPHER_KEY_SIZE])
    padding_seed = bytes(master_key[CIPHER_KEY_SIZE:])

    permute = permutation(cipher_key)
    padding = permute(padding_seed)
    if len(padding) != BLOCK_SIZE:
        raise ValueError(f"Block permutation returned {len(padding)} bytes, expected {BLOCK_SIZE}")

    return KeyMaterial(cipher_key=cipher_key, padding=bytes(padding), permute=permute)
