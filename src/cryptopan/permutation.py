# Standard library
from typing import Callable

# Services
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

# Errors
from cryptopan.errors import InvalidKeyLength


BLOCK_SIZE = 16
CIPHER_KEY_SIZE = 16

BlockPermutation = Callable[[bytes], bytes]
PermutationFactory = Callable[[bytes], BlockPermutation]


def aes128_permutation(cipher_key: bytes) -> BlockPermutation:
    """Key a raw single-block AES-128 encryption.

    Every call of the returned function opens its own ECB encryptor, so the
    keyed permutation holds no mutable cipher context and can be shared
    between threads.

    Args:
        cipher_key (bytes): 16-byte AES key.

    Returns:
        BlockPermutation: Function mapping one 16-byte block to another.

    Raises:
        InvalidKeyLength: If the key is not 16 bytes.
    """
    if len(cipher_key) != CIPHER_KEY_SIZE:
        raise InvalidKeyLength(
            f"Cipher key must be {CIPHER_KEY_SIZE} bytes (128 bits) in length, was {len(cipher_key)} bytes"
        )
    cipher = Cipher(algorithms.AES(bytes(cipher_key)), modes.ECB())  # noqa: S305

    def permute(block: bytes) -> bytes:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"Block must be {BLOCK_SIZE} bytes in length, was {len(block)} bytes")
        encryptor = cipher.encryptor()
        return encryptor.update(block) + encryptor.finalize()

    permute.__name__ = "aes128"
    return permute
