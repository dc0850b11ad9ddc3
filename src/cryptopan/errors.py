class CryptoPAnError(Exception):
    """Base class for every rejection raised by the pseudonymization engine."""


class InvalidKeyType(CryptoPAnError, TypeError):
    """The master key is not a byte sequence."""


class InvalidKeyLength(CryptoPAnError, ValueError):
    """The master key (or derived cipher key) has the wrong length."""


class InvalidAddressType(CryptoPAnError, TypeError):
    """The address is not a byte sequence."""


class InvalidAddressLength(CryptoPAnError, ValueError):
    """The address length is outside the set accepted by the entry point."""
