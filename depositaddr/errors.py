"""Exceptions raised by deposit address derivation."""


class DepositAddressError(Exception):
    """Base class for all derivation failures."""


class InvalidInput(DepositAddressError):
    """A field has the wrong length or could not be decoded."""


class InvalidKey(DepositAddressError):
    """Public key bytes do not decode to a secp256k1 point."""


class InvalidTweak(DepositAddressError):
    """Tweak digest is not a usable scalar, or the tweaked key is the point at infinity."""


class AddressEncodingError(DepositAddressError):
    """The segwit encoder rejected a tweaked key."""


class HasherConsumed(DepositAddressError):
    """A tagged hasher was used after its digest was taken."""
