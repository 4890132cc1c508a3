"""Public key tweaking on secp256k1.

The tweak scalar for a public key ``P`` and a 32-byte value ``tweak`` is::

    t := int(tagged_hash("SegwitTweak", compressed(P) || tweak))

and the tweaked key is ``P + t*G`` for the canonical generator ``G``.
"""

from coincurve import PublicKey

from .encoding import require_length, to_bytes
from .errors import InvalidKey, InvalidTweak
from .hasher import segwit_tweak_hasher
from .types import CompressedPubkey, HexOrBytes, TweakScalar

TWEAK_SIZE = 32
COMPRESSED_PUBKEY_SIZE = 33

# secp256k1 group order
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def parse_public_key(pk: HexOrBytes | PublicKey) -> PublicKey:
    """Decode a compressed or uncompressed SEC1 public key.

    Raises:
        InvalidInput: If ``pk`` is a malformed hex string
        InvalidKey: If the bytes are not a point on the curve

    """
    if isinstance(pk, PublicKey):
        return pk

    data = to_bytes(pk, "pk")
    try:
        return PublicKey(data)
    except ValueError as e:
        raise InvalidKey(f"invalid public key: {e}") from e


def compress_public_key(pk: HexOrBytes | PublicKey) -> CompressedPubkey:
    """Return the 33-byte compressed SEC1 form of a public key."""
    return CompressedPubkey(parse_public_key(pk).format(compressed=True))


def validate_scalar(value: int) -> TweakScalar:
    """Check that ``value`` is a non-zero scalar below the group order."""
    if not 0 < value < SECP256K1_ORDER:
        # happens with probability ~2^-128 for a hash output
        raise InvalidTweak("tweak value is not a valid secp256k1 scalar")
    return TweakScalar(value)


def compute_tweak_scalar(pk: HexOrBytes | PublicKey, tweak: HexOrBytes) -> TweakScalar:
    """Compute the tweak scalar for a public key from a 32-byte tweak value.

    Args:
        pk: Public key in compressed or uncompressed SEC1 form
        tweak: The 32-byte tweak input, e.g. the output of ``evm_deposit_tweak``

    Returns:
        The tweak scalar

    Raises:
        InvalidKey: If ``pk`` does not decode
        InvalidInput: If ``tweak`` is not 32 bytes
        InvalidTweak: If the digest is zero or not below the group order

    """
    pk_bytes = compress_public_key(pk)
    tweak_bytes = to_bytes(tweak, "tweak")
    require_length(tweak_bytes, TWEAK_SIZE, "tweak")

    digest = segwit_tweak_hasher().update(pk_bytes).update(tweak_bytes).digest()
    return validate_scalar(int.from_bytes(digest, "big"))


def apply_tweak(pk: HexOrBytes | PublicKey, scalar: int) -> CompressedPubkey:
    """Compute ``pk + scalar*G`` and return it in compressed form.

    Raises:
        InvalidKey: If ``pk`` does not decode
        InvalidTweak: If the scalar is out of range or the sum is the point at infinity

    """
    point = parse_public_key(pk)
    validate_scalar(scalar)

    tweak_point = PublicKey.from_secret(scalar.to_bytes(32, "big"))
    try:
        tweaked = PublicKey.combine_keys([point, tweak_point])
    except ValueError as e:
        raise InvalidTweak("tweaked public key is the point at infinity") from e

    return CompressedPubkey(tweaked.format(compressed=True))


def tweak_public_key(pk: HexOrBytes | PublicKey, tweak: HexOrBytes) -> CompressedPubkey:
    """Compute a tweak scalar and apply it to the given public key.

    Returns:
        The tweaked key as 33 compressed SEC1 bytes

    """
    point = parse_public_key(pk)
    return apply_tweak(point, compute_tweak_scalar(point, tweak))
