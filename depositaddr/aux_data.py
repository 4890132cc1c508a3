"""Version 0 deposit auxiliary data."""

from .encoding import to_bytes
from .errors import InvalidInput
from .hasher import aux_data_hasher
from .types import HexOrBytes

DEPOSIT_AUX_V0 = 0x00
MAX_REFERRER_ID_SIZE = 256
MAX_NONCE = 0xFFFFFFFF


def compute_aux_data_v0(nonce: int, referrer_id: HexOrBytes) -> bytes:
    """Compute v0 aux data for a nonce and referrer id.

    This is defined as::

        tagged_hash("LombardDepositAux", 0x00 || nonce || referrer_id)

    where ``nonce`` is encoded as 4 big-endian bytes and ``referrer_id`` is fed
    as-is, without padding or a length prefix.

    Args:
        nonce: Unsigned 32-bit nonce
        referrer_id: Up to 256 bytes identifying the referrer

    Returns:
        The 32-byte aux data digest

    Raises:
        InvalidInput: If the nonce is out of range or the referrer id is too long

    """
    referrer_bytes = to_bytes(referrer_id, "referrer_id")
    if len(referrer_bytes) > MAX_REFERRER_ID_SIZE:
        raise InvalidInput(
            f"referrer id too long (got {len(referrer_bytes)} bytes, "
            f"want at most {MAX_REFERRER_ID_SIZE})",
        )

    if isinstance(nonce, bool) or not isinstance(nonce, int):
        raise InvalidInput(f"nonce must be an integer, got {type(nonce).__name__}")
    if not 0 <= nonce <= MAX_NONCE:
        raise InvalidInput(f"nonce must be an unsigned 32-bit integer, got {nonce}")

    return (
        aux_data_hasher()
        .update(bytes([DEPOSIT_AUX_V0]))
        .update(nonce.to_bytes(4, "big"))
        .update(referrer_bytes)
        .digest()
    )
