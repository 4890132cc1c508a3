"""Deterministic segwit deposit addresses bound to EVM minting instructions.

Usage:
    from depositaddr import compute_aux_data_v0, evm_deposit_segwit_addr

    aux_data = compute_aux_data_v0(0, bytes(32))
    address = evm_deposit_segwit_addr(pk, contract, wallet, chain_id, aux_data)
"""

from .aux_data import MAX_REFERRER_ID_SIZE, compute_aux_data_v0
from .deposit_addr import (
    evm_deposit_segwit_addr,
    evm_deposit_segwit_pubkey,
    evm_deposit_tweak,
    pubkey_to_segwit_addr,
)
from .errors import (
    AddressEncodingError,
    DepositAddressError,
    HasherConsumed,
    InvalidInput,
    InvalidKey,
    InvalidTweak,
)
from .hasher import (
    DEPOSIT_ADDR_TAG,
    DEPOSIT_AUX_TAG,
    SEGWIT_TWEAK_TAG,
    TaggedHasher,
    tagged_hasher,
)
from .networks import Network
from .segwit_tweak import apply_tweak, compute_tweak_scalar, tweak_public_key
from .tweak_bytes import BlockchainType, calc_tweak_bytes
from .tweaker import Tweaker

__version__ = "0.1.0"

__all__ = [
    "DEPOSIT_ADDR_TAG",
    "DEPOSIT_AUX_TAG",
    "MAX_REFERRER_ID_SIZE",
    "SEGWIT_TWEAK_TAG",
    "AddressEncodingError",
    "BlockchainType",
    "DepositAddressError",
    "HasherConsumed",
    "InvalidInput",
    "InvalidKey",
    "InvalidTweak",
    "Network",
    "TaggedHasher",
    "Tweaker",
    "__version__",
    "apply_tweak",
    "calc_tweak_bytes",
    "compute_aux_data_v0",
    "compute_tweak_scalar",
    "evm_deposit_segwit_addr",
    "evm_deposit_segwit_pubkey",
    "evm_deposit_tweak",
    "pubkey_to_segwit_addr",
    "tagged_hasher",
    "tweak_public_key",
]
