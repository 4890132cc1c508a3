"""Tweak computation dispatched on the destination blockchain type."""

from enum import Enum

from .deposit_addr import CHAIN_ID_SIZE, EVM_ADDRESS_SIZE, evm_deposit_tweak
from .encoding import require_length, to_bytes
from .errors import InvalidInput
from .types import HexOrBytes


class BlockchainType(str, Enum):
    """Family of the chain the deposit is minted on."""

    EVM = "evm"


def calc_tweak_bytes(
    blockchain_type: BlockchainType | str,
    chain_id: HexOrBytes,
    to_address: HexOrBytes,
    lbtc_address: HexOrBytes,
    aux_data: HexOrBytes,
) -> bytes:
    """Compute the deposit tweak for a request, dispatching on ``blockchain_type``.

    Raises:
        InvalidInput: For unsupported chain types or malformed fields

    """
    try:
        chain_type = BlockchainType(blockchain_type)
    except ValueError:
        raise InvalidInput(f"unsupported blockchain type: {blockchain_type}") from None

    chain_id_bytes = to_bytes(chain_id, "chain_id")
    require_length(chain_id_bytes, CHAIN_ID_SIZE, "chain_id")

    if chain_type is BlockchainType.EVM:
        lbtc_bytes = to_bytes(lbtc_address, "lbtc_address")
        require_length(lbtc_bytes, EVM_ADDRESS_SIZE, "lbtc_address")
        to_addr_bytes = to_bytes(to_address, "to_address")
        require_length(to_addr_bytes, EVM_ADDRESS_SIZE, "to_address")
        return evm_deposit_tweak(lbtc_bytes, to_addr_bytes, chain_id_bytes, aux_data)

    raise InvalidInput(f"unsupported blockchain type: {chain_type.value}")
