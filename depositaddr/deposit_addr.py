"""EVM deposit tweaks, public keys and segwit addresses."""

from coincurve import PublicKey
from embit import bech32
from embit.hashes import hash160

from .encoding import require_length, to_bytes
from .errors import AddressEncodingError
from .hasher import deposit_hasher
from .networks import Network
from .segwit_tweak import compress_public_key, tweak_public_key
from .types import CompressedPubkey, HexOrBytes

AUX_DATA_SIZE = 32
CHAIN_ID_SIZE = 32
EVM_ADDRESS_SIZE = 20

# Chain-type tag fed ahead of the chain id; other chain families get their own tag.
EVM_TAG = 0x00

SEGWIT_V0 = 0


def evm_deposit_tweak(
    contract: HexOrBytes,
    wallet: HexOrBytes,
    chain_id: HexOrBytes,
    aux_data: HexOrBytes,
) -> bytes:
    """Compute the tweak bytes for an EVM deposit address.

    This is defined as::

        tagged_hash("LombardDepositAddr",
                    aux_data || EVM_TAG || chain_id || contract || wallet)

    Every field has a fixed width, so no length prefixes are needed.

    Args:
        contract: 20-byte address of the token contract on the destination chain
        wallet: 20-byte EVM wallet that receives the minted tokens
        chain_id: 32-byte big-endian chain id of the destination chain
        aux_data: 32-byte aux data, see ``compute_aux_data_v0``

    Returns:
        The 32-byte tweak

    Raises:
        InvalidInput: If any field has the wrong length or fails to decode

    """
    contract_bytes = to_bytes(contract, "contract")
    wallet_bytes = to_bytes(wallet, "wallet")
    chain_id_bytes = to_bytes(chain_id, "chain_id")
    aux_data_bytes = to_bytes(aux_data, "aux_data")

    require_length(contract_bytes, EVM_ADDRESS_SIZE, "contract")
    require_length(wallet_bytes, EVM_ADDRESS_SIZE, "wallet")
    require_length(aux_data_bytes, AUX_DATA_SIZE, "aux_data")
    require_length(chain_id_bytes, CHAIN_ID_SIZE, "chain_id")

    return (
        deposit_hasher()
        .update(aux_data_bytes)
        .update(bytes([EVM_TAG]))
        .update(chain_id_bytes)
        .update(contract_bytes)
        .update(wallet_bytes)
        .digest()
    )


def evm_deposit_segwit_pubkey(
    pk: HexOrBytes | PublicKey,
    contract: HexOrBytes,
    wallet: HexOrBytes,
    chain_id: HexOrBytes,
    aux_data: HexOrBytes,
) -> CompressedPubkey:
    """Compute the tweaked public key for an EVM deposit.

    Returns:
        The 33-byte compressed tweaked key

    """
    tweak = evm_deposit_tweak(contract, wallet, chain_id, aux_data)
    return tweak_public_key(pk, tweak)


def pubkey_to_segwit_addr(
    pk: HexOrBytes | PublicKey,
    network: Network | str | None = Network.MAINNET,
) -> str:
    """Encode the P2WPKH address of a public key.

    Raises:
        AddressEncodingError: If the encoder cannot produce an address

    """
    net = Network.parse(network)
    program = hash160(compress_public_key(pk))
    address = bech32.encode(net.hrp, SEGWIT_V0, program)
    if address is None:
        raise AddressEncodingError(f"unable to encode segwit address for {net.value}")
    return str(address)


def evm_deposit_segwit_addr(
    pk: HexOrBytes | PublicKey,
    contract: HexOrBytes,
    wallet: HexOrBytes,
    chain_id: HexOrBytes,
    aux_data: HexOrBytes,
    network: Network | str | None = Network.MAINNET,
) -> str:
    """Compute the segwit deposit address for an EVM deposit.

    See ``evm_deposit_tweak`` for the field layout. ``network`` selects the
    address prefix and defaults to mainnet.
    """
    net = Network.parse(network)
    tweaked = evm_deposit_segwit_pubkey(pk, contract, wallet, chain_id, aux_data)
    return pubkey_to_segwit_addr(tweaked, net)
