"""Derivation of deposit keys from a fixed base public key."""

from coincurve import PublicKey

from .deposit_addr import pubkey_to_segwit_addr
from .networks import Network
from .segwit_tweak import parse_public_key, tweak_public_key
from .types import CompressedPubkey, HexOrBytes


class Tweaker:
    """Derives tweaked deposit keys and addresses for one base public key.

    The key is parsed once at construction; ``InvalidKey`` is raised there
    rather than on every derivation.
    """

    def __init__(self, public_key: HexOrBytes | PublicKey) -> None:
        self._public_key = parse_public_key(public_key)

    @property
    def public_key(self) -> CompressedPubkey:
        return CompressedPubkey(self._public_key.format(compressed=True))

    def derive_pubkey(self, tweak: HexOrBytes) -> CompressedPubkey:
        """Derive the deposit public key for a 32-byte tweak."""
        return tweak_public_key(self._public_key, tweak)

    def derive_segwit(
        self,
        tweak: HexOrBytes,
        network: Network | str | None = Network.MAINNET,
    ) -> tuple[str, CompressedPubkey]:
        """Derive the deposit key for a tweak and return ``(address, tweaked_pubkey)``."""
        net = Network.parse(network)
        tweaked = self.derive_pubkey(tweak)
        return pubkey_to_segwit_addr(tweaked, net), tweaked
