"""Derivation orchestration for the HTTP service."""

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from .aux_data import compute_aux_data_v0
from .deposit_addr import evm_deposit_segwit_pubkey, evm_deposit_tweak, pubkey_to_segwit_addr
from .errors import DepositAddressError
from .metrics import DERIVATION_DURATION_SECONDS, DERIVATION_ERRORS_TOTAL, DERIVATION_REQUESTS_TOTAL
from .networks import Network
from .types import CompressedPubkey, HexOrBytes

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Deriver:
    """Runs deposit derivations and records metrics for each one.

    Core exceptions are re-raised unchanged after being counted.
    """

    def __init__(self, network: Network | str = Network.MAINNET) -> None:
        self._network = Network.parse(network)
        self._logger = logging.getLogger(__name__)

    @property
    def network(self) -> Network:
        return self._network

    def aux_data(self, nonce: int, referrer_id: HexOrBytes) -> bytes:
        return self._run("aux_data", compute_aux_data_v0, nonce, referrer_id)

    def tweak(
        self,
        contract: HexOrBytes,
        wallet: HexOrBytes,
        chain_id: HexOrBytes,
        aux_data: HexOrBytes,
    ) -> bytes:
        return self._run("tweak", evm_deposit_tweak, contract, wallet, chain_id, aux_data)

    def pubkey(
        self,
        pk: HexOrBytes,
        contract: HexOrBytes,
        wallet: HexOrBytes,
        chain_id: HexOrBytes,
        aux_data: HexOrBytes,
    ) -> CompressedPubkey:
        return self._run(
            "pubkey", evm_deposit_segwit_pubkey, pk, contract, wallet, chain_id, aux_data
        )

    def address(
        self,
        pk: HexOrBytes,
        contract: HexOrBytes,
        wallet: HexOrBytes,
        chain_id: HexOrBytes,
        aux_data: HexOrBytes,
        network: Network | str | None = None,
    ) -> tuple[str, CompressedPubkey, Network]:
        """Derive a deposit address.

        Args:
            network: Network override; the deriver's default is used when None

        Returns:
            Tuple of (address, tweaked_pubkey, network)

        """

        def derive() -> tuple[str, CompressedPubkey, Network]:
            net = self._network if network is None else Network.parse(network)
            tweaked = evm_deposit_segwit_pubkey(pk, contract, wallet, chain_id, aux_data)
            return pubkey_to_segwit_addr(tweaked, net), tweaked, net

        return self._run("address", derive)

    def _run(self, operation: str, func: Callable[..., T], *args: object) -> T:
        DERIVATION_REQUESTS_TOTAL.labels(operation=operation).inc()
        start_time = time.perf_counter()

        try:
            result = func(*args)
        except DepositAddressError as e:
            DERIVATION_ERRORS_TOTAL.labels(error_type=type(e).__name__).inc()
            self._logger.warning(f"{operation} derivation failed: {e}")
            raise

        DERIVATION_DURATION_SECONDS.labels(operation=operation).observe(
            time.perf_counter() - start_time
        )
        self._logger.debug(f"Completed {operation} derivation")
        return result
