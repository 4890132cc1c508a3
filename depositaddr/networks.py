"""Bitcoin networks supported for address encoding."""

from enum import Enum

from embit.networks import NETWORKS

from .errors import InvalidInput


class Network(str, Enum):
    """Bitcoin network selecting the segwit human-readable prefix."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    SIGNET = "signet"
    REGTEST = "regtest"

    @property
    def hrp(self) -> str:
        """Bech32 human-readable part for this network."""
        return str(NETWORKS[_EMBIT_NAMES[self]]["bech32"])

    @classmethod
    def parse(cls, name: "str | Network | None") -> "Network":
        """Resolve a network from its name (case-insensitive); None means mainnet."""
        if name is None:
            return cls.MAINNET
        if isinstance(name, Network):
            return name
        if not isinstance(name, str):
            raise InvalidInput(f"network must be a string, got {type(name).__name__}")
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(n.value for n in cls)
            raise InvalidInput(f"unknown network {name!r}, expected one of: {valid}") from None


_EMBIT_NAMES = {
    Network.MAINNET: "main",
    Network.TESTNET: "test",
    Network.SIGNET: "signet",
    Network.REGTEST: "regtest",
}
