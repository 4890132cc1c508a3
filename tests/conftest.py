"""Test fixtures and utilities."""

import hashlib
from collections.abc import AsyncGenerator

import pytest
from coincurve import PrivateKey
from litestar.testing import AsyncTestClient

from depositaddr.config import Config
from depositaddr.deriver import Deriver
from depositaddr.networks import Network
from depositaddr.server import create_app

# Compressed public key of the secp256k1 generator point (secret key 1)
GENERATOR_PUBKEY = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"

CONTRACT = "0x" + "11" * 20
WALLET = "0x" + "22" * 20
CHAIN_ID = "0x" + "00" * 31 + "01"
# aux data for nonce 0 and a 32-byte zero referrer id
AUX_DATA = "0x2137aefeb756a435f07fceff39a061bd2a062b617bd8857e9c32b44ef2596bc8"


def seeded_pubkey(seed: bytes) -> bytes:
    """Return the compressed public key whose secret is sha256(seed)."""
    secret = hashlib.sha256(seed).digest()
    return PrivateKey(secret).public_key.format(compressed=True)


@pytest.fixture
def config() -> Config:
    """Create a test configuration."""
    return Config(host="127.0.0.1", port=8080, log_level="DEBUG", network="signet")


@pytest.fixture
def deriver() -> Deriver:
    """Create a mainnet deriver."""
    return Deriver(Network.MAINNET)


@pytest.fixture
def pubkey() -> bytes:
    """Return a fixed compressed base public key."""
    return bytes.fromhex(GENERATOR_PUBKEY)


@pytest.fixture
def deposit_fields() -> dict[str, str]:
    """Return a valid set of hex-encoded deposit fields."""
    return {
        "contract": CONTRACT,
        "wallet": WALLET,
        "chain_id": CHAIN_ID,
        "aux_data": AUX_DATA,
    }


@pytest.fixture
async def client(config: Config) -> AsyncGenerator[AsyncTestClient, None]:
    """Create a test client."""
    app = create_app(config)
    async with AsyncTestClient(app) as client:
        yield client
