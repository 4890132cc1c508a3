"""Tests for API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from depositaddr.deposit_addr import evm_deposit_segwit_addr, evm_deposit_segwit_pubkey

from .conftest import GENERATOR_PUBKEY

if TYPE_CHECKING:
    from litestar.testing import AsyncTestClient


@pytest.mark.asyncio
async def test_health_endpoint(client: AsyncTestClient) -> None:
    """Test the health check endpoint."""
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"status": "healthy", "network": "signet"}


@pytest.mark.parametrize(
    ("nonce", "expected"),
    [
        (0xFFFFFFFF, "0x57302e91d7d3252be7c273a0041848c13c00b6d0782fef778f2ecab26fb0c0f8"),
        (1, "0x58bd0e282e046b08c0d395ea701678a1161f8f46362abc4a25b37dce12e57fcf"),
    ],
)
@pytest.mark.asyncio
async def test_aux_data(client: AsyncTestClient, nonce: int, expected: str) -> None:
    """Test computing aux data over HTTP."""
    resp = await client.post(
        "/api/v1/deposit/aux-data",
        json={"nonce": nonce, "referrer_id": "0x" + "00" * 32},
    )
    assert resp.status_code == 200
    assert resp.json() == {"aux_data": expected}


@pytest.mark.asyncio
async def test_aux_data_referrer_too_long(client: AsyncTestClient) -> None:
    resp = await client.post(
        "/api/v1/deposit/aux-data",
        json={"nonce": 0, "referrer_id": "00" * 257},
    )
    assert resp.status_code == 400
    assert "referrer id too long" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_aux_data_nonce_out_of_range(client: AsyncTestClient) -> None:
    resp = await client.post("/api/v1/deposit/aux-data", json={"nonce": 2**32})
    assert resp.status_code == 400
    assert "nonce" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_tweak(client: AsyncTestClient, deposit_fields: dict[str, str]) -> None:
    resp = await client.post("/api/v1/deposit/tweak", json=deposit_fields)
    assert resp.status_code == 200

    tweak = resp.json()["tweak"]
    assert tweak.startswith("0x")
    assert len(tweak) == 66


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("contract", "0x" + "11" * 19),
        ("wallet", "0x" + "22" * 21),
        ("chain_id", "0x01"),
        ("aux_data", "0x" + "00" * 33),
        ("aux_data", "0xnothex"),
    ],
)
@pytest.mark.asyncio
async def test_tweak_invalid_field(
    client: AsyncTestClient,
    deposit_fields: dict[str, str],
    field: str,
    value: str,
) -> None:
    """Test that malformed fields are rejected with 400 naming the field."""
    resp = await client.post("/api/v1/deposit/tweak", json={**deposit_fields, field: value})
    assert resp.status_code == 400
    assert field in resp.json()["detail"]


@pytest.mark.asyncio
async def test_tweak_missing_field(client: AsyncTestClient, deposit_fields: dict[str, str]) -> None:
    fields = dict(deposit_fields)
    del fields["wallet"]
    resp = await client.post("/api/v1/deposit/tweak", json=fields)
    assert resp.status_code == 400
    assert "Validation error" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_invalid_json(client: AsyncTestClient) -> None:
    resp = await client.post(
        "/api/v1/deposit/tweak",
        content="not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "Validation error" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_pubkey(client: AsyncTestClient, deposit_fields: dict[str, str]) -> None:
    resp = await client.post(
        "/api/v1/deposit/pubkey",
        json={"pubkey": GENERATOR_PUBKEY, **deposit_fields},
    )
    assert resp.status_code == 200

    expected = evm_deposit_segwit_pubkey(GENERATOR_PUBKEY, **deposit_fields)
    assert resp.json() == {"pubkey": "0x" + expected.hex()}


@pytest.mark.asyncio
async def test_pubkey_invalid_key(client: AsyncTestClient, deposit_fields: dict[str, str]) -> None:
    resp = await client.post(
        "/api/v1/deposit/pubkey",
        json={"pubkey": "02" + "00" * 32, **deposit_fields},
    )
    assert resp.status_code == 400
    assert "public key" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_address_uses_default_network(
    client: AsyncTestClient, deposit_fields: dict[str, str]
) -> None:
    resp = await client.post(
        "/api/v1/deposit/address",
        json={"pubkey": "0x" + GENERATOR_PUBKEY, **deposit_fields},
    )
    assert resp.status_code == 200

    data = resp.json()
    assert data["network"] == "signet"
    assert data["address"] == evm_deposit_segwit_addr(GENERATOR_PUBKEY, **deposit_fields, network="signet")
    assert data["address"].startswith("tb1q")
    assert data["pubkey"] == "0x" + evm_deposit_segwit_pubkey(GENERATOR_PUBKEY, **deposit_fields).hex()


@pytest.mark.asyncio
async def test_address_network_override(
    client: AsyncTestClient, deposit_fields: dict[str, str]
) -> None:
    resp = await client.post(
        "/api/v1/deposit/address",
        json={"pubkey": GENERATOR_PUBKEY, "network": "mainnet", **deposit_fields},
    )
    assert resp.status_code == 200

    data = resp.json()
    assert data["network"] == "mainnet"
    assert data["address"] == evm_deposit_segwit_addr(GENERATOR_PUBKEY, **deposit_fields)


@pytest.mark.asyncio
async def test_address_is_deterministic(
    client: AsyncTestClient, deposit_fields: dict[str, str]
) -> None:
    body = {"pubkey": GENERATOR_PUBKEY, **deposit_fields}
    first = await client.post("/api/v1/deposit/address", json=body)
    second = await client.post("/api/v1/deposit/address", json=body)
    assert first.json() == second.json()


@pytest.mark.asyncio
async def test_address_unknown_network(
    client: AsyncTestClient, deposit_fields: dict[str, str]
) -> None:
    resp = await client.post(
        "/api/v1/deposit/address",
        json={"pubkey": GENERATOR_PUBKEY, "network": "dogecoin", **deposit_fields},
    )
    assert resp.status_code == 400
    assert "unknown network" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_address_encoding_failure_is_server_error(
    client: AsyncTestClient,
    deposit_fields: dict[str, str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from embit import bech32

    monkeypatch.setattr(bech32, "encode", lambda hrp, witver, witprog: None)
    resp = await client.post(
        "/api/v1/deposit/address",
        json={"pubkey": GENERATOR_PUBKEY, **deposit_fields},
    )
    assert resp.status_code == 500
