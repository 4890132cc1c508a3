"""Deposit derivation endpoints."""

from __future__ import annotations

import logging

import msgspec
from litestar import Controller, Request, post
from litestar.status_codes import HTTP_200_OK

from depositaddr.deriver import Deriver  # noqa: TC001
from depositaddr.encoding import to_hex
from depositaddr.errors import DepositAddressError

from .base import (
    AddressRequest,
    AddressResponse,
    AuxDataRequest,
    AuxDataResponse,
    PubkeyRequest,
    PubkeyResponse,
    TweakRequest,
    TweakResponse,
    decode_body,
    to_http_exception,
)

logger = logging.getLogger(__name__)

aux_data_decoder = msgspec.json.Decoder(AuxDataRequest)
tweak_decoder = msgspec.json.Decoder(TweakRequest)
pubkey_decoder = msgspec.json.Decoder(PubkeyRequest)
address_decoder = msgspec.json.Decoder(AddressRequest)

class DepositController(Controller):  # type: ignore[misc]
    """Deposit aux data, tweak, public key and address derivation."""

    path = "/api/v1/deposit"

    @post("/aux-data", status_code=HTTP_200_OK)  # type: ignore[untyped-decorator]
    async def aux_data(self, request: Request, deriver: Deriver) -> AuxDataResponse:
        """POST /api/v1/deposit/aux-data - Compute v0 aux data."""
        req = decode_body(await request.body(), aux_data_decoder)
        try:
            aux_data = deriver.aux_data(req.nonce, req.referrer_id)
        except DepositAddressError as e:
            raise to_http_exception(e) from e
        return AuxDataResponse(aux_data=to_hex(aux_data))

    @post("/tweak", status_code=HTTP_200_OK)  # type: ignore[untyped-decorator]
    async def tweak(self, request: Request, deriver: Deriver) -> TweakResponse:
        """POST /api/v1/deposit/tweak - Compute the EVM deposit tweak."""
        req = decode_body(await request.body(), tweak_decoder)
        try:
            tweak = deriver.tweak(req.contract, req.wallet, req.chain_id, req.aux_data)
        except DepositAddressError as e:
            raise to_http_exception(e) from e
        return TweakResponse(tweak=to_hex(tweak))

    @post("/pubkey", status_code=HTTP_200_OK)  # type: ignore[untyped-decorator]
    async def pubkey(self, request: Request, deriver: Deriver) -> PubkeyResponse:
        """POST /api/v1/deposit/pubkey - Derive the tweaked deposit public key."""
        req = decode_body(await request.body(), pubkey_decoder)
        try:
            tweaked = deriver.pubkey(
                req.pubkey, req.contract, req.wallet, req.chain_id, req.aux_data
            )
        except DepositAddressError as e:
            raise to_http_exception(e) from e
        return PubkeyResponse(pubkey=to_hex(tweaked))

    @post("/address", status_code=HTTP_200_OK)  # type: ignore[untyped-decorator]
    async def address(self, request: Request, deriver: Deriver) -> AddressResponse:
        """POST /api/v1/deposit/address - Derive the segwit deposit address."""
        req = decode_body(await request.body(), address_decoder)
        try:
            address, tweaked, network = deriver.address(
                req.pubkey,
                req.contract,
                req.wallet,
                req.chain_id,
                req.aux_data,
                req.network,
            )
        except DepositAddressError as e:
            raise to_http_exception(e) from e
        return AddressResponse(address=address, pubkey=to_hex(tweaked), network=network.value)
