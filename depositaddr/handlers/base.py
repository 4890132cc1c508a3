"""Request/response structs and validation helpers for handlers."""

from __future__ import annotations

import logging
from typing import TypeVar

import msgspec
from litestar.exceptions import HTTPException, ValidationException
from litestar.status_codes import HTTP_500_INTERNAL_SERVER_ERROR

from depositaddr.errors import DepositAddressError, InvalidInput, InvalidKey

logger = logging.getLogger(__name__)

T = TypeVar("T")


# Request structs


class AuxDataRequest(msgspec.Struct, frozen=True):
    """Request struct for computing v0 aux data."""

    nonce: int
    referrer_id: str = ""


class TweakRequest(msgspec.Struct, frozen=True):
    """Request struct for computing an EVM deposit tweak."""

    contract: str
    wallet: str
    chain_id: str
    aux_data: str


class PubkeyRequest(msgspec.Struct, frozen=True):
    """Request struct for deriving a tweaked deposit public key."""

    pubkey: str
    contract: str
    wallet: str
    chain_id: str
    aux_data: str


class AddressRequest(msgspec.Struct, frozen=True):
    """Request struct for deriving a segwit deposit address."""

    pubkey: str
    contract: str
    wallet: str
    chain_id: str
    aux_data: str
    network: str | None = None


# Response structs


class AuxDataResponse(msgspec.Struct):
    aux_data: str


class TweakResponse(msgspec.Struct):
    tweak: str


class PubkeyResponse(msgspec.Struct):
    pubkey: str


class AddressResponse(msgspec.Struct):
    """Derived deposit address with the tweaked key it encodes."""

    address: str
    pubkey: str
    network: str


class HealthResponse(msgspec.Struct):
    """Health check response."""

    status: str
    network: str


# Validation helpers


def decode_body(body: bytes, decoder: msgspec.json.Decoder[T]) -> T:
    """Decode a JSON request body into its request struct.

    Raises:
        ValidationException: If the body is not valid JSON for the struct

    """
    try:
        return decoder.decode(body)
    except (msgspec.ValidationError, msgspec.DecodeError) as e:
        raise ValidationException(detail=f"Validation error: {e}") from e


def to_http_exception(error: DepositAddressError) -> HTTPException:
    """Map a derivation error to the HTTP exception returned to the caller.

    Malformed inputs and keys are client errors; tweak and encoding failures
    are internal invariant violations.
    """
    if isinstance(error, (InvalidInput, InvalidKey)):
        return ValidationException(detail=str(error))

    logger.error(f"Derivation failed: {error}")
    return HTTPException(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
