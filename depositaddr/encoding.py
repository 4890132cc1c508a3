"""Normalization of hex-or-bytes inputs."""

import string

from .errors import InvalidInput
from .types import HexOrBytes


def to_bytes(value: HexOrBytes, field: str) -> bytes:
    """Normalize a hex string or byte sequence to raw bytes.

    Args:
        value: Raw bytes (used verbatim) or a hex string with optional 0x or 0X prefix
        field: Name of the field, used in error messages

    Returns:
        The decoded bytes

    Raises:
        InvalidInput: If the string is not valid hex or the type is unsupported

    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)

    if isinstance(value, str):
        hex_str = value[2:] if value[:2] in ("0x", "0X") else value
        if len(hex_str) % 2 != 0:
            raise InvalidInput(f"{field} has an odd number of hex digits")
        if not all(c in string.hexdigits for c in hex_str):
            raise InvalidInput(f"{field} is not valid hex: {value!r}")
        return bytes.fromhex(hex_str)

    raise InvalidInput(f"{field} must be bytes or a hex string, got {type(value).__name__}")


def require_length(data: bytes, size: int, field: str) -> None:
    """Raise InvalidInput unless ``data`` is exactly ``size`` bytes."""
    if len(data) != size:
        raise InvalidInput(f"{field} must be {size} bytes, got {len(data)}")


def to_hex(data: bytes) -> str:
    """Encode bytes as a 0x-prefixed lowercase hex string."""
    return f"0x{data.hex()}"
