"""Type definitions for depositaddr.

This module contains type aliases and NewType definitions for domain-specific
types to improve type safety and code readability.
"""

from typing import NewType

HexOrBytes = str | bytes | bytearray
"""Raw bytes, or a hex string with an optional 0x prefix."""

TweakScalar = NewType("TweakScalar", int)
"""Non-zero integer below the secp256k1 group order."""

CompressedPubkey = NewType("CompressedPubkey", bytes)
"""33-byte SEC1 compressed public key."""
