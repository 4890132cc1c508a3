"""BIP341-style tagged SHA-256 hashers.

For a tag string ``T`` the tagged hash of ``data`` is::

    tag_bytes := sha256(T)
    tagged_hash(T, data) := sha256(tag_bytes || tag_bytes || data)

The tag bytes are fed twice; this duplication is part of the derivation
protocol and must not be collapsed.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from .errors import HasherConsumed

if TYPE_CHECKING:
    from hashlib import _Hash

DEPOSIT_AUX_TAG = "LombardDepositAux"
DEPOSIT_ADDR_TAG = "LombardDepositAddr"
SEGWIT_TWEAK_TAG = "SegwitTweak"


def tag_bytes(tag: str) -> bytes:
    """Return sha256(tag) for a domain tag."""
    return hashlib.sha256(tag.encode("utf-8")).digest()


class TaggedHasher:
    """Single-use SHA-256 context pre-seeded with ``tag_bytes || tag_bytes``.

    Segments are fed with :meth:`update` in order; :meth:`digest` finalizes the
    context, after which any further use raises :class:`HasherConsumed`.
    """

    __slots__ = ("_hash", "_tag")

    def __init__(self, tag: str) -> None:
        prefix = tag_bytes(tag)
        self._tag = tag
        self._hash: _Hash | None = hashlib.sha256(prefix + prefix)

    @property
    def tag(self) -> str:
        return self._tag

    def update(self, data: bytes) -> TaggedHasher:
        """Feed a data segment and return self for chaining."""
        self._live().update(data)
        return self

    def digest(self) -> bytes:
        """Finalize the hash and return the 32-byte digest."""
        h = self._live()
        self._hash = None
        return h.digest()

    def _live(self) -> _Hash:
        if self._hash is None:
            raise HasherConsumed(f"{self._tag} hasher already finalized")
        return self._hash


def tagged_hasher(tag: str) -> TaggedHasher:
    """Create a tagged hasher for an arbitrary domain tag."""
    return TaggedHasher(tag)


def aux_data_hasher() -> TaggedHasher:
    """Hasher for deposit auxiliary data."""
    return TaggedHasher(DEPOSIT_AUX_TAG)


def deposit_hasher() -> TaggedHasher:
    """Hasher for the deposit tweak input."""
    return TaggedHasher(DEPOSIT_ADDR_TAG)


def segwit_tweak_hasher() -> TaggedHasher:
    """Hasher for the public key tweak scalar."""
    return TaggedHasher(SEGWIT_TWEAK_TAG)
