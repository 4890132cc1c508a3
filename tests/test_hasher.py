"""Tests for tagged hashers."""

import hashlib

import pytest

from depositaddr.errors import HasherConsumed
from depositaddr.hasher import (
    DEPOSIT_ADDR_TAG,
    DEPOSIT_AUX_TAG,
    SEGWIT_TWEAK_TAG,
    TaggedHasher,
    aux_data_hasher,
    deposit_hasher,
    segwit_tweak_hasher,
    tag_bytes,
    tagged_hasher,
)


def reference_tagged_hash(tag: str, data: bytes) -> bytes:
    tag_hash = hashlib.sha256(tag.encode()).digest()
    return hashlib.sha256(tag_hash + tag_hash + data).digest()


class TestTagBytes:
    """Tests for tag_bytes."""

    def test_is_sha256_of_tag(self) -> None:
        assert tag_bytes("SegwitTweak") == hashlib.sha256(b"SegwitTweak").digest()

    def test_tags_are_distinct(self) -> None:
        tags = {tag_bytes(DEPOSIT_AUX_TAG), tag_bytes(DEPOSIT_ADDR_TAG), tag_bytes(SEGWIT_TWEAK_TAG)}
        assert len(tags) == 3


class TestTaggedHasher:
    """Tests for the TaggedHasher context."""

    @pytest.mark.parametrize("tag", [DEPOSIT_AUX_TAG, DEPOSIT_ADDR_TAG, SEGWIT_TWEAK_TAG, "BIP0340/challenge"])
    def test_matches_reference(self, tag: str) -> None:
        """Test that the digest is sha256(tag || tag || data)."""
        data = b"some data to hash"
        assert tagged_hasher(tag).update(data).digest() == reference_tagged_hash(tag, data)

    def test_empty_input(self) -> None:
        """Test hashing with no data segments."""
        assert TaggedHasher("x").digest() == reference_tagged_hash("x", b"")

    def test_segments_are_concatenated(self) -> None:
        """Test that feeding segments equals feeding their concatenation."""
        split = tagged_hasher("t").update(b"ab").update(b"").update(b"cd").digest()
        joined = tagged_hasher("t").update(b"abcd").digest()
        assert split == joined

    def test_tag_is_fed_twice(self) -> None:
        """Test that a single tag prefix gives a different digest."""
        tag_hash = hashlib.sha256(b"t").digest()
        single = hashlib.sha256(tag_hash + b"data").digest()
        assert tagged_hasher("t").update(b"data").digest() != single

    def test_update_returns_self(self) -> None:
        hasher = tagged_hasher("t")
        assert hasher.update(b"a") is hasher

    def test_digest_consumes_hasher(self) -> None:
        """Test that the hasher cannot be reused after finalization."""
        hasher = tagged_hasher("t").update(b"a")
        hasher.digest()

        with pytest.raises(HasherConsumed):
            hasher.update(b"b")
        with pytest.raises(HasherConsumed):
            hasher.digest()

    def test_fresh_hashers_are_independent(self) -> None:
        first = aux_data_hasher().update(b"a")
        second = aux_data_hasher()
        assert first.digest() != second.digest()

    def test_named_hashers_use_their_tags(self) -> None:
        assert aux_data_hasher().tag == DEPOSIT_AUX_TAG
        assert deposit_hasher().tag == DEPOSIT_ADDR_TAG
        assert segwit_tweak_hasher().tag == SEGWIT_TWEAK_TAG
        assert deposit_hasher().update(b"x").digest() == reference_tagged_hash(DEPOSIT_ADDR_TAG, b"x")
