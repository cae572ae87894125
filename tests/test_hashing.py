from __future__ import annotations

import hashlib

import pytest

from cardseed.config import PBKDF2_ITERATIONS, DerivationConfig, load_config
from cardseed.engine.errors import DerivationError, ErrorCode
from cardseed.engine.models import Deck
from cardseed.utils.hashing import SECRET_SIZE, derive_secret, encode_rank, passphrase_bytes, rank_byte_length


@pytest.mark.parametrize(("length", "width"), [(0, 0), (1, 1), (3, 3), (52, 29)])
def test_rank_byte_length(length: int, width: int) -> None:
    assert rank_byte_length(length) == width


def test_encode_rank_is_fixed_width_big_endian() -> None:
    assert encode_rank(60538, 3) == b"\x00\xec\x7a"
    assert encode_rank(0, 3) == b"\x00\x00\x00"
    assert encode_rank(0, 0) == b""
    assert len(encode_rank(0, 52)) == 29
    with pytest.raises(ValueError):
        encode_rank(132600, 3)


def test_passphrase_bytes() -> None:
    assert passphrase_bytes(None) == b""
    assert passphrase_bytes("") == b""
    assert passphrase_bytes(b"\xff") == b"\xff"
    assert passphrase_bytes("pässe") == "pässe".encode("utf-8")


def test_default_derivation_matches_pbkdf2() -> None:
    expected = hashlib.pbkdf2_hmac(
        "sha256",
        b"\x00\xec\x7a:slick",
        b"cardseed:3",
        PBKDF2_ITERATIONS,
        dklen=32,
    )
    assert Deck.parse("JC KH 2D").hash("slick") == expected
    assert derive_secret(60538, 3, b"slick") == expected


def test_empty_deck_hashes_deterministically(fast_config: DerivationConfig) -> None:
    deck = Deck.parse("")
    assert deck.format() == ""
    secret = deck.hash("pass", fast_config)
    assert len(secret) == SECRET_SIZE
    assert secret == deck.hash("pass", fast_config)
    assert secret == hashlib.pbkdf2_hmac("sha256", b":pass", b"cardseed:0", 16, dklen=32)


def test_hash_is_deterministic(fast_config: DerivationConfig) -> None:
    deck = Deck.full()
    assert deck.hash("slick", fast_config) == Deck.full().hash("slick", fast_config)


def test_missing_passphrase_equals_empty(fast_config: DerivationConfig) -> None:
    deck = Deck.parse("QC JH 5D")
    assert deck.hash(None, fast_config) == deck.hash("", fast_config)
    assert deck.hash(None, fast_config) == deck.hash(b"", fast_config)


def test_passphrase_changes_secret(fast_config: DerivationConfig) -> None:
    deck = Deck.parse("QC JH 5D")
    assert deck.hash("one", fast_config) != deck.hash("two", fast_config)
    assert deck.hash("one", fast_config) != deck.hash(None, fast_config)


def test_order_changes_secret(fast_config: DerivationConfig) -> None:
    assert Deck.parse("QC JH").hash(None, fast_config) != Deck.parse("JH QC").hash(None, fast_config)


def test_length_is_separated(fast_config: DerivationConfig) -> None:
    # Both rank to 0 with a 3-byte encoding; only the salt tells them apart.
    assert rank_byte_length(3) == rank_byte_length(4)
    assert Deck.parse("AS 2S 3S").hash(None, fast_config) != Deck.parse("AS 2S 3S 4S").hash(None, fast_config)


def test_config_changes_secret() -> None:
    deck = Deck.parse("7C 8C")
    base = deck.hash(None, DerivationConfig(iterations=16))
    assert base != deck.hash(None, DerivationConfig(iterations=17))
    assert base != deck.hash(None, DerivationConfig(iterations=16, salt_prefix="other"))
    assert base != deck.hash(None, DerivationConfig(iterations=16, hash_name="sha512"))


@pytest.mark.parametrize(
    "config",
    [
        DerivationConfig(iterations=0),
        DerivationConfig(iterations=-5),
        DerivationConfig(hash_name="not-a-hash"),
    ],
)
def test_rejected_parameters_raise_derivation_error(config: DerivationConfig) -> None:
    with pytest.raises(DerivationError) as excinfo:
        Deck.parse("AS").hash(None, config)
    assert excinfo.value.code is ErrorCode.DERIVATION_ERROR


def test_load_config_from_environment() -> None:
    assert load_config({}) == DerivationConfig()
    config = load_config(
        {
            "CARDSEED_PBKDF2_ITERATIONS": "1000",
            "CARDSEED_HASH_NAME": "sha512",
            "CARDSEED_SALT_PREFIX": "lab",
        }
    )
    assert config.iterations == 1000
    assert config.hash_name == "sha512"
    assert config.salt_prefix == "lab"
