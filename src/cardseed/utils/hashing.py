from __future__ import annotations

import hashlib

from cardseed.config import DerivationConfig
from cardseed.engine.errors import DerivationError
from cardseed.engine.ranking import permutation_count
from cardseed.utils.logging_utils import get_logger


SECRET_SIZE = 32

_log = get_logger("cardseed.hashing")


def rank_byte_length(length: int) -> int:
    """Width of the big-endian rank encoding for draws of ``length`` cards."""
    return ((permutation_count(length) - 1).bit_length() + 7) // 8


def encode_rank(rank: int, length: int) -> bytes:
    if not 0 <= rank < permutation_count(length):
        raise ValueError(f"rank {rank} out of range for {length} cards")
    return rank.to_bytes(rank_byte_length(length), byteorder="big", signed=False)


def passphrase_bytes(passphrase: str | bytes | None) -> bytes:
    if passphrase is None:
        return b""
    if isinstance(passphrase, bytes):
        return passphrase
    return passphrase.encode("utf-8")


def derive_secret(
    rank: int,
    length: int,
    passphrase: str | bytes | None = None,
    config: DerivationConfig | None = None,
) -> bytes:
    """Stretch a deck rank and passphrase into a 32-byte secret.

    PBKDF2-HMAC over ``encode_rank(rank, length) + b":" + passphrase`` with
    salt ``"<salt_prefix>:<length>"``. A missing passphrase hashes exactly
    like an empty one.
    """
    config = config or DerivationConfig()
    password = encode_rank(rank, length) + b":" + passphrase_bytes(passphrase)
    salt = f"{config.salt_prefix}:{length}".encode("utf-8")

    _log.debug(
        "deriving secret: cards=%d hash=%s iterations=%d",
        length,
        config.hash_name,
        config.iterations,
    )
    try:
        return hashlib.pbkdf2_hmac(
            config.hash_name,
            password,
            salt,
            config.iterations,
            dklen=SECRET_SIZE,
        )
    except (ValueError, OverflowError) as exc:
        raise DerivationError(f"pbkdf2 rejected its parameters: {exc}") from exc
