from __future__ import annotations

from cardseed.config import DerivationConfig, load_config
from cardseed.engine.errors import (
    CardseedError,
    DerivationError,
    DuplicateCardError,
    ErrorCode,
    ParseError,
)
from cardseed.engine.models import Card, Deck, Suit
from cardseed.engine.ranking import permutation_count, rank_ids, unrank
from cardseed.utils.hashing import SECRET_SIZE, derive_secret


__version__ = "0.1.0"

__all__ = [
    "Card",
    "CardseedError",
    "Deck",
    "DerivationConfig",
    "DerivationError",
    "DuplicateCardError",
    "ErrorCode",
    "ParseError",
    "SECRET_SIZE",
    "Suit",
    "derive_secret",
    "load_config",
    "permutation_count",
    "rank_ids",
    "unrank",
]
