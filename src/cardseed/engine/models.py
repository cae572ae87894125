from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cardseed.config import DerivationConfig
from cardseed.engine.errors import ErrorCode, ParseError
from cardseed.engine.ranking import permutation_count, rank_ids
from cardseed.utils.cards import (
    DECK_SIZE,
    FACES,
    SUIT_SIZE,
    SUITS,
    face_index,
    split_tokens,
    suit_index,
)
from cardseed.utils.hashing import derive_secret


class Suit(int, Enum):
    SPADES = 0
    CLUBS = 1
    HEARTS = 2
    DIAMONDS = 3

    @property
    def symbol(self) -> str:
        return SUITS[self.value]

    @classmethod
    def from_symbol(cls, symbol: str) -> Suit:
        index = suit_index(symbol)
        if index < 0:
            raise ParseError(
                ErrorCode.INVALID_SUIT,
                f"invalid suit {symbol!r}, expected one of {SUITS}",
                char=symbol,
            )
        return cls(index)

    @classmethod
    def from_id(cls, suit_id: int) -> Suit:
        if not 0 <= suit_id < len(SUITS):
            raise ParseError(ErrorCode.INVALID_IDENTIFIER, f"suit id {suit_id} is outside [0, {len(SUITS)})")
        return cls(suit_id)


class Card(BaseModel):
    """A playing card. ``value`` is zero-indexed: Ace=0 .. King=12."""

    value: int = Field(ge=0, le=SUIT_SIZE - 1)
    suit: Suit

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def parse(cls, token: str) -> Card:
        """Parse a two-character token such as ``"TH"``; case-insensitive."""
        if len(token) != 2:
            raise ParseError(
                ErrorCode.INVALID_LENGTH,
                f"card {token!r} must be exactly 2 characters, got {len(token)}",
                token=token,
            )
        face_char, suit_char = token
        value = face_index(face_char)
        if value < 0:
            raise ParseError(
                ErrorCode.INVALID_FACE_VALUE,
                f"card {token!r}: invalid face value {face_char!r} at position 0",
                token=token,
                char=face_char,
                position=0,
            )
        suit = suit_index(suit_char)
        if suit < 0:
            raise ParseError(
                ErrorCode.INVALID_SUIT,
                f"card {token!r}: invalid suit {suit_char!r} at position 1",
                token=token,
                char=suit_char,
                position=1,
            )
        return cls(value=value, suit=Suit(suit))

    @classmethod
    def from_id(cls, card_id: int) -> Card:
        if not 0 <= card_id < DECK_SIZE:
            raise ParseError(ErrorCode.INVALID_IDENTIFIER, f"card id {card_id} is outside [0, {DECK_SIZE})")
        suit_id, value = divmod(card_id, SUIT_SIZE)
        return cls(value=value, suit=Suit(suit_id))

    def to_id(self) -> int:
        return self.suit.value * SUIT_SIZE + self.value

    def format(self) -> str:
        return f"{FACES[self.value]}{self.suit.symbol}"

    def __str__(self) -> str:
        return self.format()


class Deck(BaseModel):
    """An ordered draw of cards. Order matters; duplicates are rejected when ranked."""

    cards: tuple[Card, ...] = ()

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def parse(cls, text: str) -> Deck:
        cards: list[Card] = []
        for index, token in enumerate(split_tokens(text)):
            try:
                cards.append(Card.parse(token))
            except ParseError as exc:
                raise exc.at_token(index) from exc
        return cls(cards=tuple(cards))

    @classmethod
    def from_ids(cls, card_ids: Iterable[int]) -> Deck:
        return cls(cards=tuple(Card.from_id(card_id) for card_id in card_ids))

    @classmethod
    def full(cls) -> Deck:
        """Every card once, ascending by id: AS..KS AC..KC AH..KH AD..KD."""
        return cls.from_ids(range(DECK_SIZE))

    def format(self) -> str:
        return " ".join(card.format() for card in self.cards)

    def __str__(self) -> str:
        return self.format()

    def __len__(self) -> int:
        return len(self.cards)

    def to_ids(self) -> list[int]:
        return [card.to_id() for card in self.cards]

    def has_duplicates(self) -> bool:
        return len(set(self.cards)) != len(self.cards)

    def entropy_bits(self) -> float:
        """Bits of entropy in this many cards, assuming a fair shuffle."""
        if len(self.cards) > DECK_SIZE:
            return 0.0
        return math.log2(permutation_count(len(self.cards)))

    def rank(self) -> int:
        return rank_ids(self.to_ids())

    def hash(
        self,
        passphrase: str | bytes | None = None,
        config: DerivationConfig | None = None,
    ) -> bytes:
        """Derive the 32-byte secret for this draw.

        Raises :class:`DuplicateCardError` if a card repeats and
        :class:`DerivationError` if the derivation parameters are rejected.
        """
        return derive_secret(self.rank(), len(self.cards), passphrase, config)


class DeckView(BaseModel):
    text: str
    cards: list[str]
    ids: list[int]
    card_count: int
    has_duplicates: bool
    entropy_bits: float
    rank: str | None = None

    model_config = ConfigDict(extra="forbid")


class SecretResponse(BaseModel):
    secret_hex: str
    card_count: int
    entropy_bits: float
    hash_name: str
    iterations: int

    model_config = ConfigDict(extra="forbid")


class CardseedErrorBody(BaseModel):
    code: ErrorCode
    message: str

    model_config = ConfigDict(extra="forbid")
