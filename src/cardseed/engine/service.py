from __future__ import annotations

import asyncio

from cardseed.config import DerivationConfig
from cardseed.engine.models import Deck, DeckView, SecretResponse
from cardseed.utils.logging_utils import get_logger


_log = get_logger("cardseed.service")


class CardSeedService:
    def __init__(self, config: DerivationConfig | None = None) -> None:
        self._config = config or DerivationConfig()

    @property
    def config(self) -> DerivationConfig:
        return self._config

    async def describe(self, text: str) -> DeckView:
        return self._build_view(Deck.parse(text))

    async def full_deck(self) -> DeckView:
        return self._build_view(Deck.full())

    async def derive(self, deck_text: str, passphrase: str | None = None) -> SecretResponse:
        deck = Deck.parse(deck_text)
        # PBKDF2 blocks; run it off the event loop.
        secret = await asyncio.to_thread(deck.hash, passphrase, self._config)
        entropy = deck.entropy_bits()
        _log.info(
            "derived secret from %d cards (%.2f bits, passphrase=%s)",
            len(deck),
            entropy,
            "yes" if passphrase else "no",
        )
        return SecretResponse(
            secret_hex=secret.hex(),
            card_count=len(deck),
            entropy_bits=entropy,
            hash_name=self._config.hash_name,
            iterations=self._config.iterations,
        )

    def _build_view(self, deck: Deck) -> DeckView:
        duplicates = deck.has_duplicates()
        return DeckView(
            text=deck.format(),
            cards=[card.format() for card in deck.cards],
            ids=deck.to_ids(),
            card_count=len(deck),
            has_duplicates=duplicates,
            entropy_bits=deck.entropy_bits(),
            # Decimal string: ranks exceed JSON number precision.
            rank=None if duplicates else str(deck.rank()),
        )
