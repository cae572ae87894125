from __future__ import annotations

from cardseed.config import load_config
from cardseed.engine.service import CardSeedService


seed_service = CardSeedService(load_config())
