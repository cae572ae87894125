from __future__ import annotations

import pytest

from cardseed.config import DerivationConfig
from cardseed.engine.service import CardSeedService


@pytest.fixture
def fast_config() -> DerivationConfig:
    return DerivationConfig(iterations=16)


@pytest.fixture
def service(fast_config: DerivationConfig) -> CardSeedService:
    return CardSeedService(fast_config)
