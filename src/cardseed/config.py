from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


# Iteration count of the PBKDF2 stretching step.
PBKDF2_ITERATIONS = 1 << 16

ENV_PREFIX = "CARDSEED_"


class DerivationConfig(BaseModel):
    """Parameters of the passphrase-keyed derivation.

    Changing any of these changes every derived secret, so decks hashed
    under one config cannot be recovered under another.
    """

    hash_name: str = "sha256"
    iterations: int = PBKDF2_ITERATIONS
    salt_prefix: str = "cardseed"

    model_config = ConfigDict(extra="forbid", frozen=True)


def load_config(environ: Mapping[str, str] | None = None) -> DerivationConfig:
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    if f"{ENV_PREFIX}HASH_NAME" in env:
        overrides["hash_name"] = env[f"{ENV_PREFIX}HASH_NAME"]
    if f"{ENV_PREFIX}PBKDF2_ITERATIONS" in env:
        overrides["iterations"] = env[f"{ENV_PREFIX}PBKDF2_ITERATIONS"]
    if f"{ENV_PREFIX}SALT_PREFIX" in env:
        overrides["salt_prefix"] = env[f"{ENV_PREFIX}SALT_PREFIX"]
    return DerivationConfig.model_validate(overrides)
