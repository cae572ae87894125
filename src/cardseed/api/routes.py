from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict

from cardseed.api.deps import seed_service
from cardseed.engine.errors import CardseedError, DerivationError
from cardseed.engine.models import CardseedErrorBody, DeckView, SecretResponse


router = APIRouter(prefix="/api")


class ParseDeckRequest(BaseModel):
    text: str

    model_config = ConfigDict(extra="forbid")


class SecretRequest(BaseModel):
    deck: str
    passphrase: str | None = None

    model_config = ConfigDict(extra="forbid")


def _error_detail(exc: CardseedError) -> dict:
    return CardseedErrorBody(code=exc.code, message=exc.message).model_dump(mode="json")


@router.get("/decks/full", response_model=DeckView)
async def full_deck() -> DeckView:
    return await seed_service.full_deck()


@router.post("/decks/parse", response_model=DeckView)
async def parse_deck(request: ParseDeckRequest) -> DeckView:
    try:
        return await seed_service.describe(request.text)
    except CardseedError as exc:
        raise HTTPException(status_code=400, detail=_error_detail(exc)) from exc


@router.post("/secrets", response_model=SecretResponse)
async def derive_secret(request: SecretRequest) -> SecretResponse:
    try:
        return await seed_service.derive(request.deck, request.passphrase)
    except DerivationError as exc:
        raise HTTPException(status_code=500, detail=_error_detail(exc)) from exc
    except CardseedError as exc:
        raise HTTPException(status_code=400, detail=_error_detail(exc)) from exc
