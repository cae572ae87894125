from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_FACE_VALUE = "INVALID_FACE_VALUE"
    INVALID_SUIT = "INVALID_SUIT"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    DUPLICATE_CARD = "DUPLICATE_CARD"
    DERIVATION_ERROR = "DERIVATION_ERROR"


class CardseedError(Exception):
    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class ParseError(CardseedError, ValueError):
    """A card token, identifier or deck string could not be parsed.

    ``position`` is the character offset inside the token and
    ``token_index`` the token's offset inside a deck string, when known.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        token: str | None = None,
        char: str | None = None,
        position: int | None = None,
        token_index: int | None = None,
    ) -> None:
        super().__init__(code, message)
        self.token = token
        self.char = char
        self.position = position
        self.token_index = token_index

    def at_token(self, token_index: int) -> ParseError:
        return ParseError(
            self.code,
            f"token {token_index}: {self.message}",
            token=self.token,
            char=self.char,
            position=self.position,
            token_index=token_index,
        )


class DuplicateCardError(CardseedError, ValueError):
    def __init__(self, card_id: int, position: int) -> None:
        super().__init__(
            ErrorCode.DUPLICATE_CARD,
            f"card id {card_id} appears again at position {position}",
        )
        self.card_id = card_id
        self.position = position


class DerivationError(CardseedError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.DERIVATION_ERROR, message)
