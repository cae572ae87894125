from __future__ import annotations


# Face characters in value order: Ace=0 .. King=12.
FACES = "A23456789TJQK"
# Suit characters in id order: Spades=0, Clubs=1, Hearts=2, Diamonds=3.
SUITS = "SCHD"

SUIT_SIZE = len(FACES)
DECK_SIZE = SUIT_SIZE * len(SUITS)


def face_index(char: str) -> int:
    """Value of a face character, or -1. Lowercase is accepted."""
    if len(char) != 1:
        return -1
    return FACES.find(char.upper())


def suit_index(char: str) -> int:
    if len(char) != 1:
        return -1
    return SUITS.find(char.upper())


def split_tokens(text: str) -> list[str]:
    return text.split()
