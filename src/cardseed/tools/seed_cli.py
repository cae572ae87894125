from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from cardseed.config import load_config
from cardseed.engine.errors import CardseedError
from cardseed.engine.models import Deck
from cardseed.utils.logging_utils import get_logger, setup_logging


_log = get_logger("cardseed.cli")


def _read_deck_text(args: argparse.Namespace) -> str:
    if args.file is not None:
        return args.file.read_text()
    if args.deck:
        return " ".join(args.deck)
    return sys.stdin.read()


def _read_passphrase(args: argparse.Namespace) -> str | None:
    if args.passphrase_env is not None:
        if args.passphrase_env not in os.environ:
            raise SystemExit(f"environment variable {args.passphrase_env} is not set")
        return os.environ[args.passphrase_env]
    return args.passphrase


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cardseed",
        description="Derive a 32-byte secret from a shuffled deck of cards",
    )
    parser.add_argument("deck", nargs="*", help='cards such as "JC KH 2D"; read from stdin if omitted')
    parser.add_argument("--file", type=Path, help="read the deck from a file")
    secret = parser.add_mutually_exclusive_group()
    secret.add_argument("--passphrase", help="optional passphrase mixed into the secret")
    secret.add_argument("--passphrase-env", metavar="NAME", help="read the passphrase from an environment variable")
    parser.add_argument("--show-rank", action="store_true", help="also print the deck's rank and entropy")
    parser.add_argument("--full-deck", action="store_true", help="print an unshuffled deck and exit")
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging()

    if args.full_deck:
        print(Deck.full().format())
        return 0

    config = load_config()
    try:
        deck = Deck.parse(_read_deck_text(args))
        if args.show_rank:
            print(f"cards: {len(deck)}")
            print(f"entropy_bits: {deck.entropy_bits():.2f}")
            print(f"rank: {deck.rank()}")
        secret = deck.hash(_read_passphrase(args), config)
    except CardseedError as exc:
        _log.debug("rejected deck: %s", exc.code.value)
        print(f"error [{exc.code.value}]: {exc.message}", file=sys.stderr)
        return 2

    if len(deck) < 10:
        _log.warning("only %d cards (%.1f bits of entropy)", len(deck), deck.entropy_bits())
    print(secret.hex())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
