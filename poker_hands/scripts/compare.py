#!/usr/bin/env python
"""Compare two five-card poker hands from the command line.

Pass five cards to play against a random opponent dealt from the rest of the
deck, or ten cards to compare two given hands. Each hand is printed with its
category, followed by the result from the first hand's point of view.

Card notation:
    Ranks: 2 3 4 5 6 7 8 9 X J Q K A
    Suits: S C D H

Usage:
    python -m poker_hands.scripts.compare XC 2H 3H 4D AS
    python -m poker_hands.scripts.compare 8C 7D 6S 4D 5S 7S 2S 5D 8S 6C
    python -m poker_hands.scripts.compare --seed 42 KH KD 2C 3S 9H
    python -m poker_hands.scripts.compare --help
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from poker_hands.engine import ShowdownResult, run_showdown
from poker_hands.rules import (
    CATEGORY_NAMES,
    RANK_ALPHABET,
    SUIT_ALPHABET,
    DuplicateCardError,
    Hand,
    Outcome,
    PokerRulesError,
    SharedCardError,
    Suit,
    render,
)
from poker_hands.utils.seeding import make_rng, resolve_seed

logger = logging.getLogger(__name__)

# Exit status for rejected input, same as argparse usage errors
EXIT_USAGE = 2

SUIT_STYLES = {
    Suit.SPADES: "bold cyan",
    Suit.CLUBS: "bold green",
    Suit.DIAMONDS: "bold red",
    Suit.HEARTS: "bold red",
}

OUTCOME_STYLES = {
    Outcome.TIE: "bold yellow",
    Outcome.A_WINS: "bold green",
    Outcome.B_WINS: "bold red",
}

USAGE_HINT = f"""Command line parameters:
five or ten different playcards
Ranks: {" ".join(RANK_ALPHABET)}
Suits: {" ".join(SUIT_ALPHABET)}

example: poker-compare XC 2H 3H 4D AS
example: poker-compare 8C 7D 6S 4D 5S   7S 2S 5D 8S 6C"""


@dataclass
class CompareConfig:
    """Command line configuration."""

    cards: List[str]
    seed: Optional[int] = None
    verbose: bool = False
    color: bool = True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poker-compare",
        description="Classify a five-card poker hand and compare it against another",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  poker-compare XC 2H 3H 4D AS
  poker-compare 8C 7D 6S 4D 5S 7S 2S 5D 8S 6C
  poker-compare --seed 42 KH KD 2C 3S 9H
        """,
    )

    parser.add_argument(
        "cards",
        nargs="+",
        metavar="CARD",
        help="Five cards (random opponent) or ten cards (two hands), e.g. XC AS 2H",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for the dealt opponent"
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    parser.add_argument(
        "--no-color", action="store_true", help="Print plain text without styling"
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> CompareConfig:
    """Parse command line arguments into a CompareConfig."""
    args = build_parser().parse_args(argv)
    return CompareConfig(
        cards=list(args.cards),
        seed=args.seed,
        verbose=args.verbose,
        color=not args.no_color,
    )


def format_hand(hand: Hand) -> Text:
    """Render a hand as styled text: cards, then the category name."""
    text = Text()
    for i, card in enumerate(hand.cards):
        if i:
            text.append(" ")
        text.append(render(card), style=SUIT_STYLES[card.suit])
    text.append(f": {CATEGORY_NAMES[hand.category]}")
    return text


def print_result(console: Console, result: ShowdownResult) -> None:
    console.print(format_hand(result.hand))
    opponent = format_hand(result.opponent)
    if result.opponent_was_dealt:
        opponent.append(" (dealt)", style="dim")
    console.print(opponent)
    console.print(Text(result.message, style=OUTCOME_STYLES[result.outcome]))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the compare script."""
    config = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    color_system = "auto" if config.color else None
    console = Console(color_system=color_system, highlight=False)
    err_console = Console(stderr=True, color_system=color_system, highlight=False)

    seed = resolve_seed(config.seed)
    logger.info("Using seed: %d", seed)

    try:
        result = run_showdown(config.cards, rng=make_rng(seed))
    except PokerRulesError as e:
        logger.error("Rejected input %s: %s", " ".join(config.cards), e)
        if isinstance(e, (DuplicateCardError, SharedCardError)):
            err_console.print("Duplicated playcards!", style="bold red")
        err_console.print(f"Wrong parameters! {e}", style="bold red", markup=False)
        err_console.print(USAGE_HINT, markup=False)
        return EXIT_USAGE

    print_result(console, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
