#!/usr/bin/env python3
"""Compare poker hands from the command line.

Pass one hand to play against a randomly dealt opponent, or two hands to
compare them directly. Cards are written as RANK+SUIT:

    Ranks: 2 3 4 5 6 7 8 9 X J Q K A
    Suits: S C D H

Usage:
    python -m poker_hands.scripts.showdown XC 2H 3H 4D AS
    python -m poker_hands.scripts.showdown 8C 7D 6S 4D 5S   7S 2S 5D 8S 6C
    python -m poker_hands.scripts.showdown XC 2H 3H 4D AS --seed 42 --verbose
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text
from rich import box

from poker_hands.agents import RandomDealer
from poker_hands.rules import (
    HAND_SIZE,
    Card,
    DuplicateCardError,
    Hand,
    HandSizeError,
    Outcome,
    OverlappingCardsError,
    PokerRulesError,
    RANK_SYMBOLS,
    Suit,
    SUIT_GLYPHS,
)
from poker_hands.utils.seeding import set_seed

logger = logging.getLogger(__name__)

USAGE_BANNER = """Command line parameters:
five or ten different playcards
Ranks: 2 3 4 5 6 7 8 9 X J Q K A
Suits: S C D H

example: poker-showdown XC 2H 3H 4D AS
example: poker-showdown 8C 7D 6S 4D 5S   7S 2S 5D 8S 6C"""

RESULT_MESSAGES = {
    Outcome.TIE: "TIE!",
    Outcome.SELF_WINS: "YOU WIN!",
    Outcome.OTHER_WINS: "YOU LOSE!",
}

SUIT_STYLES = {
    Suit.SPADE: "bold cyan1",
    Suit.CLUB: "bold green1",
    Suit.DIAMOND: "bold red1",
    Suit.HEART: "bold red1",
}

# Exit status for rejected input
EXIT_USAGE = 2


@dataclass
class ShowdownConfig:
    """Showdown configuration."""

    # Card tokens as typed, five or ten
    cards: List[str] = field(default_factory=list)

    # Seed for the random opponent (None = fresh entropy)
    seed: Optional[int] = None

    # Output
    verbose: bool = False
    color: bool = True


def parse_cards(tokens: Sequence[str]) -> List[Card]:
    """Parse five or ten card tokens, rejecting repeats.

    Args:
        tokens: Card strings such as "XC" or "8d"

    Returns:
        Parsed cards in input order

    Raises:
        InvalidDomainError: If a token is not a card
        HandSizeError: If not given 5 or 10 tokens
        DuplicateCardError: If a card is given twice
    """
    if len(tokens) not in (HAND_SIZE, 2 * HAND_SIZE):
        raise HandSizeError(f"Expected {HAND_SIZE} or {2 * HAND_SIZE} cards, got {len(tokens)}")

    cards = [Card.from_string(token) for token in tokens]

    seen = set()
    for card in cards:
        if card in seen:
            raise DuplicateCardError(f"Duplicate card: {card}")
        seen.add(card)
    return cards


def build_hands(cards: Sequence[Card], seed: Optional[int] = None) -> Tuple[Hand, Hand, bool]:
    """Build the player's hand and the opponent's hand.

    Args:
        cards: Five or ten parsed cards
        seed: Seed for the random opponent when only five cards are given.
            A fresh seed is drawn and logged when None, so the deal can be
            replayed with --seed.

    Returns:
        (player hand, opponent hand, whether the opponent was dealt)
    """
    player = Hand(cards[:HAND_SIZE])
    if len(cards) > HAND_SIZE:
        return player, Hand(cards[HAND_SIZE:]), False

    seed = set_seed(seed)
    dealer = RandomDealer(seed=seed)
    opponent = dealer.deal_hand(exclude=player.cards)
    logger.info("Dealt random opponent hand with seed %d (replay with --seed %d)", seed, seed)
    return player, opponent, True


def card_text(card: Card, color: bool = True) -> Text:
    """Return a Rich Text for a card, e.g. 'X♥' styled by suit."""
    label = f"{RANK_SYMBOLS[card.rank]}{SUIT_GLYPHS[card.suit]}" if color else str(card)
    return Text(label, style=SUIT_STYLES[card.suit] if color else "")


def render_hands(hands: Sequence[Tuple[str, Hand]], color: bool = True) -> Table:
    """Render hands as a table of cards, category and signature."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Player")
    table.add_column("Cards")
    table.add_column("Category")
    table.add_column("Signature")

    for name, hand in hands:
        cards = Text(" ").join(card_text(card, color) for card in hand.cards)
        table.add_row(name, cards, hand.category.label, hand.signature_str)
    return table


def run(config: ShowdownConfig, console: Optional[Console] = None) -> Outcome:
    """Classify the configured hands and print the winner.

    Args:
        config: Showdown configuration
        console: Console to print to (stdout if not provided)

    Returns:
        The outcome from the player's point of view

    Raises:
        PokerRulesError: If the cards are invalid
    """
    if console is None:
        console = Console(no_color=not config.color, highlight=False)

    cards = parse_cards(config.cards)
    player, opponent, dealt = build_hands(cards, seed=config.seed)

    opponent_name = "Dealer" if dealt else "Opponent"
    console.print(render_hands([("You", player), (opponent_name, opponent)], color=config.color))
    for hand in (player, opponent):
        console.print(str(hand), markup=False)

    outcome = player.compare(opponent)
    console.print(Text(RESULT_MESSAGES[outcome], style="bold yellow" if config.color else ""))
    return outcome


def setup_logging(verbose: bool = False) -> None:
    """Route log records through a RichHandler on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> ShowdownConfig:
    parser = argparse.ArgumentParser(
        description="Classify five-card poker hands and pick the winner",
        epilog=USAGE_BANNER,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("cards", nargs="*", help="Five or ten cards, e.g. XC 2H 3H 4D AS")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random opponent")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log classification details")
    parser.add_argument("--no-color", action="store_true", help="Plain text output")

    args = parser.parse_args(argv)

    return ShowdownConfig(
        cards=list(args.cards),
        seed=args.seed,
        verbose=args.verbose,
        color=not args.no_color,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    setup_logging(config.verbose)
    console = Console(no_color=not config.color, highlight=False)

    try:
        run(config, console)
    except PokerRulesError as exc:
        logger.warning("Rejected input: %s", exc)
        if isinstance(exc, (DuplicateCardError, OverlappingCardsError)):
            console.print("\n*****\nDuplicated playcards!\n*****\n", markup=False)
        console.print("Wrong parameters!", markup=False)
        console.print(USAGE_BANNER, markup=False)
        return EXIT_USAGE

    return 0


if __name__ == "__main__":
    sys.exit(main())
