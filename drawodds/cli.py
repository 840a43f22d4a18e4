"""
Command-line calculator.

Same flow as the web form: collect the fields, validate them, run the
calculation and print the recommendation with its odds table.
"""

import argparse
import logging

from drawodds.analysis.calculator import calculate
from drawodds.config import DEFAULT_POINTS, settings
from drawodds.models.calculation import CalculationInput, CalculationResult, format_percent
from drawodds.services.card_catalog import CARD_CATALOG, list_card_names
from drawodds.services.input_validation import validate_calculation_input

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def format_card_list() -> str:
    """One line per supported card with its rules text."""
    lines = [f"Supported cards ({len(CARD_CATALOG)}):"]
    for card in CARD_CATALOG.values():
        lines.append(f"- {card.name}: {card.effect_text}")
    return "\n".join(lines)


def format_result(result: CalculationResult) -> str:
    """
    Render a calculation result for the terminal.

    Shows the verdict, the explanation and, when present, the odds table
    with a discard marker for cards that would be shuffled away.
    """
    verdict = "WORTH IT" if result.worth_it else "NOT WORTH IT"
    lines = [f"{verdict}: {result.explanation}"]

    details = result.details
    if details is None:
        return "\n".join(lines)

    lines.append(f"Card: {details.card_name}")
    lines.append(f"Effect: {details.card_effect}")
    lines.append(f"Cards to draw: {details.cards_to_draw}")
    if details.combined_odds is not None:
        lines.append(f"Total odds: {format_percent(details.combined_odds)}%")
    if details.has_cards_in_hand:
        lines.append("Warning: needed cards in hand will be shuffled away")
    if details.strategic_value:
        lines.append(f"Strategic value: {details.strategic_value}")
    if details.recommendation:
        lines.append(f"Recommendation: {details.recommendation}")

    for row in details.odds:
        line = (
            f"  #{row.card_index}: {row.odds_percent}% "
            f"(in deck: {row.remaining_in_deck}, in hand: {row.in_hand}) - {row.comment}"
        )
        if row.will_discard:
            line += " [will be discarded]"
        lines.append(line)

    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drawodds",
        description="Odds calculator for hand-disruption cards",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("cards", help="List supported cards")

    calc = subparsers.add_parser("calculate", help="Calculate whether a card is worth playing")
    calc.add_argument("card", choices=list_card_names(), help="Card to play")
    calc.add_argument("--deck", type=int, required=True, help="Cards left in deck")
    calc.add_argument("--hand", type=int, required=True, help="Cards in hand")
    calc.add_argument(
        "--remaining",
        type=int,
        nargs="+",
        default=[1],
        help="Copies left in deck, one value per needed card",
    )
    calc.add_argument(
        "--in-hand",
        type=int,
        nargs="+",
        default=None,
        help="Copies already in hand, one value per needed card (default: 0 each)",
    )
    calc.add_argument(
        "--opponent-points",
        type=int,
        default=DEFAULT_POINTS,
        help="Points the opponent has earned",
    )
    calc.add_argument(
        "--user-points",
        type=int,
        default=DEFAULT_POINTS,
        help="Points you have earned",
    )
    return parser


def _input_from_args(args: argparse.Namespace) -> CalculationInput:
    in_hand = args.in_hand if args.in_hand is not None else [0] * len(args.remaining)
    return CalculationInput(
        card_name=args.card,
        cards_in_deck=args.deck,
        cards_in_hand=args.hand,
        unique_cards_needed=len(args.remaining),
        remaining_in_deck=tuple(args.remaining),
        in_hand=tuple(in_hand),
        opponent_points=args.opponent_points,
        user_points=args.user_points,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "cards":
        print(format_card_list())
        return EXIT_OK

    params = _input_from_args(args)
    errors = validate_calculation_input(params)
    if errors:
        logger.info("Rejected input: %s", sorted(errors))
        print("Please fix the validation errors before calculating:")
        for field_name, message in sorted(errors.items()):
            print(f"  {field_name}: {message}")
        return EXIT_INVALID_INPUT

    print(format_result(calculate(params)))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
