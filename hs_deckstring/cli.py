#!/usr/bin/env python3
"""
Deckstring command line tool.

Usage:
    hs-deck decode <deckstring | -> [--json] [--check] [--config <file>]
    hs-deck encode --format <id> --hero <id> --card <id[:qty]> ... [--name <name>] [--config <file>]

Options:
    --json      Print the decoded deck as JSON
    --check     Also check the deck against the configured copy limits
    --config    Path to a YAML configuration file
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

import yaml

from hs_deckstring.config import DeckstringConfig, default_config
from hs_deckstring.deckstring_io import decode_deckstring, encode_deckstring, validate_deckstring
from hs_deckstring.errors import DeckstringError

logger = logging.getLogger(__name__)


def parse_card_argument(value: str) -> Dict[int, int]:
    """Parse ``ID`` or ``ID:QTY`` into a one-entry card map."""
    card_part, _, quantity_part = value.partition(":")
    try:
        card_id = int(card_part)
        quantity = int(quantity_part) if quantity_part else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid card '{value}', expected ID or ID:QTY")
    if card_id < 1 or quantity < 1:
        raise argparse.ArgumentTypeError(f"Invalid card '{value}', id and quantity must be positive")
    return {card_id: quantity}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hs-deck", description="Decode and encode Hearthstone deckstrings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML configuration file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --config may also follow the subcommand; SUPPRESS keeps a value given before it
    config_parent = argparse.ArgumentParser(add_help=False)
    config_parent.add_argument("--config", type=Path, default=argparse.SUPPRESS, help="Path to a YAML configuration file")

    decode = subparsers.add_parser("decode", parents=[config_parent], help="Decode a deckstring")
    decode.add_argument("deckstring", help="Deckstring text, or - to read from stdin")
    decode.add_argument("--json", action="store_true", help="Print the deck as JSON")
    decode.add_argument("--check", action="store_true", help="Check the deck against the copy limits")

    encode = subparsers.add_parser("encode", parents=[config_parent], help="Encode a deck as a deckstring")
    encode.add_argument("--format", dest="format_id", type=int, required=True, help="Format id")
    encode.add_argument("--hero", dest="hero_id", type=int, required=True, help="Hero id")
    encode.add_argument(
        "--card",
        dest="cards",
        type=parse_card_argument,
        action="append",
        default=[],
        help="Card as ID or ID:QTY; repeat for each card",
    )
    encode.add_argument("--name", default=None, help="Deck name to put in the header")
    encode.add_argument("--version", dest="deck_version", type=int, default=None, help="Version number to write")
    return parser


def print_deck(deckstring, as_json: bool = False) -> None:
    if as_json:
        data = deckstring.to_dict()
        data["cards"] = {str(card_id): quantity for card_id, quantity in sorted(deckstring.cards.items())}
        print(json.dumps(data, indent=2))
        return
    print(f"Name: {deckstring.name or '(none)'}")
    print(f"Version: {deckstring.version}")
    print(f"Format: {deckstring.format_id}")
    print(f"Hero: {deckstring.hero_id}")
    print(f"Cards ({deckstring.number_of_cards}):")
    for card_id, quantity in sorted(deckstring.cards.items()):
        print(f"  {quantity}x {card_id}")


def run_decode(args: argparse.Namespace, config: DeckstringConfig) -> int:
    text = sys.stdin.read() if args.deckstring == "-" else args.deckstring
    deckstring = decode_deckstring(text)
    print_deck(deckstring, as_json=args.json)
    if args.check:
        is_valid, errors = validate_deckstring(deckstring, config)
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return 0 if is_valid else 1
    return 0


def run_encode(args: argparse.Namespace, config: DeckstringConfig) -> int:
    cards: Dict[int, int] = {}
    for entry in args.cards:
        for card_id, quantity in entry.items():
            cards[card_id] = cards.get(card_id, 0) + quantity
    deckstring = encode_deckstring(
        args.format_id,
        args.hero_id,
        cards,
        name=args.name,
        version=args.deck_version,
        config=config,
    )
    sys.stdout.write(deckstring.deckcode if deckstring.deckcode.endswith("\n") else deckstring.deckcode + "\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = DeckstringConfig.from_yaml(args.config) if args.config else default_config()
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Could not load configuration: {e}")
        return 1

    try:
        if args.command == "decode":
            return run_decode(args, config)
        return run_encode(args, config)
    except DeckstringError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
