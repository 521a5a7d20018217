"""
Reading and writing deckstrings.

A deckstring is the base64 encoding of a sequence of varints::

    0                                   header
    version
    format id
    hero count, hero ids...
    one-of count, card ids...           quantity 1
    two-of count, card ids...           quantity 2
    x-of count, (card id, quantity)...  any other quantity

A named deckstring wraps the base64 line between a ``### <name>`` header and
a trailer comment line.
"""
from __future__ import annotations

import base64
import binascii
import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, Dict, List, Mapping, Optional, Tuple

from hs_deckstring.config import DeckstringConfig, default_config
from hs_deckstring.errors import InvalidDeckstringError
from hs_deckstring.models.deckstring import Deckstring
from hs_deckstring.utils.varint import decode_varint, encode_varint

logger = logging.getLogger(__name__)

DECKSTRING_HEADER = 0
NAME_PREFIX = "###"
COMMENT_PREFIX = "#"


@dataclass
class DeckPayload:
    version: int
    format_id: int
    hero_ids: List[int]
    cards: Dict[int, int]


def split_by_quantity(cards: Mapping[int, int]) -> Tuple[List[int], List[int], List[Tuple[int, int]]]:
    """
    Partition a card map into one-of ids, two-of ids and (id, quantity) pairs.

    Raises:
        InvalidDeckstringError: If a card id is negative or a quantity is not positive.
    """
    one_ofs: List[int] = []
    two_ofs: List[int] = []
    x_ofs: List[Tuple[int, int]] = []
    for card_id, quantity in cards.items():
        if card_id < 0:
            raise InvalidDeckstringError(f"Card id must not be negative, got {card_id}")
        if quantity < 1:
            raise InvalidDeckstringError(f"Card {card_id} has non-positive quantity {quantity}")
        if quantity == 1:
            one_ofs.append(card_id)
        elif quantity == 2:
            two_ofs.append(card_id)
        else:
            x_ofs.append((card_id, quantity))
    return one_ofs, two_ofs, x_ofs


def cards_to_payload(cards: Mapping[int, int], format_id: int, hero_id: int, version: int = 0) -> bytes:
    """
    Serialize a deck into the binary payload (before base64).

    Raises:
        InvalidDeckstringError: If an id, the version or a quantity can't be written.
    """
    for label, number in (("version", version), ("format id", format_id), ("hero id", hero_id)):
        if number < 0:
            raise InvalidDeckstringError(f"Deckstring {label} must not be negative, got {number}")
    one_ofs, two_ofs, x_ofs = split_by_quantity(cards)
    buffer = bytearray()

    def append(number: int) -> None:
        buffer.extend(encode_varint(number))

    append(DECKSTRING_HEADER)
    append(version)
    append(format_id)

    hero_ids = [hero_id]
    append(len(hero_ids))
    for hero in hero_ids:
        append(hero)

    append(len(one_ofs))
    for card_id in one_ofs:
        append(card_id)

    append(len(two_ofs))
    for card_id in two_ofs:
        append(card_id)

    append(len(x_ofs))
    for card_id, quantity in x_ofs:
        append(card_id)
        append(quantity)

    return bytes(buffer)


def format_deckcode(encoded: str, name: Optional[str] = None, trailer: Optional[str] = None) -> str:
    """Wrap a base64 payload with the name header and trailer, or return it bare."""
    if name is None:
        return encoded
    return f"{NAME_PREFIX} {name}\n{encoded}\n{trailer or ''}\n"


def encode_deckstring(
    format_id: int,
    hero_id: int,
    cards: Mapping[int, int],
    name: Optional[str] = None,
    version: Optional[int] = None,
    config: Optional[DeckstringConfig] = None,
) -> Deckstring:
    """
    Create a new deckstring from its parts.

    Args:
        format_id: Id of the deck's format.
        hero_id: Id of the deck's hero.
        cards: Map of card id to quantity. Quantities must be positive.
        name: Optional deck name; when given the text gets a name header and trailer.
        version: Version number to write. Defaults to the configured version.
        config: Optional configuration supplying the version and trailer.

    Returns:
        Deckstring: The encoded deck.
    """
    config = config or default_config()
    if version is None:
        version = config.version
    payload = cards_to_payload(cards, format_id, hero_id, version)
    encoded = base64.b64encode(payload).decode("ascii")
    deckcode = format_deckcode(encoded, name, config.trailer)
    logger.debug(f"Encoded deck with {len(cards)} unique cards into {len(payload)} payload bytes")
    return Deckstring(
        format_id=format_id,
        hero_ids=(hero_id,),
        cards=cards,
        deckcode=deckcode,
        version=version,
        name=name,
    )


def find_deckstring_lines(text: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Find the payload line and the deck name in deckstring text.

    Lines starting with ``###`` name the deck; each one replaces the name
    seen before it. The payload is the first non-empty line that does not
    start with ``#``; later candidates are ignored. Scanning stops once a
    payload and a name have both been seen.

    Returns:
        Tuple of (payload line or None, name or None).
    """
    payload: Optional[str] = None
    name: Optional[str] = None
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith(NAME_PREFIX):
            name = line[len(NAME_PREFIX):].strip()
        elif line.startswith(COMMENT_PREFIX):
            logger.debug(f"Skipping comment line: {line}")
        elif payload is None:
            payload = line
        else:
            logger.debug(f"Ignoring extra payload candidate: {line}")
        if payload is not None and name is not None:
            break
    return payload, name


def read_payload(stream: BinaryIO) -> DeckPayload:
    """
    Read the varint sequence of a decoded payload.

    Raises:
        InvalidDeckstringError: If the header is wrong, there are no heroes or a quantity is zero.
        VarintReadError: If the payload ends early.
        VarintOverflowError: If a number is too large.
    """
    header = decode_varint(stream)
    if header != DECKSTRING_HEADER:
        raise InvalidDeckstringError(f"Invalid deckstring header: {header}")

    version = decode_varint(stream)
    format_id = decode_varint(stream)

    hero_count = decode_varint(stream)
    if hero_count == 0:
        raise InvalidDeckstringError("Deckstring has no hero")
    hero_ids = [decode_varint(stream) for _ in range(hero_count)]
    if len(hero_ids) > 1:
        logger.warning(f"Deckstring lists {len(hero_ids)} heroes, using {hero_ids[0]} as the primary hero")

    cards: Dict[int, int] = {}
    for _ in range(decode_varint(stream)):
        cards[decode_varint(stream)] = 1
    for _ in range(decode_varint(stream)):
        cards[decode_varint(stream)] = 2
    for _ in range(decode_varint(stream)):
        card_id = decode_varint(stream)
        quantity = decode_varint(stream)
        if quantity == 0:
            raise InvalidDeckstringError(f"Card {card_id} has quantity 0")
        cards[card_id] = quantity

    logger.debug(f"Read payload: version={version}, format={format_id}, heroes={hero_ids}, unique_cards={len(cards)}")
    return DeckPayload(version=version, format_id=format_id, hero_ids=hero_ids, cards=cards)


def decode_deckstring(text: str) -> Deckstring:
    """
    Parse deckstring text, with or without a name header.

    Args:
        text: A bare base64 deckstring or the named, multi-line form.

    Returns:
        Deckstring: The decoded deck. ``deckcode`` keeps the text as given.

    Raises:
        InvalidDeckstringError: If no payload is found, it isn't valid base64, or its structure is wrong.
        VarintReadError: If the payload ends early.
        VarintOverflowError: If a number is too large.
    """
    payload_line, name = find_deckstring_lines(text)
    if payload_line is None:
        raise InvalidDeckstringError("No deckstring found in input")
    try:
        data = base64.b64decode(payload_line, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidDeckstringError(f"Deckstring is not valid base64: {e}") from e

    payload = read_payload(io.BytesIO(data))
    return Deckstring(
        format_id=payload.format_id,
        hero_ids=tuple(payload.hero_ids),
        cards=payload.cards,
        deckcode=text,
        version=payload.version,
        name=name,
    )


def validate_deckstring(deckstring: Deckstring, config: Optional[DeckstringConfig] = None) -> Tuple[bool, List[str]]:
    """
    Check a decoded deck against the configured copy limits.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    config = config or default_config()
    errors: List[str] = []

    total_cards = deckstring.number_of_cards
    if config.card_limit is not None and total_cards > config.card_limit:
        errors.append(f"Deck has {total_cards} cards, maximum is {config.card_limit}.")

    if config.slot_limit is not None:
        for card_id, quantity in sorted(deckstring.cards.items()):
            if quantity > config.slot_limit:
                errors.append(f"Too many copies of card {card_id} ({quantity}), max is {config.slot_limit}.")

    return len(errors) == 0, errors
