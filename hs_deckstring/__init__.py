"""Hearthstone deckstring library public API.

This package provides the deckstring codec, the sorted Decklist container
and a small card catalog for resolving card ids. Keep network and API
client code out of this namespace.
"""

from .config import DeckstringConfig, default_config
from .errors import (
    DeckstringError,
    VarintReadError,
    VarintOverflowError,
    InvalidDeckstringError,
    CatalogError,
    CardNotFoundError,
)
from .models.card import Card
from .models.deckstring import Deckstring
from .models.decklist import Decklist, Ordering, Slot, mana_cost_then_name
from .deckstring_io import (
    decode_deckstring,
    encode_deckstring,
    validate_deckstring,
)
from .catalog import (
    CardCatalog,
    ResolutionReport,
    build_decklist_from_deckstring,
    decklist_to_deckstring,
)
from .utils.varint import encode_varint, decode_varint

__all__ = [
    "DeckstringConfig",
    "default_config",
    "DeckstringError",
    "VarintReadError",
    "VarintOverflowError",
    "InvalidDeckstringError",
    "CatalogError",
    "CardNotFoundError",
    "Card",
    "Deckstring",
    "Decklist",
    "Ordering",
    "Slot",
    "mana_cost_then_name",
    "decode_deckstring",
    "encode_deckstring",
    "validate_deckstring",
    "CardCatalog",
    "ResolutionReport",
    "build_decklist_from_deckstring",
    "decklist_to_deckstring",
    "encode_varint",
    "decode_varint",
]
