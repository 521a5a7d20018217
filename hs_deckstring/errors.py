"""Exceptions raised while reading and writing deckstrings."""


class DeckstringError(Exception):
    """Base exception for deckstring encoding and decoding errors."""
    pass


class VarintReadError(DeckstringError):
    """The byte source ran out while a varint was still being read."""
    pass


class VarintOverflowError(DeckstringError, OverflowError):
    """A varint does not fit in 64 bits."""
    pass


class InvalidDeckstringError(DeckstringError, ValueError):
    """The input is not a usable deckstring."""
    pass


class CatalogError(Exception):
    """Base exception for card catalog errors."""
    pass


class CardNotFoundError(CatalogError, KeyError):
    """A card id is not present in the catalog."""

    def __init__(self, card_id: int):
        super().__init__(card_id)
        self.card_id = card_id

    def __str__(self) -> str:
        return f"Card {self.card_id} not found in catalog"
