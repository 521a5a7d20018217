from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

import yaml

from hs_deckstring.config import DeckstringConfig
from hs_deckstring.errors import CardNotFoundError, CatalogError
from hs_deckstring.models.card import Card
from hs_deckstring.models.decklist import CardOrder, Decklist
from hs_deckstring.models.deckstring import Deckstring

logger = logging.getLogger(__name__)


@dataclass
class ResolutionReport:
    missing: List[int] = field(default_factory=list)
    resolved: List[int] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.missing


class CardCatalog:
    """
    In-memory index of cards by id, used to turn the ids stored in a
    deckstring back into cards.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: Dict[int, Card] = {}
        for card in cards:
            self.add(card)

    def __repr__(self) -> str:
        return f"<CardCatalog(cards={len(self._cards)})>"

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards.values())

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    def add(self, card: Card) -> None:
        if card.id in self._cards:
            logger.debug(f"Replacing catalog entry for card {card.id}")
        self._cards[card.id] = card

    def get(self, card_id: int) -> Optional[Card]:
        return self._cards.get(card_id)

    def require(self, card_id: int) -> Card:
        """
        Look up a card that must exist.

        Raises:
            CardNotFoundError: If the id is not in the catalog.
        """
        card = self._cards.get(card_id)
        if card is None:
            raise CardNotFoundError(card_id)
        return card

    @classmethod
    def from_yaml(cls, path_or_str: Union[str, Path]) -> "CardCatalog":
        """
        Load a catalog from a YAML file or string holding a list of cards.

        Each entry needs an ``id`` and may give ``name``, ``mana_cost``
        (or ``manaCost``) and the other Card fields.

        Raises:
            FileNotFoundError: If a Path is given that doesn't exist.
            CatalogError: If the content is not a list of valid cards.
        """
        if isinstance(path_or_str, Path):
            if not path_or_str.exists():
                raise FileNotFoundError(f"YAML file not found: {path_or_str}")
            with open(path_or_str, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif "\n" not in path_or_str and Path(path_or_str).is_file():
            with open(path_or_str, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        else:
            data = yaml.safe_load(path_or_str)

        if isinstance(data, dict) and "cards" in data:
            data = data["cards"]
        if not isinstance(data, list):
            raise CatalogError("Card catalog must be a list of cards")
        try:
            cards = [Card.model_validate(entry) for entry in data]
        except Exception as e:
            raise CatalogError(f"Invalid card catalog: {e}") from e
        logger.info(f"Loaded {len(cards)} cards into catalog")
        return cls(cards)


def build_decklist_from_deckstring(
    deckstring: Deckstring,
    catalog: CardCatalog,
    order: Optional[CardOrder] = None,
) -> Tuple[Decklist, ResolutionReport]:
    """
    Resolve the card ids of a deckstring against a catalog.

    Cards missing from the catalog are left out of the decklist and listed
    in the report.
    """
    report = ResolutionReport()
    cards: List[Card] = []
    for card_id, quantity in deckstring.cards.items():
        card = catalog.get(card_id)
        if card is None:
            report.missing.append(card_id)
            continue
        cards.extend([card] * quantity)
        report.resolved.append(card_id)

    if report.missing:
        logger.warning(f"{len(report.missing)} card(s) not found in catalog: {report.missing}")
    return Decklist(cards, order=order), report


def decklist_to_deckstring(
    decklist: Decklist,
    format_id: int,
    hero_id: int,
    name: Optional[str] = None,
    config: Optional[DeckstringConfig] = None,
) -> Deckstring:
    """Encode a decklist as a deckstring."""
    return Deckstring.from_cards(format_id, hero_id, decklist.card_quantities(), name=name, config=config)
