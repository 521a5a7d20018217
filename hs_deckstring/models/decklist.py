"""
Decklist: the cards of a deck, grouped into slots and kept in display order.

Slots are kept sorted with an ordering function fixed at construction, so
lookups use binary search. Adding a copy of a card already in the list or
removing a copy without emptying its slot costs O(log n); inserting or
removing a whole slot costs O(n).
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Union

import pandas as pd

from hs_deckstring.models.card import Card

logger = logging.getLogger(__name__)

MAX_CURVE_COST = 7


class Ordering(enum.Enum):
    """Result of comparing two cards."""

    BEFORE = -1
    AFTER = 1
    EQUAL = 0


CardOrder = Callable[[Card, Card], Ordering]


def mana_cost_then_name(lhs: Card, rhs: Card) -> Ordering:
    """
    Default card order: cheaper cards first, then alphabetical by name.

    Only the same card compares EQUAL. Two different cards with the same cost
    and name are ordered by id so the order stays total.
    """
    if lhs.id == rhs.id:
        return Ordering.EQUAL
    if lhs.mana_cost != rhs.mana_cost:
        return Ordering.BEFORE if lhs.mana_cost < rhs.mana_cost else Ordering.AFTER
    if lhs.name != rhs.name:
        return Ordering.BEFORE if lhs.name < rhs.name else Ordering.AFTER
    return Ordering.BEFORE if lhs.id < rhs.id else Ordering.AFTER


@dataclass(frozen=True)
class Slot:
    """A card and how many copies of it are in the deck."""

    card: Card
    quantity: int

    def incremented(self) -> "Slot":
        return replace(self, quantity=self.quantity + 1)

    def decremented(self) -> Optional["Slot"]:
        """The slot with one copy fewer, or None if that would leave it empty."""
        if self.quantity - 1 > 0:
            return replace(self, quantity=self.quantity - 1)
        return None


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a binary search.

    ``found`` tells whether the card is present. ``index`` is its slot index
    when found, otherwise the index at which it would be inserted.
    """

    found: bool
    index: int


class Decklist:
    """
    The cards of a deck as sorted (card, quantity) slots.

    Each card appears in at most one slot and every slot holds at least one
    copy. Mutating methods return False and leave the list untouched when the
    change isn't allowed.

    Not safe for concurrent mutation; use :meth:`copy` to hand a decklist to
    another owner.
    """

    def __init__(self, cards: Iterable[Card] = (), order: Optional[CardOrder] = None):
        """
        Args:
            cards: Cards in the deck; repeated cards become one slot with a higher quantity.
            order: Three-way ordering function. Defaults to :func:`mana_cost_then_name`.
                It must return EQUAL only for the same card and cannot be changed later.
        """
        self._order: CardOrder = order or mana_cost_then_name
        quantities: Dict[Card, int] = {}
        for card in cards:
            quantities[card] = quantities.get(card, 0) + 1
        slots = [Slot(card=card, quantity=quantity) for card, quantity in quantities.items()]
        slots.sort(key=cmp_to_key(lambda lhs, rhs: self._order(lhs.card, rhs.card).value))
        self._slots: List[Slot] = slots
        self._card_count = sum(slot.quantity for slot in slots)
        logger.debug(f"Decklist built with {len(self._slots)} slots and {self.number_of_cards} cards")

    @classmethod
    def from_quantities(cls, quantities: Dict[Card, int], order: Optional[CardOrder] = None) -> "Decklist":
        """Build a decklist from a card-to-quantity map. Non-positive quantities are skipped."""
        cards: List[Card] = []
        for card, quantity in quantities.items():
            cards.extend([card] * max(quantity, 0))
        return cls(cards, order=order)

    @property
    def order(self) -> CardOrder:
        return self._order

    # --- Sequence protocol -------------------------------------------------

    def __iter__(self) -> Iterator[Slot]:
        return iter(list(self._slots))

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Slot:
        return self._slots[index]

    def __bool__(self) -> bool:
        return bool(self._slots)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Decklist):
            return NotImplemented
        return self._slots == other._slots

    __hash__ = None

    def __repr__(self) -> str:
        return f"<Decklist(slots={self.number_of_slots}, cards={self.number_of_cards})>"

    def copy(self) -> "Decklist":
        """An independent decklist with the same slots and ordering."""
        clone = Decklist(order=self._order)
        clone._slots = list(self._slots)
        clone._card_count = self._card_count
        return clone

    # --- Derived views -----------------------------------------------------

    @property
    def number_of_cards(self) -> int:
        """Total copies across all slots."""
        return self._card_count

    @property
    def number_of_slots(self) -> int:
        """Distinct cards. Two copies of one card use one slot."""
        return len(self._slots)

    @property
    def mana_curve(self) -> Dict[int, int]:
        """
        Copies per mana cost, with keys 0 through 7.

        Costs above 6 are all counted under 7. Every key is present even
        when no card has that cost.
        """
        curve = {cost: 0 for cost in range(MAX_CURVE_COST + 1)}
        for slot in self._slots:
            cost = min(slot.card.mana_cost, MAX_CURVE_COST)
            curve[cost] += slot.quantity
        return curve

    @property
    def cards(self) -> List[Card]:
        """Every copy of every card, in slot order."""
        return [slot.card for slot in self._slots for _ in range(slot.quantity)]

    def quantity_of(self, card: Card) -> int:
        index = self.contains(card)
        return 0 if index is None else self._slots[index].quantity

    def card_quantities(self) -> Dict[int, int]:
        """Map of card id to quantity, as stored in a deckstring."""
        return {slot.card.id: slot.quantity for slot in self._slots}

    # --- Lookup ------------------------------------------------------------

    def locate(self, card: Card) -> SearchResult:
        """
        Binary search for a card.

        The slots must already be sorted by this decklist's ordering.
        """
        low, high = 0, len(self._slots)
        while low < high:
            mid = low + (high - low) // 2
            result = self._order(self._slots[mid].card, card)
            if result is Ordering.EQUAL:
                return SearchResult(found=True, index=mid)
            if result is Ordering.BEFORE:
                low = mid + 1
            else:
                high = mid
        return SearchResult(found=False, index=low)

    def contains(self, card: Card) -> Optional[int]:
        """Index of the card's slot, or None if the card is not in the decklist."""
        if not self._slots:
            return None
        result = self.locate(card)
        return result.index if result.found else None

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and self.contains(card) is not None

    # --- Mutation ----------------------------------------------------------

    def increment_card(self, card: Card, slot_limit: Optional[int] = 2, card_limit: Optional[int] = 30) -> bool:
        """
        Add one copy of a card.

        Args:
            card: Card to add.
            slot_limit: Maximum copies of this card, None for no limit.
            card_limit: Maximum cards in the deck, None for no limit.

        Returns:
            bool: True if the copy was added, False if a limit would be exceeded.
        """
        if card_limit is not None and self._card_count + 1 > card_limit:
            return False
        result = self.locate(card)
        if result.found:
            return self._increment_slot(result.index, slot_limit)
        if slot_limit is not None and slot_limit < 1:
            return False
        self._slots.insert(result.index, Slot(card=card, quantity=1))
        self._card_count += 1
        return True

    def increment_card_at(self, index: int, slot_limit: Optional[int] = 2, card_limit: Optional[int] = 30) -> bool:
        """Add one copy of the card in the slot at ``index``. False if the index is out of range."""
        if not 0 <= index < len(self._slots):
            return False
        if card_limit is not None and self._card_count + 1 > card_limit:
            return False
        return self._increment_slot(index, slot_limit)

    def _increment_slot(self, index: int, slot_limit: Optional[int]) -> bool:
        # card limit already checked by the caller
        slot = self._slots[index]
        if slot_limit is not None and slot.quantity + 1 > slot_limit:
            return False
        self._slots[index] = slot.incremented()
        self._card_count += 1
        return True

    def decrement_card(self, card: Card) -> bool:
        """
        Remove one copy of a card. A slot left with no copies is removed.

        Returns:
            bool: True if a copy was removed, False if the card isn't in the decklist.
        """
        if not self._slots:
            return False
        result = self.locate(card)
        if not result.found:
            return False
        return self.decrement_card_at(result.index)

    def decrement_card_at(self, index: int) -> bool:
        """Remove one copy of the card in the slot at ``index``. False if the index is out of range."""
        if not 0 <= index < len(self._slots):
            return False
        slot = self._slots[index].decremented()
        if slot is None:
            del self._slots[index]
        else:
            self._slots[index] = slot
        self._card_count -= 1
        return True

    # --- Export ------------------------------------------------------------

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert the decklist to a pandas DataFrame, one row per slot.

        Returns:
            DataFrame with columns Card ID, Name, Mana Cost and Quantity.
        """
        rows = []
        for slot in self._slots:
            rows.append({
                "Card ID": slot.card.id,
                "Name": slot.card.name,
                "Mana Cost": slot.card.mana_cost,
                "Quantity": slot.quantity,
            })
        return pd.DataFrame(rows, columns=["Card ID", "Name", "Mana Cost", "Quantity"])

    def to_list(self) -> List[Dict[str, Any]]:
        """Every copy of every card as a plain dict, in slot order."""
        return [card.to_dict() for card in self.cards]

    @classmethod
    def from_list(cls, data: Sequence[Union[Dict[str, Any], Card]], order: Optional[CardOrder] = None) -> "Decklist":
        """Rebuild a decklist from the output of :meth:`to_list`."""
        cards = [item if isinstance(item, Card) else Card.model_validate(item) for item in data]
        return cls(cards, order=order)
