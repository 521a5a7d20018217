from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from hs_deckstring.config import DeckstringConfig


@dataclass(frozen=True, eq=False)
class Deckstring:
    """
    A deck in the form it is shared between players: a format, a hero and a
    map of card ids to quantities, along with the text it was read from or
    written to.

    Two deckstrings are equal when their format, hero and cards match. The
    name, version and text are not compared, since the same deck can be
    written with or without a name and with its cards in any order.

    Attributes:
        format_id: Id of the deck's format.
        hero_ids: Every hero id stored in the payload, in order.
        cards: Read-only map of card id to quantity.
        deckcode: The full text, including the name header when present.
        version: Version number read from or written to the payload.
        name: Deck name taken from the ``###`` header line, if any.
    """

    format_id: int
    hero_ids: Tuple[int, ...]
    cards: Mapping[int, int]
    deckcode: str
    version: int = 0
    name: Optional[str] = None
    _frozen_cards: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.hero_ids:
            raise ValueError("A deckstring needs at least one hero id")
        object.__setattr__(self, "hero_ids", tuple(self.hero_ids))
        object.__setattr__(self, "cards", MappingProxyType(dict(self.cards)))
        object.__setattr__(self, "_frozen_cards", frozenset(self.cards.items()))

    @property
    def hero_id(self) -> int:
        """The primary hero of the deck."""
        return self.hero_ids[0]

    @property
    def number_of_cards(self) -> int:
        return sum(self.cards.values())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Deckstring):
            return NotImplemented
        return (
            self.format_id == other.format_id
            and self.hero_id == other.hero_id
            and self._frozen_cards == other._frozen_cards
        )

    def __hash__(self) -> int:
        return hash((self.format_id, self.hero_id, self._frozen_cards))

    def __str__(self) -> str:
        return self.deckcode

    def __repr__(self) -> str:
        return (
            f"<Deckstring(name={self.name!r}, format_id={self.format_id}, hero_id={self.hero_id}, "
            f"unique_cards={len(self.cards)}, total_cards={self.number_of_cards})>"
        )

    @classmethod
    def from_deckcode(cls, deckcode: str) -> "Deckstring":
        """
        Parse a deckstring copied from the game or a deck site.

        Raises:
            InvalidDeckstringError: If the text holds no valid deckstring.
            VarintReadError: If the payload is truncated.
            VarintOverflowError: If the payload holds an oversized number.
        """
        from hs_deckstring.deckstring_io import decode_deckstring
        return decode_deckstring(deckcode)

    @classmethod
    def from_cards(
        cls,
        format_id: int,
        hero_id: int,
        cards: Mapping[int, int],
        name: Optional[str] = None,
        version: Optional[int] = None,
        config: Optional["DeckstringConfig"] = None,
    ) -> "Deckstring":
        """Build a new deckstring. See :func:`hs_deckstring.deckstring_io.encode_deckstring`."""
        from hs_deckstring.deckstring_io import encode_deckstring
        return encode_deckstring(format_id, hero_id, cards, name=name, version=version, config=config)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "format_id": self.format_id,
            "hero_id": self.hero_id,
            "hero_ids": list(self.hero_ids),
            "cards": dict(self.cards),
            "deckcode": self.deckcode,
        }
