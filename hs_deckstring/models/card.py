from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Card(BaseModel):
    """
    A card as the deck tools see it: a stable catalog id, a mana cost and a name.

    Two cards are the same card when their ids match, whatever the other
    fields say. Descriptive fields are optional and only carried along for
    display and export.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., ge=1)
    mana_cost: int = Field(0, ge=0, alias="manaCost")
    name: str = ""
    card_class: Optional[str] = Field(None, alias="cardClass")
    card_type: Optional[str] = Field(None, alias="cardType")
    rarity: Optional[str] = None
    text: Optional[str] = None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"<Card(id={self.id}, name='{self.name}', mana_cost={self.mana_cost})>"

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of the set fields, without None values."""
        return self.model_dump(exclude_none=True)
