import pytest

from hs_deckstring.models.card import Card

# Deck exported from Hearthstone: format 2 (standard), hero 31 (Rexxar).
HUNTER_DECKCODE = "AAECAR8K7QaHB4f7Ap6dA6CFA9SLA94ElwikpQPHAwr4rwP8rwPslgOFsAPJBIAHhwSNAcMIgQoA"

HUNTER_CARDS = {
    877: 1,
    903: 1,
    48519: 1,
    52894: 1,
    49824: 1,
    50644: 1,
    606: 1,
    1047: 1,
    53924: 1,
    455: 1,
    55288: 2,
    55292: 2,
    52076: 2,
    55301: 2,
    585: 2,
    896: 2,
    519: 2,
    141: 2,
    1091: 2,
    1281: 2,
}

NAMED_HUNTER_DECKCODE = (
    "### We go face\n"
    "\n"
    f"{HUNTER_DECKCODE}\n"
    "\n"
    "# To use this deck, copy it to your clipboard and create a new deck in Hearthstone\n"
)


@pytest.fixture
def hunter_deckcode():
    return HUNTER_DECKCODE


@pytest.fixture
def named_hunter_deckcode():
    return NAMED_HUNTER_DECKCODE


@pytest.fixture
def hunter_cards():
    return dict(HUNTER_CARDS)


@pytest.fixture
def sample_cards():
    """A spell, a weapon, a hero and a minion with a range of mana costs."""
    return {
        "spell": Card(id=1, name="The Coin", mana_cost=0, card_type="spell"),
        "weapon": Card(id=2, name="Fiery War Axe", mana_cost=4, card_type="weapon"),
        "hero": Card(id=3, name="Deathstalker Rexxar", mana_cost=9, card_type="hero"),
        "minion": Card(id=4, name="Stormwind Champion", mana_cost=7, card_type="minion"),
    }
