from .card import Card
from .deckstring import Deckstring
from .decklist import Decklist, Ordering, SearchResult, Slot, mana_cost_then_name
