from typing import Dict, List, Sequence

from schafkopf.cards import Card, parse_card_id
from schafkopf.deck import build_deck
from schafkopf.game import GameSession


def arranged_deck(first_cards: Dict[int, Sequence[str]]) -> List[Card]:
    """Canonical deck reordered so seat k is dealt the given ids first."""
    deck = build_deck()
    for seat, ids in first_cards.items():
        for offset, card_id in enumerate(ids):
            card = parse_card_id(card_id)
            target = seat * 8 + offset
            source = deck.index(card)
            deck[target], deck[source] = deck[source], deck[target]
    return deck


def seated_session(deck: Sequence[Card] | None = None, seed: int | None = None) -> GameSession:
    session = GameSession(room_id="test", seed=seed, deck=deck)
    for seat, name in enumerate(["Anna", "Bert", "Cilli", "Dieter"]):
        session.take_seat(f"p{seat}", seat, name)
    return session
