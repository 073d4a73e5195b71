"""Deck creation and dealing for Schafkopf."""

from __future__ import annotations

from random import Random
from typing import Dict, List, Optional, Sequence

from .cards import Card, RANK_ORDER, SUIT_ORDER

DECK_SIZE = 32
HAND_SIZE = 8


def build_deck() -> List[Card]:
    """Return the 32-card deck in canonical order."""
    return [Card(rank, suit) for suit in SUIT_ORDER for rank in RANK_ORDER]


def deal_four_player(
    seat_order: Sequence[int],
    *,
    rng: Optional[Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> Dict[int, List[Card]]:
    """Shuffle and split the deck into four 8-card hands keyed by seat.

    Cards ``[8k, 8k + 8)`` go to the k-th seat of ``seat_order``. A pre-arranged
    ``deck`` is dealt as given, without shuffling.
    """
    if len(seat_order) * HAND_SIZE != DECK_SIZE:
        raise ValueError("Dealing requires exactly four seats.")
    if deck is not None:
        cards = list(deck)
    else:
        cards = build_deck()
        if rng is None:
            rng = Random()
        # Random.shuffle is a Fisher-Yates shuffle.
        rng.shuffle(cards)
    if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
        raise ValueError("Deck must contain exactly 32 distinct cards.")

    return {
        seat: cards[index * HAND_SIZE : (index + 1) * HAND_SIZE]
        for index, seat in enumerate(seat_order)
    }
