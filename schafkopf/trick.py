"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .cards import Card, Rank, Suit, is_trump, power

SEAT_COUNT = 4
OFF_SUIT_PENALTY = 200


class TrickError(RuntimeError):
    """Raised when trick play breaks ordering constraints."""


def effective_power(card: Card, lead_suit: Optional[Suit]) -> int:
    """Strength of ``card`` inside a trick led in ``lead_suit``.

    ``lead_suit`` is None for a trump lead. Trumps and cards following the lead
    suit keep their power; any other card scores as the 7 of its suit minus a
    penalty, which places it below every card that can still win.
    """
    if is_trump(card):
        return power(card)
    if lead_suit is not None and card.suit is lead_suit:
        return power(card)
    return power(Card(Rank.SEVEN, card.suit)) - OFF_SUIT_PENALTY


@dataclass
class Trick:
    leader: int
    plays: List[Tuple[int, Card]] = field(default_factory=list)
    size: int = SEAT_COUNT

    def is_empty(self) -> bool:
        return not self.plays

    def is_full(self) -> bool:
        return len(self.plays) == self.size

    def add_play(self, seat: int, card: Card) -> None:
        if self.is_full():
            raise TrickError("Trick already complete.")
        if not self.plays and seat != self.leader:
            raise TrickError("Only the leader can start the trick.")
        if any(played_seat == seat for played_seat, _ in self.plays):
            raise TrickError(f"Seat {seat} already played to this trick.")
        self.plays.append((seat, card))

    def is_trump_lead(self) -> bool:
        return bool(self.plays) and is_trump(self.plays[0][1])

    def lead_suit(self) -> Optional[Suit]:
        """Suit of the opening card, or None when empty or led with a trump."""
        if not self.plays or self.is_trump_lead():
            return None
        return self.plays[0][1].suit

    def winning_play(self) -> Tuple[int, Card]:
        if not self.plays:
            raise TrickError("Cannot determine winner on empty trick.")
        lead = self.lead_suit()
        winning_seat, winning_card = self.plays[0]
        best = effective_power(winning_card, lead)
        for seat, card in self.plays[1:]:
            strength = effective_power(card, lead)
            if strength > best:
                winning_seat, winning_card, best = seat, card, strength
        return winning_seat, winning_card
