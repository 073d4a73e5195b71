"""Play state for a single dealt hand."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .cards import Card
from .errors import CardNotInHand, OutOfTurn
from .events import CardPlayed, HandEnded, TableEvent, TrickWon, TurnChanged
from .trick import Trick
from .turns import TurnSequencer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletedTrick:
    leader: int
    plays: Tuple[Tuple[int, Card], ...]
    winner: int


@dataclass
class HandState:
    """Hands, the running trick and the turn pointer for one hand.

    ``hands`` is keyed by seat; ``seat_order`` is the ascending seat order
    fixed at deal time.
    """

    hands: Dict[int, List[Card]]
    seat_order: Sequence[int]
    turns: TurnSequencer = field(init=False)
    current_trick: Trick = field(init=False)
    trick_history: List[CompletedTrick] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.seat_order = tuple(self.seat_order)
        if set(self.hands) != set(self.seat_order):
            raise ValueError("Every seat in the seat order needs a hand.")
        self.hands = {seat: list(cards) for seat, cards in self.hands.items()}
        self.turns = TurnSequencer(self.seat_order)
        self.current_trick = Trick(leader=self.turns.leader_seat(), size=len(self.seat_order))

    @property
    def current_seat(self) -> int:
        return self.turns.current_seat()

    def available_moves(self, seat: int) -> List[Card]:
        # Any held card may be played; following suit is not compulsory.
        if seat != self.current_seat:
            raise OutOfTurn("Not this seat's turn.")
        return list(self.hands[seat])

    def play_card(self, seat: int, card: Card) -> List[TableEvent]:
        """Play ``card`` from ``seat`` and return the resulting events.

        Raises OutOfTurn or CardNotInHand before touching any state.
        """
        if seat != self.current_seat:
            raise OutOfTurn(f"Seat {seat} played out of turn; seat {self.current_seat} is to act.")
        if card not in self.hands[seat]:
            raise CardNotInHand(f"{card} is not in the hand of seat {seat}.")

        self.hands[seat].remove(card)
        self.current_trick.add_play(seat, card)
        events: List[TableEvent] = [CardPlayed(seat=seat, card=card)]

        if not self.current_trick.is_full():
            self.turns.advance()
            events.append(TurnChanged(seat=self.current_seat))
            return events

        events.append(self._complete_trick())
        if self.is_finished():
            logger.info("All %d tricks played", len(self.trick_history))
            events.append(HandEnded())
        else:
            events.append(TurnChanged(seat=self.current_seat))
        return events

    def _complete_trick(self) -> TrickWon:
        winner, winning_card = self.current_trick.winning_play()
        plays = tuple(self.current_trick.plays)
        self.trick_history.append(
            CompletedTrick(leader=self.current_trick.leader, plays=plays, winner=winner)
        )
        logger.info("Trick %d won by seat %d with %s", len(self.trick_history), winner, winning_card)

        self.turns.set_leader(self.turns.position_of(winner))
        self.current_trick = Trick(leader=winner, size=len(self.seat_order))
        return TrickWon(seat=winner, plays=plays)

    def is_finished(self) -> bool:
        hands_empty = all(len(hand) == 0 for hand in self.hands.values())
        return hands_empty and self.current_trick.is_empty()

    def remaining_cards(self) -> Dict[int, int]:
        return {seat: len(self.hands[seat]) for seat in self.seat_order}

    def played_cards(self) -> List[Card]:
        cards = [card for trick in self.trick_history for _, card in trick.plays]
        cards.extend(card for _, card in self.current_trick.plays)
        return cards
