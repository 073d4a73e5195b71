"""High-level table orchestration: seating, dealing and play."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import Dict, List, Optional, Sequence

from .cards import Card, parse_card_id
from .deck import deal_four_player
from .errors import (
    CardNotInHand,
    HandNotInProgress,
    InsufficientSeats,
    InvalidSeat,
    OutOfTurn,
    SeatConflict,
    SeatingError,
    SeatingLocked,
)
from .events import GameStarted, HandAborted, HandDealt, HandEnded, TableEvent, TurnChanged
from .state import HandState
from .trick import SEAT_COUNT

logger = logging.getLogger(__name__)


class HandPhase(Enum):
    WAITING = auto()
    PLAYING = auto()
    COMPLETE = auto()
    ABORTED = auto()


@dataclass(frozen=True)
class SeatedPlayer:
    player_id: str
    name: str
    seat: int


@dataclass
class GameSession:
    """One table: four seats and at most one hand in play.

    Seat and player lookups are dictionary based. A finished or aborted hand
    stays terminal until ``request_deal`` is called again.
    """

    room_id: str = "default"
    seed: Optional[int] = None
    deck: Optional[Sequence[Card]] = None
    rng: Random = field(init=False)
    phase: HandPhase = field(init=False, default=HandPhase.WAITING)
    state: Optional[HandState] = field(init=False, default=None)
    hands_dealt: int = field(init=False, default=0)
    _by_seat: Dict[int, SeatedPlayer] = field(init=False, default_factory=dict)
    _seat_of: Dict[str, int] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        self.rng = Random(self.seed)

    # Seating -----------------------------------------------------------

    @property
    def in_progress(self) -> bool:
        return self.phase == HandPhase.PLAYING

    def players(self) -> List[SeatedPlayer]:
        return [self._by_seat[seat] for seat in sorted(self._by_seat)]

    def player_at(self, seat: int) -> Optional[SeatedPlayer]:
        return self._by_seat.get(seat)

    def seat_of(self, player_id: str) -> Optional[int]:
        return self._seat_of.get(player_id)

    def take_seat(self, player_id: str, seat: int, name: str = "Spieler") -> SeatedPlayer:
        if not isinstance(seat, int) or not 0 <= seat < SEAT_COUNT:
            raise InvalidSeat(f"Seat must be between 0 and {SEAT_COUNT - 1}.")
        if self.in_progress:
            raise SeatingLocked("Seats cannot change while a hand is in progress.")
        if seat in self._by_seat:
            raise SeatConflict(f"Seat {seat} is already taken.")
        if player_id in self._seat_of:
            raise SeatConflict(f"Player already sits at seat {self._seat_of[player_id]}.")

        player = SeatedPlayer(player_id=player_id, name=name, seat=seat)
        self._by_seat[seat] = player
        self._seat_of[player_id] = seat
        logger.debug("Room %s: %s took seat %d", self.room_id, name, seat)
        return player

    def leave_seat(self, player_id: str) -> List[TableEvent]:
        """Free the player's seat; an in-progress hand is aborted."""
        seat = self._seat_of.get(player_id)
        if seat is None:
            raise SeatingError("Player is not seated.")

        events: List[TableEvent] = []
        if self.in_progress:
            logger.warning("Room %s: seat %d left mid-hand, aborting hand", self.room_id, seat)
            self.phase = HandPhase.ABORTED
            self.state = None
            events.append(HandAborted(seat=seat))

        del self._seat_of[player_id]
        del self._by_seat[seat]
        return events

    # Hand lifecycle ----------------------------------------------------

    def request_deal(self) -> List[TableEvent]:
        """Deal a fresh hand to the four seated players.

        Returns one private ``HandDealt`` per seat followed by the public
        ``GameStarted`` and ``TurnChanged`` events.
        """
        if len(self._by_seat) != SEAT_COUNT:
            raise InsufficientSeats(f"{SEAT_COUNT} players must be seated to deal.")
        if self.in_progress:
            raise SeatingLocked("A hand is already in progress.")

        seat_order = tuple(sorted(self._by_seat))
        hands = deal_four_player(seat_order, rng=self.rng, deck=self.deck)
        self.state = HandState(hands=hands, seat_order=seat_order)
        self.phase = HandPhase.PLAYING
        self.hands_dealt += 1
        logger.info("Room %s: dealt hand #%d", self.room_id, self.hands_dealt)

        events: List[TableEvent] = [
            HandDealt(seat=seat, cards=tuple(hands[seat])) for seat in seat_order
        ]
        events.append(GameStarted(seats=seat_order))
        events.append(TurnChanged(seat=self.state.current_seat))
        return events

    def request_play(self, seat: int, card_id: str) -> List[TableEvent]:
        """Validate and apply a card play from ``seat``.

        Raises HandNotInProgress, OutOfTurn or CardNotInHand with no change
        to the session.
        """
        if not self.in_progress or self.state is None:
            raise HandNotInProgress("No hand is being played.")
        try:
            card = parse_card_id(card_id)
        except ValueError as exc:
            raise CardNotInHand(f"Unknown card {card_id!r}.") from exc

        events = self.state.play_card(seat, card)
        if any(isinstance(event, HandEnded) for event in events):
            self.phase = HandPhase.COMPLETE
            logger.info("Room %s: hand #%d complete", self.room_id, self.hands_dealt)
        return events

    def play_for(self, player_id: str, card_id: str) -> List[TableEvent]:
        if not self.in_progress:
            raise HandNotInProgress("No hand is being played.")
        seat = self._seat_of.get(player_id)
        if seat is None:
            raise OutOfTurn("Player is not seated at this table.")
        return self.request_play(seat, card_id)

    def hand_for(self, seat: int) -> List[Card]:
        if self.state is None or seat not in self.state.hands:
            return []
        return list(self.state.hands[seat])
