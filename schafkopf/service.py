"""Convenience view layer for transports and bots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cards import card_label, serialize_card
from .game import GameSession


@dataclass
class PlayerView:
    name: str
    seatIndex: int


@dataclass
class TrickPlayView:
    seat: int
    card: dict
    label: str


@dataclass
class TrickView:
    leader: int
    plays: list[TrickPlayView]


@dataclass
class TableView:
    room: str
    phase: str
    in_progress: bool
    players: list[PlayerView]
    current_seat: Optional[int]
    leader_seat: Optional[int]
    trick: Optional[TrickView]
    tricks_played: int
    trick_winners: list[int]
    remaining_cards: dict[int, int]
    seat: Optional[int]
    hand: list[dict]
    hand_labels: list[str]


class TableService:
    """Read-only facade that renders a session from one seat's perspective.

    A view only ever carries the hand of the seat it was built for.
    """

    def __init__(self, session: GameSession) -> None:
        self.session = session

    def players(self) -> list[PlayerView]:
        return [PlayerView(name=p.name, seatIndex=p.seat) for p in self.session.players()]

    def get_table_view(self, perspective: Optional[int] = None) -> TableView:
        session = self.session
        state = session.state
        current_seat = None
        leader_seat = None
        trick_view: Optional[TrickView] = None
        trick_winners: list[int] = []
        remaining: dict[int, int] = {}

        if state is not None:
            remaining = state.remaining_cards()
            trick_winners = [trick.winner for trick in state.trick_history]
            if session.in_progress:
                current_seat = state.current_seat
                leader_seat = state.turns.leader_seat()
            if not state.current_trick.is_empty():
                trick_view = TrickView(
                    leader=state.current_trick.leader,
                    plays=[
                        TrickPlayView(seat=s, card=serialize_card(c), label=card_label(c))
                        for s, c in state.current_trick.plays
                    ],
                )

        hand = session.hand_for(perspective) if perspective is not None else []

        return TableView(
            room=session.room_id,
            phase=session.phase.name.lower(),
            in_progress=session.in_progress,
            players=self.players(),
            current_seat=current_seat,
            leader_seat=leader_seat,
            trick=trick_view,
            tricks_played=len(trick_winners),
            trick_winners=trick_winners,
            remaining_cards=remaining,
            seat=perspective,
            hand=[serialize_card(card) for card in hand],
            hand_labels=[card_label(card) for card in hand],
        )
