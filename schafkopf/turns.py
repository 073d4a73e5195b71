"""Turn sequencing over a fixed seat order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass
class TurnSequencer:
    """Track whose turn it is and who led the current trick.

    Positions index into ``seat_order``, which is fixed for the whole hand.
    """

    seat_order: Tuple[int, ...]
    turn_index: int = 0
    leader_index: int = 0
    _positions: Dict[int, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.seat_order = tuple(self.seat_order)
        if len(set(self.seat_order)) != len(self.seat_order):
            raise ValueError("Seat order must not repeat seats.")
        self._positions = {seat: index for index, seat in enumerate(self.seat_order)}

    def current_seat(self) -> int:
        return self.seat_order[self.turn_index]

    def leader_seat(self) -> int:
        return self.seat_order[self.leader_index]

    def position_of(self, seat: int) -> int:
        return self._positions[seat]

    def advance(self) -> None:
        self.turn_index = (self.turn_index + 1) % len(self.seat_order)

    def set_leader(self, position: int) -> None:
        """The trick winner leads the next trick."""
        if not 0 <= position < len(self.seat_order):
            raise ValueError(f"Seat position {position} out of range.")
        self.turn_index = position
        self.leader_index = position
