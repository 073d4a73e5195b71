"""Rejections reported back to the requester.

Every error here is local and recoverable: the session is left exactly as it
was before the request, and only the requesting player is told about it.
"""

from __future__ import annotations


class TableError(RuntimeError):
    """Base class for requests the table refuses."""

    code = "table_error"


class SeatingError(TableError):
    """Raised when taking or leaving a seat is not possible."""

    code = "seating_error"


class InvalidSeat(SeatingError):
    code = "invalid_seat"


class SeatConflict(SeatingError):
    """Raised when the seat is occupied or the player already sits elsewhere."""

    code = "seat_conflict"


class SeatingLocked(SeatingError):
    """Raised when seating would change while a hand is being played."""

    code = "seating_locked"


class InsufficientSeats(TableError):
    code = "insufficient_seats"


class InvalidPlay(TableError):
    """Base class for rejected card plays."""

    code = "invalid_play"


class OutOfTurn(InvalidPlay):
    code = "out_of_turn"


class CardNotInHand(InvalidPlay):
    code = "card_not_in_hand"


class HandNotInProgress(InvalidPlay):
    code = "hand_not_in_progress"
