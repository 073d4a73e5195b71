"""Common bot strategy interfaces."""

from __future__ import annotations

from schafkopf.cards import Card
from schafkopf.state import HandState


class BotStrategy:
    """Base class for bot policies."""

    name: str = "BaseBot"

    def on_hand_start(self, state: HandState, seat: int) -> None:
        """Optional hook invoked after each deal."""
        return None

    def play_card(self, state: HandState, seat: int) -> Card:
        """Return the card to play; defaults to the first card held."""
        legal = state.available_moves(seat)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return legal[0]
