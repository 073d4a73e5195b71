"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional

from schafkopf.cards import Card
from schafkopf.state import HandState

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def play_card(self, state: HandState, seat: int) -> Card:
        legal = state.available_moves(seat)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return self._rng.choice(legal)
