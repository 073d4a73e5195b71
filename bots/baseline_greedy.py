"""Baseline greedy bot."""

from __future__ import annotations

from typing import List

from schafkopf.cards import Card, power
from schafkopf.state import HandState
from schafkopf.trick import Trick, effective_power

from .base import BotStrategy


def _would_win(trick: Trick, seat: int, card: Card) -> bool:
    probe = Trick(leader=trick.leader, plays=list(trick.plays), size=trick.size)
    probe.add_play(seat, card)
    winner, _ = probe.winning_play()
    return winner == seat


class GreedyBot(BotStrategy):
    """Take the trick as cheaply as possible, otherwise throw the weakest card."""

    name = "Greedy"

    def play_card(self, state: HandState, seat: int) -> Card:
        legal: List[Card] = sorted(state.available_moves(seat), key=power)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        trick = state.current_trick
        if trick.is_empty():
            return legal[-1]

        winners = [card for card in legal if _would_win(trick, seat, card)]
        if winners:
            return winners[0]
        lead = trick.lead_suit()
        return min(legal, key=lambda card: (effective_power(card, lead), power(card)))
