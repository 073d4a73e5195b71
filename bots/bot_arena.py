"""Headless table runner for bots."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Iterable, List, Sequence

from schafkopf.events import TrickWon
from schafkopf.game import GameSession, HandPhase

from .base import BotStrategy
from .baseline_greedy import GreedyBot
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "greedy": GreedyBot,
    "random": RandomBot,
}


def seat_bots(session: GameSession, bots: Sequence[BotStrategy]) -> None:
    if len(bots) != 4:
        raise ValueError("A table needs exactly four bots.")
    for seat, bot in enumerate(bots):
        session.take_seat(f"bot-{seat}", seat, name=f"{bot.name}#{seat}")


def play_hand(session: GameSession, bots: Sequence[BotStrategy]) -> List[int]:
    """Deal and play one hand; return the winning seat of each trick."""
    session.request_deal()
    assert session.state is not None
    for seat, bot in enumerate(bots):
        bot.on_hand_start(session.state, seat)

    winners: List[int] = []
    while session.phase == HandPhase.PLAYING:
        state = session.state
        assert state is not None
        seat = state.current_seat
        card = bots[seat].play_card(state, seat)
        for event in session.request_play(seat, card.id):
            if isinstance(event, TrickWon):
                winners.append(event.seat)
    logger.debug("Hand finished, trick winners %s", winners)
    return winners


def run_table(
    bots: Sequence[BotStrategy],
    *,
    n_hands: int = 10,
    seed: int | None = None,
) -> dict:
    session = GameSession(room_id="arena", seed=seed)
    seat_bots(session, bots)
    history = [play_hand(session, bots) for _ in range(n_hands)]
    return {"seats": [bot.name for bot in bots], "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Let four bots play at one table.")
    parser.add_argument(
        "--bots",
        nargs=4,
        default=["greedy", "random", "greedy", "random"],
        choices=BOT_REGISTRY.keys(),
        metavar="BOT",
    )
    parser.add_argument("--n", type=int, default=10, help="Number of hands to play.")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args(argv)

    bots = [BOT_REGISTRY[name]() for name in args.bots]
    results = run_table(bots, n_hands=args.n, seed=args.seed)

    print("Seats: " + ", ".join(f"{seat}={name}" for seat, name in enumerate(results["seats"])))
    for index, winners in enumerate(results["history"], start=1):
        print(f"Hand {index}: trick winners {winners}")


if __name__ == "__main__":
    main()
