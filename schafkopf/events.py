"""Observable table events produced by the engine.

The engine only creates these values; encoding them for a particular
transport is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .cards import Card


@dataclass(frozen=True)
class HandDealt:
    """Private to ``seat``: never broadcast."""

    seat: int
    cards: Tuple[Card, ...]


@dataclass(frozen=True)
class GameStarted:
    seats: Tuple[int, ...]


@dataclass(frozen=True)
class CardPlayed:
    seat: int
    card: Card


@dataclass(frozen=True)
class TrickWon:
    seat: int
    plays: Tuple[Tuple[int, Card], ...]


@dataclass(frozen=True)
class TurnChanged:
    seat: int


@dataclass(frozen=True)
class HandEnded:
    pass


@dataclass(frozen=True)
class HandAborted:
    seat: int


TableEvent = Union[HandDealt, GameStarted, CardPlayed, TrickWon, TurnChanged, HandEnded, HandAborted]
