"""Card-related data structures and helpers for Schafkopf."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    EICHEL = "Eichel"
    GRAS = "Gras"
    HERZ = "Herz"
    SCHELLN = "Schelln"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    UNTER = "Unter"
    OBER = "Ober"
    KOENIG = "König"
    ASS = "Ass"

    def __str__(self) -> str:
        return self.value


# Canonical deck order: suits outer, ranks inner.
SUIT_ORDER: list[Suit] = [Suit.EICHEL, Suit.GRAS, Suit.HERZ, Suit.SCHELLN]
RANK_ORDER: list[Rank] = [
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.UNTER,
    Rank.OBER,
    Rank.KOENIG,
    Rank.ASS,
]

TRUMP_SUIT = Suit.HERZ
TRUMP_RANKS = frozenset({Rank.OBER, Rank.UNTER})

TRUMP_BONUS = 1000

# Base strength per rank, highest first: Unter, Ober, Ass, 10, König, 9, 8, 7.
BASE_POWER: dict[Rank, int] = {
    Rank.UNTER: 100,
    Rank.OBER: 90,
    Rank.ASS: 80,
    Rank.TEN: 70,
    Rank.KOENIG: 60,
    Rank.NINE: 50,
    Rank.EIGHT: 40,
    Rank.SEVEN: 30,
}

# Breaks ties between cards sharing a base value.
SUIT_TIEBREAK: dict[Suit, int] = {
    Suit.EICHEL: 1,
    Suit.GRAS: 2,
    Suit.HERZ: 3,
    Suit.SCHELLN: 4,
}

_ID_SEPARATOR = "_von_"


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    rank: Rank
    suit: Suit

    @property
    def id(self) -> str:
        return f"{self.rank.value}{_ID_SEPARATOR}{self.suit.value}"

    def __str__(self) -> str:
        return self.id


def is_trump(card: Card) -> bool:
    """Every Herz plus every Ober and Unter is trump (14 of 32 cards)."""
    return card.suit is TRUMP_SUIT or card.rank in TRUMP_RANKS


def power(card: Card) -> int:
    """Return the context-free strength of a card; unique across the deck."""
    bonus = TRUMP_BONUS if is_trump(card) else 0
    return bonus + BASE_POWER[card.rank] + SUIT_TIEBREAK[card.suit]


_RANKS_BY_VALUE = {rank.value: rank for rank in Rank}
_SUITS_BY_VALUE = {suit.value: suit for suit in Suit}


def parse_card_id(card_id: str) -> Card:
    """Inverse of ``Card.id``; raises ValueError for unknown ids."""
    rank_name, sep, suit_name = card_id.partition(_ID_SEPARATOR)
    if not sep or rank_name not in _RANKS_BY_VALUE or suit_name not in _SUITS_BY_VALUE:
        raise ValueError(f"Unknown card id: {card_id!r}")
    return Card(_RANKS_BY_VALUE[rank_name], _SUITS_BY_VALUE[suit_name])


def serialize_card(card: Card) -> dict[str, str]:
    return {"id": card.id, "suit": card.suit.value, "rank": card.rank.value}


def card_label(card: Card) -> str:
    return f"{card.suit.value}-{card.rank.value}"
