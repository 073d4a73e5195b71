import itertools

import pytest

from schafkopf.cards import (
    Card,
    Rank,
    Suit,
    card_label,
    is_trump,
    parse_card_id,
    power,
    serialize_card,
)
from schafkopf.deck import build_deck


def test_fourteen_trumps():
    trumps = [card for card in build_deck() if is_trump(card)]
    assert len(trumps) == 14
    assert all(card.suit is Suit.HERZ for card in trumps if card.rank not in {Rank.OBER, Rank.UNTER})


def test_power_is_unique_across_deck():
    powers = [power(card) for card in build_deck()]
    assert len(set(powers)) == 32


def test_every_trump_beats_every_plain_card():
    deck = build_deck()
    trumps = [card for card in deck if is_trump(card)]
    plain = [card for card in deck if not is_trump(card)]
    for t, n in itertools.product(trumps, plain):
        assert power(t) > power(n)


def test_power_values():
    assert power(Card(Rank.UNTER, Suit.EICHEL)) == 1101
    assert power(Card(Rank.SEVEN, Suit.HERZ)) == 1033
    assert power(Card(Rank.ASS, Suit.EICHEL)) == 81
    assert power(Card(Rank.SEVEN, Suit.SCHELLN)) == 34


def test_card_ids_round_trip():
    card = Card(Rank.KOENIG, Suit.GRAS)
    assert card.id == "König_von_Gras"
    assert parse_card_id("Ass_von_Eichel") == Card(Rank.ASS, Suit.EICHEL)
    assert serialize_card(card) == {"id": "König_von_Gras", "suit": "Gras", "rank": "König"}
    assert card_label(card) == "Gras-König"


@pytest.mark.parametrize("card_id", ["", "Ass", "Ass_von_Pik", "Bube_von_Herz", "ass_von_eichel"])
def test_unknown_card_ids_rejected(card_id):
    with pytest.raises(ValueError):
        parse_card_id(card_id)
