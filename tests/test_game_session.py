import copy

import pytest

from schafkopf.cards import parse_card_id
from schafkopf.deck import build_deck
from schafkopf.errors import (
    CardNotInHand,
    HandNotInProgress,
    InsufficientSeats,
    InvalidSeat,
    OutOfTurn,
    SeatConflict,
    SeatingError,
    SeatingLocked,
)
from schafkopf.events import (
    CardPlayed,
    GameStarted,
    HandAborted,
    HandDealt,
    HandEnded,
    TrickWon,
    TurnChanged,
)
from schafkopf.game import GameSession, HandPhase

from tests.helpers import arranged_deck, seated_session


def scenario_session():
    deck = arranged_deck(
        {
            0: ["Ass_von_Eichel"],
            1: ["10_von_Eichel"],
            2: ["7_von_Herz"],
            3: ["König_von_Gras"],
        }
    )
    session = seated_session(deck=deck)
    session.request_deal()
    return session


def play_out(session):
    events = []
    while session.phase == HandPhase.PLAYING:
        seat = session.state.current_seat
        card = session.hand_for(seat)[0]
        events.extend(session.request_play(seat, card.id))
    return events


def test_deal_events_and_hands():
    session = seated_session(seed=11)
    events = session.request_deal()

    dealt = [e for e in events if isinstance(e, HandDealt)]
    assert [e.seat for e in dealt] == [0, 1, 2, 3]
    assert all(len(e.cards) == 8 for e in dealt)
    assert set().union(*(set(e.cards) for e in dealt)) == set(build_deck())
    assert events[-2] == GameStarted(seats=(0, 1, 2, 3))
    assert events[-1] == TurnChanged(seat=0)
    assert session.in_progress
    assert session.state.current_seat == 0


def test_deal_needs_four_seats():
    session = GameSession()
    session.take_seat("p0", 0)
    session.take_seat("p1", 1)
    with pytest.raises(InsufficientSeats):
        session.request_deal()
    assert session.phase == HandPhase.WAITING
    assert session.state is None


def test_end_to_end_trick():
    session = scenario_session()

    events = session.request_play(0, "Ass_von_Eichel")
    assert events == [CardPlayed(0, parse_card_id("Ass_von_Eichel")), TurnChanged(1)]
    session.request_play(1, "10_von_Eichel")
    session.request_play(2, "7_von_Herz")
    events = session.request_play(3, "König_von_Gras")

    won = [e for e in events if isinstance(e, TrickWon)]
    assert len(won) == 1
    assert won[0].seat == 2
    assert [seat for seat, _ in won[0].plays] == [0, 1, 2, 3]
    assert events[-1] == TurnChanged(2)
    assert session.state.current_seat == 2
    assert session.state.turns.leader_seat() == 2
    assert session.state.current_trick.is_empty()
    assert all(len(hand) == 7 for hand in session.state.hands.values())


def test_out_of_turn_rejected_without_changes():
    session = scenario_session()
    session.request_play(0, "Ass_von_Eichel")
    before_hands = copy.deepcopy(session.state.hands)
    before_trick = list(session.state.current_trick.plays)

    with pytest.raises(OutOfTurn):
        session.request_play(3, "König_von_Gras")

    assert session.state.hands == before_hands
    assert session.state.current_trick.plays == before_trick
    assert session.state.current_seat == 1


def test_card_not_in_hand_rejected():
    session = scenario_session()
    with pytest.raises(CardNotInHand):
        session.request_play(0, "7_von_Herz")
    with pytest.raises(CardNotInHand):
        session.request_play(0, "Joker")
    assert len(session.hand_for(0)) == 8
    assert session.state.current_trick.is_empty()


def test_play_before_deal_rejected():
    session = seated_session()
    with pytest.raises(HandNotInProgress):
        session.request_play(0, "Ass_von_Eichel")
    with pytest.raises(HandNotInProgress):
        session.play_for("p0", "Ass_von_Eichel")


def test_turn_rotation_over_a_whole_hand():
    session = seated_session(seed=5)
    session.request_deal()
    while session.in_progress:
        seat = session.state.current_seat
        card = session.hand_for(seat)[0]
        events = session.request_play(seat, card.id)
        won = [e for e in events if isinstance(e, TrickWon)]
        if won:
            if session.in_progress:
                assert session.state.current_seat == won[0].seat
        else:
            assert session.state.current_seat == (seat + 1) % 4


def test_hand_completes_after_eight_tricks():
    session = seated_session(seed=1)
    session.request_deal()
    events = play_out(session)

    assert sum(isinstance(e, TrickWon) for e in events) == 8
    assert isinstance(events[-1], HandEnded)
    assert session.phase == HandPhase.COMPLETE
    assert not session.in_progress
    assert len(session.state.trick_history) == 8
    assert sorted(session.state.played_cards(), key=lambda c: c.id) == sorted(build_deck(), key=lambda c: c.id)

    with pytest.raises(HandNotInProgress):
        session.request_play(session.state.turns.current_seat(), "Ass_von_Eichel")


def test_redeal_after_completion():
    session = seated_session(seed=2)
    session.request_deal()
    play_out(session)
    session.request_deal()
    assert session.in_progress
    assert session.hands_dealt == 2
    assert session.state.current_seat == 0
    assert all(len(hand) == 8 for hand in session.state.hands.values())


def test_seating_rules():
    session = GameSession()
    session.take_seat("p0", 0, "Anna")
    with pytest.raises(SeatConflict):
        session.take_seat("p1", 0, "Bert")
    with pytest.raises(SeatConflict):
        session.take_seat("p0", 1, "Anna")
    with pytest.raises(InvalidSeat):
        session.take_seat("p1", 4, "Bert")
    with pytest.raises(SeatingError):
        session.leave_seat("nobody")
    assert session.seat_of("p0") == 0
    assert session.player_at(0).name == "Anna"


def test_seating_locked_during_hand():
    session = seated_session()
    session.request_deal()
    with pytest.raises(SeatingLocked):
        session.take_seat("p9", 0, "Zenzi")
    with pytest.raises(SeatingLocked):
        session.request_deal()


def test_leaving_mid_hand_aborts():
    session = scenario_session()
    session.request_play(0, "Ass_von_Eichel")

    events = session.leave_seat("p2")

    assert events == [HandAborted(seat=2)]
    assert session.phase == HandPhase.ABORTED
    assert session.seat_of("p2") is None
    with pytest.raises(HandNotInProgress):
        session.request_play(1, "10_von_Eichel")
    with pytest.raises(InsufficientSeats):
        session.request_deal()

    session.take_seat("p9", 2, "Zenzi")
    session.request_deal()
    assert session.in_progress


def test_play_for_unseated_player():
    session = scenario_session()
    with pytest.raises(OutOfTurn):
        session.play_for("stranger", "Ass_von_Eichel")
    events = session.play_for("p0", "Ass_von_Eichel")
    assert events[0] == CardPlayed(0, parse_card_id("Ass_von_Eichel"))
