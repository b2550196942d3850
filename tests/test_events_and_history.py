import pytest

from wheeloffortune import InvalidGuessError, PlayerMove
from wheeloffortune.events import GameEvent, GameFinished, MoveMade, RoundFinished, TurnEnded
from wheeloffortune.utils.events import EventBus
from wof_testing import CASH_100, TEST_PUZZLES

HIT_LETTERS = ["C", "W", "B", "H", "P"]


def _record_all(bus):
    seen = []
    bus.subscribe(GameEvent, seen.append)
    return seen


def test_turn_and_round_events(session, rng):
    seen = _record_all(session.events)

    session.make_move(0, PlayerMove.SPIN, success_probability=0.0)
    assert seen == [
        MoveMade(round_index=0, player_index=0, move=PlayerMove.SPIN, payload=0.0, result=None),
        TurnEnded(previous_player_index=0, player_index=1),
    ]

    seen.clear()
    rng.land_on(CASH_100)
    session.make_move(1, PlayerMove.SPIN)
    session.make_move(1, PlayerMove.GUESS_CONSONANT, guess="T")
    session.make_move(1, PlayerMove.SOLVE, guess="Cat")

    assert [type(e) for e in seen] == [MoveMade, MoveMade, MoveMade, RoundFinished]
    assert seen[-1] == RoundFinished(round_index=0, winner=1, word="CAT")


def test_subscribers_receive_only_their_event_type(session, rng):
    turns = []
    session.events.subscribe(TurnEnded, turns.append)

    session.make_move(0, PlayerMove.SPIN, success_probability=0.0)
    rng.land_on(CASH_100)
    session.make_move(1, PlayerMove.SPIN)

    assert turns == [TurnEnded(previous_player_index=0, player_index=1)]


def test_game_finished_event(session, rng):
    seen = _record_all(session.events)
    for i, word in enumerate(TEST_PUZZLES):
        rng.land_on(CASH_100)
        session.make_move(0, PlayerMove.SPIN)
        session.make_move(0, PlayerMove.GUESS_CONSONANT, guess=HIT_LETTERS[i])
        session.make_move(0, PlayerMove.SOLVE, guess=word)

    finished = [e for e in seen if isinstance(e, GameFinished)]
    assert finished == [GameFinished(points=(500, 0), final_round_winner=0)]
    assert [e.word for e in seen if isinstance(e, RoundFinished)] == TEST_PUZZLES
    assert not any(isinstance(e, TurnEnded) for e in seen)


def test_event_to_dict():
    event = MoveMade(round_index=2, player_index=1, move=PlayerMove.GUESS_CONSONANT, payload="t", result=3)
    assert event.to_dict() == {
        "event": "move_made",
        "round_index": 2,
        "player_index": 1,
        "move": "GUESS_CONSONANT",
        "payload": "t",
        "result": 3,
    }
    assert TurnEnded(0, 1).to_dict() == {"event": "turn_ended", "previous_player_index": 0, "player_index": 1}


def test_failing_subscriber_does_not_break_the_game(session, rng):
    def boom(event):
        raise RuntimeError("subscriber failure")

    session.events.subscribe(MoveMade, boom)
    assert session.make_move(0, PlayerMove.SPIN, success_probability=0.0) is None
    assert session.get_state().current_player_index == 1


def test_event_bus_unsubscribe():
    bus = EventBus()
    calls = []
    cb = calls.append
    bus.subscribe(TurnEnded, cb)
    bus.publish(TurnEnded(0, 1))
    bus.unsubscribe(TurnEnded, cb)
    bus.unsubscribe(TurnEnded, cb)  # second removal is ignored
    bus.publish(TurnEnded(1, 0))
    assert calls == [TurnEnded(0, 1)]


def test_history_records_accepted_moves_only(session, rng):
    rng.land_on(CASH_100)
    session.make_move(0, PlayerMove.SPIN)
    with pytest.raises(InvalidGuessError):
        session.make_move(0, PlayerMove.GUESS_CONSONANT, guess="A")
    session.make_move(0, PlayerMove.GUESS_CONSONANT, guess="t")
    session.make_move(0, PlayerMove.PASS)

    records = session.history
    assert [(r.player_index, r.move, r.payload, r.result) for r in records] == [
        (0, PlayerMove.SPIN, None, CASH_100),
        (0, PlayerMove.GUESS_CONSONANT, "t", 1),
        (0, PlayerMove.PASS, None, None),
    ]
    assert all(r.round_index == 0 for r in records)
    assert records[1].to_dict() == {
        "round_index": 0,
        "player_index": 0,
        "move": "GUESS_CONSONANT",
        "payload": "t",
        "result": 1,
    }
