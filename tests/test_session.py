import math

import pytest

from game.ruleset import MAX_TURNS
from state.game_state import GameState
from state.session import Session


def won_game(turns):
    game = GameState(answer="RGBY")
    for _ in range(turns - 1):
        game.submit("OOOO")
    game.submit("RGBY")
    return game


def lost_game():
    game = GameState(answer="RGBY")
    for _ in range(MAX_TURNS):
        game.submit("OOOO")
    return game


def test_unfinished_game_cannot_be_recorded():
    session = Session()
    with pytest.raises(ValueError):
        session.record(GameState())
    assert len(session) == 0


def test_summary_of_mixed_session():
    session = Session()
    session.record(won_game(2), 1.0)
    session.record(won_game(6), 3.0)
    session.record(lost_game(), 5.0)

    summary = session.summary()
    assert summary.games == 3
    assert summary.wins == 2
    assert summary.losses == 1
    assert summary.avg_attempts == pytest.approx(4.0)
    assert summary.min_attempts == 2
    assert summary.max_attempts == 6
    assert summary.avg_time_s == pytest.approx(3.0)
    assert summary.as_lines()[0] == "Games played: 3 (won 2, lost 1)"


def test_summary_without_wins_is_nan():
    session = Session()
    session.record(lost_game())
    summary = session.summary()
    assert summary.wins == 0
    assert math.isnan(summary.avg_attempts)
    assert len(summary.as_lines()) == 2


def test_empty_session():
    summary = Session().summary()
    assert summary.games == 0
    assert math.isnan(summary.avg_time_s)
    assert summary.as_lines() == ["Games played: 0 (won 0, lost 0)"]


def test_times_are_kept_at_full_precision():
    session = Session()
    session.record(won_game(3), 1234.567)
    assert session.summary().avg_time_s == 1234.567
