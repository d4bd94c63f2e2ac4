import pytest

from game.errors import InvalidGuess
from game.ruleset import MAX_TURNS, NUM_PEGS, Color, MatchKind, Outcome
from state.game_state import GameState

R, G, B, Y, O, P = Color


def lose_turns(game, n):
    for _ in range(n):
        game.submit([P, P, P, P])


def test_new_game_is_unknown():
    game = GameState()
    assert game.outcome is Outcome.UNKNOWN
    assert not game.finished()
    assert game.guesses == ()
    assert game.scores == ()
    assert game.remaining_turns() == MAX_TURNS
    assert len(game.reveal_answer()) == NUM_PEGS


def test_constants():
    assert MAX_TURNS == 10
    assert NUM_PEGS == 4
    assert len(Color) == 6


def test_submitting_the_answer_wins():
    game = GameState()
    score = game.submit(game.reveal_answer())
    assert list(score) == [MatchKind.EXACT] * NUM_PEGS
    assert game.outcome is Outcome.WON
    assert game.finished()
    assert game.is_won()


def test_submit_returns_and_records_score():
    game = GameState(answer=[R, B, G, Y])
    score = game.submit([B, R, G, O])
    assert (score.exact, score.color, score.none) == (1, 2, 1)
    assert game.scores == (score,)
    assert game.guesses == ((B, R, G, O),)
    assert game.outcome is Outcome.UNKNOWN


def test_duplicate_colors_in_guess():
    game = GameState(answer="RRBG")
    score = game.submit("RRRO")
    assert (score.exact, score.color, score.none) == (2, 0, 2)


def test_history_order_and_alignment():
    game = GameState(answer="RGBY")
    guesses = ["OOOO", "RRRR", "YBGR", "RGBP"]
    for g in guesses:
        game.submit(g)
    assert ["".join(c.value for c in g) for g in game.guesses] == guesses
    assert len(game.guesses) == len(game.scores)
    assert [s.exact for s in game.scores] == [0, 1, 0, 3]


def test_history_is_not_aliased():
    game = GameState(answer="RGBY")
    guess = [O, O, O, O]
    game.submit(guess)
    guess[0] = R
    assert game.guesses[0] == (O, O, O, O)


def test_lost_after_max_turns():
    game = GameState(answer="RGBY")
    lose_turns(game, MAX_TURNS - 1)
    assert not game.finished()
    assert game.remaining_turns() == 1
    lose_turns(game, 1)
    assert game.outcome is Outcome.LOST
    assert game.finished()
    assert game.remaining_turns() == 0


def test_win_on_last_turn_is_a_win():
    game = GameState(answer="RGBY")
    lose_turns(game, MAX_TURNS - 1)
    game.submit("RGBY")
    assert game.outcome is Outcome.WON


def test_not_finished_between_turns():
    game = GameState(answer="RGBY")
    for _ in range(MAX_TURNS - 1):
        game.submit("YBGR")
        assert not game.finished()


@pytest.mark.parametrize("bad", ["RGB", "RGBYO", "RGBX", [R, G, B, "Z"], [1, 2, 3, 9], []])
def test_invalid_guess_leaves_state_untouched(bad):
    game = GameState(answer="RGBY")
    game.submit("OOOO")
    with pytest.raises(InvalidGuess):
        game.submit(bad)
    assert len(game.guesses) == 1
    assert len(game.scores) == 1
    assert game.outcome is Outcome.UNKNOWN


def test_score_invariant_over_random_games():
    for _ in range(20):
        game = GameState()
        for g in ("RGBY", "OPRG", "RRRR", "YYOO"):
            score = game.submit(g)
            assert len(score) == NUM_PEGS
            assert score.exact + score.color + score.none == NUM_PEGS


def test_status_checks_are_methods():
    game = GameState(answer="RGBY")
    assert game.is_won() is False
    assert game.finished() is False
    game.submit("RGBY")
    assert game.is_won() is True
