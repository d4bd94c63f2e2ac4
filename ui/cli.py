# # Command-line interface (text-based play)
import logging
import time

from game.errors import InvalidGuess
from game.guess import parse_guess
from game.ruleset import DEFAULT_RULES, DIGIT_ALIASES
from state.game_state import GameState
from state.session import Session
from ui.presenter import Presenter

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("QUIT", "EXIT")
PLAY_AGAIN = ("1", "Y", "YES")


def _read(prompt):
    """input() that maps Ctrl-D / Ctrl-C to a quit command."""
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return "quit"


def play_game(presenter, rules=None):
    """
    Run one match until it is won, lost or the player quits.

    Returns:
        tuple[GameState, bool]: The state and whether the player quit.
    """
    game = GameState(rules=rules)
    print(presenter.render(game), end="")

    while not game.finished():
        user_input = _read("Please enter your guess: ").strip()

        # handle special commands
        if user_input.upper() in QUIT_COMMANDS:
            print("Exiting game.")
            return game, True

        try:
            guess = parse_guess(user_input, rules=rules)
        except InvalidGuess as e:
            logger.debug("Rejected input %r: %s", user_input, e)
            print(f"That wasn't a valid guess! {e}")
            continue

        game.submit(guess)
        print(presenter.render(game), end="")

    answer = " ".join(c.value for c in game.reveal_answer())
    print(f"The secret code was: {answer}")
    return game, False


def gameloop(emoji=False, plot_dir=None):
    rules = DEFAULT_RULES
    print("=== Mastermind CLI ===")
    colors = ", ".join(f"{c.value} ({d})" for d, c in DIGIT_ALIASES.items())
    print(
        f"Type {rules['code_length']} colors as letters or digits (e.g. RGBY or 1234).\n"
        f"Available colors: {colors}. Type 'quit' to exit.\n"
    )

    presenter = Presenter(
        emoji_map=rules["display"]["emoji_map"] if emoji else None
    )
    session = Session()

    while True:
        start_time = time.perf_counter()
        game, quit_requested = play_game(presenter, rules=rules)
        if quit_requested:
            break
        session.record(game, time.perf_counter() - start_time)

        response = _read("Do you want to play again? ").strip().upper()
        if response not in PLAY_AGAIN:
            break

    if len(session):
        print()
        for line in session.summary().as_lines():
            print(line)
        if plot_dir is not None:
            # imported lazily so plain play never loads matplotlib
            from plot.plot import plot_session

            out = plot_session(session, plot_dir)
            print(f"Saved session chart to {out}")

    print("Thanks for playing Mastermind!")
    return session
