# state/game_state.py
import logging

from game.guess import Guess
from game.ruleset import DEFAULT_RULES, Outcome
from game.secret_code import Code

logger = logging.getLogger(__name__)


class GameState:
    """
    A single Mastermind match: the hidden answer, the guess history, the
    score history and the outcome.

    The only way to change a GameState is ``submit``. Callers must stop
    submitting once ``finished()`` is true; the state does not refuse
    further guesses itself.
    """

    def __init__(self, rules=None, answer=None):
        """
        Args:
            rules (dict, optional): Ruleset, defaults to DEFAULT_RULES.
            answer (Iterable, optional): Fixed answer instead of a random one.
        """
        self.rules = rules or DEFAULT_RULES
        self.max_turns = self.rules["max_attempts"]
        self._answer = Code(answer, rules=self.rules)
        self._guesses = []
        self._scores = []
        self._outcome = Outcome.UNKNOWN
        logger.debug("New game with answer %s", self._answer.as_string())

    @property
    def guesses(self):
        """Submitted guesses in order, as tuples of Colors."""
        return tuple(self._guesses)

    @property
    def scores(self):
        """Scores index-aligned with ``guesses``."""
        return tuple(self._scores)

    @property
    def outcome(self):
        return self._outcome

    def submit(self, guess):
        """
        Score a guess, record it and update the outcome.

        Args:
            guess (Iterable | str): P pegs, each a Color, a color letter or
            a digit alias.

        Returns:
            Score: The feedback for this guess.

        Raises:
            InvalidGuess: If the guess is malformed. Nothing is recorded.
        """
        checked = Guess(guess, rules=self.rules)
        score = self._answer.compare_with(checked)

        self._guesses.append(checked.get_guess())
        self._scores.append(score)
        logger.debug(
            "Turn %d: %s -> %r", len(self._guesses), checked.as_string(), score
        )

        if score.is_win():
            self._outcome = Outcome.WON
        elif len(self._guesses) == self.max_turns:
            self._outcome = Outcome.LOST

        if self._outcome is not Outcome.UNKNOWN:
            logger.info(
                "Game %s after %d turns", self._outcome.value, len(self._guesses)
            )
        return score

    def finished(self):
        """Check if the game is over (won or all turns used)."""
        return self._outcome in (Outcome.WON, Outcome.LOST)

    def is_won(self):
        """Check if the last guess cracked the code."""
        return self._outcome is Outcome.WON

    def remaining_turns(self):
        """Return how many guesses are left."""
        return max(0, self.max_turns - len(self._guesses))

    def reveal_answer(self):
        """Return the answer (used at the end of the game)."""
        return self._answer.sequence

    def __repr__(self):
        return (
            f"GameState(turns={len(self._guesses)}/{self.max_turns}, "
            f"outcome={self._outcome.value})"
        )
