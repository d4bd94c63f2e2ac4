import logging
import random
from collections import Counter

from .guess import Guess
from .ruleset import COLOR_POOLS, DEFAULT_RULES, Color
from .score import Score

logger = logging.getLogger(__name__)


class Code:
    """
        Represents the secret code for the Mastermind game.
    Attributes:
        sequence (tuple[Color, ...]): The colors of the hidden answer.
        rules (dict): The ruleset the code was built against."""

    def __init__(self, sequence=None, rules=None):
        """
        Initialize a Code instance.

        Args:
            sequence (Iterable or None): The color symbols representing the
            code. When None, a random code is drawn.
            rules (dict or None): Reference to the ruleset (defines length,
            colors, feedback variant).

        Raises:
            InvalidGuess: If a given sequence is not a valid peg sequence.
        """

        self.rules = rules or DEFAULT_RULES
        if sequence is None:
            self.sequence = self.generate_random()
        else:
            self.sequence = Guess(sequence, rules=self.rules).get_guess()

    def generate_random(self):
        """
        Draw every peg independently and uniformly from the color set.
        Repeated colors are allowed.

        Returns:
            tuple[Color, ...]: The new code.
        """

        colors = [Color(c) for c in self.rules["colors"]]
        length = self.rules["code_length"]
        sequence = tuple(random.choices(colors, k=length))
        logger.debug("Generated secret code %s", "".join(c.value for c in sequence))
        return sequence

    def compare_with(self, guess, color_pool=None) -> Score:
        """
        Compare this secret code with a guess and compute its Score.

        Args:
            guess (Guess | Iterable): The guess to score. Anything that is not
            a Guess is validated first.
            color_pool (str | None): "remaining" or "full_answer". Defaults to
            the ruleset's feedback setting.

        Returns:
            Score: exact matches, then color matches, then non-matches.

        Notes:
            Guess pegs counted as exact are removed before the color pass.
            With the "remaining" pool the matching answer pegs are removed
            too, so a color can never be matched more often than the answer
            holds it. "full_answer" counts colors against the whole answer.
        """

        if not isinstance(guess, Guess):
            guess = Guess(guess, rules=self.rules)
        if color_pool is None:
            color_pool = self.rules.get("feedback", {}).get(
                "color_pool", "remaining"
            )
        if color_pool not in COLOR_POOLS:
            raise ValueError(
                f"Unknown color pool '{color_pool}'. "
                f"Allowed: {', '.join(COLOR_POOLS)}."
            )

        exact = 0
        remaining_guess = []
        remaining_code = []

        # Exact pass: consume every peg that matches in place.
        for code_peg, guess_peg in zip(self.sequence, guess.get_guess()):
            if code_peg == guess_peg:
                exact += 1
            else:
                remaining_guess.append(guess_peg)
                remaining_code.append(code_peg)

        # Color pass: each answer peg in the pool can be matched once.
        if color_pool == "full_answer":
            pool = Counter(self.sequence)
        else:
            pool = Counter(remaining_code)
        color = 0
        for guess_peg in remaining_guess:
            if pool[guess_peg] > 0:
                color += 1
                pool[guess_peg] -= 1

        none = len(remaining_guess) - color
        return Score.build(exact, color, none)

    def as_string(self):
        """
        Return a string representation of the code (e.g. 'RGBY').
        Returns:
            str: The code as a string.
        """
        return "".join(c.value for c in self.sequence)

    def __eq__(self, other):
        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, (list, tuple)):
            return list(self.sequence) == list(other)
        return NotImplemented

    def __hash__(self):
        return hash(self.sequence)

    def __str__(self):
        return self.as_string()
