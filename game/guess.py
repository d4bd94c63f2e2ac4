import re

from .errors import InvalidGuess
from .ruleset import DEFAULT_RULES, DIGIT_ALIASES, Color


def to_color(value) -> Color:
    """
    Convert a single peg value to a Color.

    Accepts Color members, their letters (any case) and the digit
    aliases 1-6, either as str or int.

    Raises:
        InvalidGuess: If the value does not name one of the colors.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        key = str(value)
    elif isinstance(value, str):
        key = value.strip().upper()
    else:
        key = None

    if key in DIGIT_ALIASES:
        return DIGIT_ALIASES[key]
    try:
        return Color(key)
    except ValueError:
        allowed = ", ".join(c.value for c in Color)
        raise InvalidGuess(
            f"Invalid color '{value}'. Allowed: {allowed}."
        ) from None


class Guess:
    """
        Represents a single validated peg sequence (a guess or the answer).
    Attributes:
        sequence (tuple[Color, ...]): The guessed sequence of colors.
        rules (dict): The ruleset for validation."""

    def __init__(self, sequence, rules=None):
        """
        Initialize a Guess instance.
        Args:
            sequence (Iterable | str): The guessed sequence. Strings are read
            one character per peg, spaces ignored.
            rules (dict, optional): The ruleset for validation. Defaults to DEFAULT_RULES.
        Raises:
            InvalidGuess: On wrong length or an unknown color.
        """
        self.rules = rules or DEFAULT_RULES

        # --- Input normalization ---
        if isinstance(sequence, str):
            raw = list(sequence.replace(" ", ""))
        elif sequence is None:
            raw = []
        else:
            raw = list(sequence)

        # --- Validation ---
        if len(raw) != self.rules["code_length"]:
            raise InvalidGuess(
                f"Code length must be {self.rules['code_length']}, "
                f"but got {len(raw)}."
            )
        self.sequence = tuple(to_color(c) for c in raw)

    def get_guess(self):
        """
        Return the stored guess.

        Returns:
            tuple[Color, ...]: The guess sequence."""
        return self.sequence

    def as_string(self):
        """
        Return a string representation of the guess (e.g. 'RGBY').
        Returns:
            str: The guess as a string."""
        return "".join(c.value for c in self.sequence)

    def __len__(self):
        return len(self.sequence)

    def __iter__(self):
        return iter(self.sequence)

    def __getitem__(self, index):
        return self.sequence[index]

    def __eq__(self, other):
        if isinstance(other, Guess):
            return self.sequence == other.sequence
        if isinstance(other, (list, tuple)):
            return list(self.sequence) == list(other)
        return NotImplemented

    def __hash__(self):
        return hash(self.sequence)

    def __repr__(self):
        return f"Guess({self.as_string()!r})"

    def __str__(self):
        return self.as_string()


def parse_guess(raw: str, rules=None) -> tuple:
    """
    Parse a line of player input into a tuple of Colors.

    Whitespace and commas are ignored, so "RGBY", "r g b y", "1,2,3,4"
    and "1 2 3 4" are all accepted.

    Raises:
        InvalidGuess: If the cleaned input is not a valid guess.
    """
    cleaned = re.sub(r"[\s,]+", "", raw or "")
    return Guess(cleaned, rules=rules).get_guess()
