# Configuration: colors, code length, turn limit, feedback variant, etc.
from enum import Enum


# If they haven't guessed after 10 turns, they lose
MAX_TURNS = 10

# Number of pegs in the answer and in every guess
NUM_PEGS = 4


class Color(str, Enum):
    """The six peg colors. Only identity matters for scoring."""

    RED = "R"
    GREEN = "G"
    BLUE = "B"
    YELLOW = "Y"
    ORANGE = "O"
    PURPLE = "P"

    def __str__(self):
        return self.value


class MatchKind(Enum):
    """Outcome of comparing a single guess peg against the answer."""

    EXACT = "exact"
    COLOR = "color"
    NONE = "none"


class Outcome(Enum):
    UNKNOWN = "unknown"
    WON = "won"
    LOST = "lost"


# Digit aliases (1-6) accepted by the text input, in color order
DIGIT_ALIASES = {str(i): c for i, c in enumerate(Color, start=1)}


DEFAULT_RULES = {
    "code_length": NUM_PEGS,  # Number of pegs in the code
    "max_attempts": MAX_TURNS,  # Number of guesses per game
    "feedback": {
        # "remaining": color matches only count answer pegs not already
        # matched exactly. "full_answer": count against the whole answer.
        "color_pool": "remaining",
    },
    "colors": [c.value for c in Color],  # Red, Green, Blue, Yellow, Orange, Purple
    "display": {
        "emoji_map": {  # Optional, for CLI rendering
            "R": "🔴",
            "G": "🟢",
            "B": "🔵",
            "Y": "🟡",
            "O": "🟠",
            "P": "🟣",
        }
    },
}

COLOR_POOLS = ("remaining", "full_answer")
