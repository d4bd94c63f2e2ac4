# Text rendering of a GameState (for CLI)
from game.ruleset import NUM_PEGS, Outcome
from game.score import GLYPHS

STATUS_LINES = {
    Outcome.WON: "You Won!",
    Outcome.LOST: "You lost :(",
}


class Presenter:
    """
    Turns a GameState into printable lines.

    Only the state's public read accessors are used, so rendering the same
    state twice gives the same text.
    """

    def __init__(self, emoji_map=None):
        # Optional color -> symbol map, e.g. DEFAULT_RULES["display"]["emoji_map"]
        self.emoji_map = emoji_map

    def render_lines(self, state):
        lines = []

        # Empty lines for rounds not played yet
        for _ in range(state.max_turns - len(state.guesses)):
            lines.append(self.empty_line())

        # Played rounds, most recent first
        for guess, score in zip(reversed(state.guesses), reversed(state.scores)):
            lines.append(self.build_line(guess, score))

        status = STATUS_LINES.get(state.outcome)
        if status:
            lines.append(status)
        return lines

    def render(self, state):
        return "\n".join(self.render_lines(state)) + "\n"

    def build_line(self, guess, score):
        pegs = " ".join(self._peg(c) for c in guess)
        marks = " ".join(GLYPHS.get(s, "?") for s in score)
        return f"{pegs}  |  {marks}"

    def empty_line(self):
        return " ".join(["."] * NUM_PEGS) + "  |  " + " ".join(["_"] * NUM_PEGS)

    def _peg(self, color):
        key = getattr(color, "value", color)
        if self.emoji_map:
            return self.emoji_map.get(key, str(key))
        return str(key)


def render(state, emoji_map=None):
    """Render ``state`` with a default Presenter."""
    return Presenter(emoji_map=emoji_map).render(state)
