from .ruleset import MatchKind


GLYPHS = {
    MatchKind.EXACT: "#",
    MatchKind.COLOR: "*",
    MatchKind.NONE: ".",
}


class Score(tuple):
    """
    Feedback for one guess: one MatchKind per peg.

    Entries are ordered exact first, then color, then none. The order is a
    display convention; entries do not map back to guess positions.
    """

    def __new__(cls, kinds=()):
        return super().__new__(cls, kinds)

    @classmethod
    def build(cls, exact: int, color: int, none: int) -> "Score":
        return cls(
            [MatchKind.EXACT] * exact
            + [MatchKind.COLOR] * color
            + [MatchKind.NONE] * none
        )

    @property
    def exact(self) -> int:
        return self.count(MatchKind.EXACT)

    @property
    def color(self) -> int:
        return self.count(MatchKind.COLOR)

    @property
    def none(self) -> int:
        return self.count(MatchKind.NONE)

    def is_win(self) -> bool:
        """True when every peg is an exact match."""
        return len(self) > 0 and self.exact == len(self)

    def __repr__(self):
        return f"Score(exact={self.exact}, color={self.color}, none={self.none})"
