# state/session.py
# In-memory record of the games played during one program run.
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRecord:
    won: bool
    attempts: int
    elapsed_s: float


@dataclass(frozen=True)
class SessionSummary:
    games: int
    wins: int
    losses: int
    avg_attempts: float  # won games only, nan if none
    min_attempts: float
    max_attempts: float
    avg_time_s: float  # all games, nan if none

    def as_lines(self) -> list[str]:
        lines = [f"Games played: {self.games} (won {self.wins}, lost {self.losses})"]
        if self.wins:
            lines.append(
                f"Attempts for won games: avg {self.avg_attempts:.2f}, "
                f"min {self.min_attempts:.0f}, max {self.max_attempts:.0f}"
            )
        if self.games:
            lines.append(f"Average time per game: {self.avg_time_s:.2f} seconds")
        return lines


class Session:
    """Collects finished games; nothing is written to disk."""

    def __init__(self):
        self.records: list[GameRecord] = []

    def record(self, state, elapsed_s: float = 0.0) -> GameRecord:
        """
        Store the result of a finished game.

        Raises:
            ValueError: If the game is still running.
        """
        if not state.finished():
            raise ValueError("Only finished games can be recorded.")
        rec = GameRecord(
            won=state.is_won(),
            attempts=len(state.guesses),
            elapsed_s=float(elapsed_s),
        )
        self.records.append(rec)
        logger.debug("Recorded game %d: %s", len(self.records), rec)
        return rec

    def summary(self) -> SessionSummary:
        won = np.array([r.won for r in self.records], dtype=bool)
        attempts = np.array([r.attempts for r in self.records], dtype=np.float64)
        times = np.array([r.elapsed_s for r in self.records], dtype=np.float64)

        won_attempts = attempts[won]
        if won_attempts.size > 0:
            avg_attempts = float(np.mean(won_attempts))
            min_attempts = float(np.min(won_attempts))
            max_attempts = float(np.max(won_attempts))
        else:
            avg_attempts = min_attempts = max_attempts = np.nan

        n_won = int(won_attempts.size)
        return SessionSummary(
            games=len(self.records),
            wins=n_won,
            losses=len(self.records) - n_won,
            avg_attempts=avg_attempts,
            min_attempts=min_attempts,
            max_attempts=max_attempts,
            avg_time_s=float(np.mean(times)) if times.size > 0 else np.nan,
        )

    def __len__(self):
        return len(self.records)
