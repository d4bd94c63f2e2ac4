from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from game.ruleset import MAX_TURNS


def _annotate_bars(ax, xs, ys, *, fmt="{:d}", dy=4, fontsize=8):
    """
    Annotate bars at (x, y) on ax with their height.

    Args:
        ax: matplotlib Axes
        xs: list of x coordinates
        ys: list of bar heights
        fmt: format string for heights
        dy: y offset in points
        fontsize: font size for annotations
    """

    for x, y in zip(xs, ys):
        ax.annotate(
            fmt.format(int(y)),
            (x, y),
            textcoords="offset points",
            xytext=(0, dy),
            ha="center",
            va="bottom",
            fontsize=fontsize,
        )


def plot_session(session, outdir, filename="session_attempts.png"):
    """
    Save a bar chart of attempts per game for the given Session.

    Args:
        session: Session with at least one recorded game
        outdir: output directory, created if missing
        filename: PNG file name inside outdir

    Returns:
        Path: the written file.
    """
    if len(session) == 0:
        raise ValueError("No games recorded in this session.")

    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    attempts = np.array([r.attempts for r in session.records])
    won = np.array([r.won for r in session.records], dtype=bool)
    x = np.arange(1, len(attempts) + 1)
    colors = np.where(won, "tab:green", "tab:red").tolist()

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(x, attempts, color=colors)
    _annotate_bars(ax, x, attempts)

    summary = session.summary()
    if summary.wins:
        ax.axhline(summary.avg_attempts, linestyle="--", linewidth=1.0, color="gray")

    ax.set_title(
        f"Attempts per Game\n Games won: {summary.wins} of {summary.games}"
    )
    ax.set_xlabel("Game")
    ax.set_ylabel("Attempts")
    ax.set_xticks(x)
    ax.set_ylim(0, MAX_TURNS + 1)
    ax.grid(True, axis="y")
    ax.legend(
        handles=[
            Patch(color="tab:green", label="Won"),
            Patch(color="tab:red", label="Lost"),
        ]
    )

    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out
