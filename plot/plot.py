import argparse
from glob import glob
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from game.board import Board
from game.errors import StateFileError


def _annotate_points(ax, xs, ys, *, fmt="{:d}", dy=6, fontsize=8):
    """
    Annotate bars (x, y) on ax with their y values.

    Args:
        ax: matplotlib Axes
        xs: list of x coordinates
        ys: list of y coordinates
        fmt: format string for y values
        dy: y offset in points
        fontsize: font size for annotations
    """
    for x, y in zip(xs, ys):
        if not y:
            continue
        ax.annotate(
            fmt.format(int(y)),
            (x, y),
            textcoords="offset points",
            xytext=(0, dy),
            ha="center",
            va="center",
            fontsize=fontsize,
        )


def load_games(patterns):
    """
    Load finished games from saved game files.

    Args:
        patterns (list[str]): File paths or glob patterns.

    Returns:
        list[GameState]: One snapshot per finished game. Every file is
        replayed, so unfinished games, unreadable files and records that
        do not replay cleanly are skipped with a message.
    """
    paths = []
    for pattern in patterns:
        matched = sorted(glob(pattern))
        paths.extend(matched if matched else [pattern])

    games = []
    for p in paths:
        try:
            state = Board.from_file(p).get_game_state()
        except (OSError, StateFileError) as e:
            print(f"[skip] {p}: {e}")
            continue
        if not state.game_over:
            print(f"[skip] {p}: game not finished.")
            continue
        games.append(state)
    return games


def compute_game_stats(games: list):
    """
    Returns a dict with:
      n_games, n_won (int)
      win_rate (float, np.nan if no games)
      avg/min/max_attempts (float, np.nan if no won games), won games only
      histogram (dict attempts -> number of won games)
    """
    won = np.array([g.game_won for g in games], dtype=bool)
    attempts = np.array([len(g.attempts) for g in games], dtype=np.int64)

    won_attempts = attempts[won]
    n_games = int(won.size)
    n_won = int(won_attempts.size)

    if won_attempts.size > 0:
        counts = np.bincount(won_attempts)
        histogram = {int(k): int(v) for k, v in enumerate(counts) if v}
    else:
        histogram = {}

    return {
        "n_games": n_games,
        "n_won": n_won,
        "win_rate": float(n_won / n_games) if n_games else np.nan,
        "avg_attempts": float(np.mean(won_attempts)) if n_won else np.nan,
        "min_attempts": float(np.min(won_attempts)) if n_won else np.nan,
        "max_attempts": float(np.max(won_attempts)) if n_won else np.nan,
        "histogram": histogram,
    }


def plot_attempt_histogram(stats: dict, outdir, max_attempts=None):
    """
    Write a bar chart of attempts needed per won game.

    Returns:
        Path: The written PNG file.
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    histogram = stats["histogram"]
    top = max([max_attempts or 0, *histogram.keys()]) or 1
    xs = list(range(1, top + 1))
    ys = [histogram.get(x, 0) for x in xs]

    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.bar(xs, ys, color="tab:blue")
    _annotate_points(ax, xs, ys)
    ax.set_xticks(xs)
    ax.set_xlabel("Attempts")
    ax.set_ylabel("Won games")
    ax.set_title(
        f"Attempts to win ({stats['n_won']} of {stats['n_games']} games won)"
    )
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()

    out = outdir / "attempts_histogram.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def print_stats(stats: dict):
    print(f"Games: {stats['n_games']}, won: {stats['n_won']}")
    if stats["n_games"]:
        print(f"Win rate: {stats['win_rate']:.2%}")
    if stats["n_won"]:
        print(
            f"Attempts (won games): avg {stats['avg_attempts']:.2f}, "
            f"min {stats['min_attempts']:.0f}, max {stats['max_attempts']:.0f}"
        )


def main(argv=None):
    ap = argparse.ArgumentParser(description="Statistics over saved games")
    ap.add_argument("files", nargs="+", help="Saved game files or glob patterns")
    ap.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    args = ap.parse_args(argv)

    games = load_games(args.files)
    if not games:
        print("No finished games found.")
        return 1

    stats = compute_game_stats(games)
    print_stats(stats)
    out = plot_attempt_histogram(
        stats, args.outdir, max_attempts=max(g.config.max_attempts for g in games)
    )
    print(f"Histogram written to {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
