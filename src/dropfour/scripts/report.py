from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd


SUMMARY_COLS = [
    "tier",
    "games", "wins", "draws", "losses",
    "win_rate",
    "wins_as_x", "wins_as_o",
    "avg_moves",
]


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def summarize(games: pd.DataFrame) -> pd.DataFrame:
    """
    Per-tier record from a tournament frame (one row per game, columns
    tier_x / tier_o / winner / moves). Mirror matches count once for each
    side. Sorted by win rate, best first.
    """
    _require_cols(games, ["tier_x", "tier_o", "winner", "moves"])
    if games.empty:
        return pd.DataFrame(columns=SUMMARY_COLS)

    as_x = pd.DataFrame({
        "tier": games["tier_x"],
        "side": "X",
        "win": games["winner"] == "X",
        "loss": games["winner"] == "O",
        "draw": games["winner"] == "draw",
        "moves": games["moves"],
    })
    as_o = pd.DataFrame({
        "tier": games["tier_o"],
        "side": "O",
        "win": games["winner"] == "O",
        "loss": games["winner"] == "X",
        "draw": games["winner"] == "draw",
        "moves": games["moves"],
    })
    seats = pd.concat([as_x, as_o], ignore_index=True)

    grouped = seats.groupby("tier", sort=False)
    out = pd.DataFrame({
        "games": grouped.size(),
        "wins": grouped["win"].sum(),
        "draws": grouped["draw"].sum(),
        "losses": grouped["loss"].sum(),
        "avg_moves": grouped["moves"].mean().round(1),
    })
    out["win_rate"] = (out["wins"] / out["games"]).round(3)

    by_side = seats[seats["win"]].groupby(["tier", "side"]).size().unstack(fill_value=0)
    out["wins_as_x"] = by_side.get("X", pd.Series(dtype=int)).reindex(out.index, fill_value=0)
    out["wins_as_o"] = by_side.get("O", pd.Series(dtype=int)).reindex(out.index, fill_value=0)

    out = out.reset_index().rename(columns={"index": "tier"})
    for col in ["games", "wins", "draws", "losses", "wins_as_x", "wins_as_o"]:
        out[col] = out[col].astype(int)

    return out[SUMMARY_COLS].sort_values("win_rate", ascending=False, kind="stable").reset_index(drop=True)


def plot_win_rates(summary: pd.DataFrame, *, show: bool, outpath: Optional[Path] = None) -> None:
    import matplotlib.pyplot as plt

    _require_cols(summary, ["tier", "win_rate"])

    fig = plt.figure(figsize=(6, 4))
    plt.bar(summary["tier"].astype(str), summary["win_rate"].astype(float))
    plt.title("Win rate by AI tier")
    plt.xlabel("tier")
    plt.ylabel("win rate")
    plt.ylim(0, 1)

    if show:
        plt.show()
    elif outpath is not None:
        fig.savefig(outpath, dpi=200, bbox_inches="tight")
    plt.close(fig)
