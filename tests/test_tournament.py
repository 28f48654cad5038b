from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest
from loguru import logger

from dropfour.ai.heuristic_agent import HeuristicAgent
from dropfour.ai.random_agent import RandomAgent
from dropfour.scripts.report import SUMMARY_COLS, plot_win_rates, summarize
from dropfour.scripts.tournament import main, play_single_game, tournament


def test_single_game_reaches_terminal_state():
    state = play_single_game(HeuristicAgent(), RandomAgent())
    assert state.is_over


def test_tournament_frame_shape():
    games = tournament(["easy", "hard"], games_per_pair=3, seed=1)
    assert list(games.columns) == ["tier_x", "tier_o", "game", "winner", "moves"]
    assert len(games) == 4 * 3
    assert set(games["winner"]) <= {"X", "O", "draw"}
    assert games["moves"].between(7, 42).all()


def test_tournament_is_reproducible():
    a = tournament(["easy", "medium"], games_per_pair=2, seed=9)
    b = tournament(["easy", "medium"], games_per_pair=2, seed=9)
    pd.testing.assert_frame_equal(a, b)


def test_summarize_counts():
    games = pd.DataFrame([
        {"tier_x": "easy", "tier_o": "hard", "winner": "O", "moves": 10},
        {"tier_x": "hard", "tier_o": "easy", "winner": "X", "moves": 12},
        {"tier_x": "easy", "tier_o": "hard", "winner": "draw", "moves": 42},
    ])
    out = summarize(games)
    assert list(out.columns) == SUMMARY_COLS
    assert list(out["tier"]) == ["hard", "easy"]

    hard = out.set_index("tier").loc["hard"]
    assert (hard["games"], hard["wins"], hard["draws"], hard["losses"]) == (3, 2, 1, 0)
    assert (hard["wins_as_x"], hard["wins_as_o"]) == (1, 1)
    assert hard["win_rate"] == pytest.approx(0.667)

    easy = out.set_index("tier").loc["easy"]
    assert (easy["wins"], easy["losses"]) == (0, 2)


def test_summarize_requires_columns():
    with pytest.raises(ValueError):
        summarize(pd.DataFrame({"tier_x": ["easy"]}))


def test_plot_saves_figure(tmp_path):
    games = tournament(["easy", "medium"], games_per_pair=2, seed=3)
    out = tmp_path / "win_rates.png"
    plot_win_rates(summarize(games), show=False, outpath=out)
    assert out.exists()


def test_cli_prints_table(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--games", "1", "--tiers", "easy", "medium"]) == 0
    printed = capsys.readouterr().out
    assert "TOURNAMENT RESULTS" in printed
    assert "win_rate" in printed
    logger.remove()
    logger.disable("dropfour")


def test_cli_log_level_keeps_debug_off_stderr(tmp_path):
    src = Path(__file__).resolve().parents[1] / "src"
    env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [str(src), os.environ.get("PYTHONPATH")])))
    proc = subprocess.run(
        [sys.executable, "-m", "dropfour.scripts.tournament",
         "--games", "1", "--tiers", "easy", "--log-level", "INFO"],
        cwd=tmp_path, env=env, capture_output=True, text=True, timeout=120,
    )
    assert proc.returncode == 0, proc.stderr
    assert "TOURNAMENT RESULTS" in proc.stdout
    assert "easy vs easy: 1 games done" in proc.stderr
    assert "DEBUG" not in proc.stderr
