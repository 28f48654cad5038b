from __future__ import annotations

import random

import pytest

from dropfour.ai.heuristic_agent import REJECT, SAFE, THREAT, HeuristicAgent
from dropfour.ai.pick import agent_for, choose_move
from dropfour.ai.random_agent import RandomAgent
from dropfour.ai.tactical_agent import TacticalAgent
from dropfour.core.board import Board

EMPTY = "......."
TIERS = ["easy", "medium", "hard"]


def board(*bottom_rows: str) -> Board:
    return Board.from_rows([EMPTY] * (6 - len(bottom_rows)) + list(bottom_rows))


# X threatens (5,3); O has nothing ready
OPEN_THREE = board("OO.....", "XXX....")

# Only column 0 is open and whatever the AI (X) drops there, O wins on top.
ONLY_LOSING = Board.from_rows([
    ".OOOXOX",
    ".OXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
])


def test_agent_for_builds_each_tier():
    assert isinstance(agent_for("easy"), RandomAgent)
    assert isinstance(agent_for("medium"), TacticalAgent)
    assert isinstance(agent_for("hard"), HeuristicAgent)
    with pytest.raises(ValueError):
        agent_for("impossible")  # type: ignore[arg-type]


@pytest.mark.parametrize("tier", TIERS)
def test_full_board_has_no_move(tier, draw_board):
    assert choose_move(draw_board, "O", "X", tier) is None


@pytest.mark.parametrize("tier", TIERS)
def test_only_playable_column_is_returned(tier):
    b = Board.from_rows([
        "XOXO.OX",
        "XOXOXOX",
        "OXOXOXO",
        "OXOXOXO",
        "XOXOXOX",
        "XOXOXOX",
    ])
    assert choose_move(b, "O", "X", tier, random.Random(3)) == 4


@pytest.mark.parametrize("seed", range(5))
def test_easy_is_uniform_choice_over_playable(seed):
    b = board("...X...")
    expected = random.Random(seed).choice(b.valid_moves())
    assert choose_move(b, "O", "X", "easy", random.Random(seed)) == expected


@pytest.mark.parametrize("tier", ["medium", "hard"])
@pytest.mark.parametrize("seed", range(5))
def test_medium_and_hard_block_open_three(tier, seed):
    assert choose_move(OPEN_THREE, "O", "X", tier, random.Random(seed)) == 3


@pytest.mark.parametrize("tier", ["medium", "hard"])
def test_win_beats_block(tier):
    # O wins in column 6 (vertical); X would win in column 3
    b = board("......O", "OO....O", "XXX...O")
    assert choose_move(b, "O", "X", tier) == 6


@pytest.mark.parametrize("tier", ["medium", "hard"])
def test_first_winning_column_in_scan_order(tier):
    b = board(".OOO...", "XXOXO..")
    # O can finish row 4 at column 0 or 4
    assert choose_move(b, "O", "X", tier) == 0


def test_medium_falls_back_to_random():
    b = board("...X...")
    agent = TacticalAgent(rng=random.Random(7))
    m = agent.choose_move(b, "O", "X")
    assert m == random.Random(7).choice(b.valid_moves())
    assert agent.last_info["note"] == "random"


def test_hard_prefers_centre_on_empty_board(empty_board):
    agent = HeuristicAgent()
    assert agent.choose_move(empty_board, "X", "O") == 3
    assert agent.last_info["note"] == "prefer"


def test_hard_avoids_handing_over_a_win():
    # dropping in column 3 lets X complete row 4 on top of it
    b = board("XXX....", "OXO.X..")
    agent = HeuristicAgent()
    assert agent.favourability(b, 3, "O", "X") == REJECT
    assert agent.favourability(b, 2, "O", "X") == SAFE
    assert agent.choose_move(b, "O", "X") == 2


def test_hard_takes_double_threat_over_centre():
    b = board("..XX...", "..OO...")
    agent = HeuristicAgent()
    assert agent.favourability(b, 3, "O", "X") == SAFE
    assert agent.favourability(b, 4, "O", "X") == THREAT
    assert agent.choose_move(b, "O", "X") == 4
    assert agent.last_info["note"] == "threat"


def test_hard_falls_back_when_every_column_loses():
    agent = HeuristicAgent(rng=random.Random(0))
    assert agent.favourability(ONLY_LOSING, 0, "X", "O") == REJECT
    assert agent.choose_move(ONLY_LOSING, "X", "O") == 0
    assert agent.last_info["note"] == "random"


def test_hard_is_deterministic_without_random_fallback():
    b = board("..XX...", "..OO...")
    picks = {choose_move(b, "O", "X", "hard", random.Random(s)) for s in range(10)}
    assert picks == {4}
