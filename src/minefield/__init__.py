"""
Minesweeper model module.

Provides the hidden mine layout, the player-visible reveal state, and a
gymnasium environment that drives them.
"""
from .config import LayoutConfig
from .cell import (
    CellState,
    CellStatus,
    COVERED,
    MINE_GUESS,
    QUESTION,
    MINE,
    INCORRECT_GUESS,
    EXPLODED_MINE,
)
from .mine_layout import MineLayout
from .reveal_state import RevealState, GameState
from .environment import MinesweeperEnv

__all__ = [
    "LayoutConfig",
    "CellState",
    "CellStatus",
    "COVERED",
    "MINE_GUESS",
    "QUESTION",
    "MINE",
    "INCORRECT_GUESS",
    "EXPLODED_MINE",
    "MineLayout",
    "RevealState",
    "GameState",
    "MinesweeperEnv",
]
