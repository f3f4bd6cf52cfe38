"""
Reveal state module for Minesweeper.

Implements the player-visible overlay of a mine layout: guess cycling,
uncovering with flood reveal, and end-of-round detection.
"""
import logging
from enum import Enum, auto
from typing import List, Tuple

import numpy as np

from .cell import (
    COVERED,
    EXPLODED_MINE,
    INCORRECT_GUESS,
    MINE,
    MINE_GUESS,
    CellState,
    CellStatus,
)
from .mine_layout import MineLayout


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a round."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Reveal State Class
# ============================================================================

class RevealState:
    """
    What the player can see of a MineLayout.

    Keeps one CellStatus per location of the layout it is bound to.
    The layout is only read, never changed, so the same layout can be
    shared with whoever set up the round.
    """

    def __init__(self, mine_field: MineLayout) -> None:
        """
        Create an overlay with every cell covered.

        Args:
            mine_field: Layout this overlay covers.
        """
        self._mine_field = mine_field
        self._status: List[List[CellStatus]] = []
        self.reset_game_display()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def reset_game_display(self) -> None:
        """Cover every cell again, keeping the same layout."""
        self._status = [
            [COVERED for _ in range(self._mine_field.num_cols())]
            for _ in range(self._mine_field.num_rows())
        ]

    def _all_positions(self) -> List[Tuple[int, int]]:
        return [
            (row, col)
            for row in range(self._mine_field.num_rows())
            for col in range(self._mine_field.num_cols())
        ]

    def _check_position(self, row: int, col: int) -> None:
        if not self._mine_field.in_range(row, col):
            raise ValueError(f"Position ({row}, {col}) out of range")

    # ========================================================================
    # Player Actions (Mid-level)
    # ========================================================================

    def cycle_guess(self, row: int, col: int) -> None:
        """
        Move a covered cell to the next step of the guess cycle.

        COVERED becomes MINE_GUESS, MINE_GUESS becomes QUESTION and
        QUESTION becomes COVERED again. Uncovered cells are left alone.

        Args:
            row: Row index.
            col: Column index.
        """
        self._check_position(row, col)
        self._status[row][col] = self._status[row][col].cycled()

    def uncover(self, row: int, col: int) -> bool:
        """
        Uncover a cell.

        If the cell holds a mine it explodes. Otherwise the cell is
        revealed and, when it has no adjacent mines, the surrounding
        mine-free region is revealed too, up to and including its
        numbered border. Cells guessed as mines are neither revealed
        nor expanded through.

        Callers should stop uncovering once is_game_over() is true.
        Only one mine ever explodes: uncovering another mine after
        that leaves the display unchanged and still returns False.

        Args:
            row: Row index to uncover.
            col: Column index to uncover.

        Returns:
            False if a mine was uncovered, True otherwise.
        """
        self._check_position(row, col)
        if self._mine_field.has_mine(row, col):
            if not self._has_exploded():
                self._status[row][col] = EXPLODED_MINE
            return False

        revealed = self._flood_reveal(row, col)
        logger.debug("Uncover (%d, %d) revealed %d cells", row, col, revealed)
        return True

    def _flood_reveal(self, row: int, col: int) -> int:
        """
        Reveal the region reachable from a safe cell.

        Each cell is marked revealed before its neighbors are pushed,
        so a cell is never processed twice.

        Returns:
            Number of cells revealed.
        """
        revealed = 0
        pending = [(row, col)]
        while pending:
            row, col = pending.pop()
            if not self._can_expand(row, col):
                continue
            count = self._mine_field.num_adjacent_mines(row, col)
            self._status[row][col] = CellStatus.revealed(count)
            revealed += 1
            if count == 0:
                pending.extend(self._mine_field.neighbors(row, col))
        return revealed

    def _has_exploded(self) -> bool:
        return any(
            self._status[row][col].state == CellState.EXPLODED_MINE
            for row, col in self._all_positions()
        )

    def _can_expand(self, row: int, col: int) -> bool:
        """Check if flood reveal may uncover this cell."""
        if not self._mine_field.in_range(row, col):
            return False
        status = self._status[row][col]
        return status.is_covered and not status.is_flagged

    # ========================================================================
    # End of Round
    # ========================================================================

    def is_game_over(self) -> bool:
        """
        Check whether the round has ended, updating the display if so.

        A round is lost once a mine has exploded: every other mine not
        guessed is shown and wrong guesses are marked. A round is won
        once every safe cell is revealed: every remaining covered cell
        is marked as a mine guess. Calling this again after the round
        ended gives the same answer and leaves the display as it is.

        Returns:
            True if the round is won or lost.
        """
        state = self._evaluate()
        if state == GameState.LOST:
            self._show_loss()
        elif state == GameState.WON:
            self._show_win()
        else:
            return False

        logger.info("Round over: %s", state.name)
        return True

    @property
    def game_state(self) -> GameState:
        """Current verdict of the round, without touching the display."""
        return self._evaluate()

    def _evaluate(self) -> GameState:
        """Scan every cell for an explosion or a full reveal."""
        revealed = 0
        for row, col in self._all_positions():
            status = self._status[row][col]
            if status.state == CellState.EXPLODED_MINE:
                return GameState.LOST
            if status.is_revealed:
                revealed += 1

        field = self._mine_field
        safe_cells = field.num_rows() * field.num_cols() - field.num_mines()
        if revealed == safe_cells:
            return GameState.WON
        return GameState.PLAYING

    def _show_loss(self) -> None:
        """Show unguessed mines and mark wrong guesses."""
        for row, col in self._all_positions():
            status = self._status[row][col]
            if self._mine_field.has_mine(row, col):
                if status.state not in (
                    CellState.MINE_GUESS, CellState.EXPLODED_MINE
                ):
                    self._status[row][col] = MINE
            elif status.is_flagged:
                self._status[row][col] = INCORRECT_GUESS

    def _show_win(self) -> None:
        """Mark every cell still covered as a mine guess."""
        for row, col in self._all_positions():
            if self._status[row][col].state in (
                CellState.COVERED, CellState.QUESTION
            ):
                self._status[row][col] = MINE_GUESS

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def mine_field(self) -> MineLayout:
        """Layout this overlay covers."""
        return self._mine_field

    def get_status(self, row: int, col: int) -> CellStatus:
        """Get the visible status of the cell at (row, col)."""
        self._check_position(row, col)
        return self._status[row][col]

    def is_uncovered(self, row: int, col: int) -> bool:
        """Check if the cell at (row, col) is in any uncovered state."""
        return self.get_status(row, col).is_uncovered

    def num_mines_left(self) -> int:
        """
        Number of mines left to guess.

        This is the layout's mine count minus the number of mine
        guesses, right or wrong, so it goes negative when the player
        has guessed more cells than there are mines.
        """
        guesses = sum(
            1 for row, col in self._all_positions()
            if self._status[row][col].is_flagged
        )
        return self._mine_field.num_mines() - guesses

    def num_revealed(self) -> int:
        """Number of safe cells revealed so far."""
        return sum(
            1 for row, col in self._all_positions()
            if self._status[row][col].is_revealed
        )

    def get_observation(self) -> np.ndarray:
        """
        Get the visible field as a numpy array for ML agent.

        Returns:
            2D int8 array of CellStatus.to_observation() values.
        """
        obs = np.zeros(
            (self._mine_field.num_rows(), self._mine_field.num_cols()),
            dtype=np.int8,
        )
        for row, col in self._all_positions():
            obs[row, col] = self._status[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be uncovered.

        Returns:
            List of (row, col) positions that are covered and not
            guessed as mines.
        """
        return [
            (row, col) for row, col in self._all_positions()
            if self._status[row][col].state in (
                CellState.COVERED, CellState.QUESTION
            )
        ]
